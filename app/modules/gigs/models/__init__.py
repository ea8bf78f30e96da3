from .gig_models import Gig

__all__ = ["Gig"]
