from .proposal_models import Proposal

__all__ = ["Proposal"]
