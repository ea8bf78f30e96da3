from .proposal_status_enum import ProposalStatus

__all__ = ["ProposalStatus"]
