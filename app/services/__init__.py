"""Services for the proposal generator."""

from .proposal_generator import ProposalGenerator, get_proposal_generator

__all__ = [
    "ProposalGenerator",
    "get_proposal_generator",
]
