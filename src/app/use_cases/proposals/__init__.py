"""
Proposal Use Cases

Member film suggestions and their review.
"""

from .proposal_use_cases import (
    ListProposalsUseCase,
    ReviewProposalUseCase,
    SubmitProposalUseCase,
)
from .dtos import ProposalResponse, SubmitProposalCommand

__all__ = [
    # Use Cases
    "SubmitProposalUseCase",
    "ListProposalsUseCase",
    "ReviewProposalUseCase",
    # DTOs
    "SubmitProposalCommand",
    "ProposalResponse",
]
