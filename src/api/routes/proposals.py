from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import raise_for_error
from src.api.utils.authorization import require
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.proposals import (
    ListProposalsUseCase,
    ProposalResponse,
    ReviewProposalUseCase,
    SubmitProposalCommand,
    SubmitProposalUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.entities import Role
from src.domain.principal import Principal

router = APIRouter(prefix="/proposals", tags=["Proposals"])


class SubmitProposalRequest(BaseModel):
    """Film proposal HTTP request payload"""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    director: str = Field(..., min_length=1, max_length=255)
    reason: str = Field(..., min_length=1, description="Why the club should screen it")


class ReviewProposalRequest(BaseModel):
    """Proposal review payload"""

    status: str = Field(..., description="approved or rejected")


@router.post("", status_code=status.HTTP_200_OK, response_model=ProposalResponse)
async def submit_proposal(
    request: SubmitProposalRequest,
    principal: Principal = Depends(require(Role.member)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit Proposal (members only)

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
    """
    command = SubmitProposalCommand(**request.model_dump())
    result = await SubmitProposalUseCase(uow).execute(principal.id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ProposalResponse])
async def list_proposals(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """All proposals for admins, own proposals for members; newest first"""
    result = await ListProposalsUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{proposal_id}",
    status_code=status.HTTP_200_OK,
    response_model=ProposalResponse,
    dependencies=[Depends(require(Role.admin))],
)
async def review_proposal(
    proposal_id: int,
    request: ReviewProposalRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Review Proposal (admins only)

    Raises:
        - 400 Bad Request: INVALID_STATUS
        - 404 Not Found: PROPOSAL_NOT_FOUND
        - 409 Conflict: PROPOSAL_ALREADY_REVIEWED
    """
    result = await ReviewProposalUseCase(uow).execute(proposal_id, request.status)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
