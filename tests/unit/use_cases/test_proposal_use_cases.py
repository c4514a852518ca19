import pytest

from src.app.use_cases.proposals import (
    ListProposalsUseCase,
    ReviewProposalUseCase,
    SubmitProposalCommand,
    SubmitProposalUseCase,
)
from src.domain.base import utcnow
from src.domain.entities import FilmProposal, ProposalStatus, Role
from src.domain.principal import Principal


def make_proposal(status=ProposalStatus.pending):
    return FilmProposal(
        id=3,
        member_id=4,
        title="Il Sorpasso",
        director="Dino Risi",
        reason="A classic road movie for the summer season",
        status=status,
        created_at=utcnow(),
    )


def stored_proposal(proposal):
    proposal.id = 3
    proposal.created_at = utcnow()
    return proposal


@pytest.mark.asyncio
async def test_submit_starts_pending(mock_uow, make_member):
    mock_uow.members.get_by_id.return_value = make_member(member_id=4)
    mock_uow.proposals.create.side_effect = stored_proposal
    command = SubmitProposalCommand(
        title="Il Sorpasso", director="Dino Risi", reason="Summer classic"
    )

    result = await SubmitProposalUseCase(mock_uow).execute(4, command)

    assert result.is_ok()
    assert result.value.status == ProposalStatus.pending
    assert result.value.member_id == 4
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_admin_lists_all_with_names(mock_uow, make_member):
    mock_uow.proposals.list_all_with_members.return_value = [
        (make_proposal(), make_member(member_id=4))
    ]
    admin = Principal(id=1, username="admin", role=Role.admin)

    result = await ListProposalsUseCase(mock_uow).execute(admin)

    assert [p.member_name for p in result.value] == ["Mario Rossi"]
    mock_uow.proposals.list_by_member.assert_not_awaited()


@pytest.mark.asyncio
async def test_member_lists_own_only(mock_uow):
    mock_uow.proposals.list_by_member.return_value = [make_proposal()]
    member = Principal(id=4, username="mariorossi042", role=Role.member)

    result = await ListProposalsUseCase(mock_uow).execute(member)

    assert len(result.value) == 1
    mock_uow.proposals.list_by_member.assert_awaited_once_with(4)
    mock_uow.proposals.list_all_with_members.assert_not_awaited()


@pytest.mark.asyncio
async def test_review_pending_proposal(mock_uow):
    mock_uow.proposals.get_by_id.return_value = make_proposal()
    mock_uow.proposals.resolve_pending.return_value = make_proposal(
        ProposalStatus.approved
    )

    result = await ReviewProposalUseCase(mock_uow).execute(3, "approved")

    assert result.is_ok()
    assert result.value.status == ProposalStatus.approved
    mock_uow.commit.assert_awaited_once()
    mock_uow.proposals.resolve_pending.assert_awaited_once_with(
        3, ProposalStatus.approved
    )


@pytest.mark.asyncio
async def test_review_is_final(mock_uow):
    mock_uow.proposals.get_by_id.return_value = make_proposal(ProposalStatus.rejected)

    result = await ReviewProposalUseCase(mock_uow).execute(3, "approved")

    assert result.is_err()
    assert result.error.code == "PROPOSAL_ALREADY_REVIEWED"
    mock_uow.proposals.resolve_pending.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["pending", "maybe", ""])
async def test_review_invalid_status(mock_uow, status):
    result = await ReviewProposalUseCase(mock_uow).execute(3, status)

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"
    mock_uow.proposals.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_review_unknown_proposal(mock_uow):
    result = await ReviewProposalUseCase(mock_uow).execute(404, "rejected")

    assert result.is_err()
    assert result.error.code == "PROPOSAL_NOT_FOUND"


@pytest.mark.asyncio
async def test_review_lost_to_concurrent_reviewer(mock_uow):
    """Pending when read, no longer pending when written"""
    mock_uow.proposals.get_by_id.return_value = make_proposal()
    mock_uow.proposals.resolve_pending.return_value = None

    result = await ReviewProposalUseCase(mock_uow).execute(3, "rejected")

    assert result.is_err()
    assert result.error.code == "PROPOSAL_ALREADY_REVIEWED"
    mock_uow.commit.assert_not_awaited()
