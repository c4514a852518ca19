from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import ConfigDict, EmailStr, Field, field_validator

from src.api.error import raise_for_error
from src.api.utils.authorization import require
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import (
    DeleteMemberUseCase,
    GetMemberUseCase,
    ListExpiringMembersUseCase,
    ListMembersUseCase,
    MemberResponse,
    MessageResponse,
    RegisterMemberCommand,
    RegisterMemberResponse,
    RegisterMemberUseCase,
    RenewMembershipResponse,
    RenewMembershipUseCase,
    ResetPasswordResponse,
    ResetPasswordUseCase,
    UpdateMemberCommand,
    UpdateMemberUseCase,
)
from src.depends import get_unit_of_work
from src.domain.base import CamelModel
from src.domain.entities import Role

router = APIRouter(
    prefix="/members", tags=["Members"], dependencies=[Depends(require(Role.admin))]
)

TAX_CODE_PATTERN = r"^[A-Z0-9]{16}$"


class MemberProfileRequest(CamelModel):
    """
    Register member HTTP request payload

    Validates incoming HTTP request before converting to RegisterMemberCommand.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    birth_date: date
    tax_code: str = Field(..., pattern=TAX_CODE_PATTERN, description="16-char tax code")
    email: EmailStr

    @field_validator("tax_code", mode="before")
    @classmethod
    def normalize_tax_code(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


class MemberUpdateRequest(CamelModel):
    """Partial profile update payload"""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    birth_date: Optional[date] = None
    tax_code: Optional[str] = Field(None, pattern=TAX_CODE_PATTERN)
    email: Optional[EmailStr] = None

    @field_validator("tax_code", mode="before")
    @classmethod
    def normalize_tax_code(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


@router.post("", status_code=status.HTTP_200_OK, response_model=RegisterMemberResponse)
async def register_member(
    request: MemberProfileRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Register Member

    Creates the member with generated username, password, membership code,
    QR card and a one-year expiry. The cleartext password (plainPassword)
    is only ever returned here.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, DUPLICATE_USERNAME,
          DUPLICATE_TAX_CODE, DUPLICATE_MEMBERSHIP_CODE, DUPLICATE_ENTRY
        - 401 / 403: Not authenticated / not an admin
        - 500 Internal Server Error: Server error
    """
    command = RegisterMemberCommand(
        first_name=request.first_name,
        last_name=request.last_name,
        birth_date=request.birth_date,
        tax_code=request.tax_code,
        email=request.email,
    )

    use_case = RegisterMemberUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[MemberResponse])
async def list_members(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All members, newest first"""
    result = await ListMembersUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/expiring", status_code=status.HTTP_200_OK, response_model=List[MemberResponse]
)
async def list_expiring_members(
    days: Optional[int] = Query(None, ge=0, description="Look-ahead window in days"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Members whose card expires between today and today + days"""
    result = await ListExpiringMembersUseCase(uow).execute(days)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{member_id}", status_code=status.HTTP_200_OK, response_model=MemberResponse
)
async def get_member(member_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    result = await GetMemberUseCase(uow).execute(member_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{member_id}", status_code=status.HTTP_200_OK, response_model=MemberResponse
)
async def update_member(
    member_id: int,
    request: MemberUpdateRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: VALIDATION_ERROR, DUPLICATE_TAX_CODE
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    command = UpdateMemberCommand(**request.model_dump(exclude_none=True))
    result = await UpdateMemberUseCase(uow).execute(member_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{member_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def delete_member(member_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Deletes the member with its attendance and proposals.

    Raises:
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    result = await DeleteMemberUseCase(uow).execute(member_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{member_id}/renew",
    status_code=status.HTTP_200_OK,
    response_model=RenewMembershipResponse,
)
async def renew_membership(
    member_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Renew Membership

    Sets expiry to one year from today, whatever the previous expiry.

    Raises:
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    result = await RenewMembershipUseCase(uow).execute(member_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{member_id}/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password(member_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Reset Member Password

    Returns the new cleartext password once (newPassword).

    Raises:
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    result = await ResetPasswordUseCase(uow).execute(member_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
