from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoadProfileUseCase,
    LoginResponse,
    LoginUseCase,
    PrincipalInfo,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    username: str = Field(..., min_length=1, description="Admin or member username")
    password: str = Field(..., min_length=1, description="Password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Login

    Authenticates an admin or a member and returns a 24-hour access token.

    Raises:
        - 401 Unauthorized: Invalid credentials (same answer for unknown
          username and wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.username.strip(), request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=PrincipalInfo)
async def get_me(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current principal; members also get their membership card.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token, or account gone
    """
    use_case = LoadProfileUseCase(uow)
    result = await use_case.execute(principal)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
