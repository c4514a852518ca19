"""
Role-based authorization

Every protected route declares its requirement once, e.g.

    dependencies=[Depends(require(Role.admin))]
    principal: Principal = Depends(require(Role.admin, owner_param="member_id"))

and all requirements are evaluated by check_access.
"""

from typing import Callable, Optional, Sequence

from fastapi import Depends, Request, status

from src.api.error import ClientError
from src.depends import get_current_principal
from src.domain.entities import Role
from src.domain.principal import Principal
from src.libs.result import Error, Result, Return


def check_access(
    principal: Principal,
    roles: Sequence[Role],
    owner_id: Optional[int] = None,
) -> Result[Principal]:
    """
    Decide whether principal may perform an operation.

    Args:
        principal: Verified token principal
        roles: Roles allowed unconditionally
        owner_id: When given, a member whose id equals owner_id is also allowed

    Returns:
        Result with the principal, or Error INSUFFICIENT_ROLE / ACCESS_DENIED
    """
    if principal.role in roles:
        return Return.ok(principal)
    if owner_id is not None:
        if principal.owns(owner_id):
            return Return.ok(principal)
        return Return.err(Error("ACCESS_DENIED", "Access denied"))
    return Return.err(
        Error(
            "INSUFFICIENT_ROLE",
            f"{' or '.join(r.value.capitalize() for r in roles)} access required",
        )
    )


def require(*roles: Role, owner_param: Optional[str] = None) -> Callable:
    """
    Build a dependency enforcing roles, optionally "or owner".

    Args:
        roles: Roles allowed unconditionally
        owner_param: Path parameter holding the owning member id

    Raises:
        ClientError: 403 when the requirement is not met
    """

    async def dependency(
        request: Request, principal: Principal = Depends(get_current_principal)
    ) -> Principal:
        owner_id = None
        if owner_param is not None:
            try:
                owner_id = int(request.path_params[owner_param])
            except (KeyError, ValueError):
                owner_id = None

        result = check_access(principal, roles, owner_id)
        if result.is_err():
            raise ClientError(result.error, status_code=status.HTTP_403_FORBIDDEN)
        return result.value

    return dependency
