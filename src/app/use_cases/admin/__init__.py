"""Admin use cases for system administration operations."""

from .ensure_default_admin_use_case import (
    EnsureDefaultAdminResponse,
    EnsureDefaultAdminUseCase,
)

__all__ = [
    "EnsureDefaultAdminUseCase",
    "EnsureDefaultAdminResponse",
]
