from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Admin


class IAdminRepository(ABC):
    """Admin repository interface - application layer"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Admin]:
        """Get admin by username"""
        pass

    @abstractmethod
    async def get_by_id(self, admin_id: int) -> Optional[Admin]:
        """Get admin by ID"""
        pass

    @abstractmethod
    async def create(self, admin: Admin) -> Admin:
        """Create a new admin"""
        pass
