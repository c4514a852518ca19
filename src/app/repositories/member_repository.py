from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.domain.entities import Member


class IMemberRepository(ABC):
    """Member repository interface - application layer

    create/update raise UniqueViolation naming the constraint that fired:
    uq_members_username, uq_members_tax_code or uq_members_membership_code.
    """

    @abstractmethod
    async def get_by_id(self, member_id: int) -> Optional[Member]:
        """Get member by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Member]:
        """Get member by login username"""
        pass

    @abstractmethod
    async def get_by_membership_code(self, code: str) -> Optional[Member]:
        """Get member by membership code (case-sensitive exact match)"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Member]:
        """List all members, newest first"""
        pass

    @abstractmethod
    async def list_expiring_between(self, start: date, end: date) -> List[Member]:
        """List members whose expiry date lies in [start, end], soonest first"""
        pass

    @abstractmethod
    async def create(self, member: Member) -> Member:
        """Create a new member"""
        pass

    @abstractmethod
    async def update(self, member: Member) -> Member:
        """Update existing member"""
        pass

    @abstractmethod
    async def delete(self, member: Member) -> None:
        """Delete member with its attendance and proposals"""
        pass
