from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.domain.entities import Film


class IFilmRepository(ABC):
    """Film repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, film_id: int) -> Optional[Film]:
        """Get film by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Film]:
        """List all films by scheduled date ascending"""
        pass

    @abstractmethod
    async def list_upcoming(self, now: datetime) -> List[Film]:
        """List films scheduled at or after now, soonest first"""
        pass

    @abstractmethod
    async def list_past(self, now: datetime) -> List[Film]:
        """List films scheduled before now, most recent first"""
        pass

    @abstractmethod
    async def create(self, film: Film) -> Film:
        """Create a new film"""
        pass

    @abstractmethod
    async def update(self, film: Film) -> Film:
        """Update existing film"""
        pass

    @abstractmethod
    async def delete(self, film: Film) -> None:
        """Delete film with its attendance"""
        pass
