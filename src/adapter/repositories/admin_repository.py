from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_repository import IAdminRepository
from src.domain.entities import Admin

from .integrity import flush_checked


class AdminRepository(IAdminRepository):
    """Admin repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> Optional[Admin]:
        """Get admin by username"""
        stmt = select(Admin).where(Admin.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, admin_id: int) -> Optional[Admin]:
        """Get admin by ID"""
        stmt = select(Admin).where(Admin.id == admin_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, admin: Admin) -> Admin:
        """Create a new admin"""
        self.session.add(admin)
        await flush_checked(self.session, Admin.__table__)
        await self.session.refresh(admin)
        return admin
