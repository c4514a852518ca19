from datetime import date
from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.member_repository import IMemberRepository
from src.domain.entities import Attendance, FilmProposal, Member

from .integrity import flush_checked


class MemberRepository(IMemberRepository):
    """Member repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, member_id: int) -> Optional[Member]:
        """Get member by ID"""
        stmt = select(Member).where(Member.id == member_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username(self, username: str) -> Optional[Member]:
        """Get member by login username"""
        stmt = select(Member).where(Member.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_membership_code(self, code: str) -> Optional[Member]:
        """Get member by membership code"""
        stmt = select(Member).where(Member.membership_code == code)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Member]:
        """List all members, newest first"""
        stmt = select(Member).order_by(Member.created_at.desc(), Member.id.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_expiring_between(self, start: date, end: date) -> List[Member]:
        """List members whose expiry date lies in [start, end]"""
        stmt = (
            select(Member)
            .where(Member.expiry_date >= start, Member.expiry_date <= end)
            .order_by(Member.expiry_date.asc(), Member.id.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, member: Member) -> Member:
        """Create a new member"""
        self.session.add(member)
        await flush_checked(self.session, Member.__table__)
        await self.session.refresh(member)
        return member

    async def update(self, member: Member) -> Member:
        """Update existing member"""
        self.session.add(member)
        await flush_checked(self.session, Member.__table__)
        await self.session.refresh(member)
        return member

    async def delete(self, member: Member) -> None:
        """Delete member with its attendance and proposals"""
        await self.session.execute(
            delete(Attendance).where(Attendance.member_id == member.id)
        )
        await self.session.execute(
            delete(FilmProposal).where(FilmProposal.member_id == member.id)
        )
        await self.session.delete(member)
        await flush_checked(self.session, Member.__table__)
