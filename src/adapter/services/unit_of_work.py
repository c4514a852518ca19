from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_repository import AdminRepository
from src.adapter.repositories.attendance_repository import AttendanceRepository
from src.adapter.repositories.film_repository import FilmRepository
from src.adapter.repositories.member_repository import MemberRepository
from src.adapter.repositories.proposal_repository import ProposalRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.admins = AdminRepository(self.session)
        self.members = MemberRepository(self.session)
        self.films = FilmRepository(self.session)
        self.proposals = ProposalRepository(self.session)
        self.attendance = AttendanceRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
