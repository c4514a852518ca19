from abc import ABC, abstractmethod

from src.app.repositories.admin_repository import IAdminRepository
from src.app.repositories.attendance_repository import IAttendanceRepository
from src.app.repositories.film_repository import IFilmRepository
from src.app.repositories.member_repository import IMemberRepository
from src.app.repositories.proposal_repository import IProposalRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    admins: IAdminRepository
    members: IMemberRepository
    films: IFilmRepository
    proposals: IProposalRepository
    attendance: IAttendanceRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
