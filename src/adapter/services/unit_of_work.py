from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.access_request_repository import BusinessAccessRequestRepository
from src.adapter.repositories.brand_kit_repository import BrandKitRepository
from src.adapter.repositories.business_repository import BusinessRepository
from src.adapter.repositories.invitation_repository import BusinessInvitationRepository
from src.adapter.repositories.member_repository import BusinessMemberRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.repositories.errors import RepositoryError
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.businesses = BusinessRepository(self.session)
        self.members = BusinessMemberRepository(self.session)
        self.invitations = BusinessInvitationRepository(self.session)
        self.access_requests = BusinessAccessRequestRepository(self.session)
        self.brand_kits = BrandKitRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise RepositoryError("uow.commit") from exc

    async def rollback(self):
        try:
            await self.session.rollback()
        except SQLAlchemyError as exc:
            raise RepositoryError("uow.rollback") from exc
