from abc import ABC, abstractmethod

from src.app.repositories.access_request_repository import IBusinessAccessRequestRepository
from src.app.repositories.brand_kit_repository import IBrandKitRepository
from src.app.repositories.business_repository import IBusinessRepository
from src.app.repositories.invitation_repository import IBusinessInvitationRepository
from src.app.repositories.member_repository import IBusinessMemberRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    businesses: IBusinessRepository
    members: IBusinessMemberRepository
    invitations: IBusinessInvitationRepository
    access_requests: IBusinessAccessRequestRepository
    brand_kits: IBrandKitRepository

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
