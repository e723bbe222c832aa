from typing import Optional
from uuid import UUID

from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import WithdrawAccessRequestResponse


class WithdrawAccessRequestUseCase:
    """Requester deletes their own request"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("withdraw_access_request")
    async def execute(
        self,
        request_id: UUID,
        user_id: UUID,
        business_id: Optional[UUID] = None,
    ) -> Result[WithdrawAccessRequestResponse]:
        async with self.uow:
            request = await self.uow.access_requests.get_by_id(request_id)
            if request is None or (
                business_id is not None and request.business_id != business_id
            ):
                return Return.err(
                    Error("ACCESS_REQUEST_NOT_FOUND", "Access request not found")
                )

            if request.user_id != user_id:
                return Return.err(
                    Error("NOT_OWN_REQUEST", "You can only withdraw your own requests")
                )

            await self.uow.access_requests.delete(request)
            await self.uow.commit()

            return Return.ok(WithdrawAccessRequestResponse(success=True))
