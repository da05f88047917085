from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from album_service.errors import InternalFailure
from album_service.observability.logging import get_logger

log = get_logger(__name__)


class TransactionalService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def _commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            log.exception("store_commit_failed")
            raise InternalFailure() from e
