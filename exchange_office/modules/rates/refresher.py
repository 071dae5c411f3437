"""Periodic background refresh of stored exchange rates."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .exceptions import RateProviderError
from .provider import RateProvider
from .service import RateService

logger = logging.getLogger(__name__)


class RateRefresher:
    """Runs ``refresh_once`` now and then every ``interval`` seconds."""

    def __init__(
        self,
        provider: RateProvider,
        session_factory: async_sessionmaker[AsyncSession],
        interval: int,
    ) -> None:
        self.provider = provider
        self.session_factory = session_factory
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh_once(self) -> int:
        """Fetch and store the latest rates; returns the number of pairs written.

        Failures are logged and reported as 0 so the schedule keeps going.
        """
        try:
            source, rates = await self.provider.fetch_latest()
        except RateProviderError as exc:
            logger.error("Failed to fetch exchange rates: %s", exc.reason)
            return 0

        async with self.session_factory() as session:
            try:
                written = await RateService.with_session(session).upsert_rates(rates)
                await session.commit()
            except Exception:  # pylint: disable=broad-except
                await session.rollback()
                logger.exception("Failed to store exchange rates from %s", source)
                return 0
        logger.info("Exchange rates updated from %s (%d pairs)", source, written)
        return written

    def start(self) -> None:
        if self.interval <= 0:
            logger.info("Exchange rate refresh disabled")
            return
        if not self.provider.sources:
            logger.info("No exchange rate sources configured, keeping stored rates")
            return
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        try:
            while True:
                try:
                    await self.refresh_once()
                except Exception:  # pylint: disable=broad-except
                    logger.exception("Exchange rate refresh failed, retrying in %ss", self.interval)
                await asyncio.sleep(self.interval)
        except asyncio.CancelledError:
            logger.debug("Exchange rate refresh task cancelled")
            raise
