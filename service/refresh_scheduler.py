# service/refresh_scheduler.py
import asyncio
import logging
from typing import Optional
from config.cache import close_redis
from config.settings import settings
from config.storage import close_s3_client
from model.refresh import RefreshReport
from repository.blob_repository import BlobRepository
from repository.key_index_repository import KeyIndexRepository
from service.index_refresher import IndexRefresher
from util.logger import init_logger

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """
    In-process timer for IndexRefresher.

    A failed tick is only logged; the next tick is the retry.
    """

    def __init__(
        self,
        refresher: IndexRefresher,
        interval_seconds: float,
        run_on_start: bool = True,
    ) -> None:
        self._refresher = refresher
        self._interval = float(interval_seconds)
        self._run_on_start = run_on_start
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name="index-refresh")
        logger.info(
            "refresh.scheduler.start interval=%ds on_start=%s",
            int(self._interval),
            self._run_on_start,
        )

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("refresh.scheduler.stop")

    async def tick(self) -> Optional[RefreshReport]:
        try:
            report = await self._refresher.refresh_all()
        except Exception:
            logger.exception("refresh.tick.error")
            return None
        log_report(report)
        return report

    async def _loop(self) -> None:
        if not self._run_on_start:
            await asyncio.sleep(self._interval)
        while True:
            await self.tick()
            await asyncio.sleep(self._interval)


def log_report(report: RefreshReport) -> None:
    if report.ok:
        logger.info(
            "refresh.ok %s",
            " ".join(f"{r.index_name}={r.count}" for r in report.results),
        )
        return
    for r in report.failures:
        logger.warning(
            "refresh.partition.failed partition=%s index=%s error=%s",
            r.device_class.value,
            r.index_name,
            r.error,
        )


async def run_once() -> RefreshReport:
    """
    One refresh against the configured stores, for cron-style scheduling.
    """
    refresher = IndexRefresher(
        KeyIndexRepository(), BlobRepository(), settings.partitions()
    )
    try:
        report = await refresher.refresh_all()
    finally:
        await close_redis()
        close_s3_client()
    log_report(report)
    return report


def main() -> int:
    """Exit code for cron: 0 when every partition refreshed, 1 otherwise."""
    init_logger()
    try:
        report = asyncio.run(run_once())
    except Exception:
        logger.exception("refresh.run_once.error")
        return 1
    return 0 if report.ok else 1


if __name__ == "__main__":
    import sys

    sys.exit(main())
