# service/index_refresher.py
import asyncio
import logging
from typing import Sequence
from model.partition import Partition
from model.refresh import PartitionRefreshResult, RefreshReport
from repository.base import BlobStore, KeyIndexStore
from util.timing import timed

logger = logging.getLogger(__name__)


class IndexRefresher:
    """
    Rebuild every partition's key index from a full listing of its blob prefix.

    Partitions are isolated: a failure in one is recorded in the report and
    the others still get written. Overlapping runs are allowed; the last
    write to an index wins.
    """

    def __init__(
        self,
        index_store: KeyIndexStore,
        blob_store: BlobStore,
        partitions: Sequence[Partition],
    ) -> None:
        self._index = index_store
        self._blobs = blob_store
        self._partitions = list(partitions)

    async def refresh_all(self) -> RefreshReport:
        with timed(logger, "refresh.all", partitions=len(self._partitions)):
            results = await asyncio.gather(
                *(self._refresh_one(p) for p in self._partitions)
            )
        return RefreshReport(results=list(results))

    async def _refresh_one(self, partition: Partition) -> PartitionRefreshResult:
        try:
            with timed(logger, "refresh.list", prefix=partition.prefix):
                keys = await self._blobs.list_keys(partition.prefix)
            await self._index.put(partition.index_name, keys)
        except Exception as e:
            logger.error(
                "refresh.partition.error partition=%s index=%s err=%s",
                partition.device_class.value,
                partition.index_name,
                e,
            )
            return PartitionRefreshResult(
                device_class=partition.device_class,
                index_name=partition.index_name,
                error=f"{type(e).__name__}: {e}",
            )

        logger.info(
            "refresh.partition.ok partition=%s index=%s count=%d",
            partition.device_class.value,
            partition.index_name,
            len(keys),
        )
        return PartitionRefreshResult(
            device_class=partition.device_class,
            index_name=partition.index_name,
            count=len(keys),
        )
