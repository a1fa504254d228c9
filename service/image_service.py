# service/image_service.py
import logging
from typing import Dict, Optional, Sequence
from core.device_classifier import classify
from core.entities import ImageOutcome
from core.random_selector import RandomSelector
from model.partition import Partition
from repository.base import BlobStore, KeyIndexStore
from util.enums import DeviceClass, OutcomeKind

logger = logging.getLogger(__name__)


class ImageService:
    """
    Read path: user agent -> partition -> cached key index -> random key -> blob.

    Never raises; every request ends in exactly one ImageOutcome.
    """

    def __init__(
        self,
        index_store: KeyIndexStore,
        blob_store: BlobStore,
        partitions: Sequence[Partition],
        selector: Optional[RandomSelector] = None,
    ) -> None:
        self._index = index_store
        self._blobs = blob_store
        self._partitions: Dict[DeviceClass, Partition] = {
            p.device_class: p for p in partitions
        }
        self._selector = selector or RandomSelector()

    async def serve(self, user_agent: Optional[str]) -> ImageOutcome:
        device = None
        try:
            device = classify(user_agent)
            return await self._serve(device)
        except Exception:
            logger.exception(
                "image.internal_error partition=%s",
                device.value if device else "unknown",
            )
            return ImageOutcome(kind=OutcomeKind.INTERNAL_ERROR, device_class=device)

    async def _serve(self, device: DeviceClass) -> ImageOutcome:
        partition = self._partitions[device]

        keys = await self._index.get(partition.index_name)
        if not keys:
            logger.error(
                "image.cold partition=%s index=%s state=%s",
                device.value,
                partition.index_name,
                "absent" if keys is None else "empty",
            )
            return ImageOutcome(kind=OutcomeKind.COLD_CACHE, device_class=device)

        key = self._selector.select(keys)
        blob = await self._blobs.get(key)
        if blob is None:
            logger.error(
                "image.missing partition=%s key=%s", device.value, key
            )
            return ImageOutcome(
                kind=OutcomeKind.INDEX_INCONSISTENT, device_class=device, key=key
            )

        logger.debug("image.ok partition=%s key=%s size=%s", device.value, key, blob.size)
        return ImageOutcome(
            kind=OutcomeKind.SUCCESS, device_class=device, key=key, blob=blob
        )
