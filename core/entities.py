# core/entities.py
from dataclasses import dataclass, field
from typing import AsyncIterator, Callable, Optional
from util.enums import DeviceClass, OutcomeKind


def _noop() -> None:
    return None


@dataclass
class BlobObject:
    """
    One stored image. `body` is consumed once, by the response.
    `release` frees the underlying connection and is safe to call twice,
    including when `body` was never iterated.
    """

    key: str
    body: AsyncIterator[bytes]
    content_type: Optional[str]
    size: Optional[int]
    etag: Optional[str]  # unquoted
    release: Callable[[], None] = field(default=_noop, repr=False)

    @property
    def http_etag(self) -> Optional[str]:
        if not self.etag:
            return None
        return f'"{self.etag}"'


@dataclass
class ImageOutcome:
    kind: OutcomeKind
    device_class: Optional[DeviceClass] = None
    key: Optional[str] = None
    blob: Optional[BlobObject] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS
