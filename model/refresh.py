# model/refresh.py
from typing import List
from pydantic import BaseModel, computed_field
from util.enums import DeviceClass


class PartitionRefreshResult(BaseModel):
    device_class: DeviceClass
    index_name: str
    count: int | None = None
    error: str | None = None

    @computed_field
    @property
    def ok(self) -> bool:
        return self.error is None


class RefreshReport(BaseModel):
    results: List[PartitionRefreshResult]

    @computed_field
    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def failures(self) -> List[PartitionRefreshResult]:
        return [r for r in self.results if not r.ok]

    def for_device(self, device_class: DeviceClass) -> PartitionRefreshResult | None:
        return next((r for r in self.results if r.device_class == device_class), None)
