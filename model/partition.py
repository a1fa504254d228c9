# model/partition.py
from pydantic import BaseModel, ConfigDict, Field
from util.enums import DeviceClass


class Partition(BaseModel):
    """
    One device-class bucket: the index entry it is cached under and the
    blob-store prefix its keys are listed from.
    """

    model_config = ConfigDict(frozen=True)

    device_class: DeviceClass
    index_name: str = Field(min_length=1)
    prefix: str
