# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class DeviceClass(str, Enum):
    DESKTOP = "desktop"
    MOBILE = "mobile"


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    COLD_CACHE = "cold_cache"
    INDEX_INCONSISTENT = "index_inconsistent"
    INTERNAL_ERROR = "internal_error"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    COLD_CACHE = ErrorInfo(
        "Image service is warming up, please retry later.",
        status.HTTP_503_SERVICE_UNAVAILABLE,
    )
    INDEX_INCONSISTENT = ErrorInfo(
        "The selected image could not be found.", status.HTTP_404_NOT_FOUND
    )
    INTERNAL_ERROR = ErrorInfo(
        "Internal server error.", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
