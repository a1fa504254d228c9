from typing import Final, Tuple


class InternalURIs:
    ROOT = "/"
    WALLPAPER = "/wallpaper"
    WALLPAPER_RANDOM = WALLPAPER + "/random"
    HEALTHZ = "/healthz"


# Lower-case user-agent fragments that mark a request as mobile.
MOBILE_UA_TOKENS: Final[Tuple[str, ...]] = (
    "iphone",
    "ipod",
    "android",
    "blackberry",
    "iemobile",
    "opera mini",
)

DEFAULT_CONTENT_TYPE: Final[str] = "application/octet-stream"
PLAIN_TEXT: Final[str] = "text/plain; charset=utf-8"
