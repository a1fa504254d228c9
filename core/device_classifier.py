# core/device_classifier.py
from typing import Optional
from util.constants import MOBILE_UA_TOKENS
from util.enums import DeviceClass


def classify(user_agent: Optional[str]) -> DeviceClass:
    """
    Map a User-Agent header to a device class. Unknown or missing agents are desktop.
    """
    ua = (user_agent or "").lower()
    if any(token in ua for token in MOBILE_UA_TOKENS):
        return DeviceClass.MOBILE
    return DeviceClass.DESKTOP
