# util/timing.py
import time
from contextlib import contextmanager
from typing import Iterator, Any
import logging


@contextmanager
def timed(logger: logging.Logger, name: str, **kv: Any) -> Iterator[None]:
    """
    Usage:
      with timed(logger, "refresh.list", prefix="pc_img/"):
          ...
    Emits one INFO on success: "<name>.done ms=<int> key=val ..."
    or one WARNING when the block raises: "<name>.failed ms=<int> err=<Type> key=val ..."
    The exception is re-raised unchanged.
    """
    t0 = time.perf_counter()
    suffix = "".join(f" {k}={v}" for k, v in kv.items())
    try:
        yield
    except Exception as e:
        dt_ms = int((time.perf_counter() - t0) * 1000)
        logger.warning("%s.failed ms=%d err=%s%s", name, dt_ms, type(e).__name__, suffix)
        raise
    dt_ms = int((time.perf_counter() - t0) * 1000)
    logger.info("%s.done ms=%d%s", name, dt_ms, suffix)
