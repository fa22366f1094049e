"""Lightweight profiling helpers."""
import contextlib
import logging
import time
from typing import Iterator

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def timer(name: str) -> Iterator[None]:
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.debug("[PROFILE] %s: %.4fs", name, elapsed)
