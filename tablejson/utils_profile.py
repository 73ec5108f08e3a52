"""Per-direction timing for encode / decode runs.

``profile_section`` always measures wall time and hands it back through the
yielded :class:`SectionTiming`; when profiling is on (``CODEC_CONFIG["profile"]``,
env ``TABLEJSON_PROFILE=1``) it also runs cProfile over the section and logs
the hottest functions to ``tablejson.profile``.
"""
from __future__ import annotations

import cProfile
import logging
import pstats
from contextlib import contextmanager
from dataclasses import dataclass
from io import StringIO
from time import perf_counter
from typing import Iterator, Optional

from .config import CODEC_CONFIG

LOGGER = logging.getLogger("tablejson.profile")
LOGGER.addHandler(logging.NullHandler())


@dataclass
class SectionTiming:
    direction: str            # "encode" / "decode"
    ms: float = 0.0
    stats: Optional[str] = None


@contextmanager
def profile_section(direction: str, enabled: Optional[bool] = None, top: int = 15) -> Iterator[SectionTiming]:
    timing = SectionTiming(direction)
    if enabled is None:
        enabled = CODEC_CONFIG["profile"]

    pr = cProfile.Profile() if enabled else None
    if pr is not None:
        pr.enable()
    t0 = perf_counter()
    try:
        yield timing
    finally:
        timing.ms = (perf_counter() - t0) * 1000
        if pr is not None:
            pr.disable()
            s = StringIO()
            pstats.Stats(pr, stream=s).sort_stats("cumulative").print_stats(top)
            timing.stats = s.getvalue()
            LOGGER.info("%s %.1f ms\n%s", direction, timing.ms, timing.stats)
