"""Per-thread random number generator.

Each thread owns its own ``numpy.random.Generator``.  It is created lazily,
seeded from OS entropy, the first time that thread calls
``random_number_generator()``; ``seed_random_number_generator`` replaces it
with a deterministic one.  Generators are never shared between threads.

Nothing in the conversion layer draws random numbers; generation routines
built on top of it take their generator from here.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import numpy

logger = logging.getLogger(__name__)

_local = threading.local()


def random_number_generator() -> numpy.random.Generator:
    """Return the calling thread's generator, creating it on first use."""
    generator: Optional[numpy.random.Generator] = getattr(_local, "generator", None)
    if generator is None:
        generator = numpy.random.default_rng()
        _local.generator = generator
        logger.debug("created random number generator for thread %s", threading.current_thread().name)
    return generator


def seed_random_number_generator(seed: Optional[int] = None) -> numpy.random.Generator:
    """Replace the calling thread's generator with one seeded by *seed*."""
    _local.generator = numpy.random.default_rng(seed)
    return _local.generator
