from __future__ import annotations

import asyncio
import logging
import random
from typing import Any

from .config import DEFAULT_SLOW_CONFIG, SlowConfig

logger = logging.getLogger(__name__)


class SimulatedOutageError(RuntimeError):
    """Injected transient failure. Callers are expected to retry themselves."""

    def __init__(self, delay_ms: int) -> None:
        super().__init__("Temporary outage")
        self.delay_ms = delay_ms


async def simulate_slow_response(
    config: SlowConfig = DEFAULT_SLOW_CONFIG,
    rng: Any = random,
) -> dict[str, Any]:
    """
    Wait a random delay, then succeed or raise ``SimulatedOutageError``.

    The delay and the outcome are both decided before sleeping. *rng* is
    anything with ``randint`` and ``random`` (the ``random`` module or a
    ``random.Random``).
    """
    delay_ms = rng.randint(config.min_delay_ms, config.max_delay_ms)
    fail = rng.random() < config.failure_rate

    await asyncio.sleep(delay_ms / 1000)

    if fail:
        logger.warning("Injecting simulated outage after %d ms", delay_ms)
        raise SimulatedOutageError(delay_ms)
    return {"ok": True, "delay_ms": delay_ms, "message": config.message}
