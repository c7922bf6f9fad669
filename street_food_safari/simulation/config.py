from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SlowConfig:
    min_delay_ms: int = 1500
    max_delay_ms: int = 3500
    failure_rate: float = 0.2
    message: str = "Thanks for waiting!"


DEFAULT_SLOW_CONFIG = SlowConfig()
