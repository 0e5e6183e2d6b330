"""Tolerance configuration shared by the vector math helpers."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-6


# //1.- Capture the tolerance used for near-zero guards and approximate equality.
@dataclass(frozen=True)
class ToleranceSettings:
    """Epsilon applied to degenerate-length checks and float comparisons."""

    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        if not math.isfinite(self.epsilon) or self.epsilon <= 0.0:
            raise ValueError(f"Tolerance epsilon must be a positive finite number, got {self.epsilon!r}")

    # //2.- Build settings from a plain mapping such as a parsed JSON payload.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, float]] = None) -> "ToleranceSettings":
        if not payload:
            return cls()
        return cls(epsilon=float(payload.get("epsilon", DEFAULT_EPSILON)))

    # //3.- Allow overriding the tolerance through environment variables.
    @classmethod
    def from_environment(cls, prefix: str = "VECTOR3D") -> "ToleranceSettings":
        raw = os.getenv(f"{prefix}_EPSILON")
        if raw is None:
            return cls()
        LOGGER.debug("Using %s_EPSILON=%s from environment", prefix, raw)
        return cls.from_mapping({"epsilon": float(raw)})


# //4.- Canonical accessor; an explicit mapping takes precedence over the environment.
def load_tolerance_settings(
    mapping: Optional[Mapping[str, float]] = None,
    *,
    env_prefix: str = "VECTOR3D",
) -> ToleranceSettings:
    if mapping is not None:
        return ToleranceSettings.from_mapping(mapping)
    return ToleranceSettings.from_environment(prefix=env_prefix)
