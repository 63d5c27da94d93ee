"""Cadence estimate model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CadenceEstimate:
    """Steps per minute and stride length derived from height and speed."""

    steps_per_minute: float
    stride_length_m: float
