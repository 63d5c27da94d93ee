"""Closed-form walking/running cadence estimate."""

import math

from ..errors import InvalidInputError
from ..models.cadence import CadenceEstimate

STRIDE_RATIO = 0.414
MAX_STRIDE_RATIO = 0.55

# Roughly 5 mph; faster than this the stride lengthens
REFERENCE_SPEED_MPS = 2.2
SPEED_SPAN_MPS = 1.8
MAX_STRIDE_GAIN = 0.25


def stride_scale(speed_mps: float) -> float:
    """Stride lengthening factor for a given speed.

    1.0 at or below the reference speed, rising linearly above it and
    capped at 1.25.
    """
    if speed_mps <= REFERENCE_SPEED_MPS:
        return 1.0
    scale = 1.0 + MAX_STRIDE_GAIN * (speed_mps - REFERENCE_SPEED_MPS) / SPEED_SPAN_MPS
    return min(1.0 + MAX_STRIDE_GAIN, scale)


def estimate_cadence(height_m: float, speed_mps: float) -> CadenceEstimate:
    """Estimate steps per minute from height and speed.

    Args:
        height_m: Height in metres, must be positive
        speed_mps: Speed in metres per second, must not be negative

    Returns:
        CadenceEstimate with steps per minute and stride length in metres

    Raises:
        InvalidInputError: If either input is out of range or not finite
    """
    if not (math.isfinite(height_m) and math.isfinite(speed_mps)):
        raise InvalidInputError("height and speed must be finite numbers")
    if height_m <= 0:
        raise InvalidInputError(f"height must be positive, got {height_m}")
    if speed_mps < 0:
        raise InvalidInputError(f"speed must not be negative, got {speed_mps}")

    stride = STRIDE_RATIO * height_m * stride_scale(speed_mps)
    stride = min(stride, MAX_STRIDE_RATIO * height_m)

    steps_per_minute = (speed_mps / stride) * 60.0
    return CadenceEstimate(steps_per_minute=steps_per_minute, stride_length_m=stride)


def format_cadence(estimate: CadenceEstimate) -> str:
    return "Estimated cadence: %.0f spm (step length: %.2f m)" % (
        estimate.steps_per_minute,
        estimate.stride_length_m,
    )
