# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Heading conversions using magnetic variation.

    compass = true - variation
    true    = compass + variation

Variation (declination) is east positive. Headings are normalized to
[0, 360). "Compass" here is the magnetic heading; deviation of a particular
compass is not modelled.
"""
import math


def _require_finite(name: str, value: float | None) -> float:
    if value is None:
        raise ValueError(f"{name} is indeterminate")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def normalize_heading(heading_deg: float) -> float:
    """Wrap a heading into [0, 360)."""
    wrapped = heading_deg % 360.0
    # -1e-15 % 360.0 rounds up to 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


def true_to_compass(true_heading_deg: float, declination_deg: float | None) -> float:
    _require_finite("true_heading_deg", true_heading_deg)
    declination = _require_finite("declination_deg", declination_deg)
    return normalize_heading(true_heading_deg - declination)


def compass_to_true(compass_heading_deg: float, declination_deg: float | None) -> float:
    _require_finite("compass_heading_deg", compass_heading_deg)
    declination = _require_finite("declination_deg", declination_deg)
    return normalize_heading(compass_heading_deg + declination)


def compass_error(
    true_heading_deg: float,
    compass_reading_deg: float,
    variation_deg: float | None,
) -> float:
    """
    Compass reading minus magnetic heading, in [-180, 180].

    Positive error is easterly.
    """
    _require_finite("true_heading_deg", true_heading_deg)
    _require_finite("compass_reading_deg", compass_reading_deg)
    variation = _require_finite("variation_deg", variation_deg)
    magnetic_heading = true_heading_deg - variation
    error = (compass_reading_deg - magnetic_heading) % 360.0
    if error > 180.0:
        error -= 360.0
    return error


def format_variation(variation_deg: float | None, decimals: int = 2) -> str:
    """Render a variation as e.g. '4.02° W'; east for values >= 0."""
    variation = _require_finite("variation_deg", variation_deg)
    direction = "E" if variation >= 0 else "W"
    return f"{abs(variation):.{decimals}f}° {direction}"


def dm_to_decimal(degrees: float, decimal_minutes: float, hemisphere: str) -> float:
    """
    Degrees and decimal minutes to signed decimal degrees.

    Args:
        degrees: Whole degrees (sign ignored).
        decimal_minutes: Minutes in [0, 60).
        hemisphere: One of 'N', 'S', 'E', 'W'.

    Returns:
        Decimal degrees, negative in the southern and western hemispheres.
    """
    hemi = hemisphere.strip().upper()
    if hemi not in ("N", "S", "E", "W"):
        raise ValueError(f"hemisphere must be one of N, S, E, W, got {hemisphere!r}")
    if not 0.0 <= decimal_minutes < 60.0:
        raise ValueError(f"decimal_minutes must be in [0, 60), got {decimal_minutes}")

    sign = -1.0 if hemi in ("S", "W") else 1.0
    return sign * (abs(degrees) + decimal_minutes / 60.0)
