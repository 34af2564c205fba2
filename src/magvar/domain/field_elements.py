# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Magnetic elements derived from the field vector.

    H = sqrt(X² + Y²)           horizontal intensity
    F = sqrt(H² + Z²)           total intensity
    D = atan2(Y, X)             declination, east positive
    I = atan2(Z, H)             inclination, positive downward
    Ḋ = (X·Ẏ - Y·Ẋ) / H²        annual change of declination
    Ḟ = (X·Ẋ + Y·Ẏ + Z·Ż) / F    annual change of total intensity

Declination has no meaning when the horizontal field vanishes or when the
east component could not be evaluated (geographic pole). Those cases are
reported as BearingStatus.INDETERMINATE with D and Ḋ set to None.
"""
import math
from dataclasses import dataclass
from enum import Enum

from magvar.domain.harmonic_synthesis import FieldComponents

_MIN_HORIZONTAL_NT = 1e-9


class BearingStatus(Enum):
    DEFINED = "defined"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class FieldElements:
    """Scalar magnetic elements at one point."""
    declination_deg: float | None
    inclination_deg: float
    horizontal_intensity_nt: float
    total_intensity_nt: float
    declination_rate_deg_yr: float | None
    total_intensity_rate_nt_yr: float
    bearing: BearingStatus


def compute_field_elements(components: FieldComponents) -> FieldElements:
    """
    Reduce north/east/down components to declination, inclination and
    intensities.

    Args:
        components: Field vector and secular variation.

    Returns:
        FieldElements. Declination and its rate are None when the bearing
        is indeterminate.
    """
    x = components.north_nt
    y = components.east_nt
    z = components.down_nt
    x_dot = components.north_rate_nt_yr
    y_dot = components.east_rate_nt_yr
    z_dot = components.down_rate_nt_yr

    h = math.sqrt(x * x + y * y)
    f = math.sqrt(h * h + z * z)
    inclination = math.degrees(math.atan2(z, h))
    f_dot = (x * x_dot + y * y_dot + z * z_dot) / f if f > 0.0 else 0.0

    if h <= _MIN_HORIZONTAL_NT or components.east_terms_dropped:
        return FieldElements(
            declination_deg=None,
            inclination_deg=inclination,
            horizontal_intensity_nt=h,
            total_intensity_nt=f,
            declination_rate_deg_yr=None,
            total_intensity_rate_nt_yr=f_dot,
            bearing=BearingStatus.INDETERMINATE,
        )

    declination = math.degrees(math.atan2(y, x))
    d_dot = math.degrees((x * y_dot - y * x_dot) / (h * h))

    return FieldElements(
        declination_deg=declination,
        inclination_deg=inclination,
        horizontal_intensity_nt=h,
        total_intensity_nt=f,
        declination_rate_deg_yr=d_dot,
        total_intensity_rate_nt_yr=f_dot,
        bearing=BearingStatus.DEFINED,
    )
