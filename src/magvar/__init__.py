# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
magvar

Earth's main magnetic field from the World Magnetic Model 2025: field
vector, declination (compass variation), inclination, intensities and
their secular change at any geodetic position and date. Includes
geodetic to geocentric conversion, Schmidt quasi-normalized Legendre
recursion, spherical harmonic synthesis, and true/compass heading
conversion helpers.
"""

from magvar.domain.wmm_coefficients import (
    ModelConstants,
    ModelCoefficient,
    WMM2025_COEFFICIENTS,
    validate_coefficients,
)
from magvar.domain.decimal_year import (
    decimal_year,
    days_in_year,
    is_leap_year,
)
from magvar.domain.geocentric import (
    GeocentricPosition,
    geodetic_to_geocentric,
)
from magvar.domain.legendre import (
    LegendreFunctions,
    schmidt_legendre,
)
from magvar.domain.harmonic_synthesis import (
    FieldComponents,
    synthesize_field,
    rotate_to_geodetic,
)
from magvar.domain.field_elements import (
    BearingStatus,
    FieldElements,
    compute_field_elements,
)
from magvar.domain.geomagnetism import (
    GeoCoordinates,
    MagneticField,
    MagneticVariation,
    compute_field,
    compute_variation,
)
from magvar.domain.heading import (
    normalize_heading,
    true_to_compass,
    compass_to_true,
    compass_error,
    format_variation,
    dm_to_decimal,
)

__all__ = [
    "ModelConstants",
    "ModelCoefficient",
    "WMM2025_COEFFICIENTS",
    "validate_coefficients",
    "decimal_year",
    "days_in_year",
    "is_leap_year",
    "GeocentricPosition",
    "geodetic_to_geocentric",
    "LegendreFunctions",
    "schmidt_legendre",
    "FieldComponents",
    "synthesize_field",
    "rotate_to_geodetic",
    "BearingStatus",
    "FieldElements",
    "compute_field_elements",
    "GeoCoordinates",
    "MagneticField",
    "MagneticVariation",
    "compute_field",
    "compute_variation",
    "normalize_heading",
    "true_to_compass",
    "compass_to_true",
    "compass_error",
    "format_variation",
    "dm_to_decimal",
]
