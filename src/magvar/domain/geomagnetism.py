# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geomagnetic field queries against WMM2025.

Pipeline per call:
    1. Validate inputs, resolve the query date to a decimal year
    2. Geodetic -> geocentric latitude and radius
    3. Legendre functions at the geocentric colatitude
    4. Harmonic synthesis of X, Y, Z and their rates
    5. Rotation into the local ellipsoidal frame
    6. Declination, inclination, intensities

Queries are pure functions of their inputs and the compiled-in coefficient
table. Nothing is cached, so concurrent calls need no locking.
"""
import logging
import math
import numbers
from dataclasses import dataclass
from datetime import date, datetime

from magvar.domain.decimal_year import decimal_year
from magvar.domain.field_elements import BearingStatus, compute_field_elements
from magvar.domain.geocentric import geodetic_to_geocentric
from magvar.domain.harmonic_synthesis import rotate_to_geodetic, synthesize_field
from magvar.domain.legendre import schmidt_legendre
from magvar.domain.wmm_coefficients import ModelConstants, WMM2025_COEFFICIENTS

logger = logging.getLogger(__name__)

QueryTime = datetime | date | str | float | int


@dataclass(frozen=True)
class GeoCoordinates:
    """Geodetic (WGS84) observer position."""
    latitude_deg: float
    longitude_deg: float
    altitude_km: float = 0.0


@dataclass(frozen=True)
class MagneticField:
    """Full field result for one location and date."""
    declination_deg: float | None
    inclination_deg: float
    total_intensity_nt: float
    horizontal_intensity_nt: float
    north_nt: float
    east_nt: float
    down_nt: float
    annual_change_deg_yr: float | None
    north_rate_nt_yr: float
    east_rate_nt_yr: float
    down_rate_nt_yr: float
    total_intensity_rate_nt_yr: float
    bearing: BearingStatus
    decimal_year: float
    years_from_epoch: float
    model_name: str = ModelConstants.NAME
    model_epoch: float = ModelConstants.EPOCH

    @property
    def is_bearing_defined(self) -> bool:
        return self.bearing is BearingStatus.DEFINED

    @property
    def is_within_validity(self) -> bool:
        return _within_validity(self.decimal_year)

    @property
    def provenance(self) -> str:
        return f"{self.model_name} epoch {self.model_epoch:.1f}"


@dataclass(frozen=True)
class MagneticVariation:
    """Compass variation summary for navigation displays."""
    variation_deg: float | None
    annual_change_deg_yr: float | None
    epoch_used: float
    bearing: BearingStatus
    years_from_epoch: float
    model_name: str = ModelConstants.NAME
    model_epoch: float = ModelConstants.EPOCH

    @property
    def is_within_validity(self) -> bool:
        return _within_validity(self.epoch_used)


def _within_validity(year: float) -> bool:
    return ModelConstants.EPOCH <= year <= ModelConstants.VALID_UNTIL


def _check_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def validate_coordinates(coordinates: GeoCoordinates) -> None:
    """
    Reject positions outside the model domain.

    Raises:
        TypeError: If a field is not a real number.
        ValueError: If latitude is outside [-90, 90], longitude outside
            [-180, 180], or altitude below the model's lower limit.
    """
    lat = coordinates.latitude_deg
    lon = coordinates.longitude_deg
    alt = coordinates.altitude_km
    _check_finite("latitude_deg", lat)
    _check_finite("longitude_deg", lon)
    _check_finite("altitude_km", alt)

    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"latitude_deg must be in [-90, 90], got {lat}")
    if not -180.0 <= lon <= 180.0:
        raise ValueError(f"longitude_deg must be in [-180, 180], got {lon}")
    if alt < ModelConstants.MIN_ALTITUDE_KM:
        raise ValueError(
            f"altitude_km must be >= {ModelConstants.MIN_ALTITUDE_KM}, got {alt}"
        )


def resolve_decimal_year(when: QueryTime) -> float:
    """
    Turn a query time into a decimal year.

    Accepts a datetime, a date, an ISO-8601 string, or a decimal year.

    Raises:
        TypeError: For unsupported types.
        ValueError: For unparseable strings or non-finite numbers.
    """
    if isinstance(when, (datetime, date)):
        return decimal_year(when)
    if isinstance(when, str):
        try:
            parsed = datetime.fromisoformat(when.strip())
        except ValueError:
            raise ValueError(f"unparseable date: {when!r}") from None
        return decimal_year(parsed)
    _check_finite("decimal year", when)
    return float(when)


def compute_field(coordinates: GeoCoordinates, when: QueryTime) -> MagneticField:
    """
    Compute the WMM2025 field vector and magnetic elements.

    Args:
        coordinates: Geodetic latitude/longitude (deg) and altitude (km).
        when: Query date (datetime, date, ISO string, or decimal year).

    Returns:
        MagneticField. Declination and its annual change are None when the
        bearing is indeterminate.

    Raises:
        TypeError, ValueError: For invalid coordinates or dates.
    """
    validate_coordinates(coordinates)
    year = resolve_decimal_year(when)
    dt = year - ModelConstants.EPOCH

    if not _within_validity(year):
        logger.warning(
            "Decimal year %.3f is outside the %s validity window %.1f-%.1f "
            "(%.2f years from epoch); accuracy is degraded.",
            year, ModelConstants.NAME, ModelConstants.EPOCH,
            ModelConstants.VALID_UNTIL, dt,
        )

    position = geodetic_to_geocentric(
        coordinates.latitude_deg, coordinates.altitude_km,
    )
    legendre = schmidt_legendre(ModelConstants.MAX_DEGREE, position.colatitude_rad)
    spherical = synthesize_field(
        WMM2025_COEFFICIENTS,
        legendre,
        dt,
        position.radius_km,
        coordinates.longitude_deg,
    )
    components = rotate_to_geodetic(
        spherical, coordinates.latitude_deg, position.latitude_deg,
    )
    elements = compute_field_elements(components)

    if elements.bearing is BearingStatus.INDETERMINATE:
        logger.debug(
            "Declination indeterminate at lat=%.6f lon=%.6f (H=%.3g nT)",
            coordinates.latitude_deg, coordinates.longitude_deg,
            elements.horizontal_intensity_nt,
        )

    return MagneticField(
        declination_deg=elements.declination_deg,
        inclination_deg=elements.inclination_deg,
        total_intensity_nt=elements.total_intensity_nt,
        horizontal_intensity_nt=elements.horizontal_intensity_nt,
        north_nt=components.north_nt,
        east_nt=components.east_nt,
        down_nt=components.down_nt,
        annual_change_deg_yr=elements.declination_rate_deg_yr,
        north_rate_nt_yr=components.north_rate_nt_yr,
        east_rate_nt_yr=components.east_rate_nt_yr,
        down_rate_nt_yr=components.down_rate_nt_yr,
        total_intensity_rate_nt_yr=elements.total_intensity_rate_nt_yr,
        bearing=elements.bearing,
        decimal_year=year,
        years_from_epoch=dt,
    )


def compute_variation(
    latitude_deg: float,
    longitude_deg: float,
    when: QueryTime,
) -> MagneticVariation:
    """Compass variation at sea level, with its annual change and the epoch used."""
    field = compute_field(GeoCoordinates(latitude_deg, longitude_deg), when)
    return MagneticVariation(
        variation_deg=field.declination_deg,
        annual_change_deg_yr=field.annual_change_deg_yr,
        epoch_used=field.decimal_year,
        bearing=field.bearing,
        years_from_epoch=field.years_from_epoch,
    )
