# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geodetic to geocentric conversion on the WGS84 ellipsoid.

The WMM coefficients are defined on a geocentric sphere while GPS and chart
positions are geodetic. Using geodetic latitude directly in the harmonic
expansion shifts the result by several arcminutes.

Longitude does not enter this transform; it is evaluated at zero longitude
and the actual longitude is applied in the synthesis step.
"""
import math
from dataclasses import dataclass

from magvar.domain.wmm_coefficients import ModelConstants


@dataclass(frozen=True)
class GeocentricPosition:
    """Spherical position of an observer relative to the Earth's center."""
    latitude_deg: float
    radius_km: float

    @property
    def colatitude_rad(self) -> float:
        return math.pi / 2.0 - math.radians(self.latitude_deg)


def geodetic_to_geocentric(
    latitude_deg: float,
    altitude_km: float = 0.0,
) -> GeocentricPosition:
    """
    Convert geodetic latitude and ellipsoidal height to geocentric coordinates.

    N = a / sqrt(1 - e² sin²φ)
    x = (N + h) cos φ
    z = (N (1 - e²) + h) sin φ

    Args:
        latitude_deg: Geodetic latitude in degrees [-90, 90].
        altitude_km: Height above the WGS84 ellipsoid in km.

    Returns:
        GeocentricPosition with geocentric latitude (deg) and radius (km).
    """
    c = ModelConstants
    a = c.WGS84_A_KM
    e2 = c.WGS84_E_SQUARED

    lat_rad = math.radians(latitude_deg)
    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)

    n = a / math.sqrt(1.0 - e2 * sin_lat * sin_lat)

    # Zero longitude: y vanishes
    x = (n + altitude_km) * cos_lat * math.cos(0.0)
    y = (n + altitude_km) * cos_lat * math.sin(0.0)
    z = (n * (1.0 - e2) + altitude_km) * sin_lat

    latitude_gc = math.atan2(z, math.sqrt(x * x + y * y))
    radius = math.sqrt(x * x + y * y + z * z)

    return GeocentricPosition(
        latitude_deg=math.degrees(latitude_gc),
        radius_km=radius,
    )
