# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
World Magnetic Model 2025 coefficient table.

Gauss coefficients (nT) and their secular variation (nT/yr) for the
degree-12 WMM2025 main field, referenced to epoch 2025.0 and valid until
2030.0. Source: NOAA NCEI, WMM2025.COF.

The table is an ordered tuple indexed implicitly by position: (1, 0),
(1, 1), (2, 0), ... (12, 12). The synthesizer relies on that ordering.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class _ModelConstants:
    """WMM2025 reference constants (WGS84 ellipsoid, km)."""
    NAME: str = "WMM2025"
    EPOCH: float = 2025.0                     # decimal year
    VALID_UNTIL: float = 2030.0               # decimal year
    MAX_DEGREE: int = 12
    WGS84_A_KM: float = 6378.137              # km, semi-major axis
    WGS84_FLATTENING: float = 1.0 / 298.257223563
    WGS84_E_SQUARED: float = 0.0066943799901413165  # 2f - f²
    EARTH_RADIUS_KM: float = 6371.2           # km, geomagnetic reference radius
    POLE_GUARD: float = 1e-4                  # sin(colatitude) below which east terms are dropped
    MIN_ALTITUDE_KM: float = -1.0

    @property
    def provenance(self) -> str:
        """Model label shown next to every result, e.g. 'WMM2025 epoch 2025.0'."""
        return f"{self.NAME} epoch {self.EPOCH:.1f}"


ModelConstants: _ModelConstants = _ModelConstants()


@dataclass(frozen=True)
class ModelCoefficient:
    """One (degree, order) term of the main field model."""
    n: int
    m: int
    g: float       # nT
    h: float       # nT
    g_dot: float   # nT/yr
    h_dot: float   # nT/yr


WMM2025_COEFFICIENTS: tuple[ModelCoefficient, ...] = (
    ModelCoefficient(1, 0, -29351.8, 0.0, 12.0, 0.0),
    ModelCoefficient(1, 1, -1410.8, 4545.4, 9.7, -21.5),
    ModelCoefficient(2, 0, -2556.6, 0.0, -11.6, 0.0),
    ModelCoefficient(2, 1, 2951.1, -3133.6, -5.2, -27.7),
    ModelCoefficient(2, 2, 1649.3, -815.1, -8.0, -12.1),
    ModelCoefficient(3, 0, 1361.0, 0.0, -1.3, 0.0),
    ModelCoefficient(3, 1, -2404.1, -56.6, -4.2, 4.0),
    ModelCoefficient(3, 2, 1243.8, 237.5, 0.4, -0.3),
    ModelCoefficient(3, 3, 453.6, -549.5, -15.6, -4.1),
    ModelCoefficient(4, 0, 895.0, 0.0, -1.6, 0.0),
    ModelCoefficient(4, 1, 799.5, 278.6, -2.4, -1.1),
    ModelCoefficient(4, 2, 55.7, -133.9, -6.0, 4.1),
    ModelCoefficient(4, 3, -281.1, 212.0, 5.6, 1.6),
    ModelCoefficient(4, 4, 12.1, -375.6, -7.0, -4.4),
    ModelCoefficient(5, 0, -233.2, 0.0, 0.6, 0.0),
    ModelCoefficient(5, 1, 368.9, 45.4, 1.4, -0.5),
    ModelCoefficient(5, 2, 187.2, 220.2, 0.0, 2.2),
    ModelCoefficient(5, 3, -138.7, -122.9, 0.6, 0.4),
    ModelCoefficient(5, 4, -142.0, 43.0, 2.2, 1.7),
    ModelCoefficient(5, 5, 20.9, 106.1, 0.9, 1.9),
    ModelCoefficient(6, 0, 64.4, 0.0, -0.2, 0.0),
    ModelCoefficient(6, 1, 63.8, -18.4, -0.4, 0.3),
    ModelCoefficient(6, 2, 76.9, 16.8, 0.9, -1.6),
    ModelCoefficient(6, 3, -115.7, 48.8, 1.2, -0.4),
    ModelCoefficient(6, 4, -40.9, -59.8, -0.9, 0.9),
    ModelCoefficient(6, 5, 14.9, 10.9, 0.3, 0.7),
    ModelCoefficient(6, 6, -60.7, 72.7, 0.9, 0.9),
    ModelCoefficient(7, 0, 79.5, 0.0, -0.0, 0.0),
    ModelCoefficient(7, 1, -77.0, -48.9, -0.1, 0.6),
    ModelCoefficient(7, 2, -8.8, -14.4, -0.1, 0.5),
    ModelCoefficient(7, 3, 59.3, -1.0, 0.5, -0.8),
    ModelCoefficient(7, 4, 15.8, 23.4, -0.1, 0.0),
    ModelCoefficient(7, 5, 2.5, -7.4, -0.8, -1.0),
    ModelCoefficient(7, 6, -11.1, -25.1, -0.8, 0.6),
    ModelCoefficient(7, 7, 14.2, -2.3, 0.8, -0.2),
    ModelCoefficient(8, 0, 23.2, 0.0, -0.1, 0.0),
    ModelCoefficient(8, 1, 10.8, 7.1, 0.2, -0.2),
    ModelCoefficient(8, 2, -17.5, -12.6, 0.0, 0.5),
    ModelCoefficient(8, 3, 2.0, 11.4, 0.5, -0.4),
    ModelCoefficient(8, 4, -21.7, -9.7, -0.1, 0.4),
    ModelCoefficient(8, 5, 16.9, 12.7, 0.3, -0.5),
    ModelCoefficient(8, 6, 15.0, 0.7, 0.2, -0.6),
    ModelCoefficient(8, 7, -16.8, -5.2, -0.0, 0.3),
    ModelCoefficient(8, 8, 0.9, 3.9, 0.2, 0.2),
    ModelCoefficient(9, 0, 4.6, 0.0, -0.0, 0.0),
    ModelCoefficient(9, 1, 7.8, -24.8, -0.1, -0.3),
    ModelCoefficient(9, 2, 3.0, 12.2, 0.1, 0.3),
    ModelCoefficient(9, 3, -0.2, 8.3, 0.3, -0.3),
    ModelCoefficient(9, 4, -2.5, -3.3, -0.3, 0.3),
    ModelCoefficient(9, 5, -13.1, -5.2, 0.0, 0.2),
    ModelCoefficient(9, 6, 2.4, 7.2, 0.3, -0.1),
    ModelCoefficient(9, 7, 8.6, -0.6, -0.1, -0.2),
    ModelCoefficient(9, 8, -8.7, 0.8, 0.1, 0.4),
    ModelCoefficient(9, 9, -12.9, 10.0, -0.1, 0.1),
    ModelCoefficient(10, 0, -1.3, 0.0, 0.1, 0.0),
    ModelCoefficient(10, 1, -6.4, 3.3, 0.0, 0.0),
    ModelCoefficient(10, 2, 0.2, 0.0, 0.1, -0.0),
    ModelCoefficient(10, 3, 2.0, 2.4, 0.1, -0.2),
    ModelCoefficient(10, 4, -1.0, 5.3, -0.0, 0.1),
    ModelCoefficient(10, 5, -0.6, -9.1, -0.3, -0.1),
    ModelCoefficient(10, 6, -0.9, 0.4, 0.0, 0.1),
    ModelCoefficient(10, 7, 1.5, -4.2, -0.1, 0.0),
    ModelCoefficient(10, 8, 0.9, -3.8, -0.1, -0.1),
    ModelCoefficient(10, 9, -2.7, 0.9, -0.0, 0.2),
    ModelCoefficient(10, 10, -3.9, -9.1, -0.0, -0.0),
    ModelCoefficient(11, 0, 2.9, 0.0, 0.0, 0.0),
    ModelCoefficient(11, 1, -1.5, 0.0, -0.0, -0.0),
    ModelCoefficient(11, 2, -2.5, 2.9, 0.0, 0.1),
    ModelCoefficient(11, 3, 2.4, -0.6, 0.0, -0.0),
    ModelCoefficient(11, 4, -0.6, 0.2, 0.0, 0.1),
    ModelCoefficient(11, 5, -0.1, 0.5, -0.1, -0.0),
    ModelCoefficient(11, 6, -0.6, -0.3, 0.0, -0.0),
    ModelCoefficient(11, 7, -0.1, -1.2, -0.0, 0.1),
    ModelCoefficient(11, 8, 1.1, -1.7, -0.1, -0.0),
    ModelCoefficient(11, 9, -1.0, -2.9, -0.1, 0.0),
    ModelCoefficient(11, 10, -0.2, -1.8, -0.1, 0.0),
    ModelCoefficient(11, 11, 2.6, -2.3, -0.1, 0.0),
    ModelCoefficient(12, 0, -2.0, 0.0, 0.0, 0.0),
    ModelCoefficient(12, 1, -0.2, -1.3, 0.0, -0.0),
    ModelCoefficient(12, 2, 0.3, 0.7, -0.0, 0.0),
    ModelCoefficient(12, 3, 1.2, 1.0, -0.0, -0.1),
    ModelCoefficient(12, 4, -1.3, -1.4, -0.0, 0.1),
    ModelCoefficient(12, 5, 0.6, -0.0, -0.0, -0.0),
    ModelCoefficient(12, 6, 0.6, 0.6, 0.1, -0.0),
    ModelCoefficient(12, 7, 0.5, -0.1, -0.0, -0.0),
    ModelCoefficient(12, 8, -0.1, 0.8, 0.0, 0.0),
    ModelCoefficient(12, 9, -0.4, 0.1, 0.0, -0.0),
    ModelCoefficient(12, 10, -0.2, -1.0, -0.1, -0.0),
    ModelCoefficient(12, 11, -1.3, 0.1, -0.0, 0.0),
    ModelCoefficient(12, 12, -0.7, 0.2, -0.1, -0.1),
)


def validate_coefficients(
    coefficients: tuple[ModelCoefficient, ...],
    max_degree: int = ModelConstants.MAX_DEGREE,
) -> None:
    """Check ordering and completeness of a coefficient table.

    Every degree n in 1..max_degree must list orders 0..n in sequence,
    and zonal terms (m = 0) must carry no h or h_dot.

    Raises:
        ValueError: On the first violated invariant.
    """
    expected = [(n, m) for n in range(1, max_degree + 1) for m in range(n + 1)]
    if len(coefficients) != len(expected):
        raise ValueError(
            f"expected {len(expected)} coefficients for degree {max_degree}, "
            f"got {len(coefficients)}"
        )
    for coef, (n, m) in zip(coefficients, expected):
        if (coef.n, coef.m) != (n, m):
            raise ValueError(
                f"coefficient out of order: expected ({n}, {m}), "
                f"got ({coef.n}, {coef.m})"
            )
        if m == 0 and (coef.h != 0.0 or coef.h_dot != 0.0):
            raise ValueError(f"zonal term ({n}, 0) must have h = h_dot = 0")
        values = (coef.g, coef.h, coef.g_dot, coef.h_dot)
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"non-finite value in coefficient ({n}, {m})")
