# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Spherical harmonic synthesis of the main field vector.

Sums the time-adjusted Gauss coefficients against the Legendre functions
and longitude terms to produce north (X), east (Y) and down (Z) components
in the geocentric frame, together with their secular rates.

    X =      Σ (a/r)^(n+2) · s_m · (g'cos mλ + h'sin mλ) · dP[n][m]
    Y =      Σ (a/r)^(n+2) · s_m · m · (g'sin mλ - h'cos mλ) · P[n][m] / sinθ
    Z = -(n+1) Σ (a/r)^(n+2) · s_m · (g'cos mλ + h'sin mλ) · P[n][m]

with g' = g + ġ·Δt, h' = h + ḣ·Δt and s_m = 1 for m = 0, √2 otherwise.
Rates use ġ, ḣ in place of g', h'.

Near the geographic poles sinθ -> 0. East terms are dropped when
sinθ <= POLE_GUARD; the result records that it happened.
"""
import math
from dataclasses import dataclass

from magvar.domain.legendre import LegendreFunctions
from magvar.domain.wmm_coefficients import ModelCoefficient, ModelConstants

_SQRT2 = math.sqrt(2.0)


@dataclass(frozen=True)
class FieldComponents:
    """Field vector (nT) and secular variation (nT/yr), north-east-down."""
    north_nt: float
    east_nt: float
    down_nt: float
    north_rate_nt_yr: float
    east_rate_nt_yr: float
    down_rate_nt_yr: float
    east_terms_dropped: bool = False


def synthesize_field(
    coefficients: tuple[ModelCoefficient, ...],
    legendre: LegendreFunctions,
    years_from_epoch: float,
    radius_km: float,
    longitude_deg: float,
    reference_radius_km: float = ModelConstants.EARTH_RADIUS_KM,
) -> FieldComponents:
    """
    Evaluate the harmonic expansion at one point.

    Args:
        coefficients: Ordered coefficient table.
        legendre: Legendre functions at the geocentric colatitude, computed
            to at least the highest degree in the table.
        years_from_epoch: Decimal-year offset from the model epoch.
        radius_km: Geocentric radius of the observer.
        longitude_deg: Longitude, east positive.
        reference_radius_km: Reference radius of the expansion.

    Returns:
        FieldComponents in the geocentric (spherical) frame.
    """
    if radius_km <= 0.0:
        raise ValueError(f"radius_km must be positive, got {radius_km}")
    top_degree = max((coef.n for coef in coefficients), default=0)
    if top_degree > legendre.max_degree:
        raise ValueError(
            f"Legendre functions computed to degree {legendre.max_degree}, "
            f"coefficients need {top_degree}"
        )

    p = legendre.p
    dp = legendre.dp
    sin_t = legendre.sin_theta
    east_ok = sin_t > ModelConstants.POLE_GUARD

    lon_rad = math.radians(longitude_deg)
    r_ratio = reference_radius_km / radius_km
    dt = years_from_epoch

    x = y = z = 0.0
    x_dot = y_dot = z_dot = 0.0
    dropped = False

    for coef in coefficients:
        n, m = coef.n, coef.m

        gnm = coef.g + coef.g_dot * dt
        hnm = coef.h + coef.h_dot * dt

        schmidt = 1.0 if m == 0 else _SQRT2
        cos_mlon = math.cos(m * lon_rad)
        sin_mlon = math.sin(m * lon_rad)
        radial = r_ratio ** (n + 2)

        x += radial * schmidt * (gnm * cos_mlon + hnm * sin_mlon) * dp[n, m]
        z += -(n + 1) * radial * schmidt * (gnm * cos_mlon + hnm * sin_mlon) * p[n, m]

        x_dot += radial * schmidt * (coef.g_dot * cos_mlon + coef.h_dot * sin_mlon) * dp[n, m]
        z_dot += -(n + 1) * radial * schmidt * (coef.g_dot * cos_mlon + coef.h_dot * sin_mlon) * p[n, m]

        if m > 0:
            if east_ok:
                y += radial * schmidt * m * (gnm * sin_mlon - hnm * cos_mlon) * p[n, m] / sin_t
                y_dot += radial * schmidt * m * (coef.g_dot * sin_mlon - coef.h_dot * cos_mlon) * p[n, m] / sin_t
            else:
                dropped = True

    return FieldComponents(
        north_nt=float(x),
        east_nt=float(y),
        down_nt=float(z),
        north_rate_nt_yr=float(x_dot),
        east_rate_nt_yr=float(y_dot),
        down_rate_nt_yr=float(z_dot),
        east_terms_dropped=dropped,
    )


def rotate_to_geodetic(
    components: FieldComponents,
    geodetic_latitude_deg: float,
    geocentric_latitude_deg: float,
) -> FieldComponents:
    """
    Rotate north/down from the geocentric sphere frame to the ellipsoid frame.

    The rotation is about the east axis by ψ = φ_geodetic - φ_geocentric:

        X' =  X cos ψ + Z sin ψ
        Z' = -X sin ψ + Z cos ψ

    East components are unchanged.
    """
    psi = math.radians(geodetic_latitude_deg - geocentric_latitude_deg)
    cos_psi = math.cos(psi)
    sin_psi = math.sin(psi)

    c = components
    return FieldComponents(
        north_nt=c.north_nt * cos_psi + c.down_nt * sin_psi,
        east_nt=c.east_nt,
        down_nt=-c.north_nt * sin_psi + c.down_nt * cos_psi,
        north_rate_nt_yr=c.north_rate_nt_yr * cos_psi + c.down_rate_nt_yr * sin_psi,
        east_rate_nt_yr=c.east_rate_nt_yr,
        down_rate_nt_yr=-c.north_rate_nt_yr * sin_psi + c.down_rate_nt_yr * cos_psi,
        east_terms_dropped=c.east_terms_dropped,
    )
