# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Schmidt quasi-normalized associated Legendre functions.

Values P[n][m] and colatitude derivatives dP[n][m]/dθ for 0 <= m <= n <= N,
stored in the lower triangle of (N+1, N+1) arrays.

Normalization: P[n][m] = sqrt((n-m)! / (n+m)!) · P_n^m(cos θ). Multiplying
by √2 for m > 0 gives the Schmidt quasi-normalized functions of the WMM
technical report; the synthesizer applies that factor.

Recursion, evaluated in this order:
    P[0][0]   = 1
    P[n][n]   = sqrt((2n-1)/(2n)) · sinθ · P[n-1][n-1]
    P[n][m]   = a_nm · cosθ · P[n-1][m] - b_nm · P[n-2][m]      (m < n)

    a_nm = (2n-1) / sqrt((n-m)(n+m))
    b_nm = sqrt(((n-1)² - m²) / ((n-m)(n+m)))                  (0 when m = n-1)

For m = n-1 this reduces to P[n][n-1] = sqrt(2n-1) · cosθ · P[n-1][n-1],
which equals sqrt(2n) · cosθ · P[n][n] / sinθ without the division.

Derivatives follow the same recursion on (cosθ·dP - sinθ·P). The diagonal
uses the product rule form
    dP[n][n] = sqrt((2n-1)/(2n)) · (sinθ · dP[n-1][n-1] + cosθ · P[n-1][n-1])
which equals n · cosθ · P[n][n] / sinθ and stays finite at θ = 0 and θ = π.

Reference: NOAA Technical Report "The US/UK World Magnetic Model for
           2025-2030"; Langel (1987), "The main field".
"""
import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class LegendreFunctions:
    """Legendre values and derivatives at one colatitude."""
    max_degree: int
    theta_rad: float
    sin_theta: float
    cos_theta: float
    p: np.ndarray
    dp: np.ndarray


def recursion_coefficients(n: int, m: int) -> tuple[float, float]:
    """Three-term recursion coefficients (a_nm, b_nm) for m < n."""
    if not 0 <= m < n:
        raise ValueError(f"recursion requires 0 <= m < n, got n={n}, m={m}")
    nm = (n - m) * (n + m)
    a = (2.0 * n - 1.0) / math.sqrt(nm)
    b = math.sqrt(((n - 1) ** 2 - m * m) / nm) if m <= n - 2 else 0.0
    return a, b


def schmidt_legendre(max_degree: int, theta_rad: float) -> LegendreFunctions:
    """
    Compute Legendre functions and their θ-derivatives up to max_degree.

    Args:
        max_degree: Highest degree N (>= 0).
        theta_rad: Geocentric colatitude in radians [0, π].

    Returns:
        LegendreFunctions with read-only (N+1, N+1) arrays.

    Raises:
        ValueError: If max_degree is negative.
    """
    if max_degree < 0:
        raise ValueError(f"max_degree must be >= 0, got {max_degree}")

    sin_t = math.sin(theta_rad)
    cos_t = math.cos(theta_rad)

    size = max_degree + 1
    p = np.zeros((size, size), dtype=np.float64)
    dp = np.zeros((size, size), dtype=np.float64)

    p[0, 0] = 1.0
    dp[0, 0] = 0.0

    for n in range(1, size):
        k = math.sqrt((2.0 * n - 1.0) / (2.0 * n))
        p[n, n] = p[n - 1, n - 1] * sin_t * k
        dp[n, n] = k * (sin_t * dp[n - 1, n - 1] + cos_t * p[n - 1, n - 1])

        for m in range(n):
            a, b = recursion_coefficients(n, m)
            p[n, m] = a * cos_t * p[n - 1, m]
            dp[n, m] = a * (cos_t * dp[n - 1, m] - sin_t * p[n - 1, m])
            if m <= n - 2:
                p[n, m] -= b * p[n - 2, m]
                dp[n, m] -= b * dp[n - 2, m]

    p.setflags(write=False)
    dp.setflags(write=False)

    return LegendreFunctions(
        max_degree=max_degree,
        theta_rad=theta_rad,
        sin_theta=sin_t,
        cos_theta=cos_t,
        p=p,
        dp=dp,
    )
