# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the WMM2025 field query facade.

Golden values are the published WMM2025 test points (NOAA NCEI,
WMM2025_TestValues) at 2025.0 and 2027.5, sea level and 100 km.
"""

import ast
import dataclasses
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timezone

import pytest

from magvar import (
    BearingStatus,
    GeoCoordinates,
    MagneticField,
    ModelConstants,
    WMM2025_COEFFICIENTS,
    compute_field,
    compute_field_elements,
    compute_variation,
    compass_to_true,
    geodetic_to_geocentric,
    rotate_to_geodetic,
    schmidt_legendre,
    synthesize_field,
    true_to_compass,
)

# (lat, lon, alt_km, year) -> (X, Y, Z, F, D, I)
_GOLDEN = [
    ((80.0, 0.0, 0.0, 2025.0), (6521.5994, 145.8870, 54791.5077, 55178.4546, 1.281482, 83.210580)),
    ((0.0, 120.0, 0.0, 2025.0), (39677.7550, -109.6063, -10580.1698, 41064.2941, -0.158274, -14.930601)),
    ((-80.0, -120.0, 0.0, 2025.0), (6117.5482, 15751.9058, -52022.5194, 54698.1668, 68.775385, -72.004988)),
    ((80.0, 0.0, 100.0, 2027.5), (6196.7389, 233.7761, 52670.4667, 53034.2558, 2.160497, 83.285204)),
    ((0.0, 120.0, 100.0, 2027.5), (37711.5433, -148.6976, -9969.7776, 39007.4233, -0.225918, -14.808351)),
    ((-80.0, -120.0, 100.0, 2027.5), (5983.9760, 14760.1360, -49317.6706, 51825.6907, 67.931643, -72.102278)),
]

# (lat, lon, year) -> annual change of declination (deg/yr)
_GOLDEN_DDOT = [
    ((80.0, 0.0, 2025.0), 0.523748),
    ((0.0, 120.0, 2025.0), -0.033326),
    ((-80.0, -120.0, 2025.0), -0.115777),
]


def _field(lat, lon, alt=0.0, when=2025.0) -> MagneticField:
    return compute_field(GeoCoordinates(lat, lon, alt), when)


class TestGoldenValues:

    @pytest.mark.parametrize("point, expected", _GOLDEN)
    def test_published_test_point(self, point, expected):
        lat, lon, alt, year = point
        x, y, z, f, d, i = expected
        field = _field(lat, lon, alt, year)
        assert field.north_nt == pytest.approx(x, abs=0.01)
        assert field.east_nt == pytest.approx(y, abs=0.01)
        assert field.down_nt == pytest.approx(z, abs=0.01)
        assert field.total_intensity_nt == pytest.approx(f, abs=0.01)
        assert field.declination_deg == pytest.approx(d, abs=1e-4)
        assert field.inclination_deg == pytest.approx(i, abs=1e-4)

    @pytest.mark.parametrize("point, expected", _GOLDEN_DDOT)
    def test_annual_change(self, point, expected):
        lat, lon, year = point
        field = _field(lat, lon, 0.0, year)
        assert field.annual_change_deg_yr == pytest.approx(expected, abs=1e-5)

    def test_secular_rates_at_80n(self):
        field = _field(80.0, 0.0)
        assert field.north_rate_nt_yr == pytest.approx(-8.3096, abs=1e-3)
        assert field.east_rate_nt_yr == pytest.approx(59.4588, abs=1e-3)
        assert field.down_rate_nt_yr == pytest.approx(31.1391, abs=1e-3)

    def test_gulf_of_guinea(self):
        """0°N 0°E at epoch: within 0.01° and 1 nT of the reference synthesis."""
        field = _field(0.0, 0.0)
        assert field.declination_deg == pytest.approx(-4.016244, abs=0.01)
        assert field.inclination_deg == pytest.approx(-30.188962, abs=0.01)
        assert field.total_intensity_nt == pytest.approx(31839.9079, abs=1.0)

    def test_date_input_matches_decimal_year(self):
        by_date = _field(45.0, 10.0, when=date(2026, 1, 1))
        by_year = _field(45.0, 10.0, when=2026.0)
        assert by_date == by_year
        assert by_date.declination_deg == pytest.approx(3.750409, abs=1e-4)
        assert by_date.total_intensity_nt == pytest.approx(47740.8787, abs=0.01)


class TestReferenceStations:
    """Sign of declination at well-known places, not a symmetry assumption."""

    @pytest.mark.parametrize("lat, lon, expected", [
        (40.0, -105.0, 7.667041),     # Boulder, east
        (40.0, -74.0, -12.412580),    # New York, west
        (51.5, 0.0, 0.948749),        # London, just east
        (-33.9, 151.2, 12.797969),    # Sydney, east
        (0.0, 0.0, -4.016244),        # Gulf of Guinea, west
    ])
    def test_declination(self, lat, lon, expected):
        field = _field(lat, lon)
        assert math.copysign(1.0, field.declination_deg) == math.copysign(1.0, expected)
        assert field.declination_deg == pytest.approx(expected, abs=1e-4)

    def test_boulder_and_new_york_straddle_agonic_line(self):
        assert _field(40.0, -105.0).declination_deg > 0.0
        assert _field(40.0, -74.0).declination_deg < 0.0

    def test_inclination_flips_across_magnetic_equator(self):
        assert _field(51.5, 0.0).inclination_deg > 0.0
        assert _field(-33.9, 151.2).inclination_deg < 0.0


class TestProperties:

    def test_deterministic(self):
        coords = GeoCoordinates(37.25, -122.5, 0.3)
        first = compute_field(coords, 2026.4)
        for _ in range(5):
            assert compute_field(coords, 2026.4) == first

    def test_concurrent_calls_agree(self):
        coords = [GeoCoordinates(lat, lon) for lat in (-60.0, 0.0, 45.0) for lon in (-150.0, 0.0, 90.0)]
        serial = [compute_field(c, 2027.0) for c in coords]
        with ThreadPoolExecutor(max_workers=4) as pool:
            parallel = list(pool.map(lambda c: compute_field(c, 2027.0), coords * 3))
        assert parallel == serial * 3

    def test_epoch_continuity(self):
        """At the epoch the result equals the static coefficients alone."""
        lat, lon, alt = 47.0, -33.0, 2.5
        static = tuple(
            dataclasses.replace(c, g_dot=0.0, h_dot=0.0) for c in WMM2025_COEFFICIENTS
        )
        pos = geodetic_to_geocentric(lat, alt)
        leg = schmidt_legendre(ModelConstants.MAX_DEGREE, pos.colatitude_rad)
        spherical = synthesize_field(static, leg, 0.0, pos.radius_km, lon)
        expected = compute_field_elements(rotate_to_geodetic(spherical, lat, pos.latitude_deg))

        field = compute_field(GeoCoordinates(lat, lon, alt), date(2025, 1, 1))
        assert field.years_from_epoch == 0.0
        assert field.declination_deg == expected.declination_deg
        assert field.inclination_deg == expected.inclination_deg
        assert field.total_intensity_nt == expected.total_intensity_nt
        assert field.horizontal_intensity_nt == expected.horizontal_intensity_nt

    @pytest.mark.parametrize("lat", [90.0, -90.0])
    def test_pole_safety(self, lat):
        field = _field(lat, 0.0)
        numeric = [
            field.inclination_deg, field.total_intensity_nt, field.horizontal_intensity_nt,
            field.north_nt, field.east_nt, field.down_nt,
            field.north_rate_nt_yr, field.east_rate_nt_yr, field.down_rate_nt_yr,
            field.total_intensity_rate_nt_yr,
        ]
        assert all(math.isfinite(v) for v in numeric)
        assert field.bearing is BearingStatus.INDETERMINATE
        assert not field.is_bearing_defined
        assert field.declination_deg is None
        assert field.annual_change_deg_yr is None
        assert 45000.0 < field.total_intensity_nt < 65000.0
        assert math.copysign(1.0, field.inclination_deg) == math.copysign(1.0, lat)

    def test_pole_vertical_component_independent_of_longitude(self):
        a = _field(90.0, -170.0)
        b = _field(90.0, 45.0)
        assert a.down_nt == pytest.approx(b.down_nt, abs=1e-6)

    def test_near_pole_still_has_bearing(self):
        field = _field(89.9, 0.0)
        assert field.is_bearing_defined
        assert field.declination_deg == pytest.approx(13.552840, abs=1e-3)
        assert field.inclination_deg == pytest.approx(88.147705, abs=1e-4)

    def test_intensity_decreases_with_altitude(self):
        intensities = [_field(40.0, -105.0, alt).total_intensity_nt for alt in (0.0, 10.0, 100.0, 1000.0)]
        assert all(b < a for a, b in zip(intensities, intensities[1:]))
        assert intensities[0] == pytest.approx(51354.8431, abs=0.01)
        assert intensities[1] == pytest.approx(51097.2214, abs=0.01)
        assert intensities[2] == pytest.approx(48855.9209, abs=0.01)
        assert intensities[3] == pytest.approx(32341.3639, abs=0.01)

    def test_heading_round_trip_with_model_declination(self):
        d = _field(-33.9, 151.2).declination_deg
        for true_heading in (0.0, 45.5, 180.0, 359.75):
            back = compass_to_true(true_to_compass(true_heading, d), d)
            assert back == pytest.approx(true_heading, abs=1e-9)


class TestEpochReporting:

    def test_within_validity(self, caplog):
        with caplog.at_level(logging.WARNING, logger="magvar.domain.geomagnetism"):
            field = _field(10.0, 10.0, when=2027.0)
        assert field.is_within_validity
        assert field.years_from_epoch == pytest.approx(2.0)
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    @pytest.mark.parametrize("year", [2024.5, 2031.0, 2040.0])
    def test_extrapolation_warns(self, year, caplog):
        with caplog.at_level(logging.WARNING, logger="magvar.domain.geomagnetism"):
            field = _field(10.0, 10.0, when=year)
        assert not field.is_within_validity
        assert field.years_from_epoch == pytest.approx(year - 2025.0)
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert "validity" in warnings[0].getMessage()

    def test_window_edges_are_valid(self):
        assert _field(0.0, 0.0, when=2025.0).is_within_validity
        assert _field(0.0, 0.0, when=2030.0).is_within_validity

    def test_provenance(self):
        field = _field(0.0, 0.0)
        assert field.model_name == "WMM2025"
        assert field.model_epoch == 2025.0
        assert field.provenance == "WMM2025 epoch 2025.0"

    def test_indeterminate_bearing_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="magvar.domain.geomagnetism"):
            _field(90.0, 0.0)
        assert any("indeterminate" in r.getMessage() for r in caplog.records)


class TestQueryTime:

    def test_datetime_input(self):
        when = datetime(2026, 7, 4, 18, 30, tzinfo=timezone.utc)
        assert _field(20.0, -40.0, when=when) == _field(20.0, -40.0, when=date(2026, 7, 4))

    def test_iso_string_input(self):
        assert _field(20.0, -40.0, when="2026-07-04") == _field(20.0, -40.0, when=date(2026, 7, 4))
        assert _field(20.0, -40.0, when="2026-07-04T12:00:00+00:00").decimal_year == pytest.approx(
            2026 + 184 / 365
        )

    def test_integer_year(self):
        assert _field(20.0, -40.0, when=2026).decimal_year == 2026.0

    def test_unparseable_string_rejected(self):
        with pytest.raises(ValueError, match="unparseable"):
            _field(0.0, 0.0, when="next tuesday")

    def test_non_finite_year_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            _field(0.0, 0.0, when=math.nan)

    def test_unsupported_type_rejected(self):
        with pytest.raises(TypeError):
            _field(0.0, 0.0, when=[2025])
        with pytest.raises(TypeError):
            _field(0.0, 0.0, when=True)


class TestInputValidation:

    @pytest.mark.parametrize("lat", [90.0001, -91.0, 180.0])
    def test_latitude_out_of_range(self, lat):
        with pytest.raises(ValueError, match="latitude_deg"):
            _field(lat, 0.0)

    @pytest.mark.parametrize("lon", [180.5, -181.0, 240.0])
    def test_longitude_out_of_range(self, lon):
        with pytest.raises(ValueError, match="longitude_deg"):
            _field(0.0, lon)

    def test_longitude_bounds_inclusive(self):
        east = _field(10.0, 180.0)
        west = _field(10.0, -180.0)
        assert east.declination_deg == pytest.approx(west.declination_deg, abs=1e-9)

    def test_altitude_below_model_limit(self):
        with pytest.raises(ValueError, match="altitude_km"):
            _field(0.0, 0.0, -2.0)

    def test_small_negative_altitude_allowed(self):
        assert math.isfinite(_field(31.5, 35.5, -0.43).total_intensity_nt)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_coordinates(self, bad):
        with pytest.raises(ValueError, match="finite"):
            _field(bad, 0.0)
        with pytest.raises(ValueError, match="finite"):
            _field(0.0, bad)

    def test_non_numeric_coordinate(self):
        with pytest.raises(TypeError):
            compute_field(GeoCoordinates("45", 0.0), 2025.0)


class TestComputeVariation:

    def test_matches_full_query(self):
        field = _field(40.0, -105.0, when=date(2026, 3, 1))
        var = compute_variation(40.0, -105.0, date(2026, 3, 1))
        assert var.variation_deg == field.declination_deg
        assert var.annual_change_deg_yr == field.annual_change_deg_yr
        assert var.epoch_used == field.decimal_year
        assert var.bearing is BearingStatus.DEFINED
        assert var.is_within_validity

    def test_epoch_used_is_decimal_year(self):
        var = compute_variation(0.0, 0.0, date(2027, 7, 2))
        assert var.epoch_used == pytest.approx(2027 + 182 / 365)
        assert var.years_from_epoch == pytest.approx(var.epoch_used - 2025.0)
        assert var.model_name == "WMM2025"

    def test_sea_level(self):
        var = compute_variation(80.0, 0.0, 2025.0)
        assert var.variation_deg == pytest.approx(1.281482, abs=1e-4)

    def test_pole_is_indeterminate(self):
        var = compute_variation(-90.0, 0.0, 2026.0)
        assert var.bearing is BearingStatus.INDETERMINATE
        assert var.variation_deg is None
        assert var.annual_change_deg_yr is None

    def test_invalid_input_propagates(self):
        with pytest.raises(ValueError):
            compute_variation(95.0, 0.0, 2025.0)


class TestDomainPurity:

    def test_geomagnetism_domain_purity(self):
        """geomagnetism.py must only import from stdlib and magvar."""
        import magvar.domain.geomagnetism as mod

        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        allowed_top = {"logging", "math", "numbers", "dataclasses", "datetime"}
        allowed_internal_prefix = "magvar"

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    top = alias.name.split(".")[0]
                    assert top in allowed_top or alias.name.startswith(
                        allowed_internal_prefix
                    ), f"Forbidden import: {alias.name}"
            elif isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    top = node.module.split(".")[0]
                    assert top in allowed_top or node.module.startswith(
                        allowed_internal_prefix
                    ), f"Forbidden import from: {node.module}"
