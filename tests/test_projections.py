import math

import pytest
from pytest import approx

from geodetics import methods
from geodetics.coordinates import GeoCoordinate, ProjectedCoordinate
from geodetics.ellipsoid import Ellipsoid, WGS84
from geodetics.projections import *
from geodetics.quantities import Angle, Length
from geodetics.utils.mixins import LoggingMixin
from tests.functions import assert_geocoordinates_equal, assert_projected_coordinates_equal

BESSEL_1841 = Ellipsoid.from_inverse_flattening('EPSG::7004', 'Bessel 1841', 6377397.155, 299.15281)
UNIT_SPHERE = Ellipsoid.from_sphere('TEST::1', 'unit sphere', 1.)
EARTH_SPHERE = Ellipsoid.from_sphere('TEST::2', 'earth sphere', 6371000.)


@pytest.fixture
def plate_carree():
    return EquidistantCylindricalProjection(
        'EPSG::4087', 'WGS 84 / World Equidistant Cylindrical',
        {
            methods.LATITUDE_OF_1ST_STANDARD_PARALLEL: Angle.from_degree(0),
            methods.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(0),
            methods.FALSE_EASTING: Length.from_metre(0),
            methods.FALSE_NORTHING: Length.from_metre(0),
        },
        WGS84,
    )


@pytest.fixture
def makassar():
    return MercatorAProjection(
        'EPSG::3002', 'Makassar / NEIEZ',
        {
            methods.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(110),
            methods.SCALE_FACTOR_AT_NATURAL_ORIGIN: 0.997,
            methods.FALSE_EASTING: Length.from_metre(3_900_000),
            methods.FALSE_NORTHING: Length.from_metre(900_000),
        },
        BESSEL_1841,
    )


def test_equidistant_cylindrical_forward(plate_carree):
    assert plate_carree.method == methods.EQUIDISTANT_CYLINDRICAL
    assert plate_carree.is_reversible

    projected = plate_carree.forward(GeoCoordinate.from_degrees(55., 10.))
    assert_projected_coordinates_equal(
        projected, ProjectedCoordinate(1113194.91, 6097230.31), abs_tol=0.01
    )

    # The equator maps onto the easting axis
    projected = plate_carree.forward(GeoCoordinate.from_degrees(0., -10.))
    assert projected.y.value == 0.
    assert projected.x.value == approx(-1113194.91, abs=0.01)


def test_equidistant_cylindrical_reverse(plate_carree):
    coordinate = GeoCoordinate.from_degrees(55., 10., 25.)
    projected = plate_carree.forward(coordinate)
    assert projected.z == Length.from_metre(25.)

    result = plate_carree.reverse(projected)
    assert_geocoordinates_equal(result, coordinate, abs_tol=1e-8)

    results = plate_carree.reverse_many(
        plate_carree.forward_many([
            GeoCoordinate.from_degrees(-80., -170.),
            GeoCoordinate.from_degrees(33.3, 44.4),
        ])
    )
    assert_geocoordinates_equal(results[0], GeoCoordinate.from_degrees(-80., -170.), abs_tol=1e-8)
    assert_geocoordinates_equal(results[1], GeoCoordinate.from_degrees(33.3, 44.4), abs_tol=1e-8)


def test_equidistant_cylindrical_sphere():
    projection = EquidistantCylindricalProjection(
        'TEST::10', 'sphere',
        {
            methods.LATITUDE_OF_1ST_STANDARD_PARALLEL: Angle.from_degree(60),
            methods.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(10),
            methods.FALSE_EASTING: Length.from_metre(1000),
            methods.FALSE_NORTHING: Length.from_metre(2000),
        },
        EARTH_SPHERE,
    )
    projected = projection.forward(GeoCoordinate.from_degrees(30., 40.))
    assert projected.x.value == approx(1000 + 6371000. * math.radians(30) * 0.5)
    assert projected.y.value == approx(2000 + 6371000. * math.radians(30))

    assert_geocoordinates_equal(
        projection.reverse(projected), GeoCoordinate.from_degrees(30., 40.)
    )


def test_equidistant_cylindrical_reverse_wraps_longitude():
    projection = EquidistantCylindricalProjection('TEST::11', 'unit', None, UNIT_SPHERE)
    result = projection.reverse(ProjectedCoordinate(4., 0.5))
    assert result.latitude.to_radian() == approx(0.5)
    assert result.longitude.to_radian() == approx(4. - 2 * math.pi)


def test_equidistant_cylindrical_invalid(plate_carree):
    assert not plate_carree.forward(GeoCoordinate.UNDEFINED).is_valid
    assert not plate_carree.forward(GeoCoordinate.from_degrees(95., 0.)).is_valid
    assert not plate_carree.reverse(ProjectedCoordinate.UNDEFINED).is_valid

    with pytest.raises(ValueError):
        plate_carree.forward(None)


def test_mercator_forward(makassar):
    assert makassar.method == methods.MERCATOR_A
    assert makassar.scale_factor == 0.997

    projected = makassar.forward(GeoCoordinate.from_degrees(-3., 120.))
    assert_projected_coordinates_equal(
        projected, ProjectedCoordinate(5009726.58, 569150.82), abs_tol=0.05
    )


def test_mercator_reverse(makassar):
    coordinate = GeoCoordinate.from_degrees(-3., 120., 100.)
    result = makassar.reverse(makassar.forward(coordinate))
    assert_geocoordinates_equal(result, coordinate, abs_tol=1e-9)

    result = makassar.reverse(ProjectedCoordinate(5009726.58, 569150.82))
    assert result.latitude.get_value('degree') == approx(-3., abs=1e-6)
    assert result.longitude.get_value('degree') == approx(120., abs=1e-6)


def test_mercator_sphere():
    projection = MercatorAProjection('TEST::20', 'unit', None, UNIT_SPHERE)
    assert projection.scale_factor == 1.

    projected = projection.forward(GeoCoordinate.from_degrees(45., 0.))
    assert projected.x.value == 0.
    assert projected.y.value == approx(0.881373587)

    result = projection.reverse(projected)
    assert result.latitude.to_radian() == approx(math.pi / 4)

    # Scale factor applies on a sphere too
    projection = MercatorAProjection(
        'TEST::21', 'scaled', {methods.SCALE_FACTOR_AT_NATURAL_ORIGIN: 0.5}, UNIT_SPHERE
    )
    assert projection.forward(GeoCoordinate.from_degrees(45., 0.)).y.value == approx(0.4406867935)


def test_mercator_poles(caplog, monkeypatch, makassar):
    monkeypatch.setattr(LoggingMixin, 'WARNED_ONCE', set())

    assert not makassar.forward(GeoCoordinate.from_degrees(90., 0.)).is_valid
    assert 'undefined at the poles' in caplog.text
    assert caplog.records[0].name == 'geodetics.projections.MercatorAProjection'

    # Only warned once
    assert not makassar.forward(GeoCoordinate.from_degrees(-90., 0.)).is_valid
    assert caplog.text.count('undefined at the poles') == 1


def test_mercator_invalid(makassar):
    assert not makassar.forward(GeoCoordinate.UNDEFINED).is_valid
    assert not makassar.reverse(ProjectedCoordinate.UNDEFINED).is_valid


def test_logger_name(makassar):
    assert makassar.logger.name == 'geodetics.projections.MercatorAProjection'
