from pytest import approx

from geodetics import GeoCoordinate, ProjectedCoordinate


def assert_geocoordinates_equal(c1: GeoCoordinate, c2: GeoCoordinate, abs_tol=1e-9):
    """
    Asserts that two geographic coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first GeoCoordinate
        c2: The second GeoCoordinate
        abs_tol: The absolute tolerance, in radians.
                 Default is 1e-9 (approx 6mm at the equator).
    """
    try:
        assert c1.latitude.to_radian() == approx(c2.latitude.to_radian(), abs=abs_tol)
        assert c1.longitude.to_radian() == approx(c2.longitude.to_radian(), abs=abs_tol)
        assert c1.height == c2.height
    except AssertionError as e:
        print(c1)
        print(c2)
        raise e


def assert_projected_coordinates_equal(c1: ProjectedCoordinate, c2: ProjectedCoordinate, abs_tol=1e-3):
    """
    Asserts that two projected coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first ProjectedCoordinate
        c2: The second ProjectedCoordinate
        abs_tol: The absolute tolerance, in metres.
    """
    assert c1.x.to_metre() == approx(c2.x.to_metre(), abs=abs_tol)
    assert c1.y.to_metre() == approx(c2.y.to_metre(), abs=abs_tol)
    assert c1.z.to_metre() == approx(c2.z.to_metre(), abs=abs_tol)
