"""
Geodetic computations on an ellipsoid: the direct and inverse problems, and
arc lengths along meridians and parallels
"""

__all__ = [
    'distance_of_parallel_curvature', 'get_coordinate', 'get_destination_azimuth',
    'get_geocentric_latitude', 'get_integration_intervals', 'get_reduced_latitude',
    'get_vector', 'length_of_parallel_curvature', 'length_of_vertical_curvature',
    'set_integration_intervals',
]

import math
from typing import Optional, Tuple, Union

from geodetics._const import COMPUTATION_TOLERANCE, DEFAULT_INTEGRATION_INTERVALS
from geodetics.coordinates import GeoCoordinate, GeoVector
from geodetics.ellipsoid import Ellipsoid
from geodetics.errors import UnsupportedComputationError
from geodetics.quantities import Angle, Length
from geodetics.utils.functions import cos2, normalize_angle
from geodetics.utils.integral import simpsons_method
from geodetics.utils.logging import warn_once

_LATITUDE = Union[Angle, float]

_INTEGRATION_INTERVALS = DEFAULT_INTEGRATION_INTERVALS


def set_integration_intervals(intervals: int):
    """
    Set the number of Simpson sub-intervals used for meridian arc lengths
    when the caller does not pass one explicitly.

    Args:
        intervals:
            An even number, at least 2. The historical default of 2 is coarse;
            accuracy-sensitive applications should raise it.

    Returns:
        None
    """
    global _INTEGRATION_INTERVALS  # pylint: disable=global-statement
    if isinstance(intervals, bool) or not isinstance(intervals, int):
        raise ValueError(f'intervals must be an integer, got {intervals!r}')

    if intervals < 2 or intervals % 2 == 1:
        raise ValueError(f'intervals must be a positive even number, got {intervals}')

    _INTEGRATION_INTERVALS = intervals


def get_integration_intervals() -> int:
    """Returns the number of Simpson sub-intervals currently used for meridian arcs"""
    return _INTEGRATION_INTERVALS


def _check_not_none(**kwargs):
    for name, value in kwargs.items():
        if value is None:
            raise ValueError(f'{name} must not be None')


def _clamp(value: float) -> float:
    """Clamps a cosine/sine computed with rounding error back into [-1, 1]"""
    return max(-1., min(1., value))


def _latitude_in_range(phi: float) -> bool:
    return -math.pi / 2 <= phi <= math.pi / 2


def _direct_sphere(
    radius: float,
    phi0: float,
    alpha0: float,
    distance: float,
) -> Tuple[float, float, float]:
    """
    Closed form of the direct problem on a sphere.

    Returns:
        (latitude, longitude difference, azimuth at the destination), in radians
    """
    delta = distance / radius
    phi = math.asin(_clamp(
        math.sin(phi0) * math.cos(delta) +
        math.cos(phi0) * math.sin(delta) * math.cos(alpha0)
    ))

    # Arrived at a pole; longitude is arbitrary there
    if abs(phi - math.pi / 2) <= COMPUTATION_TOLERANCE:
        return math.pi / 2, 0., math.pi

    if abs(phi + math.pi / 2) <= COMPUTATION_TOLERANCE:
        return -math.pi / 2, 0., 0.

    # Departing from a pole, every direction runs south along a meridian
    if math.cos(phi0) <= COMPUTATION_TOLERANCE:
        if phi0 > 0:
            return phi, math.pi - alpha0, math.pi

        return phi, alpha0, 0.

    # Due north or south: either stays on the meridian or goes over a pole
    if abs(math.sin(alpha0)) <= COMPUTATION_TOLERANCE:
        if abs(delta - abs(phi - phi0)) <= COMPUTATION_TOLERANCE:
            return phi, 0., alpha0

        return phi, math.pi, alpha0 + math.pi

    d_lambda = math.copysign(
        math.acos(_clamp(
            (math.cos(delta) - math.sin(phi0) * math.sin(phi)) /
            (math.cos(phi0) * math.cos(phi))
        )),
        math.sin(alpha0) * math.sin(delta)
    )
    alpha = math.atan2(
        math.sin(alpha0) * math.cos(phi0),
        math.cos(delta) * math.cos(phi0) * math.cos(alpha0) - math.sin(phi0) * math.sin(delta)
    )
    return phi, d_lambda, alpha


def _meridian_series(
    ellipsoid: Ellipsoid,
    phi0: float,
    cos_a: float,
    distance: float,
) -> float:
    """
    Latitude reached along a meridian (sin(alpha) = 0), as a third-order series.
    May run past a pole, i.e. out of [-pi/2, pi/2].
    """
    e2 = ellipsoid.eccentricity_squared
    sin_phi, cos_phi = math.sin(phi0), math.cos(phi0)
    w2 = 1 - e2 * sin_phi ** 2
    m = ellipsoid.radius_of_meridian_curvature(phi0)
    g = e2 * sin_phi * cos_phi / w2
    g_phi = e2 * (math.cos(2 * phi0) * w2 + 2 * e2 * sin_phi ** 2 * cos_phi ** 2) / w2 ** 2

    d1_phi = cos_a / m
    p = 3 * g * cos_a * d1_phi
    d2_phi = -p / m
    dp = 3 * (g_phi * d1_phi ** 2 * cos_a + g * cos_a * d2_phi)
    d3_phi = -dp / m + p * 3 * g * d1_phi / m

    return phi0 + d1_phi * distance + d2_phi * distance ** 2 / 2 + d3_phi * distance ** 3 / 6


def _direct_ellipsoid(
    ellipsoid: Ellipsoid,
    phi0: float,
    alpha0: float,
    distance: float,
) -> Tuple[float, float, float]:
    """
    Third-order Taylor expansion in the distance of the geodesic equations

        dphi/ds = cos(alpha) / M
        dlambda/ds = sin(alpha) / (N cos(phi))
        dalpha/ds = sin(alpha) tan(phi) / N

    where M and N are the meridian and prime vertical radii of curvature.

    Returns:
        (latitude, longitude difference, azimuth at the destination), in radians
    """
    e2 = ellipsoid.eccentricity_squared
    sin_phi, cos_phi = math.sin(phi0), math.cos(phi0)
    sin_a, cos_a = math.sin(alpha0), math.cos(alpha0)

    # Departing from a pole, every direction runs south along a meridian
    if cos_phi <= COMPUTATION_TOLERANCE:
        if phi0 > 0:
            phi = _meridian_series(ellipsoid, phi0, -1., distance)
            return phi, math.pi - alpha0, math.pi

        return _meridian_series(ellipsoid, phi0, 1., distance), alpha0, 0.

    if abs(sin_a) <= COMPUTATION_TOLERANCE:
        phi = _meridian_series(ellipsoid, phi0, cos_a, distance)
        # Went over a pole
        if phi > math.pi / 2:
            return math.pi - phi, math.pi, alpha0 + math.pi

        if phi < -math.pi / 2:
            return -math.pi - phi, math.pi, alpha0 + math.pi

        return phi, 0., alpha0

    tan_phi = sin_phi / cos_phi
    sec2_phi = 1 / cos2(phi0)
    w2 = 1 - e2 * sin_phi ** 2

    m = ellipsoid.radius_of_meridian_curvature(phi0)
    n = ellipsoid.radius_of_prime_vertical_curvature(phi0)

    # dN/dphi = N * g and dM/dphi = 3 * M * g
    g = e2 * sin_phi * cos_phi / w2
    g_phi = e2 * (math.cos(2 * phi0) * w2 + 2 * e2 * sin_phi ** 2 * cos_phi ** 2) / w2 ** 2

    # First derivatives
    d1_phi = cos_a / m
    d1_alpha = sin_a * tan_phi / n
    d1_lambda = sin_a / (n * cos_phi)

    # Second derivatives
    p = sin_a * d1_alpha + 3 * g * cos_a * d1_phi
    d2_phi = -p / m

    q = cos_a * d1_alpha * tan_phi + sin_a * d1_phi * sec2_phi
    d2_alpha = q / n - d1_alpha * g * d1_phi

    h = g - tan_phi
    h_phi = g_phi - sec2_phi
    r = cos_a * d1_alpha / (n * cos_phi)
    d2_lambda = r - d1_lambda * h * d1_phi

    # Third derivatives
    dp = (
        cos_a * d1_alpha ** 2 + sin_a * d2_alpha +
        3 * (
            g_phi * d1_phi ** 2 * cos_a -
            g * sin_a * d1_alpha * d1_phi +
            g * cos_a * d2_phi
        )
    )
    d3_phi = -dp / m + p * 3 * g * d1_phi / m

    dq = (
        -sin_a * d1_alpha ** 2 * tan_phi +
        cos_a * d2_alpha * tan_phi +
        2 * cos_a * d1_alpha * d1_phi * sec2_phi +
        sin_a * d2_phi * sec2_phi +
        2 * sin_a * tan_phi * d1_phi ** 2 * sec2_phi
    )
    d3_alpha = (
        dq / n - (q / n) * g * d1_phi -
        (d2_alpha * g * d1_phi + d1_alpha * g_phi * d1_phi ** 2 + d1_alpha * g * d2_phi)
    )

    dr = (-sin_a * d1_alpha ** 2 + cos_a * d2_alpha) / (n * cos_phi) - r * h * d1_phi
    d3_lambda = dr - (
        d2_lambda * h * d1_phi +
        d1_lambda * h_phi * d1_phi ** 2 +
        d1_lambda * h * d2_phi
    )

    s, s2, s3 = distance, distance ** 2 / 2, distance ** 3 / 6
    return (
        phi0 + d1_phi * s + d2_phi * s2 + d3_phi * s3,
        d1_lambda * s + d2_lambda * s2 + d3_lambda * s3,
        alpha0 + d1_alpha * s + d2_alpha * s2 + d3_alpha * s3,
    )


def _solve_direct(
    ellipsoid: Ellipsoid,
    source: GeoCoordinate,
    vector: GeoVector,
) -> Tuple[float, float, float]:
    """Dispatches the direct problem; returns (latitude, longitude, azimuth) in radians"""
    phi0 = source.latitude.to_radian()
    lambda0 = source.longitude.to_radian()
    alpha0 = vector.azimuth.to_radian()
    distance = vector.distance.get_value(ellipsoid.unit)

    if ellipsoid.is_sphere:
        phi, d_lambda, alpha = _direct_sphere(
            ellipsoid.semi_major_axis.value, phi0, alpha0, distance
        )
    else:
        phi, d_lambda, alpha = _direct_ellipsoid(ellipsoid, phi0, alpha0, distance)

    return (
        phi,
        normalize_angle(lambda0 + d_lambda, start=-math.pi),
        normalize_angle(alpha),
    )


def get_coordinate(
    ellipsoid: Ellipsoid,
    source: GeoCoordinate,
    vector: GeoVector,
) -> GeoCoordinate:
    """
    Solves the direct geodetic problem: the position reached by travelling
    along a vector from a source coordinate.

    A sphere is solved in closed form. Other ellipsoids use a third-order series
    in the distance, which is accurate for distances that are small compared to
    the ellipsoid radius (errors grow with the fourth power of the distance).

    Args:
        ellipsoid:
            The reference ellipsoid

        source:
            The starting coordinate

        vector:
            The azimuth and distance of travel

    Returns:
        GeoCoordinate, in the angular units of the source and with its height;
        GeoCoordinate.UNDEFINED if the source or vector is invalid
    """
    _check_not_none(ellipsoid=ellipsoid, source=source, vector=vector)
    if not vector.is_valid or not source.is_valid:
        return GeoCoordinate.UNDEFINED

    if vector.is_null:
        return source

    phi, lam, _ = _solve_direct(ellipsoid, source, vector)
    return GeoCoordinate(
        Angle.from_radian(phi).to_unit(source.latitude.unit),
        Angle.from_radian(lam).to_unit(source.longitude.unit),
        source.height,
    )


def get_destination_azimuth(
    ellipsoid: Ellipsoid,
    source: GeoCoordinate,
    vector: GeoVector,
) -> Angle:
    """
    The forward azimuth on arrival, when travelling along a vector from a source
    coordinate. At a pole, this is the azimuth of continuing along the meridian
    of travel: pi at the north pole and 0 at the south pole.

    Args:
        ellipsoid:
            The reference ellipsoid

        source:
            The starting coordinate

        vector:
            The azimuth and distance of travel

    Returns:
        Angle, in the unit of the vector azimuth
    """
    _check_not_none(ellipsoid=ellipsoid, source=source, vector=vector)
    if not vector.is_valid or not source.is_valid:
        return Angle.UNDEFINED

    if vector.is_null:
        return vector.azimuth

    _, _, alpha = _solve_direct(ellipsoid, source, vector)
    return Angle.from_radian(alpha).to_unit(vector.azimuth.unit)


def get_vector(
    ellipsoid: Ellipsoid,
    source: GeoCoordinate,
    destination: GeoCoordinate,
) -> GeoVector:
    """
    Solves the inverse geodetic problem: the azimuth and distance of the
    shortest path between two coordinates. Only spheres are supported.

    Args:
        ellipsoid:
            The reference sphere

        source:
            The starting coordinate

        destination:
            The target coordinate

    Returns:
        GeoVector, with the distance in the axis unit of the ellipsoid
    """
    _check_not_none(ellipsoid=ellipsoid, source=source, destination=destination)
    if not ellipsoid.is_sphere:
        raise UnsupportedComputationError(
            f'The inverse problem is only supported on a sphere, not on {ellipsoid.name}'
        )

    if not source.is_valid or not destination.is_valid:
        return GeoVector.UNDEFINED

    if source == destination:
        return GeoVector.ZERO

    radius = ellipsoid.semi_major_axis.value
    phi1, lambda1 = source.latitude.to_radian(), source.longitude.to_radian()
    phi2, lambda2 = destination.latitude.to_radian(), destination.longitude.to_radian()

    if abs(phi1 - math.pi / 2) <= COMPUTATION_TOLERANCE:
        return GeoVector(
            Angle.from_radian(math.pi), Length(radius * abs(phi1 - phi2), ellipsoid.unit)
        )

    if abs(phi1 + math.pi / 2) <= COMPUTATION_TOLERANCE:
        return GeoVector(
            Angle.from_radian(0.), Length(radius * abs(phi2 - phi1), ellipsoid.unit)
        )

    d_phi, d_lambda = phi2 - phi1, lambda2 - lambda1

    # Haversine form; stays accurate for nearby points
    var1 = _clamp(
        math.sin(d_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    sigma = 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))

    if abs(math.sin(d_lambda)) <= COMPUTATION_TOLERANCE:
        if math.cos(d_lambda) > 0:
            # Same meridian
            azimuth = 0. if phi2 >= phi1 else math.pi
        else:
            # Opposite meridians; the path goes over the nearer pole
            azimuth = 0. if phi1 + phi2 > 0 else math.pi
    else:
        azimuth = normalize_angle(math.atan2(
            math.sin(d_lambda) * math.cos(phi2),
            math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lambda)
        ))

    return GeoVector(Angle.from_radian(azimuth), Length(radius * sigma, ellipsoid.unit))


def length_of_vertical_curvature(
    ellipsoid: Ellipsoid,
    start_latitude: _LATITUDE,
    end_latitude: _LATITUDE,
    intervals: Optional[int] = None,
):
    """
    Length of the meridian arc between two latitudes.

    The sphere is solved in closed form. Other ellipsoids integrate the meridian
    radius of curvature with Simpson's rule.

    Args:
        ellipsoid:
            The reference ellipsoid

        start_latitude:
            An Angle, or a float in radians

        end_latitude:
            An Angle, or a float in radians

        intervals:
            (Optional) The number of Simpson sub-intervals. Defaults to the
            module-wide setting, see set_integration_intervals.

    Returns:
        A Length in the axis unit if either latitude is an Angle, otherwise a float.
        NaN if either latitude is outside [-pi/2, pi/2].
    """
    _check_not_none(
        ellipsoid=ellipsoid, start_latitude=start_latitude, end_latitude=end_latitude
    )
    as_length = isinstance(start_latitude, Angle) or isinstance(end_latitude, Angle)
    phi1 = start_latitude.to_radian() if isinstance(start_latitude, Angle) else float(start_latitude)
    phi2 = end_latitude.to_radian() if isinstance(end_latitude, Angle) else float(end_latitude)

    if not (_latitude_in_range(phi1) and _latitude_in_range(phi2)):
        value = math.nan
    elif ellipsoid.is_sphere:
        value = ellipsoid.semi_major_axis.value * abs(phi2 - phi1)
    else:
        if intervals is None:
            intervals = _INTEGRATION_INTERVALS
            if intervals == DEFAULT_INTEGRATION_INTERVALS:
                warn_once(
                    f'Meridian arc lengths are integrated with {intervals} Simpson '
                    'intervals by default, which is coarse over long arcs. Use '
                    'set_integration_intervals() to increase accuracy.'
                )

        value = abs(simpsons_method(
            ellipsoid.radius_of_meridian_curvature, phi1, phi2, intervals
        ))

    if as_length:
        return Length(value, ellipsoid.unit)

    return value


def length_of_parallel_curvature(
    ellipsoid: Ellipsoid,
    latitude: _LATITUDE,
    longitude_difference: Union[Angle, float],
    end_longitude: Optional[Union[Angle, float]] = None,
):
    """
    Length of the arc of a parallel spanning a difference in longitude.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude:
            The latitude of the parallel, as an Angle or a float in radians

        longitude_difference:
            The longitude span; or, if end_longitude is given, the start longitude

        end_longitude:
            (Optional) The end longitude, in which case the span is
            end_longitude - longitude_difference

    Returns:
        A Length in the axis unit if the latitude is an Angle, otherwise a float
    """
    _check_not_none(
        ellipsoid=ellipsoid, latitude=latitude, longitude_difference=longitude_difference
    )

    def to_radian(value) -> float:
        return value.to_radian() if isinstance(value, Angle) else float(value)

    d_lambda = to_radian(longitude_difference)
    if end_longitude is not None:
        d_lambda = to_radian(end_longitude) - d_lambda

    return ellipsoid.radius_of_parallel_curvature(latitude) * d_lambda


def get_geocentric_latitude(ellipsoid: Ellipsoid, latitude: _LATITUDE):
    """
    Converts a geodetic latitude to a geocentric latitude, i.e. the angle
    between the equatorial plane and the line to the ellipsoid centre.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude:
            An Angle, or a float in radians

    Returns:
        The same type as latitude; NaN if out of range
    """
    _check_not_none(ellipsoid=ellipsoid, latitude=latitude)
    ratio = (ellipsoid.semi_minor_axis.value / ellipsoid.semi_major_axis.value) ** 2
    return _convert_latitude(ellipsoid, latitude, ratio)


def get_reduced_latitude(ellipsoid: Ellipsoid, latitude: _LATITUDE):
    """
    Converts a geodetic latitude to a reduced (parametric) latitude.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude:
            An Angle, or a float in radians

    Returns:
        The same type as latitude; NaN if out of range
    """
    _check_not_none(ellipsoid=ellipsoid, latitude=latitude)
    ratio = ellipsoid.semi_minor_axis.value / ellipsoid.semi_major_axis.value
    return _convert_latitude(ellipsoid, latitude, ratio)


def _convert_latitude(ellipsoid: Ellipsoid, latitude: _LATITUDE, ratio: float):
    """atan(ratio * tan(latitude)), preserving the type and unit of latitude"""
    phi = latitude.to_radian() if isinstance(latitude, Angle) else float(latitude)
    if not _latitude_in_range(phi):
        value = math.nan
    elif ellipsoid.is_sphere:
        return latitude
    else:
        value = math.atan(ratio * math.tan(phi))

    if isinstance(latitude, Angle):
        return Angle.from_radian(value).to_unit(latitude.unit)

    return value


def distance_of_parallel_curvature(ellipsoid: Ellipsoid, latitude: _LATITUDE):
    """
    Distance of the plane of a parallel from the equatorial plane,
    (1 - e^2) * N * sin(latitude).

    Returns:
        A Length in the axis unit if the latitude is an Angle, otherwise a float
    """
    _check_not_none(ellipsoid=ellipsoid, latitude=latitude)
    radius = ellipsoid.radius_of_prime_vertical_curvature(latitude)
    phi = latitude.to_radian() if isinstance(latitude, Angle) else float(latitude)
    return radius * ((1 - ellipsoid.eccentricity_squared) * math.sin(phi))
