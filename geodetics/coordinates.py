"""
Representation of positions on an ellipsoid, displacements between them, and
positions on a projected plane
"""

__all__ = ['GeoCoordinate', 'GeoVector', 'ProjectedCoordinate']

import math
from numbers import Real
from typing import Optional, Tuple, Union

from geodetics.quantities import Angle, Length
from geodetics.utils.functions import normalize_angle, round_half_up

_ANGLE_LIKE = Union[Angle, float]
_LENGTH_LIKE = Union[Length, float]
_DMS = Tuple[int, int, float, str]


def _as_angle(value: _ANGLE_LIKE, name: str) -> Angle:
    """Numbers are taken as radians"""
    if value is None:
        raise ValueError(f'{name} must not be None')

    if isinstance(value, Angle):
        return value

    if isinstance(value, Real):
        return Angle.from_radian(value)

    raise ValueError(f'{name} must be an Angle or a number, got {type(value).__name__}')


def _as_length(value: _LENGTH_LIKE, name: str) -> Length:
    """Numbers are taken as metres"""
    if value is None:
        raise ValueError(f'{name} must not be None')

    if isinstance(value, Length):
        return value

    if isinstance(value, Real):
        return Length.from_metre(value)

    raise ValueError(f'{name} must be a Length or a number, got {type(value).__name__}')


class GeoCoordinate:
    """
    A geographic position (latitude, longitude, ellipsoidal height). Immutable.

    Args:
        latitude:
            An Angle, or a float in radians

        longitude:
            An Angle, or a float in radians

        height:
            (Default 0 m) A Length, or a float in metres

    Coordinates are not wrapped on construction; use to_globe_valid() to bring
    a coordinate that crossed a pole or the antimeridian back into range.
    """

    __slots__ = ('_latitude', '_longitude', '_height')

    UNDEFINED: 'GeoCoordinate'

    def __init__(
        self,
        latitude: _ANGLE_LIKE,
        longitude: _ANGLE_LIKE,
        height: Optional[_LENGTH_LIKE] = None,
    ):
        self._latitude = _as_angle(latitude, 'latitude')
        self._longitude = _as_angle(longitude, 'longitude')
        self._height = Length.ZERO if height is None else _as_length(height, 'height')

    def __eq__(self, other):
        if not isinstance(other, GeoCoordinate):
            return False

        return (
            self._latitude == other._latitude and
            self._longitude == other._longitude and
            self._height == other._height
        )

    def __hash__(self):
        return hash((self._latitude, self._longitude, self._height))

    def __repr__(self):
        return f'<GeoCoordinate({self._latitude}, {self._longitude}, {self._height})>'

    def __str__(self):
        if not self.is_valid:
            return 'INVALID'

        if self.is_empty:
            return 'EMPTY'

        return f'({self._latitude}, {self._longitude}, {self._height})'

    @property
    def latitude(self) -> Angle:
        return self._latitude

    @property
    def longitude(self) -> Angle:
        return self._longitude

    @property
    def height(self) -> Length:
        return self._height

    @property
    def is_valid(self) -> bool:
        """True if latitude is within [-pi/2, pi/2] and longitude within [-pi, pi]"""
        return (
            abs(self._latitude.to_radian()) <= math.pi / 2 and
            abs(self._longitude.to_radian()) <= math.pi and
            self._height.is_valid
        )

    @property
    def is_empty(self) -> bool:
        return (
            self._latitude.value == 0 and
            self._longitude.value == 0 and
            self._height.value == 0
        )

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float, height: float = 0.):
        """Creates a GeoCoordinate from decimal degrees and a height in metres"""
        return cls(
            Angle.from_degree(latitude),
            Angle.from_degree(longitude),
            Length.from_metre(height),
        )

    @classmethod
    def from_dms(cls, lat: _DMS, lon: _DMS, height: float = 0.):
        """
        Creates a GeoCoordinate from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            GeoCoordinate
        """
        def convert(dms: _DMS) -> float:
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls.from_degrees(convert(lat), convert(lon), height)

    def to_dms(self) -> Tuple[_DMS, _DMS]:
        """
        Converts latitude and longitude to tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted values as ((lat dms), (lon dms))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            # Round the total first, so 59.999999 seconds carry into the minutes
            total_seconds = round_half_up(abs(dd) * 3600, 5)
            minutes, seconds = divmod(total_seconds, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        lat = self._latitude.get_value('degree')
        lon = self._longitude.get_value('degree')
        return (
            (*convert(lat), 'N' if lat >= 0 else 'S'),
            (*convert(lon), 'E' if lon >= 0 else 'W'),
        )

    def to_globe_valid(self) -> 'GeoCoordinate':
        """
        Wraps a coordinate that went over a pole or across the antimeridian back
        onto the globe. Latitude ends up in [-pi/2, pi/2] and longitude in
        [-pi, pi), both keeping their units.

        Returns:
            GeoCoordinate; this very object if no wrapping was necessary
        """
        lat, lon = self._latitude.to_radian(), self._longitude.to_radian()
        if not (math.isfinite(lat) and math.isfinite(lon)):
            return GeoCoordinate.UNDEFINED

        if -math.pi / 2 <= lat <= math.pi / 2 and -math.pi <= lon < math.pi:
            return self

        lat = normalize_angle(lat, start=-math.pi)
        if not -math.pi / 2 <= lat <= math.pi / 2:
            # Crosses one of the poles
            lat = math.pi - lat if lat > 0 else -math.pi - lat
            lon = lon + math.pi

        # Crosses the antimeridian
        lon = normalize_angle(lon, start=-math.pi)

        return GeoCoordinate(
            Angle.from_radian(lat).to_unit(self._latitude.unit),
            Angle.from_radian(lon).to_unit(self._longitude.unit),
            self._height,
        )


class GeoVector:
    """
    A displacement on an ellipsoid: a forward azimuth (clockwise from north)
    and a distance along the surface. Immutable.

    Args:
        azimuth:
            An Angle, or a float in radians. Normalized into [0, 2*pi), keeping its unit.

        distance:
            A Length, or a float in metres. A negative distance is stored as its
            absolute value, with the azimuth turned around.
    """

    __slots__ = ('_azimuth', '_distance')

    ZERO: 'GeoVector'
    UNDEFINED: 'GeoVector'

    def __init__(self, azimuth: _ANGLE_LIKE, distance: _LENGTH_LIKE):
        azimuth = _as_angle(azimuth, 'azimuth')
        distance = _as_length(distance, 'distance')
        unit = azimuth.unit
        turn = Angle.CIRCLE.get_value(unit)

        value = azimuth.value
        if distance.value < 0:
            value += turn / 2
            distance = -distance

        self._azimuth = Angle(normalize_angle(value, turn), unit)
        self._distance = distance

    def __eq__(self, other):
        if not isinstance(other, GeoVector):
            return False

        return self._azimuth == other._azimuth and self._distance == other._distance

    def __hash__(self):
        return hash((self._azimuth, self._distance))

    def __repr__(self):
        return f'<GeoVector({self._azimuth}, {self._distance})>'

    def __str__(self):
        if not self.is_valid:
            return 'INVALID'

        if self.is_null:
            return 'NULL'

        return f'({self._azimuth}, {self._distance})'

    @property
    def azimuth(self) -> Angle:
        return self._azimuth

    @property
    def distance(self) -> Length:
        return self._distance

    @property
    def is_null(self) -> bool:
        return self._distance.value == 0

    @property
    def is_valid(self) -> bool:
        return self._azimuth.is_valid and self._distance.is_valid


class ProjectedCoordinate:
    """
    A position on a projected plane (easting, northing, and optional height),
    as produced by map projections. Immutable.

    Args:
        x:
            The easting, as a Length or a float in metres

        y:
            The northing, as a Length or a float in metres

        z:
            (Default 0 m) The height
    """

    __slots__ = ('_x', '_y', '_z')

    UNDEFINED: 'ProjectedCoordinate'

    def __init__(self, x: _LENGTH_LIKE, y: _LENGTH_LIKE, z: Optional[_LENGTH_LIKE] = None):
        self._x = _as_length(x, 'x')
        self._y = _as_length(y, 'y')
        self._z = Length.ZERO if z is None else _as_length(z, 'z')

    def __eq__(self, other):
        if not isinstance(other, ProjectedCoordinate):
            return False

        return self._x == other._x and self._y == other._y and self._z == other._z

    def __hash__(self):
        return hash((self._x, self._y, self._z))

    def __repr__(self):
        return f'<ProjectedCoordinate({self._x}, {self._y}, {self._z})>'

    def __str__(self):
        if not self.is_valid:
            return 'INVALID'

        return f'({self._x}, {self._y}, {self._z})'

    @property
    def x(self) -> Length:
        return self._x

    @property
    def y(self) -> Length:
        return self._y

    @property
    def z(self) -> Length:
        return self._z

    @property
    def is_valid(self) -> bool:
        return self._x.is_valid and self._y.is_valid and self._z.is_valid


GeoCoordinate.UNDEFINED = GeoCoordinate(math.nan, math.nan, math.nan)
GeoVector.ZERO = GeoVector(0., 0.)
GeoVector.UNDEFINED = GeoVector(math.nan, math.nan)
ProjectedCoordinate.UNDEFINED = ProjectedCoordinate(math.nan, math.nan, math.nan)
