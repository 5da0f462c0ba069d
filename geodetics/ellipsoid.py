"""
Reference ellipsoids (oblate spheroids) and the sphere as their degenerate case
"""

__all__ = ['Ellipsoid', 'GRS80', 'WGS84']

import math
from numbers import Real
from typing import Callable, Iterable, Optional, Union

from geodetics._base import IdentifiedObject
from geodetics._const import GRS80_A, GRS80_INVERSE_F, WGS84_A, WGS84_INVERSE_F
from geodetics.quantities import Angle, Length
from geodetics.units import UnitOfMeasurement
from geodetics.utils.functions import sin2

_LENGTH_LIKE = Union[Length, float]
_LATITUDE = Union[Angle, float]


def _as_length(value: _LENGTH_LIKE, name: str) -> Length:
    """Numbers are taken as metres"""
    if value is None:
        raise ValueError(f'{name} must not be None')

    if isinstance(value, Length):
        return value

    if isinstance(value, Real):
        return Length.from_metre(value)

    raise ValueError(f'{name} must be a Length or a number, got {type(value).__name__}')


def _check_positive(value: Length, name: str):
    if not value.value > 0:
        raise ValueError(f'{name} must be greater than 0, got {value}')


def _check_real(value: Optional[float], name: str):
    if value is None:
        raise ValueError(f'{name} must not be None')

    if not isinstance(value, Real) or math.isnan(value):
        raise ValueError(f'{name} must be a real number, got {value}')


class Ellipsoid(IdentifiedObject):
    """
    A reference ellipsoid, defined by its semi-major axis and flattening.

    Prefer the factory class methods (from_inverse_flattening, from_semi_minor_axis,
    from_flattening, from_eccentricity, from_sphere) over calling the constructor
    directly; they validate their inputs and all resolve to the same derivation,
    so equivalent parameterizations yield equal ellipsoids.

    A sphere is stored with flattening 0, inverse flattening 1 and eccentricity 0.

    Args:
        identifier:
            The authority identifier, e.g. 'EPSG::7030'

        name:
            The ellipsoid name, e.g. 'WGS 84'

        semi_major_axis:
            The equatorial radius

        semi_minor_axis:
            The polar radius, in the unit of the semi-major axis

        flattening:
            (a - b) / a; 0 for a sphere
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        semi_major_axis: Length,
        semi_minor_axis: Length,
        flattening: float,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        super().__init__(identifier, name, remarks, aliases)
        self._semi_major_axis = semi_major_axis
        self._semi_minor_axis = semi_minor_axis
        self._is_sphere = flattening == 0
        self._flattening = float(flattening)

        if self._is_sphere:
            self._inverse_flattening = 1.
            self._eccentricity_squared = 0.
            self._eccentricity = 0.
            self._second_eccentricity_squared = 0.
            self._second_eccentricity = 0.
            self._radius_of_authalic_sphere = semi_major_axis
            return

        e2 = 2 * flattening - flattening ** 2
        e = math.sqrt(e2)
        self._inverse_flattening = 1 / flattening
        self._eccentricity_squared = e2
        self._eccentricity = e
        self._second_eccentricity_squared = e2 / (1 - e2)
        self._second_eccentricity = math.sqrt(self._second_eccentricity_squared)
        self._radius_of_authalic_sphere = Length(
            semi_major_axis.value * math.sqrt(
                0.5 * (1 + (1 - e2) * math.atanh(e) / e)
            ),
            semi_major_axis.unit
        )

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.identifier == other.identifier and
            self._semi_major_axis == other._semi_major_axis and
            self._semi_minor_axis == other._semi_minor_axis
        )

    def __hash__(self):
        return hash((self.identifier, self._semi_major_axis, self._semi_minor_axis))

    def __repr__(self):
        if self._is_sphere:
            return f'<Ellipsoid({self.identifier}, {self.name}, {self._semi_major_axis})>'

        return (
            f'<Ellipsoid({self.identifier}, {self.name}, {self._semi_major_axis}, '
            f'1/{self._inverse_flattening})>'
        )

    @property
    def semi_major_axis(self) -> Length:
        return self._semi_major_axis

    @property
    def semi_minor_axis(self) -> Length:
        return self._semi_minor_axis

    @property
    def unit(self) -> UnitOfMeasurement:
        """The unit both axes, and every length derived from them, are expressed in"""
        return self._semi_major_axis.unit

    @property
    def flattening(self) -> float:
        return self._flattening

    @property
    def inverse_flattening(self) -> float:
        return self._inverse_flattening

    @property
    def eccentricity(self) -> float:
        return self._eccentricity

    @property
    def eccentricity_squared(self) -> float:
        return self._eccentricity_squared

    @property
    def second_eccentricity(self) -> float:
        return self._second_eccentricity

    @property
    def second_eccentricity_squared(self) -> float:
        return self._second_eccentricity_squared

    @property
    def radius_of_authalic_sphere(self) -> Length:
        """Radius of the sphere having the same surface area as the ellipsoid"""
        return self._radius_of_authalic_sphere

    @property
    def is_sphere(self) -> bool:
        return self._is_sphere

    @classmethod
    def from_semi_minor_axis(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: _LENGTH_LIKE,
        semi_minor_axis: _LENGTH_LIKE,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ) -> 'Ellipsoid':
        """
        Creates an ellipsoid from its two axes.

        Args:
            identifier:
                The authority identifier

            name:
                The ellipsoid name

            semi_major_axis:
                The equatorial radius, as a Length or a number of metres

            semi_minor_axis:
                The polar radius, in the same unit as the semi-major axis

        Returns:
            Ellipsoid
        """
        a = _as_length(semi_major_axis, 'semi_major_axis')
        b = _as_length(semi_minor_axis, 'semi_minor_axis')
        _check_positive(a, 'semi_major_axis')
        _check_positive(b, 'semi_minor_axis')
        if a.unit != b.unit:
            raise ValueError(
                f'Both axes must share a unit; got {a.unit.name} and {b.unit.name}'
            )

        if b.value > a.value:
            raise ValueError('semi_minor_axis must not be greater than semi_major_axis')

        return cls(
            identifier, name, a, b, (a.value - b.value) / a.value,
            remarks=remarks, aliases=aliases
        )

    @classmethod
    def from_inverse_flattening(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: _LENGTH_LIKE,
        inverse_flattening: float,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ) -> 'Ellipsoid':
        """
        Creates an ellipsoid from its semi-major axis and inverse flattening,
        the form most ellipsoids are published in. An inverse flattening of
        exactly 1 denotes a sphere.
        """
        a = _as_length(semi_major_axis, 'semi_major_axis')
        _check_positive(a, 'semi_major_axis')
        _check_real(inverse_flattening, 'inverse_flattening')
        if inverse_flattening < 1:
            raise ValueError(
                f'inverse_flattening must be at least 1, got {inverse_flattening}'
            )

        if inverse_flattening == 1:
            return cls.from_sphere(identifier, name, a, remarks=remarks, aliases=aliases)

        flattening = 1 / inverse_flattening
        return cls(
            identifier, name, a, Length(a.value * (1 - flattening), a.unit), flattening,
            remarks=remarks, aliases=aliases
        )

    @classmethod
    def from_flattening(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: _LENGTH_LIKE,
        flattening: float,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ) -> 'Ellipsoid':
        """
        Creates an ellipsoid from its semi-major axis and flattening. The
        flattening must lie in (0, 1]; 1 denotes a sphere.
        """
        a = _as_length(semi_major_axis, 'semi_major_axis')
        _check_positive(a, 'semi_major_axis')
        _check_real(flattening, 'flattening')
        if not 0 < flattening <= 1:
            raise ValueError(f'flattening must be in (0, 1], got {flattening}')

        if flattening == 1:
            return cls.from_sphere(identifier, name, a, remarks=remarks, aliases=aliases)

        return cls(
            identifier, name, a, Length(a.value * (1 - flattening), a.unit), flattening,
            remarks=remarks, aliases=aliases
        )

    @classmethod
    def from_eccentricity(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: _LENGTH_LIKE,
        eccentricity: float,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ) -> 'Ellipsoid':
        """
        Creates an ellipsoid from its semi-major axis and (first) eccentricity.
        The eccentricity must lie in (0, 1]; 1 denotes a sphere.
        """
        a = _as_length(semi_major_axis, 'semi_major_axis')
        _check_positive(a, 'semi_major_axis')
        _check_real(eccentricity, 'eccentricity')
        if not 0 < eccentricity <= 1:
            raise ValueError(f'eccentricity must be in (0, 1], got {eccentricity}')

        if eccentricity == 1:
            return cls.from_sphere(identifier, name, a, remarks=remarks, aliases=aliases)

        flattening = 1 - math.sqrt(1 - eccentricity ** 2)
        return cls(
            identifier, name, a, Length(a.value * (1 - flattening), a.unit), flattening,
            remarks=remarks, aliases=aliases
        )

    @classmethod
    def from_sphere(
        cls,
        identifier: str,
        name: str,
        semi_axis: _LENGTH_LIKE,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ) -> 'Ellipsoid':
        """Creates a sphere of the given radius"""
        a = _as_length(semi_axis, 'semi_axis')
        _check_positive(a, 'semi_axis')
        return cls(identifier, name, a, a, 0., remarks=remarks, aliases=aliases)

    def to_unit(self, unit: Union[UnitOfMeasurement, str]) -> 'Ellipsoid':
        """
        Re-expresses the ellipsoid axes in another length unit.

        Args:
            unit:
                A length unit, or its symbol

        Returns:
            Ellipsoid; this very object if the unit is unchanged
        """
        semi_major_axis = self._semi_major_axis.to_unit(unit)
        if semi_major_axis is self._semi_major_axis:
            return self

        if self._is_sphere:
            return Ellipsoid.from_sphere(
                self.identifier, self.name, semi_major_axis,
                remarks=self.remarks, aliases=self.aliases
            )

        return Ellipsoid.from_inverse_flattening(
            self.identifier, self.name, semi_major_axis, self._inverse_flattening,
            remarks=self.remarks, aliases=self.aliases
        )

    def _evaluate(self, latitude: _LATITUDE, formula: Callable[[float], float]):
        """
        Evaluates a radius formula at a latitude. Angles yield a Length in the
        axis unit, plain radians yield a float. Latitudes outside [-pi/2, pi/2]
        yield NaN.
        """
        if latitude is None:
            raise ValueError('latitude must not be None')

        phi = latitude.to_radian() if isinstance(latitude, Angle) else float(latitude)
        value = formula(phi) if -math.pi / 2 <= phi <= math.pi / 2 else math.nan

        if isinstance(latitude, Angle):
            return Length(value, self.unit)

        return value

    def _meridian_radius(self, phi: float) -> float:
        e2 = self._eccentricity_squared
        return self._semi_major_axis.value * (1 - e2) / (1 - e2 * sin2(phi)) ** 1.5

    def _prime_vertical_radius(self, phi: float) -> float:
        return self._semi_major_axis.value / math.sqrt(
            1 - self._eccentricity_squared * sin2(phi)
        )

    def radius_of_meridian_curvature(self, latitude: _LATITUDE):
        """
        Radius of curvature in the meridian (rho) at a latitude.

        Args:
            latitude:
                An Angle, or a float in radians

        Returns:
            A Length in the axis unit for an Angle, otherwise a float
        """
        return self._evaluate(latitude, self._meridian_radius)

    def radius_of_prime_vertical_curvature(self, latitude: _LATITUDE):
        """
        Radius of curvature in the prime vertical (nu) at a latitude.

        Args:
            latitude:
                An Angle, or a float in radians

        Returns:
            A Length in the axis unit for an Angle, otherwise a float
        """
        return self._evaluate(latitude, self._prime_vertical_radius)

    def radius_of_parallel_curvature(self, latitude: _LATITUDE):
        """Radius of the parallel circle at a latitude, i.e. nu * cos(latitude)"""
        return self._evaluate(
            latitude, lambda phi: self._prime_vertical_radius(phi) * math.cos(phi)
        )

    def radius_of_conformal_sphere(self, latitude: _LATITUDE):
        """Radius of the conformal sphere at a latitude, i.e. sqrt(rho * nu)"""
        return self._evaluate(
            latitude,
            lambda phi: math.sqrt(self._meridian_radius(phi) * self._prime_vertical_radius(phi))
        )


WGS84 = Ellipsoid.from_inverse_flattening(
    'EPSG::7030', 'WGS 84', Length.from_metre(WGS84_A), WGS84_INVERSE_F,
    aliases=['WGS84']
)
GRS80 = Ellipsoid.from_inverse_flattening(
    'EPSG::7019', 'GRS 1980', Length.from_metre(GRS80_A), GRS80_INVERSE_F,
    aliases=['GRS80', 'International 1979']
)
