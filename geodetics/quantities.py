"""
Unit-carrying scalar quantities: angles and lengths
"""

__all__ = [
    'Angle', 'Length',
    'ANTARCTIC_CIRCLE', 'ARCTIC_CIRCLE', 'EQUATOR', 'NORTH_POLE', 'SOUTH_POLE',
    'TROPIC_OF_CANCER', 'TROPIC_OF_CAPRICORN',
]

import math
from numbers import Real
import sys
from typing import Iterable, Optional, TypeVar, Union

from geodetics import units
from geodetics.units import UnitOfMeasurement, UnitQuantityType, get_unit

_MEASURE = TypeVar('_MEASURE', bound='_Measure')
_UNIT_LIKE = Union[UnitOfMeasurement, str]


class _Measure:
    """
    Shared behavior of Angle and Length: a magnitude bound to a unit of a fixed
    quantity type. Comparison, hashing and mixed-unit arithmetic all go through
    the base value, i.e. the magnitude expressed in the SI base unit.
    """

    __slots__ = ('_value', '_unit')

    _QUANTITY_TYPE: UnitQuantityType
    _BASE_UNIT: UnitOfMeasurement

    def __init__(self, value: float, unit: Optional[_UNIT_LIKE] = None):
        self._value = float(value)
        self._unit = self._BASE_UNIT if unit is None else self._check_unit(unit)

    @classmethod
    def _check_unit(cls, unit: Optional[_UNIT_LIKE]) -> UnitOfMeasurement:
        if unit is None:
            raise ValueError('unit of measurement must not be None')

        if isinstance(unit, str):
            unit = get_unit(unit)

        if not isinstance(unit, UnitOfMeasurement):
            raise ValueError(f'Expected a UnitOfMeasurement, got {type(unit).__name__}')

        if unit.quantity_type != cls._QUANTITY_TYPE:
            raise ValueError(
                f'{cls.__name__} requires a unit of type {cls._QUANTITY_TYPE.value}, '
                f'got {unit.name} ({unit.quantity_type.value})'
            )

        return unit

    def _is_same_kind(self, other) -> bool:
        return isinstance(other, _Measure) and other._QUANTITY_TYPE == self._QUANTITY_TYPE

    @property
    def value(self) -> float:
        """The magnitude, expressed in this quantity's own unit"""
        return self._value

    @property
    def unit(self) -> UnitOfMeasurement:
        return self._unit

    @property
    def base_value(self) -> float:
        """The magnitude expressed in the base unit (radian or metre)"""
        return self._value * self._unit.base_multiple

    @property
    def is_valid(self) -> bool:
        return not math.isnan(self._value)

    def get_value(self, unit: _UNIT_LIKE) -> float:
        """
        Returns the magnitude of this quantity expressed in another unit.

        Args:
            unit:
                A unit of the same quantity type, or its symbol

        Returns:
            float
        """
        unit = self._check_unit(unit)
        if unit == self._unit:
            return self._value

        return self.base_value / unit.base_multiple

    def to_unit(self: _MEASURE, unit: _UNIT_LIKE) -> _MEASURE:
        """
        Re-expresses this quantity in another unit. Converting to the current unit
        returns this very object, so no rounding is introduced.

        Args:
            unit:
                A unit of the same quantity type, or its symbol

        Returns:
            A quantity of the same type
        """
        unit = self._check_unit(unit)
        if unit == self._unit:
            return self

        return self.__class__(self.base_value / unit.base_multiple, unit)

    def format_in(self, unit: _UNIT_LIKE) -> str:
        """String representation of this quantity in another unit, e.g. '90.0°'"""
        return str(self.to_unit(unit))

    def __add__(self: _MEASURE, other: _MEASURE) -> _MEASURE:
        if not self._is_same_kind(other):
            return NotImplemented

        if self._unit == other._unit:
            return self.__class__(self._value + other._value, self._unit)

        return self.__class__(self.base_value + other.base_value, self._BASE_UNIT)

    def __sub__(self: _MEASURE, other: _MEASURE) -> _MEASURE:
        if not self._is_same_kind(other):
            return NotImplemented

        if self._unit == other._unit:
            return self.__class__(self._value - other._value, self._unit)

        return self.__class__(self.base_value - other.base_value, self._BASE_UNIT)

    def __neg__(self: _MEASURE) -> _MEASURE:
        return self.__class__(-self._value, self._unit)

    def __mul__(self: _MEASURE, scalar: float) -> _MEASURE:
        if not isinstance(scalar, Real):
            return NotImplemented

        return self.__class__(self._value * scalar, self._unit)

    __rmul__ = __mul__

    def __truediv__(self: _MEASURE, scalar: float) -> _MEASURE:
        if not isinstance(scalar, Real):
            return NotImplemented

        return self.__class__(self._value / scalar, self._unit)

    def __eq__(self, other):
        if not self._is_same_kind(other):
            return False

        return self.base_value == other.base_value

    def __ne__(self, other):
        return not self == other

    def __lt__(self, other):
        if not self._is_same_kind(other):
            return NotImplemented

        return self.base_value < other.base_value

    def __le__(self, other):
        if not self._is_same_kind(other):
            return NotImplemented

        return self.base_value <= other.base_value

    def __gt__(self, other):
        if not self._is_same_kind(other):
            return NotImplemented

        return self.base_value > other.base_value

    def __ge__(self, other):
        if not self._is_same_kind(other):
            return NotImplemented

        return self.base_value >= other.base_value

    def __hash__(self):
        return hash((self._QUANTITY_TYPE, self.base_value))

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._value}, {self._unit.name})>'

    def __str__(self):
        return f'{self._value}{self._unit.symbol}'

    @classmethod
    def max(cls, values: Iterable):
        """
        The largest of a collection of quantities, in the base unit. An empty
        collection yields the undefined (NaN) quantity.
        """
        if values is None:
            raise ValueError(f'{cls.__name__} collection must not be None')

        base_values = [x.base_value for x in values]
        if not base_values:
            return cls(math.nan, cls._BASE_UNIT)

        return cls(max(base_values), cls._BASE_UNIT)

    @classmethod
    def min(cls, values: Iterable):
        """
        The smallest of a collection of quantities, in the base unit. An empty
        collection yields the undefined (NaN) quantity.
        """
        if values is None:
            raise ValueError(f'{cls.__name__} collection must not be None')

        base_values = [x.base_value for x in values]
        if not base_values:
            return cls(math.nan, cls._BASE_UNIT)

        return cls(min(base_values), cls._BASE_UNIT)


class Angle(_Measure):
    """
    An angle bound to an angular unit of measurement.

    Args:
        value:
            The magnitude

        unit:
            (Default radian) An angular UnitOfMeasurement, or its symbol/identifier

    Angles compare equal when they denote the same physical angle, whatever their
    units. As with floats, an undefined (NaN) angle never equals anything, itself
    included.
    """

    __slots__ = ()

    _QUANTITY_TYPE = UnitQuantityType.ANGLE
    _BASE_UNIT = units.RADIAN

    ZERO: 'Angle'
    UNDEFINED: 'Angle'
    POSITIVE_INFINITY: 'Angle'
    NEGATIVE_INFINITY: 'Angle'
    EPSILON: 'Angle'
    HALF_CIRCLE: 'Angle'
    CIRCLE: 'Angle'

    def to_radian(self) -> float:
        """The angle in radians"""
        return self.base_value

    @classmethod
    def from_radian(cls, value: float) -> 'Angle':
        return cls(value, units.RADIAN)

    @classmethod
    def from_degree(
        cls,
        degree: float,
        arc_minute: Optional[float] = None,
        arc_second: Optional[float] = None,
    ) -> 'Angle':
        """
        Creates an angle in degrees, optionally from degree/minute/second parts.
        The sign of the degree part applies to the whole value, e.g.
        from_degree(-10, 30) is -10.5 degrees.
        """
        if arc_minute is None and arc_second is None:
            return cls(degree, units.DEGREE)

        fraction = (arc_minute or 0.) / 60 + (arc_second or 0.) / 3600
        if math.copysign(1., degree) < 0:
            return cls(degree - fraction, units.DEGREE)

        return cls(degree + fraction, units.DEGREE)

    @classmethod
    def from_arc_minute(cls, value: float) -> 'Angle':
        return cls(value, units.ARC_MINUTE)

    @classmethod
    def from_arc_second(cls, value: float) -> 'Angle':
        return cls(value, units.ARC_SECOND)

    @classmethod
    def from_centesimal_minute(cls, value: float) -> 'Angle':
        return cls(value, units.CENTESIMAL_MINUTE)

    @classmethod
    def from_centesimal_second(cls, value: float) -> 'Angle':
        return cls(value, units.CENTESIMAL_SECOND)

    @classmethod
    def from_gon(cls, value: float) -> 'Angle':
        return cls(value, units.GON)

    @classmethod
    def from_grad(cls, value: float) -> 'Angle':
        return cls(value, units.GRAD)

    @classmethod
    def from_micro_radian(cls, value: float) -> 'Angle':
        return cls(value, units.MICRO_RADIAN)

    @classmethod
    def from_milliarc_second(cls, value: float) -> 'Angle':
        return cls(value, units.MILLIARC_SECOND)


class Length(_Measure):
    """
    A length bound to a linear unit of measurement.

    Args:
        value:
            The magnitude

        unit:
            (Default metre) A length UnitOfMeasurement, or its symbol/identifier
    """

    __slots__ = ()

    _QUANTITY_TYPE = UnitQuantityType.LENGTH
    _BASE_UNIT = units.METRE

    ZERO: 'Length'
    UNDEFINED: 'Length'
    POSITIVE_INFINITY: 'Length'
    NEGATIVE_INFINITY: 'Length'
    EPSILON: 'Length'

    def to_metre(self) -> float:
        """The length in metres"""
        return self.base_value

    @classmethod
    def from_metre(cls, value: float) -> 'Length':
        return cls(value, units.METRE)

    @classmethod
    def from_kilometre(cls, value: float) -> 'Length':
        return cls(value, units.KILOMETRE)

    @classmethod
    def from_centimetre(cls, value: float) -> 'Length':
        return cls(value, units.CENTIMETRE)

    @classmethod
    def from_millimetre(cls, value: float) -> 'Length':
        return cls(value, units.MILLIMETRE)

    @classmethod
    def from_foot(cls, value: float) -> 'Length':
        return cls(value, units.FOOT)

    @classmethod
    def from_us_survey_foot(cls, value: float) -> 'Length':
        return cls(value, units.US_SURVEY_FOOT)

    @classmethod
    def from_yard(cls, value: float) -> 'Length':
        return cls(value, units.YARD)

    @classmethod
    def from_fathom(cls, value: float) -> 'Length':
        return cls(value, units.FATHOM)

    @classmethod
    def from_statute_mile(cls, value: float) -> 'Length':
        return cls(value, units.STATUTE_MILE)

    @classmethod
    def from_nautical_mile(cls, value: float) -> 'Length':
        return cls(value, units.NAUTICAL_MILE)


Angle.ZERO = Angle.from_radian(0.)
Angle.UNDEFINED = Angle.from_radian(math.nan)
Angle.POSITIVE_INFINITY = Angle.from_radian(math.inf)
Angle.NEGATIVE_INFINITY = Angle.from_radian(-math.inf)
Angle.EPSILON = Angle.from_radian(sys.float_info.min)
Angle.HALF_CIRCLE = Angle.from_degree(180.)
Angle.CIRCLE = Angle.from_degree(360.)

Length.ZERO = Length.from_metre(0.)
Length.UNDEFINED = Length.from_metre(math.nan)
Length.POSITIVE_INFINITY = Length.from_metre(math.inf)
Length.NEGATIVE_INFINITY = Length.from_metre(-math.inf)
Length.EPSILON = Length.from_metre(sys.float_info.min)

# Named latitudes
EQUATOR = Angle.from_degree(0.)
NORTH_POLE = Angle.from_degree(90.)
SOUTH_POLE = Angle.from_degree(-90.)
ARCTIC_CIRCLE = Angle.from_degree(66.5622)
ANTARCTIC_CIRCLE = Angle.from_degree(-66.5622)
TROPIC_OF_CANCER = Angle.from_degree(23.43777778)
TROPIC_OF_CAPRICORN = Angle.from_degree(-23.43777778)
