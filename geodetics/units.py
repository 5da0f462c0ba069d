"""
Units of measurement and the read-only registry of the units geodetics knows by name
"""

__all__ = [
    'UnitOfMeasurement', 'UnitQuantityType', 'UNITS', 'get_unit',
    'ARC_MINUTE', 'ARC_SECOND', 'CENTESIMAL_MINUTE', 'CENTESIMAL_SECOND', 'CENTIMETRE',
    'DEGREE', 'FATHOM', 'FOOT', 'GON', 'GRAD', 'KILOMETRE', 'METRE', 'MICRO_RADIAN',
    'MILLIARC_SECOND', 'MILLIMETRE', 'NAUTICAL_MILE', 'PARTS_PER_MILLION', 'RADIAN',
    'SECOND', 'STATUTE_MILE', 'UNITY', 'US_SURVEY_FOOT', 'YARD',
]

from enum import Enum
import math
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from geodetics._base import IdentifiedObject


class UnitQuantityType(Enum):
    """The kind of quantity a unit measures"""
    LENGTH = 'length'
    ANGLE = 'angle'
    TIME = 'time'
    SCALE = 'scale'


class UnitOfMeasurement(IdentifiedObject):
    """
    A unit of measurement, defined by its multiple of the SI base unit of its
    quantity type (metre for lengths, radian for angles, second for time, unity
    for scales).

    Args:
        identifier:
            The authority identifier, e.g. 'EPSG::9001'

        name:
            The unit name, e.g. 'metre'

        symbol:
            The unit symbol, e.g. 'm'

        base_multiple:
            The size of one unit expressed in the base unit. Must be nonzero.

        quantity_type:
            The UnitQuantityType measured by the unit
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        symbol: str,
        base_multiple: float,
        quantity_type: UnitQuantityType,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        super().__init__(identifier, name, remarks, aliases)
        if base_multiple == 0:
            raise ValueError(f'The base multiple of unit {name} must not be 0.')

        if not isinstance(quantity_type, UnitQuantityType):
            raise ValueError(f'Unrecognized quantity type: {quantity_type}')

        self._symbol = symbol
        self._base_multiple = float(base_multiple)
        self._quantity_type = quantity_type

    def __eq__(self, other):
        if not isinstance(other, UnitOfMeasurement):
            return False

        return (
            self.identifier == other.identifier and
            self._base_multiple == other._base_multiple and
            self._quantity_type == other._quantity_type
        )

    def __hash__(self):
        return hash((self.identifier, self._base_multiple, self._quantity_type))

    def __repr__(self):
        return f'<UnitOfMeasurement({self.name}, {self._symbol}, {self._base_multiple})>'

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def base_multiple(self) -> float:
        return self._base_multiple

    @property
    def quantity_type(self) -> UnitQuantityType:
        return self._quantity_type


# Angular units
RADIAN = UnitOfMeasurement('EPSG::9101', 'radian', 'rad', 1., UnitQuantityType.ANGLE)
DEGREE = UnitOfMeasurement('EPSG::9102', 'degree', '°', math.pi / 180, UnitQuantityType.ANGLE)
ARC_MINUTE = UnitOfMeasurement('EPSG::9103', 'arc-minute', "'", math.pi / 10_800, UnitQuantityType.ANGLE)
ARC_SECOND = UnitOfMeasurement('EPSG::9104', 'arc-second', '"', math.pi / 648_000, UnitQuantityType.ANGLE)
GRAD = UnitOfMeasurement('EPSG::9105', 'grad', 'gr', math.pi / 200, UnitQuantityType.ANGLE)
GON = UnitOfMeasurement('EPSG::9106', 'gon', 'g', math.pi / 200, UnitQuantityType.ANGLE)
MICRO_RADIAN = UnitOfMeasurement('EPSG::9109', 'microradian', 'µrad', 1e-6, UnitQuantityType.ANGLE)
CENTESIMAL_MINUTE = UnitOfMeasurement(
    'EPSG::9112', 'centesimal minute', 'c', math.pi / 20_000, UnitQuantityType.ANGLE
)
CENTESIMAL_SECOND = UnitOfMeasurement(
    'EPSG::9113', 'centesimal second', 'cc', math.pi / 2_000_000, UnitQuantityType.ANGLE
)
MILLIARC_SECOND = UnitOfMeasurement(
    'EPSG::1031', 'milliarc-second', 'mas', math.pi / 648_000_000, UnitQuantityType.ANGLE
)

# Length units
METRE = UnitOfMeasurement('EPSG::9001', 'metre', 'm', 1., UnitQuantityType.LENGTH, aliases=['meter'])
KILOMETRE = UnitOfMeasurement('EPSG::9036', 'kilometre', 'km', 1000., UnitQuantityType.LENGTH)
CENTIMETRE = UnitOfMeasurement('EPSG::1033', 'centimetre', 'cm', 0.01, UnitQuantityType.LENGTH)
MILLIMETRE = UnitOfMeasurement('EPSG::1025', 'millimetre', 'mm', 0.001, UnitQuantityType.LENGTH)
FOOT = UnitOfMeasurement('EPSG::9002', 'foot', 'ft', 0.3048, UnitQuantityType.LENGTH)
US_SURVEY_FOOT = UnitOfMeasurement(
    'EPSG::9003', 'US survey foot', 'ftUS', 12 / 39.37, UnitQuantityType.LENGTH
)
YARD = UnitOfMeasurement('EPSG::9096', 'yard', 'yd', 0.9144, UnitQuantityType.LENGTH)
FATHOM = UnitOfMeasurement('EPSG::9014', 'fathom', 'fath', 1.8288, UnitQuantityType.LENGTH)
STATUTE_MILE = UnitOfMeasurement('EPSG::9093', 'statute mile', 'mi', 1609.344, UnitQuantityType.LENGTH)
NAUTICAL_MILE = UnitOfMeasurement('EPSG::9030', 'nautical mile', 'NM', 1852., UnitQuantityType.LENGTH)

# Time units
SECOND = UnitOfMeasurement('EPSG::1040', 'second', 's', 1., UnitQuantityType.TIME)

# Scale units
UNITY = UnitOfMeasurement('EPSG::9201', 'unity', '', 1., UnitQuantityType.SCALE)
PARTS_PER_MILLION = UnitOfMeasurement('EPSG::9202', 'parts per million', 'ppm', 1e-6, UnitQuantityType.SCALE)


UNITS: Mapping[str, UnitOfMeasurement] = MappingProxyType({
    unit.identifier: unit for unit in (
        RADIAN, DEGREE, ARC_MINUTE, ARC_SECOND, GRAD, GON, MICRO_RADIAN,
        CENTESIMAL_MINUTE, CENTESIMAL_SECOND, MILLIARC_SECOND,
        METRE, KILOMETRE, CENTIMETRE, MILLIMETRE, FOOT, US_SURVEY_FOOT, YARD,
        FATHOM, STATUTE_MILE, NAUTICAL_MILE,
        SECOND,
        UNITY, PARTS_PER_MILLION,
    )
})

# Symbols and names are unique within the registry, except for the empty unity symbol
_LOOKUP: Mapping[str, UnitOfMeasurement] = MappingProxyType({
    **{unit.name: unit for unit in UNITS.values()},
    **{alias: unit for unit in UNITS.values() for alias in unit.aliases},
    **{unit.symbol: unit for unit in UNITS.values() if unit.symbol},
    **UNITS,
})


def get_unit(key: str) -> UnitOfMeasurement:
    """
    Resolves a registered unit from its identifier, name, alias or symbol.

    Args:
        key:
            e.g. 'EPSG::9001', 'metre', 'meter' or 'm'

    Returns:
        UnitOfMeasurement
    """
    try:
        return _LOOKUP[key]
    except KeyError:
        raise KeyError(f"Unrecognized unit of measurement '{key}'") from None
