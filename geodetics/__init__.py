from geodetics._version import __version__  # noqa: F401
from geodetics.utils.logging import LOGGER
from geodetics.units import UnitOfMeasurement, UnitQuantityType, get_unit
from geodetics.quantities import Angle, Length
from geodetics.ellipsoid import Ellipsoid, GRS80, WGS84
from geodetics.coordinates import GeoCoordinate, GeoVector, ProjectedCoordinate
from geodetics.errors import OperationNotReversibleError, UnsupportedComputationError
from geodetics.operations import (
    CoordinateOperation, CoordinateOperationMethod, CoordinateOperationParameter,
    CoordinateProjection,
)
from geodetics.projections import EquidistantCylindricalProjection, MercatorAProjection

__all__ = [
    'Angle',
    'CoordinateOperation',
    'CoordinateOperationMethod',
    'CoordinateOperationParameter',
    'CoordinateProjection',
    'Ellipsoid',
    'EquidistantCylindricalProjection',
    'GeoCoordinate',
    'GeoVector',
    'GRS80',
    'Length',
    'MercatorAProjection',
    'OperationNotReversibleError',
    'ProjectedCoordinate',
    'UnitOfMeasurement',
    'UnitQuantityType',
    'UnsupportedComputationError',
    'WGS84',
    'get_unit',
    'LOGGER',
]
