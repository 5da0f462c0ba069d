"""
The coordinate operation contract: methods, their parameters, and operations
that transform coordinates forward and (optionally) in reverse
"""

__all__ = [
    'CoordinateOperation', 'CoordinateOperationMethod', 'CoordinateOperationParameter',
    'CoordinateProjection', 'ParameterKind', 'ParameterValue',
]

from abc import ABC, abstractmethod
from enum import Enum
import math
from numbers import Real
from types import MappingProxyType
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from geodetics._base import IdentifiedObject
from geodetics.coordinates import GeoCoordinate, ProjectedCoordinate
from geodetics.ellipsoid import Ellipsoid
from geodetics.errors import OperationNotReversibleError
from geodetics.quantities import Angle, Length
from geodetics.utils.mixins import LoggingMixin

_SOURCE = TypeVar('_SOURCE')
_RESULT = TypeVar('_RESULT')


class CoordinateOperationParameter(IdentifiedObject):
    """
    A named parameter of a coordinate operation method, e.g. 'False easting'.

    Args:
        identifier:
            The authority identifier, e.g. 'EPSG::8806'

        name:
            The parameter name

        description:
            (Optional) A description of the parameter's role
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        description: str = '',
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        super().__init__(identifier, name, remarks, aliases)
        self._description = description or ''

    @property
    def description(self) -> str:
        return self._description


class CoordinateOperationMethod(IdentifiedObject):
    """
    The algorithm of a coordinate operation, along with the parameters it
    accepts and whether it can be computed in reverse.

    Args:
        identifier:
            The authority identifier, e.g. 'EPSG::9804'

        name:
            The method name

        is_reversible:
            Whether operations using this method support reverse()

        *parameters:
            The CoordinateOperationParameters the method accepts
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        is_reversible: bool,
        *parameters: CoordinateOperationParameter,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        super().__init__(identifier, name, remarks, aliases)
        self._is_reversible = bool(is_reversible)
        self._parameters = tuple(parameters)

    @property
    def is_reversible(self) -> bool:
        return self._is_reversible

    @property
    def parameters(self) -> Tuple[CoordinateOperationParameter, ...]:
        return self._parameters


class ParameterKind(Enum):
    """The kinds of value a coordinate operation parameter may hold"""
    ANGLE = 'angle'
    LENGTH = 'length'
    REAL = 'real'
    TEXT = 'text'


class ParameterValue:
    """
    A parameter value, tagged by its kind. Use ParameterValue.of() to classify
    a raw value.

    Args:
        kind:
            The ParameterKind of the value

        raw:
            The value itself; an Angle, Length, real number or str
    """

    __slots__ = ('_kind', '_raw')

    def __init__(self, kind: ParameterKind, raw: Any):
        self._kind = kind
        self._raw = raw

    def __eq__(self, other):
        if not isinstance(other, ParameterValue):
            return False

        return self._kind == other._kind and self._raw == other._raw

    def __hash__(self):
        return hash((self._kind, self._raw))

    def __repr__(self):
        return f'<ParameterValue({self._kind.value}, {self._raw!r})>'

    @classmethod
    def of(cls, value: Any) -> 'ParameterValue':
        """Classifies a raw value; raises ValueError if it fits no kind"""
        if isinstance(value, Angle):
            return cls(ParameterKind.ANGLE, value)

        if isinstance(value, Length):
            return cls(ParameterKind.LENGTH, value)

        if isinstance(value, str):
            return cls(ParameterKind.TEXT, value)

        if isinstance(value, Real):
            return cls(ParameterKind.REAL, float(value))

        raise ValueError(f'Unsupported parameter value type: {type(value).__name__}')

    @property
    def kind(self) -> ParameterKind:
        return self._kind

    @property
    def raw(self) -> Any:
        return self._raw

    def value(self) -> float:
        """The numeric value in its own unit; NaN for text"""
        if self._kind in (ParameterKind.ANGLE, ParameterKind.LENGTH):
            return self._raw.value

        if self._kind == ParameterKind.REAL:
            return self._raw

        return math.nan

    def base_value(self) -> float:
        """The numeric value in the base unit (radian or metre); NaN for text"""
        if self._kind in (ParameterKind.ANGLE, ParameterKind.LENGTH):
            return self._raw.base_value

        if self._kind == ParameterKind.REAL:
            return self._raw

        return math.nan

    def text(self) -> Optional[str]:
        """The text value, or None for numeric kinds"""
        if self._kind == ParameterKind.TEXT:
            return self._raw

        return None


class CoordinateOperation(IdentifiedObject, LoggingMixin, ABC, Generic[_SOURCE, _RESULT]):
    """
    Base class for operations transforming coordinates of one type into another.

    Subclasses implement _compute_forward and _compute_reverse; callers use
    forward/reverse (single coordinates) and forward_many/reverse_many (sequences).

    Args:
        identifier:
            The authority identifier of the operation

        name:
            The operation name

        method:
            The CoordinateOperationMethod implemented by the operation

        parameters:
            (Optional) A mapping of CoordinateOperationParameter to value. Values
            may be an Angle, a Length, a real number or a str. Parameters not
            accepted by the method are ignored.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        method: CoordinateOperationMethod,
        parameters: Optional[Mapping[CoordinateOperationParameter, Any]] = None,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        super().__init__(identifier, name, remarks, aliases)
        if method is None:
            raise ValueError('method must not be None')

        self._method = method
        self._parameters: Dict[CoordinateOperationParameter, ParameterValue] = {}

        for parameter, value in (parameters or {}).items():
            if parameter not in method.parameters:
                self.logger.debug(
                    'Ignoring parameter %s, which is not accepted by method %s',
                    parameter.name, method.name
                )
                continue

            self._set_parameter_value(parameter, value)

    @property
    def method(self) -> CoordinateOperationMethod:
        return self._method

    @property
    def is_reversible(self) -> bool:
        return self._method.is_reversible

    @property
    def parameters(self) -> Mapping[CoordinateOperationParameter, Any]:
        """Read-only view of the parameter values, as given"""
        return MappingProxyType({k: v.raw for k, v in self._parameters.items()})

    def forward(self, coordinate: _SOURCE) -> _RESULT:
        """Transforms a single coordinate forward"""
        if coordinate is None:
            raise ValueError('coordinate must not be None')

        return self._compute_forward(coordinate)

    def forward_many(self, coordinates: Sequence[_SOURCE]) -> List[_RESULT]:
        """
        Transforms a sequence of coordinates forward.

        Args:
            coordinates:
                A non-empty sequence of source coordinates

        Returns:
            List of results, in input order
        """
        if not coordinates:
            raise ValueError('coordinates must not be None or empty')

        return [self.forward(coordinate) for coordinate in coordinates]

    def reverse(self, coordinate: _RESULT) -> _SOURCE:
        """
        Transforms a single coordinate in reverse. Raises OperationNotReversibleError
        if the method is one-way.
        """
        if coordinate is None:
            raise ValueError('coordinate must not be None')

        if not self.is_reversible:
            raise OperationNotReversibleError(
                f'Operation {self.name} ({self._method.name}) is not reversible'
            )

        return self._compute_reverse(coordinate)

    def reverse_many(self, coordinates: Sequence[_RESULT]) -> List[_SOURCE]:
        """
        Transforms a sequence of coordinates in reverse.

        Args:
            coordinates:
                A non-empty sequence of result coordinates

        Returns:
            List of source coordinates, in input order
        """
        if not self.is_reversible:
            raise OperationNotReversibleError(
                f'Operation {self.name} ({self._method.name}) is not reversible'
            )

        if not coordinates:
            raise ValueError('coordinates must not be None or empty')

        return [self.reverse(coordinate) for coordinate in coordinates]

    def _set_parameter_value(self, parameter: CoordinateOperationParameter, value: Any):
        """Sets or, if value is None, removes a parameter value"""
        if parameter is None:
            raise ValueError('parameter must not be None')

        if value is None:
            self._parameters.pop(parameter, None)
            return

        self._parameters[parameter] = ParameterValue.of(value)

    def get_parameter_value(self, parameter: CoordinateOperationParameter) -> float:
        """
        The numeric value of a parameter, in the unit it was given in.

        Returns:
            float; 0 if the parameter is not set, NaN if it holds text
        """
        if parameter not in self._parameters:
            return 0.

        return self._parameters[parameter].value()

    def get_parameter_base_value(self, parameter: CoordinateOperationParameter) -> float:
        """
        The numeric value of a parameter, in radians or metres.

        Returns:
            float; 0 if the parameter is not set, NaN if it holds text
        """
        if parameter not in self._parameters:
            return 0.

        return self._parameters[parameter].base_value()

    def get_parameter_text(self, parameter: CoordinateOperationParameter) -> Optional[str]:
        """The text value of a parameter; None if unset or numeric"""
        if parameter not in self._parameters:
            return None

        return self._parameters[parameter].text()

    @abstractmethod
    def _compute_forward(self, coordinate: _SOURCE) -> _RESULT:
        """Forward transformation of a single, non-None coordinate"""

    @abstractmethod
    def _compute_reverse(self, coordinate: _RESULT) -> _SOURCE:
        """Reverse transformation of a single, non-None coordinate"""


class CoordinateProjection(CoordinateOperation[GeoCoordinate, ProjectedCoordinate]):
    """
    A map projection: an operation from geographic coordinates on an ellipsoid
    to coordinates on a plane.

    Length parameters are stored in the axis unit of the ellipsoid, so
    get_parameter_value returns false eastings and northings in that unit.

    Args:
        identifier:
            The authority identifier of the projection

        name:
            The projection name

        method:
            The CoordinateOperationMethod implemented by the projection

        parameters:
            A mapping of CoordinateOperationParameter to value

        ellipsoid:
            The reference ellipsoid

        area_of_use:
            (Optional) An opaque description of where the projection applies
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        method: CoordinateOperationMethod,
        parameters: Optional[Mapping[CoordinateOperationParameter, Any]],
        ellipsoid: Ellipsoid,
        area_of_use: Optional[Any] = None,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        if ellipsoid is None:
            raise ValueError('ellipsoid must not be None')

        self._ellipsoid = ellipsoid
        self._area_of_use = area_of_use
        super().__init__(identifier, name, method, parameters, remarks, aliases)

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @property
    def area_of_use(self) -> Optional[Any]:
        return self._area_of_use

    def _set_parameter_value(self, parameter: CoordinateOperationParameter, value: Any):
        if isinstance(value, Length):
            value = value.to_unit(self._ellipsoid.unit)

        super()._set_parameter_value(parameter, value)
