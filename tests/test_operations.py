import logging
import math

import pytest

from geodetics import units
from geodetics.coordinates import GeoCoordinate, ProjectedCoordinate
from geodetics.ellipsoid import Ellipsoid, WGS84
from geodetics.errors import OperationNotReversibleError
from geodetics.operations import *
from geodetics.quantities import Angle, Length

SHIFT = CoordinateOperationParameter('TEST::1', 'Shift', 'Added to the latitude')
LABEL = CoordinateOperationParameter('TEST::2', 'Label')
OFFSET = CoordinateOperationParameter('TEST::3', 'Offset')
UNUSED = CoordinateOperationParameter('TEST::4', 'Unused')

SHIFT_METHOD = CoordinateOperationMethod('TEST::10', 'Shift', True, SHIFT, LABEL, OFFSET)
ONE_WAY_METHOD = CoordinateOperationMethod('TEST::11', 'One way', False, SHIFT)


class _LatitudeShift(CoordinateOperation[GeoCoordinate, GeoCoordinate]):

    def _compute_forward(self, coordinate):
        shift = self.get_parameter_base_value(SHIFT)
        return GeoCoordinate(
            coordinate.latitude.to_radian() + shift,
            coordinate.longitude,
            coordinate.height,
        )

    def _compute_reverse(self, coordinate):
        shift = self.get_parameter_base_value(SHIFT)
        return GeoCoordinate(
            coordinate.latitude.to_radian() - shift,
            coordinate.longitude,
            coordinate.height,
        )


class _RecordingShift(_LatitudeShift):
    """Records every coordinate passed to the reverse hook"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.reversed = []

    def _compute_reverse(self, coordinate):
        self.reversed.append(coordinate)
        return super()._compute_reverse(coordinate)


class _Projection(CoordinateProjection):

    def _compute_forward(self, coordinate):
        return ProjectedCoordinate(
            self.get_parameter_value(OFFSET), 0., coordinate.height
        )

    def _compute_reverse(self, coordinate):
        return GeoCoordinate(0., 0., coordinate.z)


def test_parameter():
    assert SHIFT.identifier == 'TEST::1'
    assert SHIFT.name == 'Shift'
    assert SHIFT.description == 'Added to the latitude'
    assert LABEL.description == ''

    assert SHIFT == CoordinateOperationParameter('TEST::1', 'Something else')
    assert SHIFT != LABEL
    assert repr(SHIFT) == '<CoordinateOperationParameter(TEST::1, Shift)>'


def test_method():
    assert SHIFT_METHOD.is_reversible
    assert not ONE_WAY_METHOD.is_reversible
    assert SHIFT_METHOD.parameters == (SHIFT, LABEL, OFFSET)
    assert CoordinateOperationMethod('TEST::12', 'Empty', True).parameters == ()


def test_parameter_value_of():
    value = ParameterValue.of(Angle.from_degree(90))
    assert value.kind == ParameterKind.ANGLE
    assert value.value() == 90.
    assert value.base_value() == pytest.approx(math.pi / 2)
    assert value.text() is None

    value = ParameterValue.of(Length.from_kilometre(2))
    assert value.kind == ParameterKind.LENGTH
    assert value.value() == 2.
    assert value.base_value() == 2000.

    value = ParameterValue.of(3)
    assert value.kind == ParameterKind.REAL
    assert value.value() == 3.
    assert value.base_value() == 3.
    assert isinstance(value.raw, float)

    value = ParameterValue.of('north up')
    assert value.kind == ParameterKind.TEXT
    assert value.text() == 'north up'
    assert math.isnan(value.value())
    assert math.isnan(value.base_value())

    with pytest.raises(ValueError):
        ParameterValue.of([1, 2])

    with pytest.raises(ValueError):
        ParameterValue.of(None)


def test_parameter_value_dunders():
    assert ParameterValue.of(1.) == ParameterValue(ParameterKind.REAL, 1.)
    assert ParameterValue.of(1.) != ParameterValue.of('1')
    assert ParameterValue.of(1.) != 1.
    assert len({ParameterValue.of(1.), ParameterValue.of(1)}) == 1
    assert repr(ParameterValue.of('x')) == "<ParameterValue(text, 'x')>"


def test_operation_init():
    operation = _LatitudeShift(
        'TEST::100', 'shift',
        SHIFT_METHOD,
        {SHIFT: Angle.from_degree(1), LABEL: 'label'},
    )
    assert operation.method == SHIFT_METHOD
    assert operation.is_reversible
    assert operation.parameters == {SHIFT: Angle.from_degree(1), LABEL: 'label'}

    with pytest.raises(TypeError):
        operation.parameters[OFFSET] = 1.  # noqa

    # No parameters at all
    assert dict(_LatitudeShift('TEST::101', 'shift', SHIFT_METHOD).parameters) == {}

    with pytest.raises(ValueError):
        _LatitudeShift('TEST::102', 'shift', None)

    with pytest.raises(ValueError):
        _LatitudeShift(None, 'shift', SHIFT_METHOD)

    with pytest.raises(TypeError):
        CoordinateOperation('TEST::103', 'abstract', SHIFT_METHOD)  # noqa


def test_operation_ignores_undeclared_parameters(caplog):
    caplog.set_level(logging.DEBUG, logger='geodetics')
    operation = _LatitudeShift('TEST::100', 'shift', SHIFT_METHOD, {UNUSED: 5., SHIFT: 1.})

    assert UNUSED not in operation.parameters
    assert SHIFT in operation.parameters
    assert 'Ignoring parameter Unused' in caplog.text


def test_operation_logger():
    operation = _LatitudeShift('TEST::100', 'shift', SHIFT_METHOD)
    assert operation.logger.name == f'geodetics.{__name__}._LatitudeShift'


def test_get_parameter_values():
    operation = _LatitudeShift(
        'TEST::100', 'shift', SHIFT_METHOD,
        {SHIFT: Angle.from_degree(1), LABEL: 'label'},
    )
    assert operation.get_parameter_value(SHIFT) == 1.
    assert operation.get_parameter_base_value(SHIFT) == pytest.approx(math.radians(1))
    assert operation.get_parameter_text(SHIFT) is None

    assert math.isnan(operation.get_parameter_value(LABEL))
    assert math.isnan(operation.get_parameter_base_value(LABEL))
    assert operation.get_parameter_text(LABEL) == 'label'

    # Unset parameters
    assert operation.get_parameter_value(OFFSET) == 0.
    assert operation.get_parameter_base_value(OFFSET) == 0.
    assert operation.get_parameter_text(OFFSET) is None


def test_set_parameter_value():
    operation = _LatitudeShift('TEST::100', 'shift', SHIFT_METHOD, {SHIFT: 1.})

    operation._set_parameter_value(OFFSET, Length.from_metre(3))
    assert operation.get_parameter_value(OFFSET) == 3.

    # None removes the parameter
    operation._set_parameter_value(SHIFT, None)
    assert SHIFT not in operation.parameters
    assert operation.get_parameter_value(SHIFT) == 0.

    with pytest.raises(ValueError):
        operation._set_parameter_value(None, 1.)

    with pytest.raises(ValueError):
        operation._set_parameter_value(OFFSET, object())


def test_forward_reverse():
    operation = _LatitudeShift('TEST::100', 'shift', SHIFT_METHOD, {SHIFT: 0.1})
    coordinate = GeoCoordinate(0.2, 0.3, 10.)

    forward = operation.forward(coordinate)
    assert forward.latitude.to_radian() == pytest.approx(0.3)
    assert forward.longitude == coordinate.longitude
    assert forward.height == coordinate.height

    assert operation.reverse(forward).latitude.to_radian() == pytest.approx(0.2)

    with pytest.raises(ValueError):
        operation.forward(None)

    with pytest.raises(ValueError):
        operation.reverse(None)


def test_forward_reverse_many():
    operation = _LatitudeShift('TEST::100', 'shift', SHIFT_METHOD, {SHIFT: 0.1})
    coordinates = [GeoCoordinate(0., 0.), GeoCoordinate(0.5, 1.), GeoCoordinate(-0.5, 2.)]

    results = operation.forward_many(coordinates)
    assert isinstance(results, list)
    assert [x.latitude.to_radian() for x in results] == pytest.approx([0.1, 0.6, -0.4])
    assert [x.longitude for x in results] == [x.longitude for x in coordinates]

    # Tuples are sequences too
    reversed_ = operation.reverse_many(tuple(results))
    assert [x.latitude.to_radian() for x in reversed_] == pytest.approx([0., 0.5, -0.5])

    for bad in (None, []):
        with pytest.raises(ValueError):
            operation.forward_many(bad)

        with pytest.raises(ValueError):
            operation.reverse_many(bad)


def test_not_reversible():
    operation = _RecordingShift('TEST::100', 'one way', ONE_WAY_METHOD, {SHIFT: 0.1})
    assert not operation.is_reversible
    assert operation.forward(GeoCoordinate(0., 0.)).latitude.to_radian() == pytest.approx(0.1)

    with pytest.raises(OperationNotReversibleError):
        operation.reverse(GeoCoordinate(0., 0.))

    with pytest.raises(OperationNotReversibleError):
        operation.reverse_many([GeoCoordinate(0., 0.)])

    # Reversibility is checked before the input
    with pytest.raises(OperationNotReversibleError):
        operation.reverse_many([])

    # The reverse computation never ran
    assert operation.reversed == []

    # Whereas a reversible method does reach it
    operation = _RecordingShift('TEST::101', 'shift', SHIFT_METHOD, {SHIFT: 0.1})
    operation.reverse_many([GeoCoordinate(0., 0.), GeoCoordinate(0.5, 0.)])
    assert len(operation.reversed) == 2


def test_projection_lengths_in_ellipsoid_unit():
    ellipsoid = Ellipsoid.from_inverse_flattening(
        'TEST::200', 'km ellipsoid', Length.from_kilometre(6378.137), 298.257223563
    )
    projection = _Projection(
        'TEST::201', 'projection', SHIFT_METHOD,
        {OFFSET: Length.from_metre(1500)},
        ellipsoid,
        area_of_use='somewhere',
    )
    assert projection.ellipsoid is ellipsoid
    assert projection.area_of_use == 'somewhere'
    assert projection.parameters[OFFSET].unit == units.KILOMETRE
    assert projection.get_parameter_value(OFFSET) == pytest.approx(1.5)
    assert projection.get_parameter_base_value(OFFSET) == pytest.approx(1500.)

    # Non-length values are stored unchanged
    projection._set_parameter_value(SHIFT, Angle.from_degree(10))
    assert projection.parameters[SHIFT] == Angle.from_degree(10)
    assert projection.parameters[SHIFT].unit == units.DEGREE

    projected = projection.forward(GeoCoordinate(0., 0., 7.))
    assert projected.x.value == pytest.approx(1.5)
    assert projected.z == Length.from_metre(7.)


def test_projection_requires_ellipsoid():
    with pytest.raises(ValueError):
        _Projection('TEST::201', 'projection', SHIFT_METHOD, {}, None)

    projection = _Projection('TEST::201', 'projection', SHIFT_METHOD, None, WGS84)
    assert projection.area_of_use is None
    assert projection.reverse(ProjectedCoordinate(0., 0., 3.)).height == Length.from_metre(3.)
