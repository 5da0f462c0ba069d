import math

import pytest

from geodetics import units
from geodetics.units import UNITS, UnitOfMeasurement, UnitQuantityType, get_unit


def test_unit_init():
    unit = UnitOfMeasurement('TEST::1', 'league', 'lea', 4828.032, UnitQuantityType.LENGTH)
    assert unit.identifier == 'TEST::1'
    assert unit.name == 'league'
    assert unit.symbol == 'lea'
    assert unit.base_multiple == 4828.032
    assert unit.quantity_type == UnitQuantityType.LENGTH
    assert unit.aliases == ()
    assert unit.remarks is None

    with pytest.raises(ValueError):
        UnitOfMeasurement('TEST::2', 'nothing', 'n', 0., UnitQuantityType.LENGTH)

    with pytest.raises(ValueError):
        UnitOfMeasurement('TEST::3', 'bad', 'b', 1., 'length')

    with pytest.raises(ValueError):
        UnitOfMeasurement(None, 'bad', 'b', 1., UnitQuantityType.LENGTH)


def test_unit_eq():
    assert units.METRE == UnitOfMeasurement('EPSG::9001', 'metre', 'm', 1., UnitQuantityType.LENGTH)
    assert units.METRE != units.KILOMETRE
    assert units.GRAD != units.GON
    assert units.METRE != 'm'

    assert len({units.METRE, units.METRE, units.FOOT}) == 2


def test_unit_repr():
    assert repr(units.METRE) == '<UnitOfMeasurement(metre, m, 1.0)>'


def test_unit_constants():
    assert units.DEGREE.base_multiple == math.pi / 180
    assert units.KILOMETRE.base_multiple == 1000.
    assert units.US_SURVEY_FOOT.base_multiple == pytest.approx(0.3048006096)
    assert units.NAUTICAL_MILE.quantity_type == UnitQuantityType.LENGTH
    assert units.ARC_SECOND.quantity_type == UnitQuantityType.ANGLE
    assert units.SECOND.quantity_type == UnitQuantityType.TIME
    assert units.UNITY.quantity_type == UnitQuantityType.SCALE


def test_registry():
    assert UNITS['EPSG::9001'] is units.METRE
    assert UNITS['EPSG::9102'] is units.DEGREE

    with pytest.raises(TypeError):
        UNITS['EPSG::9001'] = units.FOOT  # noqa


def test_get_unit():
    assert get_unit('EPSG::9001') is units.METRE
    assert get_unit('metre') is units.METRE
    assert get_unit('meter') is units.METRE
    assert get_unit('m') is units.METRE
    assert get_unit('°') is units.DEGREE
    assert get_unit('degree') is units.DEGREE
    assert get_unit('km') is units.KILOMETRE

    with pytest.raises(KeyError):
        get_unit('furlong')
