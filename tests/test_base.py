import pytest

from geodetics._base import IdentifiedObject
from geodetics.errors import Error, OperationNotReversibleError, UnsupportedComputationError


class _Other(IdentifiedObject):
    pass


def test_identified_object_init():
    obj = IdentifiedObject('TEST::1', 'test object', 'some remarks', ['alias', 'other'])
    assert obj.identifier == 'TEST::1'
    assert obj.name == 'test object'
    assert obj.remarks == 'some remarks'
    assert obj.aliases == ('alias', 'other')

    # Name defaults to the identifier
    obj = IdentifiedObject('TEST::2')
    assert obj.name == 'TEST::2'
    assert obj.remarks is None
    assert obj.aliases == ()

    with pytest.raises(ValueError):
        IdentifiedObject(None, 'no identifier')


def test_identified_object_eq():
    assert IdentifiedObject('TEST::1', 'a') == IdentifiedObject('TEST::1', 'b')
    assert IdentifiedObject('TEST::1') != IdentifiedObject('TEST::2')

    # Same identifier, different type
    assert IdentifiedObject('TEST::1') != _Other('TEST::1')
    assert IdentifiedObject('TEST::1') != 'TEST::1'


def test_identified_object_hash():
    objects = {IdentifiedObject('TEST::1', 'a'), IdentifiedObject('TEST::1', 'b'), _Other('TEST::1')}
    assert len(objects) == 2


def test_identified_object_repr():
    assert repr(IdentifiedObject('TEST::1', 'test')) == '<IdentifiedObject(TEST::1, test)>'
    assert repr(_Other('TEST::1', 'test')) == '<_Other(TEST::1, test)>'


def test_errors():
    assert issubclass(UnsupportedComputationError, Error)
    assert issubclass(OperationNotReversibleError, Error)
    assert issubclass(Error, RuntimeError)
    assert not issubclass(Error, ValueError)
