import re

from geodetics.utils.mixins import LoggingMixin


class _Logged(LoggingMixin):
    pass


def test_logger_name():
    # Classes defined outside the package still log under the package logger
    assert _Logged().logger.name == f'geodetics.{__name__}._Logged'


def test_warn_once(caplog):
    obj = _Logged()
    obj.warn_once('mixin warning')
    assert 'mixin warning' in caplog.text

    _Logged().warn_once('mixin warning')
    assert len(re.findall('mixin warning', caplog.text)) == 1
    assert 'mixin warning' in LoggingMixin.WARNED_ONCE
