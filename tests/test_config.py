"""Tests for default asserter selection, init() and logging setup."""

from __future__ import annotations

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from klaw_assert import (
    DEFAULT,
    Asserter,
    D,
    P,
    configure_logging,
    get_default_asserter,
    get_logger,
    init,
    set_default_asserter,
)

pytestmark = pytest.mark.usefixtures('restore_default_asserter')


class TestDefaultAsserter:
    def test_initial_default(self) -> None:
        assert get_default_asserter() == DEFAULT

    def test_set_returns_previous(self) -> None:
        previous = set_default_asserter(D)
        assert previous == DEFAULT
        assert get_default_asserter() == D
        assert set_default_asserter(P) == D

    def test_accepts_custom_combination(self) -> None:
        set_default_asserter(Asserter.FORMATTED_CALLER_INFO)
        current = get_default_asserter()
        assert current.formatted_caller_info
        assert not current.to_error

    def test_accepts_int_flags(self) -> None:
        set_default_asserter(3)
        assert get_default_asserter() == DEFAULT
        assert isinstance(get_default_asserter(), Asserter)

    @pytest.mark.parametrize('bad', ['P', None, 1.0, True])
    def test_rejects_non_flag_values(self, bad: object) -> None:
        with pytest.raises(TypeError, match='asserter must be'):
            set_default_asserter(bad)  # type: ignore[arg-type]
        assert get_default_asserter() == DEFAULT

    def test_change_is_logged(self, reset_structlog) -> None:
        with capture_logs() as logs:
            set_default_asserter(D)
        events = [e for e in logs if e['event'] == 'default_asserter_set']
        assert len(events) == 1
        assert events[0]['log_level'] == 'debug'

    def test_change_is_silent_without_logging_setup(
        self, reset_structlog, capsys: pytest.CaptureFixture[str]
    ) -> None:
        set_default_asserter(D)
        assert capsys.readouterr().out == ''


class TestInit:
    def test_init_without_args_keeps_default(self) -> None:
        assert init() == DEFAULT

    def test_init_sets_asserter(self) -> None:
        assert init(P) == P
        assert get_default_asserter() == P

    def test_init_configures_logging(self, reset_structlog) -> None:
        init(D, log_level='WARNING')
        assert logging.getLogger().level == logging.WARNING
        assert get_default_asserter() == D


class TestLogging:
    def test_configure_logging_sets_root_level(self, reset_structlog) -> None:
        configure_logging('DEBUG', json_output=False)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_unknown_level_falls_back_to_info(self, reset_structlog) -> None:
        configure_logging('chatty')
        assert logging.getLogger().level == logging.INFO

    def test_get_logger_is_usable(self, reset_structlog) -> None:
        with capture_logs() as logs:
            get_logger('klaw_assert.test').info('hello', key='value')
        assert logs == [{'event': 'hello', 'key': 'value', 'log_level': 'info'}]
