"""klaw-assert: invariant checks with switchable failure reporting.

Flat imports (preferred):
    from klaw_assert import P, D, DEFAULT, Asserter, Checker
    from klaw_assert import that, equal, not_none, seq_len, not_empty
    from klaw_assert import recover, Ok, Err, AssertionFault

Submodule imports (for organization):
    from klaw_assert import checks
    from klaw_assert.asserter import compose_message
    from klaw_assert.handle import recover
"""

# Configuration
from klaw_assert._config import get_default_asserter, init, set_default_asserter

# Logging
from klaw_assert._logging import configure_logging, get_logger

# Asserters
from klaw_assert.asserter import DEFAULT, Asserter, D, P, compose_message

# Checks
from klaw_assert.checks import (
    Checker,
    chan_not_none,
    equal,
    map_len,
    map_not_empty,
    map_not_none,
    not_empty,
    not_equal,
    not_none,
    seq_len,
    seq_not_empty,
    seq_not_none,
    that,
)

# Errors
from klaw_assert.errors import AssertionFailure, AssertionFault, ContextError

# Recovery
from klaw_assert.handle import recover
from klaw_assert.propagate import Propagate
from klaw_assert.result import Err, Ok, Result

__all__ = [
    'DEFAULT',
    'AssertionFailure',
    'AssertionFault',
    'Asserter',
    'Checker',
    'ContextError',
    'D',
    'Err',
    'Ok',
    'P',
    'Propagate',
    'Result',
    'chan_not_none',
    'compose_message',
    'configure_logging',
    'equal',
    'get_default_asserter',
    'get_logger',
    'init',
    'map_len',
    'map_not_empty',
    'map_not_none',
    'not_empty',
    'not_equal',
    'not_none',
    'recover',
    'seq_len',
    'seq_not_empty',
    'seq_not_none',
    'set_default_asserter',
    'that',
]
