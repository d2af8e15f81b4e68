"""Asserter flags and the failure reporting they control.

An ``Asserter`` is a set of independent flags deciding how a violated
invariant is raised:

- ``TO_ERROR``: raise a typed ``AssertionFault`` that ``@recover`` converts
  into an ``Err``. Without it a plain ``AssertionError`` is raised, which no
  recovery layer intercepts.
- ``FORMATTED_CALLER_INFO``: prefix the message with ``file.py:line:`` of the
  check's call site.

Example:
    ```python
    from klaw_assert import Asserter, D

    D.report('pointer is nil')
    # AssertionError: pointer is nil

    (Asserter.TO_ERROR | Asserter.FORMATTED_CALLER_INFO).report('', 'bad id %d', 7)
    # AssertionFault: app.py:12: bad id 7
    ```
"""

from __future__ import annotations

import inspect
from enum import IntFlag
from pathlib import Path
from typing import Any, NoReturn

from klaw_assert.errors import AssertionFault

__all__ = [
    'DEFAULT',
    'Asserter',
    'D',
    'P',
    'as_asserter',
    'caller_location',
    'compose_message',
]

_PACKAGE = __name__.partition('.')[0]


class Asserter(IntFlag):
    """Failure reporting policy, combined with ``|``."""

    TO_ERROR = 1
    FORMATTED_CALLER_INFO = 2

    @property
    def to_error(self) -> bool:
        """True if failures are raised as ``AssertionFault``."""
        return Asserter.TO_ERROR in self

    @property
    def formatted_caller_info(self) -> bool:
        """True if messages carry the caller's ``file:line`` prefix."""
        return Asserter.FORMATTED_CALLER_INFO in self

    def report(self, default_message: str, *args: Any) -> NoReturn:
        """Raise the assertion failure described by the given context.

        Args:
            default_message: The check's category message.
            *args: Caller formatting; a leading ``str`` is a printf-style
                format applied to the rest and replaces ``default_message``.

        Raises:
            AssertionFault: If ``TO_ERROR`` is set.
            AssertionError: Otherwise.
        """
        message = compose_message(default_message, args)
        location = None
        if self.formatted_caller_info:
            location = caller_location()
            message = f'{location}: {message}'

        if self.to_error:
            raise AssertionFault(message, location=location)
        raise AssertionError(message)


# Production: faults become errors that @recover can return.
P = Asserter.TO_ERROR

# Development: plain AssertionError, never converted by @recover.
D = Asserter(0)

# Initial process default for package-level checks.
DEFAULT = Asserter.TO_ERROR | Asserter.FORMATTED_CALLER_INFO


def as_asserter(value: Asserter | int) -> Asserter:
    """Return ``value`` as an ``Asserter``, accepting plain int flag sets.

    Raises:
        TypeError: If ``value`` is not an int (bools are rejected too).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f'asserter must be an Asserter or int flag set, got {type(value).__name__}'
        raise TypeError(msg)
    return Asserter(value)


def compose_message(default_message: str, args: tuple[Any, ...]) -> str:
    """Build the final assertion message.

    A leading ``str`` argument is a printf-style format applied to the
    remaining arguments and fully replaces ``default_message``. Any other
    argument list leaves ``default_message`` as is.
    """
    if not args or not isinstance(args[0], str):
        return default_message

    fmt, rest = args[0], args[1:]
    if not rest:
        return fmt
    try:
        return fmt % rest
    except (TypeError, ValueError):
        # Mismatched verbs: keep every piece of information instead of failing.
        return ' '.join([fmt, *map(str, rest)])


def caller_location() -> str:
    """Return ``file.py:line`` of the nearest frame outside this package."""
    frame = inspect.currentframe()
    try:
        while frame is not None and _in_package(frame.f_globals.get('__name__', '')):
            frame = frame.f_back
        if frame is None:
            return '<unknown>'
        return f'{Path(frame.f_code.co_filename).name}:{frame.f_lineno}'
    finally:
        del frame


def _in_package(module: str) -> bool:
    return module == _PACKAGE or module.startswith(f'{_PACKAGE}.')
