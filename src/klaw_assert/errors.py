"""Assertion fault types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'AssertionFailure',
    'AssertionFault',
    'ContextError',
]


class AssertionFailure(msgspec.Struct, frozen=True, gc=False):
    """Violated invariant - struct variant for Result[T, AssertionFailure].

    Attributes:
        message: Composed assertion message, location prefix included.
        location: ``file.py:line`` of the failing check, if it was captured.
        context: Context added by recovery layers, outermost first.
    """

    message: str
    location: str | None = None
    context: str | None = None

    def to_exception(self) -> AssertionFault:
        """Convert to exception for raise-based code."""
        return AssertionFault(self.message, location=self.location, context=self.context)

    def __str__(self) -> str:
        return _render(self.message, self.context)


class AssertionFault(Exception):
    """Violated invariant - exception variant raised by error-producing asserters.

    Only this type is intercepted by ``@recover``. Development asserters raise
    a plain ``AssertionError`` instead so the fault is never converted.
    """

    def __init__(self, message: str, *, location: str | None = None, context: str | None = None) -> None:
        self.message = message
        self.location = location
        self.context = context
        super().__init__(_render(message, context))

    def with_context(self, context: str) -> AssertionFault:
        """Return a copy with ``context`` prepended, chained to this fault.

        Example:
            ```python
            fault = AssertionFault("string shouldn't be empty")
            str(fault.with_context('load config'))
            # "load config: string shouldn't be empty"
            ```
        """
        if self.context:
            context = f'{context}: {self.context}'
        wrapped = AssertionFault(self.message, location=self.location, context=context)
        wrapped.__cause__ = self
        return wrapped

    def to_struct(self) -> AssertionFailure:
        """Convert to struct for Result-based code."""
        return AssertionFailure(self.message, self.location, self.context)


def _render(message: str, context: str | None) -> str:
    if context:
        return f'{context}: {message}'
    return message


class ContextError(Exception):
    """Any other error passed up through a @recover boundary, with its context.

    The original error is kept as ``error`` and as ``__cause__``.
    """

    def __init__(self, context: str, error: object) -> None:
        self.context = context
        self.error = error
        super().__init__(f'{context}: {error}')
        if isinstance(error, BaseException):
            self.__cause__ = error
