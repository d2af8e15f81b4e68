"""Ok/Err result types returned by @recover boundaries.

A trimmed Rust-style Result: enough to hand an intercepted assertion fault
back to the caller as a value and to short-circuit with ``.bail()``.

Example:
    ```python
    from klaw_assert import Err, Ok, checks, recover

    @recover
    def parse(raw: str) -> Ok[int] | Err[Exception]:
        checks.not_empty(raw)
        return Ok(int(raw))

    match parse(''):
        case Ok(value):
            print(value)
        case Err(error):
            print(f'invalid input: {error}')
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

from klaw_assert.propagate import Propagate

__all__ = ['Err', 'Ok', 'Result']


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Successful computation holding ``value``."""

    value: T
    __match_args__ = ('value',)

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise, since there is no error to return.

        Raises:
            AssertionError: Always.
        """
        raise AssertionError(f'called unwrap_err() on Ok({self.value!r})')

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the value using ``f``."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def bail(self) -> T:
        """Return the value; the Err counterpart unwinds to @recover."""
        return self.value

    def __repr__(self) -> str:
        return f'Ok({self.value!r})'


@dataclass(slots=True, frozen=True)
class Err[E: BaseException]:
    """Failed computation holding ``error``."""

    error: E
    __match_args__ = ('error',)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the contained error."""
        raise self.error

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err[F: BaseException](self, f: Callable[[E], F]) -> Err[F]:
        """Transform the error using ``f``.

        Example:
            ```python
            recovered.map_err(lambda e: e.with_context('startup'))
            ```
        """
        return Err(f(self.error))

    def bail(self) -> NoReturn:
        """Unwind to the nearest @recover, which returns this Err.

        Raises:
            Propagate: Always, carrying this Err.
        """
        raise Propagate(self)

    def __repr__(self) -> str:
        return f'Err({self.error!r})'


type Result[T, E: BaseException] = Ok[T] | Err[E]
