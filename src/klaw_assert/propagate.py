"""Propagate exception used by Err.bail() to unwind to the nearest @recover."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from klaw_assert.result import Err

__all__ = ['Propagate']


class Propagate(Exception):  # noqa: N818
    """Carries an Err up the call stack until a @recover boundary returns it.

    Not an error in itself, hence no "Error" suffix.
    """

    __slots__ = ('_err',)

    def __init__(self, err: Err) -> None:
        self._err = err
        super().__init__(f'Propagate({err!r})')

    @property
    def value(self) -> Err:
        """The Err being propagated."""
        return self._err
