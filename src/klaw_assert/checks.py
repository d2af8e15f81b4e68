"""Invariant checks that report violations through an Asserter.

Every check returns None when its condition holds and otherwise hands a
category message to ``Asserter.report``, which never returns. Trailing
``*args`` override that message: a leading format string is applied
printf-style to the remaining arguments.

Identity checks (``*_not_none``) only reject ``None``, so an empty but
existing container passes. Content checks (``*_not_empty``) reject anything
of length zero, ``None`` included.

Example:
    ```python
    from klaw_assert import Checker, D, checks

    checks.seq_len([1, 2, 3], 3)
    checks.not_empty(name, 'user %s has no name', user_id)

    strict = Checker(D)
    strict.equal(status, 200)  # AssertionError: got 404, want 200
    ```
"""

from __future__ import annotations

from collections.abc import Mapping, Sized
from typing import Any

from klaw_assert import _config
from klaw_assert.asserter import Asserter, as_asserter

__all__ = [
    'Checker',
    'chan_not_none',
    'equal',
    'map_len',
    'map_not_empty',
    'map_not_none',
    'not_empty',
    'not_equal',
    'not_none',
    'seq_len',
    'seq_not_empty',
    'seq_not_none',
    'that',
]


def _len(obj: Sized | None) -> int:
    return 0 if obj is None else len(obj)


class Checker:
    """Invariant checks bound to an asserter.

    Args:
        asserter: Asserter to report through. With None the process default
            (see ``set_default_asserter``) is looked up on every failure.

    Raises:
        TypeError: If ``asserter`` is neither None nor a flag value.
    """

    __slots__ = ('_asserter',)

    def __init__(self, asserter: Asserter | int | None = None) -> None:
        self._asserter = None if asserter is None else as_asserter(asserter)

    @property
    def asserter(self) -> Asserter:
        """The asserter failures are reported through."""
        if self._asserter is None:
            return _config.get_default_asserter()
        return self._asserter

    def __repr__(self) -> str:
        bound = 'default' if self._asserter is None else repr(self._asserter)
        return f'Checker({bound})'

    def that(self, term: Any, *args: Any) -> None:
        """Assert that ``term`` is true.

        There is no category message, so pass a description in ``args``.
        """
        if not term:
            self.asserter.report('', *args)

    def not_none[T](self, p: T | None, *args: Any) -> None:
        """Assert that the reference is not None."""
        if p is None:
            self.asserter.report('pointer is nil', *args)

    def seq_not_none[T](self, s: T | None, *args: Any) -> None:
        """Assert that the sequence exists. An empty sequence passes."""
        if s is None:
            self.asserter.report('slice is nil', *args)

    def chan_not_none[T](self, c: T | None, *args: Any) -> None:
        """Assert that the channel (queue, stream, pipe) handle is not None."""
        if c is None:
            self.asserter.report('channel is nil', *args)

    def map_not_none[K, V](self, m: Mapping[K, V] | None, *args: Any) -> None:
        """Assert that the mapping exists. An empty mapping passes."""
        if m is None:
            self.asserter.report('map is nil', *args)

    def equal[T](self, val: T, want: T, *args: Any) -> None:
        """Assert that ``val == want``."""
        if val != want:
            self.asserter.report(f'got {val}, want {want}', *args)

    def not_equal[T](self, val: T, want: T, *args: Any) -> None:
        """Assert that ``val != want``."""
        if val == want:
            self.asserter.report(f'got {val}, want {want}', *args)

    def seq_len(self, obj: Sized | None, length: int, *args: Any) -> None:
        """Assert that the sequence has exactly ``length`` elements."""
        n = _len(obj)
        if n != length:
            self.asserter.report(f'got {n}, want {length}', *args)

    def map_len[K, V](self, obj: Mapping[K, V] | None, length: int, *args: Any) -> None:
        """Assert that the mapping has exactly ``length`` entries."""
        n = _len(obj)
        if n != length:
            self.asserter.report(f'got {n}, want {length}', *args)

    def not_empty(self, obj: str | None, *args: Any) -> None:
        """Assert that the string has at least one character."""
        if not obj:
            self.asserter.report("string shouldn't be empty", *args)

    def seq_not_empty(self, obj: Sized | None, *args: Any) -> None:
        """Assert that the sequence has at least one element."""
        if _len(obj) == 0:
            self.asserter.report("slice shouldn't be empty", *args)

    def map_not_empty[K, V](self, obj: Mapping[K, V] | None, *args: Any) -> None:
        """Assert that the mapping has at least one entry."""
        if _len(obj) == 0:
            self.asserter.report("map shouldn't be empty", *args)


# Package-level checks follow the process default asserter.
_default_checker = Checker()

that = _default_checker.that
not_none = _default_checker.not_none
seq_not_none = _default_checker.seq_not_none
chan_not_none = _default_checker.chan_not_none
map_not_none = _default_checker.map_not_none
equal = _default_checker.equal
not_equal = _default_checker.not_equal
seq_len = _default_checker.seq_len
map_len = _default_checker.map_len
not_empty = _default_checker.not_empty
seq_not_empty = _default_checker.seq_not_empty
map_not_empty = _default_checker.map_not_empty
