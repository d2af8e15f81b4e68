"""Process-wide asserter selection and initialization."""

from __future__ import annotations

from klaw_assert._logging import configure_logging, log_debug
from klaw_assert.asserter import DEFAULT, Asserter, as_asserter

__all__ = [
    'get_default_asserter',
    'init',
    'set_default_asserter',
]


# Asserter used by package-level checks (set once at startup)
_default: Asserter = DEFAULT


def set_default_asserter(asserter: Asserter | int) -> Asserter:
    """Select the asserter used by package-level checks.

    Call this once during startup (or single-threaded test setup). Reads are
    not synchronized, so switching while other threads run checks is
    unsupported.

    Args:
        asserter: Any combination of ``Asserter`` flags, e.g. ``P`` or ``D``.

    Returns:
        The previous default, so tests can restore it.

    Raises:
        TypeError: If ``asserter`` is not a flag value.
    """
    global _default  # noqa: PLW0603

    previous = _default
    _default = as_asserter(asserter)
    log_debug(__name__, 'default_asserter_set', asserter=repr(_default), previous=repr(previous))
    return previous


def get_default_asserter() -> Asserter:
    """Get the asserter currently used by package-level checks."""
    return _default


def init(
    asserter: Asserter | int | None = None,
    log_level: str | None = None,
) -> Asserter:
    """Initialize klaw-assert for the running program.

    Args:
        asserter: Default asserter. Keeps the current one if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.

    Returns:
        The default asserter in effect after initialization.

    Example:
        ```python
        import klaw_assert
        from klaw_assert import D, P

        # Tests: every violation is a hard AssertionError
        klaw_assert.init(D)

        # Services: violations become Err values at @recover boundaries
        klaw_assert.init(P, log_level='INFO')
        ```
    """
    if log_level is not None:
        configure_logging(log_level)
    if asserter is not None:
        set_default_asserter(asserter)
    return _default
