"""@recover decorator: turn typed assertion faults into returned Err values.

Only ``AssertionFault`` (raised by asserters with ``TO_ERROR``) and
``Propagate`` (raised by ``Err.bail()``) are intercepted. A plain
``AssertionError`` from a development asserter, or any other exception,
passes through untouched.
"""

from __future__ import annotations

import inspect
import re
import string
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import wrapt

from klaw_assert._logging import log_debug
from klaw_assert.errors import AssertionFault, ContextError
from klaw_assert.propagate import Propagate
from klaw_assert.result import Err

__all__ = ['recover']

type Context = str | Callable[..., str]
type Cleanup = Callable[[], object]

_FIELD_ROOT = re.compile(r'[.\[]')


def _check_template(template: str, func: Callable[..., Any]) -> None:
    """Reject template fields that no call of ``func`` can fill."""
    params = inspect.signature(func).parameters
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values()):
        return
    for _, field, _, _ in string.Formatter().parse(template):
        if field is None:
            continue
        root = _FIELD_ROOT.split(field, maxsplit=1)[0]
        if root not in params:
            msg = f'context field {{{field}}} is not a parameter of {func.__qualname__}()'
            raise ValueError(msg)


def _render_context(
    context: Context,
    wrapped: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> str:
    if callable(context):
        return context(*args, **kwargs)
    bound = inspect.signature(wrapped).bind(*args, **kwargs)
    bound.apply_defaults()
    return context.format(**bound.arguments)


def _add_context(
    err: Err[Any],
    context: Context | None,
    wrapped: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Err[Any]:
    if context is None:
        return err
    rendered = _render_context(context, wrapped, args, kwargs)
    if isinstance(err.error, AssertionFault):
        return Err(err.error.with_context(rendered))
    return Err(ContextError(rendered, err.error))


def _recovered(
    fault: AssertionFault,
    context: Context | None,
    wrapped: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Err[Any]:
    err = _add_context(Err(fault), context, wrapped, args, kwargs)
    log_debug(
        __name__,
        'assertion_fault_recovered',
        function=getattr(wrapped, '__qualname__', repr(wrapped)),
        message=str(err.error),
    )
    return err


def _run_cleanup(cleanups: Sequence[Cleanup]) -> None:
    # Innermost first, like stacked finally blocks.
    for cleanup in reversed(cleanups):
        cleanup()


async def _run_cleanup_async(cleanups: Sequence[Cleanup]) -> None:
    for cleanup in reversed(cleanups):
        outcome = cleanup()
        if inspect.isawaitable(outcome):
            await outcome


def recover(
    func: Callable[..., Any] | None = None,
    *,
    context: Context | None = None,
    cleanup: Cleanup | Sequence[Cleanup] | None = None,
) -> Any:
    """Decorator that returns ``Err`` for assertion faults raised inside ``func``.

    Can be used with or without arguments, on sync or async functions:
        @recover
        def load(): ...

        @recover(context='copy {src} {dst}', cleanup=remove_partial)
        def copy(src, dst): ...

    Args:
        func: The function to wrap (when used without parentheses).
        context: Prefix added to the returned error. A ``str.format`` template
            rendered with the call's bound arguments, or a callable receiving
            the call's arguments. Applies to recovered faults and to errors
            passed up with ``.bail()``; the latter are wrapped in
            ``ContextError`` unless they are assertion faults.
        cleanup: Callable(s) run before the error is returned, last-to-first.
            Not run on success or for unrelated exceptions. Async functions
            may use async cleanups; sync functions may not.

    Returns:
        A wrapped function returning the original return value on success,
        ``Err(AssertionFault)`` for a typed fault, or the Err given to
        ``.bail()``.

    Raises:
        ValueError: If a template field names no parameter of ``func``.
        TypeError: If an async cleanup is given for a sync function.

    Example:
        ```python
        @recover(context='copy {src} {dst}')
        def copy_file(src: str, dst: str) -> Ok[None] | Err[Exception]:
            checks.not_empty(src)
            ...
            return Ok(None)

        copy_file('', 'b.txt')
        # Err(AssertionFault("copy  b.txt: string shouldn't be empty"))
        ```
    """
    if cleanup is None:
        cleanups: tuple[Cleanup, ...] = ()
    elif callable(cleanup):
        cleanups = (cleanup,)
    else:
        cleanups = tuple(cleanup)

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            return wrapped(*args, **kwargs)
        except AssertionFault as fault:
            _run_cleanup(cleanups)
            return _recovered(fault, context, wrapped, args, kwargs)
        except Propagate as p:
            _run_cleanup(cleanups)
            return _add_context(p.value, context, wrapped, args, kwargs)

    @wrapt.decorator
    async def async_wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            return await wrapped(*args, **kwargs)
        except AssertionFault as fault:
            await _run_cleanup_async(cleanups)
            return _recovered(fault, context, wrapped, args, kwargs)
        except Propagate as p:
            await _run_cleanup_async(cleanups)
            return _add_context(p.value, context, wrapped, args, kwargs)

    def decorate(f: Callable[..., Any]) -> Any:
        if isinstance(context, str):
            _check_template(context, f)
        if inspect.iscoroutinefunction(f):
            return async_wrapper(f)
        if any(inspect.iscoroutinefunction(c) for c in cleanups):
            msg = f'async cleanup given for sync function {f.__qualname__}()'
            raise TypeError(msg)
        return sync_wrapper(f)

    if func is not None:
        return decorate(func)
    return decorate
