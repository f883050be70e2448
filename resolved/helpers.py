from __future__ import annotations

from typing import TYPE_CHECKING, Any

from resolved.errors import MissingStateError, ValidationError
from resolved.logging import logger
from resolved.markers import err, err_from, ok
from resolved.value import ValueOutcome

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


def attempt[T](fn: Callable[..., T], *args: Any, **kwargs: Any) -> ValueOutcome[T]:
    """Call ``fn`` and capture an ``Exception`` it raises as a one-diagnostic failure.

    Exceptions that do not derive from ``Exception`` (``KeyboardInterrupt``,
    ``SystemExit``, ...) propagate.
    """
    try:
        value = fn(*args, **kwargs)
    except Exception as e:
        logger.debug("captured %s from %s", type(e).__name__, getattr(fn, "__qualname__", fn))
        return ValueOutcome(err_from(e))
    return ValueOutcome(ok(value))


def collect[T](outcomes: Iterable[ValueOutcome[T]]) -> ValueOutcome[list[T]]:
    """Combine outcomes into one.

    Succeeds with every payload, in order, when all inputs succeed. Otherwise
    fails with the diagnostics of every failed input, in order.
    Only ``ValueOutcome`` inputs are accepted.
    """
    values: list[T] = []
    diagnostics: list[Exception] = []
    failed = False

    for i, outcome in enumerate(outcomes):
        if not isinstance(outcome, ValueOutcome):
            msg = f"outcome at position {i} must be `ValueOutcome`, got {type(outcome).__name__}"
            raise ValidationError(msg)

        if not (outcome.is_ok or outcome.is_err):
            msg = f"outcome at position {i} is missing, it must be either Ok or Err"
            raise MissingStateError(msg)

        outcome.match(values.append, diagnostics.extend)
        failed = failed or outcome.is_err

    if failed:
        logger.debug("collected %d diagnostic(s)", len(diagnostics))
        return ValueOutcome(err(diagnostics))
    return ValueOutcome(ok(values))
