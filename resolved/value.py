from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from resolved.core import BaseOutcome
from resolved.errors import ValidationError
from resolved.markers import Err, Ok, is_diagnostics
from resolved.policies import ForwardingPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

    from resolved.markers import Diagnostics


class ValueOutcome[T](BaseOutcome):
    """An outcome whose success carries a ``T`` and whose failure carries diagnostics.

    A policy step may return any outcome shape, which is how a chain changes
    the type it carries::

        ValueOutcome(ok("42")).match(lambda s: ValueOutcome(ok(int(s))), ForwardingPolicy.FORWARD)

    On failure the step is skipped and the same diagnostics are forwarded (or
    raised, with ``RAISE_ON_ACCESS``).
    """

    __slots__ = ()

    def _validate(self, value: Ok[Any] | Err[Any] | None) -> None:
        match value:
            case Err(error) if not (isinstance(error, tuple) and is_diagnostics(error)):
                msg = f"ValueOutcome failure must be a `tuple` of `Exception`, got {type(error).__name__}"
                raise ValidationError(msg)

    @overload
    def match[R](self, on_ok: Callable[[T], R], on_err: Callable[[Diagnostics], R], /) -> R: ...
    @overload
    def match[O: BaseOutcome](self, on_ok: Callable[[T], O], policy: ForwardingPolicy, /) -> O: ...
    def match(self, on_ok: Callable[[T], Any], on_err: Callable[[Diagnostics], Any] | ForwardingPolicy, /) -> Any:
        if isinstance(on_err, ForwardingPolicy) or not callable(on_err):
            return self._chain(on_ok, on_err)
        return self._dispatch(on_ok, on_err)

    def unwrap(self) -> T:
        return self._unwrap()
