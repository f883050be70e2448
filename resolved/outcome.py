from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from resolved.core import BaseOutcome
from resolved.errors import ValidationError
from resolved.markers import Err, Ok, is_diagnostics
from resolved.policies import ForwardingPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

    from resolved.markers import Diagnostics


class Outcome(BaseOutcome):
    """An outcome whose success carries nothing and whose failure carries diagnostics.

    Example::

        Outcome(ok()).match(
            lambda: ValueOutcome(ok(1)),
            ForwardingPolicy.FORWARD,
        )

    """

    __slots__ = ()

    def _validate(self, value: Ok[Any] | Err[Any] | None) -> None:
        match value:
            case Ok(None) | None:
                pass
            case Ok(payload):
                msg = f"Outcome success carries no payload, got {type(payload).__name__}"
                raise ValidationError(msg)
            case Err(error) if not (isinstance(error, tuple) and is_diagnostics(error)):
                msg = f"Outcome failure must be a `tuple` of `Exception`, got {type(error).__name__}"
                raise ValidationError(msg)

    @overload
    def match[R](self, on_ok: Callable[[], R], on_err: Callable[[Diagnostics], R], /) -> R: ...
    @overload
    def match[O: BaseOutcome](self, on_ok: Callable[[], O], policy: ForwardingPolicy, /) -> O: ...
    def match(self, on_ok: Callable[[], Any], on_err: Callable[[Diagnostics], Any] | ForwardingPolicy, /) -> Any:
        if isinstance(on_err, ForwardingPolicy) or not callable(on_err):
            return self._chain(lambda _: on_ok(), on_err)
        return self._dispatch(lambda _: on_ok(), on_err)

    def unwrap(self) -> None:
        self._unwrap()
