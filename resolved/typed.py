from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from resolved.core import BaseOutcome
from resolved.policies import ForwardingPolicy

if TYPE_CHECKING:
    from collections.abc import Callable


class TypedOutcome[T, E](BaseOutcome):
    """An outcome whose success carries a ``T`` and whose failure carries an ``E``.

    ``E`` is opaque and stays fixed along a chain, only ``T`` may change from
    step to step.

    ``unwrap`` has one special case: when the failure payload is a sequence of
    ``Exception`` it is chained as an ``ExceptionGroup`` cause, the same as
    ``ValueOutcome.unwrap``. Any other ``E`` is reported by type and repr only,
    without a cause. This exists for compatibility with diagnostic-style
    failures and is not meant to grow further cases.
    """

    __slots__ = ()

    @overload
    def match[R](self, on_ok: Callable[[T], R], on_err: Callable[[E], R], /) -> R: ...
    @overload
    def match[U](self, on_ok: Callable[[T], TypedOutcome[U, E]], policy: ForwardingPolicy, /) -> TypedOutcome[U, E]: ...
    def match(self, on_ok: Callable[[T], Any], on_err: Callable[[E], Any] | ForwardingPolicy, /) -> Any:
        if isinstance(on_err, ForwardingPolicy) or not callable(on_err):
            return self._chain(on_ok, on_err)
        return self._dispatch(on_ok, on_err)

    def unwrap(self) -> T:
        return self._unwrap()
