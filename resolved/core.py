from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Self

from typing_extensions import assert_never

from resolved.errors import ErrorAccessError, MissingStateError, UnknownPolicyError, UnwrapError, ValidationError
from resolved.markers import Err, Ok, aggregate, is_diagnostics
from resolved.policies import ForwardingPolicy

if TYPE_CHECKING:
    from collections.abc import Callable


class Status(Enum):
    OK = auto()
    ERR = auto()
    MISSING = auto()


class BaseOutcome:
    """Storage and read-only projections shared by every outcome shape.

    The status is computed once, at construction, and is what every resolving
    operation dispatches on. An outcome built from ``None`` is in the
    ``MISSING`` state: it answers ``is_ok``/``is_err`` with ``False`` and
    raises ``MissingStateError`` as soon as it is matched or unwrapped.
    """

    __slots__ = ("_status", "_value")

    def __init__(self, value: Ok[Any] | Err[Any] | None) -> None:
        match value:
            case Ok():
                self._status = Status.OK
            case Err():
                self._status = Status.ERR
            case None:
                self._status = Status.MISSING
            case _:
                msg = f"value must be `Ok | Err | None`, got {type(value).__name__}"
                raise ValidationError(msg)

        self._validate(value)
        self._value = value

    def _validate(self, value: Ok[Any] | Err[Any] | None) -> None:
        pass

    @property
    def status(self) -> Status:
        return self._status

    @property
    def value(self) -> Ok[Any] | Err[Any] | None:
        return self._value

    @property
    def is_ok(self) -> bool:
        return self._status is Status.OK

    @property
    def is_err(self) -> bool:
        return self._status is Status.ERR

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self._value == other._value  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((type(self), self._status, self._value))

    def _dispatch[R](self, on_ok: Callable[[Any], R], on_err: Callable[[Any], R]) -> R:
        match self._status:
            case Status.OK:
                return on_ok(self._value.value)  # type: ignore[union-attr]
            case Status.ERR:
                return on_err(self._value.value)  # type: ignore[union-attr]
            case Status.MISSING:
                raise MissingStateError

    def _forward(self, policy: ForwardingPolicy) -> Self:
        assert isinstance(self._value, Err)
        match policy:
            case ForwardingPolicy.FORWARD:
                # same marker, the failure payload travels by identity
                return type(self)(self._value)
            case ForwardingPolicy.RAISE_ON_ACCESS:
                error = self._value.value
                raise ErrorAccessError(error, f"Called `match` on a failure with {policy.name}: {error!r}") from self._cause()
            case _:
                assert_never(policy)

    def _chain[O](self, on_ok: Callable[[Any], O], policy: ForwardingPolicy) -> O:
        if not isinstance(policy, ForwardingPolicy):
            raise UnknownPolicyError(policy)
        return self._dispatch(on_ok, lambda _: self._forward(policy))  # type: ignore[return-value]

    def _cause(self) -> BaseException | None:
        assert isinstance(self._value, Err)
        error = self._value.value
        if is_diagnostics(error):
            return aggregate(error, f"{type(self).__name__} failed with {len(error)} diagnostic(s)")
        return None

    def _unwrap(self) -> Any:
        match self._status:
            case Status.OK:
                return self._value.value  # type: ignore[union-attr]
            case Status.ERR:
                error = self._value.value  # type: ignore[union-attr]
                msg = f"Called `unwrap()` on a `{type(error).__name__}` failure: {error!r}"
                raise UnwrapError(self, error, msg) from self._cause()
            case Status.MISSING:
                msg = "outcome has no success payload, it must be either Ok or Err"
                raise MissingStateError(msg)
