from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, final, overload

from typing_extensions import TypeIs

from resolved.errors import ValidationError

type Diagnostics = tuple[Exception, ...]


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success marker. ``Ok()`` is the payload-less shape."""

    value: T = None  # type: ignore[assignment]


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure marker, holding either diagnostics or an arbitrary error value."""

    value: E


@overload
def ok() -> Ok[None]: ...
@overload
def ok[T](value: T) -> Ok[T]: ...
def ok(value: Any = None) -> Ok[Any]:
    return Ok(value)


def err(diagnostics: Iterable[Exception] | Exception) -> Err[Diagnostics]:
    if isinstance(diagnostics, Exception):
        return err_from(diagnostics)

    if isinstance(diagnostics, (str, bytes, bytearray)):
        msg = f"diagnostics must be `Iterable[Exception] | Exception`, got {type(diagnostics).__name__}"
        raise ValidationError(msg)

    value = tuple(diagnostics)
    if not is_diagnostics(value):
        bad = next(d for d in value if not isinstance(d, Exception))
        msg = f"diagnostics must only hold `Exception`, got {type(bad).__name__}"
        raise ValidationError(msg)
    return Err(value)


def err_from(diagnostic: Exception) -> Err[Diagnostics]:
    return Err((diagnostic,))


def err_of[E](value: E) -> Err[E]:
    return Err(value)


def is_diagnostics(value: object) -> TypeIs[tuple[Exception, ...] | list[Exception]]:
    return isinstance(value, (tuple, list)) and all(isinstance(d, Exception) for d in value)


def aggregate(diagnostics: Iterable[Exception], msg: str) -> ExceptionGroup | None:
    diagnostics = list(diagnostics)
    if not diagnostics:
        return None
    return ExceptionGroup(msg, diagnostics)
