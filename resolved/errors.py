from __future__ import annotations

from typing import Any


class ResolvedError(Exception):
    def __init__(self, msg: str, code: int) -> None:
        super().__init__(msg, code)
        self.msg = msg
        self.code = code

    def __str__(self) -> str:
        return f"[{self.code:03}] {self.msg}"

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.msg, self.code))


class MissingStateError(ResolvedError):
    def __init__(self, msg: str = "outcome value is missing, it must be either Ok or Err") -> None:
        super().__init__(msg, 10)

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.msg,))


class UnwrapError(ResolvedError):
    """Raised by ``unwrap`` when the outcome is a failure.

    The receiver is kept on ``outcome`` and its failure payload on ``error``;
    when the payload is a sequence of diagnostics the aggregate of those
    diagnostics is chained as ``__cause__``.
    """

    def __init__(self, outcome: Any, error: Any, msg: str) -> None:
        super().__init__(msg, 20)
        self.outcome = outcome
        self.error = error

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.outcome, self.error, self.msg))


class ErrorAccessError(ResolvedError):
    def __init__(self, error: Any, msg: str) -> None:
        super().__init__(msg, 30)
        self.error = error

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.error, self.msg))


class UnknownPolicyError(ResolvedError):
    def __init__(self, policy: Any) -> None:
        super().__init__(f"forwarding policy must be `ForwardingPolicy`, got {policy!r}", 40)
        self.policy = policy

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.policy,))


class ValidationError(ResolvedError):
    def __init__(self, msg: str) -> None:
        super().__init__(msg, 100)

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.msg,))
