from __future__ import annotations

from .core import BaseOutcome, Status
from .errors import ErrorAccessError, MissingStateError, ResolvedError, UnknownPolicyError, UnwrapError, ValidationError
from .helpers import attempt, collect
from .markers import Err, Ok, err, err_from, err_of, is_diagnostics, ok
from .outcome import Outcome
from .policies import ForwardingPolicy
from .typed import TypedOutcome
from .value import ValueOutcome

__all__ = [
    "BaseOutcome",
    "Err",
    "ErrorAccessError",
    "ForwardingPolicy",
    "MissingStateError",
    "Ok",
    "Outcome",
    "ResolvedError",
    "Status",
    "TypedOutcome",
    "UnknownPolicyError",
    "UnwrapError",
    "ValidationError",
    "ValueOutcome",
    "attempt",
    "collect",
    "err",
    "err_from",
    "err_of",
    "is_diagnostics",
    "ok",
]
