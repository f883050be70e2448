from __future__ import annotations

import pickle

import pytest

from resolved import ErrorAccessError, MissingStateError, ResolvedError, UnknownPolicyError, UnwrapError, ValidationError


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (MissingStateError(), 10),
        (UnwrapError(None, "boom", "unwrap failed"), 20),
        (ErrorAccessError("boom", "access failed"), 30),
        (UnknownPolicyError("forward"), 40),
        (ValidationError("invalid"), 100),
    ],
)
def test_codes(error: ResolvedError, code: int) -> None:
    assert isinstance(error, ResolvedError)
    assert error.code == code
    assert str(error).startswith(f"[{code:03}] ")


@pytest.mark.parametrize(
    "error",
    [
        MissingStateError("missing"),
        UnwrapError(None, "boom", "unwrap failed"),
        ErrorAccessError("boom", "access failed"),
        UnknownPolicyError("forward"),
        ValidationError("invalid"),
    ],
)
def test_pickle(error: ResolvedError) -> None:
    restored = pickle.loads(pickle.dumps(error))  # noqa: S301
    assert type(restored) is type(error)
    assert str(restored) == str(error)
