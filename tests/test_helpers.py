from __future__ import annotations

import pytest

from resolved import MissingStateError, TypedOutcome, ValidationError, ValueOutcome, attempt, collect, err, err_from, err_of, ok


def test_attempt_ok() -> None:
    assert attempt(int, "3").unwrap() == 3
    assert attempt(lambda *, base: int("ff", base), base=16).unwrap() == 255


def test_attempt_err() -> None:
    outcome = attempt(int, "three")
    assert outcome.is_err

    diagnostics = outcome.match(lambda _: (), lambda d: d)
    assert len(diagnostics) == 1
    assert isinstance(diagnostics[0], ValueError)


def test_attempt_propagates_base_exceptions() -> None:
    def interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        attempt(interrupt)


def test_collect_ok() -> None:
    assert collect([ValueOutcome(ok(1)), ValueOutcome(ok(2)), ValueOutcome(ok(3))]).unwrap() == [1, 2, 3]


def test_collect_empty() -> None:
    assert collect([]).unwrap() == []


def test_collect_err_keeps_every_diagnostic() -> None:
    a, b, c = ValueError("a"), KeyError("b"), RuntimeError("c")

    r = collect(
        [
            ValueOutcome(err([a, b])),
            ValueOutcome(ok(1)),
            ValueOutcome(err_from(c)),
        ]
    )

    assert r.is_err
    assert r.match(lambda _: (), lambda d: d) == (a, b, c)


def test_collect_err_without_diagnostics() -> None:
    r = collect([ValueOutcome(ok(1)), ValueOutcome(err([]))])
    assert r.is_err
    assert r.match(lambda _: (), lambda d: d) == ()


def test_collect_missing() -> None:
    with pytest.raises(MissingStateError):
        collect([ValueOutcome(ok(1)), ValueOutcome(None)])


def test_collect_rejects_other_shapes() -> None:
    with pytest.raises(ValidationError):
        collect([ValueOutcome(ok(1)), TypedOutcome(err_of("boom"))])  # type: ignore[list-item]
