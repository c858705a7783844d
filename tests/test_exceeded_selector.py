from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

from services.transaction_service import select_exceeded


def _txs(*sums):
    return [SimpleNamespace(id=i, sum=Decimal(str(s))) for i, s in enumerate(sums, start=1)]


def _sums(result):
    return [int(t.sum) for t in result]


def test_crossing_transaction_is_reported() -> None:
    assert _sums(select_exceeded(_txs(40, 30, 50), 100)) == [50]


def test_transactions_after_crossing_are_kept_in_order() -> None:
    result = select_exceeded(_txs(40, 70, 10, 5), 100)

    assert _sums(result) == [70, 10, 5]
    assert [t.id for t in result] == [2, 3, 4]


def test_spend_under_cap_selects_nothing() -> None:
    assert select_exceeded(_txs(10, 20, 30), 100) == []


def test_spending_exactly_the_cap_is_not_exceeding() -> None:
    assert select_exceeded(_txs(60, 40), 100) == []


def test_transaction_after_exact_cap_is_exceeding() -> None:
    assert _sums(select_exceeded(_txs(60, 40, 1), 100)) == [1]


def test_empty_window_selects_nothing() -> None:
    assert select_exceeded([], 100) == []


def test_zero_cap_makes_first_transaction_exceeding() -> None:
    assert _sums(select_exceeded(_txs(5, 6), 0)) == [5, 6]


def test_single_transaction_over_cap() -> None:
    assert _sums(select_exceeded(_txs(150), Decimal("100.00"))) == [150]


def test_fractional_amounts() -> None:
    result = select_exceeded(_txs("33.33", "33.33", "33.34", "0.01"), Decimal("100.00"))

    assert [t.sum for t in result] == [Decimal("0.01")]
