"""In-memory query and aggregation engine over a list of transaction records.

:class:`TransactionLedger` owns an ordered list of records and answers
filter/aggregate queries with a full scan per call. There is no index and no
caching; insertion order is preserved and drives every "first seen" rule.

Malformed records are never rejected. An unreadable amount becomes ``NaN``
and silently poisons sums and averages; an unreadable date becomes ``None``
and simply never satisfies a date comparison. The only parameter validation
is the month/day bound check in :meth:`calculate_total_amount_by_date`, which
logs an error and degrades to ``0``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Mapping
from datetime import date
from os import PathLike
from typing import Any

from .coercion import parse_amount, parse_date
from .logging_setup import get_logger
from .models import (
    AMOUNT_FIELD,
    CREDIT,
    DATE_FIELD,
    DEBIT,
    DESCRIPTION_FIELD,
    ID_FIELD,
    MERCHANT_FIELD,
    TYPE_FIELD,
    DominantType,
    TransactionRecord,
    Transactions,
)

_logger = get_logger("transaction_ledger.ledger")

# Month buckets are scanned in this order; unreadable dates come last.
_MONTH_SCAN_ORDER: tuple[int | None, ...] = (*range(1, 13), None)


def _record_amount(record: Mapping[str, Any]) -> float:
    return parse_amount(record.get(AMOUNT_FIELD))


def _record_date(record: Mapping[str, Any]) -> date | None:
    return parse_date(record.get(DATE_FIELD))


def _busiest_month(records: Transactions) -> int | None:
    """Return the 1-indexed month holding the most records.

    Buckets are compared in calendar order with a strict ``>`` so that a tie
    keeps the earlier month. Records whose date cannot be read share one
    bucket checked after December; if that bucket wins, or there are no
    records at all, the result is ``None``.
    """

    counts = Counter(d.month if (d := _record_date(r)) is not None else None for r in records)

    best_month: int | None = None
    best_count = 0
    for month in _MONTH_SCAN_ORDER:
        if counts[month] > best_count:
            best_count = counts[month]
            best_month = month
    return best_month


class TransactionLedger:
    """Ordered, append-only collection of transaction records with queries.

    Parameters
    ----------
    transactions:
        Initial records. When a ``list`` is passed it is adopted as the backing
        store as-is (no copy), so the caller and the ledger share it; any other
        iterable is materialized into a new list.
    """

    def __init__(self, transactions: Iterable[TransactionRecord] | None = None) -> None:
        if transactions is None:
            transactions = []
        self._transactions: list[TransactionRecord] = (
            transactions if isinstance(transactions, list) else list(transactions)
        )

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> TransactionLedger:
        """Build a ledger from a JSON transactions document.

        Loading failures are logged by the loader and produce an empty ledger.
        """

        from .loader import read_transactions_from_file

        return cls(read_transactions_from_file(path))

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[TransactionRecord]:
        return iter(self._transactions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._transactions)} transactions)"

    # ------------------------------------------------------------------
    # Mutation and raw access
    # ------------------------------------------------------------------

    def add_transaction(self, record: TransactionRecord) -> None:
        """Append ``record`` to the end of the ledger without validation."""

        self._transactions.append(record)

    def get_all_transactions(self) -> list[TransactionRecord]:
        """Return the backing list itself, not a copy.

        The returned list is a live view: later :meth:`add_transaction` calls
        show up in it, and mutating it mutates the ledger.
        """

        return self._transactions

    def _filter(self, predicate: Callable[[TransactionRecord], bool]) -> list[TransactionRecord]:
        return [r for r in self._transactions if predicate(r)]

    # ------------------------------------------------------------------
    # Type queries
    # ------------------------------------------------------------------

    def get_unique_transaction_type(self) -> list[Any]:
        """Distinct ``transaction_type`` values in first-seen order."""

        return list(dict.fromkeys(r.get(TYPE_FIELD) for r in self._transactions))

    def get_transactions_by_type(self, transaction_type: str) -> list[TransactionRecord]:
        return self._filter(lambda r: r.get(TYPE_FIELD) == transaction_type)

    def most_transaction_types(self) -> DominantType:
        """Say whether debits or credits are more frequent.

        Returns ``"debit"`` or ``"credit"`` for a strict majority and
        ``"equal"`` otherwise (including when there are neither). Records of
        any other type are ignored.
        """

        counts = Counter(r.get(TYPE_FIELD) for r in self._transactions)
        debits, credits = counts[DEBIT], counts[CREDIT]
        if debits > credits:
            return DEBIT
        if credits > debits:
            return CREDIT
        return "equal"

    # ------------------------------------------------------------------
    # Amount aggregations
    # ------------------------------------------------------------------

    def calculate_total_amount(self) -> float:
        """Sum of all amounts; ``0`` for an empty ledger."""

        return sum((_record_amount(r) for r in self._transactions), 0)

    def calculate_total_debit_amount(self) -> float:
        return sum(
            (_record_amount(r) for r in self._transactions if r.get(TYPE_FIELD) == DEBIT),
            0,
        )

    def calculate_average_transaction_amount(self) -> float:
        """Mean amount; ``0`` for an empty ledger."""

        if not self._transactions:
            return 0
        return self.calculate_total_amount() / len(self._transactions)

    def calculate_total_amount_by_date(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> float:
        """Sum amounts of records falling on a (possibly partial) date.

        Each component is optional: ``None`` or ``0`` matches any value, so
        ``(2019, 1, None)`` totals January 2019 and ``(None, None, 14)``
        totals every 14th. ``month`` is 1-indexed.

        When ``month`` is given outside ``1..12`` or ``day`` outside ``1..31``
        an error is logged and ``0`` is returned without scanning. No other
        calendar validation is done, so ``day=31`` for a 30-day month is
        accepted and simply matches nothing.
        """

        if (month and not 1 <= month <= 12) or (day and not 1 <= day <= 31):
            _logger.error(
                "Invalid date query: year=%r month=%r day=%r (month must be 1-12, day 1-31)",
                year,
                month,
                day,
            )
            return 0

        def _matches(record: TransactionRecord) -> bool:
            if not (year or month or day):
                return True
            d = _record_date(record)
            if d is None:
                return False
            return (
                (not year or d.year == year)
                and (not month or d.month == month)
                and (not day or d.day == day)
            )

        return sum((_record_amount(r) for r in self._transactions if _matches(r)), 0)

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def get_transactions_in_date_range(
        self, start_date: str | date, end_date: str | date
    ) -> list[TransactionRecord]:
        """Records dated within ``[start_date, end_date]`` (both inclusive).

        Bounds are parsed like record dates. A start after the end yields an
        empty list; the bounds are never swapped.
        """

        start, end = parse_date(start_date), parse_date(end_date)
        if start is None or end is None:
            return []

        def _in_range(record: TransactionRecord) -> bool:
            d = _record_date(record)
            return d is not None and start <= d <= end

        return self._filter(_in_range)

    def get_transactions_before_date(self, target_date: str | date) -> list[TransactionRecord]:
        """Records dated strictly before ``target_date``."""

        target = parse_date(target_date)
        if target is None:
            return []

        def _before(record: TransactionRecord) -> bool:
            d = _record_date(record)
            return d is not None and d < target

        return self._filter(_before)

    def get_transactions_by_merchant(self, merchant_name: str) -> list[TransactionRecord]:
        return self._filter(lambda r: r.get(MERCHANT_FIELD) == merchant_name)

    def get_transactions_by_amount_range(
        self, min_amount: float, max_amount: float
    ) -> list[TransactionRecord]:
        """Records whose coerced amount lies within ``[min_amount, max_amount]``.

        ``min_amount > max_amount`` yields an empty list. ``NaN`` amounts never
        match.
        """

        return self._filter(lambda r: min_amount <= _record_amount(r) <= max_amount)

    # ------------------------------------------------------------------
    # Month statistics
    # ------------------------------------------------------------------

    def find_most_transactions_month(self) -> int | None:
        """Month (1-12) with the most transactions, earliest month on ties.

        Returns ``None`` when the ledger is empty.
        """

        month = _busiest_month(self._transactions)
        if month is None:
            _logger.warning("No month found: ledger has no transactions with a readable date")
        return month

    def find_most_debit_transaction_month(self) -> int | None:
        """Month (1-12) with the most debit transactions, earliest month on ties.

        Returns ``None`` when there are no debit transactions.
        """

        month = _busiest_month(r for r in self._transactions if r.get(TYPE_FIELD) == DEBIT)
        if month is None:
            _logger.warning("No month found: ledger has no debit transactions with a readable date")
        return month

    # ------------------------------------------------------------------
    # Lookup and projection
    # ------------------------------------------------------------------

    def find_transaction_by_id(self, transaction_id: Any) -> TransactionRecord | None:
        """First record whose ``transaction_id`` equals ``transaction_id``, else ``None``."""

        return next((r for r in self._transactions if r.get(ID_FIELD) == transaction_id), None)

    def map_transaction_descriptions(self) -> list[Any]:
        """Descriptions in ledger order; ``None`` where a record has none."""

        return [r.get(DESCRIPTION_FIELD) for r in self._transactions]


__all__ = ["TransactionLedger"]
