"""Data model and type aliases for ``transaction_ledger``.

Records are kept as plain mappings exactly as they were decoded from the
transactions document. The engine only ever reads the keys named below and
never enforces a schema: missing keys surface as ``None`` at query time.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, Final, Literal, TypeAlias

# ---------------------------------------------------------------------------
# Record shape
# ---------------------------------------------------------------------------

# Keys of a transaction object in the JSON documents this package consumes.
ID_FIELD: Final = "transaction_id"
DATE_FIELD: Final = "transaction_date"
AMOUNT_FIELD: Final = "transaction_amount"
TYPE_FIELD: Final = "transaction_type"
MERCHANT_FIELD: Final = "merchant_name"
DESCRIPTION_FIELD: Final = "transaction_description"

DEBIT: Final = "debit"
CREDIT: Final = "credit"

TransactionRecord: TypeAlias = MutableMapping[str, Any]
"""A single transaction as a flat mapping.

Notes
-----
- ``transaction_date`` is a string in any layout accepted by
  :func:`transaction_ledger.coercion.parse_date` (ISO ``yyyy-mm-dd`` is
  canonical).
- ``transaction_amount`` is a string or number, coerced with
  :func:`transaction_ledger.coercion.parse_amount`.
- Any other keys are carried along untouched.
"""

Transactions: TypeAlias = Iterable[Mapping[str, Any]]
"""A generic iterable of transaction records (read-only view)."""

DominantType: TypeAlias = Literal["debit", "credit", "equal"]
"""Outcome of :meth:`TransactionLedger.most_transaction_types`."""


__all__ = [
    "AMOUNT_FIELD",
    "CREDIT",
    "DATE_FIELD",
    "DEBIT",
    "DESCRIPTION_FIELD",
    "DominantType",
    "ID_FIELD",
    "MERCHANT_FIELD",
    "TYPE_FIELD",
    "TransactionRecord",
    "Transactions",
]
