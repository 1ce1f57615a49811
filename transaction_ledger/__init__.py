"""Public interface for the ``transaction_ledger`` package.

Re-exports the query engine, its helpers and the record model as the stable
import surface. There is no runtime logic here, only symbol re-exports.
"""

from .coercion import parse_amount, parse_date
from .formatting import format_transaction, format_transactions
from .ledger import TransactionLedger
from .loader import parse_transactions, read_transactions_from_file
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

__all__ = [
    # Engine
    "TransactionLedger",
    # I/O and presentation
    "read_transactions_from_file",
    "parse_transactions",
    "format_transaction",
    "format_transactions",
    # Coercion
    "parse_amount",
    "parse_date",
    # Models / types
    "TransactionRecord",
    "Transactions",
    "DominantType",
    "ID_FIELD",
    "DATE_FIELD",
    "AMOUNT_FIELD",
    "TYPE_FIELD",
    "MERCHANT_FIELD",
    "DESCRIPTION_FIELD",
    "DEBIT",
    "CREDIT",
]
