"""Loading transaction documents from disk.

A transactions document is a UTF-8 JSON array of flat objects. The loader
never raises: every failure is logged and produces an empty list so that a
ledger can still be built (and queried) from whatever was available.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .logging_setup import get_logger

_logger = get_logger("transaction_ledger.loader")

# Array of objects; values are left untyped on purpose.
_DOCUMENT_ADAPTER: TypeAdapter[list[dict[str, Any]]] = TypeAdapter(list[dict[str, Any]])


def parse_transactions(text: str | bytes) -> list[dict[str, Any]]:
    """Decode a transactions document.

    Raises
    ------
    pydantic.ValidationError
        When ``text`` is not valid JSON or is not an array of objects.
    """

    return _DOCUMENT_ADAPTER.validate_json(text)


def read_transactions_from_file(path: str | PathLike[str]) -> list[dict[str, Any]]:
    """Read and decode the transactions document at ``path``.

    Returns an empty list (after logging the error) when the file is missing
    or unreadable, or when its content is not an array of objects.
    """

    p = Path(path)
    try:
        transactions = parse_transactions(p.read_bytes())
    except FileNotFoundError:
        _logger.error("Error reading transactions file: not found: %s", p)
        return []
    except OSError:
        _logger.exception("Error reading transactions file: %s", p)
        return []
    except ValidationError as e:
        _logger.error(
            "Error reading transactions file: %s is not a JSON array of objects (%d error(s)): %s",
            p,
            e.error_count(),
            e.errors(include_url=False)[0]["msg"],
        )
        return []

    _logger.debug("Loaded %d transactions from %s", len(transactions), p)
    return transactions


__all__ = ["parse_transactions", "read_transactions_from_file"]
