"""Text rendering of transaction records."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .models import Transactions


def format_transaction(record: Mapping[str, Any]) -> str:
    """Return ``record`` as a single-line JSON object.

    Keys keep their original order and non-ASCII text is left as-is. Values
    JSON cannot represent (dates, decimals) are rendered with ``str``.
    """

    return json.dumps(dict(record), ensure_ascii=False, default=str)


def format_transactions(records: Transactions) -> str:
    """Render records one per line (JSON Lines)."""

    return "\n".join(format_transaction(r) for r in records)


__all__ = ["format_transaction", "format_transactions"]
