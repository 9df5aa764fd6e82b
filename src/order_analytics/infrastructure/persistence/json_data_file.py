"""Shared JSON document holding both products and orders.

The file layout is ``{"products": [...], "orders": [...]}``.  Each
repository reads and rewrites only its own key and leaves the other
untouched.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from order_analytics.domain.exceptions import DataFileError

logger = logging.getLogger(__name__)

_SECTIONS = ("products", "orders")


class JsonDataFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def read_section(self, name: str) -> list[dict]:
        return self._load().get(name, [])

    def write_section(self, name: str, records: list[dict]) -> None:
        document = self._load()
        document[name] = records
        self._file_path.write_text(
            json.dumps(document, indent=2, default=_encode_decimal) + "\n",
            encoding="utf-8",
        )
        logger.info("Wrote %d %s to %s", len(records), name, self._file_path)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        try:
            # parse_float keeps prices exact (12.99 stays 12.99)
            document = json.loads(
                self._file_path.read_text(encoding="utf-8"), parse_float=Decimal
            )
        except (OSError, json.JSONDecodeError) as exc:
            raise DataFileError(f"Cannot read data file {self._file_path}: {exc}") from exc

        if not isinstance(document, dict):
            raise DataFileError(
                f"Data file {self._file_path} must contain a JSON object"
            )
        return document

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            empty = {name: [] for name in _SECTIONS}
            self._file_path.write_text(json.dumps(empty, indent=2) + "\n", encoding="utf-8")
            logger.debug("Created empty data file %s", self._file_path)


def _encode_decimal(value: object) -> int | float:
    # A Decimal with fractional digits was read or entered as a float (45.0
    # stays 45.0); one without them was an int.
    if isinstance(value, Decimal):
        if value.as_tuple().exponent >= 0:
            return int(value)
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
