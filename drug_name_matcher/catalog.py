"""Drug catalog loading and mapping of raw rows into catalog entries."""

import json
import os
import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

import structlog

from .core.exceptions import CatalogUnavailableError
from .models.match import CatalogEntry

logger = structlog.get_logger(__name__)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), "data", "sample_catalog.json")

# Metadata keys tried in order for each resolved field
PRODUCT_NAME_KEYS = ("제품명", "product_name")
INGREDIENT_KEYS = ("성분명", "ingredient")
INGREDIENT_A_KEYS = ("성분명A",)


def parse_metadata(raw: Any) -> Dict[str, Any]:
    """
    Parse a metadata payload that may arrive as a dict or a JSON string.

    Args:
        raw: Metadata value from a catalog row

    Returns:
        Metadata dictionary (empty when missing or not an object)
    """
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, str):
        if not raw.strip():
            return {}
        parsed = json.loads(raw)
        return parsed if isinstance(parsed, dict) else {"value": parsed}
    return {"value": raw}


def _first_present(metadata: Dict[str, Any], keys: Tuple[str, ...]) -> Optional[str]:
    for key in keys:
        value = metadata.get(key)
        if value:
            return str(value)
    return None


def to_catalog_entry(record: Dict[str, Any]) -> CatalogEntry:
    """
    Map one raw catalog row into a CatalogEntry.

    Rows follow the ``{"content": ..., "metadata": ...}`` shape of the
    drug table. All alternative metadata field names are resolved here so
    the match engine only ever sees one entry shape.

    Args:
        record: Raw catalog row

    Returns:
        CatalogEntry for the row

    Raises:
        ValueError: If the row has no string ``content`` or its metadata
            is not valid JSON
    """
    name = record.get("content")
    if not isinstance(name, str):
        raise ValueError(f"Catalog row has no string 'content': {record!r}")

    metadata = parse_metadata(record.get("metadata"))

    return CatalogEntry(
        name=name,
        attributes=metadata,
        product_name=_first_present(metadata, PRODUCT_NAME_KEYS),
        ingredient=_first_present(metadata, INGREDIENT_KEYS),
        ingredient_a=_first_present(metadata, INGREDIENT_A_KEYS),
    )


class CatalogStore:
    """Holds the currently loaded drug catalog."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._entries: Tuple[CatalogEntry, ...] = ()
        self._loaded_at: Optional[float] = None
        self._source: Optional[str] = None

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        """Current catalog entries."""
        return self._entries

    @property
    def size(self) -> int:
        """Number of loaded entries."""
        return len(self._entries)

    @property
    def loaded_at(self) -> Optional[float]:
        """Unix time of the last successful load."""
        return self._loaded_at

    @property
    def source(self) -> Optional[str]:
        """Where the current catalog came from."""
        return self._source

    def load_records(self, records: Iterable[Dict[str, Any]], source: str = "records") -> int:
        """
        Replace the catalog with entries mapped from raw rows.

        Rows that cannot be mapped are skipped with a warning.

        Args:
            records: Raw catalog rows
            source: Label recorded for diagnostics

        Returns:
            Number of entries loaded
        """
        entries: List[CatalogEntry] = []
        skipped = 0

        for index, record in enumerate(records):
            if not isinstance(record, dict):
                logger.warning("catalog_row_skipped", index=index, reason="not an object")
                skipped += 1
                continue
            try:
                entries.append(to_catalog_entry(record))
            except ValueError as e:
                logger.warning("catalog_row_skipped", index=index, reason=str(e))
                skipped += 1

        # Replaced wholesale; readers never see a partially loaded catalog
        self._entries = tuple(entries)
        self._loaded_at = time.time()
        self._source = source

        logger.info("catalog_loaded", source=source, total_entries=len(entries), skipped=skipped)
        return len(entries)

    def load_file(self, path: Optional[str] = None) -> int:
        """
        Load the catalog from a JSON file holding a list of rows.

        Args:
            path: JSON file path (the packaged sample catalog if None)

        Returns:
            Number of entries loaded

        Raises:
            CatalogUnavailableError: If the file is missing, unreadable or malformed
        """
        path = path or DEFAULT_CATALOG_PATH
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise CatalogUnavailableError(f"Catalog file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise CatalogUnavailableError(f"Catalog file is not valid JSON: {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise CatalogUnavailableError(f"Catalog file is not UTF-8 encoded: {path}: {e}") from e
        except OSError as e:
            raise CatalogUnavailableError(f"Catalog file could not be read: {path}: {e}") from e

        if not isinstance(payload, list):
            raise CatalogUnavailableError(f"Catalog file must contain a JSON list: {path}")

        return self.load_records(payload, source=path)

    def require_entries(self) -> Tuple[CatalogEntry, ...]:
        """
        Return the catalog, refusing to search an empty one.

        Raises:
            CatalogUnavailableError: If no entries are loaded
        """
        if not self._entries:
            raise CatalogUnavailableError("The drug catalog is empty")
        return self._entries

    def clear(self) -> None:
        """Drop all entries."""
        self._entries = ()
        self._loaded_at = None
        self._source = None
