# backend-services/finlearn-api/services/stock_service.py

"""
Stock lookup service
Answers symbol fetch, free-text search and popular-stock queries against an
immutable in-memory catalog.

The catalog and search entries are built once at process start and passed in
at construction; the service never mutates them, so one instance is shared by
all requests without locking.
"""
import logging
from typing import List, Mapping, Optional, Sequence

from shared.contracts import SearchResultEntry, StockRecord

logger = logging.getLogger(__name__)


class StockLookupService:
    def __init__(
        self,
        catalog: Mapping[str, StockRecord],
        search_entries: Sequence[SearchResultEntry],
        popular_symbols: Sequence[str],
    ):
        missing = [s for s in popular_symbols if s not in catalog]
        if missing:
            raise ValueError(f"Popular symbols not present in catalog: {missing}")
        self._catalog = catalog
        self._search_entries = tuple(search_entries)
        self._popular_symbols = tuple(popular_symbols)

    def get_by_symbol(self, symbol: str) -> Optional[StockRecord]:
        """
        Exact, case-insensitive symbol lookup.

        Returns None when the symbol is not in the catalog; absence is an
        expected outcome, not an error.
        """
        sym = symbol.upper()
        record = self._catalog.get(sym)
        if record is None:
            logger.info(f"Stock {sym or '<empty>'} not in catalog.")
        return record

    def search(self, query: str) -> List[SearchResultEntry]:
        """
        Case-insensitive substring match on symbol, name or sector.

        An empty query returns an empty list, never the whole catalog. Results
        keep catalog order and are not capped.
        """
        if not query:
            return []
        needle = query.lower()
        results = [
            entry
            for entry in self._search_entries
            if needle in entry.symbol.lower()
            or needle in entry.name.lower()
            or needle in entry.sector.lower()
        ]
        logger.debug(f"Search '{query}' matched {len(results)} of {len(self._search_entries)} entries.")
        return results

    def get_popular(self) -> List[StockRecord]:
        """Curated featured stocks, in fixed order."""
        return [self._catalog[s] for s in self._popular_symbols]
