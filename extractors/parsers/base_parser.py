# extractors/parsers/base_parser.py
"""
Base parser class providing common functionality for all markup parsers.
"""

from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from caching import ParseCache, fingerprint
from extractors.selector_resolver import SelectorFallbackResolver

from .parser_config import ParserConfig


class BaseParser:
    """
    Base class for all markup parsers.
    Owns no state of its own beyond the injected parse cache.
    """

    def __init__(self, cache: Optional[ParseCache] = None):
        """
        Args:
            cache: Shared parse cache; a private one is created when omitted
        """
        self.cache = cache if cache is not None else ParseCache()
        self.config = ParserConfig()
        self.resolver = SelectorFallbackResolver(self.cache)

    def _load_document(
        self, raw_text: str, key: Optional[int] = None
    ) -> Tuple[BeautifulSoup, int]:
        """
        Parse (or fetch from cache) the document for raw_text.

        Args:
            raw_text: Page markup
            key: Fingerprint of raw_text when the caller already computed it

        Returns:
            (document, fingerprint)
        """
        if key is None:
            key = fingerprint(raw_text or "")
        return self.cache.get_parsed_document(raw_text or "", key), key

    def _select(self, document: BeautifulSoup, key: int, selector: str) -> List[Tag]:
        return self.cache.get_query_result(document, selector, key)

    def _select_one(
        self, document: BeautifulSoup, key: int, selector: str
    ) -> Optional[Tag]:
        nodes = self._select(document, key, selector)
        return nodes[0] if nodes else None
