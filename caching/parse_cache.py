# caching/parse_cache.py
"""
Content-addressed cache for parsed documents and repeated selector queries.

Documents are keyed by a 32-bit polynomial fingerprint of the raw markup.
Fingerprints can collide, so each stored document keeps its source text and a
hit is only served when the text matches; a colliding input is parsed fresh and
never stored.
"""

import logging
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

_MASK_32 = 0xFFFFFFFF


def fingerprint(raw_text: str) -> int:
    """
    32-bit rolling hash (h = h * 31 + unit) over the UTF-16 code units of the text.

    Returns:
        Signed 32-bit integer digest
    """
    value = 0
    for char in raw_text:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            units = (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF))
        else:
            units = (code,)
        for unit in units:
            value = (value * 31 + unit) & _MASK_32
    return value - 0x100000000 if value & 0x80000000 else value


class ParseCache:
    """
    Memoizes parsed trees, query results and derived values for one session.

    There is no eviction: the cache grows until clear() is called.
    """

    def __init__(self, parser_features: str = "html.parser", enabled: bool = True):
        """
        Args:
            parser_features: BeautifulSoup tree builder name
            enabled: When False every call parses and queries afresh
        """
        self.parser_features = parser_features
        self.enabled = enabled
        self._documents: Dict[int, Tuple[str, BeautifulSoup]] = {}
        self._queries: Dict[Tuple[int, str], List[Tag]] = {}
        self._derived: Dict[Tuple[int, Hashable], Any] = {}
        self.hits = 0
        self.misses = 0
        self.collisions = 0

    def parse(self, raw_text: str) -> BeautifulSoup:
        return BeautifulSoup(raw_text or "", self.parser_features)

    def get_parsed_document(
        self, raw_text: str, key: Optional[int] = None
    ) -> BeautifulSoup:
        """
        Return the parsed tree for raw_text, parsing at most once per fingerprint.

        Args:
            raw_text: Markup fragment
            key: Precomputed fingerprint of raw_text, if the caller has one

        Returns:
            BeautifulSoup document; callers must not mutate it
        """
        if not self.enabled:
            return self.parse(raw_text)

        key = fingerprint(raw_text) if key is None else key
        cached = self._documents.get(key)
        if cached is not None:
            source, document = cached
            if source == raw_text:
                self.hits += 1
                logger.debug(f"Parse cache hit for fingerprint {key}")
                return document
            self.collisions += 1
            logger.warning(
                f"Fingerprint collision on {key}; parsing without caching"
            )
            return self.parse(raw_text)

        self.misses += 1
        logger.debug(f"Parse cache miss for fingerprint {key}")
        document = self.parse(raw_text)
        self._documents[key] = (raw_text, document)
        return document

    def is_cached_document(self, document: BeautifulSoup, key: int) -> bool:
        cached = self._documents.get(key)
        return cached is not None and cached[1] is document

    def get_query_result(
        self, document: BeautifulSoup, selector: str, key: int
    ) -> List[Tag]:
        """
        Run a CSS selector against document, memoized by (fingerprint, selector).

        A document that is not the one stored under key (cache disabled or a
        collision) is queried directly and the result is not stored.
        """
        if not self.enabled or not self.is_cached_document(document, key):
            return list(document.select(selector))

        query_key = (key, selector)
        if query_key not in self._queries:
            self._queries[query_key] = list(document.select(selector))
        return list(self._queries[query_key])

    def get_or_compute(
        self,
        document: BeautifulSoup,
        key: int,
        name: Hashable,
        factory: Callable[[], Any],
    ) -> Any:
        """
        Memoize a value derived from a cached document, e.g. a finished extraction.
        """
        if not self.enabled or not self.is_cached_document(document, key):
            return factory()

        derived_key = (key, name)
        if derived_key not in self._derived:
            self._derived[derived_key] = factory()
        return self._derived[derived_key]

    def clear(self) -> None:
        """
        Evict every stored document, query result and derived value.
        """
        self._documents.clear()
        self._queries.clear()
        self._derived.clear()
        logger.debug("Parse cache cleared")

    def stats(self) -> Dict[str, int]:
        return {
            "documents": len(self._documents),
            "queries": len(self._queries),
            "derived": len(self._derived),
            "hits": self.hits,
            "misses": self.misses,
            "collisions": self.collisions,
        }

    def __len__(self) -> int:
        return len(self._documents)
