# extractors/selector_resolver.py
"""
Selector fallback chains.

Each data category has an ordered list of selector rules, most specific first.
The first rule whose selector matches anything wins; a rule may carry a shape
filter that narrows a broad selector down to the nodes of that category.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from bs4 import BeautifulSoup, Tag

from caching import ParseCache

from .base_extractor import BaseDataExtractor
from .extraction_config import ExtractionConfig

logger = logging.getLogger(__name__)

ShapeFilter = Callable[[Tag], bool]

_shape_reader = BaseDataExtractor()


def has_stat_shape(node: Tag) -> bool:
    """
    Three or more slots, and the middle slot is not a time stamp.
    """
    slots = _shape_reader.get_slots(node)
    if len(slots) < _shape_reader.config.MIN_SLOTS:
        return False
    middle = _shape_reader.extract_text_from_cell(
        slots[_shape_reader.config.MIDDLE_SLOT_IDX]
    )
    return not _shape_reader.is_time_like(middle)


def has_event_shape(node: Tag) -> bool:
    """
    Three or more slots, and the middle slot is a time stamp.
    """
    slots = _shape_reader.get_slots(node)
    if len(slots) < _shape_reader.config.MIN_SLOTS:
        return False
    middle = _shape_reader.extract_text_from_cell(
        slots[_shape_reader.config.MIDDLE_SLOT_IDX]
    )
    return _shape_reader.is_time_like(middle)


@dataclass(frozen=True)
class SelectorRule:
    """
    One step of a fallback chain
    """

    selector: str
    shape_filter: Optional[ShapeFilter] = None

    @property
    def is_generic(self) -> bool:
        return self.shape_filter is not None

    def apply(self, nodes: List[Tag]) -> List[Tag]:
        if self.shape_filter is None:
            return list(nodes)
        return [node for node in nodes if self.shape_filter(node)]


@dataclass(frozen=True)
class ResolvedSelection:
    rule: Optional[SelectorRule]
    nodes: List[Tag]

    @property
    def found(self) -> bool:
        return bool(self.nodes)


STATS_RULES: List[SelectorRule] = [
    SelectorRule("#teamTechDiv .lists"),
    SelectorRule(".teamTechDiv .lists"),
    SelectorRule(".lists", has_stat_shape),
]

EVENT_RULES: List[SelectorRule] = [
    SelectorRule("#teamEventDiv .lists"),
    SelectorRule(".teamEventDiv .lists"),
    SelectorRule(".lists", has_event_shape),
]

HEADER_RULES: List[SelectorRule] = [
    SelectorRule(ExtractionConfig.HEADER_SELECTOR),
]


class SelectorFallbackResolver:
    """
    Evaluates fallback chains against a cached document.
    """

    def __init__(self, cache: ParseCache):
        """
        Args:
            cache: Parse cache that memoizes the selector queries
        """
        self.cache = cache

    def resolve(
        self,
        document: BeautifulSoup,
        key: int,
        rules: List[SelectorRule],
        category: str = "",
    ) -> ResolvedSelection:
        """
        Try each rule in order and stop at the first selector with any match.

        Returns:
            The chosen rule with its (shape-filtered) nodes, or an empty
            selection when nothing matched. Never raises for a missing category.
        """
        for rule in rules:
            nodes = self.cache.get_query_result(document, rule.selector, key)
            if not nodes:
                continue
            selected = rule.apply(nodes)
            logger.debug(
                f"{category or 'selection'}: '{rule.selector}' matched "
                f"{len(nodes)} node(s), kept {len(selected)}"
            )
            return ResolvedSelection(rule=rule, nodes=selected)

        logger.debug(f"{category or 'selection'}: no selector matched")
        return ResolvedSelection(rule=None, nodes=[])
