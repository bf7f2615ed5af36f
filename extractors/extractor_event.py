# extractors/extractor_event.py
"""
Timeline event extraction.

EventContentClassifier turns one side of one timeline row into a typed,
rendered event. It is a pure function of the cell markup.
"""

import re
from typing import List, Optional, Tuple

from bs4 import Tag

from exceptions import ParsingError
from logger import ClassifiedEvent, EventKind, EventLabels, EventRecord

from .base_extractor import BaseDataExtractor


class EventContentClassifier(BaseDataExtractor):
    """
    Classifies a timeline cell by its graphic markers and participant links.

    When a cell carries several markers the kind is chosen by
    ExtractionConfig.MARKER_PRIORITY, not by document order. A VAR marker next
    to a goal or penalty marker upgrades it to the VAR variant.
    """

    def classify(self, cell: Optional[Tag]) -> ClassifiedEvent:
        """
        Args:
            cell: One home or away slot of a timeline row

        Returns:
            ClassifiedEvent with kind None when nothing was recognized
        """
        if not isinstance(cell, Tag):
            return ClassifiedEvent(kind=None, display=EventLabels.EMPTY)

        markers = self.read_markers(cell)
        kind, title = self.resolve_kind(markers)
        label = EventLabels.label_for(kind, title) if kind else ""
        links = cell.find_all(self.config.LINK_TAG)

        if kind is not None and not links:
            residual = self._residual_text(cell, markers)
            if residual and residual != label:
                return ClassifiedEvent(
                    kind=kind,
                    display=f"{label} {residual}",
                    label=label,
                    participants=(residual,),
                )
            return ClassifiedEvent(kind=kind, display=label, label=label)

        participants, assist = self._read_participants(links)

        if kind is None:
            raw_text = self.extract_normalized_text(cell)
            return ClassifiedEvent(
                kind=None,
                display=raw_text or EventLabels.EMPTY,
                participants=participants,
                assist=assist,
            )

        return ClassifiedEvent(
            kind=kind,
            display=self.render(kind, label, participants, assist) or EventLabels.EMPTY,
            label=label,
            participants=participants,
            assist=assist,
        )

    def read_markers(self, cell: Tag) -> List[Tuple[EventKind, str]]:
        """
        Map every marker image to (kind, title); unknown titled markers become OTHER.
        """
        markers = []
        for image in cell.find_all(self.config.MARKER_TAG):
            src = str(image.get(self.config.SRC_ATTR) or "")
            title = str(
                image.get(self.config.TITLE_ATTR) or image.get(self.config.ALT_ATTR) or ""
            ).strip()

            kind = self._kind_from_src(src) or self._kind_from_title(title)
            if kind is None and title:
                kind = EventKind.OTHER
            if kind is not None:
                markers.append((kind, title))
        return markers

    def resolve_kind(
        self, markers: List[Tuple[EventKind, str]]
    ) -> Tuple[Optional[EventKind], str]:
        """
        Pick one kind from all markers in a cell.

        Returns:
            (kind, title of the winning marker), or (None, "") with no markers
        """
        if not markers:
            return None, ""

        kinds = {kind for kind, _ in markers}
        if EventKind.VAR_REVIEW in kinds:
            for base, upgraded in self.config.VAR_UPGRADES.items():
                if base in kinds:
                    kinds.add(upgraded)

        for candidate in self.config.MARKER_PRIORITY:
            if candidate in kinds:
                title = next((t for k, t in markers if k is candidate), "")
                return candidate, title
        return None, ""

    def render(
        self,
        kind: EventKind,
        label: str,
        participants: Tuple[str, ...],
        assist: Optional[str],
    ) -> str:
        names = " ".join(participants)

        if kind in EventLabels.GOAL_KINDS:
            parts = [label]
            if names:
                parts.append(names)
            if assist:
                parts.append(EventLabels.ASSIST_TEMPLATE.format(assist))
            return " ".join(parts)

        if kind is EventKind.SUBSTITUTION:
            if len(participants) >= 2:
                return f"{label} " + EventLabels.SUB_TEMPLATE.format(
                    participants[0], participants[1]
                )
            if participants:
                return f"{label} {participants[0]}"
            return label

        if kind in EventLabels.CARD_KINDS:
            return f"{names} {label}" if names else label

        return f"{label} {names}" if names else label

    def _kind_from_src(self, src: str) -> Optional[EventKind]:
        if not src:
            return None
        for path, kind in self.config.MARKER_IMAGE_PATHS.items():
            if path in src:
                return kind
        return None

    def _kind_from_title(self, title: str) -> Optional[EventKind]:
        if not title:
            return None
        key = re.sub(r"\s+", "", title.lower()).replace("（", "(").replace("）", ")")
        return self.config.MARKER_TITLES.get(key) or self.config.MARKER_TITLES.get(
            " ".join(title.lower().split())
        )

    def _residual_text(self, cell: Tag, markers: List[Tuple[EventKind, str]]) -> str:
        text = self.extract_normalized_text(cell)
        for _, title in markers:
            if title:
                text = text.replace(title, "")
        return " ".join(text.split())

    def _read_participants(
        self, links: List[Tag]
    ) -> Tuple[Tuple[str, ...], Optional[str]]:
        participants = []
        assist = None
        for link in links:
            text = self.extract_normalized_text(link)
            if not text:
                continue
            token = next((t for t in self.config.ASSIST_TOKENS if t in text), None)
            if token is None:
                participants.append(text)
                continue
            name = text.replace(token, "")
            for char in self.config.ASSIST_STRIP_CHARS:
                name = name.replace(char, "")
            assist = name.strip() or assist
        return tuple(participants), assist


class EventRowExtractor(BaseDataExtractor):
    """
    Reads one timeline row: home cell, time stamp, away cell.
    """

    def __init__(self, classifier: Optional[EventContentClassifier] = None):
        super().__init__()
        self.classifier = classifier or EventContentClassifier()
        self._time_slot = re.compile(self.config.TIME_SLOT_PATTERN)

    def extract_event(self, node: Tag) -> Optional[EventRecord]:
        """
        Returns:
            EventRecord, or None for short rows and rows without a usable time
        """
        slots = self.get_slots(node)
        if len(slots) < self.config.MIN_SLOTS:
            return None

        time_text = self.extract_text_from_cell(slots[self.config.MIDDLE_SLOT_IDX])
        if not time_text or not self._time_slot.search(time_text):
            return None

        try:
            home = self.classifier.classify(slots[self.config.HOME_SLOT_IDX])
            away = self.classifier.classify(slots[self.config.AWAY_SLOT_IDX])
        except (AttributeError, IndexError, TypeError) as error:
            raise ParsingError(
                self.config.ERROR_MESSAGES["event_extraction"].format(error), error
            )
        return EventRecord(
            time=time_text,
            home_event=home.display,
            away_event=away.display,
            home_detail=home,
            away_detail=away,
        )
