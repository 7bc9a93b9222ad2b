"""Label extraction from descriptor text."""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Dict, List, Set

# Exactly one whitespace character after the colon; other layouts yield no label.
LABEL_PATTERN = re.compile(r'"label":\s"([\w,]+)"', re.ASCII)
EMPTY_LABEL = '"label": ""'


def has_empty_label(text: str) -> bool:
    return EMPTY_LABEL in text


def extract_labels(text: str) -> List[str]:
    """Return the comma separated labels declared by the first label field."""
    match = LABEL_PATTERN.search(text)
    if match is None:
        return []
    return [token for token in match.group(1).split(",") if token]


class LabelIndex:
    """Reverse index from label to the descriptor names declaring it."""

    def __init__(self) -> None:
        self._entries: Dict[str, Set[str]] = defaultdict(set)

    def add(self, name: str, labels: List[str]) -> None:
        for label in labels:
            self._entries[label].add(name)

    def __len__(self) -> int:
        return len(self._entries)

    def as_dict(self) -> Dict[str, List[str]]:
        return {label: sorted(names) for label, names in sorted(self._entries.items())}


__all__ = ["EMPTY_LABEL", "LABEL_PATTERN", "LabelIndex", "extract_labels", "has_empty_label"]
