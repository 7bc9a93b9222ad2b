"""Descriptor discovery: walks module output trees and classifies entries."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from .constants import MODEL_DIR_NAME, ROOT_DIR_NAMES
from .logging import get_logger
from .models import DESCRIPTOR_SUFFIX, Classification, DescriptorKind, DiscoveryResult

_LOGGER = get_logger("discovery")


class Classifier(Protocol):
    """Decides what a single directory entry means for one descriptor kind."""

    def classify(self, path: Path) -> Classification:
        """Return the classification for ``path``."""


def read_descriptor_text(path: Path) -> str | None:
    """Return the file's text, or None when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None


class ModelClassifier:
    """Every JSON file in the model tree is a model descriptor."""

    def classify(self, path: Path) -> Classification:
        if path.is_dir():
            return Classification.DIRECTORY
        if path.is_file() and path.name.endswith(DESCRIPTOR_SUFFIX):
            return Classification.DESCRIPTOR
        return Classification.IGNORE


class MarkerClassifier:
    """Matches JSON descriptors by content and marker files by exact name."""

    def __init__(self, content_marker: str, marker_file_name: str) -> None:
        self.content_marker = content_marker
        self.marker_file_name = marker_file_name

    def classify(self, path: Path) -> Classification:
        if path.is_dir():
            if path.name == MODEL_DIR_NAME:
                return Classification.IGNORE
            return Classification.DIRECTORY
        if not path.is_file():
            return Classification.IGNORE
        if path.name.endswith(DESCRIPTOR_SUFFIX):
            text = read_descriptor_text(path)
            if text is not None and self.content_marker in text:
                return Classification.DESCRIPTOR
            return Classification.IGNORE
        if path.name == self.marker_file_name:
            return Classification.MARKER
        return Classification.IGNORE


def classifier_for(kind: DescriptorKind) -> Classifier:
    """Return the classifier used to discover descriptors of ``kind``."""
    if kind is DescriptorKind.MODEL:
        return ModelClassifier()
    if kind.content_marker is None or kind.marker_file_name is None:
        raise ValueError(f"Descriptor kind {kind.value!r} has no marker to classify by")
    return MarkerClassifier(kind.content_marker, kind.marker_file_name)


def discover(root: Path, classifier: Classifier) -> DiscoveryResult:
    """Walk ``root`` recursively and collect descriptor and marker files.

    Files placed directly inside a ``classes`` or ``META-INF`` directory are
    skipped; their subdirectories are still walked. Symlinked directories are
    followed. A root that does not exist or is not a directory produces an
    empty result.
    """
    result = DiscoveryResult()
    if not root.is_dir():
        _LOGGER.debug("Skipping missing source root %s", root)
        return result

    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        current_dir = Path(dirpath)

        dirnames[:] = [
            name
            for name in dirnames
            if classifier.classify(current_dir / name) is Classification.DIRECTORY
        ]

        if current_dir.name in ROOT_DIR_NAMES:
            continue

        for filename in filenames:
            path = current_dir / filename
            classification = classifier.classify(path)
            if classification is Classification.DESCRIPTOR:
                result.descriptors.add(path)
            elif classification is Classification.MARKER:
                result.markers.add(path)

    _LOGGER.debug(
        "Discovered %d descriptors and %d markers under %s",
        len(result.descriptors),
        len(result.markers),
        root,
    )
    return result


__all__ = [
    "Classifier",
    "MarkerClassifier",
    "ModelClassifier",
    "classifier_for",
    "discover",
    "read_descriptor_text",
]
