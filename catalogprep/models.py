"""Core data models shared across catalogprep components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set

DESCRIPTOR_SUFFIX = ".json"


class Classification(Enum):
    """What a visited filesystem entry means to a discovery walk."""

    DESCRIPTOR = "descriptor"
    MARKER = "marker"
    DIRECTORY = "directory"
    IGNORE = "ignore"


class DescriptorKind(Enum):
    """The three kinds of catalog descriptors, in the order they are prepared."""

    MODEL = "model"
    COMPONENT = "component"
    DATAFORMAT = "dataformat"

    @property
    def content_marker(self) -> Optional[str]:
        if self is DescriptorKind.MODEL:
            return None
        return f'"{self.value}":'

    @property
    def marker_file_name(self) -> Optional[str]:
        if self is DescriptorKind.MODEL:
            return None
        return f"{self.value}.properties"

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @property
    def index_file_name(self) -> str:
        return f"{self.plural}.properties"


def descriptor_name(path: Path | str) -> str:
    """Return the descriptor name for a file: its base name without ``.json``."""
    name = Path(path).name
    if name.endswith(DESCRIPTOR_SUFFIX):
        return name[: -len(DESCRIPTOR_SUFFIX)]
    return name


@dataclass(frozen=True)
class SourceRoot:
    """A directory scanned for descriptors, and the module it belongs to."""

    module: Path
    path: Path


@dataclass
class DiscoveryResult:
    """Descriptor and marker files found under one or more roots."""

    descriptors: Set[Path] = field(default_factory=set)
    markers: Set[Path] = field(default_factory=set)

    def merge(self, other: "DiscoveryResult") -> None:
        self.descriptors.update(other.descriptors)
        self.markers.update(other.markers)

    def sorted_descriptors(self) -> List[Path]:
        return sorted(self.descriptors)


@dataclass(frozen=True)
class RequiredTextCheck:
    """Flags descriptors whose text lacks a required substring."""

    name: str
    needle: str
    heading: str

    def fails(self, text: str) -> bool:
        return self.needle not in text


URI_PATH_CHECK = RequiredTextCheck(
    name="missing-uri-path",
    needle='"kind": "path"',
    heading="Missing @UriPath detected",
)


@dataclass
class PassConfig:
    """Everything one catalog pass needs to know about its descriptor kind."""

    kind: DescriptorKind
    source_roots: List[SourceRoot]
    output_dir: Path
    index_file_name: str
    extra_checks: Sequence[RequiredTextCheck] = ()
    report_missing_descriptors: bool = False

    @property
    def index_path(self) -> Path:
        return self.output_dir.parent / self.index_file_name


@dataclass
class PassReport:
    """Outcome of a single pass, consumed by the console and markdown reports."""

    kind: DescriptorKind
    found: List[Path]
    duplicates: List[Path]
    missing_labels: List[Path]
    used_labels: Dict[str, List[str]]
    failed_checks: Dict[str, List[Path]]
    missing_descriptors: List[Path]
    index_path: Path
    index_names: List[str]
    marker_count: int = 0
    checks: Sequence[RequiredTextCheck] = ()
    report_missing_descriptors: bool = False

    @property
    def names(self) -> List[str]:
        return [descriptor_name(path) for path in self.found]
