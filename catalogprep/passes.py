"""A single discover -> copy -> annotate -> index pass for one descriptor kind."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Set

from .copier import copy_file
from .discovery import Classifier, classifier_for, discover, read_descriptor_text
from .errors import CatalogError
from .index import write_index
from .labels import LabelIndex, extract_labels, has_empty_label
from .logging import get_logger
from .models import DiscoveryResult, PassConfig, PassReport, descriptor_name

CopyFunc = Callable[[Path, Path], object]


class CatalogPass:
    """Copies the descriptors of one kind into the catalog and reports on them."""

    def __init__(
        self,
        config: PassConfig,
        *,
        classifier: Classifier | None = None,
        copier: CopyFunc = copy_file,
    ) -> None:
        self.config = config
        self.classifier = classifier or classifier_for(config.kind)
        self._copy = copier
        self.logger = get_logger("passes")

    def run(self) -> PassReport:
        """Execute the pass; raises CatalogError on copy or write failures."""
        config = self.config
        kind = config.kind
        self.logger.info("Copying all %s json descriptors", kind.value)

        discovered, missing_descriptors = self._discover()
        found = discovered.sorted_descriptors()
        if kind.marker_file_name:
            self.logger.info("Found %d %s files", len(discovered.markers), kind.marker_file_name)
        self.logger.info("Found %d %s json files", len(found), kind.value)

        self._ensure_output_dir()

        duplicates: Set[Path] = set()
        missing_labels: Set[Path] = set()
        failed_checks: Dict[str, Set[Path]] = {check.name: set() for check in config.extra_checks}
        labels = LabelIndex()

        for source in found:
            destination = config.output_dir / source.name
            if destination.exists():
                duplicates.add(destination)
                self.logger.warning("Duplicate %s name detected: %s", kind.value, destination)
            try:
                self._copy(source, destination)
            except OSError as exc:
                raise CatalogError(
                    f"Cannot copy file from {source} -> {destination}",
                    source=source,
                    destination=destination,
                ) from exc

            text = read_descriptor_text(source)
            if text is None:
                continue
            if has_empty_label(text):
                missing_labels.add(source)
            else:
                labels.add(descriptor_name(source), extract_labels(text))
            for check in config.extra_checks:
                if check.fails(text):
                    failed_checks[check.name].add(source)

        index_names = write_index(config.output_dir, config.index_path)
        self.logger.debug("Wrote %d names to %s", len(index_names), config.index_path)

        return PassReport(
            kind=kind,
            found=found,
            duplicates=sorted(duplicates),
            missing_labels=sorted(missing_labels),
            used_labels=labels.as_dict(),
            failed_checks={name: sorted(paths) for name, paths in failed_checks.items()},
            missing_descriptors=missing_descriptors,
            index_path=config.index_path,
            index_names=index_names,
            marker_count=len(discovered.markers),
            checks=tuple(config.extra_checks),
            report_missing_descriptors=config.report_missing_descriptors,
        )

    def _discover(self) -> tuple[DiscoveryResult, List[Path]]:
        combined = DiscoveryResult()
        missing: Set[Path] = set()
        track_markers = self.config.kind.marker_file_name is not None

        for root in self.config.source_roots:
            if not root.path.is_dir():
                continue
            result = discover(root.path, self.classifier)
            new_descriptors = result.descriptors - combined.descriptors
            new_markers = result.markers - combined.markers
            # Compared per root so one healthy module cannot hide a broken sibling.
            if track_markers and new_markers and not new_descriptors:
                missing.add(root.module)
            combined.merge(result)

        return combined, sorted(missing)

    def _ensure_output_dir(self) -> None:
        output_dir = self.config.output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CatalogError(
                f"Cannot create output directory {output_dir}", destination=output_dir
            ) from exc


__all__ = ["CatalogPass"]
