"""Console and markdown reports summarising catalog passes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence

from jinja2 import Environment, FileSystemLoader

from .constants import (
    BANNER,
    DUPLICATE_LABELS,
    FOUND_LABELS,
    MISSING_DESCRIPTOR_LABELS,
    REPORT_TITLES,
)
from .logging import get_logger
from .models import PassReport, descriptor_name

_TEMPLATES_DIR = Path(__file__).with_name("templates")
_REPORT_TEMPLATE = "report.md.j2"


@dataclass(frozen=True)
class ReportLine:
    """A single report line and the log level it is emitted at."""

    level: int
    text: str


def _info(text: str) -> ReportLine:
    return ReportLine(logging.INFO, text)


def _warn(text: str) -> ReportLine:
    return ReportLine(logging.WARNING, text)


class ReportPrinter:
    """Formats a PassReport into banner-delimited log lines."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("report")

    def build_lines(self, report: PassReport) -> List[ReportLine]:
        kind = report.kind
        lines = [_info(BANNER), _info(""), _info(REPORT_TITLES[kind]), _info("")]

        lines.append(_info(f"\t{FOUND_LABELS[kind]}: {len(report.found)}"))
        lines.extend(_info(f"\t\t{name}") for name in report.names)

        lines.extend(self._warn_block(DUPLICATE_LABELS[kind], report.duplicates))
        lines.extend(self._warn_block("Missing labels detected", report.missing_labels))

        if report.used_labels:
            lines.append(_info(""))
            lines.append(_info(f"\tUsed labels: {len(report.used_labels)}"))
            for label, names in report.used_labels.items():
                lines.append(_info(f"\t\t{label}:"))
                lines.extend(_info(f"\t\t\t{name}") for name in names)

        for check in report.checks:
            lines.extend(self._warn_block(check.heading, report.failed_checks.get(check.name, [])))

        if report.report_missing_descriptors and report.missing_descriptors:
            lines.append(_info(""))
            heading = MISSING_DESCRIPTOR_LABELS[kind]
            lines.append(_warn(f"\t{heading}: {len(report.missing_descriptors)}"))
            lines.extend(_warn(f"\t\t{module.name}") for module in report.missing_descriptors)

        lines.append(_info(""))
        lines.append(_info(BANNER))
        return lines

    def print(self, report: PassReport) -> None:
        for line in self.build_lines(report):
            self.logger.log(line.level, line.text)

    @staticmethod
    def _warn_block(heading: str, paths: Sequence[Path]) -> List[ReportLine]:
        if not paths:
            return []
        lines = [_info(""), _warn(f"\t{heading}: {len(paths)}")]
        lines.extend(_warn(f"\t\t{descriptor_name(path)}") for path in paths)
        return lines


class MarkdownReportWriter:
    """Renders all pass reports of a run into one markdown document."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        directories = [str(_TEMPLATES_DIR)]
        if templates_dir is not None:
            directories.insert(0, str(templates_dir))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, reports: Sequence[PassReport]) -> str:
        template = self._env.get_template(_REPORT_TEMPLATE)
        return template.render(sections=[self._section(report) for report in reports]).strip() + "\n"

    def write(self, reports: Sequence[PassReport], path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(reports), encoding="utf-8")
        return path

    @staticmethod
    def _section(report: PassReport) -> Dict[str, object]:
        kind = report.kind
        checks = [
            {"heading": check.heading, "names": [descriptor_name(p) for p in report.failed_checks.get(check.name, [])]}
            for check in report.checks
        ]
        return {
            "title": REPORT_TITLES[kind],
            "found_label": FOUND_LABELS[kind],
            "names": report.names,
            "duplicate_label": DUPLICATE_LABELS[kind],
            "duplicates": [descriptor_name(path) for path in report.duplicates],
            "missing_labels": [descriptor_name(path) for path in report.missing_labels],
            "used_labels": report.used_labels,
            "checks": [check for check in checks if check["names"]],
            "missing_label": MISSING_DESCRIPTOR_LABELS[kind],
            "missing_descriptors": (
                [module.name for module in report.missing_descriptors]
                if report.report_missing_descriptors
                else []
            ),
            "index_path": report.index_path.as_posix(),
        }


__all__ = ["MarkdownReportWriter", "ReportLine", "ReportPrinter"]
