"""Runs the model, component and dataformat passes for a project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import CatalogConfig, load_config
from .constants import BUILD_DIR_NAME, MODEL_PACKAGE, MODULE_OUTPUT
from .errors import CatalogError
from .logging import get_logger
from .models import URI_PATH_CHECK, DescriptorKind, PassConfig, PassReport, SourceRoot
from .passes import CatalogPass
from .report import MarkdownReportWriter, ReportPrinter


@dataclass
class PrepareOutcome:
    """Result of a full catalog preparation run."""

    reports: List[PassReport]
    report_file: Optional[Path] = None


class Orchestrator:
    """Coordinates the three catalog passes in their fixed order."""

    def __init__(
        self,
        printer: ReportPrinter | None = None,
        markdown_writer: MarkdownReportWriter | None = None,
    ) -> None:
        self.printer = printer or ReportPrinter()
        self._markdown_writer = markdown_writer
        self.logger = get_logger("orchestrator")

    def run_prepare(
        self,
        path: str,
        *,
        components_dir: str | None = None,
        core_dir: str | None = None,
        output_dir: str | None = None,
        report_file: str | None = None,
    ) -> PrepareOutcome:
        """Prepare the catalog for the project at ``path``."""
        project_path = Path(path).expanduser().resolve()
        if not project_path.is_dir():
            raise FileNotFoundError(f"Project path not found: {path}")
        self.logger.info("Preparing catalog for %s", project_path)

        config = load_config(project_path)
        if components_dir:
            config.components_dir = Path(components_dir).expanduser().resolve()
        if core_dir:
            config.core_dir = Path(core_dir).expanduser().resolve()
        if output_dir:
            config.output_dir = Path(output_dir).expanduser().resolve()
        if report_file:
            config.report.file = Path(report_file).expanduser().resolve()

        return self.run(config)

    def run(self, config: CatalogConfig) -> PrepareOutcome:
        """Run every pass for an already loaded configuration."""
        reports: List[PassReport] = []
        for pass_config in self.build_pass_configs(config):
            report = CatalogPass(pass_config).run()
            self.printer.print(report)
            reports.append(report)

        written: Optional[Path] = None
        if config.report.file is not None:
            writer = self._markdown_writer or MarkdownReportWriter(config.report.templates_dir)
            try:
                written = writer.write(reports, config.report.file)
            except OSError as exc:
                raise CatalogError(
                    f"Error writing report to {config.report.file}", destination=config.report.file
                ) from exc
            self.logger.info("Wrote catalog report to %s", written)

        return PrepareOutcome(reports=reports, report_file=written)

    def build_pass_configs(self, config: CatalogConfig) -> List[PassConfig]:
        """Return the model, component and dataformat pass configurations."""
        module_roots = self._module_roots(config)
        core_root = SourceRoot(module=config.core_dir, path=config.core_dir / MODULE_OUTPUT)

        return [
            PassConfig(
                kind=DescriptorKind.MODEL,
                source_roots=[
                    SourceRoot(module=config.core_dir, path=config.core_dir / MODULE_OUTPUT / MODEL_PACKAGE)
                ],
                output_dir=config.models_out_dir,
                index_file_name=DescriptorKind.MODEL.index_file_name,
            ),
            PassConfig(
                kind=DescriptorKind.COMPONENT,
                source_roots=[*module_roots, core_root],
                output_dir=config.components_out_dir,
                index_file_name=DescriptorKind.COMPONENT.index_file_name,
                extra_checks=(URI_PATH_CHECK,),
                report_missing_descriptors=True,
            ),
            PassConfig(
                kind=DescriptorKind.DATAFORMAT,
                source_roots=[*module_roots, core_root],
                output_dir=config.dataformats_out_dir,
                index_file_name=DescriptorKind.DATAFORMAT.index_file_name,
            ),
        ]

    def _module_roots(self, config: CatalogConfig) -> List[SourceRoot]:
        components_dir = config.components_dir
        if not components_dir.is_dir():
            self.logger.debug("Components directory %s not found; skipping modules", components_dir)
            return []
        return [
            SourceRoot(module=module, path=module / MODULE_OUTPUT)
            for module in sorted(components_dir.iterdir())
            if module.is_dir() and module.name != BUILD_DIR_NAME
        ]


__all__ = ["Orchestrator", "PrepareOutcome"]
