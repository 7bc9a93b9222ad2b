"""Tests for catalogprep.orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest

from catalogprep.errors import CatalogError
from catalogprep.models import DescriptorKind, PassReport
from catalogprep.orchestrator import Orchestrator
from catalogprep.report import ReportPrinter
from tests._fixtures.catalog_builder import CatalogBuilder, component_json, dataformat_json, model_json


class RecordingPrinter(ReportPrinter):
    """Test double that records the reports it was asked to print."""

    def __init__(self) -> None:
        super().__init__()
        self.printed: list[PassReport] = []

    def print(self, report: PassReport) -> None:
        self.printed.append(report)


def _populate(builder: CatalogBuilder) -> None:
    builder.model("split", model_json("split"))
    builder.component("componentA", "foo-component", component_json("foo", label="core"))
    builder.marker("componentA")
    builder.component("camel-csv", "csv", dataformat_json("csv"))
    builder.marker("camel-csv", "dataformat.properties")
    builder.marker("camel-broken")
    builder.core_file("org/apache/camel/component/bean/bean.json", component_json("bean", label="core,java"))
    builder.core_file("META-INF/services/org/apache/camel/component.properties", "")
    # Build output of the components aggregator itself is never scanned.
    builder.write(builder.components / "target" / "target" / "classes" / "x" / "stray.json", component_json("stray"))


def test_run_prepare_runs_passes_in_order(catalog_builder: CatalogBuilder) -> None:
    _populate(catalog_builder)
    printer = RecordingPrinter()

    outcome = Orchestrator(printer=printer).run_prepare(str(catalog_builder.project))

    kinds = [report.kind for report in outcome.reports]
    assert kinds == [DescriptorKind.MODEL, DescriptorKind.COMPONENT, DescriptorKind.DATAFORMAT]
    assert printer.printed == outcome.reports
    assert outcome.report_file is None

    models, components, dataformats = outcome.reports
    assert models.index_names == ["split"]
    assert components.index_names == ["bean", "foo-component"]
    assert components.used_labels == {"core": ["bean", "foo-component"], "java": ["bean"]}
    assert components.missing_descriptors == [catalog_builder.components / "camel-broken"]
    assert dataformats.index_names == ["csv"]
    assert dataformats.missing_descriptors == []


def test_run_prepare_writes_catalog_layout(catalog_builder: CatalogBuilder) -> None:
    _populate(catalog_builder)

    Orchestrator(printer=RecordingPrinter()).run_prepare(str(catalog_builder.project))

    catalog = catalog_builder.project / "target" / "classes" / "org" / "apache" / "camel" / "catalog"
    assert (catalog / "models" / "split.json").is_file()
    assert (catalog / "components" / "foo-component.json").is_file()
    assert (catalog / "dataformats" / "csv.json").is_file()
    assert (catalog / "models.properties").read_text(encoding="utf-8") == "split\n"
    assert (catalog / "components.properties").read_text(encoding="utf-8") == "bean\nfoo-component\n"
    assert (catalog / "dataformats.properties").read_text(encoding="utf-8") == "csv\n"


def test_run_prepare_applies_overrides_and_report_file(catalog_builder: CatalogBuilder, tmp_path: Path) -> None:
    elsewhere = tmp_path / "elsewhere"
    catalog_builder.write(
        elsewhere / "camel-zip" / "target" / "classes" / "org" / "zip.json",
        component_json("zip", label="file"),
    )
    output_dir = tmp_path / "out"
    report_file = tmp_path / "report.md"

    outcome = Orchestrator(printer=RecordingPrinter()).run_prepare(
        str(catalog_builder.project),
        components_dir=str(elsewhere),
        output_dir=str(output_dir),
        report_file=str(report_file),
    )

    assert (output_dir / "components" / "zip.json").is_file()
    assert (output_dir / "components.properties").read_text(encoding="utf-8") == "zip\n"
    assert outcome.report_file == report_file.resolve()
    text = report_file.read_text(encoding="utf-8")
    assert "## Model catalog report" in text
    assert "- **file**: zip" in text


def test_run_prepare_reads_config_file(catalog_builder: CatalogBuilder) -> None:
    catalog_builder.write(
        catalog_builder.project / ".catalogprep.yml",
        "output_dir: build/catalog\n",
    )
    catalog_builder.model("split", model_json("split"))

    Orchestrator(printer=RecordingPrinter()).run_prepare(str(catalog_builder.project))

    assert (catalog_builder.project / "build" / "catalog" / "models.properties").read_text(encoding="utf-8") == "split\n"


def test_run_prepare_rejects_missing_project(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Orchestrator(printer=RecordingPrinter()).run_prepare(str(tmp_path / "missing"))


def test_run_prepare_propagates_fatal_errors(catalog_builder: CatalogBuilder) -> None:
    catalog_builder.model("split", model_json("split"))
    catalog_builder.write(catalog_builder.project / "blocked", "file in the way\n")

    with pytest.raises(CatalogError):
        Orchestrator(printer=RecordingPrinter()).run_prepare(
            str(catalog_builder.project), output_dir=str(catalog_builder.project / "blocked" / "catalog")
        )


def test_run_prepare_wraps_report_write_failure(catalog_builder: CatalogBuilder) -> None:
    report_dir = catalog_builder.project / "report-dir"
    report_dir.mkdir()

    with pytest.raises(CatalogError) as excinfo:
        Orchestrator(printer=RecordingPrinter()).run_prepare(
            str(catalog_builder.project), report_file=str(report_dir)
        )

    assert excinfo.value.destination == report_dir.resolve()
    assert isinstance(excinfo.value.__cause__, OSError)
