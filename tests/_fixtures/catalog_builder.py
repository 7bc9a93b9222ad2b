"""Helper utilities for constructing throwaway multi-module builds in tests."""

from __future__ import annotations

from pathlib import Path

from catalogprep.config import CatalogConfig, default_config
from catalogprep.constants import MODEL_PACKAGE, MODULE_OUTPUT


def component_json(scheme: str, *, label: str | None = "core", path_param: bool = True) -> str:
    lines = ["{", ' "component": {', '    "kind": "component",', f'    "scheme": "{scheme}",']
    if label is not None:
        lines.append(f'    "label": "{label}",')
    lines.append('    "title": "Test"')
    lines.append(" },")
    lines.append(' "properties": {')
    if path_param:
        lines.append('    "name": { "kind": "path", "type": "string" }')
    else:
        lines.append('    "name": { "kind": "parameter", "type": "string" }')
    lines.append(" }")
    lines.append("}")
    return "\n".join(lines) + "\n"


def dataformat_json(name: str, *, label: str | None = "dataformat,transformation") -> str:
    label_line = f'    "label": "{label}",\n' if label is not None else ""
    return (
        "{\n"
        ' "dataformat": {\n'
        f'    "name": "{name}",\n'
        f"{label_line}"
        '    "title": "Test"\n'
        " }\n"
        "}\n"
    )


def model_json(name: str, *, label: str | None = "eip,routing") -> str:
    label_line = f'    "label": "{label}",\n' if label is not None else ""
    return (
        "{\n"
        ' "model": {\n'
        f'    "name": "{name}",\n'
        f"{label_line}"
        '    "kind": "model"\n'
        " }\n"
        "}\n"
    )


class CatalogBuilder:
    """Writes component modules, a core module and a catalog project under tmp_path."""

    def __init__(self, tmp_path: Path) -> None:
        self.workspace = tmp_path / "workspace"
        self.project = self.workspace / "catalog"
        self.components = self.workspace / "components"
        self.core = self.workspace / "camel-core"
        self.project.mkdir(parents=True)

    def write(self, path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def module_classes(self, module: str) -> Path:
        return self.components / module / MODULE_OUTPUT

    def component(self, module: str, name: str, content: str, *, package: str = "org/example") -> Path:
        return self.write(self.module_classes(module) / package / f"{name}.json", content)

    def marker(self, module: str, filename: str = "component.properties", *, package: str = "META-INF/services/org/example") -> Path:
        return self.write(self.module_classes(module) / package / filename, "class=org.example.Foo\n")

    def core_file(self, relative: str, content: str) -> Path:
        return self.write(self.core / MODULE_OUTPUT / relative, content)

    def model(self, name: str, content: str) -> Path:
        return self.core_file(f"{MODEL_PACKAGE}/{name}.json", content)

    def config(self) -> CatalogConfig:
        return default_config(self.project)


__all__ = ["CatalogBuilder", "component_json", "dataformat_json", "model_json"]
