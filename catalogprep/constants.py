"""Fixed layout and report wording for the catalog preparation run."""

from __future__ import annotations

from typing import Dict

from .models import DescriptorKind

CATALOG_PACKAGE = "org/apache/camel/catalog"
MODEL_PACKAGE = "org/apache/camel/model"

MODULE_OUTPUT = "target/classes"
DEFAULT_COMPONENTS_DIR = "../components"
DEFAULT_CORE_DIR = "../camel-core"
DEFAULT_OUTPUT_DIR = f"{MODULE_OUTPUT}/{CATALOG_PACKAGE}"

# Module build directories are skipped when listing sibling modules.
BUILD_DIR_NAME = "target"

# Files sitting directly in these directories are never descriptors or markers.
ROOT_DIR_NAMES = frozenset({"classes", "META-INF"})

# Model descriptors come from their own tree, so component and dataformat
# walks never enter directories with this name.
MODEL_DIR_NAME = "model"

BANNER = "=" * 80

REPORT_TITLES: Dict[DescriptorKind, str] = {
    DescriptorKind.MODEL: "Model catalog report",
    DescriptorKind.COMPONENT: "Component catalog report",
    DescriptorKind.DATAFORMAT: "Data format catalog report",
}

FOUND_LABELS: Dict[DescriptorKind, str] = {
    DescriptorKind.MODEL: "Models found",
    DescriptorKind.COMPONENT: "Components found",
    DescriptorKind.DATAFORMAT: "DataFormats found",
}

DUPLICATE_LABELS: Dict[DescriptorKind, str] = {
    DescriptorKind.MODEL: "Duplicate models detected",
    DescriptorKind.COMPONENT: "Duplicate components detected",
    DescriptorKind.DATAFORMAT: "Duplicate dataformats detected",
}

MISSING_DESCRIPTOR_LABELS: Dict[DescriptorKind, str] = {
    DescriptorKind.MODEL: "Missing models detected",
    DescriptorKind.COMPONENT: "Missing components detected",
    DescriptorKind.DATAFORMAT: "Missing dataformats detected",
}

__all__ = [
    "BANNER",
    "BUILD_DIR_NAME",
    "CATALOG_PACKAGE",
    "DEFAULT_COMPONENTS_DIR",
    "DEFAULT_CORE_DIR",
    "DEFAULT_OUTPUT_DIR",
    "DUPLICATE_LABELS",
    "FOUND_LABELS",
    "MISSING_DESCRIPTOR_LABELS",
    "MODEL_DIR_NAME",
    "MODEL_PACKAGE",
    "MODULE_OUTPUT",
    "REPORT_TITLES",
    "ROOT_DIR_NAMES",
]
