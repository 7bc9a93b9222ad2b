"""Plain-text index files listing the descriptors in an output directory."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .errors import CatalogError
from .models import DESCRIPTOR_SUFFIX, descriptor_name


def collect_names(output_dir: Path) -> List[str]:
    """Return the sorted descriptor names present in ``output_dir``."""
    names = [
        descriptor_name(entry)
        for entry in output_dir.iterdir()
        if entry.name.endswith(DESCRIPTOR_SUFFIX)
    ]
    return sorted(names)


def write_index(output_dir: Path, index_path: Path) -> List[str]:
    """Overwrite ``index_path`` with one descriptor name per line."""
    try:
        names = collect_names(output_dir)
        payload = "".join(f"{name}\n" for name in names)
        index_path.write_bytes(payload.encode("utf-8"))
    except OSError as exc:
        raise CatalogError(f"Error writing to file {index_path}", destination=index_path) from exc
    return names


def read_index(index_path: Path) -> List[str]:
    """Return the names listed in an index file, ignoring blank lines."""
    text = index_path.read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


__all__ = ["collect_names", "read_index", "write_index"]
