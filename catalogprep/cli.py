"""CLI entrypoints for catalogprep commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .errors import CatalogError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalogprep",
        description="Collect module descriptors into a catalog with index files and a report.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print warnings on the console.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write the full log to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    prepare_parser = subparsers.add_parser(
        "prepare",
        help="Copy model, component and dataformat descriptors into the catalog.",
    )
    _add_verbose_option(prepare_parser, suppress_default=True)
    prepare_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the catalog project (defaults to current directory).",
    )
    prepare_parser.add_argument(
        "--components-dir",
        default=None,
        help="Directory holding one subdirectory per component module.",
    )
    prepare_parser.add_argument(
        "--core-dir",
        default=None,
        help="Core module directory providing models and core components.",
    )
    prepare_parser.add_argument(
        "--output-dir",
        default=None,
        help="Catalog output root; models/, components/ and dataformats/ are created below it.",
    )
    prepare_parser.add_argument(
        "--report-file",
        default=None,
        help="Write a markdown report of all passes to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for catalogprep commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=log_file)

    orchestrator = Orchestrator()

    if args.command == "prepare":
        try:
            outcome = orchestrator.run_prepare(
                args.path,
                components_dir=args.components_dir,
                core_dir=args.core_dir,
                output_dir=args.output_dir,
                report_file=args.report_file,
            )
        except (FileNotFoundError, ConfigError) as exc:
            parser.exit(1, f"{exc}\n")
        except CatalogError as exc:
            parser.exit(1, f"catalogprep prepare failed: {exc}\nRun with --verbose for more details.\n")
        except OSError as exc:
            parser.exit(1, f"catalogprep prepare failed: {exc}\nRun with --verbose for more details.\n")
        for report in outcome.reports:
            print(
                f"{report.kind.plural}: {len(report.index_names)} descriptors -> {_relativize(report.index_path)}"
            )
        if outcome.report_file is not None:
            print(f"Report written to {_relativize(outcome.report_file)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
