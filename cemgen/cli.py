"""CLI entrypoints for cemgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .config import ConfigError, load_config
from .generator.solid import SolidTypeGenerator
from .logging import configure_logging, get_logger
from .manifest.loader import ManifestError, load_manifest

logger = get_logger("cli")


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    def _default(value: object) -> object:
        return argparse.SUPPRESS if suppress_default else value

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=_default(False),
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=_default(False),
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        type=Path,
        default=_default(None),
        help="Also write a debug log to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cemgen",
        description="Generate framework type declarations from a Custom Elements Manifest.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write Solid-JS JSX type declarations for the manifest's custom elements.",
    )
    _add_logging_options(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "manifest",
        nargs="?",
        default=None,
        help="Path to custom-elements.json (defaults to the configured manifest).",
    )
    generate_parser.add_argument(
        "--config",
        default=".",
        help="Path to .cemgen.yml or the directory containing it.",
    )
    generate_parser.add_argument("--outdir", help="Directory the declaration file is written to.")
    generate_parser.add_argument("--file-name", dest="file_name", help="Name of the generated file.")
    generate_parser.add_argument("--prefix", help="Prefix added to every tag name.")
    generate_parser.add_argument("--suffix", help="Suffix added to every tag name.")
    generate_parser.add_argument(
        "--exclude",
        nargs="+",
        metavar="NAME",
        help="Component class names to leave out.",
    )
    generate_parser.add_argument(
        "--global-type-path",
        dest="global_type_path",
        help="Module that exports every component class type.",
    )
    generate_parser.add_argument(
        "--component-type-path",
        dest="component_type_path",
        help="Per-component import path, formatted with {name} and {tag_name}.",
    )
    generate_parser.add_argument(
        "--types-src",
        dest="types_src",
        help="Manifest field to read member types from (type, parsedType, expandedType).",
    )
    generate_parser.add_argument(
        "--default-export",
        dest="default_export",
        action="store_true",
        default=None,
        help="Import component classes as default exports.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the declarations instead of writing them.",
    )
    return parser


_OVERRIDE_KEYS = (
    "outdir",
    "file_name",
    "prefix",
    "suffix",
    "exclude",
    "global_type_path",
    "component_type_path",
    "types_src",
    "default_export",
)


def _collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for key in _OVERRIDE_KEYS:
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    return overrides


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cemgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file)

    if args.command == "generate":
        try:
            config = load_config(Path(args.config))
            options = config.resolved_options(_collect_overrides(args))
            manifest_path = Path(args.manifest) if args.manifest else config.manifest
            manifest = load_manifest(manifest_path)
        except (ConfigError, ManifestError) as exc:
            parser.exit(1, f"{exc}\n")

        generator = SolidTypeGenerator()
        if args.dry_run:
            if options.skip:
                logger.info("Skipping Solid-JS type generation")
                return
            print(generator.render(manifest, options), end="")
            return
        try:
            output_path = generator.generate(manifest, options)
        except OSError as exc:
            parser.exit(1, f"cemgen generate failed: {exc}\nRun with --verbose for more details.\n")
        if output_path is not None:
            print(f"Declarations written to {_relativize(output_path)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
