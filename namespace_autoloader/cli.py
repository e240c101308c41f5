"""Command line entry point for resolving and loading namespaced class files."""

import argparse
import logging
from pathlib import Path

from namespace_autoloader.autoload_registry import AutoloadRegistry
from namespace_autoloader.autoloader_config import AutoloaderConfig
from namespace_autoloader.errors import ConfigurationError
from namespace_autoloader.load_config import load_config
from namespace_autoloader.load_result import LoadResult
from namespace_autoloader.namespace_autoloader import NamespaceAutoloader


def run_resolve(args: argparse.Namespace) -> int:
    """Print the class file path for an identifier."""
    autoloader = NamespaceAutoloader(_config_from_args(args), AutoloadRegistry())
    path = autoloader.convert_class_to_file(
        args.identifier, check_loading_need=args.check
    )
    if path is None:
        return 1
    print(path)
    return 0


def run_load(args: argparse.Namespace) -> int:
    """Load an identifier through a fresh registry and report the outcome."""
    registry = AutoloadRegistry()
    autoloader = NamespaceAutoloader(_config_from_args(args), registry)
    autoloader.init(registry)

    result = autoloader.load(args.identifier)
    print(f"{result.value}: {autoloader.build_path(args.identifier)}")
    return 0 if result is LoadResult.LOADED else 1


def _config_from_args(args: argparse.Namespace) -> AutoloaderConfig:
    overrides = {
        "directory": str(args.directory.resolve()) if args.directory else None,
        "namespace_prefix": args.namespace_prefix,
        "classes_dir": args.classes_dir,
        "force_to_lowercase": args.force_to_lowercase,
    }
    try:
        return load_config(args.config, overrides)
    except ConfigurationError as e:
        raise SystemExit(f"Invalid configuration: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML file with autoloader options",
    )
    common.add_argument(
        "--directory",
        type=Path,
        help="Project root directory (made absolute)",
    )
    common.add_argument(
        "--namespace-prefix",
        help="Namespace owned by the autoloader, e.g. Proj",
    )
    common.add_argument(
        "--classes-dir",
        help="Subdirectory of the root holding all class files",
    )
    common.add_argument(
        "--force-to-lowercase",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Lowercase namespace-derived directories, overriding the config file",
    )
    common.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    ap = argparse.ArgumentParser(
        prog="namespace-autoloader",
        description="Resolve namespaced class identifiers to class-<name>.py files.",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser(
        "resolve", parents=[common], help="Print the class file path"
    )
    resolve.add_argument("identifier", help="Class identifier, e.g. Proj\\Admin\\Page")
    resolve.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the identifier is outside the namespace",
    )
    resolve.set_defaults(func=run_resolve)

    load = sub.add_parser("load", parents=[common], help="Load the class file")
    load.add_argument("identifier", help="Class identifier, e.g. Proj\\Admin\\Page")
    load.set_defaults(func=run_load)

    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
