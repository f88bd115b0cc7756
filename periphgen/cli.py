"""Command line entry point.

Usage:
    python -m periphgen --files "chips/*.svd" --out build/generated
    python -m periphgen --files stm32f303.yaml --out out --family gpio --dry-run
"""

from __future__ import annotations

import argparse
import glob
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import periphgen.gpio  # noqa: F401  (registers the family)
import periphgen.spi  # noqa: F401  (registers the family)
from periphgen.core.exceptions import GenerationError
from periphgen.core.generator import generate_device
from periphgen.core.naming import sanitize_name
from periphgen.core.registry import list_available_families
from periphgen.utils.config_loader import clear_description_cache, get_description
from periphgen.utils.output import OutputDirectory

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="periphgen",
        description="Generate GPIO/SPI register enumeration packages from device descriptions.",
    )
    parser.add_argument(
        "--files",
        "-f",
        required=True,
        help="Glob pattern matching description files (.yaml, .yml, .svd, .xml)",
    )
    parser.add_argument(
        "--out",
        "-o",
        required=True,
        help="Output directory path",
    )
    parser.add_argument(
        "--family",
        action="append",
        choices=list_available_families(),
        help="Peripheral family to generate (repeatable). Defaults to all.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate without writing any file",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Generate families on separate threads",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def generate_file(
    path: Path,
    out_dir: OutputDirectory,
    families: Optional[Sequence[str]] = None,
    parallel: bool = False,
    claimed: Optional[dict[str, Path]] = None,
) -> bool:
    """Generate the package of one description file.

    Families that generated successfully are published even when another
    family of the same device failed. Files left in their directories by
    an earlier run are removed.

    Args:
        claimed: Device package name -> description file, shared across the
            files of one run. A description whose package is already claimed
            by another file fails instead of overwriting it.

    Returns:
        True if every family succeeded.
    """
    logger.info("Loading %s", path)
    try:
        description = get_description(path)
        package = sanitize_name(description.name)
    except GenerationError as exc:
        logger.error("%s: %s", path, exc)
        return False

    if claimed is not None:
        if package in claimed:
            logger.error(
                "%s: device package '%s' is already generated from %s",
                path,
                package,
                claimed[package],
            )
            return False
        claimed[package] = path

    result = generate_device(description, families=families, parallel=parallel)
    files = result.files()
    package_dir = out_dir.subdir(package)
    package_dir.remove_stale(files)
    package_dir.publish_all(files)

    if result.ok:
        logger.info(
            "Generated %s (%s)", description.name, ", ".join(result.outputs) or "no families"
        )
    return result.ok


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    paths = sorted(Path(p) for p in glob.glob(args.files) if Path(p).is_file())
    if not paths:
        logger.error("No files found matching %s", args.files)
        return 1

    # descriptions are cached per path; start each run from the files on disk
    clear_description_cache()
    out_dir = OutputDirectory(args.out, dry_run=args.dry_run)
    claimed: dict[str, Path] = {}
    failed = 0
    for path in paths:
        if not generate_file(
            path, out_dir, families=args.family, parallel=args.parallel, claimed=claimed
        ):
            failed += 1

    if failed:
        logger.error("%d of %d description(s) failed", failed, len(paths))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
