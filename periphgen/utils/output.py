"""Output directory handling for generated packages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Union

logger = logging.getLogger(__name__)


class OutputDirectory:
    """A directory that generated files are published into.

    Dry runs log what would be published and write nothing, not even
    the directory itself.
    """

    def __init__(self, path: Union[str, Path], dry_run: bool = False):
        self.path = Path(path)
        self.dry_run = dry_run
        if not dry_run:
            self.path.mkdir(parents=True, exist_ok=True)

    def subdir(self, name: str) -> OutputDirectory:
        """Return an output directory nested under this one."""
        return OutputDirectory(self.path / name, dry_run=self.dry_run)

    def publish(self, rel_path: str, content: str) -> Path:
        """Write content to rel_path, creating parent directories.

        Returns:
            The target path (also in dry runs).

        Raises:
            ValueError: If rel_path escapes the output directory
        """
        target = self.path / rel_path
        if Path(rel_path).is_absolute() or ".." in Path(rel_path).parts:
            raise ValueError(f"File path {rel_path} is outside {self.path}")

        if self.dry_run:
            logger.info("Would publish file %s", target)
            return target

        logger.info("Publishing file %s", target)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8", newline="\n")
        return target

    def publish_all(self, files: Mapping[str, str]) -> list[Path]:
        """Publish every relative path -> content pair, in mapping order."""
        return [self.publish(rel_path, content) for rel_path, content in files.items()]

    def remove_stale(self, files: Mapping[str, str]) -> list[Path]:
        """Delete .py files left over from an earlier run.

        Every directory that files publishes into is scanned (not
        recursively); any .py file in it that files does not list is removed.

        Returns:
            The stale paths (also in dry runs).
        """
        keep = {self.path / rel_path for rel_path in files}
        stale = []
        for directory in sorted({target.parent for target in keep}):
            if not directory.is_dir():
                continue
            for candidate in sorted(directory.glob("*.py")):
                if candidate in keep:
                    continue
                stale.append(candidate)
                if self.dry_run:
                    logger.info("Would remove stale file %s", candidate)
                else:
                    logger.info("Removing stale file %s", candidate)
                    candidate.unlink()
        return stale
