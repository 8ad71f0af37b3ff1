# topmark:header:start
#
#   project      : SetterScan
#   file         : file_resolver.py
#   file_relpath : src/setterscan/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the files of a kpt package directory.

The package directory is walked recursively; each file is matched by its POSIX
path relative to the package root:

    1. **Include intersection**: keep files matching *any* include pattern.
    2. **Exclude subtraction**: drop files matching *any* exclude pattern.
    3. Return a **sorted** list of paths for deterministic output.

Patterns follow ``.gitignore`` semantics (``pathspec`` gitwildmatch), so
``*.yaml`` matches at any depth and ``.git/`` removes a whole directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from setterscan.config.logging import get_logger

if TYPE_CHECKING:
    from setterscan.config.logging import SetterscanLogger
    from setterscan.config.model import Config

logger: SetterscanLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def resolve_package_files(root: Path, config: Config) -> list[Path]:
    """Return the files of the package at ``root`` selected by ``config``'s patterns.

    Args:
        root (Path): Package directory (or a single file, returned as-is if it exists).
        config (Config): Provides ``include_patterns`` and ``exclude_patterns``.

    Returns:
        list[Path]: Sorted list of selected files.
    """
    if root.is_file():
        return [root]
    if not root.is_dir():
        logger.warning("No such file or directory: %s", root)
        return []

    candidate_set: set[Path] = {p for p in root.rglob("*") if p.is_file()}
    logger.trace("Candidates under %s: %d", root, len(candidate_set))

    if config.include_patterns:
        spec_include: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.include_patterns)
        )
        candidate_set = {
            p for p in candidate_set if spec_include.match_file(_rel_for_match(p, root))
        }

    if config.exclude_patterns:
        spec_exclude: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.exclude_patterns)
        )
        candidate_set = {
            p for p in candidate_set if not spec_exclude.match_file(_rel_for_match(p, root))
        }

    files: list[Path] = sorted(candidate_set)
    logger.debug("Package files under %s: %d", root, len(files))
    logger.trace("Files: %s", files)
    return files
