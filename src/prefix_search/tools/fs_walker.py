"""
Filesystem walker for Prefix Search.

This module lists every regular file below a root directory. The
walk is depth-first over an explicit stack, visits directory entries in
sorted name order so a run is deterministic, and never aborts because of a
single unreadable directory or entry: those are logged and skipped.
"""

import os
from pathlib import Path
from typing import Dict, List, Iterator, Set, Tuple, Union
import logging


logger = logging.getLogger(__name__)


class FSWalker:
    """
    Filesystem walker that yields the regular files below root directories.

    Symlinks are followed by default. Every directory entered is remembered
    by device and inode, so a symlink pointing back up the tree is skipped
    instead of being walked forever.
    """

    def __init__(self, follow_symlinks: bool = True):
        """
        Initialize the filesystem walker.

        Args:
            follow_symlinks: Whether symlinks to files and directories are followed
        """
        self.follow_symlinks = follow_symlinks
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'files_scanned': 0,
            'directories_traversed': 0,
            'cycles_skipped': 0,
            'errors': 0
        }

    def walk_dir(self, root: Union[str, Path]) -> Iterator[Path]:
        """
        Walk a single directory tree depth-first.

        Args:
            root: Root directory to walk

        Yields:
            Paths of regular files below the root
        """
        root_path = Path(root)
        if not root_path.exists():
            logger.warning(f"Root directory does not exist: {root_path}")
            self._stats['errors'] += 1
            return
        if not root_path.is_dir():
            logger.warning(f"Root path is not a directory: {root_path}")
            self._stats['errors'] += 1
            return

        visited: Set[Tuple[int, int]] = set()
        stack: List[str] = [str(root_path)]

        while stack:
            current_dir = stack.pop()

            try:
                dir_stat = os.stat(current_dir)
            except OSError as e:
                logger.warning(f"Cannot stat directory {current_dir}: {e}")
                self._stats['errors'] += 1
                continue

            dir_key = (dir_stat.st_dev, dir_stat.st_ino)
            if dir_key in visited:
                logger.debug(f"Skipping already visited directory (symlink cycle): {current_dir}")
                self._stats['cycles_skipped'] += 1
                continue
            visited.add(dir_key)

            try:
                with os.scandir(current_dir) as it:
                    entries = sorted(it, key=lambda entry: entry.name)
            except OSError as e:
                logger.warning(f"Cannot read directory {current_dir}: {e}")
                self._stats['errors'] += 1
                continue

            self._stats['directories_traversed'] += 1
            subdirs = []

            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=self.follow_symlinks):
                        subdirs.append(entry.path)
                    elif entry.is_file(follow_symlinks=self.follow_symlinks):
                        self._stats['files_scanned'] += 1
                        yield Path(entry.path)
                    elif entry.is_symlink() and self.follow_symlinks:
                        logger.warning(f"Skipping broken symlink: {entry.path}")
                        self._stats['errors'] += 1
                    else:
                        logger.debug(f"Skipping special file: {entry.path}")
                except OSError as e:
                    logger.warning(f"Cannot stat {entry.path}: {e}")
                    self._stats['errors'] += 1

            # Reversed so the stack pops subdirectories in sorted order
            stack.extend(reversed(subdirs))

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the filesystem walking operation.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()

