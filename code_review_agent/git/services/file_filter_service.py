"""Service for filtering files excluded from review."""

from pathlib import PurePosixPath


class FileFilterService:
    """Service for detecting files that never take part in a review."""

    # Build output directory and dependency lock file
    EXCLUDED_NAMES: frozenset[str] = frozenset({"dist", "bun.lock"})

    def is_excluded(self, file_path: str) -> bool:
        """
        Check if a file is excluded from review.

        A path is excluded when it, or any of its segments, is one of
        EXCLUDED_NAMES, so "dist" also covers every file under "dist/".

        Args:
            file_path: Path of the file relative to the repository root

        Returns:
            True if the file is excluded, False otherwise
        """
        if file_path in self.EXCLUDED_NAMES:
            return True

        return any(part in self.EXCLUDED_NAMES for part in PurePosixPath(file_path).parts)
