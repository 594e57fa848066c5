"""File writing utilities for generated code.

This module persists emitted text, leaving files that already hold the same
content untouched so that build tools watching the output do not rebuild for
nothing.
"""

import logging
from pathlib import Path

from upath import UPath

from intellitype.exceptions import OutputError

logger = logging.getLogger(__name__)


class OutputWriter:
    """Writes generated text to files with change detection.

    Example:
        >>> writer = OutputWriter()
        >>> writer.write('Scripts/server.d.ts', text)
        True
        >>> writer.write('Scripts/server.d.ts', text)
        False
    """

    def __init__(self, only_if_changed: bool = True):
        """Initialize the writer.

        Args:
            only_if_changed: Skip the write when the file already holds
                exactly the same text.
        """
        self.only_if_changed = only_if_changed

    def write(self, path: UPath | Path | str, content: str) -> bool:
        """Write the content to a file, creating parent directories.

        Args:
            path: Path where the file should be written.
            content: The generated text.

        Returns:
            True if the file was written, False if it was already up to date.

        Raises:
            OutputError: If the file cannot be read or written.
        """
        path = UPath(path)

        try:
            if self.only_if_changed and self._is_current(path, content):
                logger.info(f'{path} is up to date')
                return False

            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(path), cause=e)

        logger.info(f'Wrote {path}')
        return True

    @staticmethod
    def _is_current(path: UPath, content: str) -> bool:
        if not path.exists():
            return False
        return path.read_bytes() == content.encode('utf-8')
