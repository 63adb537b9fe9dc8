"""Storage manager for the expenses document and path management.

Atomicity: writes target ``<file>.tmp`` first and then ``os.replace`` into place,
so a reader never sees a half-written document.
"""

import contextlib
import os
from pathlib import Path

from config import Config


class StorageManager:
    """Manages the on-disk location of the expenses document.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the storage manager.

        Args:
            config: Config object containing storage configuration.
        """
        self.config = config

    def get_data_path(self) -> Path:
        """Get the current document path.

        Returns:
            Path: Path to the expenses document.
        """
        return self.config.data_path

    def exists(self) -> bool:
        return self.get_data_path().exists()

    def read_text(self) -> str:
        return self.get_data_path().read_text(encoding="utf-8")

    def write_text(self, text: str) -> None:
        """Replace the document contents atomically.

        Args:
            text: Full document contents.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        path = self.get_data_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")

        try:
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, path)
        except Exception:
            with contextlib.suppress(FileNotFoundError):
                tmp.unlink()
            raise
