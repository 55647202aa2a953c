"""
File system infrastructure for gffonts_index.

All disk access made by the repository index goes through this class,
making it:
- Easy to replace or count in tests
- Consistent in ordering (walks are sorted)
- Isolated from parsing logic
"""

from pathlib import Path
from typing import Generator, List, Union
import logging
import os

logger = logging.getLogger(__name__)


class FileSystem:
    """
    Read-only access to the local file system.

    Example:
        fs = FileSystem()
        for path in fs.walk(Path("~/oss/fonts").expanduser()):
            if path.name == "METADATA.pb":
                print(fs.read_text(path)[:40])
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize FileSystem.

        Args:
            encoding: Text encoding used by read_text (default: utf-8)
        """
        self.encoding = encoding

    def walk(self, root: Union[str, Path]) -> Generator[Path, None, None]:
        """
        Recursively yield every file below root.

        Directories and files are visited in sorted order. Directories that
        cannot be read are skipped.

        Args:
            root: Directory to walk

        Yields:
            Paths of regular files
        """
        def on_error(error: OSError) -> None:
            logger.debug(f"Skipping unreadable directory: {error}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                yield Path(dirpath) / filename

    def read_text(self, path: Union[str, Path]) -> str:
        """Read a whole file as text."""
        with open(path, "r", encoding=self.encoding) as f:
            return f.read()

    def exists(self, path: Union[str, Path]) -> bool:
        """Check whether a path exists."""
        return os.path.exists(path)

    def list_dir(self, path: Union[str, Path]) -> List[Path]:
        """
        List the entries of a directory in sorted order.

        Raises:
            OSError: If the directory cannot be read
        """
        return sorted(Path(path) / name for name in os.listdir(path))
