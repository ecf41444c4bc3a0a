import logging
from pathlib import Path
from typing import Any, Dict

import tomlkit
from tomlkit.exceptions import TOMLKitError

from bolt_pm.errors import ManifestParseError

logger = logging.getLogger(__name__)


class ManifestStore:
    """Reads and writes the TOML manifest of a single project.

    Loaded documents keep the comments and layout of the file, so saving a
    loaded document only changes the values that were modified.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Dict[str, Any]:
        """Load the manifest document.

        Returns:
            Parsed manifest document

        Raises:
            ManifestParseError: If the file is not valid UTF-8 encoded TOML
            FileNotFoundError: If the file does not exist
        """
        logger.debug(f"Loading manifest from {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data: Dict[str, Any] = tomlkit.load(f)
        except (TOMLKitError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to parse manifest at {self.path}: {e}")
            raise ManifestParseError(f"Error parsing {self.path.name}:\n{e}") from e
        return data

    def save(self, data: Dict[str, Any]) -> Path:
        """Store the manifest document, replacing the file contents.

        Args:
            data: Manifest document to store

        Returns:
            Path where the manifest was stored
        """
        try:
            logger.info(f"Storing manifest at {self.path}")
            with open(self.path, "w", encoding="utf-8") as f:
                tomlkit.dump(data, f)
            logger.debug(f"Successfully stored manifest at {self.path}")
            return self.path
        except Exception:
            logger.exception(f"Failed to store manifest at {self.path}")
            raise
