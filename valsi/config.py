"""
Wordlist configuration for valsi.

Wordlists are looked up in the bundled data directory unless overridden
through the environment:

- VALSI_WORDLIST_DIR: directory holding the three lists
- VALSI_CMAVO_FILE / VALSI_GISMU_FILE / VALSI_RAFSI_FILE: file names (or
  absolute paths) inside that directory
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST_DIR = Path(__file__).parent / "data" / "wordlists"

# Some cmavo lists write particles with a leading pause dot (".a", ".i")
WORDLIST_MARKER = "."


@dataclass(frozen=True)
class WordlistConfig:
    """Where the cmavo, gismu and rafsi lists live."""

    directory: Path = DEFAULT_WORDLIST_DIR
    cmavo_file: str = "cmavo.txt"
    gismu_file: str = "gismu.txt"
    rafsi_file: str = "rafsi.txt"
    marker: str = WORDLIST_MARKER

    @property
    def cmavo_path(self) -> Path:
        return Path(self.directory) / self.cmavo_file

    @property
    def gismu_path(self) -> Path:
        return Path(self.directory) / self.gismu_file

    @property
    def rafsi_path(self) -> Path:
        return Path(self.directory) / self.rafsi_file

    @classmethod
    def from_env(cls) -> "WordlistConfig":
        """
        Build a config from VALSI_* environment variables.

        Unset variables fall back to the bundled defaults.
        """
        directory = os.environ.get('VALSI_WORDLIST_DIR')
        config = cls(
            directory=Path(directory) if directory else DEFAULT_WORDLIST_DIR,
            cmavo_file=os.environ.get('VALSI_CMAVO_FILE', cls.cmavo_file),
            gismu_file=os.environ.get('VALSI_GISMU_FILE', cls.gismu_file),
            rafsi_file=os.environ.get('VALSI_RAFSI_FILE', cls.rafsi_file),
        )
        if directory:
            logger.debug(f"Wordlist directory overridden: {config.directory}")
        return config
