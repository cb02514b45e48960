"""Runtime configuration for the file tool."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class FileToolConfig:
    """Settings shared by the file tool, its backend and the patch engine.

    Attributes:
        encoding: Text encoding used to read and write files.
        line_separator: Separator files are split on and rejoined with.
        preview_chars: Maximum length of search content quoted in errors.
        atomic_writes: Write via temp file + rename instead of in place.
        base_path: Directory relative paths resolve against (None = cwd).
    """
    encoding: str = "utf-8"
    line_separator: str = "\n"
    preview_chars: int = 50
    atomic_writes: bool = True
    base_path: Optional[Path] = None

    @classmethod
    def from_env(cls, prefix: str = "LINE_PATCH_", dotenv_path: Optional[str] = None) -> "FileToolConfig":
        """Load settings from the environment (and a ``.env`` file if present).

        Reads ``{prefix}ENCODING``, ``PREVIEW_CHARS``, ``ATOMIC_WRITES`` and
        ``BASE_PATH``; anything unset keeps its default.
        """
        load_dotenv(dotenv_path)

        env = os.environ
        config = cls()
        if env.get(f"{prefix}ENCODING"):
            config.encoding = env[f"{prefix}ENCODING"]
        if env.get(f"{prefix}PREVIEW_CHARS"):
            config.preview_chars = int(env[f"{prefix}PREVIEW_CHARS"])
        if env.get(f"{prefix}ATOMIC_WRITES"):
            config.atomic_writes = env[f"{prefix}ATOMIC_WRITES"].strip().lower() in _TRUTHY
        if env.get(f"{prefix}BASE_PATH"):
            config.base_path = Path(env[f"{prefix}BASE_PATH"])
        return config
