# landingkit/storage/file_manager.py

"""Writes generated landing page content to disk."""

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any

from landingkit.config.settings import Settings

logger = logging.getLogger("landingkit.storage")

_UNSAFE_NAME_RE = re.compile(r"[^\w-]+")


def safe_stem(text: str, limit: int = 60) -> str:
    """Filesystem-safe slug of *text*; ``'page'`` when nothing survives."""
    stem = _UNSAFE_NAME_RE.sub("_", text.strip()).strip("_")
    return stem[:limit] or "page"


class FileManager:
    """Handles saving generation results to disk."""

    def __init__(self, results_dir: Path | None = None) -> None:
        self.results_dir: Path = results_dir or Settings.RESULTS_DIR
        self.results_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("FileManager initialised, results_dir=%s", self.results_dir)

    def save_result(self, query: str, data: dict[str, Any]) -> Path:
        """Save one result dict to a timestamped JSON file."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.results_dir / f"landing_{safe_stem(query)}_{timestamp}.json"

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        logger.info("Saved landing page for '%s' to %s", query, filepath)
        return filepath
