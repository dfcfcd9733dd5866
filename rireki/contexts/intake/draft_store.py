"""
Local draft store for in-progress form data.

Keeps one draft per store file under a fixed key, the same key the form uses
for its local storage. Storage failures never interrupt the caller: they are
logged and the operation becomes a no-op (load returns None).
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from rireki.contexts.intake.logger import _log_debug, _log_error

load_dotenv()
DRAFTS_PATH = Path(os.getenv("DRAFTS_PATH", "outs/drafts"))

STORAGE_KEY = "rirekisho_form_data"


class DraftStore:
    """
    JSON file holding the form draft under STORAGE_KEY.

    Args:
        directory: Directory for the store file (defaults to DRAFTS_PATH)

    Example:
        store = DraftStore()
        store.save({"name": "山田 太郎", "furigana": "やまだ たろう"})
        store.load()["name"]   # "山田 太郎"
        store.clear()
    """

    FILE_NAME = "drafts.json"

    def __init__(self, directory: Optional[Union[str, Path]] = None):
        self.path = Path(directory or DRAFTS_PATH) / self.FILE_NAME

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write_all(self, data: Dict[str, Any]) -> None:
        # Serialize first so a bad value never truncates the existing file
        text = json.dumps(data, ensure_ascii=False, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")

    def save(self, form_data: Dict[str, Any]) -> None:
        """Store the form data, replacing any previous draft."""
        try:
            data = self._read_all()
            data[STORAGE_KEY] = form_data
            self._write_all(data)
            _log_debug(f"Saved draft to {self.path}")
        except (OSError, TypeError, ValueError) as e:
            _log_error(f"Failed to save draft: {e}")

    def load(self) -> Optional[Dict[str, Any]]:
        """Return the stored form data, or None if there is none or it is unreadable."""
        try:
            return self._read_all().get(STORAGE_KEY)
        except (OSError, ValueError, AttributeError) as e:
            _log_error(f"Failed to load draft: {e}")
            return None

    def clear(self) -> None:
        """Remove the draft, leaving any other keys in the file."""
        try:
            data = self._read_all()
            if data.pop(STORAGE_KEY, None) is not None:
                self._write_all(data)
                _log_debug(f"Cleared draft in {self.path}")
        except (OSError, ValueError, AttributeError) as e:
            _log_error(f"Failed to clear draft: {e}")
