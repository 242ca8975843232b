"""File-backed token persistence, so a login survives a restart."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union


logger = logging.getLogger(__name__)

DEFAULT_TOKEN_PATH = Path.home() / ".tutorhub" / "token.json"


class TokenStore:
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else DEFAULT_TOKEN_PATH

    def load(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable token file %s: %s", self.path, exc)
            return None
        token = data.get("token") if isinstance(data, dict) else None
        return token or None

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"token": token}), encoding="utf-8")
        try:
            os.chmod(self.path, 0o600)
        except OSError:
            logger.debug("Could not restrict permissions on %s", self.path)

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
