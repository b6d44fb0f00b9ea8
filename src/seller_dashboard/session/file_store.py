"""File-backed token storage for local deployment."""

import json
import logging
from pathlib import Path

from seller_dashboard.session.token_store import TokenStore

logger = logging.getLogger(__name__)


class FileTokenStore(TokenStore):
    """
    JSON-file token storage implementation.

    Keeps one key in a small JSON document so the seller stays logged in
    across restarts, the way a browser keeps a token in origin storage.
    The file is read on every ``get`` so a token cleared by one component
    is immediately absent for every other reader.
    """

    def __init__(self, path: str | Path, key: str = "token"):
        """
        Initialize file token store.

        Args:
            path: Location of the JSON file (created on first write)
            key: Key under which the token is stored
        """
        self.path = Path(path).expanduser()
        self.key = key
        logger.info(f"Initialized file token store: {self.path}")

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable token file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        tmp_path.replace(self.path)

    def get(self) -> str | None:
        token = self._read().get(self.key)
        return token if isinstance(token, str) and token else None

    def set(self, token: str) -> None:
        if not token:
            raise ValueError("Cannot store an empty session token")
        data = self._read()
        data[self.key] = token
        self._write(data)
        logger.debug(f"Stored session token in {self.path}")

    def clear(self) -> None:
        data = self._read()
        if self.key not in data:
            return
        del data[self.key]
        if data:
            self._write(data)
        else:
            self.path.unlink(missing_ok=True)
        logger.debug(f"Cleared session token from {self.path}")
