"""File-based storage implementation."""

import json
import logging
import os

from core.config import STORAGE_KEY
from core.interfaces import StateStore

logger = logging.getLogger(__name__)


class FileStorage(StateStore):
    """Keeps the session blob in a JSON file named after the storage key."""

    def __init__(self, state_dir: str = None, key: str = STORAGE_KEY):
        self.state_dir = state_dir or os.environ.get(
            'KELIME_STATE_DIR',
            os.path.expanduser('~/.local/share/kelime')
        )
        self.key = key

    @property
    def state_file(self) -> str:
        return os.path.join(self.state_dir, f'{self.key}.json')

    def load(self) -> str | None:
        if not os.path.exists(self.state_file):
            return None
        try:
            with open(self.state_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except Exception as e:
            logger.warning(f"Error reading {self.state_file}: {e}")
            return None
        return json.dumps(data)

    def save(self, blob: str) -> None:
        os.makedirs(self.state_dir, exist_ok=True)
        # Replace via a temp file so the state file is never partially written
        tmp_file = self.state_file + '.tmp'
        with open(tmp_file, 'w', encoding='utf-8') as f:
            json.dump(json.loads(blob), f, indent=2, ensure_ascii=False)
        os.replace(tmp_file, self.state_file)

    def clear(self) -> None:
        if os.path.exists(self.state_file):
            os.remove(self.state_file)
