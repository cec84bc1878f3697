"""
Client-side persistence for the session snapshot.
"""

import json
import os
from abc import ABC, abstractmethod
from typing import Optional


class SessionStorage(ABC):
    """Key-value store holding the serialized session snapshot"""

    @abstractmethod
    def load(self) -> Optional[str]:
        pass

    @abstractmethod
    def save(self, value: str) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class MemorySessionStorage(SessionStorage):
    def __init__(self, value: Optional[str] = None):
        self.value = value

    def load(self) -> Optional[str]:
        return self.value

    def save(self, value: str) -> None:
        self.value = value

    def clear(self) -> None:
        self.value = None


class JsonFileSessionStorage(SessionStorage):
    """Stores the snapshot in a single file, written atomically"""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Optional[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as r_file:
                return r_file.read()
        except FileNotFoundError:
            return None

    def save(self, value: str) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as w_file:
            w_file.write(value)
        os.replace(tmp_path, self.path)

    def clear(self) -> None:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass


def dump_snapshot(snapshot: dict) -> str:
    return json.dumps(snapshot, default=str)
