"""Configuration for the demo CLI, JSON-based, stored in ~/.config/pytps/."""
import json
from pathlib import Path

DEFAULT_CONFIG = {
    "debug_logging": False,
    "initial_name": "No Name",
    "initial_age": 0,
    "show_stack": False,  # print the stack summary after every action
}

CONFIG_DIR = Path.home() / ".config" / "pytps"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    def __init__(self, path=None):
        self.path = Path(path) if path is not None else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    self._data.update(stored)
            except (json.JSONDecodeError, IOError):
                pass

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def debug_logging(self):
        return bool(self._data["debug_logging"])

    @property
    def initial_name(self):
        return self._data["initial_name"]

    @property
    def initial_age(self):
        try:
            return int(self._data["initial_age"])
        except (TypeError, ValueError):
            return DEFAULT_CONFIG["initial_age"]

    @property
    def show_stack(self):
        return bool(self._data.get("show_stack", False))

    @show_stack.setter
    def show_stack(self, val):
        self._data["show_stack"] = bool(val)
        self.save()
