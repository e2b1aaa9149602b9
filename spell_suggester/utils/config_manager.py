# config_manager.py - JSON config manager

import json
import os

from .logger_utils import engine_log

DEFAULTS = {
    "dictionary": "",  # path to the word list
    "corpus": "",  # path to the frequency corpus
    "max_suggestions": 10,
    "log_level": "INFO",
    "log_path": os.path.join("logs", "spell_suggester.log"),
    "color": True,
}


def _coerce(key, val):
    """Convert `val` to the type of the default for `key`."""
    kind = type(DEFAULTS[key])
    if kind is bool and isinstance(val, str):
        val = val.strip().lower() in ("1", "true", "yes", "on")
    val = kind(val)
    if key == "max_suggestions" and val < 0:
        raise ValueError(f"max_suggestions must be >= 0, got {val}")
    return val


class Config:
    def __init__(self, path="config.json", autosave=True):
        self.path = path
        self.autosave = autosave
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            engine_log.warning(f"config {self.path} unreadable, using defaults: {e}")
            return
        if not isinstance(loaded, dict):
            engine_log.warning(f"config {self.path} is not a JSON object, ignored")
            return
        for k, v in loaded.items():
            if k not in self.data:
                continue
            try:
                self.data[k] = _coerce(k, v)
            except (TypeError, ValueError) as e:
                engine_log.warning(f"config {self.path}: bad value for {k}, keeping default: {e}")

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        """Set an option, coercing to the default's type. Unknown keys raise KeyError, bad values ValueError."""
        if key not in self.data:
            raise KeyError(key)
        self.data[key] = _coerce(key, val)
        if self.autosave:
            self.save()

    def items(self):
        return self.data.items()
