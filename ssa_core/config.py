# ssa_core/config.py
# -*- coding: utf-8 -*-
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class CodecConfig:
    def __init__(self, settings_path=None):
        self.settings_path = Path(settings_path) if settings_path else None
        self.defaults = {
            # --- Section Layout ---
            'comment_prefix': ';',
            'styles_sections': ['[V4+ Styles]'],  # v4 lines lack OutlineColour
            'events_sections': ['[Events]'],

            # --- Input ---
            'encoding': '',  # '' = detect from BOM / candidate list

            # --- Verification ---
            'stop_on_error': False,
            'log_level': 'INFO',
        }
        self.settings = self.defaults.copy()
        self.load()

    def load(self):
        if self.settings_path is None or not self.settings_path.exists():
            self.settings = self.defaults.copy()
            return

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                loaded_settings = json.load(f)
            if not isinstance(loaded_settings, dict):
                raise ValueError(f"expected a JSON object, got {type(loaded_settings).__name__}")
        except (json.JSONDecodeError, ValueError, OSError) as e:
            logger.warning("Ignoring settings file %s: %s", self.settings_path, e)
            self.settings = self.defaults.copy()
            return

        for key, default_value in self.defaults.items():
            if key not in loaded_settings:
                loaded_settings[key] = default_value
        self.settings = loaded_settings

    def save(self, path=None):
        target = Path(path) if path else self.settings_path
        if target is None:
            raise ValueError("no settings path to save to")
        keys_to_save = self.defaults.keys()
        settings_to_save = {k: self.settings.get(k) for k in keys_to_save if k in self.settings}
        with open(target, 'w', encoding='utf-8') as f:
            json.dump(settings_to_save, f, indent=4)

    def get(self, key: str, default=None):
        return self.settings.get(key, default)

    def set(self, key: str, value):
        self.settings[key] = value
