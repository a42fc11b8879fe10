"""
Reader files on disk: the message to read, the settings, and the WAV output.
Missing files are created with defaults so a fresh install just works.
"""

from __future__ import annotations
import os
from typing import Optional

from ttsreader import config
from ttsreader.sanitize import clean_message
from ttsreader.settings import DEFAULT_SETTINGS, Settings, decode_settings, encode_settings


def _ensure_parent(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _write_text(path: str, text: str):
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


# ---------- Defaults ----------

def create_input_file_if_missing(path: Optional[str] = None) -> bool:
    """Write the welcome message if the input file is absent. Returns True if created."""
    path = path or config.INPUT_FILE
    if os.path.exists(path):
        return False
    print(f"[WARN] {path} not found; writing the welcome message.")
    _write_text(path, config.DEFAULT_MESSAGE)
    return True


def create_settings_file_if_missing(path: Optional[str] = None) -> bool:
    path = path or config.SETTINGS_FILE
    if os.path.exists(path):
        return False
    print(f"[WARN] {path} not found; writing default settings.")
    _write_text(path, encode_settings(DEFAULT_SETTINGS))
    return True


def create_output_file_if_missing(path: Optional[str] = None) -> bool:
    path = path or config.OUTPUT_FILE
    if os.path.exists(path):
        return False
    _ensure_parent(path)
    with open(path, "wb"):
        pass
    return True


def create_missing_files(input_path: Optional[str] = None,
                         settings_path: Optional[str] = None,
                         output_path: Optional[str] = None):
    create_input_file_if_missing(input_path)
    create_settings_file_if_missing(settings_path)
    create_output_file_if_missing(output_path)


# ---------- Load / save ----------

def load_message(path: Optional[str] = None) -> str:
    """Read the input file and return it cleaned for speech."""
    path = path or config.INPUT_FILE
    create_input_file_if_missing(path)
    return clean_message(_read_text(path))


def load_settings(path: Optional[str] = None) -> Settings:
    """Read the settings file; anything unreadable inside it falls back to defaults."""
    path = path or config.SETTINGS_FILE
    create_settings_file_if_missing(path)
    return decode_settings(_read_text(path))


def save_settings(settings: Settings, path: Optional[str] = None):
    _write_text(path or config.SETTINGS_FILE, encode_settings(settings))
