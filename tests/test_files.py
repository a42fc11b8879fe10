"""
TTS Reader File Tests
=====================

Default file creation and loading, all inside tmp_path.

Run:
    python -m pytest tests/test_files.py -v
"""

from pathlib import Path

from ttsreader import config
from ttsreader.files import (
    create_input_file_if_missing,
    create_missing_files,
    create_output_file_if_missing,
    create_settings_file_if_missing,
    load_message,
    load_settings,
    save_settings,
)
from ttsreader.settings import DEFAULT_SETTINGS, OutputType, Settings, SpeakerSex, encode_settings


class TestDefaults:

    def test_creates_all_three(self, reader_paths):
        create_missing_files(reader_paths["input"], reader_paths["settings"], reader_paths["output"])
        assert Path(reader_paths["input"]).read_text(encoding="utf-8") == config.DEFAULT_MESSAGE
        assert Path(reader_paths["settings"]).read_text(encoding="utf-8") == encode_settings(DEFAULT_SETTINGS)
        assert Path(reader_paths["output"]).read_bytes() == b""

    def test_existing_files_are_not_overwritten(self, reader_paths):
        Path(reader_paths["input"]).write_text("mine", encoding="utf-8")
        Path(reader_paths["settings"]).write_text("speakerSex=SpeakerSex.Male", encoding="utf-8")
        Path(reader_paths["output"]).write_bytes(b"RIFF")

        assert create_input_file_if_missing(reader_paths["input"]) is False
        assert create_settings_file_if_missing(reader_paths["settings"]) is False
        assert create_output_file_if_missing(reader_paths["output"]) is False

        assert Path(reader_paths["input"]).read_text(encoding="utf-8") == "mine"
        assert Path(reader_paths["output"]).read_bytes() == b"RIFF"

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "TTSSettings.txt"
        assert create_settings_file_if_missing(str(path)) is True
        assert path.exists()

    def test_uses_config_paths_by_default(self, reader_paths, monkeypatch):
        monkeypatch.setattr(config, "INPUT_FILE", reader_paths["input"])
        assert create_input_file_if_missing() is True
        assert Path(reader_paths["input"]).exists()


class TestLoad:

    def test_load_message_cleans_text(self, reader_paths):
        Path(reader_paths["input"]).write_text("Hi there!\nHow are you?", encoding="utf-8")
        assert load_message(reader_paths["input"]) == "Hi there. How are you."

    def test_load_message_creates_welcome(self, reader_paths):
        message = load_message(reader_paths["input"])
        assert message.startswith("Thanks for installing TTS Reader.")

    def test_load_message_undecodable_bytes(self, reader_paths):
        Path(reader_paths["input"]).write_bytes(b"ok \xff\xfe done")
        assert load_message(reader_paths["input"]) == "ok  done"

    def test_load_settings_missing_file_gives_defaults(self, reader_paths):
        assert load_settings(reader_paths["settings"]) == DEFAULT_SETTINGS
        assert Path(reader_paths["settings"]).exists()

    def test_load_settings_corrupted_file(self, reader_paths):
        Path(reader_paths["settings"]).write_text(
            "speakerSex = SpeakerSex.Female;\n%%%;outputType=Output", encoding="utf-8"
        )
        assert load_settings(reader_paths["settings"]) == Settings(speaker_sex=SpeakerSex.Female)

    def test_save_then_load(self, reader_paths):
        s = Settings(speaker_sex=SpeakerSex.Male, output_type=OutputType.File)
        save_settings(s, reader_paths["settings"])
        assert load_settings(reader_paths["settings"]) == s
