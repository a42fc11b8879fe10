import argparse
import os
import sys
from datetime import datetime

from ttsreader import config
from ttsreader.files import create_missing_files, load_message, load_settings, save_settings
from ttsreader.logger import ReadLogger
from ttsreader.settings import DEFAULT_SETTINGS, OutputType

# Voice modules (optional)
try:
    from ttsreader.voice_output import speak
    VOICE_AVAILABLE = True
except ImportError:
    VOICE_AVAILABLE = False


def run_reader(input_path=None, settings_path=None, output_path=None,
               dry_run=False, reset_settings=False, save_session=False) -> int:
    input_path = input_path or config.INPUT_FILE
    settings_path = settings_path or config.SETTINGS_FILE
    output_path = output_path or config.OUTPUT_FILE
    logger = ReadLogger()

    try:
        if reset_settings:
            save_settings(DEFAULT_SETTINGS, settings_path)
        create_missing_files(input_path, settings_path, output_path)

        message = load_message(input_path)
        settings = load_settings(settings_path)
    except OSError as e:
        print(f"[ERROR] {e}")
        return 1

    logger.log_event("settings", settings.serialize())
    logger.log_event("message", message)

    if dry_run:
        print(f"Settings: {settings.serialize()}")
        print(f"Message: {message}")
    elif not message.strip():
        print(f"[WARN] {input_path} has nothing readable after cleanup; nothing to speak.")
    elif not VOICE_AVAILABLE:
        print("[ERROR] Voice modules not available. Nothing was spoken.")
        return 1
    else:
        print(f"[TTS] Reading {len(message)} characters ({config.VOICE_OUTPUT_ENGINE} engine)")
        if not speak(message, settings, output_path):
            print("[ERROR] Nothing was spoken.")
            return 1
        if settings.output_type is OutputType.File:
            print(f"Saved speech to {output_path}")
            logger.log_event("output", output_path)

    if save_session:
        now = datetime.now().strftime("%Y%m%d_%H%M%S")
        os.makedirs(config.SESSION_DIR, exist_ok=True)
        logger.save_transcript(os.path.join(config.SESSION_DIR, f"{now}_transcript.txt"))
        logger.save_session_json(
            os.path.join(config.SESSION_DIR, f"{now}_session.json"),
            settings,
            message,
        )
        print(f"Saved transcript and session JSON in '{config.SESSION_DIR}/'.")

    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description=f"{config.PROJECT_NAME}: read a text file aloud")
    parser.add_argument("--input", help="Message file (default: config.INPUT_FILE)")
    parser.add_argument("--settings", help="Settings file (default: config.SETTINGS_FILE)")
    parser.add_argument("--output", help="WAV file used when outputType is File")
    parser.add_argument("--dry-run", action="store_true", help="Print the cleaned message and settings, don't speak")
    parser.add_argument("--reset-settings", action="store_true", help="Rewrite the settings file with defaults first")
    parser.add_argument("--save-session", action="store_true", help="Save a transcript and JSON record of the run")
    args = parser.parse_args(argv)

    return run_reader(
        input_path=args.input,
        settings_path=args.settings,
        output_path=args.output,
        dry_run=args.dry_run,
        reset_settings=args.reset_settings,
        save_session=args.save_session,
    )


if __name__ == "__main__":
    sys.exit(main())
