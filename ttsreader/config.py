import os
from dotenv import load_dotenv
load_dotenv()

# ---------------- Project ----------------
PROJECT_NAME = "TTS Reader"
VERSION = "0.1.0"

# ---------------- Files ----------------
BASE_DIR = os.getenv("TTS_READER_DIR", os.getcwd())
INPUT_FILE = os.path.join(BASE_DIR, os.getenv("TTS_INPUT_FILE", "TTSInput.txt"))
SETTINGS_FILE = os.path.join(BASE_DIR, os.getenv("TTS_SETTINGS_FILE", "TTSSettings.txt"))
OUTPUT_FILE = os.path.join(BASE_DIR, os.getenv("TTS_OUTPUT_FILE", "TTSOutput.wav"))
SESSION_DIR = os.getenv("TTS_SESSION_DIR", "sessions")

DEFAULT_MESSAGE = (
    "Thanks for installing TTS Reader. To use this reader just paste the text "
    "you want read into the TTSInput.txt file."
)

# ---------------- Voice ----------------
VOICE_OUTPUT_ENGINE = os.getenv("VOICE_OUTPUT_ENGINE", "free").lower()

# pyttsx3 words-per-minute at SpeechRate.Normal; 0 keeps the engine default
PYTTSX3_BASE_RATE = int(os.getenv("PYTTSX3_BASE_RATE", "0"))

# OpenAI settings
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_TTS_MODEL = os.getenv("OPENAI_TTS_MODEL", "gpt-4o-mini-tts")

if VOICE_OUTPUT_ENGINE not in {"free", "openai"}:
    raise ValueError(f"VOICE_OUTPUT_ENGINE must be 'free' or 'openai', got {VOICE_OUTPUT_ENGINE}")
