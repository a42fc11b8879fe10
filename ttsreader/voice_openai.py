"""
Voice backend using OpenAI.
- TTS: gpt-4o-mini-tts (text-to-speech), WAV response
- Speaker sex picks the voice, speaker age becomes a speaking instruction, speech rate becomes `speed`.
- Plays through simpleaudio, or writes the WAV to the output file.
"""

from __future__ import annotations
import os
import tempfile
import threading
from typing import Optional

import simpleaudio as sa
from openai import OpenAI

from ttsreader import config
from ttsreader.settings import DEFAULT_SETTINGS, OutputType, Settings, SpeakerAge, SpeakerSex, rate_multiplier

_client: Optional[OpenAI] = None
_tts_lock = threading.Lock()

VOICES = {
    SpeakerSex.Male: "onyx",
    SpeakerSex.Female: "nova",
    SpeakerSex.Neutral: "alloy",
}

AGE_INSTRUCTIONS = {
    SpeakerAge.Child: "Speak like a young child.",
    SpeakerAge.Teen: "Speak like a teenager.",
    SpeakerAge.Adult: "Speak like an adult.",
    SpeakerAge.Senior: "Speak like an elderly person.",
}


def _get_client() -> OpenAI:
    global _client
    if _client is None:
        _client = OpenAI(api_key=config.OPENAI_API_KEY)
    return _client


def speech_request(text: str, settings: Settings) -> dict:
    """Keyword arguments for client.audio.speech.create()."""
    return {
        "model": config.OPENAI_TTS_MODEL,
        "voice": VOICES.get(settings.speaker_sex, "alloy"),
        "input": text,
        "instructions": AGE_INSTRUCTIONS.get(settings.speaker_age, AGE_INSTRUCTIONS[SpeakerAge.Adult]),
        "speed": rate_multiplier(settings.speech_rate),
        "response_format": "wav",
    }


def _play_wav(data: bytes):
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".wav")
    try:
        tmp.write(data)
        tmp.flush()
        tmp.close()
        wave_obj = sa.WaveObject.from_wave_file(tmp.name)
        play_obj = wave_obj.play()
        play_obj.wait_done()
    finally:
        os.remove(tmp.name)


# --- Speak the message ---
def speak(text: str, settings: Settings = DEFAULT_SETTINGS, output_path: Optional[str] = None) -> bool:
    """
    Text-to-speech via OpenAI API.
    Blocking: returns after playback finishes or the WAV is written.
    """
    if not text or not text.strip():
        return False

    with _tts_lock:
        try:
            resp = _get_client().audio.speech.create(**speech_request(text, settings))

            if settings.output_type is OutputType.File:
                with open(output_path or config.OUTPUT_FILE, "wb") as f:
                    f.write(resp.content)
            else:
                _play_wav(resp.content)
            return True
        except Exception as e:
            print(f"[TTS ERROR] {e}")
            return False
