"""
Free/local voice backend.
- TTS: pyttsx3 (offline, system voices: SAPI5 / NSSpeech / espeak)
- Voice picked from the installed voices' reported gender and age, when they report any.
- Output either to the default audio device or to a WAV file.
"""

from __future__ import annotations
import threading
from typing import Optional

import pyttsx3

from ttsreader import config
from ttsreader.settings import DEFAULT_SETTINGS, OutputType, Settings, SpeakerAge, SpeakerSex, rate_multiplier

_tts_lock = threading.Lock()  # ensure TTS calls never overlap

# inclusive lower bound of each age bracket, for drivers that report a numeric age
_AGE_FLOORS = [
    (60, SpeakerAge.Senior),
    (20, SpeakerAge.Adult),
    (13, SpeakerAge.Teen),
    (0, SpeakerAge.Child),
]


def _voice_sex(voice) -> Optional[SpeakerSex]:
    # NSSpeech reports "VoiceGenderMale", espeak/SAPI "male"/"Male"
    gender = str(getattr(voice, "gender", None) or "").lower().replace("voicegender", "")
    if gender == "male":
        return SpeakerSex.Male
    if gender == "female":
        return SpeakerSex.Female
    if gender == "neuter":
        return SpeakerSex.Neutral
    return None


def _voice_age(voice) -> Optional[SpeakerAge]:
    try:
        age = int(getattr(voice, "age", None))
    except (TypeError, ValueError):
        return None
    for floor, bracket in _AGE_FLOORS:
        if age >= floor:
            return bracket
    return None


def pick_voice(voices, settings: Settings):
    """
    Best installed voice for the settings, or None to keep the engine default.
    A sex match is required unless sex is Neutral; an age match breaks ties.
    """
    best, best_score = None, 0
    for voice in voices or []:
        score = 0
        if settings.speaker_sex is not SpeakerSex.Neutral:
            if _voice_sex(voice) is not settings.speaker_sex:
                continue
            score += 2
        if _voice_age(voice) is settings.speaker_age:
            score += 1
        if score > best_score:
            best, best_score = voice, score
    return best


def configure_engine(engine, settings: Settings):
    """Apply rate and voice from settings to a pyttsx3 engine."""
    base_rate = config.PYTTSX3_BASE_RATE or engine.getProperty("rate")
    engine.setProperty("rate", int(round(base_rate * rate_multiplier(settings.speech_rate))))

    voice = pick_voice(engine.getProperty("voices"), settings)
    if voice is not None:
        engine.setProperty("voice", voice.id)


# -------- TTS (robust on Windows) --------
def speak(text: str, settings: Settings = DEFAULT_SETTINGS, output_path: Optional[str] = None) -> bool:
    """
    Offline TTS via pyttsx3. Re-initialize per call to avoid 'only first utterance plays' bug on Windows.
    Blocking: returns when playback (or the WAV render) completes.
    Returns True if the engine ran, False for empty text or an engine error.
    """
    if not text or not text.strip():
        return False
    with _tts_lock:
        try:
            engine = pyttsx3.init()
            configure_engine(engine, settings)
            if settings.output_type is OutputType.File:
                engine.save_to_file(text, output_path or config.OUTPUT_FILE)
            else:
                engine.say(text)
            engine.runAndWait()
            engine.stop()
            return True
        except Exception as e:
            print(f"[TTS ERROR] {e}")
            return False
