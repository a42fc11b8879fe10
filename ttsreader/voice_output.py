"""
Speech backend chosen by config.VOICE_OUTPUT_ENGINE.
config rejects unknown engine names at import, so only the two known ones reach here.
"""
from ttsreader import config

if config.VOICE_OUTPUT_ENGINE == "openai":
    from ttsreader.voice_openai import speak
else:
    from ttsreader.voice_free import speak

__all__ = ["speak"]
