import json
from datetime import datetime

from ttsreader.settings import Settings


class ReadLogger:
    def __init__(self):
        self.lines = []

    def log_event(self, kind: str, text: str):
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self.lines.append(f"[{ts}] {kind.upper()}: {text}")

    def save_transcript(self, path: str):
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(self.lines))

    def save_session_json(self, path: str, settings: Settings, message: str):
        payload = {
            "settings": settings.as_dict(),
            "message": message,
            "saved_at": datetime.now().isoformat()
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
