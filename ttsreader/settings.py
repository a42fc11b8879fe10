"""
Reader settings and their on-disk text format.

The settings file is a list of `fieldName=EnumType.Value` statements
separated by `;`, e.g.

    speakerAge=SpeakerAge.Adult;speakerSex=SpeakerSex.Neutral;speechRate=SpeechRate.Normal;outputType=OutputType.AudioDevice

Decoding is best-effort: anything it cannot understand is dropped and the
affected fields keep their defaults. It never raises.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple


class SpeakerAge(Enum):
    Child = "Child"
    Teen = "Teen"
    Adult = "Adult"
    Senior = "Senior"


class SpeakerSex(Enum):
    Male = "Male"
    Female = "Female"
    Neutral = "Neutral"


class SpeechRate(Enum):
    Slowest = "Slowest"
    Slower = "Slower"
    Slow = "Slow"
    Normal = "Normal"
    Fast = "Fast"
    Faster = "Faster"
    Fastest = "Fastest"


class OutputType(Enum):
    File = "File"
    AudioDevice = "AudioDevice"


# (file name, attribute, enum type, fallback), in serialization order
FIELDS = (
    ("speakerAge", "speaker_age", SpeakerAge, SpeakerAge.Adult),
    ("speakerSex", "speaker_sex", SpeakerSex, SpeakerSex.Neutral),
    ("speechRate", "speech_rate", SpeechRate, SpeechRate.Normal),
    ("outputType", "output_type", OutputType, OutputType.AudioDevice),
)


@dataclass(frozen=True)
class Settings:
    speaker_age: SpeakerAge = SpeakerAge.Adult
    speaker_sex: SpeakerSex = SpeakerSex.Neutral
    speech_rate: SpeechRate = SpeechRate.Normal
    output_type: OutputType = OutputType.AudioDevice

    def __post_init__(self):
        for name, attr, enum_type, _ in FIELDS:
            value = getattr(self, attr)
            if not isinstance(value, enum_type):
                raise ValueError(f"{name} must be a {enum_type.__name__}, got {value!r}")

    @classmethod
    def from_text(cls, text: str) -> "Settings":
        return decode_settings(text)

    def serialize(self) -> str:
        return encode_settings(self)

    def as_dict(self) -> Dict[str, str]:
        """Field name -> value name, keyed the way the settings file spells them."""
        return {name: _field_value(self, attr, enum_type, fallback).value
                for name, attr, enum_type, fallback in FIELDS}


DEFAULT_SETTINGS = Settings(SpeakerAge.Adult, SpeakerSex.Neutral, SpeechRate.Normal, OutputType.AudioDevice)

VALID_SETTINGS_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ=.;"
)

STATEMENT_SEPARATOR = ";"
ASSIGNMENT = "="


def canonical_token(value: Enum) -> str:
    """`SpeechRate.Fast` style spelling of an enum member."""
    return f"{type(value).__name__}.{value.name}"


# (fieldName, canonical token) -> (attribute, member)
_TOKENS: Dict[Tuple[str, str], Tuple[str, Enum]] = {
    (name, canonical_token(member)): (attr, member)
    for name, attr, enum_type, _ in FIELDS
    for member in enum_type
}


@dataclass(frozen=True)
class Statement:
    target_variable: str
    target_value: str

    def __post_init__(self):
        if not self.target_variable or not self.target_value:
            raise ValueError("statement needs a non-empty variable and value")


# ---------- Encode ----------

def _field_value(settings: Settings, attr: str, enum_type, fallback: Enum) -> Enum:
    value = getattr(settings, attr, fallback)
    return value if isinstance(value, enum_type) else fallback


def encode_settings(settings: Settings) -> str:
    statements = [
        f"{name}{ASSIGNMENT}{canonical_token(_field_value(settings, attr, enum_type, fallback))}"
        for name, attr, enum_type, fallback in FIELDS
    ]
    return STATEMENT_SEPARATOR.join(statements)


# ---------- Decode ----------

def clean_settings(text: str) -> str:
    """Drop every character that cannot appear in a settings file."""
    return "".join(ch for ch in text if ch in VALID_SETTINGS_CHARS)


def slice_statements(text: str) -> List[str]:
    """
    Split on `;`. Empty pieces between separators are kept (parse_statement
    rejects them); a trailing piece is kept only when non-empty.
    """
    pieces = text.split(STATEMENT_SEPARATOR)
    if pieces[-1] == "":
        pieces.pop()
    return pieces


def parse_statement(text: str) -> Optional[Statement]:
    """
    Parse `variable=value`. Returns None for anything else: no `=`, more than
    one `=`, or an empty side.
    """
    if text.count(ASSIGNMENT) != 1:
        return None
    variable, value = text.split(ASSIGNMENT)
    if not variable or not value:
        return None
    return Statement(variable, value)


def parse_statements(texts: List[str]) -> List[Statement]:
    """Parse each candidate, silently dropping the ones that do not parse."""
    statements = []
    for text in texts:
        statement = parse_statement(text)
        if statement is not None:
            statements.append(statement)
    return statements


def decode_settings(text: str) -> Settings:
    """
    Best-effort decode. Starts from DEFAULT_SETTINGS and applies every
    recognised statement left to right, so later statements win.
    """
    statements = parse_statements(slice_statements(clean_settings(text or "")))
    settings = DEFAULT_SETTINGS
    for statement in statements:
        match = _TOKENS.get((statement.target_variable, statement.target_value))
        if match is None:
            continue
        attr, member = match
        settings = replace(settings, **{attr: member})
    return settings


# ---------- Engine mapping ----------

# -10..10 rate scale shared by the speech backends
SPEECH_RATE_STEPS = {
    SpeechRate.Slowest: -10,
    SpeechRate.Slower: -6,
    SpeechRate.Slow: -3,
    SpeechRate.Normal: 0,
    SpeechRate.Fast: 3,
    SpeechRate.Faster: 6,
    SpeechRate.Fastest: 10,
}


def rate_multiplier(speech_rate: SpeechRate) -> float:
    """Playback speed factor: 1/3 at Slowest, 1 at Normal, 3 at Fastest."""
    step = SPEECH_RATE_STEPS.get(speech_rate, 0)
    return 3 ** (step / 10)
