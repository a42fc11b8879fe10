"""
Message cleanup before speech.
Rewrites arbitrary text into the small alphabet the speech engines are fed.
"""

PUNCTUATION_CHARS = "?!:;"
WHITESPACE_CHARS = "\n\r\t"
VALID_MESSAGE_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ .\"'1234567890,()*/-+&%$#@"
)

_PUNCTUATION_TABLE = str.maketrans({ch: "." for ch in PUNCTUATION_CHARS})
_WHITESPACE_TABLE = str.maketrans({ch: " " for ch in WHITESPACE_CHARS})


def normalize_punctuation(text: str) -> str:
    return text.translate(_PUNCTUATION_TABLE)


def normalize_whitespace(text: str) -> str:
    return text.translate(_WHITESPACE_TABLE)


def filter_message_chars(text: str) -> str:
    return "".join(ch for ch in text if ch in VALID_MESSAGE_CHARS)


def clean_message(text: str) -> str:
    """
    `? ! : ;` become periods, line breaks and tabs become spaces, then
    anything outside VALID_MESSAGE_CHARS is deleted. Case and repeated
    spaces are left alone.
    """
    text = normalize_punctuation(text or "")
    text = normalize_whitespace(text)
    return filter_message_chars(text)
