"""Value validators: named boolean predicates over a single sample value.

Each predicate returns False for values of the wrong Python type instead of
raising. The scorer counts a validator as matched when any sample passes.
"""

from __future__ import annotations

import re
import uuid
from typing import Any

# ── Shared regexes ─────────────────────────────────────────────────

CURRENCY_STRING = re.compile(r"^[$€£¥]?\s?\d{1,3}(,?\d{3})*(\.\d{1,2})?$|^\d+(\.\d{1,2})?$")
ISO_CURRENCY = re.compile(r"^[A-Z]{3}$")
PRODUCT_CODE = re.compile(r"^[A-Za-z0-9\-_]{4,20}$")
EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE = re.compile(r"^\+?[\d\s\-().]{7,20}$")
NAME_WORD = re.compile(r"^[A-Za-zÀ-ɏ][A-Za-zÀ-ɏ'.\-]*$")
ADDRESS_TOKENS = re.compile(
    r"\b(st|ave|rd|blvd|street|avenue|road|drive|lane|way|court|plaza|calle|rue|"
    r"strasse|straße|platz|via|avenida|rua|apt|suite|floor|unit|po box)\b",
    re.IGNORECASE,
)
STATUS_VALUES = re.compile(
    r"^(active|inactive|pending|completed|complete|draft|published|archived|deleted|"
    r"approved|rejected|processing|cancelled|canceled|shipped|delivered|paid|unpaid|"
    r"open|closed|enabled|disabled|success|failed|error|running|queued|new|done)$",
    re.IGNORECASE,
)
PERCENT_STRING = re.compile(r"^-?\d+(\.\d+)?\s?%$")
HEX_COLOR = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
FUNCTIONAL_COLOR = re.compile(r"^(rgb|rgba|hsl|hsla)\(\s*[\d.%\s,/]+\)$", re.IGNORECASE)

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
US_DATE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")
EU_DATE = re.compile(r"^\d{1,2}\.\d{1,2}\.\d{4}$")
ISO_TIMESTAMP = re.compile(
    r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(:\d{2})?(\.\d{1,6})?(Z|[+-]\d{2}:?\d{2})?$"
)

IMAGE_EXTENSIONS = re.compile(r"\.(jpg|jpeg|png|gif|webp|svg|bmp|ico|avif)(\?.*)?$", re.IGNORECASE)
IMAGE_HOSTS = re.compile(
    r"\b(cloudinary|imgix|unsplash|imgur|flickr|staticflickr|googleusercontent|"
    r"amazonaws|cloudfront|cdn|gravatar|pravatar|picsum)\b",
    re.IGNORECASE,
)
VIDEO_EXTENSIONS = re.compile(r"\.(mp4|webm|mov|avi|mkv|m4v|flv)(\?.*)?$", re.IGNORECASE)
VIDEO_HOSTS = re.compile(r"\b(youtube|vimeo|youtu\.be|wistia|dailymotion|vidyard)\b", re.IGNORECASE)
AUDIO_EXTENSIONS = re.compile(r"\.(mp3|wav|ogg|flac|aac|m4a|wma|opus)(\?.*)?$", re.IGNORECASE)
AUDIO_HOSTS = re.compile(
    r"\b(soundcloud|spotify|anchor|castbox|podbean|buzzsprout|transistor)\b", re.IGNORECASE
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_url(text: str) -> bool:
    return text.startswith("http://") or text.startswith("https://")


# ── Commerce ───────────────────────────────────────────────────────


def is_positive_amount(value: Any) -> bool:
    """19.99, 0, "$1,234.56", "19.99"."""
    if _is_number(value):
        return value >= 0
    if isinstance(value, str):
        return bool(CURRENCY_STRING.match(value.strip()))
    return False


def is_iso_currency_code(value: Any) -> bool:
    return isinstance(value, str) and bool(ISO_CURRENCY.match(value.strip()))


def is_product_code(value: Any) -> bool:
    """4-20 chars mixing letters and digits, or separated segments."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not PRODUCT_CODE.match(text):
        return False
    has_letter = any(c.isalpha() for c in text)
    has_digit = any(c.isdigit() for c in text)
    has_separator = "-" in text or "_" in text
    return (has_letter and has_digit) or (has_separator and (has_letter or has_digit))


def is_non_negative_integer(value: Any) -> bool:
    if not _is_number(value):
        return False
    return float(value).is_integer() and value >= 0


def is_percentage(value: Any) -> bool:
    """Ratios in [0, 1], percentages in [0, 100], or strings like "42%"."""
    if _is_number(value):
        return 0 <= value <= 100
    if isinstance(value, str):
        return bool(PERCENT_STRING.match(value.strip()))
    return False


# ── Identity ───────────────────────────────────────────────────────


def is_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL.match(value.strip()))


def is_phone(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip()
    digits = sum(c.isdigit() for c in text)
    return digits >= 7 and bool(PHONE.match(text))


def is_uuid(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parsed = uuid.UUID(value.strip())
    except ValueError:
        return False
    return str(parsed) == value.strip().lower()


def is_name_like(value: Any) -> bool:
    """2-100 chars, 1-5 words of letters, apostrophes, hyphens, periods."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    if len(text) < 2 or len(text) > 100 or text.isdigit():
        return False
    words = text.split()
    if len(words) > 5:
        return False
    return all(NAME_WORD.match(word) for word in words)


def is_address_like(value: Any) -> bool:
    """Contains a street token, or is multi-word with both digits and letters."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    if len(text) < 5:
        return False
    if ADDRESS_TOKENS.search(text):
        return True
    if " " not in text:
        return False
    return any(c.isdigit() for c in text) and any(c.isalpha() for c in text)


def is_url(value: Any) -> bool:
    return isinstance(value, str) and _is_url(value.strip())


# ── Media ──────────────────────────────────────────────────────────


def is_image_url(value: Any) -> bool:
    """http(s) URL with an image extension or on a known image host."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not _is_url(text):
        return False
    return bool(IMAGE_EXTENSIONS.search(text) or IMAGE_HOSTS.search(text))


def is_video_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not _is_url(text):
        return False
    return bool(VIDEO_EXTENSIONS.search(text) or VIDEO_HOSTS.search(text))


def is_audio_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not _is_url(text):
        return False
    return bool(AUDIO_EXTENSIONS.search(text) or AUDIO_HOSTS.search(text))


# ── Engagement and content ─────────────────────────────────────────


def is_rating(value: Any) -> bool:
    """Common rating scales 0-5 and 0-10."""
    return _is_number(value) and 0 <= value <= 10


def is_string_list(value: Any) -> bool:
    if not isinstance(value, (list, tuple)) or not value:
        return False
    return all(isinstance(item, str) for item in value)


def is_tag_value(value: Any) -> bool:
    """A short single-token string, as found inside a tags array."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    return 0 < len(text) <= 40 and len(text.split()) <= 3


def is_status_value(value: Any) -> bool:
    return isinstance(value, str) and bool(STATUS_VALUES.match(value.strip()))


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_long_text(value: Any) -> bool:
    """Descriptions typically run past 20 characters."""
    return isinstance(value, str) and len(value.strip()) > 20


# ── Temporal ───────────────────────────────────────────────────────


def is_date(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip()
    return bool(ISO_DATE.match(text) or US_DATE.match(text) or EU_DATE.match(text))


def is_timestamp(value: Any) -> bool:
    """ISO-8601 date-time strings or 10/13-digit Unix epochs."""
    if isinstance(value, str):
        return bool(ISO_TIMESTAMP.match(value.strip()))
    if _is_number(value) and float(value).is_integer() and value > 0:
        return len(str(int(value))) in (10, 13)
    return False


# ── Visual and spatial ─────────────────────────────────────────────


def is_color(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip()
    return bool(HEX_COLOR.match(text) or FUNCTIONAL_COLOR.match(text))


def is_coordinate(value: Any) -> bool:
    """A number in [-180, 180], a "lat,lng" string, or a [lat, lng] pair."""
    if _is_number(value):
        return -180 <= value <= 180
    if isinstance(value, str):
        parts = value.split(",")
        if len(parts) != 2:
            return False
        try:
            lat, lng = (float(p.strip()) for p in parts)
        except ValueError:
            return False
        return -90 <= lat <= 90 and -180 <= lng <= 180
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return all(_is_number(v) and -180 <= v <= 180 for v in value)
    if isinstance(value, dict):
        keys = {str(k).lower() for k in value}
        return bool(keys & {"lat", "latitude"}) and bool(keys & {"lng", "lon", "longitude"})
    return False
