"""String collator.

ONLY collation keys - turns strings into normalized, transliterated,
lower-case keys so that in-memory ordering matches a case- and
accent-insensitive database collation.

Following maximum separation architecture - one file = one purpose.
"""

import codecs
import unicodedata
from typing import Any, Dict, List, Optional

# Letters that do not decompose into a base letter plus combining marks
_APPROXIMATIONS = {
    "Æ": "AE", "æ": "ae",
    "Œ": "OE", "œ": "oe",
    "Ø": "O", "ø": "o",
    "Ð": "D", "ð": "d",
    "Đ": "D", "đ": "d",
    "Ħ": "H", "ħ": "h",
    "Ł": "L", "ł": "l",
    "Ŀ": "L", "ŀ": "l",
    "Þ": "TH", "þ": "th",
    "ß": "ss", "ẞ": "SS",
    "ı": "i",
    "Ŧ": "T", "ŧ": "t",
    "ŉ": "'n",
}

_CP1252_FALLBACK = "record_cache.cp1252_fallback"


def _cp1252_fallback(error: UnicodeError):
    """Decode bytes that are not valid UTF-8 as cp1252."""
    if not isinstance(error, UnicodeDecodeError):
        raise error
    invalid = error.object[error.start:error.end]
    return invalid.decode("cp1252", errors="replace"), error.end


codecs.register_error(_CP1252_FALLBACK, _cp1252_fallback)


def tidy(value: Any) -> str:
    """Repair malformed input into a well-formed str.
    
    Bytes are decoded as UTF-8, invalid sequences as cp1252. Lone
    surrogates in a str are replaced with U+FFFD.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors=_CP1252_FALLBACK)
    return "".join("\ufffd" if 0xD800 <= ord(char) <= 0xDFFF else char for char in value)


def transliterate_char(char: str) -> Optional[str]:
    """Transliterate one character to ASCII, or None if it has no ASCII form."""
    if char.isascii():
        return char
    approximation = _APPROXIMATIONS.get(char)
    if approximation is not None:
        return approximation
    decomposed = unicodedata.normalize("NFKD", char)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    if base and base.isascii():
        return base
    return None


class Collator:
    """Collation key builder with a per-instance key cache.
    
    One Collator serves one sort call; the caller clears it when the call
    ends so no keys outlive the call.
    """
    
    def __init__(self, normalization_form: str = "NFC"):
        self._normalization_form = normalization_form
        self._collated: Dict[Any, str] = {}
    
    def collate(self, value: Any) -> Any:
        """Get the collation key of a string.
        
        None and non-textual values are returned unchanged.
        """
        if value is None or not isinstance(value, (str, bytes, bytearray)):
            return value
        
        cache_key = bytes(value) if isinstance(value, bytearray) else value
        collated = self._collated.get(cache_key)
        if collated is None:
            collated = self._build_key(value)
            self._collated[cache_key] = collated
        return collated
    
    def _build_key(self, value: Any) -> str:
        normalized = unicodedata.normalize(self._normalization_form, tidy(value))
        chunks: List[str] = []
        for char in normalized:
            ascii_form = transliterate_char(char)
            # Characters without a transliteration keep their normalized form
            chunks.append(char if ascii_form is None else ascii_form.lower())
        return "".join(chunks)
    
    def clear(self) -> None:
        self._collated.clear()
    
    def __len__(self) -> int:
        return len(self._collated)
    
    def __contains__(self, value: Any) -> bool:
        return value in self._collated
