from typing import Optional

# Applied in this order; literal substrings, not a character class.
REPLACEMENTS = (
    (" & ", " "),
    (" - ", " "),
    ("-", " "),
    ("(", " "),
    (")", " "),
    ("’", ""),
    (".", ""),
)


def _titlecase(word: str) -> str:
    return word[:1].upper() + word[1:]


def normalize(name: Optional[str]) -> Optional[str]:
    """Turn a display name such as "Face with Tears of Joy" into ``faceWithTearsOfJoy``.

    Distinct names may collapse onto the same identifier; that is not
    detected here.
    """
    if name is None:
        return None

    sanitized = name.lower()
    for old, new in REPLACEMENTS:
        sanitized = sanitized.replace(old, new)

    upper_camel = "".join(_titlecase(word) for word in sanitized.split(" ") if word)
    if not upper_camel:
        return None
    return upper_camel[0].lower() + upper_camel[1:]
