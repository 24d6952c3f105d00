import json


def record(name, unified, sort_order, category="Smileys & Emotion", **extra):
    data = {"name": name, "unified": unified, "sort_order": sort_order, "category": category}
    data.update(extra)
    return data


def dataset(*records) -> bytes:
    return json.dumps(list(records)).encode("utf-8")


def unified(text: str) -> str:
    """Hyphen-joined upper-case hex form of ``text``, as emoji-data writes it."""
    return "-".join(f"{ord(ch):04X}" for ch in text)
