"""
Parsed form of the emoji-data ``emoji.json`` dataset.

Every entry is validated and its codepoints decoded while parsing, so a bad
record aborts the run before anything is rendered.
"""

import enum
import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

from . import codepoints, names
from .errors import ParseError

logger = logging.getLogger(__name__)


class Category(enum.Enum):
    SMILEYS = "Smileys & Emotion"
    PEOPLE = "People & Body"
    ANIMALS = "Animals & Nature"
    FOOD = "Food & Drink"
    ACTIVITIES = "Activities"
    TRAVEL = "Travel & Places"
    OBJECTS = "Objects"
    SYMBOLS = "Symbols"
    FLAGS = "Flags"
    SKIN_TONES = "Skin Tones"

    @property
    def case_name(self) -> str:
        """Swift case name, e.g. ``skinTones``."""
        head, *rest = self.name.lower().split("_")
        return head + "".join(word.title() for word in rest)

    @property
    def localization_key(self) -> str:
        return f"EMOJI_CATEGORY_{self.case_name.upper()}_NAME"


@dataclass(frozen=True)
class DatasetEntry:
    name: Optional[str]
    unified: str
    sort_order: int
    category: Category

    @property
    def identifier(self) -> Optional[str]:
        return names.normalize(self.name)

    @property
    def value(self) -> str:
        return codepoints.decode(self.unified)


def _require(record: dict, key: str, index: int) -> Any:
    if key not in record or record[key] is None:
        raise ParseError(f"entry {index}: missing required field {key!r}")
    return record[key]


def _entry(record: Any, index: int) -> DatasetEntry:
    if not isinstance(record, dict):
        raise ParseError(f"entry {index}: expected an object, got {type(record).__name__}")

    name = record.get("name")
    if name is not None and not isinstance(name, str):
        raise ParseError(f"entry {index}: 'name' must be a string or null")

    unified = _require(record, "unified", index)
    if not isinstance(unified, str):
        raise ParseError(f"entry {index}: 'unified' must be a string")

    sort_order = _require(record, "sort_order", index)
    if isinstance(sort_order, bool) or not isinstance(sort_order, int) or sort_order < 0:
        raise ParseError(f"entry {index}: 'sort_order' must be a non-negative integer")

    label = _require(record, "category", index)
    try:
        category = Category(label)
    except ValueError:
        raise ParseError(f"entry {index}: unknown category {label!r}") from None

    codepoints.decode(unified)
    return DatasetEntry(name=name, unified=unified, sort_order=sort_order, category=category)


def parse_dataset(raw: Union[bytes, str]) -> List[DatasetEntry]:
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ParseError(f"malformed JSON: {e}") from e

    if not isinstance(data, list):
        raise ParseError(f"expected a JSON array, got {type(data).__name__}")

    return [_entry(record, i) for i, record in enumerate(data)]


def sort_and_filter(entries: Iterable[DatasetEntry]) -> List[DatasetEntry]:
    """Stable sort by ``sort_order``, then drop entries without a name."""
    ordered = sorted(entries, key=lambda entry: entry.sort_order)
    kept = [entry for entry in ordered if entry.name]
    logger.debug("dropped %d unnamed entries", len(ordered) - len(kept))
    return kept
