"""
Render the Swift sources for the ``Emoji`` enum and its extensions.

Output is a pure function of the sorted entry list, so the same dataset
always produces byte-identical files.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple, TypeVar

from .categories import CategoryIndex
from .dataset import Category, DatasetEntry
from .errors import EmojiGeneratorError

logger = logging.getLogger(__name__)

FILE_HEADER = (
    "//\n"
    "//  Copyright (c) 2020 Open Whisper Systems. All rights reserved.\n"
    "//\n"
    "\n"
    "// This file is generated by emoji_generator, do not manually edit it.\n"
    "\n"
)

# Written as the last case of every per-emoji switch; the enum is too long
# for the Swift compiler to prove the switch exhaustive.
FATAL_DEFAULT = '        default: fatalError("Unexpected case \\(self)")'

T = TypeVar("T")


class GeneratedFiles(NamedTuple):
    emoji: str
    category: str
    value: str


def swift_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _named(entries: Iterable[DatasetEntry]) -> Iterator[Tuple[str, DatasetEntry]]:
    for entry in entries:
        identifier = entry.identifier
        if identifier is None:
            continue
        yield identifier, entry


def category_table(entries: Iterable[DatasetEntry]) -> Dict[str, Category]:
    """Identifier to category for every named entry; a repeated identifier keeps its last entry."""
    return {identifier: entry.category for identifier, entry in _named(entries)}


def value_table(entries: Iterable[DatasetEntry]) -> Dict[str, str]:
    return {identifier: entry.value for identifier, entry in _named(entries)}


def lookup(table: Mapping[str, T], identifier: str) -> T:
    try:
        return table[identifier]
    except KeyError:
        raise EmojiGeneratorError(f"Unexpected case {identifier}") from None


def report_collisions(entries: Iterable[DatasetEntry]) -> List[str]:
    """Log every identifier produced by more than one entry.

    Colliding cases are still emitted as-is and the Swift compiler rejects
    the redeclaration.
    """
    seen: Dict[str, str] = {}
    collisions = []
    for identifier, entry in _named(entries):
        if identifier in seen:
            logger.warning("identifier %r collides: %r and %r", identifier, seen[identifier], entry.name)
            collisions.append(identifier)
        else:
            seen[identifier] = entry.name
    return collisions


class CodeEmitter:
    def emit(self, entries: Sequence[DatasetEntry], index: CategoryIndex) -> GeneratedFiles:
        report_collisions(entries)
        return GeneratedFiles(
            emoji=self.render_emoji(entries),
            category=self.render_category(entries, index, category_table(entries)),
            value=self.render_value(entries, value_table(entries)),
        )

    def _document(self, lines: List[str]) -> str:
        return FILE_HEADER + "".join(line + "\n" for line in lines)

    def render_emoji(self, entries: Sequence[DatasetEntry]) -> str:
        lines = [
            "/// A sorted representation of all available emoji",
            "enum Emoji: String, CaseIterable {",
        ]
        for identifier, entry in _named(entries):
            lines.append(f"    case {identifier} = {swift_string(entry.name)}")
        lines.append("}")
        return self._document(lines)

    def render_category(
        self,
        entries: Sequence[DatasetEntry],
        index: CategoryIndex,
        categories: Optional[Mapping[str, Category]] = None,
    ) -> str:
        if categories is None:
            categories = category_table(entries)
        lines = [
            "extension Emoji {",
            "    enum Category: String, CaseIterable {",
        ]
        for category in Category:
            lines.append(f"        case {category.case_name} = {swift_string(category.value)}")
        lines.append("")

        lines += [
            "        var localizedName: String {",
            "            switch self {",
        ]
        for category in Category:
            lines += [
                f"            case .{category.case_name}:",
                f'                return NSLocalizedString("{category.localization_key}",',
                f"                                         comment: \"The name for the emoji category '{category.value}'\")",
            ]
        lines += [
            "            }",
            "        }",
            "",
        ]

        lines += [
            "        var emoji: [Emoji] {",
            "            switch self {",
        ]
        for category, members in index.groups():
            lines.append(f"            case .{category.case_name}:")
            lines.append("                return [")
            for identifier, _ in _named(members):
                lines.append(f"                    .{identifier},")
            lines.append("                ]")
        lines += [
            "            }",
            "        }",
            "    }",
            "",
        ]

        lines += [
            "    var category: Category {",
            "        switch self {",
        ]
        for identifier, _ in _named(entries):
            category = lookup(categories, identifier)
            lines.append(f"        case .{identifier}: return .{category.case_name}")
        lines += [
            FATAL_DEFAULT,
            "        }",
            "    }",
            "}",
        ]
        return self._document(lines)

    def render_value(self, entries: Sequence[DatasetEntry], values: Optional[Mapping[str, str]] = None) -> str:
        if values is None:
            values = value_table(entries)
        lines = [
            "extension Emoji {",
            "    var value: String {",
            "        switch self {",
        ]
        for identifier, _ in _named(entries):
            lines.append(f"        case .{identifier}: return {swift_string(lookup(values, identifier))}")
        lines += [
            FATAL_DEFAULT,
            "        }",
            "    }",
            "}",
        ]
        return self._document(lines)
