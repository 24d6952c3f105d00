from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Tuple

from .dataset import Category, DatasetEntry


class CategoryIndex:
    """Entries grouped by category, each group in the order it was fed.

    Iteration always follows ``Category`` declaration order, regardless of
    the order the groups were first seen in.
    """

    def __init__(self, groups: Dict[Category, Tuple[DatasetEntry, ...]]):
        self._groups = groups

    @classmethod
    def build(cls, entries: Iterable[DatasetEntry]) -> "CategoryIndex":
        groups: Dict[Category, List[DatasetEntry]] = defaultdict(list)
        for entry in entries:
            groups[entry.category].append(entry)
        return cls({category: tuple(items) for category, items in groups.items()})

    def entries_for(self, category: Category) -> Tuple[DatasetEntry, ...]:
        return self._groups.get(category, ())

    def groups(self) -> Iterator[Tuple[Category, Tuple[DatasetEntry, ...]]]:
        for category in Category:
            if category in self._groups:
                yield category, self._groups[category]

