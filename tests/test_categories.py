import unittest

from emoji_generator.categories import CategoryIndex
from emoji_generator.dataset import Category, parse_dataset, sort_and_filter

from .helpers import dataset, record


class TestCategoryIndex(unittest.TestCase):
    def setUp(self):
        self.entries = sort_and_filter(parse_dataset(dataset(
            record("Red Flag", "1F6A9", 9, "Flags"),
            record("Grinning Face", "1F600", 0),
            record("Dog Face", "1F436", 4, "Animals & Nature"),
            record("Winking Face", "1F609", 2),
            record("Triangular Flag", "1F6A9", 7, "Flags"),
        )))
        self.index = CategoryIndex.build(self.entries)

    def test_groups_follow_declaration_order(self):
        self.assertEqual(
            [category for category, _ in self.index.groups()],
            [Category.SMILEYS, Category.ANIMALS, Category.FLAGS],
        )

    def test_members_keep_sort_order(self):
        self.assertEqual(
            [e.name for e in self.index.entries_for(Category.FLAGS)],
            ["Triangular Flag", "Red Flag"],
        )
        self.assertEqual(
            [e.name for e in self.index.entries_for(Category.SMILEYS)],
            ["Grinning Face", "Winking Face"],
        )

    def test_empty_categories_are_absent(self):
        self.assertEqual(self.index.entries_for(Category.OBJECTS), ())
        self.assertNotIn(Category.OBJECTS, dict(self.index.groups()))

    def test_every_entry_in_exactly_one_group(self):
        grouped = [e for _, members in self.index.groups() for e in members]
        self.assertEqual(sorted(grouped, key=lambda e: e.sort_order), self.entries)
        for category, members in self.index.groups():
            for entry in members:
                self.assertIs(entry.category, category)


if __name__ == "__main__":
    unittest.main()
