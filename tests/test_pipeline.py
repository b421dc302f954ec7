"""
Tests for the ingestion, topic aggregation and export flows.
"""

import unittest

from blocktree.identity import CounterIdGenerator
from blocktree.markdown import parse_markdown
from blocktree.models import FlatTreeNode
from blocktree.pipeline import aggregate_topics, export_markdown, ingest_markdown

SAMPLE_DOCUMENT = """# [[Cooking]]

Notes about food.

## [[Cooking/Baking|Baking]]

- flour
- water

## [[Cooking/Grilling|Grilling]]

> Keep the lid closed."""


class TestIngestMarkdown(unittest.TestCase):
    """Test ingesting a markdown document."""

    def setUp(self):
        self.result = ingest_markdown(SAMPLE_DOCUMENT, CounterIdGenerator())

    def test_records_are_pre_order(self):
        self.assertEqual([record.id for record in self.result.records], ["id1", "id2", "id3", "id4", "id5", "id6"])
        self.assertEqual(
            [record.parent_id for record in self.result.records],
            [None, "id1", "id1", "id3", "id1", "id5"]
        )

    def test_description_and_topics(self):
        self.assertEqual(self.result.description, "Notes about food.")
        self.assertEqual(self.result.trees, ["Cooking", "Cooking/Baking", "Cooking/Grilling"])
        self.assertEqual(self.result.topics, ["Baking", "Cooking", "Grilling"])

    def test_export_round_trip(self):
        self.assertEqual(export_markdown(self.result.records), SAMPLE_DOCUMENT)
        self.assertEqual(export_markdown(self.result.blocks), SAMPLE_DOCUMENT)

    def test_empty_document(self):
        result = ingest_markdown("", CounterIdGenerator())
        self.assertEqual(result.blocks, [])
        self.assertEqual(result.records, [])
        self.assertEqual(result.topics, [])
        self.assertEqual(export_markdown(result.records), "")


class TestAggregateTopics(unittest.TestCase):
    """Test aggregating topics across documents."""

    def test_blocks_from_several_documents(self):
        first = ingest_markdown(SAMPLE_DOCUMENT, CounterIdGenerator("a"))
        second = parse_markdown("# [[Travel]]\n\n## [[Travel/Baking|Bread abroad]]\n\nCroissants")

        summary = aggregate_topics(first.records + second)

        self.assertEqual(summary.paths, ["Cooking", "Cooking/Baking", "Cooking/Grilling", "Travel", "Travel/Baking"])
        self.assertEqual(summary.topics, ["Baking", "Cooking", "Grilling", "Travel"])
        self.assertEqual([node.label for node in summary.forest], ["Cooking", "Travel"])
        self.assertEqual([child.label for child in summary.forest[0].children], ["Baking", "Grilling"])
        self.assertEqual(summary.flat_forest[-1], FlatTreeNode(label="Baking", parent="Travel"))

    def test_plain_paths(self):
        summary = aggregate_topics(["B/C", "A", "", "B/C"])
        self.assertEqual(summary.paths, ["A", "B/C"])
        self.assertEqual([node.label for node in summary.forest], ["A", "B"])

    def test_empty(self):
        summary = aggregate_topics([])
        self.assertEqual(summary.forest, [])
        self.assertEqual(summary.flat_forest, [])


if __name__ == '__main__':
    unittest.main(verbosity=2)
