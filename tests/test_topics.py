"""
Unit tests for topic extraction and topic forest assembly.
"""

import unittest

from blocktree.models import FlatTreeNode, MdBlock, TreeNode
from blocktree.topics import (
    build_topic_forest,
    collect_topics,
    collect_trees,
    flatten_topic_forest,
    rebuild_topic_forest
)


def paragraph(text, tree, order=0):
    return MdBlock(text=text, type="paragraph", tree=tree, order=order)


def heading(text, tree, children, order=0):
    return MdBlock(text=text, type="heading", tree=tree, children=children, order=order)


class TestCollectTrees(unittest.TestCase):
    """Test collecting tree paths from block forests."""

    def test_unique_sorted_paths(self):
        parsed = [
            heading("# [[Header 1]]", "", [
                paragraph("Paragraph 1", "Header 1"),
                heading("## [[Header 1/Header 2|Header 2]]", "Header 1", [
                    paragraph("Paragraph 2", "Header 1/Header 2"),
                ], order=1),
            ]),
        ]
        self.assertEqual(collect_trees(parsed), ["Header 1", "Header 1/Header 2"])

    def test_no_trees(self):
        self.assertEqual(collect_trees([paragraph("Just a paragraph", "")]), [])
        self.assertEqual(collect_trees([]), [])

    def test_deeply_nested_paths_keep_case(self):
        parsed = [
            heading("# [[Header 1]]", "", [
                heading("## [[Header 1/Header 2|Header 2]]", "Header 1", [
                    heading("### [[Header 1/Header 2/HEADER 3|HEADER 3]]", "Header 1/Header 2", [
                        paragraph("Deep paragraph", "Header 1/Header 2/HEADER 3"),
                    ]),
                ]),
            ]),
        ]
        self.assertEqual(collect_trees(parsed), [
            "Header 1",
            "Header 1/Header 2",
            "Header 1/Header 2/HEADER 3",
        ])

    def test_flat_records(self):
        """Test flat lists without children are accepted."""
        records = [paragraph("b", "Z/B"), paragraph("a", "A"), paragraph("b again", "Z/B")]
        self.assertEqual(collect_trees(records), ["A", "Z/B"])


class TestCollectTopics(unittest.TestCase):
    """Test collecting topic segments from paths."""

    def test_unique_topics(self):
        paths = [
            "Topic 1/topic 2/topic 3",
            "Topic 1/another topic",
            "Different topic/topic 3",
            "Topic 1/Topic 1/nested topic",
        ]
        self.assertEqual(collect_topics(paths), [
            "Different topic",
            "Topic 1",
            "another topic",
            "nested topic",
            "topic 2",
            "topic 3",
        ])

    def test_two_paths(self):
        self.assertEqual(
            collect_topics(["Topic 1/topic 2/topic 3", "Topic 1/another topic"]),
            ["Topic 1", "another topic", "topic 2", "topic 3"]
        )

    def test_input_order_irrelevant(self):
        paths = ["b/a", "c", "a/ b "]
        self.assertEqual(collect_topics(paths), collect_topics(list(reversed(paths))))
        self.assertEqual(collect_topics(paths), ["a", "b", "c"])

    def test_empty_input(self):
        self.assertEqual(collect_topics([]), [])

    def test_single_level_topics(self):
        self.assertEqual(collect_topics(["Topic A", "Topic B", "Topic C"]), ["Topic A", "Topic B", "Topic C"])


class TestBuildTopicForest(unittest.TestCase):
    """Test assembling the topic forest."""

    def test_arbitrary_depth(self):
        trees = [
            "Topic 1/topic 2/topic 3/topic 4/topic 5",
            "Topic 1/another topic",
            "Different topic/topic 3",
            "Topic 1/Topic 2",
            "Very/Deep/Nested/Structure/With/Many/Levels",
        ]

        def chain(*labels):
            node = {"label": labels[-1], "children": []}
            for label in reversed(labels[:-1]):
                node = {"label": label, "children": [node]}
            return node

        expected = [
            {
                "label": "Topic 1",
                "children": [
                    chain("topic 2", "topic 3", "topic 4", "topic 5"),
                    {"label": "another topic", "children": []},
                    {"label": "Topic 2", "children": []},
                ],
            },
            chain("Different topic", "topic 3"),
            chain("Very", "Deep", "Nested", "Structure", "With", "Many", "Levels"),
        ]

        result = build_topic_forest(trees)
        self.assertEqual([node.model_dump() for node in result], expected)

    def test_shared_prefix_merged_in_first_occurrence_order(self):
        result = build_topic_forest(["A/C", "A/B", "Z", "A/C/D"])
        self.assertEqual([node.label for node in result], ["A", "Z"])
        self.assertEqual([child.label for child in result[0].children], ["C", "B"])
        self.assertEqual(result[0].children[0].children, [TreeNode(label="D")])

    def test_same_prefix_twice(self):
        result = build_topic_forest(["A/B", "A/C"])
        self.assertEqual(result, [TreeNode(label="A", children=[TreeNode(label="B"), TreeNode(label="C")])])

    def test_empty_input(self):
        self.assertEqual(build_topic_forest([]), [])

    def test_single_level_topics(self):
        result = build_topic_forest(["Topic A", "Topic B", "Topic C"])
        self.assertEqual([node.model_dump() for node in result], [
            {"label": "Topic A", "children": []},
            {"label": "Topic B", "children": []},
            {"label": "Topic C", "children": []},
        ])

    def test_trims_whitespace(self):
        self.assertEqual(
            [node.model_dump() for node in build_topic_forest(["  X  / Y "])],
            [{"label": "X", "children": [{"label": "Y", "children": []}]}]
        )
        self.assertEqual(
            [node.model_dump() for node in build_topic_forest(["  Spaced Topic  /  Nested Spaced  "])],
            [{"label": "Spaced Topic", "children": [{"label": "Nested Spaced", "children": []}]}]
        )


class TestFlattenTopicForest(unittest.TestCase):
    """Test flattening and rebuilding the topic forest."""

    def test_pre_order_with_parent_labels(self):
        forest = build_topic_forest(["A/B/C", "A/D", "E"])
        self.assertEqual(flatten_topic_forest(forest), [
            FlatTreeNode(label="A", parent=None),
            FlatTreeNode(label="B", parent="A"),
            FlatTreeNode(label="C", parent="B"),
            FlatTreeNode(label="D", parent="A"),
            FlatTreeNode(label="E", parent=None),
        ])

    def test_empty_forest(self):
        self.assertEqual(flatten_topic_forest([]), [])

    def test_rebuild_round_trip(self):
        forest = build_topic_forest(["A/B/C", "A/D", "E/F"])
        self.assertEqual(rebuild_topic_forest(flatten_topic_forest(forest)), forest)

    def test_repeated_label_follows_latest_occurrence(self):
        """Test the label-keyed parent limitation is preserved, not fixed."""
        forest = build_topic_forest(["A/X", "B/X/Y"])
        flat = flatten_topic_forest(forest)
        self.assertEqual(flat[-1], FlatTreeNode(label="Y", parent="X"))
        self.assertEqual(rebuild_topic_forest(flat), forest)

    def test_unknown_parent_becomes_root(self):
        flat = [FlatTreeNode(label="orphan", parent="missing")]
        with self.assertLogs(level="WARNING"):
            result = rebuild_topic_forest(flat)
        self.assertEqual(result, [TreeNode(label="orphan")])


if __name__ == '__main__':
    unittest.main(verbosity=2)
