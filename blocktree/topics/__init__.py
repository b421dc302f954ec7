"""Topic extraction and topic forest assembly."""

from .extractor import collect_trees, collect_topics, split_path
from .forest import build_topic_forest, flatten_topic_forest, rebuild_topic_forest

__all__ = [
    "collect_trees",
    "collect_topics",
    "split_path",
    "build_topic_forest",
    "flatten_topic_forest",
    "rebuild_topic_forest"
]
