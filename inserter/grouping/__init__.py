"""Grouping components feeding the presentation assembler."""

from inserter.grouping.category_partitioner import CategoryPartitioner, get_category_index
from inserter.grouping.child_filter import ChildBlockFilter
from inserter.grouping.collection_partitioner import CollectionPartitioner
from inserter.grouping.suggestion_ranker import SuggestionRanker
from inserter.grouping.uncategorized import UncategorizedBucketer

__all__ = [
    "CategoryPartitioner",
    "ChildBlockFilter",
    "CollectionPartitioner",
    "SuggestionRanker",
    "UncategorizedBucketer",
    "get_category_index",
]
