#!/usr/bin/env python
"""
Tree Extractor Module - Assigns a file name to every parsed tree

A tree keeps its embedded name when it has one. Unnamed trees are named after
their zero-based position in the input, e.g. tree_0, tree_1, ...
"""

import logging
from collections import Counter, namedtuple

from tree_extraction.errors import ErrorKind, ExtractionError

# A tree ready to be written: the name its file is derived from, and its
# Newick description without the trailing semicolon.
NamedTree = namedtuple('NamedTree', ['final_name', 'topology'])

DEFAULT_PREFIX = "tree"

NO_TREES_MESSAGE = "the file was parsed successfully, but no trees were found"

logger = logging.getLogger(__name__)


def final_name_for(record, index, prefix=DEFAULT_PREFIX):
    """
    Determine the name of a single tree.

    Args:
        record (TreeRecord): The parsed tree.
        index (int): Zero-based position of the tree in the input.
        prefix (str): Prefix for trees without an embedded name.

    Returns:
        str: The embedded name if it is non-empty, otherwise '<prefix>_<index>'.
    """
    if record.name:
        return record.name
    return f"{prefix}_{index}"


def extract(records, prefix=DEFAULT_PREFIX):
    """
    Name every tree in a parsed sequence, preserving input order.

    Args:
        records (sequence of TreeRecord): Trees in source order.
        prefix (str): Prefix for trees without an embedded name.

    Returns:
        tuple: (list of NamedTree, ExtractionError or None). An empty input is
            reported as a NO_TREES error rather than an empty success.
    """
    if not records:
        return [], ExtractionError(ErrorKind.NO_TREES, NO_TREES_MESSAGE)

    named_trees = [
        NamedTree(final_name_for(record, i, prefix), record.topology)
        for i, record in enumerate(records)
    ]

    logger.info(f"Named {len(named_trees)} trees")
    return named_trees, None


def find_name_collisions(named_trees):
    """
    Find names shared by more than one tree.

    Writing such trees leaves only the last one with a given name on disk.

    Args:
        named_trees (sequence of NamedTree): Named trees in output order.

    Returns:
        list: Names used more than once, in order of first appearance.
    """
    counts = Counter(tree.final_name for tree in named_trees)
    return [name for name, count in counts.items() if count > 1]
