#!/usr/bin/env python
"""
Tree Extraction Pipeline - Main orchestration module

This module runs the complete extraction workflow for one request: check the
declared format, parse the input file, name every tree and write each tree to
its own Newick file.
"""

import logging
import time
from collections import namedtuple

from tree_extraction.format_gate import check_format
from tree_extraction.tree_source import TreeSource
from tree_extraction.tree_extractor import extract, find_name_collisions
from tree_extraction.tree_writer import NewickFileWriter

# Everything a run needs to know, fixed at process start.
ExtractionRequest = namedtuple(
    'ExtractionRequest',
    ['input_path', 'format_name', 'name_prefix', 'output_dir'],
    defaults=("tree", ".")
)


class TreeExtractionPipeline:
    """Orchestrates the complete tree extraction workflow."""

    def __init__(self, request, config=None):
        """
        Initialize with a request and optional configuration.

        Args:
            request (ExtractionRequest): What to read and where to write.
            config (dict, optional): Component configuration, with optional
                'source' and 'writer' sections.
        """
        self.request = request
        self.config = config or {}
        self.logger = logging.getLogger(__name__)

        self.source = TreeSource(config=self.config.get('source', {}))
        self.writer = NewickFileWriter(
            output_dir=request.output_dir,
            config=self.config.get('writer', {})
        )

        # Track pipeline execution stats
        self.stats = {
            'start_time': None,
            'end_time': None,
            'elapsed_time': None,
            'tree_count': None,
            'written_count': 0,
        }

    def run(self):
        """
        Execute the extraction.

        Returns:
            tuple: (list of written paths, ExtractionError or None). Stops at the
                first error; files written before it are left in place.
        """
        request = self.request
        self.stats['start_time'] = time.time()

        error = check_format(request.format_name)
        if error:
            return [], error

        records, error = self.source.parse_file(request.input_path, request.format_name)
        if error:
            return [], error
        self.stats['tree_count'] = len(records)

        named_trees, error = extract(records, request.name_prefix)
        if error:
            return [], error

        for name in find_name_collisions(named_trees):
            self.logger.warning(f"More than one tree is named {name}; "
                                f"only the last one will be kept")

        written = []
        for tree in named_trees:
            path, error = self.writer.write(tree)
            if error:
                return written, error
            written.append(path)
            self.stats['written_count'] += 1

        self.stats['end_time'] = time.time()
        self.stats['elapsed_time'] = self.stats['end_time'] - self.stats['start_time']

        self.logger.info(f"Wrote {len(written)} tree files in "
                         f"{self.stats['elapsed_time']:.2f} seconds")
        return written, None
