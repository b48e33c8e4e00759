#!/usr/bin/env python
"""
Tree Writer Module - Writes named trees to standalone Newick files

Each tree goes to its own '<name>.tre' file holding the Newick description
followed by a single semicolon. Existing files with the same name are replaced.
"""

import os
import logging

from tree_extraction.errors import ErrorKind, ExtractionError


class NewickFileWriter:
    """Writes NamedTree objects to one Newick file per tree."""

    def __init__(self, output_dir=".", config=None):
        """
        Initialize the writer.

        Args:
            output_dir (str): Directory receiving the tree files.
            config (dict, optional): Configuration options. Can include
                'extension' (default '.tre') and 'encoding' (default 'utf-8').
        """
        self.output_dir = output_dir
        self.config = config or {}
        self.logger = logging.getLogger(__name__)

        self.extension = self.config.get('extension', '.tre')
        self.encoding = self.config.get('encoding', 'utf-8')

    def path_for(self, tree):
        """Return the path the given tree is written to."""
        return os.path.join(self.output_dir, f"{tree.final_name}{self.extension}")

    def write(self, tree):
        """
        Write a single tree.

        Args:
            tree (NamedTree): The tree to write.

        Returns:
            tuple: (path written, ExtractionError or None). The path is None when
                an error is returned.
        """
        output_path = self.path_for(tree)

        try:
            # Ensure output directory exists
            if self.output_dir and not os.path.exists(self.output_dir):
                os.makedirs(self.output_dir)

            with open(output_path, 'w', encoding=self.encoding) as out:
                out.write(tree.topology)
                out.write(";")
        except OSError as e:
            self.logger.debug(f"Failed to write tree to {output_path}: {e.strerror}")
            return None, ExtractionError(
                ErrorKind.IO, f"could not write {output_path}: {e.strerror}")

        self.logger.debug(f"Tree {tree.final_name} written to {output_path}")
        return output_path, None
