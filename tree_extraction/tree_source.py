#!/usr/bin/env python
"""
Tree Source Module - Reads multi-tree files into ordered tree records

This module wraps DendroPy's readers for Newick, Nexus and NeXML data. A
successful parse yields one TreeRecord per tree, in source order; a failed parse
yields no records at all.
"""

import io
import sys
import logging
from collections import namedtuple
import dendropy

from tree_extraction.errors import ErrorKind, ExtractionError

# A parsed tree: its embedded name (None if the source carried none) and its
# Newick description without the trailing semicolon.
TreeRecord = namedtuple('TreeRecord', ['name', 'topology'])

# Format names this source can read, mapped to the DendroPy schema for each.
FORMAT_SCHEMAS = {
    'newick': 'newick',
    'nexus': 'nexus',
    'nexml': 'nexml',
    'phyliptree': 'newick',
    'relaxedphyliptree': 'newick',
}

SUPPORTED_FORMATS = tuple(FORMAT_SCHEMAS)

# Reader options only the Newick and Nexus readers understand
_NEWICK_FAMILY = ('newick', 'nexus')


class TreeSource:
    """Parses tree files into TreeRecord sequences using DendroPy."""

    def __init__(self, config=None):
        """
        Initialize the tree source.

        Args:
            config (dict, optional): Configuration dictionary. Can include
                'encoding' for input files and 'schema' with extra keyword
                arguments for the Newick and Nexus readers.
        """
        self.config = config or {}
        self.logger = logging.getLogger(__name__)
        self.encoding = self.config.get('encoding', 'utf-8')

    def parse(self, stream, format_name):
        """
        Parse every tree in a stream.

        Args:
            stream (file-like): Text stream positioned at the start of the data.
            format_name (str): One of SUPPORTED_FORMATS.

        Returns:
            tuple: (list of TreeRecord, ExtractionError or None). The record list
                is empty whenever an error is returned.
        """
        schema, error = self._schema_for(format_name)
        if error:
            return [], error

        self.logger.info(f"Parsing {format_name} trees")

        try:
            data = stream.read()
        except OSError as e:
            return [], ExtractionError(ErrorKind.IO, f"could not read input: {e}")
        except UnicodeDecodeError as e:
            return [], ExtractionError(ErrorKind.PARSE, str(e))

        # DendroPy rejects empty data; an empty input simply holds no trees
        if not data.strip():
            self.logger.info("Input holds no trees")
            return [], None

        try:
            trees = dendropy.TreeList.get(
                data=data,
                schema=schema,
                **self._get_schema_kwargs(schema)
            )
            records = [self._to_record(tree, schema) for tree in trees]
        except Exception as e:
            # Reported to the user by the caller
            self.logger.debug(f"Failed to parse {format_name} input: {str(e)}")
            return [], ExtractionError(ErrorKind.PARSE, str(e))

        self.logger.info(f"Parsed {len(records)} trees")
        return records, None

    def parse_file(self, filepath, format_name):
        """
        Parse every tree in a file.

        Args:
            filepath (str): Path to the tree file, or '-' for standard input.
            format_name (str): One of SUPPORTED_FORMATS.

        Returns:
            tuple: (list of TreeRecord, ExtractionError or None).
        """
        _, error = self._schema_for(format_name)
        if error:
            return [], error

        if filepath == '-':
            self.logger.info("Reading trees from standard input")
            return self.parse(sys.stdin, format_name)

        self.logger.info(f"Reading trees from file: {filepath}")
        try:
            stream = open(filepath, 'r', encoding=self.encoding)
        except OSError as e:
            self.logger.debug(f"Could not open input file {filepath}: {e.strerror}")
            return [], ExtractionError(
                ErrorKind.IO, f"could not open input file {filepath}: {e.strerror}")

        with stream:
            return self.parse(stream, format_name)

    def parse_string(self, data, format_name):
        """Parse every tree in an in-memory string."""
        return self.parse(io.StringIO(data), format_name)

    def _schema_for(self, format_name):
        schema = FORMAT_SCHEMAS.get(format_name)
        if schema is None:
            return None, ExtractionError(
                ErrorKind.USAGE, f"unsupported input format: {format_name}")
        return schema, None

    def _get_schema_kwargs(self, schema):
        """
        Get reader keyword arguments for a DendroPy schema.

        Returns:
            dict: Schema-specific keyword arguments.
        """
        if schema not in _NEWICK_FAMILY:
            return {}

        # Underscores are part of tree and taxon names, not encoded spaces.
        # Labels differing only in case name different taxa.
        schema_kwargs = {
            'preserve_underscores': True,
            'case_sensitive_taxon_labels': True,
            'suppress_internal_node_taxa': True,
            'suppress_leaf_node_taxa': False,
        }

        if 'schema' in self.config:
            schema_kwargs.update(self.config['schema'])

        return schema_kwargs

    def _to_record(self, tree, schema):
        """Convert a DendroPy tree into a TreeRecord."""
        # The NeXML reader gives every edge a length of 0.0 when none is stored
        suppress_edge_lengths = schema == 'nexml' and not any(
            edge.length for edge in tree.preorder_edge_iter())

        newick = tree.as_string(
            schema="newick",
            suppress_rooting=True,
            suppress_edge_lengths=suppress_edge_lengths,
            unquoted_underscores=True,
            preserve_spaces=True
        ).strip()
        if newick.endswith(";"):
            newick = newick[:-1].rstrip()

        self.logger.debug(f"Read tree {tree.label!r}")
        return TreeRecord(name=tree.label or None, topology=newick)
