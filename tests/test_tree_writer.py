#!/usr/bin/env python
"""
Unit tests for the tree_writer module.

These tests verify the exact contents and names of the files written for each
tree, and that write failures are reported as I/O errors.
"""

import logging
import pytest

# Import the module to test
from tree_extraction.errors import ErrorKind
from tree_extraction.tree_extractor import NamedTree
from tree_extraction.tree_writer import NewickFileWriter

# Set up logging
logging.basicConfig(level=logging.ERROR)


# Fixtures
@pytest.fixture
def writer(tmp_path):
    """Create a writer targeting a temporary directory."""
    return NewickFileWriter(output_dir=str(tmp_path))


# Tests
def test_write_appends_single_terminator(writer, tmp_path):
    """The file holds the topology followed by exactly one semicolon."""
    path, error = writer.write(NamedTree("foo", "(A,B)"))

    assert error is None
    assert path == str(tmp_path / "foo.tre")
    assert (tmp_path / "foo.tre").read_bytes() == b"(A,B);"


def test_write_keeps_branch_lengths_verbatim(writer, tmp_path):
    """The topology string is written unchanged."""
    topology = "((A:0.1,B:0.2):0.05,'C d':0.3)"
    writer.write(NamedTree("lengths", topology))

    assert (tmp_path / "lengths.tre").read_text() == topology + ";"


def test_write_overwrites_existing_file(writer, tmp_path):
    """An existing file of the same name is truncated and replaced."""
    (tmp_path / "foo.tre").write_text("((old,much,longer,tree),X);\n")

    writer.write(NamedTree("foo", "(A,B)"))

    assert (tmp_path / "foo.tre").read_text() == "(A,B);"


def test_write_creates_output_directory(tmp_path):
    """A missing output directory is created."""
    output_dir = tmp_path / "trees" / "replicates"
    writer = NewickFileWriter(output_dir=str(output_dir))

    path, error = writer.write(NamedTree("tree_0", "(A,B)"))

    assert error is None
    assert (output_dir / "tree_0.tre").read_text() == "(A,B);"


def test_write_to_current_directory(monkeypatch, tmp_path):
    """By default trees are written to the current working directory."""
    monkeypatch.chdir(tmp_path)

    path, error = NewickFileWriter().write(NamedTree("bestTree", "(A,B)"))

    assert error is None
    assert (tmp_path / "bestTree.tre").read_text() == "(A,B);"


def test_custom_extension(tmp_path):
    """The file extension can be configured."""
    writer = NewickFileWriter(output_dir=str(tmp_path), config={'extension': '.nwk'})

    path, _ = writer.write(NamedTree("foo", "(A,B)"))

    assert path.endswith("foo.nwk")
    assert (tmp_path / "foo.nwk").exists()


def test_write_failure_is_an_io_error(tmp_path):
    """Failing to create the file yields an I/O error and no path."""
    blocker = tmp_path / "not_a_directory"
    blocker.write_text("")
    writer = NewickFileWriter(output_dir=str(blocker))

    path, error = writer.write(NamedTree("foo", "(A,B)"))

    assert path is None
    assert error.kind is ErrorKind.IO
    assert "foo.tre" in error.message
