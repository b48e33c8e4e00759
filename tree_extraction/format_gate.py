#!/usr/bin/env python
"""
Format Gate Module - Validates declared input format names

The tree source advertises the format names it can read. A requested format
must match one of them exactly (case-sensitive) before any file is opened.
"""

from tree_extraction.errors import ErrorKind, ExtractionError
from tree_extraction.tree_source import SUPPORTED_FORMATS


def is_supported(format_name, capability_list=SUPPORTED_FORMATS):
    """
    Determine whether a format name is in the capability list.

    Args:
        format_name (str): The requested format name.
        capability_list (sequence of str): The advertised format names.

    Returns:
        bool: True if the name matches one of the advertised names exactly.
    """
    return any(name == format_name for name in capability_list)


def describe_formats(capability_list=SUPPORTED_FORMATS):
    """Render the capability list one name per line, in the advertised order."""
    return "\n".join(f"\t{name}" for name in capability_list)


def check_format(format_name, capability_list=SUPPORTED_FORMATS):
    """
    Validate a requested format name.

    Args:
        format_name (str): The requested format name.
        capability_list (sequence of str): The advertised format names.

    Returns:
        ExtractionError or None: A usage error listing every valid format if the
            name is not supported, None otherwise.
    """
    if is_supported(format_name, capability_list):
        return None

    message = (f"invalid input format: {format_name}\n\n"
               f"valid formats:\n{describe_formats(capability_list)}")
    return ExtractionError(ErrorKind.USAGE, message)
