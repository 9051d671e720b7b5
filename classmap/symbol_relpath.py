"""Utilities for turning a symbol name into a relative file path."""

import os


def strip_leading_separator(symbol_name: str, separator: str) -> str:
    """Drop leading separators from a fully-qualified name like \\Foo\\Bar."""
    return symbol_name.lstrip(separator)


def strip_prefix(symbol_name: str, prefix: str) -> str:
    """Remove the prefix and the one separator character following it.

    The character after the prefix is not checked: a prefix Vendor\\Package
    applied to Vendor\\PackageExtra\\Foo leaves xtra\\Foo.
    """
    return symbol_name[len(prefix) + 1 :]


def symbol_relpath(remainder: str, separator: str) -> str:
    """Convert hierarchy separators into the platform directory separator."""
    return remainder.replace(separator, os.sep)


def candidate_path(directory: str, relpath: str, extension: str) -> str:
    """Build the file path probed for one candidate directory."""
    # Plain concatenation: an empty relpath yields directory/ + extension.
    return f"{directory}{os.sep}{relpath}{extension}"
