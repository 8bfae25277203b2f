"""Filename text handling for Prefix Search."""

import os
from typing import Union


def lossy_str(value: Union[str, bytes, os.PathLike]) -> str:
    """
    Convert a filesystem name to valid text.

    On POSIX, names that are not valid UTF-8 reach Python as strings holding
    lone surrogates. Those bytes are replaced with U+FFFD so the result can be
    matched, validated and printed.

    Args:
        value: Path or name as produced by the filesystem or argv

    Returns:
        The name with undecodable bytes replaced
    """
    return os.fsencode(value).decode('utf-8', 'replace')
