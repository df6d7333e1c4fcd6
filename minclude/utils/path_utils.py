"""Identifier normalization for header files and include targets."""

import posixpath
from pathlib import Path
from typing import Union


def normalize_identifier(path: Union[Path, str]) -> str:
    """
    Normalize a file path into the identifier used as a graph node.

    Separators become ``/`` and redundant ``.``/``..`` segments are collapsed,
    so ``./inc\\a.h`` and ``inc/a.h`` name the same node.

    Examples:
        >>> normalize_identifier("./inc/../inc/a.h")
        'inc/a.h'
    """
    text = str(path).replace("\\", "/")
    if not text:
        return text
    return posixpath.normpath(text)


def normalize_base(base: Union[Path, str, None]) -> str:
    """
    Normalize a base directory into a ``/``-terminated prefix.

    An empty base stays empty so include targets are used as-is.

    Examples:
        >>> normalize_base("src/include")
        'src/include/'
        >>> normalize_base("")
        ''
    """
    if base is None:
        return ""
    text = normalize_identifier(base)
    if not text or text == ".":
        return ""
    return text.rstrip("/") + "/"


def qualify_include(target: str, base: str) -> str:
    """Turn an include target into an identifier by prefixing the base."""
    return normalize_identifier(normalize_base(base) + target)


def unqualify_include(identifier: str, base: str) -> str:
    """Recover the include target written in source from an identifier.

    Identifiers outside the base are returned unchanged.
    """
    prefix = normalize_base(base)
    if prefix and identifier.startswith(prefix):
        return identifier[len(prefix):]
    return identifier
