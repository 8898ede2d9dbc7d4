"""Decoration string handling.

git prints the references that point at a commit as one decoration string,
e.g. ``HEAD -> refs/heads/master, tag: refs/tags/v0.0.1``. A hosting API
lists each of those as a separate reference without the ``tag: `` and
``HEAD -> `` markers.
"""

from typing import Final

DECORATION_SEPARATOR: Final = ", "
DECORATION_PREFIXES: Final = ("tag: ", "HEAD -> ")


def strip_decoration(name: str) -> str:
    """Remove the ``tag: `` / ``HEAD -> `` marker from one decoration.

    Stripping an already stripped name returns it unchanged.

    Example:
        >>> strip_decoration("tag: refs/tags/v0.0.1")
        'refs/tags/v0.0.1'
        >>> strip_decoration("refs/tags/v0.0.1")
        'refs/tags/v0.0.1'
    """
    for prefix in DECORATION_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix) :]
    return name


def split_decorations(refs: str) -> tuple[str, ...]:
    """Split a decoration string into individual reference names.

    Example:
        >>> split_decorations("tag: v0.0.1, HEAD -> master")
        ('v0.0.1', 'master')
        >>> split_decorations("")
        ()
    """
    return tuple(
        strip_decoration(part.strip())
        for part in refs.split(DECORATION_SEPARATOR)
        if part.strip()
    )
