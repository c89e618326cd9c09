"""Segment-level path operations used by grouping.

Paths are split into segments once, prefixes are compared and removed as
segment lists, and segments are only joined back into a string at the end.
Nothing here compares raw character prefixes, so ``/pets`` and ``/petstore``
never share a prefix.
"""

from __future__ import annotations

DEFAULT_GROUP = 'default'


def split_segments(path: str) -> list[str]:
    """Split a path into segments after removing a single leading ``/``.

    ``"/api/v1/pets"`` -> ``["api", "v1", "pets"]``
    ``"/"``            -> ``[""]``
    ``"/pets/"``       -> ``["pets", ""]``
    """
    if path.startswith('/'):
        path = path[1:]
    return path.split('/')


def join_segments(segments: list[str]) -> str:
    """Join segments with ``/``, dropping trailing empty segments.

    The result never ends in ``/``.
    """
    segments = list(segments)
    while segments and not segments[-1]:
        segments.pop()
    return '/'.join(segments)


def strip_segments(path: str, prefix: list[str]) -> str:
    """Remove the leading segments ``prefix`` from ``path``.

    Returns ``''`` when nothing is left and ``'/' + rest`` otherwise. A path
    that does not start with ``prefix`` is returned unchanged.
    """
    if not prefix:
        return path

    segments = split_segments(path)
    if segments[: len(prefix)] != prefix:
        return path

    remaining = segments[len(prefix) :]
    if not remaining:
        return ''
    return '/' + '/'.join(remaining)


def strip_group_segment(path: str, key: str) -> str:
    """Remove the leading ``/<key>`` segment from ``path`` exactly once.

    Only a path starting with ``/`` whose first segment equals ``key`` is
    rewritten, so applying this again to its own output is a no-op unless
    the key repeats in the path.

    Example::

        >>> strip_group_segment('/pets/{id}', 'pets')
        '/{id}'
        >>> strip_group_segment('/{id}', 'pets')
        '/{id}'
        >>> strip_group_segment('/pets', 'pets')
        ''
    """
    if not path.startswith('/'):
        return path
    return strip_segments(path, [key])


def resolve_common_prefix(paths: list[str]) -> str:
    """Find the longest segment-aligned prefix shared by all ``paths``.

    The first path's segments are tried in order. A segment is accepted while
    every other path starts with the accepted segments plus the candidate;
    the first failure ends the scan.

    A single path shares its whole segment set with itself, so
    ``["/widgets/{id}"]`` resolves to ``"widgets/{id}"``.

    Args:
        paths: Operation paths in declaration order.

    Returns:
        The prefix without leading or trailing ``/`` (``"api/v1"``), or
        ``''`` when there is none or ``paths`` is empty.

    Example::

        >>> resolve_common_prefix(['/api/v1/pets', '/api/v1/owners'])
        'api/v1'
        >>> resolve_common_prefix(['/pets', '/owners'])
        ''
    """
    if not paths:
        return ''

    first, *others = [split_segments(path) for path in paths]

    accepted: list[str] = []
    for segment in first:
        candidate = accepted + [segment]
        if any(other[: len(candidate)] != candidate for other in others):
            break
        accepted = candidate

    return join_segments(accepted)


def strip_base_path(path: str, base_path: str) -> str:
    """Remove a resolved base path (and its separating ``/``) from ``path``."""
    if not base_path:
        return path
    return strip_segments(path, base_path.split('/'))
