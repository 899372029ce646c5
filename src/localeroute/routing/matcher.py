"""Pathname matching: localized paths back to route keys.

Patterns are tried in declaration order and the first complete match
wins. This ordering is part of the public contract: when two templates
of one locale can match the same path, the route declared first in
``pathnames`` is selected.
"""

from dataclasses import dataclass

from localeroute.routing.params import Params, SegmentKind
from localeroute.routing.pattern import CompiledPattern, split_path
from localeroute.routing.table import RouteTable


@dataclass(frozen=True, slots=True)
class PathnameMatch:
    """Result of a successful pathname match."""

    route_key: str
    params: Params


def match_pattern(pattern: CompiledPattern, parts: list[str]) -> Params | None:
    """Match path segments against a single compiled pattern.

    Returns the captured parameters, or None if the pattern does not
    consume every segment. Catch-alls capture tuples of segments.
    """
    params: Params = {}
    index = 0

    for seg in pattern.segments:
        if seg.kind.is_catch_all:
            remaining = tuple(parts[index:])
            if seg.kind is SegmentKind.CATCH_ALL and not remaining:
                return None
            params[seg.param_names[0]] = remaining
            return params

        if index == len(parts):
            return None
        captured = seg.capture(parts[index])
        if captured is None:
            return None
        params.update(captured)
        index += 1

    if index != len(parts):
        return None
    return params


class PathnameMatcher:
    """Resolves stripped paths to ``(route_key, params)`` per locale.

    Usage::

        matcher = PathnameMatcher(table)
        match = matcher.match("/neuigkeiten/my-post-42", "de")
        match.route_key  # "/news/[articleSlug]-[articleId]"
        match.params     # {"articleSlug": "my-post", "articleId": "42"}
    """

    __slots__ = ("_table",)

    def __init__(self, table: RouteTable) -> None:
        self._table = table

    def match(self, path: str, locale: str) -> PathnameMatch | None:
        """Return the first declared route matching *path*, or None."""
        path = path.split("?", 1)[0].split("#", 1)[0]
        parts = split_path(path)

        for route_key, pattern in self._table.all_patterns_for(locale):
            params = match_pattern(pattern, parts)
            if params is not None:
                return PathnameMatch(route_key=route_key, params=params)
        return None
