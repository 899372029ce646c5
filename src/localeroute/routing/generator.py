"""Pathname generation: route keys to public, locale-prefixed paths."""

from collections.abc import Mapping

from localeroute.errors import InvalidParameterError, MissingParameterError
from localeroute.routing.params import ParamInput, SegmentKind, format_segments, format_value
from localeroute.routing.pattern import PLACEHOLDER_RE, CompiledPattern, compile_template
from localeroute.routing.prefix import PrefixResolver
from localeroute.routing.table import RouteTable


def substitute(
    pattern: CompiledPattern,
    params: Mapping[str, ParamInput | None],
    route_key: str | None = None,
    *,
    verify: bool = True,
) -> str:
    """Fill *pattern*'s placeholders with *params*, returning a path.

    Catch-all values are joined with ``/``; an empty or omitted optional
    catch-all drops its segment. Raises ``MissingParameterError`` for
    unbound required placeholders and ``InvalidParameterError`` for
    values the matcher could not recover unchanged. Pass ``verify=False``
    to skip the recovery check for composite segments.
    """
    route_key = route_key or pattern.template
    parts: list[str] = []

    for seg in pattern.segments:
        if seg.kind is SegmentKind.LITERAL:
            parts.append(seg.value)
            continue

        if seg.kind.is_catch_all:
            name = seg.param_names[0]
            value = params.get(name)
            segments = format_segments(name, value) if value is not None else ()
            if not segments and seg.kind is SegmentKind.CATCH_ALL:
                raise MissingParameterError(name, route_key)
            parts.extend(segments)
            continue

        values: dict[str, str] = {}
        for name in seg.param_names:
            value = params.get(name)
            if value is None:
                raise MissingParameterError(name, route_key)
            values[name] = format_value(name, value)

        text = PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], seg.value)
        if verify and len(values) > 1 and seg.capture(text) != values:
            name = seg.param_names[0]
            raise InvalidParameterError(
                name, values[name], f"segment {text!r} would not split back into {seg.value!r}"
            )
        parts.append(text)

    return "/" + "/".join(parts)


class PathnameGenerator:
    """Builds public hrefs for route keys.

    Usage::

        generator = PathnameGenerator(table, prefixes)
        generator.generate(
            "/news/[articleSlug]-[articleId]",
            "de",
            {"articleSlug": "my-post", "articleId": "42"},
        )  # "/de/neuigkeiten/my-post-42"

    Without a table (no localized pathnames) the route key is used as the
    template for every locale.
    """

    __slots__ = ("_prefixes", "_table", "_trailing_slash")

    def __init__(
        self,
        table: RouteTable | None,
        prefixes: PrefixResolver,
        trailing_slash: bool = False,
    ) -> None:
        self._table = table
        self._prefixes = prefixes
        self._trailing_slash = trailing_slash

    def template_for(self, route_key: str, locale: str) -> CompiledPattern:
        if self._table is None:
            self._prefixes.marker_for(locale)
            return compile_template(route_key)
        return self._table.template_for(route_key, locale)

    def generate(
        self,
        route_key: str,
        locale: str,
        params: Mapping[str, ParamInput | None] | None = None,
    ) -> str:
        """Return the public path of *route_key* in *locale*."""
        pattern = self.template_for(route_key, locale)
        path = substitute(pattern, params or {}, route_key)
        return self.with_prefix(path, locale)

    def with_prefix(self, path: str, locale: str) -> str:
        """Prepend *locale*'s prefix to an unprefixed path."""
        prefix = self._prefixes.prefix_for(locale)
        if prefix:
            path = prefix if path == "/" else prefix + path
        if self._trailing_slash and not path.endswith("/"):
            path += "/"
        return path
