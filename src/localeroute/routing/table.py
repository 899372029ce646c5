"""Route template table: route keys and their localized templates.

Built once from the ``pathnames`` configuration, validated eagerly and
immutable afterwards.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from localeroute.errors import ConfigurationError, UnknownRouteError
from localeroute.routing.params import SegmentKind
from localeroute.routing.pattern import CompiledPattern, PathSegment, compile_template

logger = logging.getLogger("localeroute.routing")


def _segments_overlap(a: PathSegment, b: PathSegment) -> bool:
    """Whether some single path segment could match both *a* and *b*."""
    if a.kind is SegmentKind.LITERAL and b.kind is SegmentKind.LITERAL:
        return a.value == b.value
    if a.kind is SegmentKind.LITERAL:
        return b.capture(a.value) is not None
    if b.kind is SegmentKind.LITERAL:
        return a.capture(b.value) is not None
    # Two dynamic segments: assume some value fits both
    return True


def _length_range(pattern: CompiledPattern) -> tuple[int, int | None]:
    """Min and max (None = unbounded) number of path segments matched."""
    fixed = len(pattern.segments)
    tail = pattern.catch_all
    if tail is None:
        return fixed, fixed
    if tail.kind is SegmentKind.CATCH_ALL:
        return fixed, None
    return fixed - 1, None


def patterns_overlap(a: CompiledPattern, b: CompiledPattern) -> bool:
    """Heuristic check whether one path could match both patterns."""
    a_lo, a_hi = _length_range(a)
    b_lo, b_hi = _length_range(b)
    if a_hi is not None and a_hi < b_lo:
        return False
    if b_hi is not None and b_hi < a_lo:
        return False

    a_fixed = [seg for seg in a.segments if not seg.kind.is_catch_all]
    b_fixed = [seg for seg in b.segments if not seg.kind.is_catch_all]
    return all(_segments_overlap(x, y) for x, y in zip(a_fixed, b_fixed, strict=False))


class RouteTable:
    """Compiled route templates, per locale, in declaration order.

    Usage::

        table = RouteTable(
            {
                "/about": {"en": "/about", "de": "/ueber-uns"},
                "/blog/[slug]": "/blog/[slug]",
            },
            locales=("en", "de"),
        )
        table.template_for("/about", "de").template  # "/ueber-uns"

    Declaration order is significant: ``all_patterns_for`` yields patterns
    in the order they were declared and the matcher takes the first one
    that matches.
    """

    __slots__ = ("_by_locale", "_canonical", "_locales", "_ordered")

    def __init__(
        self,
        pathnames: Mapping[str, str | Mapping[str, str]],
        locales: tuple[str, ...],
    ) -> None:
        self._locales = locales
        canonical: dict[str, CompiledPattern] = {}
        by_locale: dict[str, dict[str, CompiledPattern]] = {loc: {} for loc in locales}

        for route_key, value in pathnames.items():
            key_pattern = compile_template(route_key)
            canonical[route_key] = key_pattern

            if isinstance(value, str):
                shared = compile_template(value)
                self._check_signature(route_key, key_pattern, shared, locale=None)
                for locale in locales:
                    by_locale[locale][route_key] = shared
                continue

            missing = [loc for loc in locales if loc not in value]
            if missing:
                msg = f"Route {route_key!r} has no template for locales: {', '.join(missing)}"
                raise ConfigurationError(msg)
            unknown = [loc for loc in value if loc not in by_locale]
            if unknown:
                msg = f"Route {route_key!r} declares templates for unknown locales: {', '.join(unknown)}"
                raise ConfigurationError(msg)

            for locale in locales:
                localized = compile_template(value[locale])
                self._check_signature(route_key, key_pattern, localized, locale=locale)
                by_locale[locale][route_key] = localized

        self._canonical = MappingProxyType(canonical)
        self._by_locale = MappingProxyType(
            {loc: MappingProxyType(patterns) for loc, patterns in by_locale.items()}
        )
        self._ordered = MappingProxyType(
            {loc: tuple(patterns.items()) for loc, patterns in by_locale.items()}
        )
        self._warn_overlaps()

    @staticmethod
    def _check_signature(
        route_key: str,
        key_pattern: CompiledPattern,
        localized: CompiledPattern,
        locale: str | None,
    ) -> None:
        if localized.signature == key_pattern.signature:
            return
        where = f"locale {locale!r}" if locale else "shared template"
        msg = (
            f"Template {localized.template!r} ({where}) does not have the same "
            f"placeholders as route {route_key!r}: "
            f"{_describe(localized)} != {_describe(key_pattern)}"
        )
        raise ConfigurationError(msg)

    def _warn_overlaps(self) -> None:
        for locale, entries in self._ordered.items():
            for i, (first_key, first) in enumerate(entries):
                for later_key, later in entries[i + 1 :]:
                    if patterns_overlap(first, later):
                        logger.warning(
                            "Templates %r and %r overlap for locale %s; "
                            "route %r is declared first and wins",
                            first.template,
                            later.template,
                            locale,
                            first_key,
                        )

    @property
    def route_keys(self) -> tuple[str, ...]:
        return tuple(self._canonical)

    def __contains__(self, route_key: object) -> bool:
        return route_key in self._canonical

    def __len__(self) -> int:
        return len(self._canonical)

    def canonical(self, route_key: str) -> CompiledPattern:
        """The compiled route key itself."""
        try:
            return self._canonical[route_key]
        except KeyError:
            raise UnknownRouteError(route_key) from None

    def template_for(self, route_key: str, locale: str) -> CompiledPattern:
        """The localized pattern of *route_key* for *locale*."""
        patterns = self._patterns(locale)
        try:
            return patterns[route_key]
        except KeyError:
            raise UnknownRouteError(route_key) from None

    def all_patterns_for(self, locale: str) -> tuple[tuple[str, CompiledPattern], ...]:
        """``(route_key, pattern)`` pairs for *locale* in declaration order."""
        self._patterns(locale)
        return self._ordered[locale]

    def _patterns(self, locale: str) -> Mapping[str, CompiledPattern]:
        try:
            return self._by_locale[locale]
        except KeyError:
            msg = f"Unknown locale {locale!r}. Expected one of {self._locales!r}."
            raise ConfigurationError(msg) from None


def _describe(pattern: CompiledPattern) -> str:
    parts = [f"{kind.value} {name!r}" for kind, name in pattern.signature]
    return "[" + ", ".join(parts) + "]"
