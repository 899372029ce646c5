"""Navigation facade: read the current location and build hrefs.

``Navigation`` wires the prefix resolver, route table, matcher and
generator built from one ``RoutingConfig``. Both directions are pure
functions of their inputs and the immutable configuration, so a single
instance is safely shared across concurrent requests.

Usage::

    nav = create_navigation(
        locales=("en", "de"),
        default_locale="en",
        locale_prefix="always",
        pathnames={"/about": {"en": "/about", "de": "/ueber-uns"}},
    )
    nav.pathname("/de/ueber-uns", "de")   # "/about"
    nav.build_href("/about", "de")        # "/de/ueber-uns"
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from localeroute.config import PrefixMode, RoutingConfig
from localeroute.errors import ConfigurationError
from localeroute.routing.generator import PathnameGenerator, substitute
from localeroute.routing.matcher import PathnameMatcher
from localeroute.routing.params import ParamInput, Params, SegmentKind
from localeroute.routing.prefix import PrefixResolver
from localeroute.routing.table import RouteTable

logger = logging.getLogger("localeroute.navigation")


def _split_url(raw: str) -> tuple[str, str, str]:
    """Split a raw URL path into ``(path, query, fragment)``."""
    path, _, fragment = raw.partition("#")
    path, _, query = path.partition("?")
    return path or "/", query, fragment


def _append(href: str, query: str, fragment: str) -> str:
    if query:
        href = f"{href}?{query}"
    if fragment:
        href = f"{href}#{fragment}"
    return href


@dataclass(frozen=True, slots=True)
class ResolvedLocation:
    """The canonical view of an observed path.

    ``pathname`` is the route key with the captured values filled in, or
    the unprefixed path itself when no declared route matched
    (``route_key`` is then None).
    """

    locale: str
    pathname: str
    path: str
    route_key: str | None = None
    params: Params = field(default_factory=dict)

    @property
    def matched(self) -> bool:
        return self.route_key is not None


class Navigation:
    """Locale-aware pathname resolution and href generation."""

    __slots__ = ("_generator", "_matcher", "_prefixes", "_table", "config")

    def __init__(self, config: RoutingConfig) -> None:
        self.config = config
        self._prefixes = PrefixResolver(
            config.locales,
            config.default_locale or config.locales[0],
            config.locale_prefix,  # type: ignore[arg-type]
        )
        self._table = (
            RouteTable(config.pathnames, config.locales) if config.pathnames is not None else None
        )
        self._matcher = PathnameMatcher(self._table) if self._table is not None else None
        self._generator = PathnameGenerator(
            self._table, self._prefixes, trailing_slash=config.trailing_slash
        )
        self._check_unprefixed_templates()

    def _check_unprefixed_templates(self) -> None:
        """Reject default-locale templates that an explicit prefix would shadow."""
        if self._table is None or self._prefixes.mode is not PrefixMode.AS_NEEDED:
            return
        locale = self._prefixes.default_locale
        for route_key, pattern in self._table.all_patterns_for(locale):
            leading: list[str] = []
            for seg in pattern.segments:
                if seg.kind is not SegmentKind.LITERAL:
                    break
                leading.append(seg.value)
            if leading and self._prefixes.carries_marker("/" + "/".join(leading), locale):
                msg = (
                    f"Template {pattern.template!r} of route {route_key!r} starts with the "
                    f"prefix of default locale {locale!r} and could not be resolved "
                    "under 'as-needed'"
                )
                raise ConfigurationError(msg)

    @property
    def prefixes(self) -> PrefixResolver:
        return self._prefixes

    @property
    def table(self) -> RouteTable | None:
        return self._table

    def resolve_current(self, raw_path: str, locale: str) -> ResolvedLocation:
        """Resolve an observed path in *locale* to its canonical location.

        Raises ``PrefixMismatchError`` when the prefix policy requires a
        prefix *raw_path* does not carry.
        """
        path, _, _ = _split_url(raw_path)
        stripped = self._prefixes.strip(path, locale)

        if self._matcher is not None and self._table is not None:
            match = self._matcher.match(stripped, locale)
            if match is not None:
                canonical = self._table.canonical(match.route_key)
                pathname = substitute(canonical, match.params, match.route_key, verify=False)
                return ResolvedLocation(
                    locale=locale,
                    pathname=pathname,
                    path=stripped,
                    route_key=match.route_key,
                    params=match.params,
                )
            logger.debug("No declared route matches %r for locale %s", stripped, locale)

        return ResolvedLocation(locale=locale, pathname=stripped, path=stripped)

    def pathname(self, raw_path: str, locale: str) -> str:
        """The canonical pathname of *raw_path*, without locale prefix."""
        return self.resolve_current(raw_path, locale).pathname

    def build_href(
        self,
        route_key: str,
        locale: str,
        params: Mapping[str, ParamInput | None] | None = None,
        *,
        query: Mapping[str, Any] | None = None,
    ) -> str:
        """Public href for *route_key* in *locale*.

        Raises ``MissingParameterError`` if a required placeholder has no
        value in *params*.
        """
        href = self._generator.generate(route_key, locale, params)
        if query:
            href = f"{href}?{urlencode(query, doseq=True)}"
        return href

    def switch_locale(self, raw_path: str, locale: str, target_locale: str) -> str:
        """The href of the current location in *target_locale*.

        Query string and fragment are carried over. Paths that match no
        declared route keep their unprefixed path.
        """
        path, query, fragment = _split_url(raw_path)
        current = self.resolve_current(path, locale)
        if current.route_key is not None:
            href = self._generator.generate(current.route_key, target_locale, current.params)
        else:
            href = self._generator.with_prefix(current.path, target_locale)
        return _append(href, query, fragment)

    def locale_for_path(self, raw_path: str) -> str | None:
        """The locale whose prefix starts *raw_path*, if any."""
        path, _, _ = _split_url(raw_path)
        return self._prefixes.locale_for_path(path)


def create_navigation(config: RoutingConfig | None = None, /, **options: Any) -> Navigation:
    """Build a ``Navigation`` from a config or from ``RoutingConfig`` fields.

    ::

        create_navigation(RoutingConfig(locales=("en", "de")))
        create_navigation(locales=("en", "de"), locale_prefix="as-needed")
    """
    if config is None:
        config = RoutingConfig(**options)
    elif options:
        msg = "Pass either a RoutingConfig or keyword options, not both."
        raise TypeError(msg)
    return Navigation(config)
