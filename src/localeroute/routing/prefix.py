"""Locale prefix policy resolution.

Computes the prefix each locale's public URLs carry, strips it from
observed paths, and detects which locale a prefixed path belongs to.
"""

import logging

from localeroute.config import LocalePrefix, PrefixMode
from localeroute.errors import ConfigurationError, PrefixMismatchError

logger = logging.getLogger("localeroute.routing")


def _has_prefix(path: str, prefix: str) -> bool:
    """True if *path* starts with *prefix* at a segment boundary."""
    return path == prefix or path.startswith(prefix + "/")


class PrefixResolver:
    """Applies a ``LocalePrefix`` policy to a fixed set of locales.

    Usage::

        resolver = PrefixResolver(("en", "de"), "en", LocalePrefix("as-needed"))
        resolver.prefix_for("en")   # ""
        resolver.prefix_for("de")   # "/de"
        resolver.strip("/de/about", "de")  # "/about"
    """

    __slots__ = ("_default_locale", "_markers", "_policy")

    def __init__(self, locales: tuple[str, ...], default_locale: str, policy: LocalePrefix) -> None:
        unknown = [loc for loc in policy.prefixes if loc not in locales]
        if unknown:
            msg = f"Locale prefix overrides reference unknown locales: {', '.join(unknown)}"
            raise ConfigurationError(msg)

        self._policy = policy
        self._default_locale = default_locale
        # locale -> marker, override first, "/<locale>" otherwise
        self._markers: dict[str, str] = {
            locale: policy.prefixes.get(locale, f"/{locale}") for locale in locales
        }

        markers = list(self._markers.values())
        if len(set(markers)) != len(markers):
            msg = f"Locale prefixes must be unique, got {markers!r}"
            raise ConfigurationError(msg)

    @property
    def mode(self) -> PrefixMode:
        return self._policy.mode

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def marker_for(self, locale: str) -> str:
        """The prefix identifying *locale*, independent of the policy mode."""
        try:
            return self._markers[locale]
        except KeyError:
            msg = f"Unknown locale {locale!r}. Expected one of {tuple(self._markers)!r}."
            raise ConfigurationError(msg) from None

    def prefix_for(self, locale: str) -> str:
        """The prefix generated hrefs for *locale* start with (may be empty)."""
        marker = self.marker_for(locale)
        mode = self._policy.mode
        if mode is PrefixMode.NEVER:
            return ""
        if mode is PrefixMode.AS_NEEDED and locale == self._default_locale:
            return ""
        return marker

    def strip(self, path: str, locale: str) -> str:
        """Remove *locale*'s prefix from an observed path.

        Under ``never`` nothing is stripped. When the policy generates no
        prefix for *locale* an explicit marker is still tolerated and
        removed. Raises ``PrefixMismatchError`` when a required prefix is
        missing.
        """
        marker = self.marker_for(locale)
        if not path.startswith("/"):
            path = "/" + path
        if self._policy.mode is PrefixMode.NEVER:
            return path

        if _has_prefix(path, marker):
            return path[len(marker):] or "/"

        required = self.prefix_for(locale)
        if required:
            logger.debug("Path %r lacks prefix %r for locale %s", path, required, locale)
            raise PrefixMismatchError(path, locale, required)
        return path

    def carries_marker(self, path: str, locale: str) -> bool:
        """True if *path* starts with *locale*'s marker and would be stripped."""
        if self._policy.mode is PrefixMode.NEVER:
            return False
        return _has_prefix(path, self.marker_for(locale))

    def locale_for_path(self, path: str) -> str | None:
        """Return the locale whose prefix starts *path*, or None.

        The longest matching prefix wins, so a nested ``/uk/cy`` is not
        mistaken for ``/uk``.
        """
        if not path.startswith("/"):
            path = "/" + path
        candidates = sorted(self._markers.items(), key=lambda item: len(item[1]), reverse=True)
        for locale, marker in candidates:
            if _has_prefix(path, marker):
                return locale
        return None
