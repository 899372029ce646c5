"""Tests for localeroute.routing.prefix — locale prefix policy."""

import pytest

from localeroute.config import LocalePrefix
from localeroute.errors import ConfigurationError, PrefixMismatchError
from localeroute.routing.prefix import PrefixResolver

LOCALES = ("en", "de", "ja")


def _resolver(mode: str, prefixes: dict[str, str] | None = None) -> PrefixResolver:
    policy = LocalePrefix(mode, prefixes=prefixes or {})  # type: ignore[arg-type]
    return PrefixResolver(LOCALES, "en", policy)


class TestPrefixFor:
    def test_always(self) -> None:
        r = _resolver("always")
        assert [r.prefix_for(loc) for loc in LOCALES] == ["/en", "/de", "/ja"]

    def test_as_needed(self) -> None:
        r = _resolver("as-needed")
        assert [r.prefix_for(loc) for loc in LOCALES] == ["", "/de", "/ja"]

    def test_never(self) -> None:
        r = _resolver("never")
        assert [r.prefix_for(loc) for loc in LOCALES] == ["", "", ""]

    def test_custom_always(self) -> None:
        r = _resolver("always", {"en": "/uk"})
        assert r.prefix_for("en") == "/uk"
        assert r.prefix_for("de") == "/de"

    def test_custom_as_needed_default_stays_unprefixed(self) -> None:
        r = _resolver("as-needed", {"en": "/uk", "de": "/deutsch"})
        assert r.prefix_for("en") == ""
        assert r.prefix_for("de") == "/deutsch"

    def test_custom_never(self) -> None:
        r = _resolver("never", {"de": "/deutsch"})
        assert r.prefix_for("de") == ""

    def test_unknown_locale(self) -> None:
        with pytest.raises(ConfigurationError, match="fr"):
            _resolver("always").prefix_for("fr")

    def test_marker_ignores_mode(self) -> None:
        r = _resolver("never", {"de": "/deutsch"})
        assert r.marker_for("en") == "/en"
        assert r.marker_for("de") == "/deutsch"


class TestConstruction:
    def test_override_for_unknown_locale(self) -> None:
        with pytest.raises(ConfigurationError, match="fr"):
            _resolver("always", {"fr": "/france"})

    def test_duplicate_prefixes(self) -> None:
        with pytest.raises(ConfigurationError, match="unique"):
            _resolver("always", {"en": "/de"})


class TestStrip:
    def test_always(self) -> None:
        r = _resolver("always")
        assert r.strip("/de/about", "de") == "/about"
        assert r.strip("/en/about", "en") == "/about"

    def test_root(self) -> None:
        assert _resolver("always").strip("/de", "de") == "/"
        assert _resolver("always").strip("/de/", "de") == "/"

    def test_always_missing_prefix(self) -> None:
        with pytest.raises(PrefixMismatchError) as exc_info:
            _resolver("always").strip("/about", "de")
        assert exc_info.value.expected == "/de"
        assert exc_info.value.locale == "de"

    def test_segment_boundary(self) -> None:
        with pytest.raises(PrefixMismatchError):
            _resolver("always").strip("/design", "de")

    def test_as_needed_default_unprefixed(self) -> None:
        assert _resolver("as-needed").strip("/about", "en") == "/about"

    def test_as_needed_default_with_explicit_prefix(self) -> None:
        assert _resolver("as-needed").strip("/en/about", "en") == "/about"

    def test_as_needed_secondary_requires_prefix(self) -> None:
        r = _resolver("as-needed")
        assert r.strip("/de/about", "de") == "/about"
        with pytest.raises(PrefixMismatchError):
            r.strip("/about", "de")

    def test_never_leaves_path(self) -> None:
        r = _resolver("never")
        assert r.strip("/about", "de") == "/about"
        assert r.strip("/de/about", "de") == "/de/about"

    def test_custom_prefix(self) -> None:
        r = _resolver("always", {"en": "/uk"})
        assert r.strip("/uk/about", "en") == "/about"
        with pytest.raises(PrefixMismatchError):
            r.strip("/en/about", "en")

    def test_adds_leading_slash(self) -> None:
        assert _resolver("never").strip("about", "en") == "/about"


class TestCarriesMarker:
    def test_default_locale(self) -> None:
        assert _resolver("as-needed").default_locale == "en"

    def test_marker_at_segment_boundary(self) -> None:
        r = _resolver("as-needed")
        assert r.carries_marker("/en", "en")
        assert r.carries_marker("/en/team", "en")
        assert not r.carries_marker("/english", "en")

    def test_custom_marker(self) -> None:
        r = _resolver("as-needed", {"en": "/uk"})
        assert r.carries_marker("/uk/shop", "en")
        assert not r.carries_marker("/en/shop", "en")

    def test_never_strips_nothing(self) -> None:
        assert not _resolver("never").carries_marker("/en/team", "en")


class TestLocaleForPath:
    def test_detects_locale(self) -> None:
        r = _resolver("always")
        assert r.locale_for_path("/de/about") == "de"
        assert r.locale_for_path("/ja") == "ja"

    def test_no_locale(self) -> None:
        r = _resolver("always")
        assert r.locale_for_path("/about") is None
        assert r.locale_for_path("/details") is None

    def test_custom_prefix(self) -> None:
        r = _resolver("always", {"en": "/uk"})
        assert r.locale_for_path("/uk/about") == "en"
        assert r.locale_for_path("/en/about") is None

    def test_longest_prefix_wins(self) -> None:
        r = _resolver("always", {"en": "/uk", "de": "/uk/de"})
        assert r.locale_for_path("/uk/de/about") == "de"
        assert r.locale_for_path("/uk/about") == "en"
