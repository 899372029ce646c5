"""Routing configuration.

RoutingConfig is a frozen dataclass: built once at startup, injected into
``Navigation``, never mutated. Several configurations can coexist in one
process.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from localeroute.errors import ConfigurationError

# route key -> shared template, or locale -> localized template
type Pathnames = Mapping[str, str | Mapping[str, str]]


class PrefixMode(Enum):
    """Which locales carry a prefix in their public URLs."""

    ALWAYS = "always"
    AS_NEEDED = "as-needed"
    NEVER = "never"


@dataclass(frozen=True, slots=True)
class LocalePrefix:
    """Locale prefix policy.

    ``mode`` decides which locales are prefixed. ``prefixes`` optionally
    overrides the prefix of individual locales; locales without an
    override use ``/<locale>``::

        LocalePrefix("as-needed")
        LocalePrefix("always", prefixes={"en": "/uk"})
    """

    mode: PrefixMode = PrefixMode.ALWAYS
    prefixes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        try:
            mode = PrefixMode(self.mode)
        except ValueError:
            valid = ", ".join(repr(m.value) for m in PrefixMode)
            msg = f"Unknown locale prefix mode {self.mode!r}. Expected one of {valid}."
            raise ConfigurationError(msg) from None

        for locale, prefix in self.prefixes.items():
            if not prefix or not prefix.startswith("/") or prefix == "/":
                msg = f"Prefix {prefix!r} for locale {locale!r} must start with '/' and be non-empty."
                raise ConfigurationError(msg)
            if prefix.endswith("/"):
                msg = f"Prefix {prefix!r} for locale {locale!r} must not end with '/'."
                raise ConfigurationError(msg)

        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "prefixes", MappingProxyType(dict(self.prefixes)))


@dataclass(frozen=True, slots=True)
class RoutingConfig:
    """Locale routing configuration. Immutable after creation.

    Only ``locales`` is required::

        config = RoutingConfig(
            locales=("en", "de"),
            default_locale="en",
            locale_prefix="as-needed",
            pathnames={"/about": {"en": "/about", "de": "/ueber-uns"}},
        )

    ``pathnames`` is consulted in declaration order when matching; the
    first template that matches a path wins.

    Under ``as-needed`` the default locale is unprefixed, and an explicit
    default-locale prefix on an observed path is stripped. A declared
    template for the default locale that starts with that prefix (``/en``
    or ``/en/team`` with default ``en``) could never be resolved, so
    ``Navigation`` rejects it with ``ConfigurationError``.
    """

    locales: tuple[str, ...]
    default_locale: str | None = None
    locale_prefix: LocalePrefix | PrefixMode | str = field(default_factory=LocalePrefix)

    # None = no localized pathnames, every route key is its own public path
    pathnames: Pathnames | None = None

    # Append "/" to generated non-root hrefs
    trailing_slash: bool = False

    def __post_init__(self) -> None:
        locales = tuple(self.locales)
        if not locales:
            msg = "RoutingConfig requires at least one locale."
            raise ConfigurationError(msg)
        if len(set(locales)) != len(locales):
            msg = f"Duplicate locales in {locales!r}."
            raise ConfigurationError(msg)
        for locale in locales:
            if not locale or "/" in locale:
                msg = f"Invalid locale identifier {locale!r}."
                raise ConfigurationError(msg)

        default_locale = self.default_locale if self.default_locale is not None else locales[0]
        if default_locale not in locales:
            msg = f"Default locale {default_locale!r} is not one of {locales!r}."
            raise ConfigurationError(msg)

        locale_prefix = self.locale_prefix
        if not isinstance(locale_prefix, LocalePrefix):
            locale_prefix = LocalePrefix(mode=locale_prefix)

        pathnames = self.pathnames
        if pathnames is not None:
            pathnames = MappingProxyType(
                {
                    key: value if isinstance(value, str) else MappingProxyType(dict(value))
                    for key, value in pathnames.items()
                }
            )

        object.__setattr__(self, "locales", locales)
        object.__setattr__(self, "default_locale", default_locale)
        object.__setattr__(self, "locale_prefix", locale_prefix)
        object.__setattr__(self, "pathnames", pathnames)
