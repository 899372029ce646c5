"""localeroute — locale-aware pathname resolution and href generation.

Maps locale-independent route keys to the localized, locale-prefixed
URLs users navigate, and back.

Basic usage::

    from localeroute import create_navigation

    nav = create_navigation(
        locales=("en", "de", "ja"),
        default_locale="en",
        locale_prefix="as-needed",
        pathnames={
            "/": "/",
            "/about": {"en": "/about", "de": "/ueber-uns", "ja": "/約"},
            "/news/[articleSlug]-[articleId]": {
                "en": "/news/[articleSlug]-[articleId]",
                "de": "/neuigkeiten/[articleSlug]-[articleId]",
                "ja": "/ニュース/[articleSlug]-[articleId]",
            },
        },
    )

    nav.pathname("/de/neuigkeiten/my-post-42", "de")  # "/news/my-post-42"
    nav.build_href("/about", "de")                    # "/de/ueber-uns"

Declaration order of ``pathnames`` matters: when two templates of one
locale match the same path, the route declared first wins.
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "InvalidParameterError",
    "LocalePrefix",
    "LocaleRouteError",
    "MissingParameterError",
    "Navigation",
    "PrefixMismatchError",
    "PrefixMode",
    "ResolvedLocation",
    "RoutingConfig",
    "UnknownRouteError",
    "create_navigation",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import localeroute`` fast while providing a clean top-level API.
    """
    if name in ("Navigation", "ResolvedLocation", "create_navigation"):
        from localeroute import navigation as _nav

        return getattr(_nav, name)

    if name in ("LocalePrefix", "PrefixMode", "RoutingConfig"):
        from localeroute import config as _config

        return getattr(_config, name)

    if name in (
        "ConfigurationError",
        "InvalidParameterError",
        "LocaleRouteError",
        "MissingParameterError",
        "PrefixMismatchError",
        "UnknownRouteError",
    ):
        from localeroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
