"""localeroute exception hierarchy.

Shared across the pattern compiler, route table, matcher, generator and
navigation facade so every module raises and catches the same types.
"""


class LocaleRouteError(Exception):
    """Base for all localeroute-specific errors."""


class ConfigurationError(LocaleRouteError):
    """Raised when routing configuration is invalid.

    Raised while building ``RoutingConfig`` or ``Navigation`` at startup.
    An engine that failed to build must not be used.
    """


class PrefixMismatchError(LocaleRouteError):
    """The locale prefix policy requires a prefix the path does not carry.

    Recoverable: callers may treat the raw path as unprefixed or answer
    with a not-found response. The engine only signals the condition.
    """

    def __init__(self, path: str, locale: str, expected: str) -> None:
        self.path = path
        self.locale = locale
        self.expected = expected
        super().__init__(
            f"Path {path!r} is missing the {expected!r} prefix required for locale {locale!r}"
        )


class MissingParameterError(LocaleRouteError, KeyError):
    """A required placeholder has no bound value when building an href."""

    def __init__(self, name: str, route_key: str) -> None:
        self.name = name
        self.route_key = route_key
        super().__init__(name)

    def __str__(self) -> str:
        return f"Missing parameter {self.name!r} for route {self.route_key!r}"


class InvalidParameterError(LocaleRouteError, ValueError):
    """A parameter value cannot be substituted without breaking the path."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value {value!r} for parameter {name!r}: {reason}")


class UnknownRouteError(LocaleRouteError, KeyError):
    """The route key is not declared in the pathnames table."""

    def __init__(self, route_key: str) -> None:
        self.route_key = route_key
        super().__init__(route_key)

    def __str__(self) -> str:
        return f"Unknown route key {self.route_key!r}"
