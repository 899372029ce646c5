"""Template compilation: route template strings into ordered segment patterns."""

import re
from dataclasses import dataclass

from localeroute.errors import ConfigurationError
from localeroute.routing.params import DYNAMIC_PATTERN, NAME_PATTERN, SegmentKind

PLACEHOLDER_RE = re.compile(rf"\[({NAME_PATTERN})\]")
_CATCH_ALL_RE = re.compile(rf"\[\.\.\.({NAME_PATTERN})\]")
_OPTIONAL_CATCH_ALL_RE = re.compile(rf"\[\[\.\.\.({NAME_PATTERN})\]\]")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A compiled segment of a route template.

    Literal:    ``about``                      (kind=LITERAL)
    Dynamic:    ``[articleSlug]-[articleId]``  (kind=DYNAMIC, two names)
    Catch-all:  ``[...parts]``                 (kind=CATCH_ALL)
    Optional:   ``[[...parts]]``               (kind=OPTIONAL_CATCH_ALL)
    """

    value: str
    kind: SegmentKind = SegmentKind.LITERAL
    param_names: tuple[str, ...] = ()
    regex: re.Pattern[str] | None = None

    def capture(self, part: str) -> dict[str, str] | None:
        """Match one observed path segment, returning its captures or None."""
        if self.kind is SegmentKind.LITERAL:
            return {} if part == self.value else None
        if self.regex is None:
            return None
        m = self.regex.fullmatch(part)
        if m is None:
            return None
        return dict(zip(self.param_names, m.groups(), strict=True))


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """An ordered, immutable list of segments compiled from a template."""

    template: str
    segments: tuple[PathSegment, ...]

    @property
    def signature(self) -> tuple[tuple[SegmentKind, str], ...]:
        """Ordered placeholder kinds and names; literal text is ignored."""
        return tuple(
            (seg.kind, name) for seg in self.segments for name in seg.param_names
        )

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(name for seg in self.segments for name in seg.param_names)

    @property
    def catch_all(self) -> PathSegment | None:
        """The trailing catch-all segment, if the template ends with one."""
        if self.segments and self.segments[-1].kind.is_catch_all:
            return self.segments[-1]
        return None

    @property
    def is_static(self) -> bool:
        return all(seg.kind is SegmentKind.LITERAL for seg in self.segments)


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty segments.

    ``"/a//b/"`` -> ``["a", "b"]``, ``"/"`` -> ``[]``
    """
    return [part for part in path.strip("/").split("/") if part]


def _compile_segment(part: str, template: str) -> PathSegment:
    m = _OPTIONAL_CATCH_ALL_RE.fullmatch(part)
    if m:
        return PathSegment(value=part, kind=SegmentKind.OPTIONAL_CATCH_ALL, param_names=(m.group(1),))

    m = _CATCH_ALL_RE.fullmatch(part)
    if m:
        return PathSegment(value=part, kind=SegmentKind.CATCH_ALL, param_names=(m.group(1),))

    if "[..." in part or "[[" in part:
        msg = f"Catch-all placeholder must fill a whole segment: {part!r} in {template!r}"
        raise ConfigurationError(msg)

    # Even indexes are literal text, odd indexes placeholder names
    pieces = PLACEHOLDER_RE.split(part)
    literals = pieces[0::2]
    names = tuple(pieces[1::2])

    if any("[" in text or "]" in text for text in literals):
        msg = f"Malformed placeholder in segment {part!r} of {template!r}"
        raise ConfigurationError(msg)

    if not names:
        return PathSegment(value=part)

    if any(not text for text in literals[1:-1]):
        msg = (
            f"Adjacent placeholders in segment {part!r} of {template!r} "
            "need literal text between them"
        )
        raise ConfigurationError(msg)

    regex_parts: list[str] = []
    for i, piece in enumerate(pieces):
        if i % 2:
            regex_parts.append(f"({DYNAMIC_PATTERN})")
        elif piece:
            regex_parts.append(re.escape(piece))

    return PathSegment(
        value=part,
        kind=SegmentKind.DYNAMIC,
        param_names=names,
        regex=re.compile("".join(regex_parts)),
    )


def compile_template(template: str) -> CompiledPattern:
    """Compile a route template into a ``CompiledPattern``.

    Examples::

        "/"                         -> []
        "/about"                    -> [literal "about"]
        "/news/[slug]-[id]"         -> [literal "news", dynamic (slug, id)]
        "/categories/[...parts]"    -> [literal "categories", catch-all parts]
        "/catch-all/[[...parts]]"   -> [literal "catch-all", optional catch-all parts]

    Raises ``ConfigurationError`` for malformed templates, catch-alls that
    are not the last segment, and duplicate placeholder names.
    """
    if not isinstance(template, str) or not template.startswith("/"):
        msg = f"Route template must start with '/': {template!r}"
        raise ConfigurationError(msg)

    segments = tuple(_compile_segment(part, template) for part in split_path(template))

    for seg in segments[:-1]:
        if seg.kind.is_catch_all:
            msg = f"Catch-all segment {seg.value!r} must be the last segment of {template!r}"
            raise ConfigurationError(msg)

    seen: set[str] = set()
    for seg in segments:
        for name in seg.param_names:
            if name in seen:
                msg = f"Duplicate placeholder {name!r} in {template!r}"
                raise ConfigurationError(msg)
            seen.add(name)

    return CompiledPattern(template=template, segments=segments)
