"""
Summary: Parse name templates such as "{artist} - {title} ({feat})" and render TagRecords through them.
Why: Omission of absent tags is a property of the parsed group, not ad hoc string surgery.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Final, final

from trackdrop.shared.errors import ConfigError
from trackdrop.shared.tag_record import TagName, TagRecord

LOGGER = logging.getLogger(__name__)

DELIMITERS: Final[dict[str, str]] = {"(": ")", "[": "]", "<": ">"}


@dataclass(frozen=True, slots=True)
class Literal:
    """Text emitted verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class Bare:
    """A placeholder with no delimiters; absent tags render as nothing."""

    tag: TagName


@dataclass(frozen=True, slots=True)
class Delimited:
    """A placeholder wrapped by one delimiter pair.

    ``leading`` is the single whitespace character directly before ``open``,
    or an empty string. The whole group disappears when the tag is absent.
    """

    leading: str
    open: str
    tag: TagName
    close: str


Segment = Literal | Bare | Delimited


@final
@dataclass(frozen=True, slots=True)
class Template:
    """An immutable, pre-parsed name template."""

    source: str
    segments: tuple[Segment, ...]

    PLACEHOLDER_OPEN: ClassVar[str] = "{"
    PLACEHOLDER_CLOSE: ClassVar[str] = "}"

    @classmethod
    def parse(cls, source: str) -> "Template":
        """Parse ``source`` into segments.

        Raises:
            ConfigError: If a placeholder is unterminated, empty, or names an
                unknown tag, or a stray closing brace is found.
        """
        tokens = cls._tokenize(source)
        segments = cls._group(tokens, source)
        return cls(source=source, segments=tuple(segments))

    @classmethod
    def _tokenize(cls, source: str) -> list[str | TagName]:
        """Split ``source`` into literal strings and tag names."""

        tokens: list[str | TagName] = []
        literal: list[str] = []
        index = 0
        while index < len(source):
            char = source[index]
            if char == cls.PLACEHOLDER_CLOSE:
                raise ConfigError(f"Unexpected '}}' at position {index} in template {source!r}")
            if char != cls.PLACEHOLDER_OPEN:
                literal.append(char)
                index += 1
                continue

            end = source.find(cls.PLACEHOLDER_CLOSE, index + 1)
            if end == -1:
                raise ConfigError(f"Unterminated placeholder at position {index} in template {source!r}")
            name = source[index + 1 : end]
            tag = TagName.lookup(name) if name.strip() else None
            if tag is None:
                valid = ", ".join(t.value for t in TagName)
                raise ConfigError(
                    f"Unknown tag {{{name}}} in template {source!r}. Valid tags: {valid}"
                )
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(tag)
            index = end + 1

        if literal:
            tokens.append("".join(literal))
        return tokens

    @classmethod
    def _group(cls, tokens: list[str | TagName], source: str) -> list[Segment]:
        """Attach delimiters that directly wrap a placeholder to that placeholder."""

        segments: list[Segment] = []
        pending = ""
        for position, token in enumerate(tokens):
            if not isinstance(token, TagName):
                pending += token
                continue

            following = tokens[position + 1] if position + 1 < len(tokens) else None
            following_text = following if isinstance(following, str) else ""
            opener = pending[-1:] if pending[-1:] in DELIMITERS else ""
            if not opener or not following_text.startswith(DELIMITERS[opener]):
                if opener and following is not None:
                    cls._warn_shared_delimiters(pending, tokens[position + 1 :], source)
                if pending:
                    segments.append(Literal(pending))
                    pending = ""
                segments.append(Bare(token))
                continue

            prefix = pending[:-1]
            leading = ""
            if prefix[-1:].isspace():
                leading = prefix[-1]
                prefix = prefix[:-1]
            if prefix:
                segments.append(Literal(prefix))
            close = DELIMITERS[opener]
            segments.append(Delimited(leading=leading, open=opener, tag=token, close=close))
            # Consume the closing delimiter from the following literal
            tokens[position + 1] = following_text[len(close) :]
            pending = ""

        if pending:
            segments.append(Literal(pending))
        return segments

    @staticmethod
    def _warn_shared_delimiters(pending: str, rest: list[str | TagName], source: str) -> None:
        closer = DELIMITERS[pending[-1]]
        for token in rest:
            if isinstance(token, str) and closer in token:
                LOGGER.warning(
                    "Template %r wraps several tags in one %s%s pair; the delimiters are kept as literal text",
                    source,
                    pending[-1],
                    closer,
                )
                return

    @property
    def tags(self) -> frozenset[TagName]:
        """Tags referenced by this template."""

        return frozenset(
            segment.tag for segment in self.segments if isinstance(segment, (Bare, Delimited))
        )

    def render(self, record: TagRecord) -> str:
        """Render ``record``; see ``render``."""

        return render(self, record)


def render(template: Template, record: TagRecord) -> str:
    """Render ``record`` through ``template``.

    Literal text is kept, absent bare tags render as nothing, and absent
    delimited groups vanish together with their delimiters and leading
    whitespace.
    """

    parts: list[str] = []
    for segment in template.segments:
        match segment:
            case Literal(text=text):
                parts.append(text)
            case Bare(tag=tag):
                parts.append(record.value(tag) or "")
            case Delimited(leading=leading, open=open_, tag=tag, close=close):
                value = record.value(tag)
                if value is not None:
                    parts.append(f"{leading}{open_}{value}{close}")
    return "".join(parts)


__all__ = ["Bare", "Delimited", "Literal", "Segment", "Template", "render"]
