"""Plain-text filters applied to Javadoc bodies before they are emitted."""

import html
import re
from collections.abc import Callable
from html.parser import HTMLParser

TextFilter = Callable[[str], str]

# {@code x}, {@link Foo#bar label}, {@literal <T>} ...
INLINE_TAG_RE = re.compile(r"\{@(\w+)\s*([^{}]*)\}")

# Elements that start a new line of text
BREAKING_TAGS = frozenset({"p", "br", "li", "pre", "ul", "ol", "dl", "dt", "dd", "tr"})


class _TextCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in BREAKING_TAGS:
            self.parts.append("\n")

    def handle_data(self, data: str) -> None:
        self.parts.append(data)

    def text(self) -> str:
        return "".join(self.parts)


def _inline_tag(m: re.Match) -> str:
    tag, body = m.group(1), m.group(2).strip()
    if tag in {"code", "literal"}:
        # Kept literally, so markup characters must survive the HTML pass
        return html.escape(body, quote=False)
    if tag in {"link", "linkplain"} and " " in body:
        # {@link Target label} shows the label
        return body.split(None, 1)[1]
    return body


def flatten_inline_tags(text: str) -> str:
    """Replace Javadoc inline tags with their text."""
    return INLINE_TAG_RE.sub(_inline_tag, text)


def html_to_text(doc: str) -> str:
    """Strip HTML markup and inline tags, keeping the text and line breaks."""
    collector = _TextCollector()
    collector.feed(flatten_inline_tags(doc))
    collector.close()
    return collector.text()
