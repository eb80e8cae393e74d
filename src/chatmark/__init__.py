"""
chatmark: structured rendering for chat assistant replies

Turns the free-form text of an assistant reply into a typed, immutable
document of tables, code blocks, lists and paragraphs with inline bold,
italic and code spans, then renders it as chat panel HTML or canonical text.
Parsing is total: any string yields a Document, never an exception.

Quick Start:
    >>> from chatmark import parse, render
    >>> doc = parse("- first\\n- second\\n\\nThen **text**")
    >>> [type(block).__name__ for block in doc.children]
    ['BulletList', 'Paragraph']
    >>> html = render(doc)

    >>> # Or use the high-level formatter
    >>> from chatmark import MessageFormatter
    >>> formatter = MessageFormatter()
    >>> html = formatter("A | B\\n--|--\\n1 | 2")

Installation:
    pip install chatmark              # Core (zero deps)
    pip install chatmark[syntax]      # + Syntax highlighting via Rosettes
"""

from collections.abc import Iterable

from chatmark.cache import DictParseCache, ParseCache, hash_content
from chatmark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from chatmark.errors import ChatmarkError, RenderError, SerializationError
from chatmark.location import SourceLocation
from chatmark.nodes import (
    Block,
    Bold,
    BulletList,
    Code,
    Document,
    InlineCode,
    Italic,
    NumberedList,
    Paragraph,
    PlainText,
    Span,
    Table,
)
from chatmark.parser import Parser, segment
from chatmark.parsing.inline import tokenize
from chatmark.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from chatmark.renderers.html import HtmlRenderer
from chatmark.renderers.protocol import ASTRenderer
from chatmark.renderers.text import TextRenderer, render_text
from chatmark.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    cache: ParseCache | None = None,
) -> Document:
    """Parse a reply into a Document.

    Args:
        source: Reply text
        source_file: Optional label carried into block locations
        cache: Optional content-addressed parse cache. Checked before
            parsing; on a miss the new Document is stored.

    Returns:
        Document root node

    Example:
        >>> parse("```\\nx = 1\\n```").children[0].content
        'x = 1'
    """
    acc = get_parse_accumulator()

    content_hash = hash_content(source, source_file) if cache is not None else ""
    if cache is not None:
        cached = cache.get(content_hash)
        if cached is not None:
            if acc is not None:
                acc.record_parse(len(source), cached, cached=True)
            return cached

    doc = segment(source, source_file=source_file)

    if cache is not None:
        cache.put(content_hash, doc)
    if acc is not None:
        acc.record_parse(len(source), doc)
    return doc


def render(doc: Document, *, highlight: bool | None = None) -> str:
    """Render a Document to chat panel HTML.

    Args:
        doc: Document to render
        highlight: Enable syntax highlighting for code blocks that name a
            language (None = use the active RenderConfig)

    Returns:
        HTML string
    """
    return HtmlRenderer(highlight=highlight).render(doc)


class MessageFormatter:
    """High-level reply formatter combining parser and HTML renderer.

    Usage:
        >>> formatter = MessageFormatter(code_label="Snippet")
        >>> html = formatter("```sql\\nSELECT 1\\n```")

        >>> # Access the document
        >>> doc = formatter.parse("1. one\\n2. two")
        >>> doc.children[0].items
        ('one', 'two')

    Thread Safety:
        Config is immutable and set via ContextVar for each render, so one
        formatter can serve several threads.

    """

    __slots__ = ("_cache", "_config")

    def __init__(
        self,
        *,
        highlight: bool = False,
        code_label: str = "Code",
        pad_table_rows: bool = False,
        cache: ParseCache | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            highlight: Enable syntax highlighting for code blocks
            code_label: Caption shown above code blocks
            pad_table_rows: Pad ragged table rows to the header width
            cache: Optional parse cache shared by every call
            config: Full RenderConfig; overrides the keyword options
        """
        self._config = config or RenderConfig(
            highlight=highlight,
            code_label=code_label,
            pad_table_rows=pad_table_rows,
        )
        self._cache = cache

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, content: str) -> str:
        """Parse and render a reply in one call."""
        return self.render(self.parse(content))

    def parse(self, content: str, *, source_file: str | None = None) -> Document:
        return parse(content, source_file=source_file, cache=self._cache)

    def parse_many(
        self, contents: Iterable[str], *, source_file: str | None = None
    ) -> list[Document]:
        """Parse a batch of replies, e.g. a whole transcript.

        Duplicate replies within the batch hit the cache when one is set.
        """
        return [self.parse(content, source_file=source_file) for content in contents]

    def render(self, doc: Document) -> str:
        with render_config_context(self._config):
            return HtmlRenderer().render(doc)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "segment",
    "tokenize",
    "render",
    "render_text",
    "MessageFormatter",
    # Blocks
    "Block",
    "Document",
    "Table",
    "Code",
    "BulletList",
    "NumberedList",
    "Paragraph",
    # Spans
    "Span",
    "PlainText",
    "Bold",
    "Italic",
    "InlineCode",
    # Parser
    "Parser",
    # Renderers
    "ASTRenderer",
    "HtmlRenderer",
    "TextRenderer",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_content",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "ChatmarkError",
    "RenderError",
    "SerializationError",
    # Location
    "SourceLocation",
]
