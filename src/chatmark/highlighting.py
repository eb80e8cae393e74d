"""Optional syntax highlighting for code blocks.

The HTML renderer asks this module to highlight a code block when
highlighting is enabled and the fence named a language. If no highlighter
is registered and ``chatmark[syntax]`` (Rosettes) is installed, Rosettes
is used. Otherwise ``highlight`` returns None and the renderer keeps its
own plain markup.

Usage:
    from chatmark.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f'<pre class="language-{language}"><code>{code}</code></pre>'

    set_highlighter(my_highlighter)
"""

from __future__ import annotations

from collections.abc import Callable
from types import ModuleType
from typing import Protocol

from chatmark.utils.logger import get_logger

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Contract:
        - ``highlight`` returns HTML with the code already escaped
        - ``supports_language`` never raises
        - both may be called concurrently from several render threads
    """

    def highlight(self, code: str, language: str) -> str: ...

    def supports_language(self, language: str) -> bool: ...


SimpleHighlighter = Callable[[str, str], str]

_highlighter: Highlighter | SimpleHighlighter | None = None
_tried_rosettes: bool = False


class RosettesHighlighter:
    """Highlighter backed by the Rosettes package."""

    def __init__(self, module: ModuleType) -> None:
        self._rosettes = module

    def highlight(self, code: str, language: str) -> str:
        result: str = self._rosettes.highlight(code, language=language)
        return result

    def supports_language(self, language: str) -> bool:
        try:
            return bool(self._rosettes.supports_language(language))
        except Exception:
            return False


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Register a highlighter; pass None to clear it."""
    global _highlighter
    _highlighter = highlighter


def _load_rosettes() -> None:
    """Register Rosettes once, if it is installed."""
    global _highlighter, _tried_rosettes
    if _tried_rosettes:
        return
    _tried_rosettes = True
    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        logger.debug("Rosettes not installed; code blocks render without highlighting")
        return
    _highlighter = RosettesHighlighter(rosettes)


def get_highlighter() -> Highlighter | SimpleHighlighter | None:
    """Return the registered highlighter, loading Rosettes on first use."""
    if _highlighter is None:
        _load_rosettes()
    return _highlighter


def has_highlighter() -> bool:
    return get_highlighter() is not None


def highlight(code: str, language: str) -> str | None:
    """Highlight code with the registered highlighter.

    Args:
        code: Raw code block content
        language: Language named after the opening fence

    Returns:
        Highlighted HTML, or None when no highlighter is available or the
        highlighter does not support the language
    """
    highlighter = get_highlighter()
    if highlighter is None:
        return None
    if hasattr(highlighter, "highlight"):
        if not highlighter.supports_language(language):
            return None
        return highlighter.highlight(code, language)
    return highlighter(code, language)
