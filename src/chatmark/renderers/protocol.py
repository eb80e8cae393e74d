"""ASTRenderer protocol: the interface shared by chatmark renderers.

Both ``HtmlRenderer`` and ``TextRenderer`` conform. A chat front end that
draws replies some other way (terminal, native widgets) only needs a
``render(doc) -> str`` method to slot in.

"""

from typing import Protocol

from chatmark.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for Document renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a string."""
        ...
