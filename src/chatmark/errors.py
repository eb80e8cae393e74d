"""Exception classes for chatmark.

Parsing itself never raises: malformed input degrades to a weaker block
or to plain text. These exceptions cover the layers around the parser.
"""

from __future__ import annotations


class ChatmarkError(Exception):
    """Base exception for all chatmark errors."""

    pass


class RenderError(ChatmarkError):
    """Error during rendering.

    Raised when a renderer is handed a node it does not know how to draw.
    """

    def __init__(self, node: object, renderer: str = "") -> None:
        """Initialize render error.

        Args:
            node: The offending node
            renderer: Name of the renderer that rejected it (optional)
        """
        self.node = node
        self.renderer = renderer
        prefix = f"{renderer}: " if renderer else ""
        super().__init__(f"{prefix}cannot render node of type {type(node).__name__}")


class SerializationError(ChatmarkError, ValueError):
    """Error while rebuilding nodes from serialized data.

    Also a ValueError, so callers validating untrusted payloads can catch
    either.
    """

    pass
