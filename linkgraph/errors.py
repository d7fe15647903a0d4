"""
Error kinds raised by linkgraph.

The core DirectedGraph never raises; these are for callers that populate
graphs over the network, and for the strict graph variant.
"""

from __future__ import annotations


class NetworkError(OSError):
    """
    A network operation failed.

    Without a message this means no response was received. With a message,
    the failure happened while sending it; the raw text is kept on
    `sent_message`.
    """

    def __init__(self, message: str | None = None) -> None:
        self.sent_message = message
        if message is None:
            super().__init__("Network error: no response")
        else:
            super().__init__(f"Network error while sending message: {message}")


class NodeNotFoundError(KeyError):
    """A node was required to be a graph member but is not."""

    def __init__(self, node: object) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Node {self.node!r} is not in the graph"
