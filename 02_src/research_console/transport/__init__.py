"""Transport module."""

from .base import ITransport, StreamingTransport
from .langgraph import LangGraphTransport, iter_sse

__all__ = ["ITransport", "LangGraphTransport", "StreamingTransport", "iter_sse"]
