"""Session module."""

from .session import ResearchSession
from .submitter import RunSubmitter, timestamp_id

__all__ = ["ResearchSession", "RunSubmitter", "timestamp_id"]
