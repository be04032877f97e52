"""Timeline activity model."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Activity:
    """One human-readable progress note derived from a stream event."""

    title: str
    data: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
