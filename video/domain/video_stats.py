from dataclasses import dataclass


@dataclass(frozen=True)
class VideoStats:
    title: str
    view_count: int
