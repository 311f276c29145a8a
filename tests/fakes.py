from datetime import datetime, timezone
from typing import Dict, List

from video.application.port.clock_port import ClockPort
from video.application.port.video_api_port import VideoApiPort
from video.domain.exceptions import NotFoundError, UpstreamError
from video.domain.video_stats import VideoStats

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


class FixedClock(ClockPort):
    def __init__(self, now: datetime = NOW):
        self.current = now

    def now(self) -> datetime:
        return self.current


class FakeVideoApi(VideoApiPort):
    def __init__(self):
        self.ids_by_title: Dict[str, str] = {}
        self.stats_by_id: Dict[str, VideoStats] = {}
        self.failing_ids: set[str] = set()
        self.resolve_calls: List[str] = []
        self.fetch_calls: List[str] = []

    def resolve_video_id_by_title(self, title: str) -> str:
        self.resolve_calls.append(title)
        if title not in self.ids_by_title:
            raise NotFoundError(f"No video found with the provided title: {title}")
        return self.ids_by_title[title]

    def fetch_stats(self, video_id: str) -> VideoStats:
        self.fetch_calls.append(video_id)
        if video_id in self.failing_ids:
            raise UpstreamError(f"YouTube video fetch failed: {video_id}")
        if video_id not in self.stats_by_id:
            raise NotFoundError(f"No video found with the provided ID: {video_id}")
        return self.stats_by_id[video_id]
