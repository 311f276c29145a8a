from abc import ABC, abstractmethod

from video.domain.video_stats import VideoStats


class VideoApiPort(ABC):
    @abstractmethod
    def resolve_video_id_by_title(self, title: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def fetch_stats(self, video_id: str) -> VideoStats:
        raise NotImplementedError
