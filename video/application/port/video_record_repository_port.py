from abc import ABC, abstractmethod
from typing import List, Optional

from video.domain.video_record import VideoRecord, ViewSample


class VideoRecordRepositoryPort(ABC):

    @abstractmethod
    def find_by_video_id(self, video_id: str) -> Optional[VideoRecord]:
        pass

    @abstractmethod
    def find_all(self) -> List[VideoRecord]:
        pass

    @abstractmethod
    def create(self, video_id: str, title: str, initial_sample: ViewSample) -> VideoRecord:
        pass

    @abstractmethod
    def append_sample(self, record: VideoRecord, sample: ViewSample) -> None:
        pass
