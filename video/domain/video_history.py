from dataclasses import dataclass
from typing import List

from video.domain.video_record import ViewSample


@dataclass
class VideoHistory:
    video_id: str
    title: str
    stats: List[ViewSample]

    def to_response(self) -> dict:
        return {
            "videoId": self.video_id,
            "title": self.title,
            "stats": [
                {"date": sample.sampled_at, "viewCount": sample.view_count}
                for sample in self.stats
            ],
        }
