from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class ViewSample:
    """
    특정 시점에 관측한 조회수 한 건입니다.
    """
    sampled_at: datetime
    view_count: int


@dataclass
class VideoRecord:
    """
    외부 video_id 하나당 하나씩 존재하는 조회수 시계열 레코드입니다.
    samples 는 추가만 가능하며, 삽입 순서를 유지합니다.
    """
    video_id: str
    title: str
    samples: List[ViewSample] = field(default_factory=list)

    def add_sample(self, sample: ViewSample) -> None:
        self.samples.append(sample)

    def samples_since(self, since: datetime) -> List[ViewSample]:
        return [sample for sample in self.samples if sample.sampled_at >= since]
