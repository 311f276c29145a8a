class VideoStatsError(Exception):
    """조회수 추적 과정에서 발생하는 모든 오류의 기반 클래스."""


class NotFoundError(VideoStatsError):
    """제목 또는 video_id 로 외부 영상을 찾지 못한 경우."""


class UpstreamError(VideoStatsError):
    """외부 영상 API 호출이 네트워크/제공자 측 오류로 실패한 경우."""


class DuplicateKeyError(VideoStatsError):
    """이미 존재하는 video_id 로 레코드를 생성하려 한 경우."""


class StoreError(VideoStatsError):
    """저장소 읽기/쓰기에 실패한 경우."""
