import threading
from typing import Any, Callable, Optional

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from config.settings import YouTubeSettings
from video.application.port.video_api_port import VideoApiPort
from video.domain.exceptions import NotFoundError, UpstreamError
from video.domain.video_stats import VideoStats

# 네트워크/제공자 측 실패로 간주하는 예외들. socket.timeout 등은 OSError 의 하위 클래스입니다.
_UPSTREAM_ERRORS = (HttpError, httplib2.HttpLib2Error, OSError)


class YouTubeClient(VideoApiPort):
    def __init__(
        self,
        settings: YouTubeSettings,
        service_factory: Optional[Callable[[], Any]] = None,
    ):
        self.settings = settings
        self._service_factory = service_factory or self._build_service
        # httplib2 기반 서비스 객체는 스레드 간 공유가 안전하지 않으므로 스레드마다 따로 둡니다.
        self._local = threading.local()

    def resolve_video_id_by_title(self, title: str) -> str:
        try:
            response = (
                self._service()
                .search()
                .list(part="id", q=title, type="video", maxResults=1)
                .execute()
            )
        except _UPSTREAM_ERRORS as exc:
            raise UpstreamError(f"YouTube search failed: {exc}") from exc

        for item in response.get("items", []):
            video_id = item.get("id", {}).get("videoId")
            if video_id:
                return video_id
        raise NotFoundError(f"No video found with the provided title: {title}")

    def fetch_stats(self, video_id: str) -> VideoStats:
        try:
            response = (
                self._service()
                .videos()
                .list(
                    part="snippet,statistics",
                    id=video_id,
                    fields="items(id,snippet(title),statistics(viewCount))",
                )
                .execute()
            )
        except _UPSTREAM_ERRORS as exc:
            raise UpstreamError(f"YouTube video fetch failed: {exc}") from exc

        items = response.get("items", [])
        if not items:
            raise NotFoundError(f"No video found with the provided ID: {video_id}")
        snippet = items[0].get("snippet", {})
        stats = items[0].get("statistics", {})
        return VideoStats(
            title=snippet.get("title", ""),
            # 조회수를 비공개로 한 영상은 viewCount 가 없습니다.
            view_count=int(stats.get("viewCount", 0)),
        )

    def _service(self):
        service = getattr(self._local, "service", None)
        if service is None:
            service = self._service_factory()
            self._local.service = service
        return service

    def _build_service(self):
        return build(
            "youtube",
            "v3",
            developerKey=self.settings.api_key,
            http=httplib2.Http(timeout=self.settings.request_timeout_seconds),
            cache_discovery=False,
        )
