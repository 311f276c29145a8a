import logging

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from video.application.usecase.video_history_usecase import VideoHistoryUseCase
from video.domain.exceptions import VideoStatsError

logger = logging.getLogger(__name__)

video_router = APIRouter(tags=["video"])


def get_video_history_usecase(request: Request) -> VideoHistoryUseCase:
    return request.app.state.container.video_history_usecase


@video_router.get("/{title:path}")
def get_video_history(
    title: str,
    usecase: VideoHistoryUseCase = Depends(get_video_history_usecase),
):
    """
    제목으로 영상을 찾아 최근 1년간의 조회수 추이를 돌려준다.
    최초 조회된 영상은 현재 조회수를 시드 샘플로 저장한다.
    """
    logger.info("video history requested | title=%s", title)
    try:
        history = usecase.get_video_history(title)
    except VideoStatsError as exc:
        # 찾지 못함/외부 API 실패/저장소 실패 모두 500 으로 응답한다.
        logger.warning("video history failed | title=%s, error=%s", title, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("video history failed unexpectedly | title=%s", title)
        return JSONResponse(status_code=500, content={"error": str(exc)})
    # datetime 이 JSON 직렬화 오류를 내지 않도록 변환
    return JSONResponse(jsonable_encoder(history.to_response()))
