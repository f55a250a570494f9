"""Video generation router."""

import logging

from fastapi import APIRouter, HTTPException, status

from ....errors import MissingInputError
from ..dependencies import VideoServiceDep
from ..models.requests import GenerateVideoRequest
from ..models.responses import ErrorResponse, VideoResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["videos"])


@router.post(
    "/generate-video",
    response_model=VideoResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def generate_video(
    request: GenerateVideoRequest,
    service: VideoServiceDep,
) -> VideoResponse:
    """Generate an animated video document from a news URL or custom text."""
    try:
        video_data = await service.create_video(
            news_url=request.news_url,
            custom_text=request.custom_text,
        )
    except MissingInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Error generating video")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to generate video",
        )

    return VideoResponse(video_data=video_data)
