"""JSON feedback submission endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from feedback_app.config import get_settings
from feedback_app.models.feedback import FeedbackEnvelope, FeedbackSubmission
from feedback_app.services.feedback import build_feedback_payload, submit_feedback
from feedback_app.services.http_client import get_userback_client
from feedback_app.services.userback import RequestFailed, UserbackClient

router = APIRouter(prefix="/feedback", tags=["feedback"])
logger = logging.getLogger(__name__)


@router.post("", response_model=FeedbackEnvelope)
async def create_feedback(
    submission: FeedbackSubmission,
    client: UserbackClient = Depends(get_userback_client),
):
    """Forward a feedback submission to Userback and return its response."""
    settings = get_settings()
    payload = build_feedback_payload(
        name=submission.name,
        email=submission.email,
        title=submission.title,
        description=submission.description,
        defaults=settings.feedback_defaults(),
        page_url=submission.page_url,
    )

    try:
        result = await submit_feedback(client, payload)
    except RequestFailed as e:
        logger.error(
            "Userback submission failed (%s, status=%s): %s",
            e.kind,
            e.status_code,
            e,
        )
        raise HTTPException(status_code=502, detail=str(e))

    return FeedbackEnvelope(data=result["data"])
