"""Feedback payload shaping and submission to Userback."""

import logging
from typing import Any, Protocol

from feedback_app.models.feedback import FeedbackDefaults, FeedbackPayload

logger = logging.getLogger(__name__)


class FeedbackSink(Protocol):
    """Anything that can accept a feedback payload (normally UserbackClient)."""

    async def create_feedback(
        self, payload: Any, headers: dict[str, str] | None = None
    ) -> dict[str, Any]: ...


def build_feedback_payload(
    *,
    name: str,
    email: str,
    title: str,
    description: str,
    defaults: FeedbackDefaults,
    page_url: str | None = None,
) -> FeedbackPayload:
    """Map free-form form input onto the fixed Userback payload shape.

    Empty email/title fall back to the configured defaults, the description
    is passed through untouched, and ``name``/``pageUrl`` are only included
    when they have a value.
    """
    return FeedbackPayload(
        project_id=defaults.project_id,
        email=email or defaults.anonymous_email,
        feedback_type=defaults.feedback_type,
        title=title or defaults.default_title,
        description=description,
        notify=True,
        name=name or None,
        page_url=page_url or None,
    )


async def submit_feedback(
    client: FeedbackSink, payload: FeedbackPayload
) -> dict[str, Any]:
    """Send *payload* and return the ``{"data": ...}`` envelope.

    Errors from the client propagate unchanged.
    """
    logger.info(
        "Submitting feedback to Userback: project=%d type=%s title=%r",
        payload.project_id,
        payload.feedback_type,
        payload.title[:50],
    )
    result = await client.create_feedback(payload.to_api())
    logger.info("Feedback submitted successfully: %s", result.get("data"))
    return result
