"""Browser-facing feedback page."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from feedback_app.config import get_settings
from feedback_app.services.http_client import get_userback_client
from feedback_app.services.userback import UserbackClient
from feedback_app.ui.feedback_form import (
    FeedbackFormController,
    FormState,
    SubmitEvent,
    render_form,
)
from feedback_app.ui.page import render_page

router = APIRouter(tags=["form"])


@router.get("/", response_class=HTMLResponse)
async def feedback_page():
    """Render the empty feedback form."""
    return HTMLResponse(render_page(render_form(FormState())))


@router.post("/", response_class=HTMLResponse)
async def submit_feedback_form(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    title: str = Form(""),
    description: str = Form(""),
    client: UserbackClient = Depends(get_userback_client),
):
    """Submit the posted form and render either the thank-you view or the
    form again with the entered data and an error message."""
    settings = get_settings()
    referer = request.headers.get("referer")
    controller = FeedbackFormController(
        client,
        settings.feedback_defaults(),
        page_url_provider=lambda: referer,
    )
    for field, value in (
        ("name", name),
        ("email", email),
        ("title", title),
        ("description", description),
    ):
        controller.handle_change(field, value)

    await controller.handle_submit(SubmitEvent())
    return HTMLResponse(render_page(controller.render()))
