"""Feedback form controller: field state, submission, and view rendering.

One controller instance backs one form.  The lifecycle is::

    EDITING --submit--> SUBMITTING --ok--> SUCCESS (terminal)
                                   --error--> EDITING (error shown, data kept)

The submit button is disabled while a submission is in flight; that is the
only guard against a second submission and it is not atomic.
"""

import dataclasses
import html
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from feedback_app.models.feedback import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    FeedbackDefaults,
    field_constraint_error,
)
from feedback_app.services.feedback import (
    FeedbackSink,
    build_feedback_payload,
    submit_feedback,
)

logger = logging.getLogger(__name__)

FORM_FIELDS = ("name", "email", "title", "description")
FALLBACK_ERROR = "There was an error submitting your feedback. Please try again."

PageUrlProvider = Callable[[], str | None]


class ViewState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"


@dataclass(frozen=True)
class FormState:
    """Snapshot of the form.  Replaced, never mutated, on every change."""

    name: str = ""
    email: str = ""
    title: str = ""
    description: str = ""
    submitted: bool = False
    loading: bool = False
    error: str | None = None


@dataclass
class SubmitEvent:
    """Minimal stand-in for a browser submit event."""

    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class FeedbackFormController:
    """Owns a FormState and drives it through submission."""

    def __init__(
        self,
        client: FeedbackSink,
        defaults: FeedbackDefaults | None = None,
        page_url_provider: PageUrlProvider | None = None,
    ) -> None:
        self.client = client
        self.defaults = defaults or FeedbackDefaults()
        self.page_url_provider = page_url_provider
        self.state = FormState()
        self.scroll_to_top = False

    @property
    def view_state(self) -> ViewState:
        if self.state.submitted:
            return ViewState.SUCCESS
        if self.state.loading:
            return ViewState.SUBMITTING
        return ViewState.EDITING

    def _update(self, **changes) -> None:
        self.state = dataclasses.replace(self.state, **changes)

    def handle_change(self, name: str, value: str) -> None:
        """Replace one field's value, leaving everything else as is."""
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        self._update(**{name: value})

    def constraint_error(self) -> str | None:
        """First required/maxlength violation in field order, if any."""
        for field in FORM_FIELDS:
            error = field_constraint_error(field, getattr(self.state, field))
            if error:
                return error
        return None

    def _page_url(self) -> str | None:
        if self.page_url_provider is None:
            return None
        return self.page_url_provider()

    async def handle_submit(self, event: SubmitEvent | None = None) -> None:
        """Submit the form to Userback and move to the resulting view.

        Input that the browser would refuse to submit is reported as an
        error without building a payload or calling the API.
        """
        if event is not None:
            event.prevent_default()

        invalid = self.constraint_error()
        if invalid:
            self._update(error=invalid)
            return

        self._update(error=None, loading=True)

        try:
            payload = build_feedback_payload(
                name=self.state.name,
                email=self.state.email,
                title=self.state.title,
                description=self.state.description,
                defaults=self.defaults,
                page_url=self._page_url(),
            )
            await submit_feedback(self.client, payload)
        except Exception as e:
            logger.error("Error submitting feedback: %s", e)
            self._update(error=str(e) or FALLBACK_ERROR, loading=False)
            return

        self._update(submitted=True)
        self.scroll_to_top = True

    def render(self) -> str:
        """HTML for the current view."""
        if self.state.submitted:
            return render_success(scroll_to_top=self.scroll_to_top)
        return render_form(self.state)


def render_success(scroll_to_top: bool = False) -> str:
    parts = [
        '<div class="success-message">',
        '  <div class="success-icon">&#10003;</div>',
        "  <h2>Thank You!</h2>",
        "  <p>Your feedback has been submitted successfully. "
        "We appreciate your input!</p>",
        "</div>",
    ]
    if scroll_to_top:
        parts.append(
            '<script>window.scrollTo({top: 0, behavior: "smooth"});</script>'
        )
    return "\n".join(parts)


def render_form(state: FormState) -> str:
    esc = html.escape
    error_panel = ""
    if state.error:
        error_panel = (
            '  <div class="error-message">\n'
            f"    <p>{esc(state.error)}</p>\n"
            "  </div>\n"
        )
    disabled = " disabled" if state.loading else ""
    button_label = "Submitting..." if state.loading else "Submit Feedback"

    return f"""<form class="feedback-form" method="post" action="/">
  <div class="form-group">
    <label for="name">Your Name (Optional)</label>
    <input type="text" id="name" name="name" value="{esc(state.name)}"
           placeholder="Enter your name">
  </div>
  <div class="form-group">
    <label for="email">Email <span class="required">*</span></label>
    <input type="email" id="email" name="email" value="{esc(state.email)}"
           placeholder="your.email@example.com" required>
  </div>
  <div class="form-group">
    <label for="title">Title <span class="required">*</span></label>
    <input type="text" id="title" name="title" value="{esc(state.title)}"
           placeholder="Brief summary of your feedback" required
           maxlength="{TITLE_MAX_LENGTH}">
  </div>
  <div class="form-group">
    <label for="description">Description <span class="required">*</span></label>
    <textarea id="description" name="description" rows="6"
              placeholder="Tell us what you think..." required
              maxlength="{DESCRIPTION_MAX_LENGTH}">
{esc(state.description)}</textarea>
  </div>
{error_panel}  <button type="submit" class="submit-btn"{disabled}>
    <span>{button_label}</span>
  </button>
</form>"""
