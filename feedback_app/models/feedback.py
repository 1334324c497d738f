"""Feedback form and Userback payload models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 65535

# Same labels the form renders; used in constraint messages
FIELD_LABELS = {
    "name": "Your Name",
    "email": "Email",
    "title": "Title",
    "description": "Description",
}
REQUIRED_FIELDS = ("email", "title", "description")
MAX_LENGTHS = {"title": TITLE_MAX_LENGTH, "description": DESCRIPTION_MAX_LENGTH}


def utf16_length(value: str) -> int:
    """Length as browsers count it for ``maxlength``.

    UTF-16 code units, with each line break (CRLF, CR or LF) counted once;
    form posts send line breaks as CRLF.
    """
    normalized = value.replace("\r\n", "\n").replace("\r", "\n")
    return len(normalized.encode("utf-16-le")) // 2


def field_constraint_error(field: str, value: str) -> str | None:
    """Return a message if *value* breaks the form's required/maxlength rules."""
    label = FIELD_LABELS.get(field, field)
    if field in REQUIRED_FIELDS and not value:
        return f"{label} is required."
    limit = MAX_LENGTHS.get(field)
    if limit is not None and utf16_length(value) > limit:
        return f"{label} must be at most {limit} characters."
    return None


class FeedbackDefaults(BaseModel):
    """Deployment-supplied values used when building a payload."""

    model_config = ConfigDict(frozen=True)

    project_id: int = 4455
    feedback_type: str = "idea"
    default_title: str = "Feedback Submission"
    anonymous_email: str = "anonymous@example.com"


class FeedbackPayload(BaseModel):
    """Body of ``POST /feedback`` on the Userback API.

    Built once per submission and never mutated.  Optional fields that are
    ``None`` are left out of the wire format entirely.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    project_id: int = Field(alias="projectId")
    email: str
    feedback_type: str = Field(alias="feedbackType")
    title: str
    description: str
    notify: bool = True
    name: str | None = None
    page_url: str | None = Field(None, alias="pageUrl")

    def to_api(self) -> dict[str, Any]:
        """Serialize with the API's camelCase keys, omitting absent optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FeedbackSubmission(BaseModel):
    """JSON feedback submission accepted by ``POST /api/feedback``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    email: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    page_url: str | None = Field(None, alias="pageUrl")

    @field_validator("title", "description")
    @classmethod
    def _check_max_length(cls, value: str, info) -> str:
        error = field_constraint_error(info.field_name, value)
        if error:
            raise ValueError(error)
        return value


class FeedbackEnvelope(BaseModel):
    """Successful API result: the Userback response body under ``data``."""

    data: Any = None
