"""Userback REST API client.

Usage:
    from feedback_app.services.userback import UserbackClient, UserbackConfig

    async with UserbackClient(UserbackConfig(api_key="...")) as client:
        result = await client.create_feedback(payload)
        print(result["data"])

Every call returns an envelope ``{"data": <parsed JSON body>}`` on success
and raises a ``RequestFailed`` subclass otherwise.  ``str(error)`` is always
the human-readable message meant for display; ``error.kind`` and
``error.status_code`` keep the detail for callers that want it.
"""

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.userback.io/v1"


class UserbackConfig(BaseModel):
    """Connection settings for ``UserbackClient``."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None
    timeout: float | None = None  # None = wait as long as the transport does


class RequestFailed(Exception):
    """A Userback API call did not produce a usable response."""

    kind = "unknown"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UserbackNetworkError(RequestFailed):
    """The request never got an HTTP response (DNS, refused, reset...)."""

    kind = "network"


class UserbackStatusError(RequestFailed):
    """The API answered with a non-2xx status."""

    kind = "http_status"


class UserbackDecodeError(RequestFailed):
    """A 2xx response whose body is not valid JSON."""

    kind = "decode"


def _error_message(resp: httpx.Response) -> str:
    """Pick the ``message`` field of a JSON error body, else the reason phrase."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return resp.reason_phrase or f"HTTP {resp.status_code}"


def _path(template: str, **params: str | int) -> str:
    return template.format(
        **{key: quote(str(value), safe="") for key, value in params.items()}
    )


class UserbackClient:
    """Async client for the Userback API.

    The transport is injectable so tests can pass an ``httpx.MockTransport``.
    There is no retry and no cancellation: a hung call blocks until the
    configured timeout (unset by default).
    """

    def __init__(
        self,
        config: UserbackConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or UserbackConfig()
        self._http = httpx.AsyncClient(
            timeout=self.config.timeout, transport=transport
        )

    async def __aenter__(self) -> "UserbackClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def aclose(self) -> None:
        await self._http.aclose()

    def build_headers(self, extra: dict[str, str] | None = None) -> httpx.Headers:
        """Default JSON + bearer headers, with caller headers merged on top.

        A caller header only replaces a default when it names the same key
        (case-insensitive).
        """
        headers = httpx.Headers({"Content-Type": "application/json"})
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        if extra:
            headers.update(extra)
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        body: BaseModel | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Issue one API call and return ``{"data": ...}``.

        Raises:
            UserbackNetworkError: No response was received.
            UserbackStatusError: Non-2xx response.
            UserbackDecodeError: 2xx response with a non-JSON body.
        """
        try:
            return await self._send(method, endpoint, body, params, headers)
        except RequestFailed as e:
            logger.error("Userback API Error: %r", e)
            raise

    async def _send(
        self,
        method: str,
        endpoint: str,
        body: BaseModel | dict[str, Any] | None,
        params: dict[str, Any] | None,
        headers: dict[str, str] | None,
    ) -> dict[str, Any]:
        url = f"{self.config.base_url}{endpoint}"
        if isinstance(body, BaseModel):
            body = body.model_dump(by_alias=True, exclude_none=True)
        content = json.dumps(body) if body is not None else None

        try:
            resp = await self._http.request(
                method,
                url,
                content=content,
                params=params,
                headers=self.build_headers(headers),
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Userback %s %s failed: %s", method, url, e)
            raise UserbackNetworkError(str(e) or type(e).__name__) from e

        if not resp.is_success:
            message = _error_message(resp)
            logger.error(
                "Userback API %d for %s %s: %s",
                resp.status_code,
                method,
                url,
                message,
            )
            raise UserbackStatusError(message, status_code=resp.status_code)

        if not resp.content:
            return {"data": None}
        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Userback %s %s returned invalid JSON: %s", method, url, e)
            raise UserbackDecodeError(
                str(e), status_code=resp.status_code
            ) from e
        return {"data": data}

    # ── Feedback ─────────────────────────────────────────────────

    async def create_feedback(
        self,
        payload: BaseModel | dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Create a feedback item (``POST /feedback``)."""
        return await self.request("POST", "/feedback", body=payload, headers=headers)

    async def list_feedbacks(
        self, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.request("GET", "/feedback", params=params)

    async def get_feedback(self, feedback_id: int | str) -> dict[str, Any]:
        return await self.request("GET", _path("/feedback/{id}", id=feedback_id))

    async def update_feedback(
        self, feedback_id: int | str, body: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request(
            "PATCH", _path("/feedback/{id}", id=feedback_id), body=body
        )

    async def delete_feedback(self, feedback_id: int | str) -> dict[str, Any]:
        return await self.request("DELETE", _path("/feedback/{id}", id=feedback_id))

    async def create_screenshot(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self.request("POST", "/feedback/screenshot", body=body)

    # ── Comments ─────────────────────────────────────────────────

    async def list_feedback_comments(
        self, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.request("GET", "/feedback/comment", params=params)

    async def create_feedback_comment(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self.request("POST", "/feedback/comment", body=body)

    async def get_feedback_comment(self, comment_id: int | str) -> dict[str, Any]:
        return await self.request(
            "GET", _path("/feedback/comment/{id}", id=comment_id)
        )

    async def update_feedback_comment(
        self, comment_id: int | str, body: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request(
            "PATCH", _path("/feedback/comment/{id}", id=comment_id), body=body
        )

    async def delete_feedback_comment(self, comment_id: int | str) -> dict[str, Any]:
        return await self.request(
            "DELETE", _path("/feedback/comment/{id}", id=comment_id)
        )

    # ── Members ──────────────────────────────────────────────────

    async def list_members(
        self, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.request("GET", "/member", params=params)

    async def get_member(self, member_id: int | str) -> dict[str, Any]:
        return await self.request("GET", _path("/member/{id}", id=member_id))

    async def update_member(
        self, member_id: int | str, body: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request(
            "PATCH", _path("/member/{id}", id=member_id), body=body
        )

    # ── Projects ─────────────────────────────────────────────────

    async def list_projects(
        self, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.request("GET", "/project", params=params)

    async def get_project(self, project_id: int | str) -> dict[str, Any]:
        return await self.request("GET", _path("/project/{id}", id=project_id))

    async def update_project(
        self, project_id: int | str, body: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request(
            "PATCH", _path("/project/{id}", id=project_id), body=body
        )

    # ── Session recordings ───────────────────────────────────────

    async def list_session_recordings(
        self, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.request("GET", "/sessionRecording", params=params)

    async def get_session_recording(self, recording_id: int | str) -> dict[str, Any]:
        return await self.request(
            "GET", _path("/sessionRecording/{id}", id=recording_id)
        )

    # ── Workflows ────────────────────────────────────────────────

    async def list_workflows(
        self, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.request("GET", "/workflow", params=params)

    async def create_workflow(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self.request("POST", "/workflow", body=body)

    async def update_workflow(
        self, workflow_id: int | str, body: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request(
            "PATCH", _path("/workflow/{id}", id=workflow_id), body=body
        )

    async def delete_workflow(self, workflow_id: int | str) -> dict[str, Any]:
        return await self.request("DELETE", _path("/workflow/{id}", id=workflow_id))
