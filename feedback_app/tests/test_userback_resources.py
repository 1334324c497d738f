"""Tests for the per-endpoint UserbackClient methods."""

import httpx
import pytest

ROUTES = [
    ("list_feedbacks", (), "GET", "/feedback"),
    ("get_feedback", (12,), "GET", "/feedback/12"),
    ("update_feedback", (12, {"title": "x"}), "PATCH", "/feedback/12"),
    ("delete_feedback", (12,), "DELETE", "/feedback/12"),
    ("create_screenshot", ({"feedbackId": 12},), "POST", "/feedback/screenshot"),
    ("list_feedback_comments", (), "GET", "/feedback/comment"),
    ("create_feedback_comment", ({"comment": "hi"},), "POST", "/feedback/comment"),
    ("get_feedback_comment", (3,), "GET", "/feedback/comment/3"),
    ("update_feedback_comment", (3, {"comment": "x"}), "PATCH", "/feedback/comment/3"),
    ("delete_feedback_comment", (3,), "DELETE", "/feedback/comment/3"),
    ("list_members", (), "GET", "/member"),
    ("get_member", (5,), "GET", "/member/5"),
    ("update_member", (5, {"name": "x"}), "PATCH", "/member/5"),
    ("list_projects", (), "GET", "/project"),
    ("get_project", (4455,), "GET", "/project/4455"),
    ("update_project", (4455, {"name": "x"}), "PATCH", "/project/4455"),
    ("list_session_recordings", (), "GET", "/sessionRecording"),
    ("get_session_recording", (9,), "GET", "/sessionRecording/9"),
    ("list_workflows", (), "GET", "/workflow"),
    ("create_workflow", ({"name": "triage"},), "POST", "/workflow"),
    ("update_workflow", (2, {"name": "x"}), "PATCH", "/workflow/2"),
    ("delete_workflow", (2,), "DELETE", "/workflow/2"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize(("method_name", "args", "http_method", "path"), ROUTES)
async def test_endpoint_routing(make_client, method_name, args, http_method, path):
    client, transport = make_client(lambda request: httpx.Response(200, json={"ok": True}))

    result = await getattr(client, method_name)(*args)

    request = transport.requests[0]
    assert request.method == http_method
    assert request.url.path == "/v1" + path
    assert result == {"data": {"ok": True}}


@pytest.mark.asyncio
async def test_body_is_sent_as_json(make_client):
    client, transport = make_client(lambda request: httpx.Response(201, json={"id": 1}))
    await client.update_feedback(12, {"workflowStageId": 4})
    assert transport.last_json == {"workflowStageId": 4}


@pytest.mark.asyncio
async def test_list_passes_query_params(make_client):
    client, transport = make_client(lambda request: httpx.Response(200, json=[]))
    await client.list_feedbacks({"page": 2, "limit": 25})
    params = transport.requests[0].url.params
    assert params["page"] == "2"
    assert params["limit"] == "25"


@pytest.mark.asyncio
async def test_path_ids_are_quoted(make_client):
    client, transport = make_client(lambda request: httpx.Response(200, json={}))
    await client.get_member("a/b c")
    assert transport.requests[0].url.raw_path == b"/v1/member/a%2Fb%20c"


@pytest.mark.asyncio
async def test_empty_delete_response_has_null_data(make_client):
    client, _ = make_client(lambda request: httpx.Response(202))
    assert await client.delete_workflow(2) == {"data": None}
