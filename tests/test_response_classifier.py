from __future__ import annotations

import json

import httpx
import pytest

from github_helper.domain import messages
from github_helper.domain.entities import OperationStatus, ResultEnvelope
from github_helper.domain.records import BasicUser, Branch
from github_helper.services.response_classifier import classify, classify_response


def body(text: str):
    async def read() -> str:
        return text

    return read


async def must_not_read() -> str:
    raise AssertionError("body should not be read for this status")


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [202, 204, 301, 400, 403, 409, 422, 500, 503])
async def test_unmodelled_status_is_unknown_error(status: int):
    result = await classify(status, body('{"login": "x"}'), "nf", BasicUser)
    assert result.status is OperationStatus.UNKNOWN_ERROR
    assert result.message == messages.UNKNOWN_ERROR
    assert result.payload is None


@pytest.mark.asyncio
async def test_not_found_uses_caller_message():
    result = await classify(404, must_not_read, "not found point reached", BasicUser)
    assert result.status is OperationStatus.NOT_FOUND
    assert result.message == "not found point reached"
    assert result.payload is None


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "invalid json", '{"login": "testuser"}'])
async def test_unauthorized_ignores_body(text: str):
    result = await classify(401, body(text), "nf", BasicUser)
    assert result.status is OperationStatus.UNAUTHORIZED
    assert result.message == messages.UNAUTHORIZED
    assert result.payload is None


@pytest.mark.asyncio
async def test_created_has_no_payload_and_skips_body():
    result = await classify(201, must_not_read, "nf", BasicUser)
    assert result.status is OperationStatus.SUCCESS
    assert result.message == messages.SUCCESS
    assert result.payload is None


@pytest.mark.asyncio
async def test_ok_decodes_single_record():
    result = await classify(200, body('{"login":"testuser","url":"testUrl"}'), "nf", BasicUser)
    assert result.status is OperationStatus.SUCCESS
    assert result.message == messages.SUCCESS
    assert result.payload is not None
    assert result.payload.login == "testuser"
    assert result.payload.url == "testUrl"


@pytest.mark.asyncio
async def test_ok_decodes_sequence_of_records():
    text = json.dumps([{"login": "a", "url": "u1"}, {"login": "b", "url": "u2"}])
    result = await classify(200, body(text), "nf", list[BasicUser])
    assert result.status is OperationStatus.SUCCESS
    assert [u.login for u in result.payload] == ["a", "b"]


@pytest.mark.asyncio
async def test_invalid_json_is_malformed_with_raw_body():
    result = await classify(200, body("invalid json"), "nf", BasicUser)
    assert result.status is OperationStatus.MALFORMED_PAYLOAD
    assert result.message.endswith(": invalid json")
    assert result.message.startswith(messages.INVALID_JSON)
    assert result.payload is None


@pytest.mark.asyncio
async def test_wrong_shape_is_malformed():
    # A single object where a list was requested.
    text = '{"name": "main", "commit": {"sha": "1", "url": "u"}}'
    result = await classify(200, body(text), "nf", list[Branch])
    assert result.status is OperationStatus.MALFORMED_PAYLOAD
    assert result.message == messages.invalid_json(text)


@pytest.mark.asyncio
async def test_missing_required_field_is_malformed():
    result = await classify(200, body('{"url": "u"}'), "nf", BasicUser)
    assert result.status is OperationStatus.MALFORMED_PAYLOAD


@pytest.mark.asyncio
async def test_classify_response_reads_httpx_body():
    resp = httpx.Response(200, json=[{"login": "a"}])
    result = await classify_response(resp, list[BasicUser])
    assert result.ok
    assert result.payload[0].login == "a"


@pytest.mark.asyncio
async def test_classify_response_default_not_found_message():
    result = await classify_response(httpx.Response(404), BasicUser)
    assert result.status is OperationStatus.NOT_FOUND
    assert result.message == messages.OBJECT_NOT_FOUND


def test_envelope_projection_omits_absent_payload():
    failed = ResultEnvelope(OperationStatus.NOT_FOUND, "gone")
    assert failed.to_dict() == {"status": "NotFound", "message": "gone"}

    ok = ResultEnvelope(OperationStatus.SUCCESS, messages.SUCCESS, [1, 2])
    assert ok.to_dict()["payload"] == [1, 2]
