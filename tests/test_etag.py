"""Camada de respostas condicionais (ETag)"""
import json

import pytest
from fastapi import Request

from app.core.etag import (
    compute_fingerprint,
    conditional_response,
    etag_response,
    is_unchanged,
    serialize_payload,
)
from app.schemas.statistics import EntityRef


def make_request(if_none_match=None):
    headers = []
    if if_none_match is not None:
        headers.append((b"if-none-match", if_none_match.encode("latin-1")))
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/ranking/1",
        "query_string": b"",
        "headers": headers,
    })


class TestFingerprint:

    def test_is_quoted_md5(self):
        etag = compute_fingerprint({"a": 1})
        assert etag.startswith('"') and etag.endswith('"')
        assert len(etag) == 34

    def test_same_payload_same_fingerprint(self):
        payload = [{"position": 1, "team": {"id": 1, "name": "São Paulo"}}]
        copy = json.loads(json.dumps(payload))
        assert compute_fingerprint(payload) == compute_fingerprint(copy)

    def test_single_field_change_changes_fingerprint(self):
        before = [{"position": 1, "points": 9}]
        after = [{"position": 1, "points": 10}]
        assert compute_fingerprint(before) != compute_fingerprint(after)

    def test_models_use_aliases(self):
        payload = [EntityRef(id=1, name="A")]
        assert serialize_payload(payload) == b'[{"id":1,"name":"A"}]'

    def test_non_ascii_kept_as_utf8(self):
        assert serialize_payload({"name": "Grêmio"}) == '{"name":"Grêmio"}'.encode("utf-8")


class TestIsUnchanged:

    def test_matches_current_payload(self):
        payload = {"total": 3}
        assert is_unchanged(compute_fingerprint(payload), payload)

    def test_stale_fingerprint(self):
        stale = compute_fingerprint({"total": 3})
        assert not is_unchanged(stale, {"total": 4})

    def test_requires_exact_quoting(self):
        payload = {"total": 3}
        unquoted = compute_fingerprint(payload).strip('"')
        assert not is_unchanged(unquoted, payload)

    def test_missing_header(self):
        assert not is_unchanged(None, {"total": 3})


class TestConditionalResponse:

    def test_full_response(self):
        payload = [{"id": 1}]
        response = conditional_response(make_request(), payload)
        assert response.status_code == 200
        assert response.body == serialize_payload(payload)
        assert response.headers["etag"] == compute_fingerprint(payload)
        assert "last-modified" in response.headers
        assert response.headers["content-type"] == "application/json"

    def test_not_modified(self):
        payload = [{"id": 1}]
        etag = compute_fingerprint(payload)
        response = conditional_response(make_request(etag), payload)
        assert response.status_code == 304
        assert response.body == b""
        assert response.headers["etag"] == etag
        assert "last-modified" in response.headers

    def test_etag_is_computed_over_sent_bytes(self):
        payload = {"b": 1, "a": [1, 2]}
        response = conditional_response(make_request(), payload)
        assert response.headers["etag"] == compute_fingerprint(json.loads(response.body))


class TestDecorator:

    def test_requires_request_parameter(self):
        with pytest.raises(TypeError):
            @etag_response
            async def endpoint(discipline_id: int):
                return []

    @pytest.mark.asyncio
    async def test_wraps_payload(self):
        @etag_response
        async def endpoint(request: Request, discipline_id: int):
            return {"discipline": discipline_id}

        response = await endpoint(request=make_request(), discipline_id=3)
        assert response.status_code == 200
        assert json.loads(response.body) == {"discipline": 3}

        etag = response.headers["etag"]
        again = await endpoint(request=make_request(etag), discipline_id=3)
        assert again.status_code == 304
