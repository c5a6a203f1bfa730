import io

import httpx
import pytest

from watson_cloud import FileObject, ServiceConfig, WatsonApiError
from watson_cloud.helper import build_file_part, get_missing_params, to_query_value
from watson_cloud.request import RequestOptions, build_request, format_url, parse_response


def test_config_requires_credentials():
    with pytest.raises(ValueError, match="Insufficient credentials"):
        ServiceConfig(username="only-user").validate()

    ServiceConfig(use_unauthenticated=True).validate()
    ServiceConfig.from_authorization_token("token").validate()
    ServiceConfig.from_credentials("user", "pass").validate()


def test_service_url_prefers_configured_url():
    assert ServiceConfig(url="https://example.com/api/").service_url("https://default") == "https://example.com/api"
    assert ServiceConfig().service_url("https://default/") == "https://default"


def test_get_missing_params_checks_mappings_and_objects():
    assert get_missing_params({"text": "x"}, ["text"]) is None
    error = get_missing_params({"text": None}, ["text", "model_id"])
    assert str(error) == "Missing required parameters: text, model_id"
    assert get_missing_params(None, ["text"]).missing == ["text"]


def test_to_query_value():
    assert to_query_value(True) == "true"
    assert to_query_value(False) == "false"
    assert to_query_value(["emotion", "social"]) == "emotion,social"
    assert to_query_value(3) == "3"


def test_build_file_part_uses_file_name():
    stream = io.BytesIO(b"data")
    stream.name = "/tmp/corpus.tmx"

    assert build_file_part(stream, "application/octet-stream", "parallel_corpus") == (
        "corpus.tmx",
        stream,
        "application/octet-stream",
    )
    assert build_file_part(FileObject(b"x", content_type="text/xml"), "text/plain", "field") == (
        "field",
        b"x",
        "text/xml",
    )


def test_format_url_encodes_path_values():
    url = format_url("https://host/api/", "/v2/models/{model_id}", {"model_id": "a b/c"})
    assert url == "https://host/api/v2/models/a%20b%2Fc"


def test_build_request_header_precedence_and_token():
    config = ServiceConfig(
        username="user",
        password="pass",
        authorization_token="token",
        headers={"Accept": "text/plain", "X-Default": "1"},
    )
    options = RequestOptions(
        method="GET",
        url="/v2/models",
        query={"source": None, "target": "es"},
        headers={"Accept": "application/json"},
    )

    with httpx.Client() as client:
        request = build_request(client, "https://host/api", options, config)

    assert str(request.url) == "https://host/api/v2/models?target=es"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["X-Default"] == "1"
    assert request.headers["Authorization"] == "Bearer token"
    assert "X-Watson-Learning-Opt-Out" not in request.headers


def test_parse_response_error_message_lookup():
    request = httpx.Request("GET", "https://host/api")
    response = httpx.Response(400, json={"error_message": "bad input"}, request=request)

    with pytest.raises(WatsonApiError) as exc:
        parse_response(response)

    assert str(exc.value) == "bad input"
    assert exc.value.status_code == 400


def test_parse_response_nested_error_and_empty_body():
    request = httpx.Request("GET", "https://host/api")

    with pytest.raises(WatsonApiError, match="quota exceeded"):
        parse_response(httpx.Response(429, json={"error": {"message": "quota exceeded"}}, request=request))

    assert parse_response(httpx.Response(204, request=request)) is None


def test_build_request_merges_headers_case_insensitively():
    config = ServiceConfig(
        authorization_token="tok",
        headers={"accept": "text/plain", "authorization": "Basic stale", "user-agent": "my-app"},
    )
    options = RequestOptions(method="GET", url="/v2/models", headers={"Accept": "application/json"})

    with httpx.Client() as client:
        request = build_request(client, "https://host/api", options, config)

    assert request.headers.get_list("Accept") == ["application/json"]
    assert request.headers.get_list("Authorization") == ["Bearer tok"]
    assert request.headers.get_list("User-Agent") == ["my-app"]


def test_build_request_multipart_drops_declared_content_type():
    config = ServiceConfig(use_unauthenticated=True, headers={"content-type": "application/json"})
    options = RequestOptions(
        method="POST",
        url="/v2/models",
        files={"forced_glossary": (b"<tmx/>", "application/octet-stream")},
        headers={"Content-Type": "multipart/form-data"},
    )

    with httpx.Client() as client:
        request = build_request(client, "https://host/api", options, config)

    content_types = request.headers.get_list("Content-Type")
    assert len(content_types) == 1
    assert content_types[0].startswith("multipart/form-data; boundary=")


def test_error_message_falls_back_to_reason_phrase():
    request = httpx.Request("GET", "https://host/api")
    response = httpx.Response(502, text="<html>bad gateway page</html>", request=request)

    with pytest.raises(WatsonApiError) as exc:
        parse_response(response)

    assert str(exc.value) == "Bad Gateway"
    assert exc.value.details == {}


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"error": "from error", "error_message": "x", "message": "y"}, "from error"),
        ({"error_message": "from error_message", "errorMessage": "x"}, "from error_message"),
        ({"errorMessage": "from errorMessage", "message": "x"}, "from errorMessage"),
        ({"message": "from message", "description": "x"}, "from message"),
        ({"description": "from description"}, "from description"),
        ({"error": "", "error_message": None, "message": "later key wins"}, "later key wins"),
        ({"code": 500}, "Internal Server Error"),
    ],
)
def test_error_message_key_order(payload, expected):
    request = httpx.Request("GET", "https://host/api")

    with pytest.raises(WatsonApiError) as exc:
        parse_response(httpx.Response(500, json=payload, request=request))

    assert str(exc.value) == expected
    assert exc.value.details == payload


def test_parse_response_returns_text_for_undecodable_json():
    request = httpx.Request("GET", "https://host/api")
    response = httpx.Response(
        200, content=b"not json{", headers={"Content-Type": "application/json"}, request=request
    )

    assert parse_response(response) == "not json{"
