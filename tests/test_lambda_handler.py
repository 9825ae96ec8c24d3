import json

from backend.fastapi_app.lambda_handler import _base_path, _dig, _with_prefix_header, handler
from backend.fastapi_app.main import app, get_session

from conftest import FakeSession, make_response


def _http_api_event(path: str, stage: str = "$default", headers=None) -> dict:
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": "",
        "headers": {"host": "booths.example.com", **(headers or {})},
        "requestContext": {
            "stage": stage,
            "domainName": "booths.example.com",
            "requestId": "req-1",
            "http": {
                "method": "GET",
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "pytest",
            },
        },
        "isBase64Encoded": False,
    }


def test_dig_returns_default_for_missing_keys():
    event = {"requestContext": {"http": {"method": "GET"}}}

    assert _dig(event, "requestContext", "http", "method") == "GET"
    assert _dig(event, "requestContext", "stage") is None
    assert _dig(event, "rawPath", "x", default="-") == "-"


def test_base_path_strips_named_stage_only():
    assert _base_path("dev") == "/dev"
    assert _base_path("$default") is None
    assert _base_path(None) is None


def test_handler_routes_to_fastapi_and_prints_diag(capsys):
    resp = handler(_http_api_event("/healthz"), None)

    assert resp["statusCode"] == 200
    assert json.loads(resp["body"]) == {"status": "ok"}

    diag = json.loads(capsys.readouterr().out.strip().splitlines()[0])
    assert diag["diag"] == "booth_board_request"
    assert diag["path"] == "/healthz"


def test_prefix_header_is_set_for_named_stage_and_client_value_dropped():
    event = _http_api_event("/dev/", stage="dev", headers={"X-Forwarded-Prefix": "/evil"})

    patched = _with_prefix_header(event, "/dev")

    assert patched["headers"]["x-forwarded-prefix"] == "/dev"
    assert "X-Forwarded-Prefix" not in patched["headers"]
    assert "x-forwarded-prefix" not in _with_prefix_header(event, None)["headers"]
    # 原本的 event 不變
    assert event["headers"]["X-Forwarded-Prefix"] == "/evil"


def test_named_stage_page_fetches_csv_under_the_stage():
    """
    stage "dev" 的頁面要讀取 /dev/booths.csv，而不是 gateway 根目錄的 /booths.csv。
    """
    session = FakeSession(make_response(200, "攤位名稱,區域\n老王雜貨,A區"))
    app.dependency_overrides[get_session] = lambda: session
    try:
        resp = handler(_http_api_event("/dev/", stage="dev"), None)
    finally:
        app.dependency_overrides.clear()

    assert resp["statusCode"] == 200
    assert "老王雜貨" in resp["body"]
    assert session.calls[0][0] == "https://booths.example.com/dev/booths.csv"
