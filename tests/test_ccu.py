import json

import httpx
import pytest

from ccu_tools.models.settings import env
from ccu_tools.utils import ccu
from ccu_tools.utils.ccu import CcuError

SUCCESS = {
    "httpStatus": 201,
    "detail": "Request accepted.",
    "estimatedSeconds": 420,
    "purgeId": "95b5a092-043f-4af0-843f-aaf0043faaf0",
    "progressUri": "/ccu/v2/purges/95b5a092-043f-4af0-843f-aaf0043faaf0",
    "pingAfterSeconds": 420,
    "supportId": "17PY1321286429616716-211907680",
}


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), auth=("user", "secret"))


@pytest.fixture(autouse=True)
def ccu_env(monkeypatch):
    monkeypatch.setattr(env, "ccu_endpoint", "https://api.ccu.akamai.com/ccu/v2/queues/default")
    monkeypatch.setattr(env, "purge_options", {"action": "remove", "domain": "production"})


@pytest.mark.parametrize(
    "expected,body",
    [
        (7, SUCCESS),
        (7.5, {**SUCCESS, "estimatedSeconds": 450}),
        # Reserved code is accepted too
        (4, {"httpStatus": 200, "estimatedSeconds": 240}),
    ],
)
def test_process_response(expected, body):
    assert ccu.process_response(body).estimated_minutes == expected


@pytest.mark.parametrize("status", [400, 403, 415, 507])
def test_process_response_error(status):
    with pytest.raises(CcuError, match="Akamai Cache Clear error: Bad things"):
        ccu.process_response({"httpStatus": status, "detail": "Bad things"})


def test_clear_cache_empty_makes_no_request():
    def handler(request):
        raise AssertionError("no request expected")

    assert ccu.clear_cache([], client=mock_client(handler)) is None


def test_clear_cache_request():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        seen["content_type"] = request.headers["content-type"]
        return httpx.Response(201, json=SUCCESS)

    result = ccu.clear_cache(["/L/1/2/1d/a.com/x.html", "/L/1/2/1d/a.com/y.html"], client=mock_client(handler))

    assert result.estimated_minutes == 7
    assert result.purge_id == SUCCESS["purgeId"]
    assert result.progress_uri == SUCCESS["progressUri"]
    assert seen["method"] == "POST"
    assert seen["url"] == "https://api.ccu.akamai.com/ccu/v2/queues/default"
    assert seen["auth"].startswith("Basic ")
    assert seen["content_type"] == "application/json"
    assert seen["body"] == {
        "action": "remove",
        "domain": "production",
        "objects": ["/L/1/2/1d/a.com/x.html", "/L/1/2/1d/a.com/y.html"],
    }


def test_clear_cache_objects_override_options():
    def handler(request: httpx.Request):
        body = json.loads(request.content)
        assert body == {"action": "invalidate", "objects": ["a"]}
        return httpx.Response(201, json=SUCCESS)

    ccu.clear_cache(["a"], options={"action": "invalidate", "objects": ["stale"]}, client=mock_client(handler))


def test_clear_cache_body_status_decides():
    # transport status is ignored in favour of the body
    def handler(request):
        return httpx.Response(200, json={"httpStatus": 403, "detail": "Unauthorized arl"})

    with pytest.raises(CcuError, match="Unauthorized arl"):
        ccu.clear_cache(["a"], client=mock_client(handler))


def test_clear_cache_not_json():
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(CcuError, match="unexpected response"):
        ccu.clear_cache(["a"], client=mock_client(handler))


def test_purge_status():
    def handler(request: httpx.Request):
        assert str(request.url) == "https://api.ccu.akamai.com/ccu/v2/purges/abc"
        assert request.method == "GET"
        return httpx.Response(
            200,
            json={
                "httpStatus": 200,
                "purgeId": "abc",
                "purgeStatus": "Done",
                "originalEstimatedSeconds": 420,
                "completionTime": "2014-03-19T21:23:41Z",
            },
        )

    status = ccu.purge_status("/ccu/v2/purges/abc", client=mock_client(handler))
    assert status.done
    assert status.original_estimated_seconds == 420
    assert status.completion_time == "2014-03-19T21:23:41Z"


def test_purge_status_error():
    def handler(request):
        return httpx.Response(404, json={"httpStatus": 404, "detail": "Purge not found"})

    with pytest.raises(CcuError, match="Purge not found"):
        ccu.purge_status("/ccu/v2/purges/missing", client=mock_client(handler))


def test_queue_length():
    def handler(request: httpx.Request):
        assert str(request.url) == "https://api.ccu.akamai.com/ccu/v2/queues/default"
        return httpx.Response(200, json={"httpStatus": 200, "queueLength": 17, "detail": "OK"})

    assert ccu.queue_length(client=mock_client(handler)).queue_length == 17


def test_process_response_without_estimate():
    with pytest.raises(CcuError, match="without an estimated completion time"):
        ccu.process_response({"httpStatus": 201, "detail": "Request accepted."})
