import httpx
import pytest

from app.core.errors import UpstreamFailure
from app.core.settings import Settings
from app.integrations.subjects_client import HttpSubjectsClient


def _settings(**overrides):
    values = {
        "SUBJECTS_SERVICE_URL": "http://subjects.test/",
        "SUBJECTS_SERVICE_PATH": "/subjects",
        "SUBJECTS_TIMEOUT_SECONDS": 2.5,
    }
    values.update(overrides)
    return Settings(**values)


def _client(handler, **overrides):
    return HttpSubjectsClient(_settings(**overrides), transport=httpx.MockTransport(handler))


def test_get_all_subjects():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=["Math", "Physics"])

    assert _client(handler).get_all_subjects() == ["Math", "Physics"]
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "http://subjects.test/subjects"


def test_timeout_comes_from_settings():
    client = HttpSubjectsClient(_settings(SUBJECTS_TIMEOUT_SECONDS=1.5))

    assert client.timeout.read == 1.5
    assert client.timeout.connect == 1.5


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="boom"),
        httpx.Response(404),
        httpx.Response(200, json={"subjects": ["Math"]}),
        httpx.Response(200, text="not json"),
    ],
)
def test_bad_answers_raise_upstream_failure(response):
    client = _client(lambda request: response)

    with pytest.raises(UpstreamFailure) as exc:
        client.get_all_subjects()

    assert exc.value.status_code == 503


def test_connection_error_raises_upstream_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamFailure):
        _client(handler).get_all_subjects()


def test_timeout_raises_upstream_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(UpstreamFailure):
        _client(handler).get_all_subjects()
