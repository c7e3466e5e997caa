"""
Client for the peer subjects-service.

The peer exposes `GET {SUBJECTS_SERVICE_URL}{SUBJECTS_SERVICE_PATH}` returning a
JSON array with the names of every subject. Any failure (connection, timeout,
non-2xx, payload that is not a list) becomes `UpstreamFailure`; there is no
retry and no fallback.
"""
from __future__ import annotations

from typing import Protocol

import httpx

from app.core.errors import UpstreamFailure
from app.core.logging import get_logger
from app.core.settings import Settings, settings as default_settings

UNAVAILABLE = "Subjects service is unavailable."


class SubjectsSource(Protocol):
    def get_all_subjects(self) -> list[str]: ...


class HttpSubjectsClient:
    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or default_settings
        self.base_url = settings.SUBJECTS_SERVICE_URL.rstrip("/")
        self.path = settings.SUBJECTS_SERVICE_PATH
        self.timeout = httpx.Timeout(settings.SUBJECTS_TIMEOUT_SECONDS)
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Accept": "application/json"},
            transport=self._transport,
        )

    def get_all_subjects(self) -> list[str]:
        log = get_logger().bind(peer=self.base_url, path=self.path)
        try:
            with self._client() as c:
                resp = c.get(self.path)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as exc:
            log.error("subjects.unavailable", status_code=exc.response.status_code)
            raise UpstreamFailure(UNAVAILABLE) from exc
        except httpx.HTTPError as exc:
            log.error("subjects.unavailable", error=repr(exc))
            raise UpstreamFailure(UNAVAILABLE) from exc
        except ValueError as exc:
            log.error("subjects.unavailable", error="invalid json")
            raise UpstreamFailure(UNAVAILABLE) from exc

        if not isinstance(payload, list):
            log.error("subjects.unavailable", error="payload is not a list")
            raise UpstreamFailure(UNAVAILABLE)

        log.info("subjects.fetched", count=len(payload))
        return [str(s) for s in payload]
