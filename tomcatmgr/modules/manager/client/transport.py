"""Single request/response exchange with the Tomcat manager."""

from __future__ import annotations

import logging
from typing import BinaryIO, Dict, Iterator, Optional

import httpx

from tomcatmgr.modules.manager.domain import (
    AUTHENTICATION_FAILED_MESSAGE,
    AUTHORIZATION_FAILED_MESSAGE,
    DEFAULT_CHUNK_SIZE,
    MANAGER_CHARSET,
    EndpointConfig,
    FailureKind,
    ManagerError,
    ManagerResponse,
)
from tomcatmgr.modules.manager.domain.constants import OCTET_STREAM

from .auth import to_authorization
from .parser import parse_response


class ManagerTransport:
    """Runs one manager command per call over an ``httpx.Client``.

    Commands without a payload are sent as ``GET``. An archive payload is
    sent with ``PUT`` and handed to httpx as a byte iterator, so it goes out
    with chunked transfer encoding instead of being buffered in memory.
    """

    def __init__(
        self,
        endpoint: EndpointConfig,
        client: Optional[httpx.Client] = None,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        timeout: Optional[float] = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.endpoint = endpoint
        self.chunk_size = chunk_size
        self.log = logging.getLogger(self.__class__.__name__)
        self._client = client or httpx.Client(timeout=timeout, verify=True, follow_redirects=True)

    def invoke(self, path: str, data: Optional[BinaryIO] = None) -> ManagerResponse:
        self.log.debug("Invoking Tomcat manager using path [%s]", path)
        url = self.endpoint.url + path
        headers = self._build_headers(with_payload=data is not None)
        try:
            if data is None:
                request = self._client.build_request("GET", url, headers=headers)
            else:
                request = self._client.build_request(
                    "PUT",
                    url,
                    headers=headers,
                    content=self._pipe(data),
                )
            response = self._client.send(request, stream=True)
            try:
                body = self._read_body(response)
            finally:
                response.close()
        finally:
            if data is not None:
                data.close()
        return parse_response(body)

    def close(self) -> None:
        self._client.close()

    def _build_headers(self, *, with_payload: bool) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if with_payload:
            headers["Content-Type"] = OCTET_STREAM
        if self.endpoint.user_agent is not None:
            headers["User-Agent"] = self.endpoint.user_agent
        if self.endpoint.username is not None:
            headers["Authorization"] = to_authorization(
                self.endpoint.username,
                self.endpoint.password,
            )
        return headers

    def _pipe(self, data: BinaryIO) -> Iterator[bytes]:
        sent = 0
        while True:
            chunk = data.read(self.chunk_size)
            if not chunk:
                break
            sent += len(chunk)
            yield chunk
        self.log.debug("Uploaded %d bytes to Tomcat manager", sent)

    def _read_body(self, response: httpx.Response) -> str:
        if response.status_code == 401:
            raise ManagerError(FailureKind.AUTHENTICATION, AUTHENTICATION_FAILED_MESSAGE)
        if response.status_code == 403:
            raise ManagerError(FailureKind.AUTHORIZATION, AUTHORIZATION_FAILED_MESSAGE)
        response.raise_for_status()
        return response.read().decode(MANAGER_CHARSET, errors="replace")
