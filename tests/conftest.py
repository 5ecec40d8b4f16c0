import io
from typing import Callable, List

import httpx
import pytest

from tomcatmgr.modules.manager.client import TomcatManager
from tomcatmgr.modules.manager.domain import EndpointConfig

MANAGER_URL = "http://tomcat.local:8080/manager/text"

LISTING = (
    "OK - Listed applications for virtual host [localhost]\n"
    "/:running:0:ROOT\n"
    "/foo:stopped:0:foo\n"
    "/bar:running:3:bar\n"
    "/foo:running:0:foo##2\n"
)


class TrackingStream(io.BytesIO):
    """BytesIO remembering the sizes it was asked to read."""

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.read_sizes: List[int] = []

    def read(self, size=-1):
        self.read_sizes.append(size)
        return super().read(size)


@pytest.fixture
def make_manager() -> Callable[..., TomcatManager]:
    def _make(handler, **overrides) -> TomcatManager:
        endpoint = EndpointConfig(url=MANAGER_URL, **overrides)
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return TomcatManager(endpoint, client=client)

    return _make
