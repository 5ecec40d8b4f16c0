import pytest

from conftest import LISTING
from tomcatmgr.modules.manager.client import find_status, parse_response
from tomcatmgr.modules.manager.domain import FailureKind, ManagerError, WebappStatus


def test_success_message_strips_prefix():
    response = parse_response("OK - Deployed application at context path /foo\n")

    assert response.message == "Deployed application at context path /foo"
    assert response.body == "OK - Deployed application at context path /foo\n"


@pytest.mark.parametrize(
    "body",
    [
        "",
        "FAIL - Encountered exception",
        "FAIL - Application already exists at path /foo\njava.lang.IllegalStateException",
        "ok - lower case is not success",
    ],
)
def test_missing_prefix_is_protocol_failure_with_full_body(body):
    with pytest.raises(ManagerError) as excinfo:
        parse_response(body)

    assert excinfo.value.kind is FailureKind.PROTOCOL
    assert excinfo.value.message == body


def test_find_status_reads_field_after_path():
    assert find_status(LISTING, "/") is WebappStatus.RUNNING
    assert find_status(LISTING, "/bar") is WebappStatus.RUNNING


def test_find_status_first_match_wins():
    assert find_status(LISTING, "/foo") is WebappStatus.STOPPED


@pytest.mark.parametrize("path", ["/missing", "/fo", "/baz", ""])
def test_find_status_not_found(path):
    assert find_status(LISTING, path) is WebappStatus.NOT_FOUND


def test_find_status_handles_crlf_records():
    listing = "OK - Listed applications\r\n/foo:stopped:0:foo\r\n"

    assert find_status(listing, "/foo") is WebappStatus.STOPPED


def test_unknown_status_token_is_fatal():
    with pytest.raises(ValueError):
        find_status("OK - Listed\n/foo:paused:0:foo\n", "/foo")


def test_match_without_status_is_fatal():
    with pytest.raises(ValueError):
        find_status("OK - Listed\n/foo\n", "/foo")
