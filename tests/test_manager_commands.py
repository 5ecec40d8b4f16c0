from urllib.parse import parse_qs, urlsplit

import pytest

from tomcatmgr.modules.manager.client import CommandBuilder, to_authorization
from tomcatmgr.modules.manager.domain import DeployRequest, FailureKind, ManagerError


def test_authorization_header_value():
    assert to_authorization("admin", "secret") == "Basic YWRtaW46c2VjcmV0"


def test_authorization_without_password():
    # base64("admin:")
    assert to_authorization("admin", None) == "Basic YWRtaW46"
    assert to_authorization("admin", "") == "Basic YWRtaW46"


def test_deploy_parameters_keep_fixed_order():
    builder = CommandBuilder("ISO-8859-1")
    request = DeployRequest(
        path="/foo",
        config="file:/etc/foo.xml",
        war_url="http://repo/foo.war",
        update=True,
        tag="v1",
    )

    command = builder.deploy(request)

    assert command == (
        "/deploy?path=%2Ffoo"
        "&config=file%3A%2Fetc%2Ffoo.xml"
        "&war=http%3A%2F%2Frepo%2Ffoo.war"
        "&update=true"
        "&tag=v1"
    )


def test_deploy_streamed_archive_has_no_war_parameter():
    import io

    builder = CommandBuilder("UTF-8")
    request = DeployRequest.for_context("/foo", "file:/etc/foo.xml", io.BytesIO(b"war"))

    command = builder.deploy(request)

    assert "config=" in command
    assert "war=" not in command
    assert "update" not in command
    assert "tag" not in command


@pytest.mark.parametrize("command", ["undeploy", "remove", "reload", "start", "stop"])
def test_single_path_commands(command):
    builder = CommandBuilder("UTF-8")

    assert getattr(builder, command)("/foo") == f"/{command}?path=%2Ffoo"


def test_list_has_no_parameters():
    assert CommandBuilder("UTF-8").list() == "/list"


@pytest.mark.parametrize("path", ["/my app", "/a&b=c", "/x+y", "/café"])
def test_reserved_characters_survive_round_trip(path):
    builder = CommandBuilder("ISO-8859-1")

    command = builder.undeploy(path)

    query = urlsplit(command).query
    assert parse_qs(query, encoding="iso-8859-1")["path"] == [path]


def test_non_ascii_uses_configured_charset():
    assert CommandBuilder("UTF-8").encode("é") == "%C3%A9"
    assert CommandBuilder("ISO-8859-1").encode("é") == "%E9"


def test_unknown_charset_is_configuration_error():
    with pytest.raises(ManagerError) as excinfo:
        CommandBuilder("no-such-charset")

    assert excinfo.value.kind is FailureKind.CONFIGURATION


def test_unencodable_value_is_configuration_error():
    builder = CommandBuilder("ISO-8859-1")

    with pytest.raises(ManagerError) as excinfo:
        builder.undeploy("/日本")

    assert excinfo.value.kind is FailureKind.CONFIGURATION


@pytest.mark.parametrize("charset", ["base64", "hex", "rot13"])
def test_non_text_codecs_are_configuration_errors(charset):
    with pytest.raises(ManagerError) as excinfo:
        CommandBuilder(charset)

    assert excinfo.value.kind is FailureKind.CONFIGURATION


def test_non_text_codec_rejected_by_endpoint_config():
    from tomcatmgr.modules.manager.domain import EndpointConfig

    with pytest.raises(ManagerError) as excinfo:
        EndpointConfig(url="http://tomcat.local/manager/text", charset="base64")

    assert excinfo.value.kind is FailureKind.CONFIGURATION
