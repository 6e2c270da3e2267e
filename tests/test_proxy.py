import pytest

from patternday.proxy import JPServer, Proxy


def test_proxy_server():
    p = Proxy("localhost")
    p.connect()
    assert p.echo() == "Echo form: localhost"


def test_connect_keeps_existing_server():
    p = Proxy("localhost")
    p.connect()
    first = p.server
    p.connect()
    assert p.server is first


def test_echo_before_connect_raises():
    with pytest.raises(RuntimeError):
        Proxy("localhost").echo()


def test_jp_server_echo():
    assert JPServer("10.0.0.1").echo() == "Echo form: 10.0.0.1"