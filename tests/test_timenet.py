import socket
import threading
import time

import pytest

from unixplay.timenet import GREETING, fetch, main_client, serve, time_message


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_time_message_shape():
    message = time_message(0)
    assert message.startswith(GREETING)
    assert message.endswith("\n")
    parsed = time.strptime(message[len(GREETING):-1], "%a %b %d %H:%M:%S %Y")
    assert parsed.tm_year in (1969, 1970)


def test_time_message_matches_ctime():
    now = 1_000_000_000
    assert time_message(now).rstrip("\n").endswith(time.ctime(now))


def test_serve_and_fetch_round_trip(capsys):
    port = _free_port()
    result = {}
    server = threading.Thread(
        target=lambda: result.setdefault("calls", serve("127.0.0.1", port, 1))
    )
    server.start()
    deadline = time.monotonic() + 5
    reply = None
    while reply is None:
        try:
            reply = fetch("127.0.0.1", port)
        except ConnectionRefusedError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.05)
    server.join(5)
    assert reply.decode().startswith(GREETING)
    assert reply.endswith(b"\n")
    assert result["calls"] == 1
    assert "Get a call" in capsys.readouterr().out


def test_fetch_refused():
    with pytest.raises(ConnectionRefusedError):
        fetch("127.0.0.1", _free_port())


def test_main_client_connection_failure():
    assert main_client(["127.0.0.1", str(_free_port())]) == 2


def test_main_client_needs_two_arguments():
    assert main_client(["127.0.0.1"]) == 1