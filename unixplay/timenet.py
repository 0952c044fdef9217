"""A time-of-day server and its client."""

from __future__ import annotations

import socket
import sys
import time

PORT = 13000
BUFSIZ = 8192
GREETING = "the time is .."


def time_message(now: float | None = None) -> str:
    """The text sent to each caller."""
    now = time.time() if now is None else now
    return f"{GREETING}{time.ctime(now)}\n"


def serve(host: str | None = None, port: int = PORT, max_calls: int | None = None) -> int:
    """Answer calls with the time; stop after max_calls (never if None). Returns calls answered."""
    if host is None:
        host = socket.gethostbyname(socket.gethostname())
    calls = 0
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(1)
        while max_calls is None or calls < max_calls:
            conn, _ = sock.accept()
            print("Get a call", flush=True)
            with conn:
                conn.sendall(time_message().encode())
            calls += 1
    return calls


def _read_all(sock: socket.socket) -> bytes:
    chunks = []
    while data := sock.recv(BUFSIZ):
        chunks.append(data)
    return b"".join(chunks)


def fetch(host: str, port: int = PORT) -> bytes:
    """Connect to a time server and return what it sends."""
    address = socket.gethostbyname(host)
    with socket.create_connection((address, port)) as sock:
        return _read_all(sock)


def main_server(argv: list[str] | None = None) -> int:
    try:
        serve(None, PORT)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"timeserv: {exc}", file=sys.stderr)
        return 1
    return 0


def main_client(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: timeclnt host port", file=sys.stderr)
        return 1
    host, port_text = args
    try:
        port = int(port_text)
    except ValueError:
        print(f"timeclnt: bad port {port_text}", file=sys.stderr)
        return 1
    try:
        address = socket.gethostbyname(host)
    except OSError:
        return 1
    try:
        sock = socket.create_connection((address, port))
    except OSError:
        return 2
    with sock:
        try:
            message = _read_all(sock)
        except OSError:
            return 3
    sys.stdout.buffer.write(message)
    sys.stdout.flush()
    return 0