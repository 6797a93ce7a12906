import io
import socket
import threading

import pytest

from strclient.cli import main, run
from strclient.options import Options
from strclient.protocol import ProtocolError


def _packet(text):
    data = text.encode()
    return len(data).to_bytes(2, "big") + data


def _recv_all(conn, n):
    data = b""
    while len(data) < n:
        chunk = conn.recv(n - len(data))
        if not chunk:
            break
        data += chunk
    return data


@pytest.fixture
def server():
    """A server that follows the full protocol; yields (port, record)."""
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    record = {}

    def serve():
        conn, _ = listener.accept()
        with conn:
            conn.sendall(_packet("BEGIN"))
            count = int.from_bytes(_recv_all(conn, 4), "big")
            record["count"] = count
            for i in range(1, count + 1):
                conn.sendall(_packet(f"s{i}"))
            record["eof"] = conn.recv(1) == b""
            conn.sendall(_packet("end"))

    thread = threading.Thread(target=serve)
    thread.start()
    yield port, record
    thread.join(timeout=5)
    listener.close()


@pytest.fixture
def early_close_server():
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]

    def serve():
        conn, _ = listener.accept()
        with conn:
            conn.sendall(_packet("BEGIN"))
            _recv_all(conn, 4)

    thread = threading.Thread(target=serve)
    thread.start()
    yield port
    thread.join(timeout=5)
    listener.close()


def test_run_full_conversation(server):
    port, record = server
    out = io.StringIO()
    result = run(Options(host="127.0.0.1", port=str(port), count=3), out)
    assert result == ["s1", "s2", "s3"]
    assert out.getvalue().splitlines() == [
        'Received "BEGIN"',
        "Sending 3",
        "Received string 1: s1",
        "Received string 2: s2",
        "Received string 3: s3",
    ]


def test_run_sends_count_and_closes_write_end(server):
    port, record = server
    result = run(Options(host="127.0.0.1", port=str(port), count=2), io.StringIO())
    assert result == ["s1", "s2"]
    assert record["count"] == 2
    assert record["eof"] is True


def test_run_zero_strings(server):
    port, record = server
    out = io.StringIO()
    assert run(Options(host="127.0.0.1", port=str(port), count=0), out) == []
    assert record["count"] == 0


def test_run_server_closes_early(early_close_server):
    with pytest.raises(ProtocolError):
        run(
            Options(host="127.0.0.1", port=str(early_close_server), count=2),
            io.StringIO(),
        )


def test_main_requires_host_and_port(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "Error: -h is a required command line argument",
        "Error: -p is a required command line argument",
    ]


def test_main_requires_port(capsys):
    assert main(["-h", "127.0.0.1"]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "Error: -p is a required command line argument",
    ]


def test_main_bad_count(capsys):
    assert main(["-h", "127.0.0.1", "-p", "1", "-n", "many"]) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_main_success(server, capsys):
    port, record = server
    assert main(["-h", "127.0.0.1", "-p", str(port), "-n", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'Received "BEGIN"'
    assert lines[-1] == "Received string 2: s2"
    assert record["count"] == 2


def test_main_connection_refused(capsys):
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["-h", "127.0.0.1", "-p", str(port)]) == 1
    assert capsys.readouterr().err != ""