# tests/test_console.py
import socket
import sys

import pytest

import digiclock.display.console as console


@pytest.fixture()
def sent(monkeypatch) -> list[str]:
    lines: list[str] = []
    monkeypatch.setattr(console, "log", lambda *args: lines.append(" ".join(map(str, args))))
    return lines


def test_log_reaches_a_listening_server(monkeypatch) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.bind(("127.0.0.1", 0))
        server.listen()
        monkeypatch.setattr(console, "PORT", server.getsockname()[1])

        console.log("tick", 1)

        conn, _ = server.accept()
        with conn:
            assert conn.recv(1024) == b"tick 1\n"


def test_log_is_silent_without_a_server(monkeypatch) -> None:
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError

    monkeypatch.setattr(console.socket, "create_connection", refuse)
    console.log("nobody is listening")


def test_writer_forwards_complete_lines(sent) -> None:
    writer = console.ConsoleWriter()
    assert writer.write("App action: stopping") == len("App action: stopping")
    assert sent == []

    writer.write(" clock.\n\nnext")
    assert sent == ["App action: stopping clock."]

    writer.flush()
    assert sent == ["App action: stopping clock.", "next"]


def test_redirect_and_restore(sent) -> None:
    original = (sys.stdout, sys.stderr)
    previous = console.redirect_stdout()
    try:
        assert previous == original
        assert isinstance(sys.stdout, console.ConsoleWriter)
        assert sys.stderr is sys.stdout
        print("hello console")
    finally:
        console.restore_stdout(previous)

    assert (sys.stdout, sys.stderr) == original
    assert sent == ["hello console"]
