"""  local client/server console for debugging the clock while it owns the terminal """

import datetime
import socket
import sys
import threading
from typing import TextIO

HOST = "127.0.0.1"
PORT = 50505

# ──────────────────────────────
# CLIENT LOGGER
# ──────────────────────────────


def log(*args: object) -> None:
    message = " ".join(str(arg) for arg in args)
    try:
        with socket.create_connection((HOST, PORT), timeout=0.5) as sock:
            sock.sendall((message + "\n").encode("utf-8"))
    except OSError:
        pass  # no console server listening


class ConsoleWriter:
    """A write-only stream forwarding complete lines to the console server."""
    def __init__(self) -> None:
        self._pending = ""

    def write(self, text: str) -> int:
        self._pending += text
        *lines, self._pending = self._pending.split("\n")
        for line in lines:
            if line.strip():
                log(line)
        return len(text)

    def flush(self) -> None:
        if self._pending.strip():
            log(self._pending)
        self._pending = ""


def redirect_stdout() -> tuple[TextIO, TextIO]:
    """Sends print() output to the console. Returns the streams it replaced."""
    previous = (sys.stdout, sys.stderr)
    sys.stdout = sys.stderr = ConsoleWriter()
    return previous


def restore_stdout(previous: tuple[TextIO, TextIO]) -> None:
    sys.stdout.flush()
    sys.stdout, sys.stderr = previous


# ──────────────────────────────
# SERVER FUNCTION
# ──────────────────────────────

def _handle_client(conn: socket.socket) -> None:
    with conn:
        while True:
            data = conn.recv(4096)
            if not data:
                break
            text = data.decode("utf-8", errors="replace")
            now = datetime.datetime.now().strftime("%H:%M:%S")
            for line in text.splitlines():
                print(f"[{now}] {line}")


def run_server(host: str = HOST, port: int = PORT) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen()
        print(f"Console server running on {host}:{port}")
        while True:
            conn, _ = server.accept()
            threading.Thread(target=_handle_client, args=(conn,), daemon=True).start()


# ──────────────────────────────
# MAIN ENTRYPOINT
# ──────────────────────────────

if __name__ == "__main__":
    run_server()
