# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

import socket
import threading
import time

import pytest


class SlowServer:
    """
    Local TCP server that accepts connections but never completes a response.

    `drip` sends a status line one byte per `interval` seconds, which keeps every socket
    read alive; `silent` accepts and then says nothing.
    """

    def __init__(self, mode: str, interval: float = 0.05):
        self.mode = mode
        self.interval = interval
        self.connections = 0
        self._stop = threading.Event()
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen()
        self._listener.settimeout(0.05)
        self._thread = threading.Thread(target=self._serve, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._listener.getsockname()
        return f"http://{host}:{port}/mcp"

    def start(self) -> "SlowServer":
        self._thread.start()
        return self

    def stop(self) -> None:
        self._stop.set()
        self._thread.join(timeout=2)
        self._listener.close()

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                conn, _ = self._listener.accept()
            except socket.timeout:
                continue
            except OSError:
                return
            self.connections += 1
            threading.Thread(target=self._handle, args=(conn,), daemon=True).start()

    def _handle(self, conn: socket.socket) -> None:
        with conn:
            if self.mode == "silent":
                self._stop.wait(10)
                return
            for byte in b"HTTP/1.1 200 OK" + b"-" * 2000:
                if self._stop.is_set():
                    return
                try:
                    conn.sendall(bytes([byte]))
                except OSError:
                    return
                time.sleep(self.interval)


@pytest.fixture
def dripping_server():
    server = SlowServer("drip").start()
    yield server
    server.stop()


@pytest.fixture
def silent_server():
    server = SlowServer("silent").start()
    yield server
    server.stop()
