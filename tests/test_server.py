"""Tests for server startup."""

import logging
import socket

import pytest
from flask import Flask

import web_server
from web_server import start_server


def test_default_port() -> None:
    """Test the listener is configured on port 3000."""
    assert web_server.PORT == 3000


def test_start_server_binds_and_logs_once(app: Flask, caplog: pytest.LogCaptureFixture) -> None:
    """Test startup binds one listening socket and emits one ready line."""
    caplog.set_level(logging.INFO)
    server = start_server(app, host="127.0.0.1", port=0)
    try:
        port = server.server_port
        assert port != 0
        assert server.socket.type == socket.SOCK_STREAM
        assert server.socket.getsockname() == ("127.0.0.1", port)

        records = [r for r in caplog.records if r.name == "web_server"]
        assert [r.getMessage() for r in records] == [f"server start http://localhost:{port}/"]
    finally:
        server.server_close()


def test_started_server_accepts_connections(app: Flask) -> None:
    """Test the bound socket is already listening before serving starts."""
    server = start_server(app, host="127.0.0.1", port=0)
    try:
        with socket.create_connection(("127.0.0.1", server.server_port), timeout=2):
            pass
    finally:
        server.server_close()


def test_startup_line_reaches_stdout(app: Flask, capsys: pytest.CaptureFixture) -> None:
    """Test the configured logging prints exactly one ready line on stdout."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers[:] = []  # basicConfig only installs its handler on a bare root logger
    server = None
    try:
        web_server.configure_logging()
        server = start_server(app, host="127.0.0.1", port=0)
        port = server.server_port
    finally:
        if server is not None:
            server.server_close()
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    lines = [line for line in capsys.readouterr().out.splitlines() if "server start" in line]
    assert len(lines) == 1
    assert lines[0].endswith(f"web_server: server start http://localhost:{port}/")
