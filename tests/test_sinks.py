"""Tests for clog.sinks — syslog handle and terminal writer."""

import io
import logging
import os
import socket
from unittest.mock import MagicMock, patch

import pytest

from clog.errors import SyslogUnavailable, UnknownLevel
from clog.levels import Level
from clog.sinks import (
    SyslogSink, open_syslog, resolve_address, write_line,
)

needs_unix_sockets = pytest.mark.skipif(
    not hasattr(socket, "AF_UNIX"), reason="requires unix domain sockets")


@pytest.fixture
def syslog_server(tmp_path):
    """A unix datagram socket standing in for /dev/log."""
    path = str(tmp_path / "log.sock")
    server = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    server.bind(path)
    server.settimeout(2)
    yield server, path
    server.close()


class TestResolveAddress:

    def test_socket_path_kept(self):
        assert resolve_address("/dev/custom") == "/dev/custom"

    def test_host_port_becomes_tuple(self):
        assert resolve_address("logs.local:1514") == ("logs.local", 1514)

    def test_bad_port(self):
        with pytest.raises(SyslogUnavailable):
            resolve_address("logs.local:abc")

    def test_finds_local_socket(self):
        with patch("clog.sinks.os.path.exists", side_effect=lambda p: p == "/var/run/syslog"):
            assert resolve_address(None) == "/var/run/syslog"

    def test_no_local_socket(self):
        with patch("clog.sinks.os.path.exists", return_value=False):
            with pytest.raises(SyslogUnavailable):
                resolve_address(None)


class TestOpenSyslog:

    def test_missing_socket_is_unavailable(self, tmp_path):
        with pytest.raises(SyslogUnavailable) as exc:
            open_syslog(Level.INFO, address=str(tmp_path / "missing.sock"))
        assert isinstance(exc.value, OSError)

    @needs_unix_sockets
    def test_path_with_no_listener_is_unavailable(self, tmp_path):
        path = tmp_path / "stale.sock"
        path.write_text("")
        with pytest.raises(SyslogUnavailable):
            open_syslog(Level.INFO, address=str(path))

    def test_unknown_facility(self, tmp_path):
        with pytest.raises(SyslogUnavailable):
            open_syslog(Level.INFO, address=str(tmp_path / "x.sock"), facility="nope")

    def test_unknown_level(self):
        with pytest.raises(UnknownLevel):
            open_syslog(17, address="/dev/null")

    @needs_unix_sockets
    def test_delivers_at_pinned_priority(self, syslog_server):
        server, path = syslog_server
        sink = open_syslog(Level.CRITICAL, address=path, facility="local1")
        try:
            assert sink.priority == "crit"
            sink.write("[Crit] boom")
            data = server.recv(4096).decode("utf-8")
        finally:
            sink.close()
        # local1 (17) << 3 | crit (2) = 138
        assert data.startswith("<138>")
        assert f"[{os.getpid()}]: " in data
        assert data.rstrip("\x00").endswith("[Crit] boom")

    @needs_unix_sockets
    def test_notice_priority(self, syslog_server):
        server, path = syslog_server
        sink = open_syslog(Level.NOTICE, address=path, facility="user")
        try:
            sink.write("n")
            data = server.recv(4096).decode("utf-8")
        finally:
            sink.close()
        # user (1) << 3 | notice (5) = 13
        assert data.startswith("<13>")

    @needs_unix_sockets
    def test_percent_in_message_is_literal(self, syslog_server):
        server, path = syslog_server
        sink = open_syslog(Level.INFO, address=path)
        try:
            sink.write("100% %s")
            data = server.recv(4096).decode("utf-8")
        finally:
            sink.close()
        assert "100% %s" in data

    @needs_unix_sockets
    def test_delivery_failure_is_logged_not_raised(self, tmp_path, caplog):
        path = str(tmp_path / "gone.sock")
        server = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
        server.bind(path)
        sink = open_syslog(Level.INFO, address=path)
        server.close()
        os.unlink(path)
        try:
            with caplog.at_level(logging.WARNING, logger="clog"):
                sink.write("lost")
        finally:
            sink.close()
        assert "syslog delivery failed" in caplog.text


class TestSyslogSink:

    def test_handler_exception_is_logged(self, caplog):
        handler = MagicMock()
        handler.handle.side_effect = RuntimeError("socket exploded")
        sink = SyslogSink(handler, "err")
        with caplog.at_level(logging.WARNING, logger="clog"):
            sink.write("msg")
        assert "syslog delivery failed" in caplog.text

    def test_close_closes_handler(self):
        handler = MagicMock()
        SyslogSink(handler, "info").close()
        handler.close.assert_called_once()


class TestWriteLine:

    def test_writes_line_and_newline(self):
        buf = io.StringIO()
        write_line("hello", buf)
        assert buf.getvalue() == "hello\n"

    def test_defaults_to_stdout(self, capsys):
        write_line("hello")
        assert capsys.readouterr().out == "hello\n"
