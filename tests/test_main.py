"""
Tests for the server entry point.
"""

import sys

import uvicorn

from gateway.__main__ import main


class TestEntryPoint:
    """Tests for python -m gateway."""

    def test_serves_the_application(self, monkeypatch) -> None:
        """The CLI hands the app import path and bind address to uvicorn."""
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        monkeypatch.setattr(sys, "argv", ["gateway", "--host", "127.0.0.1", "--port", "8123"])

        main()

        assert calls == [
            (("gateway.main:app",), {"host": "127.0.0.1", "port": 8123, "reload": False})
        ]
