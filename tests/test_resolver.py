"""Tests for remote-then-local content resolution."""

import asyncio
import json

import httpx
import pytest

from takeout import resolver
from takeout.errors import ExhaustedSources, NetworkFailure
from takeout.models import Origin, ResolvedContent
from takeout.sources import BaseSource, LocalSource, RemoteSource


class StaticSource(BaseSource):
    def __init__(self, name, items=None, error=None):
        self.name = name
        self.items = items
        self.error = error
        self.calls = 0

    async def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.items


def mock_remote(handler) -> RemoteSource:
    return RemoteSource("http://sheets.test/getsheetsdata", transport=httpx.MockTransport(handler))


class TestResolveSources:
    def test_remote_preferred(self):
        remote = StaticSource("remote", ["A", "B"])
        local = StaticSource("local", ["X"])
        result = asyncio.run(resolver.resolve_sources(remote, local))
        assert result.affirmations == ("A", "B")
        assert result.origin is Origin.REMOTE
        assert result.failures == []
        assert local.calls == 0

    def test_remote_scenario_header_and_blank(self, fallback_file):
        body = {"data": [["h1", "h2", "h3"], ["a", "b", "First"], ["a", "b", ""], ["a", "b", "Second"]]}
        remote = mock_remote(lambda request: httpx.Response(200, json=body))
        result = asyncio.run(resolver.resolve_sources(remote, LocalSource(fallback_file)))
        assert list(result.affirmations) == ["First", "Second"]
        assert result.origin is Origin.REMOTE

    def test_network_error_falls_back_to_local(self, fallback_file):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = asyncio.run(resolver.resolve_sources(mock_remote(handler), LocalSource(fallback_file)))
        assert list(result.affirmations) == ["X", "Y", "Z"]
        assert result.origin is Origin.LOCAL
        assert len(result.failures) == 1
        assert "NetworkFailure" in result.failures[0]

    @pytest.mark.parametrize("body", [
        {"error": "Sheet not found"},
        {"data": [["h"]]},
        {"rows": []},
    ])
    def test_any_remote_failure_falls_back(self, body, fallback_file):
        remote = mock_remote(lambda request: httpx.Response(200, json=body))
        result = asyncio.run(resolver.resolve_sources(remote, LocalSource(fallback_file)))
        assert result.origin is Origin.LOCAL

    def test_header_only_and_empty_local_is_exhausted(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"affirmations": []}))
        remote = mock_remote(lambda request: httpx.Response(200, json={"data": [["h"]]}))
        result = asyncio.run(resolver.resolve_sources(remote, LocalSource(path)))
        assert result.exhausted
        assert result.affirmations == ()
        assert len(result.failures) == 2

    def test_each_source_tried_once(self):
        remote = StaticSource("remote", error=NetworkFailure("down"))
        local = StaticSource("local", ["X"])
        asyncio.run(resolver.resolve_sources(remote, local))
        assert remote.calls == 1
        assert local.calls == 1

    def test_malformed_url_falls_back_to_local(self, fallback_file):
        remote = RemoteSource("http://[::1/getsheetsdata")
        result = asyncio.run(resolver.resolve_sources(remote, LocalSource(fallback_file)))
        assert list(result.affirmations) == ["X", "Y", "Z"]
        assert result.origin is Origin.LOCAL

    def test_undecodable_local_file_is_exhausted(self, tmp_path):
        path = tmp_path / "corrupt.json"
        path.write_bytes(b'{"affirmations": ["\xff\xfe"]}')
        remote = StaticSource("remote", error=NetworkFailure("down"))
        result = asyncio.run(resolver.resolve_sources(remote, LocalSource(path)))
        assert result.exhausted
        assert "MalformedResponse" in result.failures[1]


class TestRequireContent:
    def test_returns_affirmations(self):
        content = ResolvedContent(affirmations=("A", "B"), origin=Origin.REMOTE)
        assert resolver.require_content(content) == ("A", "B")

    def test_exhausted_raises(self):
        content = ResolvedContent(origin=Origin.EXHAUSTED, failures=["remote: EmptyResult: none"])
        with pytest.raises(ExhaustedSources, match="EmptyResult"):
            resolver.require_content(content)


class TestResolveContent:
    def test_uses_config_endpoint_and_fallback(self, config, monkeypatch):
        seen = {}
        real_resolve_sources = resolver.resolve_sources

        async def fake_resolve_sources(remote, local):
            seen["endpoint"] = remote.endpoint
            seen["column"] = remote.column_index
            seen["path"] = local.path
            offline = StaticSource("remote", error=NetworkFailure("offline"))
            return await real_resolve_sources(offline, local)

        monkeypatch.setattr(resolver, "resolve_sources", fake_resolve_sources)
        result = asyncio.run(resolver.resolve_content(config))
        assert seen["endpoint"] == "http://sheets.test/getsheetsdata"
        assert seen["column"] == 2
        assert seen["path"] == config.resolved_fallback_path
        assert result.origin is Origin.LOCAL
