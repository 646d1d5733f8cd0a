"""Tests for the command-line entrypoint."""

from __future__ import annotations

import httpx
from typer.testing import CliRunner

from photo_search import main as main_module

runner = CliRunner()


def _patch_client(monkeypatch, handler) -> None:
    def _build(settings=None):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    monkeypatch.setattr(main_module, "build_async_client", _build)


def test_cli_prints_results(monkeypatch, sample_payload):
    requested: list[httpx.URL] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url)
        return httpx.Response(200, json=sample_payload)

    _patch_client(monkeypatch, handler)
    result = runner.invoke(main_module.app, ["sea & sky", "--per-page", "30"])

    assert result.exit_code == 0, result.output
    assert "133 photos (7 pages)" in result.output
    assert "eOLpJytrbsQ\tugmonk\tA man drinking a coffee." in result.output
    assert requested[0].params["query"] == "sea & sky"
    assert requested[0].params["per_page"] == "30"


def test_cli_json_prints_raw_body(monkeypatch):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b'{"total": 0, "results": []}')

    _patch_client(monkeypatch, handler)
    result = runner.invoke(main_module.app, ["mac", "--json"])

    assert result.exit_code == 0, result.output
    assert '{"total": 0, "results": []}' in result.output


def test_cli_exits_non_zero_on_transport_error(monkeypatch):
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _patch_client(monkeypatch, handler)
    result = runner.invoke(main_module.app, ["mac"])

    assert result.exit_code == 1


def test_format_results_handles_missing_fields(sample_payload):
    from photo_search.decoding import SearchResults

    results = SearchResults.model_validate(sample_payload)
    lines = main_module.format_results(results)

    assert lines[0] == "133 photos (7 pages)"
    assert lines[2] == "Dwu85P9SOIk\texampleuser\tlaptop on a desk\thttps://images.unsplash.com/photo-2"
