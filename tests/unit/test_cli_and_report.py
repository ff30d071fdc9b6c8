# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio
import json

import pytest

from sourcecheck import runtime
from sourcecheck.check.report import format_progress_line, format_summary, verdict_mark, write_report
from sourcecheck.cli import main as cli_main
from sourcecheck.cli.main import build_parser, main, settings_from_args
from sourcecheck.errors import ErrorCategory
from sourcecheck.http import HttpResponse, StubHttpClient, build_test_url
from sourcecheck.models import Endpoint, ProbeResult, RunReport, Verdict
from sourcecheck.runtime import SourceChecker


def _result(key: str, verdict: Verdict, **kwargs) -> ProbeResult:
    return ProbeResult(key=key, name=key.upper(), base=f"http://{key}", test_url=build_test_url(f"http://{key}"), verdict=verdict, **kwargs)


def _write_config(path, sites) -> None:
    (path / "config.json").write_text(json.dumps({"cache_time": 7200, "api_site": sites}), encoding="utf-8")


@pytest.fixture
def stub_client(monkeypatch):
    stub = StubHttpClient()
    monkeypatch.setattr(runtime, "create_default_http_client", lambda settings: stub)
    return stub


def test_build_parser_defaults_and_overrides():
    parser = build_parser()
    args = parser.parse_args([])
    settings = settings_from_args(args)
    assert settings.concurrency == 8
    assert settings.timeout == 10.0
    assert settings.verify_ssl is True

    args = parser.parse_args(["--concurrency", "2", "--timeout", "1.5", "--ignore-ssl-errors", "--output", "out.json", "--json"])
    settings = settings_from_args(args)
    assert settings.concurrency == 2
    assert settings.timeout == 1.5
    assert settings.verify_ssl is False
    assert settings.report_path == "out.json"
    assert args.json is True


def test_progress_line_and_marks():
    passed = _result("a", Verdict.PASS, status=200, ms=42, detail="JSON with list[]")
    assert format_progress_line(1, 3, passed) == "✅ [1/3] a - A (42ms) -> pass 200 JSON with list[]"
    failed = _result("b", Verdict.FAIL, status=0, ms=10000, detail="timed out after 10000ms")
    assert format_progress_line(2, 3, failed) == "❌ [2/3] b - B (10000ms) -> fail  timed out after 10000ms"
    assert verdict_mark(Verdict.OK_MAYBE) == "🟡"
    assert verdict_mark(Verdict.XML_OR_HTML) == "❌"


def test_format_summary_lists_every_bucket():
    report = RunReport.from_results(
        [
            _result("a", Verdict.PASS),
            _result("b", Verdict.TEXT),
            _result("c", Verdict.UNKNOWN),
            _result("d", Verdict.EMPTY),
        ]
    )
    assert format_summary(report).splitlines() == [
        "===== SUMMARY =====",
        "PASS: 1",
        "MAYBE: 0",
        "XML/HTML (likely incompatible): 0",
        "UNKNOWN/TEXT: 2",
        "FAIL/EMPTY: 1",
    ]


def test_write_report_overwrites_previous_file(tmp_path):
    path = tmp_path / "source-check-report.json"
    path.write_text("stale", encoding="utf-8")
    report = RunReport.from_results(
        [
            _result("a", Verdict.PASS, status=200, ms=5, detail="JSON with list[]"),
            _result("b", Verdict.FAIL, detail="HTTP 500", status=500, error_category=ErrorCategory.HTTP_ERROR),
        ],
        when="2025-01-01T00:00:00.000Z",
    )

    write_report(report, path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["when"] == "2025-01-01T00:00:00.000Z"
    assert data["summary"]["PASS"] == 1
    assert data["summary"]["FAIL/EMPTY"] == 1
    assert data["results"][0] == {
        "key": "a",
        "name": "A",
        "base": "http://a",
        "testUrl": "http://a?ac=videolist&wd=test&pg=1",
        "verdict": "pass",
        "status": 200,
        "ms": 5,
        "detail": "JSON with list[]",
    }
    assert data["results"][1]["errorCategory"] == "HTTP_ERROR"


def test_report_timestamp_is_utc_iso():
    when = RunReport().when
    assert when.endswith("Z")
    assert "T" in when


def test_main_missing_config_exits_nonzero(tmp_path, monkeypatch, capsys, stub_client):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "config.json not found" in capsys.readouterr().err
    assert stub_client.requests == []


def test_main_invalid_config_exits_nonzero(tmp_path, monkeypatch, capsys, stub_client):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text("{broken", encoding="utf-8")
    assert main([]) == 1
    assert "Failed to parse config.json" in capsys.readouterr().err


def test_main_zero_endpoints_writes_no_report(tmp_path, monkeypatch, capsys, stub_client):
    monkeypatch.chdir(tmp_path)
    _write_config(tmp_path, {})
    assert main([]) == 0
    assert "No api_site entries found." in capsys.readouterr().out
    assert stub_client.requests == []
    assert not (tmp_path / "source-check-report.json").exists()


def test_main_full_run_writes_report(tmp_path, monkeypatch, capsys, stub_client):
    monkeypatch.chdir(tmp_path)
    sites = {
        "good": {"name": "Good", "api": "http://good.test/api.php/provide/vod"},
        "maybe": {"name": "Maybe", "api": "http://maybe.test/api.php/provide/vod?format=json"},
        "down": {"name": "Down", "api": "http://down.test/api.php/provide/vod"},
    }
    _write_config(tmp_path, sites)
    stub_client.add(build_test_url(sites["good"]["api"]), HttpResponse(ok=True, status_code=200, text='{"list":[]}'))
    stub_client.add(build_test_url(sites["maybe"]["api"]), HttpResponse(ok=True, status_code=200, text='{"code":1}'))
    stub_client.add(build_test_url(sites["down"]["api"]), HttpResponse(ok=True, status_code=502, text="bad gateway"))

    assert main([]) == 0

    out = capsys.readouterr().out
    assert "Testing 3 sources (GET only, timeout 10000ms)..." in out
    assert "===== SUMMARY =====" in out
    assert "FAIL/EMPTY: 1" in out
    assert "Report saved to" in out
    assert stub_client.closed is True

    data = json.loads((tmp_path / "source-check-report.json").read_text(encoding="utf-8"))
    by_key = {item["key"]: item for item in data["results"]}
    assert set(by_key) == {"good", "maybe", "down"}
    assert by_key["good"]["verdict"] == "pass"
    assert by_key["maybe"]["testUrl"].endswith("?format=json&ac=videolist&wd=test&pg=1")
    assert by_key["maybe"]["verdict"] == "ok_maybe"
    assert by_key["down"] == {
        "key": "down",
        "name": "Down",
        "base": "http://down.test/api.php/provide/vod",
        "testUrl": "http://down.test/api.php/provide/vod?ac=videolist&wd=test&pg=1",
        "verdict": "fail",
        "status": 502,
        "ms": by_key["down"]["ms"],
        "detail": "HTTP 502",
        "errorCategory": "HTTP_ERROR",
    }


def test_main_custom_paths(tmp_path, monkeypatch, stub_client):
    monkeypatch.chdir(tmp_path)
    conf_dir = tmp_path / "site"
    conf_dir.mkdir()
    _write_config(conf_dir, {"x": {"name": "X", "api": "http://x.test"}})

    (tmp_path / "out").mkdir()
    assert main(["--config", "site/config.json", "--output", "out/report.json"]) == 0
    data = json.loads((tmp_path / "out" / "report.json").read_text(encoding="utf-8"))
    assert data["results"][0]["verdict"] == "fail"


def test_main_unexpected_error_exits_nonzero(tmp_path, monkeypatch, stub_client):
    monkeypatch.chdir(tmp_path)

    def explode(path):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(cli_main, "load_endpoints", explode)
    assert main([]) == 1


def test_source_checker_closes_client():
    stub = StubHttpClient({build_test_url("http://a"): HttpResponse(ok=True, status_code=200, text="{}")})

    async def go():
        async with SourceChecker(http_client=stub) as checker:
            return await checker.run([Endpoint("a", "A", "http://a")])

    report = asyncio.run(go())
    assert report.results[0].verdict is Verdict.UNKNOWN
    assert stub.closed is True


def test_source_checker_builds_default_client(monkeypatch):
    stub = StubHttpClient()
    built = []

    def factory(settings):
        built.append(settings)
        return stub

    monkeypatch.setattr(runtime, "create_default_http_client", factory)
    checker = SourceChecker()
    assert checker.http_client is stub
    assert built == [checker.settings]
    asyncio.run(checker.aclose())
    assert stub.closed is True
