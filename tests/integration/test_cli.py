"""Integration test: CLI subcommands end to end over a mocked transport."""

import json
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

import main
from src.core.config import HttpConfig
from src.transport.session import HttpSession

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_CARDS = "".join(
    f'<div class="base-card" data-entity-urn="urn:li:jobPosting:{job_id}">'
    f'<h3 class="base-search-card__title">Engineer {job_id}</h3>'
    f'<h4 class="base-search-card__subtitle">Acme</h4>'
    f'<span class="job-search-card__location">Hybrid - Berlin</span></div>'
    for job_id in ("3800000001", "3800000002")
)


def _install_transport(
    monkeypatch: pytest.MonkeyPatch, routes: dict[str, str],
) -> list[httpx.Request]:
    """Route main's HttpSession through a MockTransport; unknown paths are 404."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        body = routes.get(request.url.path)
        if body is None:
            return httpx.Response(404)
        return httpx.Response(200, text=body)

    def _session(config: HttpConfig) -> HttpSession:
        return HttpSession(config, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(main, "HttpSession", _session)
    return seen


def _run(capsys: pytest.CaptureFixture[str], argv: list[str]) -> object:
    main.main(argv)
    return json.loads(capsys.readouterr().out)


# ---------------------------------------------------------------------------
# Offline commands
# ---------------------------------------------------------------------------


class TestOfflineCommands:
    def test_build_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        out = _run(capsys, [
            "build-url", "-k", "python developer", "-l", "Berlin",
            "--workplace-type", "remote", "hybrid", "--easy-apply",
        ])
        assert isinstance(out, dict)
        params = parse_qs(urlparse(out["url"]).query)
        assert out["url"].startswith("https://www.linkedin.com/jobs/search/?")
        assert params["keywords"] == ["python developer"]
        assert params["f_WT"] == ["2,3"]
        assert params["f_AL"] == ["true"]

    def test_locations(self, capsys: pytest.CaptureFixture[str]) -> None:
        out = _run(capsys, ["locations"])
        assert isinstance(out, dict)
        assert {"name": "Germany", "geo_id": "101282230"} in out["locations"]

    def test_industries_and_functions(self, capsys: pytest.CaptureFixture[str]) -> None:
        industries = _run(capsys, ["industries"])
        functions = _run(capsys, ["job-functions"])
        assert isinstance(industries, dict)
        assert isinstance(functions, dict)
        assert "Software Development" in industries["industries"]
        assert "Data Science" in functions["job_functions"]


# ---------------------------------------------------------------------------
# Network commands
# ---------------------------------------------------------------------------


class TestNetworkCommands:
    def test_search(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        seen = _install_transport(
            monkeypatch, {"/jobs-guest/jobs/api/seeMoreJobPostings/search": _CARDS},
        )
        out = _run(capsys, [
            "search", "-k", "python", "--job-type", "full-time", "--sort-by", "most-recent",
        ])
        assert isinstance(out, dict)
        assert [j["id"] for j in out["jobs"]] == ["3800000001", "3800000002"]
        assert out["jobs"][0]["workplace_type"] == "hybrid"
        assert out["jobs"][0]["url"] == "https://www.linkedin.com/jobs/view/3800000001"
        assert out["total_results"] == 2
        assert out["has_more"] is False
        query = parse_qs(urlparse(str(seen[0].url)).query)
        assert query["f_JT"] == ["F"]
        assert query["sortBy"] == ["DD"]

    def test_known_location_adds_geo_id(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        seen = _install_transport(
            monkeypatch, {"/jobs-guest/jobs/api/seeMoreJobPostings/search": _CARDS},
        )
        _run(capsys, ["search", "-k", "python", "-l", "germany"])
        query = parse_qs(urlparse(str(seen[0].url)).query)
        assert query["location"] == ["germany"]
        assert query["geoId"] == ["101282230"]

    def test_company_jobs(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        seen = _install_transport(
            monkeypatch, {"/jobs-guest/jobs/api/seeMoreJobPostings/search": _CARDS},
        )
        out = _run(capsys, ["company-jobs", "1035", "--limit", "1"])
        assert isinstance(out, dict)
        assert len(out["jobs"]) == 1
        assert parse_qs(urlparse(str(seen[0].url)).query)["f_C"] == ["1035"]

    def test_company(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _install_transport(
            monkeypatch,
            {"/company/acme": '<h1 class="org-top-card-summary__title">Acme Corp</h1>'},
        )
        out = _run(capsys, ["company", "acme"])
        assert isinstance(out, dict)
        assert out["name"] == "Acme Corp"
        assert out["linkedin_url"] == "https://www.linkedin.com/company/acme"

    def test_blank_company_id_exits(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _install_transport(
            monkeypatch,
            {"/company/": '<h1 class="org-top-card-summary__title">Acme Corp</h1>'},
        )
        with pytest.raises(SystemExit) as exc_info:
            main.main(["company", ""])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err

    def test_job_not_found_exits(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _install_transport(monkeypatch, {})
        with pytest.raises(SystemExit) as exc_info:
            main.main(["job", "3812345678"])
        assert exc_info.value.code == 1
        assert "Job 3812345678 not found" in capsys.readouterr().err

    def test_search_failure_exits(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _install_transport(monkeypatch, {})
        with pytest.raises(SystemExit) as exc_info:
            main.main(["search", "-k", "python"])
        assert exc_info.value.code == 1
        assert "LinkedIn search failed" in capsys.readouterr().err

    def test_invalid_params_exit(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _install_transport(monkeypatch, {})
        with pytest.raises(SystemExit) as exc_info:
            main.main(["search", "-k", "python", "--start", "-5"])
        assert exc_info.value.code == 1
        assert "Invalid arguments" in capsys.readouterr().err


class TestConfigErrors:
    def test_missing_config_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main.main(["--config", "/nonexistent/settings.yaml", "locations"])
        assert exc_info.value.code == 1
        assert "Config file not found" in capsys.readouterr().err
