"""Command-line entry point tests."""
import pytest

import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MATCHSHEET_LOG_LEVEL", raising=False)
    return tmp_path


class TestMainCommand:
    def test_leagues_written_to_output(self, workdir, league_html):
        source = workdir / "page.html"
        source.write_text(league_html, encoding="utf-8")

        code = main.main(
            ["--env", "testing", "--output", "leagues.md", "leagues", str(source)]
        )

        assert code == 0
        assert "| Premier League |" in (workdir / "leagues.md").read_text(
            encoding="utf-8"
        )

    def test_missing_source_returns_error_code(self, workdir):
        assert main.main(["--env", "testing", "leagues", "missing.html"]) == 1

    def test_missing_events_fragment_returns_error_code(
        self, workdir, stats_fragment_html
    ):
        source = workdir / "stats.html"
        source.write_text(stats_fragment_html, encoding="utf-8")

        code = main.main(
            ["--env", "testing", "match", str(source), "--events", "nowhere.html"]
        )
        assert code == 1

    def test_unknown_environment(self, workdir):
        assert main.main(["--env", "staging", "leagues", "page.html"]) == 2
