"""Unit tests for the command-line interface."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from tokpulse import cli
from tokpulse.collectors.tiktok import DownloadOutcome
from tokpulse.core.exceptions import (
    CollectorNotFoundError,
    ExtractionFailedError,
    InvalidURLError,
)
from tokpulse.extraction.schema import NormalizedRecord

RECORD = NormalizedRecord(
    video_url="https://cdn/v.mp4",
    thumbnail="https://cdn/c.jpg",
    title="Hello",
    author="@jane",
    source_tag="json:universal",
)


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring global logging during tests."""
    with patch("tokpulse.cli.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def mock_collector():
    """Patch TikTokCollector in the CLI with an async context manager stub."""
    collector = MagicMock()
    collector.download_many = AsyncMock()
    with patch("tokpulse.cli.TikTokCollector") as mock_cls:
        mock_cls.return_value.__aenter__.return_value = collector
        mock_cls.return_value.__aexit__.return_value = None
        yield collector


class TestExtractCommand:
    """``tokpulse extract`` over saved pages."""

    def test_prints_record(self, tmp_path, capsys):
        page = tmp_path / "page.html"
        page.write_text(
            '<meta property="og:video" content="https://cdn.example/v.mp4">'
            '<meta property="og:title" content="Hello &amp; World">',
            encoding="utf-8",
        )

        exit_code = cli.main(["extract", str(page)])

        out, err = capsys.readouterr()
        assert exit_code == cli.EXIT_OK
        assert "Video URL: https://cdn.example/v.mp4" in out
        assert "Title: Hello & World" in out
        assert "Source: og_meta" in err

    def test_json_output(self, tmp_path, capsys):
        page = tmp_path / "page.html"
        page.write_text('<meta property="og:video" content="https://cdn.example/v.mp4">')

        cli.main(["extract", "--json", str(page)])

        data = json.loads(capsys.readouterr().out)
        assert data["video_url"] == "https://cdn.example/v.mp4"
        assert data["source"] == "og_meta"

    def test_extraction_failure(self, tmp_path, capsys):
        page = tmp_path / "page.html"
        page.write_text("<html><body>Video unavailable</body></html>")

        exit_code = cli.main(["extract", str(page)])

        err = capsys.readouterr().err
        assert exit_code == cli.EXIT_EXTRACTION
        assert "json:universal, json:sigi, json:next, og_meta" in err

    def test_missing_file_reported(self, tmp_path, capsys):
        missing = tmp_path / "nope.html"

        exit_code = cli.main(["extract", str(missing)])

        out, err = capsys.readouterr()
        assert exit_code == cli.EXIT_USAGE
        assert out == ""
        assert err.startswith(f"Error: cannot read {missing}")
        assert "Traceback" not in err

    def test_directory_reported(self, tmp_path, capsys):
        exit_code = cli.main(["extract", str(tmp_path)])

        assert exit_code == cli.EXIT_USAGE
        assert "Error: cannot read" in capsys.readouterr().err


class TestDownloadCommand:
    """``tokpulse download`` with the collector stubbed out."""

    def test_prints_record(self, mock_collector, capsys):
        url = "https://www.tiktok.com/@jane/video/1"
        mock_collector.download_many.return_value = [DownloadOutcome(url=url, record=RECORD)]

        exit_code = cli.main(["download", url])

        out = capsys.readouterr().out
        assert exit_code == cli.EXIT_OK
        assert out.splitlines() == [
            "Video URL: https://cdn/v.mp4",
            "Thumbnail: https://cdn/c.jpg",
            "Title: Hello",
            "Author: @jane",
        ]
        mock_collector.download_many.assert_awaited_once_with([url])

    def test_worst_error_sets_exit_code(self, mock_collector, capsys):
        mock_collector.download_many.return_value = [
            DownloadOutcome(url="bad", error=InvalidURLError("bad")),
            DownloadOutcome(
                url="gone",
                error=CollectorNotFoundError("tiktok", "Video not found (HTTP 404)."),
            ),
            DownloadOutcome(url="ok", record=RECORD),
        ]

        exit_code = cli.main(["download", "bad", "gone", "ok"])

        out, err = capsys.readouterr()
        assert exit_code == cli.EXIT_TRANSPORT
        assert "Error (bad): Invalid TikTok URL" in err
        assert "Error (gone): [tiktok] Video not found" in err
        assert "Video URL: https://cdn/v.mp4" in out


class TestExitCodes:
    """Error to exit code mapping."""

    def test_mapping(self):
        assert cli.exit_code_for(InvalidURLError("x")) == cli.EXIT_INVALID_URL
        assert cli.exit_code_for(CollectorNotFoundError("tiktok", "x")) == cli.EXIT_TRANSPORT
        assert cli.exit_code_for(ExtractionFailedError([])) == cli.EXIT_EXTRACTION

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.main([])

    def test_logging_overrides_forwarded(self, no_logging_setup, tmp_path):
        page = tmp_path / "page.html"
        page.write_text('<meta property="og:video" content="https://cdn.example/v.mp4">')

        cli.main(["--log-level", "DEBUG", "--log-format", "json", "extract", str(page)])

        no_logging_setup.assert_called_once_with(level="DEBUG", fmt="json")
