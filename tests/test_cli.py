"""Tests for the command-line entry point."""

import logging
from pathlib import Path

import pytest

from fankit_dl import cli
from fankit_dl.config import DownloadConfig

from conftest import IMAGE_BASE, detail_page_html, item_url, list_page_html, list_url


def _catalog(session) -> None:
    session.routes.update(
        {
            list_url(1): list_page_html(items=[2, 1], pages=[2]),
            list_url(2): list_page_html(items=[1], pages=[1]),
            item_url(1): detail_page_html("Wallpaper", "Old", [f"{IMAGE_BASE}old.jpg"]),
            item_url(2): detail_page_html("Icon", "New", [f"{IMAGE_BASE}new.png"]),
            f"{IMAGE_BASE}old.jpg": b"old",
            f"{IMAGE_BASE}new.png": b"new",
        }
    )


class TestParseArgs:
    def test_defaults(self) -> None:
        args = cli.parse_args([])

        assert args.dest is None
        assert args.crawl_delay == 1000

    def test_options(self, tmp_path: Path) -> None:
        args = cli.parse_args(["--dest", str(tmp_path), "--crawl-delay", "250"])

        assert args.dest == tmp_path
        assert args.crawl_delay == 250

    def test_rejects_negative_delay(self) -> None:
        with pytest.raises(SystemExit):
            cli.parse_args(["--crawl-delay", "-1"])

    def test_rejects_unknown_flags(self) -> None:
        with pytest.raises(SystemExit):
            cli.parse_args(["--verbose"])


class TestRun:
    def test_downloads_only_new_items(self, session, gateway, tmp_path: Path, sleeps) -> None:
        _catalog(session)
        (tmp_path / "1-Wallpaper-Old").mkdir()

        cli.run(DownloadConfig(dest_dir=tmp_path, crawl_delay=0.0), gateway)

        assert (tmp_path / "2-Icon-New" / "new.png").read_bytes() == b"new"
        assert not (tmp_path / "1-Wallpaper-Old" / "old.jpg").exists()
        assert item_url(1) not in session.requested

    def test_up_to_date_run_only_reads_first_page(self, session, gateway, tmp_path: Path, sleeps) -> None:
        _catalog(session)
        (tmp_path / "1-Wallpaper-Old").mkdir()
        (tmp_path / "2-Icon-New").mkdir()

        cli.run(DownloadConfig(dest_dir=tmp_path, crawl_delay=1.0), gateway)

        assert session.requested == [list_url(1)]
        assert sleeps == []


class TestMain:
    @pytest.fixture(autouse=True)
    def basic_config(self, monkeypatch) -> list:
        calls: list = []
        monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_success_exit_code(self, monkeypatch, session, gateway, tmp_path: Path, sleeps) -> None:
        _catalog(session)
        monkeypatch.setattr(cli, "DomGateway", lambda timeout: gateway)

        assert cli.main(["--dest", str(tmp_path), "--crawl-delay", "10"]) == 0
        assert (tmp_path / "1-Wallpaper-Old" / "old.jpg").read_bytes() == b"old"
        assert (tmp_path / "2-Icon-New" / "new.png").read_bytes() == b"new"
        assert 0.01 in sleeps

    def test_fatal_error_exit_code(self, monkeypatch, gateway, tmp_path: Path, caplog) -> None:
        monkeypatch.setattr(cli, "DomGateway", lambda timeout: gateway)

        assert cli.main(["--dest", str(tmp_path)]) == 1
        assert "Failed to load page" in caplog.text

    def test_missing_destination_exit_code(self, monkeypatch, gateway, tmp_path: Path) -> None:
        monkeypatch.setattr(cli, "DomGateway", lambda timeout: gateway)

        assert cli.main(["--dest", str(tmp_path / "missing")]) == 1

    def test_log_level_from_environment(self, monkeypatch, gateway, tmp_path: Path, basic_config) -> None:
        monkeypatch.setenv("FANKIT_DL_LOG_LEVEL", "debug")
        monkeypatch.setattr(cli, "DomGateway", lambda timeout: gateway)

        cli.main(["--dest", str(tmp_path)])

        assert basic_config[0]["level"] == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch, gateway, tmp_path: Path, basic_config) -> None:
        monkeypatch.setenv("FANKIT_DL_LOG_LEVEL", "chatty")
        monkeypatch.setattr(cli, "DomGateway", lambda timeout: gateway)

        cli.main(["--dest", str(tmp_path)])

        assert basic_config[0]["level"] == logging.INFO
