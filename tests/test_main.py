from unittest.mock import AsyncMock, patch

import main
from pagescrape import ExtractedTitle, NavigationFailure, TargetNotFound


def _title(markup="<h1>Example Title</h1>"):
    return ExtractedTitle(markup=markup, url="https://example.com")


def test_main_prints_markup_line(tmp_path, capsys):
    fake = AsyncMock(return_value=_title())
    with patch("main.scrape_title", fake):
        code = main.main(["--url", "https://example.com", "--log-file", str(tmp_path / "run.log")])

    assert code == 0
    assert capsys.readouterr().out == "<h1>Example Title</h1>\n"
    config = fake.call_args[0][0]
    assert config.url == "https://example.com"


def test_main_text_flag_strips_tags(tmp_path, capsys):
    fake = AsyncMock(return_value=_title("<b>Example</b> &amp; Title"))
    with patch("main.scrape_title", fake):
        code = main.main(["--text", "--log-file", str(tmp_path / "run.log")])

    assert code == 0
    assert capsys.readouterr().out == "Example & Title\n"


def test_main_passes_flags_into_config(tmp_path):
    fake = AsyncMock(return_value=_title())
    argv = [
        "--headful",
        "--user-agent-before-navigation",
        "--user-agent", "TestAgent/1.0",
        "--screenshot", str(tmp_path / "shot.png"),
        "--wait-timeout-ms", "1500",
        "--wait-until", "networkidle",
        "--log-file", str(tmp_path / "run.log"),
    ]
    with patch("main.scrape_title", fake):
        main.main(argv)

    config = fake.call_args[0][0]
    assert config.headless is False
    assert config.user_agent_before_navigation is True
    assert config.user_agent == "TestAgent/1.0"
    assert config.screenshot_path == str(tmp_path / "shot.png")
    assert config.wait_timeout_ms == 1500
    assert config.wait_until == "networkidle"


def test_main_defaults_leave_config_untouched(tmp_path):
    fake = AsyncMock(return_value=_title())
    with patch("main.scrape_title", fake), patch.dict("settings._SETTINGS", {}, clear=True):
        main.main(["--log-file", str(tmp_path / "run.log")])

    config = fake.call_args[0][0]
    assert config.headless is True
    assert config.user_agent_before_navigation is False
    assert config.wait_timeout_ms is None


def test_main_reports_failure_without_output(tmp_path, capsys):
    error = TargetNotFound("never rendered", url="https://example.com", selector="#x")
    with patch("main.scrape_title", AsyncMock(side_effect=error)):
        code = main.main(["--log-file", str(tmp_path / "run.log")])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "TargetNotFound" in captured.err


def test_main_navigation_failure_exit_code(tmp_path):
    error = NavigationFailure("dns", url="https://unreachable.invalid")
    with patch("main.scrape_title", AsyncMock(side_effect=error)):
        assert main.main(["--log-file", str(tmp_path / "run.log")]) == 1


def test_main_status_line_keeps_brackets_in_url(tmp_path, capsys):
    url = "https://example.com/?q=[/x]&tag=[a]"
    fake = AsyncMock(return_value=_title())
    with patch("main.scrape_title", fake):
        code = main.main(["--url", url, "--log-file", str(tmp_path / "run.log")])

    assert code == 0
    assert url in capsys.readouterr().err.replace("\n", "")
    assert fake.call_args[0][0].url == url
