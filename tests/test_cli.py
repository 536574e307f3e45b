import logging

from bookpricing import demo
from bookpricing.cli.main import app
from bookpricing.errors import InvalidAmountError


def test_cli_prints_report(cli_runner):
    result = cli_runner.invoke(app, [])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == demo.render_report()


def test_cli_respects_log_level(cli_runner, monkeypatch):
    monkeypatch.setenv("BOOKPRICING_LOG_LEVEL", "debug")
    result = cli_runner.invoke(app, [])
    assert result.exit_code == 0
    assert logging.getLogger("bookpricing").level == logging.DEBUG


def test_cli_reports_pricing_errors(cli_runner, monkeypatch):
    def broken():
        raise InvalidAmountError("x")

    monkeypatch.setattr(demo, "render_report", broken)
    result = cli_runner.invoke(app, [])
    assert result.exit_code == 1
    assert "Not a valid amount" in result.output
