import click
import pytest

from sitestack import io
from sitestack.exceptions import ConfirmationDeclined
from sitestack.state import StackFlags


def test_debug_only_when_enabled(monkeypatch, capsys):
    io.debug("hidden %s", "message")
    assert capsys.readouterr().out == ""
    monkeypatch.setattr(io, "DEBUG", True)
    io.debug("shown %s", "message")
    assert capsys.readouterr().out == "shown message\n"


def test_info_and_warn_streams(capsys):
    io.info("restarting %s", "nginx", bright=False)
    io.warn("Not a registered site: %s", "unknown.com")
    captured = capsys.readouterr()
    assert captured.out == "restarting nginx\n"
    assert captured.err == "Not a registered site: unknown.com\n"


def test_error_traceback_with_debug(monkeypatch, capsys):
    monkeypatch.setattr(io, "DEBUG", True)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        io.error("failed")
    captured = capsys.readouterr()
    assert "RuntimeError: boom" in captured.out
    assert captured.err == "failed\n"


def test_exception():
    with pytest.raises(click.ClickException, match="broken"):
        io.exception("broken")


def test_confirm_assumed_with_yes(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("prompted")
    monkeypatch.setattr(click, "confirm", fail)
    io.confirm("Are you sure?", StackFlags(yes=True))


@pytest.mark.parametrize("answer", [False, click.Abort()])
def test_confirm_declined(monkeypatch, answer):
    def declined(*args, **kwargs):
        if isinstance(answer, Exception):
            raise answer
        return answer
    monkeypatch.setattr(click, "confirm", declined)
    with pytest.raises(ConfirmationDeclined):
        io.confirm("Are you sure?", StackFlags())
