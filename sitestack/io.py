import logging
import os
import sys
import traceback

import click

from sitestack.exceptions import ConfirmationDeclined


DEBUG = False
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

STYLES = {
    "info": {"bold": True, "fg": "green"},
    "warn": {"fg": "red"},
    "error": {"bold": True, "fg": "red"},
}


def _echo(message, args, err=False, **style):
    # %-style arguments, as with the logging module
    if args:
        message = message % args
    click.echo(click.style(message, **style) if style else message, err=err)


def debug(message, *args):
    if DEBUG:
        _echo(message, args)


def info(message, *args, bright=True):
    _echo(message, args, **(STYLES["info"] if bright else {}))


def error(message, *args):
    if DEBUG and sys.exc_info()[0] is not None:
        click.echo(traceback.format_exc(), nl=False)
    _echo(message, args, err=True, **STYLES["error"])


def warn(message, *args):
    _echo(message, args, err=True, **STYLES["warn"])


def exception(message):
    raise click.ClickException(click.style(message, **STYLES["error"]))


def confirm(prompt, flags):
    """Block until the operator agrees to ``prompt``, or raise ConfirmationDeclined.

    ``--yes`` answers the prompt in advance.
    """
    if flags.yes:
        debug(f"{prompt} [assuming yes]")
        return
    try:
        confirmed = click.confirm(prompt, default=False)
    except click.Abort:
        confirmed = False
    if not confirmed:
        warn("Aborted.")
        raise ConfirmationDeclined()


def log_to_file(log_file):
    """Append records from the sitestack loggers to ``log_file``."""
    log_file = os.path.abspath(log_file)
    logger = logging.getLogger("sitestack")
    for handler in logger.handlers:
        if getattr(handler, "baseFilename", None) == log_file:
            return handler
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler
