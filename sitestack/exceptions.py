""" Errors that stop a stack operation before any container is touched.
"""
import click


class SelectorError(click.ClickException):
    """The sites or components to operate on could not be determined."""

    def format_message(self):
        return click.style(self.message, bold=True, fg="red")


class ConfirmationDeclined(click.exceptions.Exit):
    """The operator declined a bulk operation. Exits cleanly."""

    def __init__(self):
        super().__init__(0)
