"""Status output for the generator, coloured unless the environment asks otherwise."""

import os
from dataclasses import dataclass

import click


@dataclass(frozen=True)
class OutputStyle:
    color: bool = True

    @classmethod
    def from_environ(cls, environ=None) -> "OutputStyle":
        """Disable colour when NO_COLOR is set or TERM is "dumb"."""
        environ = os.environ if environ is None else environ
        disabled = bool(environ.get("NO_COLOR")) or environ.get("TERM") == "dumb"
        return cls(color=not disabled)

    def info(self, message=""):
        click.echo(message)

    def warning(self, message):
        click.echo(self._styled(message, "yellow"))

    def success(self, message):
        click.echo(self._styled(message, "green"))

    def error(self, message):
        click.echo(self._styled(message, "red"), err=True)

    def _styled(self, message, fg):
        if not self.color:
            return message
        return click.style(message, fg=fg)
