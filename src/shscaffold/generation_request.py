"""Options dataclass for one scaffold invocation."""

import re
from dataclasses import dataclass, field
from pathlib import Path

import click

from shscaffold.template_renderer import FULL_TEMPLATE, SIMPLE_TEMPLATE


SCRIPT_SUFFIX = ".sh"
DEFAULT_OUTPUT_DESCRIPTION = "Writes results to standard output"

_DEPENDENCY_RE = re.compile(r'^[A-Za-z0-9._+-]+$')


def normalize_script_name(name: str) -> str:
    """Append the .sh suffix unless name already ends with it."""
    if name.endswith(SCRIPT_SUFFIX):
        return name
    return name + SCRIPT_SUFFIX


def parse_dependencies(value: str | None) -> list[str]:
    """Split a comma-separated dependency list, keeping input order.

    Surrounding whitespace is trimmed and empty entries are dropped.
    Raises ValueError for a name that could not stand as a bash array word.
    """
    if not value:
        return []
    dependencies = [item.strip() for item in value.split(",") if item.strip()]
    for dependency in dependencies:
        if not _DEPENDENCY_RE.match(dependency):
            raise ValueError(f"invalid dependency name: {dependency!r}")
    return dependencies


@dataclass
class GenerationRequest:
    """All inputs for generating one script."""

    name: str
    description: str
    author: str | None = None
    output: str = "."
    dependencies: list[str] = field(default_factory=list)
    no_colors: bool = False
    minimal: bool = False
    simple: bool = False
    force: bool = False
    output_description: str = DEFAULT_OUTPUT_DESCRIPTION

    @property
    def script_name(self) -> str:
        return normalize_script_name(self.name)

    @property
    def destination(self) -> Path:
        return Path(self.output) / self.script_name

    @property
    def template_name(self) -> str:
        return SIMPLE_TEMPLATE if self.simple else FULL_TEMPLATE

    def validate(self):
        """Raise click.UsageError if a required value is empty or the name is a path."""
        if not self.name or not self.name.strip():
            raise click.UsageError("Script name is required")
        if not self.description or not self.description.strip():
            raise click.UsageError("Script description is required")
        if "/" in self.name or self.name.strip(".") == "" or self.name == SCRIPT_SUFFIX:
            raise click.UsageError(
                f"Script name must be a file name, not a path: {self.name}"
            )
