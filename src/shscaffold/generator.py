"""Turn a GenerationRequest and template text into a script on disk."""

import stat
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from shscaffold.generation_request import GenerationRequest
from shscaffold.template_renderer import render_template
from shscaffold.template_sections import join_sections, parse_sections
from shscaffold.transforms import inject_dependencies, strip_colors, strip_verbose_helpers

DATE_FORMAT = "%Y-%m-%d"

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass
class GeneratedScript:
    path: Path
    text: str


def generate_script(request: GenerationRequest, template_text: str, today: date) -> GeneratedScript:
    """Build the script text for request from template_text.

    Stripping and dependency injection run on the template before
    substitution, so user-supplied values are never edited.
    """
    sections = parse_sections(template_text)
    if request.no_colors:
        sections = strip_colors(sections)
    if request.minimal:
        sections = strip_verbose_helpers(sections)

    template = inject_dependencies(join_sections(sections), request.dependencies)
    text = render_template(
        template,
        SCRIPT_NAME=request.script_name,
        DESCRIPTION=request.description,
        AUTHOR=request.author or "",
        DATE=today.strftime(DATE_FORMAT),
        OUTPUT_DESCRIPTION=request.output_description,
    )
    return GeneratedScript(path=request.destination, text=text)


def write_script(generated: GeneratedScript):
    """Write the script and add the executable bits, like ``chmod +x``."""
    generated.path.write_text(generated.text, encoding="utf-8")
    current_mode = generated.path.stat().st_mode
    generated.path.chmod(current_mode | _EXECUTABLE_BITS)
