"""Turns a validated request into a script on disk.

Resolves the author, renders the chosen template, creates the output
directory, asks before replacing an existing file, writes the script and
prints the next steps.
"""

import dataclasses
import os
import sys
from datetime import date

import click
import jinja2

from shscaffold.defaults import resolve_author
from shscaffold.generator import generate_script, write_script
from shscaffold.template_renderer import load_template


class ScaffoldCommand:
    """Generates one bash script from a validated GenerationRequest."""

    def __init__(self, request, style, *, confirm_fn=None, author_resolver=resolve_author,
                 today_fn=date.today):
        self.request = request
        self.style = style
        self._confirm_fn = confirm_fn or _confirm_overwrite
        self._author_resolver = author_resolver
        self._today_fn = today_fn

    def execute(self):
        request = dataclasses.replace(
            self.request, author=self._author_resolver(self.request.author)
        )
        template_text = self._load_template(request.template_name)
        try:
            generated = generate_script(request, template_text, self._today_fn())
        except (ValueError, jinja2.TemplateError) as exc:
            self._fail(f"Error: Cannot render template {request.template_name}: {exc}")
        self._ensure_output_directory(request.output)

        destination = request.destination
        if destination.is_file() and not request.force:
            self.style.warning(f"Warning: File already exists: {destination}")
            if not self._confirm_fn():
                self.style.info("Operation cancelled")
                return None

        try:
            write_script(generated)
        except OSError as exc:
            self._fail(f"Error: Failed to write {destination}: {exc.strerror or exc}")

        self._report(request, generated.path)
        return generated

    def _load_template(self, template_name):
        try:
            return load_template(template_name)
        except OSError as exc:
            self._fail(f"Error: {exc}")

    def _ensure_output_directory(self, output):
        if os.path.isdir(output):
            return
        self.style.warning(f"Creating directory: {output}")
        try:
            os.makedirs(output, exist_ok=True)
        except OSError as exc:
            self._fail(f"Error: Failed to create output directory: {output} ({exc.strerror or exc})")

    def _report(self, request, path):
        self.style.success(f"✅ Script generated successfully: {path}")
        self.style.info()
        self.style.info("Next steps:")
        for number, step in enumerate(_next_steps(request, path), start=1):
            self.style.info(f"{number}. {step}")

    def _fail(self, message):
        self.style.error(message)
        sys.exit(1)


def _confirm_overwrite():
    return click.confirm("Overwrite?", default=False)


def _next_steps(request, path):
    if request.simple:
        return [
            "Edit the script to add your logic",
            f"Test with: bash -n {path}",
            f"Run with: {path}",
        ]
    return [
        "Edit the script to add your business logic",
        "Update the DEPENDENCIES array if needed",
        "Customize the argument parsing for your needs",
        f"Test with: bash -n {path}",
        f"Run with: {path} --help",
    ]
