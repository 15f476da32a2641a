"""Section-level edits applied to a template before placeholder substitution."""

import re
from typing import Callable

from shscaffold.template_sections import COLORS, TEXT, TemplateSection


COLOR_VARIABLES = ("RED", "GREEN", "YELLOW", "BLUE", "NC")

_ANSI_ESCAPE_RE = re.compile(r'\\(?:033|e|x1[bB])\[[0-9;]*m')
_DEPENDENCIES_DECLARATION_RE = re.compile(r'^(\s*)DEPENDENCIES=\(\)', re.MULTILINE)

_VERBOSE_CASE_RE = re.compile(r'^\s*-v \| --verbose\)\s*$')
_CASE_END_RE = re.compile(r'^\s*;;\s*$')
_VERBOSE_DECLARATION_RE = re.compile(r'^\s*(?:local\s+)?verbose=')
_VERBOSE_USAGE_RE = re.compile(r'^\s*-v\|--verbose\b|\s--verbose$')
_VERBOSE_IF_RE = re.compile(r'^(\s*)if \[ "\$verbose"')


def strip_colors(sections: list[TemplateSection],
                 color_variables=COLOR_VARIABLES) -> list[TemplateSection]:
    """Remove the colour block, colour variable references and ANSI escapes."""
    reference_re = re.compile(
        r'\$\{(?:' + '|'.join(re.escape(name) for name in color_variables) + r')\}'
    )

    def plain(line):
        return _ANSI_ESCAPE_RE.sub('', reference_re.sub('', line))

    kept = drop_sections(sections, lambda section: section.kind == COLORS)
    return [section.with_lines([plain(line) for line in section.lines]) for section in kept]


def strip_verbose_helpers(sections: list[TemplateSection]) -> list[TemplateSection]:
    """Minimal mode: drop print_* helpers and every trace of the verbose flag."""
    kept = drop_sections(
        sections,
        lambda section: section.is_function and section.name.startswith("print_"),
    )
    return [section.with_lines(_strip_verbose_lines(section.lines)) for section in kept]


def drop_sections(sections: list[TemplateSection],
                  predicate: Callable[[TemplateSection], bool]) -> list[TemplateSection]:
    """Return sections without those matching predicate.

    A dropped section takes the blank separator lines in front of it, so
    removing a run of functions leaves a single blank line behind.
    """
    kept: list[TemplateSection] = []
    for index, section in enumerate(sections):
        if not predicate(section):
            kept.append(section.with_lines(section.lines))
            continue
        if kept and kept[-1].kind == TEXT and _next_starts_blank(sections, index):
            kept[-1] = kept[-1].with_lines(_without_trailing_blanks(kept[-1].lines))
    return kept


def inject_dependencies(text: str, dependencies: list[str]) -> str:
    """Rewrite the empty DEPENDENCIES=() declaration to list dependencies in order."""
    if not dependencies:
        return text
    joined = ' '.join(dependencies)
    return _DEPENDENCIES_DECLARATION_RE.sub(
        lambda match: f"{match.group(1)}DEPENDENCIES=({joined})", text, count=1
    )


def _strip_verbose_lines(lines: list[str]) -> list[str]:
    result: list[str] = []
    index = 0
    while index < len(lines):
        line = lines[index]
        if _VERBOSE_CASE_RE.match(line):
            index = _index_after(lines, index, lambda candidate: _CASE_END_RE.match(candidate))
            continue
        match = _VERBOSE_IF_RE.match(line)
        if match:
            closing = f"{match.group(1)}fi"
            index = _index_after(lines, index, lambda candidate: candidate.rstrip() == closing)
            if result and not result[-1].strip():
                result.pop()
            continue
        if _VERBOSE_DECLARATION_RE.match(line) or _VERBOSE_USAGE_RE.search(line.rstrip()):
            index += 1
            continue
        result.append(line)
        index += 1
    return result


def _index_after(lines, start, is_end):
    for i in range(start + 1, len(lines)):
        if is_end(lines[i]):
            return i + 1
    raise ValueError(f"Unterminated block starting with: {lines[start].strip()}")


def _next_starts_blank(sections, index):
    following = sections[index + 1:index + 2]
    return not following or not following[0].lines or not following[0].lines[0].strip()


def _without_trailing_blanks(lines):
    trimmed = list(lines)
    while trimmed and not trimmed[-1].strip():
        trimmed.pop()
    return trimmed
