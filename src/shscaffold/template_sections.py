"""Parse a bash script template into top-level sections."""

import re
from dataclasses import dataclass, field


TEXT = "text"
FUNCTION = "function"
COLORS = "colors"

_FUNCTION_START_RE = re.compile(r'^function ([A-Za-z_][A-Za-z0-9_]*)\(\)\s*\{\s*$')
_COLORS_START_RE = re.compile(r'^#.*\bColor definitions\b')
_BLOCK_END_RE = {
    FUNCTION: re.compile(r'^\}\s*$'),
    COLORS: re.compile(r'^fi\s*$'),
}


@dataclass
class TemplateSection:
    """A run of template lines: a top-level function, the colour block, or plain text."""

    kind: str
    lines: list[str] = field(default_factory=list)
    name: str | None = None

    @property
    def is_function(self) -> bool:
        return self.kind == FUNCTION

    @property
    def is_blank(self) -> bool:
        return all(not line.strip() for line in self.lines)

    def with_lines(self, lines: list[str]) -> "TemplateSection":
        return TemplateSection(kind=self.kind, lines=list(lines), name=self.name)


def parse_sections(text: str) -> list[TemplateSection]:
    """Split template text into sections.

    A function section runs from a column-0 ``function NAME() {`` line to the
    next column-0 ``}``. The colour section runs from a column-0
    ``# Color definitions`` comment to the next column-0 ``fi``. Everything
    else is text. ``join_sections(parse_sections(text)) == text``.
    """
    lines = text.split('\n')
    sections: list[TemplateSection] = []
    pending: list[str] = []
    index = 0

    while index < len(lines):
        kind, name = _classify_start(lines[index])
        if kind is None:
            pending.append(lines[index])
            index += 1
            continue

        end = _find_block_end(lines, index, kind, name)
        if pending:
            sections.append(TemplateSection(kind=TEXT, lines=pending))
            pending = []
        sections.append(TemplateSection(kind=kind, lines=lines[index:end + 1], name=name))
        index = end + 1

    if pending:
        sections.append(TemplateSection(kind=TEXT, lines=pending))
    return sections


def join_sections(sections: list[TemplateSection]) -> str:
    return '\n'.join(line for section in sections for line in section.lines)


def function_names(sections: list[TemplateSection]) -> list[str]:
    return [section.name for section in sections if section.is_function]


def _classify_start(line: str) -> tuple[str | None, str | None]:
    match = _FUNCTION_START_RE.match(line)
    if match:
        return FUNCTION, match.group(1)
    if _COLORS_START_RE.match(line):
        return COLORS, None
    return None, None


def _find_block_end(lines: list[str], start: int, kind: str, name: str | None) -> int:
    end_re = _BLOCK_END_RE[kind]
    for i in range(start + 1, len(lines)):
        if end_re.match(lines[i]):
            return i
    label = f"function {name}" if name else "color definitions block"
    raise ValueError(f"Unterminated {label} starting at line {start + 1}")
