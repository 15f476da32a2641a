"""Tests for the no-colors and minimal strippers and dependency injection."""

import re

from shscaffold.template_sections import (
    FUNCTION,
    TEXT,
    TemplateSection,
    function_names,
    join_sections,
    parse_sections,
)
from shscaffold.transforms import (
    drop_sections,
    inject_dependencies,
    strip_colors,
    strip_verbose_helpers,
)


def _no_colors(text):
    return join_sections(strip_colors(parse_sections(text)))


def _minimal(text):
    return join_sections(strip_verbose_helpers(parse_sections(text)))


class TestStripColors:

    def test_removes_ansi_escape_sequences(self, full_template):
        assert "\\033[" not in _no_colors(full_template)

    def test_removes_color_variable_references(self, full_template):
        result = _no_colors(full_template)

        assert re.search(r"\$\{(RED|GREEN|YELLOW|BLUE|NC)\}", result) is None

    def test_removes_color_declarations(self, full_template):
        result = _no_colors(full_template)

        assert "RED=" not in result
        assert "NO_COLOR" not in result
        assert "Color definitions" not in result

    def test_keeps_other_variable_references(self, full_template):
        result = _no_colors(full_template)

        assert "${SCRIPT_NAME}" in result
        assert '"${DEPENDENCIES[@]}"' in result

    def test_print_helpers_become_plain_echo(self, full_template):
        result = _no_colors(full_template)

        assert 'echo -e "[${step_num}/${total_steps}] ${message}"' in result

    def test_leaves_single_blank_line_where_block_was(self, full_template):
        result = _no_colors(full_template)

        assert 'VERSION="1.0.0"\n\nfunction usage() {' in result

    def test_only_named_variables_are_stripped(self):
        sections = parse_sections('echo "${MAGENTA}x${RED}"\n')

        result = join_sections(strip_colors(sections, color_variables=("MAGENTA",)))

        assert result == 'echo "x${RED}"\n'


class TestStripVerboseHelpers:

    def test_drops_every_print_helper(self, full_template):
        names = function_names(strip_verbose_helpers(parse_sections(full_template)))

        assert names == ["usage", "main", "process_data", "exit_on_missing_tools"]

    def test_no_print_helper_is_called(self, full_template):
        assert "print_" not in _minimal(full_template)

    def test_removes_verbose_branch_declarations_and_guards(self, full_template):
        result = _minimal(full_template)

        assert "--verbose" not in result
        assert "verbose=" not in result
        assert 'if [ "$verbose"' not in result

    def test_keeps_argument_parsing_and_dependency_check(self, full_template):
        result = _minimal(full_template)

        assert "-i | --input)" in result
        assert "-o | --output)" in result
        assert "--version)" in result
        assert "-h | --help)" in result
        assert 'exit_on_missing_tools "${DEPENDENCIES[@]}"' in result
        assert "function exit_on_missing_tools() {" in result

    def test_keeps_guard_clause(self, full_template):
        assert 'if [[ "${BASH_SOURCE[0]}" == "${0}" ]]; then' in _minimal(full_template)

    def test_does_not_leave_runs_of_blank_lines(self, full_template):
        assert "\n\n\n" not in _minimal(full_template)

    def test_removes_nested_verbose_block_only(self, full_template):
        result = _minimal(full_template)

        assert (
            '        echo "$result" > "$output_file"\n'
            '    else\n'
        ) in result

    def test_is_noop_for_simple_template(self, simple_template):
        assert _minimal(simple_template) == simple_template


class TestDropSections:

    def test_does_not_mutate_input(self):
        sections = [
            TemplateSection(kind=TEXT, lines=["a", ""]),
            TemplateSection(kind=FUNCTION, lines=["function f() {", "}"], name="f"),
            TemplateSection(kind=TEXT, lines=["", "b"]),
        ]

        kept = drop_sections(sections, lambda s: s.is_function)

        assert join_sections(kept) == "a\n\nb"
        assert sections[0].lines == ["a", ""]


class TestInjectDependencies:

    def test_lists_dependencies_in_input_order(self, full_template):
        result = inject_dependencies(full_template, ["jq", "curl", "git"])

        assert "DEPENDENCIES=(jq curl git)  # Add required external tools: (jq curl git)" in result

    def test_empty_list_leaves_declaration_empty(self, full_template):
        assert inject_dependencies(full_template, []) == full_template

    def test_only_rewrites_the_declaration(self, full_template):
        result = inject_dependencies(full_template, ["docker"])

        assert result.count("DEPENDENCIES=(docker)") == 1
        assert result.replace("DEPENDENCIES=(docker)", "DEPENDENCIES=()") == full_template

    def test_template_without_declaration_is_unchanged(self, simple_template):
        assert inject_dependencies(simple_template, ["jq"]) == simple_template
