"""Template renderer: loads bundled script templates and substitutes {{TOKEN}} placeholders."""

from pathlib import Path

import jinja2


_TEMPLATES_DIR = Path(__file__).parent / "script-templates"

FULL_TEMPLATE = "script-template.sh"
SIMPLE_TEMPLATE = "simple-script-template.sh"

_BLOCK_START, _BLOCK_END = "{%%shscaffold", "shscaffold%%}"
_COMMENT_START, _COMMENT_END = "{#%shscaffold", "shscaffold%#}"


def template_path(template_name: str) -> Path:
    return _TEMPLATES_DIR / template_name


def load_template(template_name: str) -> str:
    """Load a bundled script template.

    Args:
        template_name: Filename within shscaffold/script-templates/

    Returns:
        The raw template text

    Raises:
        FileNotFoundError: If the template file does not exist
    """
    path = template_path(template_name)
    if not path.is_file():
        raise FileNotFoundError(f"Template file not found: {path}")
    return path.read_text(encoding="utf-8")


def render_template(template_text: str, **variables) -> str:
    """Substitute {{TOKEN}} placeholders in template_text.

    Only {{TOKEN}} is markup. Block and comment delimiters are set to strings
    that never occur in bash, so `${#array[@]}` and `{%` pass through as text.
    Every token in the template must have a value; an unknown token raises
    jinja2.UndefinedError instead of leaving the marker in the output.
    """
    environment = jinja2.Environment(
        block_start_string=_BLOCK_START,
        block_end_string=_BLOCK_END,
        comment_start_string=_COMMENT_START,
        comment_end_string=_COMMENT_END,
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    return environment.from_string(template_text).render(**variables)
