"""Click command for the shscaffold script generator."""

import click

from shscaffold.generation_request import (
    DEFAULT_OUTPUT_DESCRIPTION,
    GenerationRequest,
    parse_dependencies,
)
from shscaffold.output_style import OutputStyle
from shscaffold.scaffold_command import ScaffoldCommand


EXAMPLES = """\b
Examples:
  shscaffold -n backup.sh -d "Backup MySQL databases"
  shscaffold --name deploy.sh --description "Deploy application" --dependencies "docker,kubectl"
  shscaffold -n process.sh -d "Process log files" -o ~/scripts/ --minimal
"""


def _exit_with_usage(ctx, message):
    OutputStyle.from_environ().error(f"Error: {message}")
    click.echo(ctx.get_help())
    ctx.exit(1)


class UsageExitCommand(click.Command):
    """Reports usage errors with the full help text and exit status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            _exit_with_usage(ctx, exc.format_message())

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            _exit_with_usage(ctx, exc.format_message())


def _show_usage(ctx, _param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help())
    ctx.exit(1)


def _dependencies_option(_ctx, _param, value):
    try:
        return parse_dependencies(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.command("shscaffold", cls=UsageExitCommand, epilog=EXAMPLES,
               context_settings={"help_option_names": []})
@click.option("-n", "--name", required=True, metavar="NAME",
              help="Script name (.sh is appended when missing)")
@click.option("-d", "--description", required=True, metavar="DESC",
              help="Script description")
@click.option("-a", "--author", envvar="SHSCAFFOLD_AUTHOR", metavar="AUTHOR",
              help="Author name (default: git user.name, then the login name)")
@click.option("-o", "--output", default=".", envvar="SHSCAFFOLD_OUTPUT", metavar="PATH",
              help="Output directory (default: current directory)")
@click.option("--dependencies", callback=_dependencies_option, metavar="DEPS",
              help='Comma-separated list of dependencies (e.g. "jq,curl,git")')
@click.option("--no-colors", is_flag=True,
              help="Generate script without color support")
@click.option("--minimal", is_flag=True,
              help="Generate minimal script without print_* helpers or --verbose")
@click.option("--simple", is_flag=True,
              help="Use the simple template without argument parsing")
@click.option("--output-description", default=DEFAULT_OUTPUT_DESCRIPTION, metavar="TEXT",
              help="Output line for the simple template header")
@click.option("-f", "--force", is_flag=True,
              help="Overwrite an existing file without asking")
@click.option("-h", "--help", is_flag=True, expose_value=False, is_eager=True,
              callback=_show_usage, help="Show this help message")
def main(**kwargs):
    """Generate a new bash script following best practices."""
    request = GenerationRequest(**kwargs)
    request.validate()
    ScaffoldCommand(request, OutputStyle.from_environ()).execute()
