"""Scan a project for actionable comments.

Usage: summon scan --path . --tag @TODO
"""

import json
import os
import sys

import click
from rich.markup import escape

from issue_summoner.utils.error_handler import handle_exceptions
from issue_summoner.utils.exit_codes import ExitCodes


@click.command("scan")
@click.option(
    "-p", "--path",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Path to your local git project (default: current directory)",
)
@click.option("-t", "--tag", "annotation", default=None, help="Actionable comment tag to search for (default: @TODO)")
@click.option(
    "-g", "--gitignore-path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to .gitignore file (default: <path>/.gitignore)",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option("--save", type=click.Path(dir_okay=False), help="Also write the JSON report to this file")
@click.option("--show-patterns", is_flag=True, help="Print the compiled ignore patterns")
@click.option("--fail-on-tags", is_flag=True, help="Exit 2 if any tag is found")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@handle_exceptions
def scan(path, annotation, gitignore_path, output_format, save, show_patterns, fail_on_tags, verbose):
    """Scan source files for actionable comments and report them.

    Walks the project, skipping the .git directory and anything matched by
    the ignore file, and collects every comment that carries the tag. The
    rest of the tag's line becomes the title. Following lines of the same
    comment become the description.

    \b
    Examples:
      summon scan                         # @TODO tags under the current directory
      summon scan -p ../service -t @FIXME
      summon scan --format json --save .summoner/report.json

    \b
    Comment syntax is chosen by file extension:
      C-style (// and /* */): .c .cpp .cs .go .java .js .jsx .kt .m .php .rs .scala .swift .ts .tsx
      Python (# and triple quotes): .py
      Markdown (<!-- -->): .md
      Everything else: #
    """
    from issue_summoner.config_runtime import load_runtime_config
    from issue_summoner.pipeline.ui import build_tag_table, console, print_success
    from issue_summoner.report import build_report, write_report
    from issue_summoner.tag import compile_ignore_file, walk
    from issue_summoner.utils.logging import logger, set_console_level

    if verbose:
        set_console_level("DEBUG")

    root = path or os.getcwd()
    config = load_runtime_config(root)
    annotation = annotation or config["scan"]["annotation"]
    encoding = config["scan"]["encoding"]

    if gitignore_path is None:
        gitignore_path = os.path.join(root, config["scan"]["ignore_file"])

    patterns = compile_ignore_file(gitignore_path, encoding=encoding)
    if show_patterns:
        for pattern in patterns:
            suffix = " (negation not applied)" if pattern.negated else ""
            console.print(f"Ignore Pattern: {escape(pattern.raw)}{suffix}", highlight=False)

    logger.debug(f"Scanning {root} for {annotation}")
    tags = walk(root, annotation, patterns, encoding=encoding)
    report = build_report(tags, root, annotation)

    if output_format == "json":
        click.echo(json.dumps(report, indent=2))
    elif tags:
        console.print(build_tag_table(tags, annotation))
        console.print(f"Found {len(tags)} {escape(annotation)} tag(s)", highlight=False)
    else:
        print_success(f"No {escape(annotation)} tags found")

    if save:
        saved = write_report(report, save)
        click.echo(f"Report saved to {saved}", err=True)

    if fail_on_tags and tags:
        sys.exit(ExitCodes.TAGS_FOUND)
