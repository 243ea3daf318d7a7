"""issue-summoner CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click
from rich.table import Table

from issue_summoner import __version__
from issue_summoner.pipeline.ui import console


class CategorizedGroup(click.Group):
    """Help system that lists registered commands by category."""

    COMMAND_CATEGORIES = {
        "SCANNING": {
            "title": "SCANNING",
            "description": "Find actionable comments in source code",
            "commands": ["scan"],
            "command_meta": {
                "scan": {
                    "use_when": "Need a list of @TODO-style comments",
                },
            },
        },
    }

    def format_commands(self, ctx, formatter):
        """Override to suppress default command listing (we use categorized format in format_help)."""
        pass

    def format_help(self, ctx, formatter):
        super().format_help(ctx, formatter)

        registered = {
            name: cmd
            for name, cmd in self.commands.items()
            if not getattr(cmd, "hidden", False)
        }

        console.print()
        console.rule("[bold]COMMANDS[/bold]")

        for category_data in self.COMMAND_CATEGORIES.values():
            console.print(f"\n[bold cyan]{category_data['title']}[/bold cyan]")
            console.print(f"[dim]{category_data['description']}[/dim]")

            table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
            table.add_column("Command", style="cmd", width=12)
            table.add_column("Description", style="white")
            table.add_column("When", style="dim", width=40)

            for cmd_name in category_data["commands"]:
                if cmd_name not in registered:
                    continue
                cmd = registered[cmd_name]
                short_help = (cmd.help or "").split("\n")[0].strip().rstrip(".")
                meta = category_data.get("command_meta", {}).get(cmd_name, {})
                hint = f"USE: {meta['use_when']}" if "use_when" in meta else ""
                table.add_row(cmd_name, short_help, hint)

            console.print(table)

        console.print()
        console.rule()
        console.print("For detailed options: [cmd]summon <command> --help[/cmd]")


@click.group(cls=CategorizedGroup)
@click.version_option(version=__version__, prog_name="summon")
@click.help_option("-h", "--help")
def cli():
    """issue-summoner - Turn actionable comments into issue records

    \b
    QUICK START:
      summon scan                 # Report @TODO comments under the current directory
      summon scan -t @FIXME       # Search for a different tag

    \b
    For detailed options: summon <command> --help"""
    pass


from issue_summoner.commands.scan import scan

cli.add_command(scan)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
