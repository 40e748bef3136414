"""
depscope CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import box, expand, legend, search, stats


@click.group()
@click.version_option(package_name="depscope")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """depscope: explore metadata dependency graphs.

    Select components by box, by regex search or by walking edges, and see
    the selection grouped the way the explorer's side panel shows it.

    \b
    Quick Start:
      depscope legend -i data/tgraph.json
      depscope search Account -a fullName --expand 1
      depscope box 100 100 400 300 --tx 20 --ty 10 --scale 1.5
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(box.box)
main.add_command(search.search)
main.add_command(expand.expand)
main.add_command(legend.legend)
main.add_command(stats.stats)

if __name__ == "__main__":
    main()
