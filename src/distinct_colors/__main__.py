# Copyright 2025 ICube (University of Strasbourg - CNRS)
# author: Julien PONTABRY (ICube)
#
# This software is a computer program whose purpose is to generate sets of
# visually distinct colors, for instance to tell apart the series of a chart
# or the nodes of a graph.
#
# This software is governed by the CeCILL-B license under French law and
# abiding by the rules of distribution of free software. You can use,
# modify and/or redistribute the software under the terms of the CeCILL-B
# license as circulated by CEA, CNRS and INRIA at the following URL
# "http://www.cecill.info".
#
# As a counterpart to the access to the source code and rights to copy,
# modify and redistribute granted by the license, users are provided only
# with a limited warranty and the software's author, the holder of the
# economic rights, and the successive licensors have only limited
# liability.
#
# In this respect, the user's attention is drawn to the risks associated
# with loading, using, modifying and/or developing or reproducing the
# software by the user in light of its specific status of free software,
# that may mean that it is complicated to manipulate, and that also
# therefore means that it is reserved for developers and experienced
# professionals having in-depth computer knowledge. Users are therefore
# encouraged to load and test the software's suitability as regards their
# requirements in conditions enabling the security of their systems and/or
# data to be ensured and, more generally, to use and operate it in the
# same conditions as regards security.
#
# The fact that you are presently reading this means that you have had
# knowledge of the CeCILL-B license and that you accept its terms.

__help_epilog = []

import json
import logging.config
from importlib.resources import files
from pathlib import Path
from typing import Optional, Tuple

import rich_click as click
import yaml
from rich.console import Console
from rich.markup import escape

try:
    from matplotlib import pyplot as plt
except ImportError:
    plt = None
    __help_epilog.append(f"⚠️  Install '{__package__}[plot]' to unlock the plotting command.")

from .color import generate_distinct_colors
from .palette import assign_distinct_colors


console = Console()
error_console = Console(stderr=True, style="bold red")


class __OrderedGroup(click.RichGroup):
    def list_commands(self, ctx):
        return list(self.commands)


@click.group(context_settings={'help_option_names': ['-h', '--help']},
             cls=__OrderedGroup, epilog="\n\n".join(__help_epilog))
@click.version_option(None, '--version', '-v', package_name=__package__, prog_name=__package__)
def cli():
    """Generate sets of visually distinct colors."""
    pass


## generating #################################################################

def __swatch(color: str) -> str:
    return f"[on {color}]    [/] {color}"


@cli.command()
@click.argument('n', type=click.IntRange(min=0))
@click.option('-f', '--format', 'output_format', type=click.Choice(['text', 'json']),
              default='text', show_default=True,
              help="How to print the colors: one per line with a swatch, or as a JSON array.")
def generate(n: int, output_format: str):
    """Generate N distinct colors evenly spaced in hue.

    The colors are printed as hexadecimal strings '#rrggbb', by ascending hue.
    """
    colors = generate_distinct_colors(n)

    if output_format == 'json':
        click.echo(json.dumps(colors))
    else:
        for color in colors:
            console.print(__swatch(color))


@cli.command()
@click.argument('labels', nargs=-1, required=True)
def palette(labels: Tuple[str, ...]):
    """Assign a distinct color to each of the LABELS.

    Duplicated labels get a single color. Each line holds a label followed by its color.
    """
    for label, color in assign_distinct_colors(labels).items():
        console.print(f"{escape(label)} {__swatch(color)}", soft_wrap=True)


## plotting ###################################################################

@click.command()
@click.argument('n', type=click.IntRange(min=1))
@click.option('-o', '--output', type=click.Path(dir_okay=False, writable=True, path_type=Path),
              default=None, show_default="the figure is shown in a window",
              help="Path where to save the figure (the format is guessed from the extension).")
def plot(n: int, output: Optional[Path]):
    """Plot N distinct colors as swatches."""
    colors = generate_distinct_colors(n)

    fig, ax = plt.subplots(figsize=(max(4.0, 0.6 * n), 2.0))
    ax.bar(range(n), [1] * n, width=1, color=colors)
    ax.set_xticks(range(n), labels=colors, rotation=90, fontfamily='monospace')
    ax.set_yticks([])
    ax.set_xlim(-0.5, n - 0.5)
    ax.set_title(f"{n} distinct colors")
    fig.tight_layout()

    if output is None:
        plt.show()
    else:
        try:
            fig.savefig(output)
        except OSError as ex:
            error_console.print(f"Error while saving to {output}: {ex}")
            exit(1)
        finally:
            plt.close(fig)


def main():
    # setup logging
    logging_config_path = files(__package__).joinpath('logging.yml')
    with logging_config_path.open() as f:
        logging_config = yaml.safe_load(f.read())
        logging.config.dictConfig(logging_config)

    # setup CLI
    if plt is not None:
        cli.add_command(plot)

    cli()


if __name__ == '__main__':
    main()
