import sys
from pathlib import Path

import click

from .decoder import decode_image
from .errors import QOIDecodeError
from .header import read_header
from .writer import save_image, write_ppm


def _stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


@click.command()
@click.option("-f", "--force", is_flag=True, help="Write to stdout even if it is a terminal.")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to a file instead of stdout; the format follows the extension.",
)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def main(ctx, path: Path, force: bool, output: Path):
    """Decode the QOI image PATH into a binary PPM."""
    if output is None and _stdout_is_terminal() and not force:
        click.echo("Refusing to output .pnm to terminal, pass -f to override!", err=True)
        ctx.exit(2)

    try:
        with open(path, "rb") as f:
            header = read_header(f)
            image = decode_image(header.width, header.height, f)
    except QOIDecodeError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if output is None:
        out = sys.stdout.buffer
        write_ppm(image, out)
        out.flush()
        return

    try:
        save_image(image, output, header.channels)
    except (ValueError, OSError) as e:
        click.echo(f"Error: Cannot write {output}: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Converted {path} to {output}", err=True)


if __name__ == "__main__":
    main()
