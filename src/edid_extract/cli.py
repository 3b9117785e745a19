"""EDID Extract - pull raw EDIDs out of verbose X logs and text dumps."""
from __future__ import annotations

from pathlib import Path

import click

from edid_extract.collect import extract_edids


@click.command()
@click.option(
    "-E",
    "--extract-edids-from-file",
    "input_file",
    required=True,
    type=click.Path(path_type=Path),
    help="Extract any raw EDID byte blocks contained in the specified X log "
    "file or text dump and write each one to its own binary file.",
)
@click.option(
    "--extract-edids-output-file",
    "output_file",
    default=None,
    help="Base filename for the extracted EDIDs (default: edid.bin in the "
    "current directory, your home directory, or /tmp). A numeric suffix is "
    "appended when the file already exists.",
)
@click.option(
    "--index",
    "index_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write a parquet index of the extracted EDID files.",
)
def main(input_file: Path, output_file: str | None, index_path: Path | None) -> None:
    """Extract EDIDs from a verbose X log or a text dump."""
    try:
        result = extract_edids(input_file, output_file, index_path=index_path)
    except Exception as e:
        # Fail closed with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    if not result.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
