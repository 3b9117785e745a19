import json
from pathlib import Path
import click
from .logic import verify_index

@click.group()
def main():
    pass

@main.command("index")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def index_cmd(path: Path):
    result = verify_index(path)
    click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    if result["status"] != "PASS":
        raise SystemExit(1)

if __name__ == "__main__":
    main()
