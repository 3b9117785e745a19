import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO = Path(__file__).resolve().parents[1]


def run(args, cwd=REPO):
    env = dict(os.environ, PYTHONPATH=str(REPO / "src"))
    return subprocess.run(
        [sys.executable, *args], cwd=cwd, env=env, check=False, capture_output=True, text=True
    )


@pytest.fixture
def write_input(tmp_path):
    def _write(content: bytes, name: str = "input.log") -> Path:
        p = tmp_path / name
        p.write_bytes(content)
        return p
    return _write
