import os
import subprocess
import sys
from pathlib import Path

import pytest

from twmerge import MergeConfig

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def decompose_config() -> MergeConfig:
    return MergeConfig(decompose=True)


@pytest.fixture
def prefix_config() -> MergeConfig:
    """Framework prefix "tw-" as used by projects that namespace their classes."""
    return MergeConfig(class_prefix="tw-")


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a twmerge.yaml into tmp_path and return its path."""
    def _write(text: str, name: str = "twmerge.yaml") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


def run_cli(cwd: Path, *args: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH", "")]))
    return subprocess.run(
        [sys.executable, "-m", "twmerge", *args],
        cwd=cwd, env=env, capture_output=True, text=True, encoding="utf-8",
    )


@pytest.fixture
def cli():
    return run_cli
