"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add project root and src to path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from the repo's config/settings.yaml and no overrides."""
    from anno import config

    for var in ("ANNO_COMMAND_PREFIX", "ANNO_MAX_WORKERS", "ANNO_LOG_LEVEL", "FORCE_COLOR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("ANNO_CONFIG_DIR", str(ROOT / "config"))
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def project_root():
    return ROOT


@pytest.fixture
def target_file(tmp_path):
    """A three-line source file to annotate."""
    path = tmp_path / "example.c"
    path.write_text("int main(void) {\n  return 0;\n}\n", encoding="utf-8")
    return path


@pytest.fixture
def producer_bin(tmp_path, monkeypatch):
    """Factory for fake `anno-<name>` producers on a temporary PATH.

    make_producer("x", output="a\\nb\\n") prints that output;
    make_producer("x", script="exit 3") runs an arbitrary sh body.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def make_producer(name: str, output: str | None = None, script: str | None = None) -> Path:
        if script is None:
            data = bin_dir / f"{name}.out"
            data.write_text(output or "", encoding="utf-8")
            script = f'cat "{data}"\n'
        path = bin_dir / f"anno-{name}"
        path.write_text("#!/bin/sh\n" + script, encoding="utf-8")
        path.chmod(0o755)
        return path

    return make_producer
