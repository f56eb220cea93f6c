import os
import sys
import subprocess
from pathlib import Path
from types import SimpleNamespace

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def make_rusage(**overrides):
    """Stand-in for resource.struct_rusage with every field at zero."""
    fields = dict(
        ru_utime=0.0, ru_stime=0.0, ru_maxrss=0,
        ru_ixrss=0, ru_idrss=0, ru_isrss=0,
        ru_inblock=0, ru_oublock=0,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture
def home(tmp_path):
    """Isolated HOME so a user's own config.yaml never leaks into a test."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def run_usage(home):
    def _run(*argv):
        env = dict(os.environ)
        env["HOME"] = str(home)
        env["PYTHONPATH"] = str(PROJECT_ROOT)
        return subprocess.run(
            [sys.executable, "-m", "usage", *argv],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )
    return _run
