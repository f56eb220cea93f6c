import errno
import shutil
import sys
from types import SimpleNamespace

import pytest

from usage.main import main
from usage.monitor import process_runner

REPORT_LABELS = [
    "User CPU time (s)",
    "System CPU time (s)",
    "Total CPU time (s)",
    "Total Wall time (s)",
    "",
    "Maximum memory (KB)",
    "Maximum memory (MB)",
    "Maximum memory (GB)",
    "",
    "Maximum code (KB)",
    "Maximum code (MB)",
    "",
    "Maximum data (KB)",
    "Maximum data (MB)",
    "",
    "Maximum stack (KB)",
    "Maximum stack (MB)",
    "",
    "Number of FS Reads ",
    "Number of FS Writes",
]


def labels(stdout):
    return [line.split(":")[0] for line in stdout.splitlines()]


def parse_report(stdout):
    values = {}
    for line in stdout.splitlines():
        if line:
            label, value = line.split(":")
            values[label] = float(value)
    return values


@pytest.mark.skipif(shutil.which("true") is None, reason="needs a 'true' executable")
def test_usage_true_prints_complete_report(run_usage):
    proc = run_usage("true")
    assert proc.returncode == 0
    assert proc.stderr == ""
    assert labels(proc.stdout) == REPORT_LABELS


def test_report_values_are_consistent(run_usage):
    proc = run_usage(sys.executable, "-c", "b = bytearray(10 * 1024 * 1024)")
    assert proc.returncode == 0
    report = parse_report(proc.stdout)
    assert report["Total CPU time (s)"] == report["User CPU time (s)"] + report["System CPU time (s)"]
    assert report["Total Wall time (s)"] >= 0
    assert report["Maximum memory (KB)"] > 0
    assert report["Maximum memory (MB)"] == report["Maximum memory (KB)"] // 1024


def test_child_failure_does_not_change_exit_status(run_usage):
    proc = run_usage(sys.executable, "-c", "raise SystemExit(5)")
    assert proc.returncode == 0
    assert labels(proc.stdout) == REPORT_LABELS


def test_missing_executable(run_usage):
    proc = run_usage("definitely-not-a-real-program-4f1c")
    assert proc.returncode != 0
    assert "Exec failed" in proc.stderr
    assert "No such file or directory" in proc.stderr


def test_no_command(run_usage):
    proc = run_usage()
    assert proc.returncode != 0
    assert "usage:" in proc.stderr
    assert "Traceback" not in proc.stderr
    assert proc.stdout == ""


def test_invalid_config_is_fatal(run_usage, home):
    config_dir = home / ".config" / "usage"
    config_dir.mkdir(parents=True)
    (config_dir / "config.yaml").write_text("cpu_divisor: product\n")

    proc = run_usage(sys.executable, "-c", "pass")
    assert proc.returncode == 1
    assert "Invalid cpu_divisor" in proc.stderr
    assert proc.stdout == ""


def test_log_file_receives_debug_records(run_usage, home):
    log_file = home / "usage.log"
    config_dir = home / ".config" / "usage"
    config_dir.mkdir(parents=True)
    (config_dir / "config.yaml").write_text(f"cpu_divisor: difference\nlog_file: {log_file}\n")

    proc = run_usage(sys.executable, "-c", "pass")
    assert proc.returncode == 0
    assert proc.stderr == ""
    content = log_file.read_text()
    assert "Spawned" in content
    assert "terminated with status 0" in content


class TestFatalErrors:
    """In-process runs of main(): fatal errors exit 1 and print no report."""

    @pytest.fixture(autouse=True)
    def isolated_home(self, home, monkeypatch):
        monkeypatch.setenv("HOME", str(home))

    def _oserror(self, *args, **kwargs):
        raise OSError(errno.EAGAIN, "Resource temporarily unavailable")

    def test_spawn_failure(self, monkeypatch, capsys):
        monkeypatch.setattr(process_runner.psutil, "Popen", self._oserror)
        assert main([sys.executable, "-c", "pass"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Fork failed: Resource temporarily unavailable" in captured.err

    def test_clock_failure(self, monkeypatch, capsys):
        monkeypatch.setattr(process_runner, "time", SimpleNamespace(time=self._oserror))
        assert main([sys.executable, "-c", "pass"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Failed to get start time" in captured.err

    def test_usage_query_failure(self, monkeypatch, capsys):
        monkeypatch.setattr(process_runner, "resource",
                            SimpleNamespace(getrusage=self._oserror, RUSAGE_CHILDREN=-1))
        assert main([sys.executable, "-c", "pass"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Getrusage failed" in captured.err

    def test_successful_run_returns_zero(self, capsys):
        assert main([sys.executable, "-c", "pass"]) == 0
        captured = capsys.readouterr()
        assert labels(captured.out.rstrip("\n")) == REPORT_LABELS
        assert captured.err == ""
