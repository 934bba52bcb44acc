"""Tests for run_tests.py — the pytest command it builds."""

import importlib.util
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

RUNNER = Path(__file__).resolve().parent.parent / "run_tests.py"


@pytest.fixture
def runner():
    spec = importlib.util.spec_from_file_location("run_tests", RUNNER)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _command(runner, **kwargs):
    with patch.object(runner.subprocess, "run",
                      return_value=MagicMock(returncode=0)) as run:
        assert runner.run_tests(**kwargs) == 0
    return run.call_args[0][0]


def test_runs_whole_suite_without_marker_filter(runner, capsys):
    cmd = _command(runner)
    assert "tests/" in cmd
    assert "-m" not in cmd[3:]
    assert "not slow" not in cmd


def test_coverage_flags(runner, capsys):
    cmd = _command(runner, coverage=True)
    assert "--cov=clog" in cmd


def test_quiet_drops_verbose(runner, capsys):
    assert "-v" not in _command(runner, verbose=False)
    assert "-v" in _command(runner, verbose=True)


def test_no_all_flag(runner, capsys):
    with patch("sys.argv", ["run_tests.py", "--all"]):
        with pytest.raises(SystemExit):
            runner.main()
