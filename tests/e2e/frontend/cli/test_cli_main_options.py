"""End-to-end CLI tests for the top-level `depthsweep` command.

These tests exercise logging, verbosity flags, logger-level overrides, debug
formatting, and the in-memory flight-recorder by invoking the `log-demo`
command under various CLI flags and environment variables.
"""

import re
from pathlib import Path

import pytest

from depthsweep.entrypoints.cli.main import depthsweep

# pylint: disable=unused-argument


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def test_default_shows_warning(registered_log_demo, runner, fs):
    """Default invocation shows WARNING and above but not INFO."""
    result = runner.invoke(depthsweep, ["log-demo"])
    assert result.exit_code == 0
    assert_in_output("WARNING", result.output)
    assert_not_in_output("INFO", result.output)


def test_verbose_shows_info(registered_log_demo, runner, fs):
    """Single -v should enable INFO-level console output (but not DEBUG)."""
    result = runner.invoke(depthsweep, ["-v", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("INFO", result.output)
    assert_not_in_output("DEBUG", result.output)


def test_vv_shows_debug(registered_log_demo, runner, fs):
    """-vv should enable DEBUG-level console output."""
    result = runner.invoke(depthsweep, ["-vv", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("DEBUG", result.output)


def test_quiet_suppresses_warning(registered_log_demo, runner, fs):
    """-q should lower verbosity so WARNING is suppressed and ERROR remains."""
    result = runner.invoke(depthsweep, ["-q", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("ERROR", result.output)
    assert_not_in_output("WARNING", result.output)


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
        ({"DEPTHSWEEP_LOGGER_LEVEL": "some.thirdparty=INFO"}, ["-vv"]),
    ],
)
def test_logger_level_silences_debug(registered_log_demo, runner, fs, env, cli_args):
    """Logger-level overrides should silence third-party DEBUG while keeping INFO+."""
    result = runner.invoke(depthsweep, cli_args + ["log-demo"], env=env)
    assert result.exit_code == 0
    assert_not_in_output(
        "This is a debug-level third-party test message.", result.output
    )
    assert_in_output("This is an info-level third-party test message.", result.output)


def test_invalid_logger_level_is_a_usage_error(registered_log_demo, runner, fs):
    """A malformed -L value is rejected before any command runs."""
    result = runner.invoke(depthsweep, ["-L", "some.thirdparty=LOUD", "log-demo"])
    assert result.exit_code == 2
    assert_in_output("Invalid log level: LOUD", result.output)


def test_debug_mode_shows_paths(registered_log_demo, runner, fs):
    """When --debug is set, log output includes file paths and line numbers."""
    result = runner.invoke(depthsweep, ["--debug", "log-demo"])
    assert result.exit_code == 0
    assert_in_output(r"conftest\.py:\d+\b", result.output)


def test_debug_mode_is_off_by_default(registered_log_demo, runner, fs):
    """By default, file paths should not be included in log output."""
    result = runner.invoke(depthsweep, ["log-demo"])
    assert result.exit_code == 0
    assert_not_in_output(r"conftest\.py:\d+\b", result.output)


def test_flight_recorder_flush_on_warning(registered_log_demo, runner, fs):
    """Flight recorder writes buffered DEBUG logs to disk when a WARNING occurs."""
    log_path = "flight_recorder.log"
    result = runner.invoke(
        depthsweep,
        ["--log-path", log_path, "-L", "some.thirdparty=INFO", "log-demo"],
    )
    assert result.exit_code == 0
    content = Path(log_path).read_text(encoding="utf-8")
    assert_in_output("This is a debug-level test message.", content)
    assert_not_in_output("This is a debug-level third-party test message.", content)
    assert_in_output("This is an info-level third-party test message.", content)
    assert_in_output("This is a critical-level test message.", content)
    # buffered after the last WARNING, never flushed
    assert_not_in_output("This is a final debug-level test message.", content)


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, ["--force-flush"]), ({"DEPTHSWEEP_FORCE_FLUSH_FLIGHT_RECORDER": "true"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_flight_recorder_force_flush(registered_log_demo, runner, fs, env, cli_args):
    """When force-flush is enabled (CLI flag or env var), the final DEBUG buffer is written."""
    log_path = "flight_recorder.log"
    cli = ["--log-path", log_path] + cli_args + ["log-demo"]
    result = runner.invoke(depthsweep, cli, env=env)
    assert result.exit_code == 0
    content = Path(log_path).read_text(encoding="utf-8")
    assert_in_output("This is a final debug-level test message.", content)


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, ["--no-flight-recorder"]), ({"DEPTHSWEEP_FLIGHT_RECORDER": "0"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_flight_recorder_can_be_disabled(
    registered_log_demo, runner, fs, env, cli_args
):
    """Disabling the flight recorder should prevent writing the log file."""
    log_path = "flight_recorder.log"
    cli = ["--log-path", log_path] + cli_args + ["log-demo"]
    result = runner.invoke(depthsweep, cli, env=env)
    assert result.exit_code == 0
    assert not Path(log_path).exists()


def test_flight_recorder_truncates_log(registered_log_demo, runner, fs):
    """Flight recorder log file should be truncated between runs (not appended)."""
    log_path = "flight_recorder.log"

    result1 = runner.invoke(depthsweep, ["--log-path", log_path, "log-demo"])
    assert result1.exit_code == 0
    num_lines1 = len(Path(log_path).read_text(encoding="utf-8").splitlines())

    result2 = runner.invoke(depthsweep, ["--log-path", log_path, "log-demo"])
    assert result2.exit_code == 0
    num_lines2 = len(Path(log_path).read_text(encoding="utf-8").splitlines())

    assert num_lines1 == num_lines2


def test_startup_logging(registered_log_demo, runner, fs):
    """Startup diagnostics land in the flight recorder."""
    log_path = "startup.log"
    result = runner.invoke(
        depthsweep,
        ["--log-path", log_path, "--flight-recorder", "--force-flush", "log-demo"],
        env={"DEPTHSWEEP_LOGGER_LEVEL": "some.thirdparty=INFO"},
    )
    assert result.exit_code == 0
    content = Path(log_path).read_text(encoding="utf-8")
    assert_in_output(r"DEPTHSWEEP \d+\.\d+\.\d+", content)
    assert_in_output(r"console=WARNING", content)
    assert_in_output(r"flight-recorder=ON", content)
    assert_in_output(r"Python: \d+\.\d+\.\d+", content)
    assert_in_output(r"Platform: .+", content)
    assert_in_output(r"PID: \d+", content)
    assert_in_output(r"CWD: .+", content)
    assert_in_output(r"Click: \d+\.\d+", content)
    assert_in_output(r"Rich: \d+\.\d+", content)
    assert_in_output(r"Handlers: .+", content)
    assert_in_output(
        r"Flight recorder: path=startup\.log, capacity=2000, flush_on_close=True",
        content,
    )
    assert_in_output(
        r"Per-logger overrides: {'click_extra': 'WARNING', 'some.thirdparty': 'INFO'}",
        content,
    )
