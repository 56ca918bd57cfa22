"""
End-to-End Tests for CLI Commands

Runs the click commands against configuration files pointing at
SQLite backends.
"""

import pytest
import yaml
from click.testing import CliRunner

from sqlbench.main import cli, main


@pytest.fixture
def runner():
    """CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def write_config(temp_dir):
    """Write a configuration file and return its path."""
    def write(backends, workloads):
        path = temp_dir / "bench.yaml"
        path.write_text(yaml.safe_dump({
            'logging': {'file': str(temp_dir / 'logs' / 'cli.log'), 'console_level': 'CRITICAL'},
            'suite': {'backends': backends, 'workloads': workloads},
        }))
        return str(path)
    return write


MEMORY = {'name': 'memory', 'driver': 'sqlite', 'target': '/:memory:'}
GHOST = {'name': 'ghost', 'driver': 'nosuchdialect', 'target': 'host/db'}


class TestRunCommand:
    """Tests for `sqlbench run`."""

    def test_run(self, runner, write_config):
        config = write_config([MEMORY], [{'name': 'select_one', 'iterations': 10}])

        result = runner.invoke(cli, ['--config', config, 'run'])

        assert result.exit_code == 0, result.output
        assert "Run.." in result.output
        assert "select_one 10 iterations" in result.output
        assert "memory" in result.output

    def test_registration_failure_does_not_stop_run(self, runner, write_config):
        config = write_config([GHOST, MEMORY], [{'name': 'select_one', 'iterations': 5}])

        result = runner.invoke(cli, ['--config', config, 'run'])

        assert result.exit_code == 0, result.output
        assert "Error registering backend 'ghost'" in result.output
        assert "select_one 5 iterations" in result.output

    def test_filters(self, runner, write_config):
        other = dict(MEMORY, name='other')
        config = write_config(
            [MEMORY, other],
            [{'name': 'select_one', 'iterations': 2}, {'name': 'select_param', 'iterations': 2}],
        )

        result = runner.invoke(cli, ['--config', config, 'run', '--backend', 'other', '--workload', 'select_param'])

        assert result.exit_code == 0, result.output
        assert "select_param 2 iterations" in result.output
        assert "select_one 2 iterations" not in result.output
        lines = result.output.splitlines()
        assert "other" in lines
        assert "memory" not in lines

    def test_no_backends_notice(self, runner, write_config):
        config = write_config([], [{'name': 'select_one', 'iterations': 1}])

        result = runner.invoke(cli, ['--config', config, 'run'])

        assert result.exit_code == 0
        assert "No backends registered to run benchmarks with!" in result.output

    def test_unknown_workload(self, runner, write_config):
        config = write_config([MEMORY], [{'name': 'mystery', 'iterations': 1}])

        result = runner.invoke(cli, ['--config', config, 'run'])

        assert result.exit_code != 0
        assert "Unknown workload 'mystery'" in str(result.exception)


class TestHealthCommand:
    """Tests for `sqlbench health`."""

    def test_all_healthy(self, runner, write_config):
        config = write_config([MEMORY], [])

        result = runner.invoke(cli, ['--config', config, 'health'])

        assert result.exit_code == 0, result.output
        assert "memory" in result.output
        assert "OK" in result.output

    def test_failure_sets_exit_code(self, runner, write_config):
        config = write_config([MEMORY, GHOST], [])

        result = runner.invoke(cli, ['--config', config, 'health'])

        assert result.exit_code == 1
        assert "FAILED (open)" in result.output


class TestWorkloadsCommand:
    """Tests for `sqlbench workloads`."""

    def test_lists_builtins(self, runner, write_config):
        config = write_config([], [])

        result = runner.invoke(cli, ['--config', config, 'workloads'])

        assert result.exit_code == 0, result.output
        for name in ("select_one", "select_param", "insert_rows"):
            assert name in result.output


class TestMainEntryPoint:
    """Tests for the console script wrapper."""

    def test_application_error_exits_with_status_1(self, write_config, monkeypatch, capsys):
        config = write_config([MEMORY], [{'name': 'mystery', 'iterations': 1}])
        monkeypatch.setattr('sys.argv', ['sqlbench', '--config', config, 'run'])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "Unknown workload 'mystery'" in capsys.readouterr().err

    def test_success_exits_cleanly(self, write_config, monkeypatch):
        config = write_config([], [])
        monkeypatch.setattr('sys.argv', ['sqlbench', '--config', config, 'workloads'])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
