"""
Tests for the command-line interface.
"""

import pytest

from thumbmatch.cli import main, parse_arguments
from thumbmatch.cli.orchestrator import CLIOrchestrator
from thumbmatch.config import DEFAULT_WORKERS, REVIEW_THRESHOLD


def cli_args(dirs, *extra):
    return [
        '--fullsize', str(dirs['fullsize']),
        '--thumbnail', str(dirs['thumbnail']),
        '--cache', str(dirs['cache']),
        '--output', str(dirs['output']),
        '--no-progress',
        *extra,
    ]


@pytest.fixture(autouse=True)
def isolated_config(temp_dir, monkeypatch):
    """Keep the user's real config out of argument defaults."""
    from thumbmatch.user_config import get_user_config

    monkeypatch.setenv('THUMBMATCH_CONFIG_DIR', str(temp_dir / "config"))
    for var in ('THUMBMATCH_WORKERS', 'THUMBMATCH_REVIEW_THRESHOLD', 'THUMBMATCH_CACHE_DIR'):
        monkeypatch.delenv(var, raising=False)
    get_user_config().reload()
    yield
    get_user_config().reload()


class TestParseArguments:
    """Test argument parsing."""

    def test_defaults(self, sample_dirs):
        args = parse_arguments(cli_args(sample_dirs))
        assert args.workers == DEFAULT_WORKERS
        assert args.review_threshold == REVIEW_THRESHOLD
        assert args.skip_invalid is False
        assert args.clear_cache is False
        assert args.fullsize == sample_dirs['fullsize']

    def test_workers_and_threshold(self, sample_dirs):
        args = parse_arguments(cli_args(sample_dirs, '-w', '8', '-t', '3'))
        assert args.workers == 8
        assert args.review_threshold == 3

    def test_required_directories(self):
        with pytest.raises(SystemExit):
            parse_arguments(['--fullsize', 'f'])

    def test_env_overrides_default_workers(self, sample_dirs, monkeypatch):
        monkeypatch.setenv('THUMBMATCH_WORKERS', '2')
        assert parse_arguments(cli_args(sample_dirs)).workers == 2


class TestMain:
    """Test the full CLI run."""

    def test_successful_run(self, sample_dirs, capsys):
        assert main(cli_args(sample_dirs, '-w', '1')) == 0
        assert (sample_dirs['output'] / "a.png").exists()

        out = capsys.readouterr().out
        assert "THUMBNAIL MATCH REPORT" in out
        assert "a_thumb.png -> a.png" in out

    def test_invalid_workers(self, sample_dirs):
        assert main(cli_args(sample_dirs, '-w', '0')) == 1

    def test_invalid_threshold(self, sample_dirs):
        assert main(cli_args(sample_dirs, '-t', '100')) == 1

    def test_output_same_as_fullsize(self, sample_dirs):
        dirs = dict(sample_dirs, output=sample_dirs['fullsize'])
        assert main(cli_args(dirs)) == 1

    def test_failure_returns_error_code(self, sample_dirs):
        (sample_dirs['thumbnail'] / "broken.png").write_text("not an image")
        assert main(cli_args(sample_dirs)) == 1

    def test_skip_invalid(self, sample_dirs):
        (sample_dirs['thumbnail'] / "broken.png").write_text("not an image")
        assert main(cli_args(sample_dirs, '--skip-invalid')) == 0
        assert (sample_dirs['output'] / "a.png").exists()

    def test_clear_cache_rehashes(self, sample_dirs):
        stale = sample_dirs['cache'] / "thumbnail" / "a_thumb.png"
        stale.parent.mkdir(parents=True)
        stale.write_text("not-a-valid-hash")

        assert main(cli_args(sample_dirs)) == 1
        assert main(cli_args(sample_dirs, '--clear-cache')) == 0
        assert (sample_dirs['output'] / "a.png").exists()

    def test_decompression_bomb_returns_error_code(self, sample_dirs, monkeypatch):
        from PIL import Image

        monkeypatch.setattr(Image, 'MAX_IMAGE_PIXELS', 100)
        assert main(cli_args(sample_dirs, '-w', '1')) == 1
        assert not (sample_dirs['output'] / "a.png").exists()


class TestCLIOrchestrator:
    """Test CLIOrchestrator state."""

    def test_initial_state(self):
        orchestrator = CLIOrchestrator([])
        assert orchestrator.show_progress is True
        assert orchestrator.context is None
        assert orchestrator.report is None
