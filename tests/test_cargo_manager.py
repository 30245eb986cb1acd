"""Tests for cargo project and dependency management."""
from pathlib import Path

from conftest import RecordingRunner

from scaffolder.services.cargo_manager import CargoManager


class TestCreateProject:
    """Test cargo new handling."""

    def test_runs_cargo_new_in_parent_dir(self, runner, tmp_path):
        """cargo new runs from the parent directory."""
        manager = CargoManager(runner)

        assert manager.create_project("demo", tmp_path) is True
        assert runner.calls == [(["cargo", "new", "demo"], tmp_path, None)]

    def test_existing_directory_fails_without_running_cargo(self, runner, tmp_path):
        """An existing target directory is rejected before cargo is spawned."""
        (tmp_path / "demo").mkdir()
        manager = CargoManager(runner)

        assert manager.create_project("demo", tmp_path) is False
        assert runner.calls == []

    def test_cargo_failure(self, tmp_path):
        """Non-zero cargo exit reports failure."""
        runner = RecordingRunner(failures=[["cargo", "new"]])
        manager = CargoManager(runner)

        assert manager.create_project("demo", tmp_path) is False

    def test_custom_cargo_binary(self, runner, tmp_path):
        """Configured cargo binary replaces the default."""
        manager = CargoManager(runner, cargo_bin="/opt/cargo/bin/cargo")

        manager.create_project("demo", tmp_path)

        assert runner.commands == [["/opt/cargo/bin/cargo", "new", "demo"]]


class TestAddDependency:
    """Test cargo add scoped to a project."""

    def test_without_features(self, runner):
        """No --features flag when none are given."""
        manager = CargoManager(runner)

        assert manager.add_dependency(Path("/work/demo"), "axum") is True
        assert runner.calls == [(["cargo", "add", "axum"], Path("/work/demo"), None)]

    def test_features_passed_verbatim(self, runner):
        """Feature lists go to cargo unchanged."""
        manager = CargoManager(runner)

        manager.add_dependency(Path("/work/demo"), "tokio", "full")
        manager.add_dependency(Path("/work/demo"), "sqlx", "runtime-tokio,postgres")

        assert runner.commands == [
            ["cargo", "add", "tokio", "--features", "full"],
            ["cargo", "add", "sqlx", "--features", "runtime-tokio,postgres"],
        ]

    def test_failure(self):
        """Failed cargo add returns False."""
        runner = RecordingRunner(failures=[["cargo", "add", "nope"]])
        manager = CargoManager(runner)

        assert manager.add_dependency(Path("/work/demo"), "nope") is False


class TestAddCrate:
    """Test the pass-through add used by the add command."""

    def test_latest_has_no_version_qualifier(self, runner):
        """"latest" adds the bare crate name."""
        manager = CargoManager(runner)

        assert manager.add_crate("foo", version="latest") is True
        assert runner.commands == [["cargo", "add", "foo"]]

    def test_pinned_version(self, runner):
        """Explicit versions use name@version."""
        manager = CargoManager(runner)

        manager.add_crate("foo", version="1.2.3")

        assert runner.commands == [["cargo", "add", "foo@1.2.3"]]

    def test_runs_in_given_directory(self, runner, tmp_path):
        """Runs in the given directory."""
        CargoManager(runner).add_crate("foo", cwd=tmp_path)

        assert runner.calls[0][1] == tmp_path

    def test_failure(self):
        """Failed cargo add returns False."""
        runner = RecordingRunner(failures=[["cargo", "add"]])

        assert CargoManager(runner).add_crate("foo") is False
