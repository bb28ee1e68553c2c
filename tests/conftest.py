"""Test configuration and fixtures for devtools-app."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def project_dir(tmp_path):
    """A 'project' directory with two subdirectories and a README."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "src").mkdir()
    (project / "docs").mkdir()
    (project / "README.md").write_text("# Project\n")
    return project


@pytest.fixture
def nested_dir(tmp_path):
    """The hierarchy a/b/c.txt."""
    root = tmp_path / "a"
    (root / "b").mkdir(parents=True)
    (root / "b" / "c.txt").write_text("c")
    return root
