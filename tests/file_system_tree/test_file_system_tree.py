"""Unit tests for the FileSystemTree class."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from devtools_app.exceptions import DirectoryReadError, PathNotADirectoryError, PathNotFoundError
from devtools_app.file_system_tree.directory_entry import read_entries
from devtools_app.file_system_tree.file_system_tree import FileSystemTree, render_tree


@pytest.fixture
def deep_directory(tmp_path):
    """A hierarchy with several levels, mixed files and an empty directory."""
    root = tmp_path / "root"
    (root / "app" / "models").mkdir(parents=True)
    (root / "app" / "views").mkdir()
    (root / "app" / "models" / "user.py").write_text("")
    (root / "app" / "__init__.py").write_text("")
    (root / "empty").mkdir()
    (root / "setup.cfg").write_text("")
    return root


def test_file_system_tree_initialization(project_dir):
    fs_tree = FileSystemTree(str(project_dir))
    assert fs_tree.root_path == project_dir
    assert fs_tree.include_files is False
    assert fs_tree._tree is None


def test_file_system_tree_initialization_strips_quotes(project_dir):
    fs_tree = FileSystemTree(f'"{project_dir}"')
    assert fs_tree.root_path == project_dir


def test_file_system_tree_build(project_dir):
    tree = FileSystemTree(str(project_dir), include_files=True).get_tree()

    assert tree.name == "project"
    assert tree.is_dir
    assert [child.name for child in tree.children] == ["docs", "src", "README.md"]
    assert [child.connector for child in tree.children] == ["├── ", "├── ", "└── "]


def test_file_system_tree_counts(deep_directory):
    fs_tree = FileSystemTree(deep_directory, include_files=True)
    assert fs_tree.get_directory_count() == 4
    assert fs_tree.get_file_count() == 3

    dirs_only = FileSystemTree(deep_directory)
    assert dirs_only.get_directory_count() == 4
    assert dirs_only.get_file_count() == 0


def test_scenario_with_files(project_dir):
    assert render_tree(str(project_dir), include_files=True) == "project\n├── docs\n├── src\n└── README.md\n"


def test_scenario_without_files(project_dir):
    assert render_tree(str(project_dir), include_files=False) == "project\n├── docs\n└── src\n"


def test_scenario_nested(nested_dir):
    assert render_tree(str(nested_dir), include_files=True) == "a\n└── b\n    └── c.txt\n"


def test_nested_continuation_prefix(deep_directory):
    expected = (
        "root\n"
        "├── app\n"
        "│   ├── models\n"
        "│   │   └── user.py\n"
        "│   ├── views\n"
        "│   └── __init__.py\n"
        "├── empty\n"
        "└── setup.cfg\n"
    )
    assert render_tree(deep_directory, include_files=True) == expected


def test_nested_without_files(deep_directory):
    expected = "root\n├── app\n│   ├── models\n│   └── views\n└── empty\n"
    assert render_tree(deep_directory) == expected


def test_files_excluded_at_every_level(deep_directory):
    output = render_tree(deep_directory, include_files=False)
    for name in ("user.py", "__init__.py", "setup.cfg"):
        assert name not in output


def test_one_terminal_connector_per_level(deep_directory):
    tree = FileSystemTree(deep_directory, include_files=True).get_tree()
    for node in [tree, *tree.descendants]:
        if node.children:
            connectors = [child.connector for child in node.children]
            assert connectors[-1] == "└── "
            assert all(connector == "├── " for connector in connectors[:-1])


def test_empty_directory(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert render_tree(empty, include_files=True) == "empty\n"


def test_directory_names_sorted_by_codepoint(tmp_path):
    root = tmp_path / "root"
    for name in ("beta", "Alpha", "alpha", "Zulu"):
        (root / name).mkdir(parents=True)
    (root / "Zfile.txt").write_text("")
    (root / "afile.txt").write_text("")

    lines = render_tree(root, include_files=True).splitlines()

    assert lines[1:] == [
        "├── Alpha",
        "├── Zulu",
        "├── alpha",
        "├── beta",
        "├── Zfile.txt",
        "└── afile.txt",
    ]


def test_idempotent(deep_directory):
    assert render_tree(deep_directory, include_files=True) == render_tree(deep_directory, include_files=True)


def test_quoted_path(project_dir):
    assert render_tree(f'"{project_dir}"').startswith("project\n")


def test_root_path_without_name():
    fs_tree = FileSystemTree("/")
    with patch.object(FileSystemTree, "_create_children"):
        lines = list(fs_tree.stream_tree_representation())
    assert lines == []


def test_current_directory_uses_real_name(project_dir, monkeypatch):
    monkeypatch.chdir(project_dir)
    assert render_tree(".").splitlines()[0] == "project"


def test_stream_tree_representation(nested_dir):
    lines = list(FileSystemTree(nested_dir, include_files=True).stream_tree_representation())
    assert lines == ["a", "└── b", "    └── c.txt"]


def test_symlinked_directory_is_followed(project_dir):
    try:
        os.symlink(project_dir / "src", project_dir / "link", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")
    (project_dir / "src" / "main.py").write_text("")

    output = render_tree(project_dir, include_files=True)

    assert "├── link\n│   └── main.py\n" in output


def test_non_existent_directory():
    with pytest.raises(PathNotFoundError) as exc_info:
        render_tree("/nonexistent")
    assert "/nonexistent" in str(exc_info.value)


def test_file_as_root():
    with pytest.raises(PathNotADirectoryError) as exc_info:
        FileSystemTree(__file__).get_tree()
    assert __file__ in str(exc_info.value)


def test_nested_read_failure_aborts_whole_tree(deep_directory):
    failing = deep_directory / "app" / "models"

    def flaky_read(directory: Path):
        if directory == failing:
            raise DirectoryReadError(str(directory), "Permission denied")
        return read_entries(directory)

    with patch("devtools_app.file_system_tree.file_system_tree.read_entries", side_effect=flaky_read):
        fs_tree = FileSystemTree(deep_directory, include_files=True)
        with pytest.raises(DirectoryReadError) as exc_info:
            fs_tree.get_tree_representation()

    assert exc_info.value.path == str(failing)
    assert fs_tree._tree is None


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="Permissions are not enforced for root")
def test_unreadable_directory(deep_directory):
    locked = deep_directory / "app" / "views"
    locked.chmod(0o000)
    try:
        with pytest.raises(DirectoryReadError) as exc_info:
            render_tree(deep_directory, include_files=True)
        assert exc_info.value.path == str(locked)
    finally:
        locked.chmod(0o755)


def test_tree_is_cached_per_instance(project_dir):
    fs_tree = FileSystemTree(project_dir, include_files=True)
    fs_tree.get_tree()
    (project_dir / "new_file.txt").touch()

    assert "new_file.txt" not in fs_tree.get_tree_representation()
    assert "└── new_file.txt" in FileSystemTree(project_dir, include_files=True).get_tree_representation()


def test_each_directory_read_once(deep_directory):
    with patch(
        "devtools_app.file_system_tree.file_system_tree.read_entries", side_effect=read_entries
    ) as mock_read:
        FileSystemTree(deep_directory, include_files=True).get_tree()

    read_dirs = [call.args[0] for call in mock_read.call_args_list]
    assert sorted(read_dirs) == sorted(
        [
            deep_directory,
            deep_directory / "app",
            deep_directory / "app" / "models",
            deep_directory / "app" / "views",
            deep_directory / "empty",
        ]
    )


def test_child_nodes_record_full_paths(nested_dir):
    tree = FileSystemTree(nested_dir, include_files=True).get_tree()
    b_node = tree.children[0]
    assert b_node.full_path == nested_dir / "b"
    assert b_node.children[0].full_path == nested_dir / "b" / "c.txt"


def test_build_logs_counts_at_debug(nested_dir, caplog):
    with caplog.at_level(logging.DEBUG, logger="devtools_app.file_system_tree.file_system_tree"):
        FileSystemTree(nested_dir, include_files=True).get_tree()

    assert "1 directories, 1 files" in caplog.text


def test_build_skips_counting_when_debug_disabled(nested_dir, caplog):
    with caplog.at_level(logging.INFO, logger="devtools_app.file_system_tree.file_system_tree"):
        with patch.object(FileSystemTree, "_count") as mock_count:
            FileSystemTree(nested_dir, include_files=True).get_tree()

    mock_count.assert_not_called()
