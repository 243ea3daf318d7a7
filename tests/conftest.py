"""Pytest configuration and fixtures."""
import io
import posixpath

import pytest

from issue_summoner.lexer import DEFAULT_REGISTRY


class MemoryFileOperator:
    """In-memory FileOperator that records every open and listing.

    ``files`` maps POSIX paths relative to ``root`` to file contents. A key
    ending in "/" declares an (possibly empty) directory.
    """

    def __init__(self, files, root="/proj", fail_open=(), fail_list=()):
        self.root = root
        self.files = {}
        self.dirs = {root}
        for rel, content in files.items():
            path = posixpath.join(root, rel.rstrip("/"))
            if rel.endswith("/"):
                self.dirs.add(path)
            else:
                self.files[path] = content
            parent = posixpath.dirname(path)
            while parent.startswith(root) and parent not in self.dirs:
                self.dirs.add(parent)
                parent = posixpath.dirname(parent)
        self.fail_open = set(fail_open)
        self.fail_list = set(fail_list)
        self.opened = []
        self.listed = []

    def open(self, path, encoding="utf-8"):
        self.opened.append(path)
        if path in self.fail_open:
            raise PermissionError(13, "Permission denied", path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        return io.StringIO(self.files[path])

    def list_dir(self, path):
        self.listed.append(path)
        if path in self.fail_list:
            raise PermissionError(13, "Permission denied", path)
        if path not in self.dirs:
            raise FileNotFoundError(2, "No such file or directory", path)
        entries = [
            (posixpath.basename(d), True) for d in self.dirs
            if d != path and posixpath.dirname(d) == path
        ]
        entries += [
            (posixpath.basename(f), False) for f in self.files
            if posixpath.dirname(f) == path
        ]
        return sorted(entries)


@pytest.fixture
def memory_fs():
    """Factory for in-memory project trees rooted at /proj."""
    return MemoryFileOperator


@pytest.fixture
def c_syntax():
    return DEFAULT_REGISTRY.syntax_for(".c")


@pytest.fixture
def py_syntax():
    return DEFAULT_REGISTRY.syntax_for(".py")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small on-disk project with tags, a .gitignore and ignored content."""
    (tmp_path / ".gitignore").write_text("# build output\nnode_modules/\n*.log\n")
    (tmp_path / "main.go").write_text(
        "package main\n"
        "\n"
        "// @TODO handle signals\n"
        "// currently the process just dies\n"
        "func main() {}\n"
    )
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.py").write_text(
        "def run():\n"
        "    # @TODO add retries\n"
        "    return 1\n"
    )
    modules = tmp_path / "node_modules" / "lib"
    modules.mkdir(parents=True)
    (modules / "index.js").write_text("// @TODO vendored, must never be reported\n")
    (tmp_path / "debug.log").write_text("# @TODO log lines are not source\n")
    git = tmp_path / ".git"
    git.mkdir()
    (git / "HEAD").write_text("# @TODO not a source file\n")
    return tmp_path
