"""Shared test fixtures for codestat tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Method text lengths: "void a(){}" = 10, "void bbbb(){return;}" = 20
SOURCE_A = """class A {
    int foo;
    void a(){}
    void bbbb(){return;}
}
"""

SOURCE_B = """class B {
    int abcd;
    int abcdef;
}
"""

MALFORMED_SOURCE = """class Broken {
    void m( {
"""


@pytest.fixture
def write_source(tmp_path):
    """Write a source file under tmp_path and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def two_file_project(tmp_path, write_source):
    """A.java: 1 class, methods of length 10 and 20, field 'foo'.
    B.java: 1 class, no methods, fields 'abcd' and 'abcdef'."""
    write_source("A.java", SOURCE_A)
    write_source("B.java", SOURCE_B)
    return tmp_path


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty working directory so no codestat.toml is picked up."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def java_project():
    """Path to the sample Java project under tests/fixtures."""
    return FIXTURES_DIR / "java_project"


@pytest.fixture
def source_a():
    return SOURCE_A


@pytest.fixture
def source_b():
    return SOURCE_B


@pytest.fixture
def malformed_source():
    return MALFORMED_SOURCE
