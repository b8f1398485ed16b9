"""Runs mypy to check how results are narrowed by the type checker."""

import textwrap
from pathlib import Path

import pytest
from mypy import api

ROOT = Path(__file__).parents[2]
CONFIG_FILE = ROOT / "pyproject.toml"


@pytest.fixture
def run_mypy(tmp_path, monkeypatch):
    monkeypatch.setenv("MYPYPATH", str(ROOT))

    def run(*files: Path) -> tuple[str, int]:
        stdout, stderr, status = api.run(
            [
                "--config-file",
                str(CONFIG_FILE),
                "--cache-dir",
                str(tmp_path / ".mypy_cache"),
                "--follow-imports",
                "silent",
                "--no-error-summary",
                *map(str, files),
            ]
        )
        return stdout + stderr, status

    return run


@pytest.fixture
def write_module(tmp_path):
    def write(source: str) -> Path:
        path = tmp_path / "snippet.py"
        path.write_text(textwrap.dedent(source))
        return path

    return write


def test_narrowing_module_type_checks(run_mypy):
    output, status = run_mypy(Path(__file__).parent / "test_narrowing.py")

    assert status == 0, output


def test_error_access_without_check_is_rejected(run_mypy, write_module):
    snippet = write_module(
        """
        from fallible import Result, failure

        def lookup(code: int) -> Result[str, int]:
            return failure(code)

        lookup(404).error
        """
    )

    output, status = run_mypy(snippet)

    assert status == 1
    assert "[union-attr]" in output


def test_error_access_after_check_is_accepted(run_mypy, write_module):
    snippet = write_module(
        """
        from fallible import Result, failure, is_failure

        def lookup(code: int) -> Result[str, int]:
            return failure(code)

        result = lookup(404)
        if is_failure(result):
            result.error
        """
    )

    output, status = run_mypy(snippet)

    assert status == 0, output


@pytest.mark.parametrize("combinator", ["map", "map_error", "and_then", "or_else"])
def test_callback_arity_is_checked(run_mypy, write_module, combinator):
    snippet = write_module(
        f"""
        from fallible import Result, failure

        def lookup(code: int) -> Result[str, int]:
            return failure(code)

        def two_arguments(a: object, b: object) -> Result[str, int]:
            return failure(0)

        lookup(404).{combinator}(two_arguments)
        """
    )

    output, status = run_mypy(snippet)

    assert status == 1
    assert "[arg-type]" in output
