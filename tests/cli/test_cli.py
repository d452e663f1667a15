# topmark:header:start
#
#   project      : inspect-utils
#   file         : test_cli.py
#   file_relpath : tests/cli/test_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests of the `inspect-utils` command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inspect_utils.constants import INSPECT_UTILS_VERSION
from inspect_utils.core.style_names import STYLE_NAMES
from inspect_utils.demo.examples import EXAMPLES
from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_no_command_prints_hint_and_help() -> None:
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert "inspect-utils demo" in result.output
    assert "Commands:" in result.output


@mark_cli
def test_version() -> None:
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == INSPECT_UTILS_VERSION


@mark_cli
def test_version_verbose_adds_heading() -> None:
    result: Result = run_cli(["-v", "version"])

    assert_SUCCESS(result)
    assert "inspect-utils version:" in result.output
    assert INSPECT_UTILS_VERSION in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
def test_styles_lists_every_name() -> None:
    result: Result = run_cli(["--no-color", "styles"])

    assert_SUCCESS(result)
    listed = [line.split()[0] for line in result.output.splitlines() if line.strip()]
    assert tuple(listed) == STYLE_NAMES
    assert "ident" in result.output and "special" in result.output


@mark_cli
def test_styles_with_color_always() -> None:
    result: Result = run_cli(["--color", "always", "styles"])

    assert_SUCCESS(result)
    assert "\x1b[36mident" in result.output
    assert "\x1b[" in result.output.splitlines()[-1]


@mark_cli
def test_demo_list() -> None:
    result: Result = run_cli(["demo", "--list"])

    assert_SUCCESS(result)
    for name in EXAMPLES:
        assert name in result.output


@mark_cli
def test_demo_single_example() -> None:
    result: Result = run_cli(["--no-color", "demo", "struct"])

    assert_SUCCESS(result)
    assert result.output.rstrip("\n") == "display_struct\n  Point {'x': 1, 'y': 2}"


@mark_cli
def test_demo_runs_every_example_by_default() -> None:
    result: Result = run_cli(["--no-color", "demo"])

    assert_SUCCESS(result)
    for example in EXAMPLES.values():
        assert example.title in result.output
    assert "  Async[fulfilled](1)" in result.output
    assert "  Line[(1,2) -> (3,4)]" in result.output


@mark_cli
def test_demo_unknown_example() -> None:
    result: Result = run_cli(["demo", "nope"])

    assert_USAGE_ERROR(result)
    assert "Unknown example(s): nope" in result.output


@mark_cli
def test_width_must_be_positive() -> None:
    result: Result = run_cli(["--width", "0", "version"])

    assert_USAGE_ERROR(result)


@mark_cli
def test_narrow_width_breaks_output() -> None:
    result: Result = run_cli(["--no-color", "--width", "12", "demo", "struct"])

    assert_SUCCESS(result)
    assert result.output.rstrip("\n") == "\n".join(
        [
            "display_struct",
            "  Point {",
            "    'x': 1,",
            "    'y': 2",
            "  }",
        ]
    )


@mark_cli
def test_invalid_environment_is_a_config_error() -> None:
    result: Result = run_cli(["version"], env={"INSPECT_UTILS_WIDTH": "abc"})

    assert_CONFIG_ERROR(result)
    assert "INSPECT_UTILS_WIDTH must be an integer" in result.output


@mark_cli
def test_config_file_sets_width(tmp_path: Path) -> None:
    config = tmp_path / "pyproject.toml"
    config.write_text("[tool.inspect-utils]\nwidth = 12\n", encoding="utf-8")

    result: Result = run_cli(["--no-color", "--config", str(config), "demo", "struct"])

    assert_SUCCESS(result)
    assert "  Point {\n" in result.output


@mark_cli
def test_width_flag_beats_config_file(tmp_path: Path) -> None:
    config = tmp_path / "inspect-utils.toml"
    config.write_text("width = 12\n", encoding="utf-8")

    result: Result = run_cli(
        ["--no-color", "--config", str(config), "--width", "80", "demo", "struct"]
    )

    assert_SUCCESS(result)
    assert "  Point {'x': 1, 'y': 2}" in result.output


@mark_cli
def test_invalid_config_file(tmp_path: Path) -> None:
    config = tmp_path / "inspect-utils.toml"
    config.write_text("width = 'wide'\n", encoding="utf-8")

    result: Result = run_cli(["--config", str(config), "version"])

    assert_CONFIG_ERROR(result)
    assert "'width' must be an integer" in result.output
