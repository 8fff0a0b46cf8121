from pathlib import Path

import pytest

from csvtoics.arguments import default_arguments, help_requested, resolve_arguments, validate_arguments
from csvtoics.config import DEFAULT_CSV_FILE_PATH, DEFAULT_ICS_DIRECTORY_PATH
from csvtoics.models import Arguments


@pytest.mark.parametrize(
    "argv,expected",
    [
        ([], False),
        (None, False),
        (["something"], False),
        (["-h"], True),
        (["--help"], True),
        (["--help", "something"], True),
        (["something", "--help"], False),
    ],
)
def test_help_requested(argv, expected):
    assert help_requested(argv) is expected


@pytest.mark.parametrize("argv", [[], None])
def test_resolve_without_arguments_uses_defaults(argv):
    result = resolve_arguments(argv)

    assert result.csv_file_path == DEFAULT_CSV_FILE_PATH
    assert result.ics_directory_path == DEFAULT_ICS_DIRECTORY_PATH
    assert result.is_valid is False
    assert result.validation_message == ""


def test_resolve_two_arguments_override_both_paths():
    result = resolve_arguments(["path1", "path2"])

    assert result.csv_file_path == "path1"
    assert result.ics_directory_path == "path2"
    assert result.is_valid is False
    assert result.validation_message == ""


def test_resolve_one_argument_overrides_only_csv_path():
    result = resolve_arguments(["path1"])

    assert result.csv_file_path == "path1"
    assert result.ics_directory_path == DEFAULT_ICS_DIRECTORY_PATH


def test_resolve_empty_strings_keep_defaults():
    assert resolve_arguments(["", "path2"]).csv_file_path == DEFAULT_CSV_FILE_PATH
    assert resolve_arguments(["path1", ""]).ics_directory_path == DEFAULT_ICS_DIRECTORY_PATH
    assert resolve_arguments(["", ""]) == default_arguments()


def test_resolve_ignores_extra_arguments():
    result = resolve_arguments(["path1", "path2", "path3"])

    assert (result.csv_file_path, result.ics_directory_path) == ("path1", "path2")


def test_resolve_uses_supplied_defaults():
    defaults = Arguments(csv_file_path="/data/in.csv", ics_directory_path="/data/out")

    assert resolve_arguments([], defaults) == defaults
    assert resolve_arguments(["other.csv"], defaults).ics_directory_path == "/data/out"


def test_validate_missing_csv_file(tmp_path: Path):
    missing = str(tmp_path / "alternate.csv")
    result = validate_arguments(Arguments(csv_file_path=missing, ics_directory_path=str(tmp_path)))

    assert result.is_valid is False
    assert result.validation_message == f"The .CSV file {missing} does not exist."


def test_validate_csv_file_checked_before_directory(tmp_path: Path):
    result = validate_arguments(Arguments(csv_file_path="path1", ics_directory_path=str(tmp_path / "nope")))

    assert result.validation_message == "The .CSV file path1 does not exist."


def test_validate_directory_is_not_a_csv_file(tmp_path: Path):
    result = validate_arguments(Arguments(csv_file_path=str(tmp_path), ics_directory_path=str(tmp_path)))

    assert result.is_valid is False


def test_validate_missing_directory(tmp_path: Path):
    csv_path = tmp_path / "test.csv"
    csv_path.write_text("Title\n", encoding="utf-8")
    missing = str(tmp_path / "alternate")

    result = validate_arguments(Arguments(csv_file_path=str(csv_path), ics_directory_path=missing))

    assert result.is_valid is False
    assert result.validation_message == (
        f"The directory {missing}, the location where .ICS files are to be saved, does not exist."
    )


def test_validate_file_and_directory_exist(tmp_path: Path):
    csv_path = tmp_path / "test.csv"
    csv_path.write_text("Title\n", encoding="utf-8")
    original = Arguments(csv_file_path=str(csv_path), ics_directory_path=str(tmp_path))

    result = validate_arguments(original)

    assert result.is_valid is True
    assert result.validation_message == "Arguments are valid."
    assert original.is_valid is False
