"""Tests for pathabbrev.text.paths."""

import pytest

import pathabbrev
from pathabbrev.text import ELLIPSIS, abbreviate_path

from modules.text.paths.abbreviate import abbreviate

LONG_PATH = "/very/long/path/to/some/deep/file.txt"


def test_ellipsis_is_single_code_point():
    assert ELLIPSIS == "\u2026"
    assert len(ELLIPSIS) == 1


def test_package_reexports():
    assert pathabbrev.abbreviate_path is abbreviate_path
    assert pathabbrev.ELLIPSIS == ELLIPSIS


@pytest.mark.parametrize(
    "path, max_len, expected",
    [
        ("short.txt", 20, "short.txt"),
        ("short.txt", 9, "short.txt"),
        ("short.txt", 8, "…hort.txt"),
        (LONG_PATH, 10, "…p/file.txt"),
        ("ab", 0, "…"),
        ("ab", 1, "…b"),
        ("", 0, ""),
        ("", 5, ""),
    ],
)
def test_abbreviate_path(path, max_len, expected):
    assert abbreviate_path(path, max_len) == expected


@pytest.mark.parametrize("max_len", [len(LONG_PATH), len(LONG_PATH) + 1, 1000])
def test_fits_returns_same_string(max_len):
    assert abbreviate_path(LONG_PATH, max_len) == LONG_PATH


@pytest.mark.parametrize("max_len", range(0, len(LONG_PATH)))
def test_truncated_shape(max_len):
    result = abbreviate_path(LONG_PATH, max_len)

    assert len(result) == max_len + 1
    assert result[0] == ELLIPSIS
    assert result[1:] == LONG_PATH[len(LONG_PATH) - max_len :]


def test_path_is_not_parsed_into_segments():
    # Separators and dots are ordinary characters
    assert abbreviate_path("a/b/../c//d", 4) == "…c//d"
    assert abbreviate_path("C:\\Users\\me\\notes.md", 8) == "…notes.md"


@pytest.mark.parametrize(
    "path, max_len, expected",
    [
        ("ab", -1, "…"),
        (LONG_PATH, -100, "…"),
        ("", -3, ""),
    ],
)
def test_negative_max_len_behaves_like_zero(path, max_len, expected):
    assert abbreviate_path(path, max_len) == expected
    assert abbreviate_path(path, max_len) == abbreviate_path(path, 0)


def test_non_ascii_counts_code_points():
    path = "/données/été/fichier-ü.txt"
    result = abbreviate_path(path, 5)

    assert result == "…ü.txt"
    assert len(result) == 6


def test_astral_code_point_is_one_character():
    path = "/tmp/\U0001f600.png"
    assert abbreviate_path(path, 5) == "…\U0001f600.png"
    assert abbreviate_path(path, len(path)) == path


def test_reapplying_truncates_again():
    once = abbreviate_path(LONG_PATH, 10)

    # The ellipsis counts toward the length, so it is cut off and re-added
    assert abbreviate_path(once, 10) == once
    assert abbreviate_path(once, 5) == "…e.txt"
    assert abbreviate_path(abbreviate_path(once, 5), 5) == "…e.txt"


def test_does_not_mutate_or_copy_fitting_input():
    path = "x" * 5
    assert abbreviate_path(path, 5) is path


@pytest.mark.parametrize(
    "path, max_len",
    [
        (LONG_PATH, 10),
        (LONG_PATH, 0),
        (LONG_PATH, -2),
        ("short.txt", 20),
        ("", 0),
        ("/données/été", 4),
    ],
)
def test_inlinable_module_matches_library(path, max_len):
    assert abbreviate(path, max_len) == abbreviate_path(path, max_len)
