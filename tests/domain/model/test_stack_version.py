from __future__ import annotations

import pytest

from stackdeps.domain.model import (
    InvalidStackVersionError,
    StackGeneration,
    StackVersion,
    compare_versions,
)


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("2.0", "2.0", 0),
        ("2.0.5", "2.0", 1),
        ("2.0", "2.0.0", 0),
        ("1.3.2", "2.0", -1),
        ("10.1", "9.9", 1),
        ("2.1", "2.10", -1),
    ],
)
def test_compare_versions(first: str, second: str, expected: int) -> None:
    assert compare_versions(first, second) == expected


def test_compare_versions_rejects_non_numeric_parts() -> None:
    with pytest.raises(InvalidStackVersionError):
        compare_versions("2.x", "2.0")


@pytest.mark.parametrize(
    ("text", "number", "is_local", "generation"),
    [
        ("HDP-2.0.5", "2.0.5", False, StackGeneration.CURRENT),
        ("HDP-2.0", "2.0", False, StackGeneration.CURRENT),
        ("HDPLocal-1.3.2", "1.3.2", True, StackGeneration.LEGACY),
        ("HDP-1.3.0", "1.3.0", False, StackGeneration.LEGACY),
        (" HDP-2.1 ", "2.1", False, StackGeneration.CURRENT),
    ],
)
def test_parse_stack_version(
    text: str, number: str, is_local: bool, generation: StackGeneration
) -> None:
    version = StackVersion.parse(text)

    assert version.number == number
    assert version.is_local is is_local
    assert version.generation is generation
    assert str(version) == text.strip()


@pytest.mark.parametrize("text", ["", "2.0.5", "HDP2.0", "CDH-5.0", "HDP-"])
def test_parse_rejects_unknown_formats(text: str) -> None:
    with pytest.raises(InvalidStackVersionError, match="Invalid stack version"):
        StackVersion.parse(text)
