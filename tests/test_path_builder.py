"""Tests for turning class identifiers into class file paths."""

import os

import pytest

from namespace_autoloader.autoloader_config import AutoloaderConfig
from namespace_autoloader.base_directory import base_directory
from namespace_autoloader.class_file_name import class_file_name
from namespace_autoloader.namespace_file_path import namespace_file_path
from namespace_autoloader.sanitizer import (
    sanitize_file_path,
    sanitize_namespace,
    untrailingslashit,
)

S = os.sep


def make_config(**kwargs: object) -> AutoloaderConfig:
    """Create a config rooted at /proj owning the Acme namespace."""
    options: dict[str, object] = {"directory": "/proj", "namespace_prefix": "Acme"}
    options.update(kwargs)
    return AutoloaderConfig(**options)  # type: ignore[arg-type]


def test_sanitize_namespace() -> None:
    """Verify that namespace separators are trimmed from both ends."""
    assert sanitize_namespace("\\Acme\\Sub\\") == "Acme\\Sub"
    assert sanitize_namespace("\\Acme\\", add_separator=True) == "Acme\\"


def test_sanitize_file_path() -> None:
    """Verify that filesystem separators are trimmed from both ends."""
    assert sanitize_file_path(f"{S}inc{S}") == "inc"


def test_untrailingslashit() -> None:
    """Verify that trailing slashes of either kind are removed."""
    assert untrailingslashit("/proj/\\/") == "/proj"


def test_base_directory_without_classes_dir() -> None:
    """Verify the base directory is the root plus a separator."""
    assert base_directory(make_config()) == f"/proj{S}"


def test_base_directory_with_classes_dir() -> None:
    """Verify that the classes subdirectory is trimmed and appended."""
    config = make_config(directory="/proj/", classes_dir=f"{S}inc{S}")
    assert base_directory(config) == f"/proj{S}inc{S}"


@pytest.mark.parametrize(
    ("lowercase", "expected"),
    [(True, f"sub{S}"), (False, f"Sub{S}")],
)
def test_prefix_stripping(lowercase: bool, expected: str) -> None:
    """Verify the prefix is stripped and casing follows the config."""
    config = make_config(force_to_lowercase=lowercase)
    assert namespace_file_path("Acme\\Sub\\Thing", config) == expected


def test_nested_namespace_path() -> None:
    """Verify that every namespace segment becomes a directory."""
    config = make_config()
    path = namespace_file_path("\\Acme\\Admin\\Pages\\Settings", config)
    assert path == f"Admin{S}Pages{S}"


def test_depth_zero_has_empty_intermediate_path() -> None:
    """Verify that a class directly under the prefix has no subdirectory."""
    assert namespace_file_path("Acme\\Thing", make_config()) == ""


def test_prefix_only_stripped_at_front() -> None:
    """Verify that a prefix in the middle of an identifier is kept."""
    path = namespace_file_path("Other\\Acme\\Thing", make_config())
    assert path == f"Other{S}Acme{S}"


def test_prefix_must_match_whole_segment() -> None:
    """Verify that AcmeCorp is not stripped by the Acme prefix."""
    path = namespace_file_path("AcmeCorp\\Thing", make_config())
    assert path == f"AcmeCorp{S}"


def test_multi_segment_prefix() -> None:
    """Verify stripping of a prefix spanning several segments."""
    config = make_config(namespace_prefix="\\Vendor\\Plugin\\")
    path = namespace_file_path("Vendor\\Plugin\\Admin\\Page", config)
    assert path == f"Admin{S}"


def test_file_name_convention() -> None:
    """Verify the class- prefix and kebab-case file name."""
    assert class_file_name("Acme\\My_Class") == "class-my-class.py"


def test_file_name_strips_null_characters() -> None:
    """Verify that embedded NUL characters are dropped from the file name."""
    assert class_file_name("Acme\\Bad\0_Name") == "class-bad-name.py"


def test_file_name_without_namespace() -> None:
    """Verify that an identifier without separators is its own simple name."""
    assert class_file_name("Widget") == "class-widget.py"


def test_empty_identifier_gives_degenerate_file_name() -> None:
    """Verify that an empty identifier still yields a (missing) file name."""
    assert class_file_name("") == "class-.py"
