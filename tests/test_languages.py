"""Tests for extension to language tag resolution."""

from pathlib import Path

import pytest

from weekreport.core.configuration import build_language_table, load_language_table
from weekreport.core.errors import IoError, MissingExtensionError, UnsupportedExtensionError, ValidationError
from weekreport.core.languages import DEFAULT_LANGUAGES, LanguageTable, find_extension, resolve_language_tag


@pytest.mark.parametrize(
    "file_name, expected",
    [("main.c", "c"), ("util.h", "c"), ("vector.cpp", "cpp"), ("vector.hpp", "cpp"), ("archive.v2.c", "c")],
)
def test_builtin_table(file_name, expected):
    assert resolve_language_tag(file_name, f"/x/{file_name}") == expected


def test_unsupported_extension_carries_extension():
    with pytest.raises(UnsupportedExtensionError, match=r"Unsupported extension \.py\.") as excinfo:
        resolve_language_tag("x.py", "/x.py")
    assert excinfo.value.extension == ".py"


def test_missing_extension_carries_name_and_path():
    with pytest.raises(MissingExtensionError) as excinfo:
        resolve_language_tag("noext", "/noext")
    assert excinfo.value.file_name == "noext"
    assert excinfo.value.path == "/noext"
    assert "'/noext'" in str(excinfo.value)


def test_trailing_dot_counts_as_missing_extension():
    with pytest.raises(MissingExtensionError):
        resolve_language_tag("main.", "src/main.")


def test_matching_is_case_sensitive():
    with pytest.raises(UnsupportedExtensionError):
        resolve_language_tag("MAIN.C", "MAIN.C")


def test_four_character_extension_is_rejected_explicitly():
    with pytest.raises(UnsupportedExtensionError, match="limited to 3 characters") as excinfo:
        resolve_language_tag("Main.java", "src/Main.java")
    assert excinfo.value.extension == ".java"


def test_find_extension():
    assert find_extension("a.tar.gz") == ".gz"
    assert find_extension("Makefile") is None


def test_merged_table_adds_languages_without_touching_default():
    table = DEFAULT_LANGUAGES.merged({".rs": "rust"})

    assert table.resolve("lib.rs", "src/lib.rs") == "rust"
    assert table.resolve("main.c", "main.c") == "c"
    with pytest.raises(UnsupportedExtensionError):
        DEFAULT_LANGUAGES.resolve("lib.rs", "src/lib.rs")


def test_from_mapping_rejects_bad_keys():
    with pytest.raises(ValidationError, match="Invalid extension key"):
        LanguageTable.from_mapping({"rs": "rust"})


def test_build_language_table_from_payload():
    table = build_language_table({"max_extension_length": 4, "languages": {".java": "java"}})

    assert table.resolve("Main.java", "Main.java") == "java"
    assert table.max_extension_length == 4


def test_load_language_table_from_yaml(tmp_path: Path):
    config_path = tmp_path / "languages.yaml"
    config_path.write_text("languages:\n  .py: python\n", encoding="utf-8")

    table = load_language_table(config_path)

    assert table.resolve("x.py", "/x.py") == "python"
    assert load_language_table(None) is DEFAULT_LANGUAGES


def test_load_language_table_rejects_non_mapping(tmp_path: Path):
    config_path = tmp_path / "languages.yaml"
    config_path.write_text("- .py\n- python\n", encoding="utf-8")

    with pytest.raises(ValidationError, match="Invalid YAML config structure"):
        load_language_table(config_path)


def test_load_language_table_missing_file(tmp_path: Path):
    with pytest.raises(IoError):
        load_language_table(tmp_path / "absent.yaml")


def test_extension_is_taken_after_the_last_dot():
    assert resolve_language_tag("a.b.cpp", "src/a.b.cpp") == "cpp"
    assert find_extension("a.b.cpp") == ".cpp"


def test_from_mapping_rejects_keys_longer_than_limit():
    with pytest.raises(ValidationError, match=r"\.java exceeds max_extension_length \(3\)"):
        DEFAULT_LANGUAGES.merged({".java": "java"})


def test_build_language_table_rejects_long_key_without_raised_limit():
    with pytest.raises(ValidationError, match="max_extension_length"):
        build_language_table({"languages": {".java": "java"}})
