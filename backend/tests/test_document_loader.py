"""
Tests for loader.py and the command-line harness in check_tags.py.
"""

import json

import pytest

from tagcheck.core.exceptions import DocumentLoadError, InvalidInputError
from tagcheck.validation.check_tags import (
    EXIT_BALANCED,
    EXIT_LOAD_ERROR,
    EXIT_NOT_BALANCED,
    check_files,
    main,
)
from tagcheck.validation.loader import load_document


@pytest.fixture
def balanced_file(tmp_path):
    path = tmp_path / "balanced.html"
    path.write_text("<html>\n<body><p>Hi<br></p></body>\n</html>\n", encoding="utf-8")
    return path


@pytest.fixture
def unbalanced_file(tmp_path):
    path = tmp_path / "unbalanced.html"
    path.write_text("<div>\n  <span>\n</div>\n", encoding="utf-8")
    return path


# -----------------------------------------------------------------------------
# Loader
# -----------------------------------------------------------------------------

def test_load_document(balanced_file):
    """Test reading an HTML file."""
    assert load_document(balanced_file).startswith("<html>")


def test_load_document_accepts_htm_and_upper_case(tmp_path):
    """Test suffix matching ignores case and accepts .htm."""
    path = tmp_path / "PAGE.HTM"
    path.write_text("<p></p>", encoding="utf-8")

    assert load_document(str(path)) == "<p></p>"


def test_load_document_missing(tmp_path):
    """Test missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "missing.html")


def test_load_document_wrong_type(tmp_path):
    """Test non-HTML files are rejected."""
    path = tmp_path / "notes.txt"
    path.write_text("<p></p>", encoding="utf-8")

    with pytest.raises(InvalidInputError):
        load_document(path)


def test_load_document_undecodable(tmp_path):
    """Test decode failures are wrapped in DocumentLoadError."""
    path = tmp_path / "latin.html"
    path.write_bytes(b"<p>caf\xe9</p>")

    with pytest.raises(DocumentLoadError) as exc_info:
        load_document(path)

    assert isinstance(exc_info.value.original_error, UnicodeDecodeError)
    assert load_document(path, encoding="latin-1") == "<p>café</p>"


# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------

def test_check_files_balanced(balanced_file, capsys):
    """Test a balanced file prints the diagnostic and exits 0."""
    result = check_files([balanced_file], indent_width=4)
    out = capsys.readouterr().out

    assert result["exit_code"] == EXIT_BALANCED
    assert "    Found opening tag: <body>!" in out
    assert "            Found non-container tag: <br>!" in out
    assert "All tags are balanced in balanced.html!" in out


def test_check_files_unbalanced_with_report(balanced_file, unbalanced_file, tmp_path, capsys):
    """Test mixed results exit 1 and write the JSON report."""
    output_path = tmp_path / "out" / "report.json"

    result = check_files([balanced_file, unbalanced_file], output_path=output_path)
    out = capsys.readouterr().out

    assert result["exit_code"] == EXIT_NOT_BALANCED
    assert "Tags are not balanced in unbalanced.html!" in out

    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["summary"]["not_balanced"] == 1
    assert data["documents"][str(unbalanced_file)]["verdict"] == {
        "status": "imbalanced",
        "tag_name": "div",
        "index": 2,
    }


def test_check_files_load_error_continues(balanced_file, tmp_path, capsys):
    """Test a missing file is reported and other files are still checked."""
    missing = tmp_path / "missing.html"
    result = check_files([missing, balanced_file])
    out = capsys.readouterr().out

    assert result["exit_code"] == EXIT_LOAD_ERROR
    assert str(missing) in result["errors"]
    assert str(balanced_file) in result["reports"]
    assert "[ERROR]" in out


def test_check_files_same_name_in_different_directories(tmp_path, capsys):
    """Test files sharing a name are reported separately."""
    first = tmp_path / "a" / "index.html"
    second = tmp_path / "b" / "index.html"
    first.parent.mkdir()
    second.parent.mkdir()
    first.write_text("<div><span></div>", encoding="utf-8")
    second.write_text("<p></p>", encoding="utf-8")
    output_path = tmp_path / "report.json"

    result = check_files([first, second], output_path=output_path)
    capsys.readouterr()

    assert result["exit_code"] == EXIT_NOT_BALANCED
    assert set(result["reports"]) == {str(first), str(second)}
    assert not result["reports"][str(first)].is_balanced

    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["summary"] == {"total_documents": 2, "balanced": 1, "not_balanced": 1}


def test_main_exit_codes(balanced_file, unbalanced_file):
    """Test main() returns the exit status."""
    assert main([str(balanced_file), "--indent", "2"]) == EXIT_BALANCED
    assert main([str(unbalanced_file)]) == EXIT_NOT_BALANCED


def test_main_rejects_negative_indent(balanced_file):
    """Test argument validation for --indent."""
    with pytest.raises(SystemExit):
        main([str(balanced_file), "--indent", "-1"])
