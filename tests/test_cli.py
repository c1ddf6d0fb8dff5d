"""
Tests for the lingvo command line front end and the bundled sample programs.
"""

import logging
import os
import sys

import pytest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lingvo import __version__
from lingvo.cli import EXIT_IO_ERROR, EXIT_OK, EXIT_PARSE_ERROR, main
from lingvo.parser import parse_file

EXAMPLES_DIR = os.path.join(project_root, "examples")


@pytest.fixture
def source_file(tmp_path):
    def write(text, name="program.lingvo"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


def test_prints_ast(source_file, capsys):
    path = source_file("entjera x = 1;")
    assert main([path]) == EXIT_OK

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Program",
        "  VarDecl(entjera x)",
        "    initializer:",
        "      NumberLiteral(1)",
    ]


def test_tokens_flag(source_file, capsys):
    path = source_file("x;")
    assert main([path, "--tokens", "--no-ast"]) == EXIT_OK

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        'Token(l:0001, c:0000,    IDENTIFIER, "x")',
        'Token(l:0001, c:0001,     SEMICOLON, ";")',
        'Token(l:0001, c:0002,           EOF, "")',
    ]


def test_no_ast_flag(source_file, capsys):
    path = source_file("x;")
    assert main([path, "--no-ast"]) == EXIT_OK
    assert capsys.readouterr().out == ""


def test_parse_error_exit_status(source_file, capsys):
    path = source_file("entjera x = 1\n")
    assert main([path]) == EXIT_PARSE_ERROR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: Expected ';' at line 2" in captured.err
    assert "at token 4" in captured.err
    assert f"{path}:2:0" in captured.err


def test_missing_file_exit_status(tmp_path, capsys):
    missing = str(tmp_path / "nenio.lingvo")
    assert main([missing]) == EXIT_IO_ERROR
    assert "cannot read" in capsys.readouterr().err


def test_lexer_warnings_are_logged(source_file, caplog):
    path = source_file('teksta s = "nefermita')
    with caplog.at_level(logging.WARNING, logger="lingvo.cli"):
        assert main([path, "--no-ast"]) == EXIT_PARSE_ERROR

    assert any("Unterminated string literal" in record.getMessage()
               for record in caplog.records)


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


@pytest.mark.parametrize("name, statement_count", [
    ("saluton.lingvo", 5),
    ("faktorialo.lingvo", 2),
    ("punkto.lingvo", 3),
])
def test_examples_parse(name, statement_count):
    program = parse_file(os.path.join(EXAMPLES_DIR, name))
    assert len(program.statements) == statement_count


@pytest.mark.parametrize("name", ["saluton.lingvo", "faktorialo.lingvo", "punkto.lingvo"])
def test_examples_through_cli(name, capsys):
    assert main([os.path.join(EXAMPLES_DIR, name)]) == EXIT_OK
    assert capsys.readouterr().out.startswith("Program\n")
