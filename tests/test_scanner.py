"""Tests for schema file scanning and import-line parsing."""

import pytest
from pathlib import Path

from gql_import.errors import ImportSyntaxError
from gql_import.models import DefinitionKind
from gql_import.scanner import SdlScanner, parse_import_lines, parse_source, scan_directory

FIXTURES = Path(__file__).parent / "fixtures"


def test_scan_directory_sorted():
    sources = scan_directory(FIXTURES / "shop")
    assert [s.file_path.name for s in sources] == [
        "posts.graphql", "schema.graphql", "users.graphql",
    ]


def test_scan_skips_node_modules():
    sources = scan_directory(FIXTURES / "shop")
    names = [n for s in sources for n in s.names]
    assert "Vendored" not in names


def test_scan_skips_unparseable_files(caplog):
    sources = scan_directory(FIXTURES / "broken")
    assert [s.file_path.name for s in sources] == ["good.graphql"]
    assert "bad.graphql" in caplog.text


def test_scan_file_definitions():
    source = SdlScanner().scan_file(FIXTURES / "shop" / "users.graphql")
    assert source.names == ["key", "Node", "User"]
    kinds = [DefinitionKind.of(d) for d in source.definitions]
    assert kinds == [DefinitionKind.DIRECTIVE, DefinitionKind.INTERFACE, DefinitionKind.OBJECT]


def test_parse_source_drops_extensions_and_operations():
    source = parse_source("""
        type A { id: ID }
        extend type A { name: String }
        query Q { a { id } }
    """)
    assert source.names == ["A"]


def test_parse_source_only_imports():
    source = parse_source('# import * from "other.graphql"\n')
    assert source.definitions == []
    assert len(source.imports) == 1


def test_parse_import_lines():
    imports = parse_import_lines(
        '# import A, B from "a.graphql"\n'
        "#import * from 'dir/b.graphql';\n"
        "# just a comment\n"
        "type X { id: ID }\n"
    )
    assert [(i.names, i.path, i.line_number) for i in imports] == [
        (["A", "B"], "a.graphql", 1),
        (["*"], "dir/b.graphql", 2),
    ]
    assert imports[1].imports_all
    assert not imports[0].imports_all


def test_parse_import_lines_malformed():
    with pytest.raises(ImportSyntaxError) as exc:
        parse_import_lines('# import A from a.graphql\n')
    assert exc.value.line_number == 1


def test_parse_import_lines_bad_name():
    with pytest.raises(ImportSyntaxError):
        parse_import_lines('# import A-B from "a.graphql"\n')


def test_importer_comment_not_an_import():
    assert parse_import_lines("# importer notes\n") == []
