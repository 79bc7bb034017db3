from __future__ import annotations

from pathlib import Path

from src.hr_payroll.hr_payroll.database.bootstrap import _strip_create_db_and_use, iter_sql_statements

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splits_on_semicolons_outside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\");"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
    ]


def test_drops_line_comments_and_blank_statements():
    sql = "-- header; with a semicolon\nSELECT 1;;\n-- trailing\n"

    assert list(iter_sql_statements(sql)) == ["SELECT 1"]


def test_escaped_quote_does_not_end_string():
    sql = "SELECT 'it\\'s; fine'; SELECT 2"

    assert list(iter_sql_statements(sql)) == ["SELECT 'it\\'s; fine'", "SELECT 2"]


def test_schema_file_creates_payroll_tables_only():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(iter_sql_statements(sql))

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    created = [s.split()[5].strip("`") for s in statements if s.upper().startswith("CREATE TABLE IF NOT EXISTS")]
    assert created == ["employees", "payroll_entries", "tax_filings"]
