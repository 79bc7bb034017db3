from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_payroll.hr_payroll.database.bootstrap import apply_schema, list_tables


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the payroll tables in the configured MySQL database")
    parser.add_argument("--schema", type=Path, default=REPO_ROOT / "database" / "schema.sql")
    args = parser.parse_args()

    settings_module = get_settings_module()
    db_config = dict(importlib.import_module(settings_module).DB_CONFIG)

    apply_schema(db_config, schema_path=args.schema)
    tables = sorted(list_tables(db_config))
    missing = {"employees", "payroll_entries", "tax_filings"} - set(tables)
    if missing:
        sys.exit(f"Schema applied but tables are missing: {', '.join(sorted(missing))}")

    print(
        f"OK [{settings_module}]: {args.schema.name} -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={', '.join(tables)})"
    )


if __name__ == "__main__":
    main()
