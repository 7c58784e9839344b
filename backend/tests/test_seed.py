"""Tests for the seed loader, the seed script and the schema migration."""
import importlib.util
import json
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError

from drugcatalog.config import Settings
from drugcatalog.seed import run_seed
from drugcatalog.seed.data import load_seed_file

from conftest import SEED_RECORDS

MIGRATIONS = Path(__file__).resolve().parent.parent / "alembic" / "versions"


def test_bundled_seed_file_has_unique_codes():
    records = load_seed_file()
    codes = [r.code for r in records]
    assert records
    assert len(codes) == len(set(codes))


def test_load_seed_file_from_path(tmp_path):
    path = tmp_path / "drugs.json"
    path.write_text(json.dumps(SEED_RECORDS), encoding="utf-8")
    records = load_seed_file(path)
    assert [r.brandName for r in records] == ["ZOLINZA", "CC Cream"]


def test_seed_all(tmp_path, capsys):
    path = tmp_path / "drugs.json"
    path.write_text(json.dumps(SEED_RECORDS), encoding="utf-8")

    count = run_seed.seed_all(seed_file=path, batch_size=1, settings=Settings(database_url="sqlite://"))

    assert count == 2
    out = capsys.readouterr().out
    assert "Inserted batch 2/2" in out
    assert "Total rows: 2" in out
    assert "Sample record: vorinostat (ZOLINZA)" in out


@pytest.mark.parametrize("url", ["", "not a url"])
def test_main_reports_configuration_error(monkeypatch, capsys, url):
    monkeypatch.setattr(run_seed, "setup_logging", lambda level: None)
    monkeypatch.setattr(run_seed, "get_settings", lambda: Settings(database_url=url))
    assert run_seed.main([]) == 1
    assert "DATABASE_URL" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["0", "-5"])
def test_main_rejects_non_positive_batch_size(capsys, value):
    with pytest.raises(SystemExit) as exc:
        run_seed.main(["--batch-size", value])
    assert exc.value.code == 2
    assert "must be a positive integer" in capsys.readouterr().err


def test_main_reports_database_error_after_seeding(monkeypatch, capsys):
    def failing_inspect(engine):
        raise OperationalError("PRAGMA index_list", {}, Exception("disk I/O error"))

    monkeypatch.setattr(run_seed, "setup_logging", lambda level: None)
    monkeypatch.setattr(run_seed, "get_settings", lambda: Settings(database_url="sqlite://"))
    monkeypatch.setattr(run_seed, "inspect", failing_inspect)

    assert run_seed.main([]) == 1
    assert "Error seeding database" in capsys.readouterr().out


def test_create_drugs_migration():
    path = next(MIGRATIONS.glob("*_create_drugs_table.py"))
    spec = importlib.util.spec_from_file_location("create_drugs_table", path)
    migration = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(migration)

    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        with Operations.context(MigrationContext.configure(conn)):
            migration.upgrade()
        indexes = {ix["name"] for ix in inspect(conn).get_indexes("drugs")}
        assert indexes == {"ix_drugs_company", "ix_drugs_launch_date", "ix_drugs_code"}

        with Operations.context(MigrationContext.configure(conn)):
            migration.downgrade()
        assert not inspect(conn).has_table("drugs")
    engine.dispose()

