from pathlib import Path

import sqlalchemy as sa
from alembic import command
from alembic.config import Config

ROOT = Path(__file__).resolve().parent.parent


def alembic_config(db_file: Path) -> Config:
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", f"sqlite:///{db_file}")
    cfg.attributes["configure_logger"] = False
    return cfg


def test_upgrade_creates_ledger_tables(tmp_path):
    db_file = tmp_path / "migrated.db"
    command.upgrade(alembic_config(db_file), "head")

    engine = sa.create_engine(f"sqlite:///{db_file}")
    try:
        inspector = sa.inspect(engine)
        assert {"orders", "order_items"} <= set(inspector.get_table_names())
        columns = {c["name"] for c in inspector.get_columns("order_items")}
        assert columns == {"id", "order_id", "product_id", "qty", "price"}
        fks = inspector.get_foreign_keys("order_items")
        assert fks[0]["referred_table"] == "orders"
    finally:
        engine.dispose()


def test_downgrade_drops_tables(tmp_path):
    db_file = tmp_path / "migrated.db"
    cfg = alembic_config(db_file)
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    engine = sa.create_engine(f"sqlite:///{db_file}")
    try:
        assert set(sa.inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
