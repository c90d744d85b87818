from sqlalchemy.pool import StaticPool

from app.database import build_engine, normalize_url


def test_postgres_url_gets_async_driver():
    assert normalize_url("postgresql://u:p@db/ledger") == "postgresql+asyncpg://u:p@db/ledger"
    assert normalize_url("sqlite+aiosqlite:///./x.db") == "sqlite+aiosqlite:///./x.db"


def test_in_memory_sqlite_shares_one_connection():
    engine = build_engine("sqlite+aiosqlite://")
    assert isinstance(engine.pool, StaticPool)
    file_engine = build_engine("sqlite+aiosqlite:///./ledger-test.db")
    assert not isinstance(file_engine.pool, StaticPool)


def test_text_columns_have_no_length_limit():
    import app.models  # noqa: F401
    from app.database import Base

    for table in Base.metadata.tables.values():
        for column in table.columns:
            length = getattr(column.type, "length", None)
            assert length is None, f"{table.name}.{column.name} is VARCHAR({length})"
