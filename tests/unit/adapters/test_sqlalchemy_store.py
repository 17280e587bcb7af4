"""Unit tests for the SQLAlchemy adapter (store + schema registry).

Uses an in-memory SQLite database; no running server needed.
"""
from __future__ import annotations

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table, Text, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column
from sqlalchemy.pool import StaticPool

from qsearch.adapters.sqlalchemy import SqlAlchemySchemaRegistry, SqlAlchemyStore
from qsearch.application.search import Search
from qsearch.config import SearchSettings
from qsearch.kernel.errors import StoreError, UnknownModelError, ValidationError
from qsearch.kernel.schema import PropertySchema

# ---------------------------------------------------------------------------
# Shared ORM base and test models
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class Page(Base):
    __tablename__ = "page"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(100), info={"searchable": True})
    description: Mapped[str] = mapped_column(String(200), info={"searchable": True})
    price: Mapped[int] = mapped_column(Integer, info={"searchable": True})
    body: Mapped[str] = mapped_column(Text, default="")


class Entry(Base):
    __tablename__ = "entry"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    group: Mapped[str] = mapped_column(String(20), info={"searchable": True})


ROWS = [
    ("Red shoes", "running", 50),
    ("Blue bag", "leather", 120),
    ("Red hat", "wool", 30),
    ("Green jacket", "red lining", 200),
    ("Yellow scarf", "silk", 80),
]


def _engine():
    engine = create_engine("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            Page(id=i, title=t, description=d, price=p, body="secret")
            for i, (t, d, p) in enumerate(ROWS, start=1)
        )
        session.add_all([Entry(id=1, group="b"), Entry(id=2, group="a"), Entry(id=3, group="a")])
        session.commit()
    return engine


def _search() -> Search:
    return Search("page", SqlAlchemySchemaRegistry(Page), SqlAlchemyStore(_engine()))


# ---------------------------------------------------------------------------
# Schema registry
# ---------------------------------------------------------------------------


class TestSqlAlchemySchemaRegistry:
    def test_reads_searchable_flag_from_column_info(self) -> None:
        schema = SqlAlchemySchemaRegistry(Page).properties_of("page")
        assert schema.properties == (
            PropertySchema("id", False),
            PropertySchema("title", True),
            PropertySchema("description", True),
            PropertySchema("price", True),
            PropertySchema("body", False),
        )

    def test_accepts_table(self) -> None:
        table = Table(
            "note",
            MetaData(),
            Column("id", Integer, primary_key=True),
            Column("text", Text, info={"searchable": True}),
        )
        schema = SqlAlchemySchemaRegistry(table).properties_of("note")
        assert schema.searchable_properties() == ("text",)

    def test_unknown_model(self) -> None:
        with pytest.raises(UnknownModelError):
            SqlAlchemySchemaRegistry(Page).properties_of("ghost")


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class TestSqlAlchemyStore:
    def test_find_without_predicate(self) -> None:
        store = SqlAlchemyStore(_engine())
        rows = store.find("page", "", "", {})
        assert len(rows) == 5
        assert rows[0]["title"] == "Red shoes"

    def test_find_with_bounds(self) -> None:
        store = SqlAlchemyStore(_engine())
        rows = store.find("page", "", "ORDER BY id ASC", {}, limit=2, offset=2)
        assert [r["id"] for r in rows] == [3, 4]

    def test_count(self) -> None:
        store = SqlAlchemyStore(_engine())
        assert store.count("page", "price >= :value0", {"value0": 80}) == 3

    def test_driver_error_becomes_store_error(self) -> None:
        store = SqlAlchemyStore(_engine())
        with pytest.raises(StoreError) as exc_info:
            store.find("missing_table", "", "", {})
        assert exc_info.value.model == "missing_table"
        assert exc_info.value.cause is not None

    def test_quote_identifier_only_quotes_when_needed(self) -> None:
        store = SqlAlchemyStore(_engine())
        assert store.quote_identifier("title") == "title"
        assert store.quote_identifier("group") == '"group"'

    def test_integer_too_wide_to_bind_becomes_store_error(self) -> None:
        store = SqlAlchemyStore(_engine())
        with pytest.raises(StoreError) as exc_info:
            store.count("page", "price <= :value0", {"value0": 10**20})
        assert isinstance(exc_info.value.cause, OverflowError)

    def test_from_settings(self) -> None:
        store = SqlAlchemyStore.from_settings(SearchSettings(database_url="sqlite://"))
        assert store.engine.url.drivername == "sqlite"
        store.dispose()


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


class TestSearchOverSqlAlchemy:
    def test_has_filter_with_sort_and_paging(self) -> None:
        result = _search().find({"title*has": "Red", "sort": "price*desc", "limit": "1", "offset": "1"})
        assert result.total == 2
        assert [r["title"] for r in result.result] == ["Red hat"]
        assert result.pages == 2
        assert result.page == 1

    def test_bare_criterion_searches_every_searchable_column(self) -> None:
        result = _search().find({"*has": "red", "sort": "id*asc"})
        # SQLite LIKE is case-insensitive for ASCII
        assert [r["id"] for r in result.result] == [1, 3, 4]
        assert result.total == 3

    def test_range(self) -> None:
        result = _search().find({"price*min": "50", "price*max": "120", "sort": "price*asc"})
        assert [r["price"] for r in result.result] == [50, 80, 120]

    def test_is_and_combination(self) -> None:
        result = _search().find({"title*has": "Red", "description*is": "wool"})
        assert [r["id"] for r in result.result] == [3]

    def test_offset_alone_is_ignored(self) -> None:
        result = _search().find({"offset": "3"})
        assert len(result.result) == 5
        assert result.page is None

    def test_non_searchable_column_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _search().find({"body*is": "secret"})

    def test_injection_attempt_in_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _search().find({"title = title OR 1=1 --*is": "x"})

    def test_injection_attempt_in_value_is_bound(self) -> None:
        result = _search().find({"title*is": "x' OR '1'='1"})
        assert result.total == 0

    def test_reserved_word_column_is_quoted(self) -> None:
        search = Search("entry", SqlAlchemySchemaRegistry(Entry), SqlAlchemyStore(_engine()))
        result = search.find({"group*is": "a", "sort": "id*desc"})
        assert [r["id"] for r in result.result] == [3, 2]
        assert result.predicate == '"group" = :value0'

    def test_sort_on_reserved_word_column(self) -> None:
        search = Search("entry", SqlAlchemySchemaRegistry(Entry), SqlAlchemyStore(_engine()))
        result = search.find({"sort": "group*asc", "limit": "1"})
        assert result.result[0]["group"] == "a"
        assert result.order_by == 'ORDER BY "group" ASC'

    def test_max_beyond_64_bits_matches_everything(self) -> None:
        result = _search().find({"price*max": "1e20"})
        assert result.total == 5
        assert len(result.result) == 5

    def test_limit_beyond_64_bits_is_clamped(self) -> None:
        result = _search().find({"limit": "99999999999999999999", "offset": "1e20"})
        assert result.limit == 2**63 - 1
        assert result.total == 5
        assert result.result == []
        assert result.pages == 1

    def test_huge_limit_returns_all_rows(self) -> None:
        result = _search().find({"limit": "1e20"})
        assert len(result.result) == 5
        assert result.page is None
