"""SQLAlchemy adapter – record store and schema registry."""
from qsearch.adapters.sqlalchemy.registry import SqlAlchemySchemaRegistry
from qsearch.adapters.sqlalchemy.store import SqlAlchemyStore

__all__ = ["SqlAlchemySchemaRegistry", "SqlAlchemyStore"]
