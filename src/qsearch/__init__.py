"""
qsearch – query-string search translator.

Import path convention::

    from qsearch.application.search import Search
    from qsearch.kernel.schema import InMemorySchemaRegistry, PropertySchema
    from qsearch.kernel.errors import ValidationError
    from qsearch.adapters.sqlalchemy import SqlAlchemyStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
