"""
Helpers shared by the CRUD modules.
"""

from typing import Any, Dict, List, Tuple
from sqlalchemy.orm import Query

# Request field name -> ORM attribute name, where they differ
_RENAMED_FIELDS = {"metadata": "metadata_"}


def column_values(data: Dict[str, Any]) -> Dict[str, Any]:
    """Translate a request payload dict into ORM constructor/attribute names."""
    return {_RENAMED_FIELDS.get(key, key): value for key, value in data.items()}


def apply_updates(instance: Any, data: Dict[str, Any]) -> None:
    """Set every key of `data` on the ORM instance."""
    for key, value in column_values(data).items():
        setattr(instance, key, value)


def paginate(query: Query, limit: int, offset: int) -> Tuple[List[Any], int]:
    """
    Run a filtered query as one page plus the total row count.

    The count ignores ordering and eager-load options; the page applies both.
    """
    total = query.order_by(None).count()
    rows = query.offset(offset).limit(limit).all()
    return rows, total
