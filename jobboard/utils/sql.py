"""
SQL helpers shared by the models.
"""

from typing import Any, List, Mapping, Tuple

from jobboard.core.errors import BadRequestError


def sql_for_partial_update(data_to_update: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> Tuple[str, List[Any]]:
    """
    Build the SET part of an UPDATE from only the fields being changed.

    js_to_sql maps application field names to column names; a field missing
    from it is used as the column name unchanged.

    sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        -> ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Placeholders are numbered from 1, so the caller's own parameters start
    at len(values) + 1.
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestError("No data")

    cols = [f'"{js_to_sql.get(key, key)}"=${idx}' for idx, key in enumerate(keys, start=1)]

    return ", ".join(cols), [data_to_update[key] for key in keys]
