"""
Build Pydantic schemas straight from SQLAlchemy table columns so the
insert payload shape can never drift from the stored row shape.
"""
from typing import Any, Dict, Iterable, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.alias_generators import to_camel
from sqlalchemy import Column, Numeric, String

from streamcatalog.database import Base


class InsertSchema(BaseModel):
    # Payload keys may be camelCase (episodeNumber) or column names (episode_number).
    # Unknown keys, including omitted server-generated ones, are dropped.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class RecordSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _column_type(column: Column) -> Tuple[type, Dict[str, Any]]:
    """Python type of a column plus the Field constraints its SQL type implies."""
    col_type = column.type
    constraints: Dict[str, Any] = {}
    if isinstance(col_type, String) and col_type.length:
        constraints["max_length"] = col_type.length
    elif isinstance(col_type, Numeric) and col_type.precision is not None:
        constraints["max_digits"] = col_type.precision
        if col_type.scale is not None:
            constraints["decimal_places"] = col_type.scale
    return col_type.python_type, constraints


# Integer, boolean and string payload values must already have the column's type
STRICT_INSERT_TYPES = (int, bool, str)


def _is_required(column: Column) -> bool:
    return not column.nullable and column.default is None and column.server_default is None


def _scalar_default(column: Column) -> Any:
    # Callable defaults (timestamps) are left to the storage layer
    if column.default is not None and column.default.is_scalar:
        return column.default.arg
    return None


def create_insert_schema(
    model: Type[Base],
    omit: Iterable[str] = (),
    name: Optional[str] = None,
) -> Type[InsertSchema]:
    """
    Insert schema for ``model``: every column except those in ``omit``.

    Non-nullable columns without a default are required. Scalar column
    defaults become field defaults; everything else defaults to None.
    """
    columns = model.__table__.columns
    omitted = set(omit)
    unknown = omitted - set(columns.keys())
    if unknown:
        raise ValueError(f"{model.__name__} has no column(s) {sorted(unknown)}")

    fields = {}
    for key in columns.keys():
        if key in omitted:
            continue
        column = columns[key]
        python_type, constraints = _column_type(column)
        if python_type in STRICT_INSERT_TYPES:
            constraints["strict"] = True
        if _is_required(column):
            fields[key] = (python_type, Field(..., **constraints))
        else:
            fields[key] = (Optional[python_type], Field(_scalar_default(column), **constraints))

    return create_model(name or f"Insert{model.__name__}", __base__=InsertSchema, **fields)


def create_select_schema(model: Type[Base], name: Optional[str] = None) -> Type[RecordSchema]:
    """Full-row schema for ``model``; nullable columns are typed Optional."""
    fields = {}
    for column in model.__table__.columns:
        python_type, _ = _column_type(column)
        annotation = Optional[python_type] if column.nullable else python_type
        fields[column.key] = (annotation, ...)

    return create_model(name or f"{model.__name__}Record", __base__=RecordSchema, **fields)


def insert_values(instance: InsertSchema) -> Dict[str, Any]:
    """
    Column values for an INSERT: explicitly supplied fields plus non-null defaults.
    Unset fields without a scalar default are left out so the storage default applies.
    """
    values = instance.model_dump()
    return {
        key: value for key, value in values.items()
        if key in instance.model_fields_set or value is not None
    }
