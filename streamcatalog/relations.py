"""
Navigable associations between catalog tables.

Each relation is a plain descriptor keyed by (source table, relation name).
The ORM ``relationship()`` attributes on the models mirror this map; query
code that builds joins by hand reads it through ``join_condition``.
"""
from typing import Dict, NamedTuple, Type, Union

from sqlalchemy.sql.elements import ColumnElement

from streamcatalog.database import Base
from streamcatalog.models import Series, Episode, User, WatchHistory, Favorite

ONE = "one"
MANY = "many"


class Relation(NamedTuple):
    source: Type[Base]
    name: str
    target: Type[Base]
    cardinality: str
    # Column names on each side of the equality. For "one" relations the
    # foreign key sits on the source, for "many" relations on the target.
    source_field: str
    target_field: str


def _one(source, name, target, fk):
    return Relation(source, name, target, ONE, fk, "id")


def _many(source, name, target, fk):
    return Relation(source, name, target, MANY, "id", fk)


RELATIONS: Dict[str, Dict[str, Relation]] = {
    "series": {
        "episodes": _many(Series, "episodes", Episode, "series_id"),
        "watchHistory": _many(Series, "watchHistory", WatchHistory, "series_id"),
        "favorites": _many(Series, "favorites", Favorite, "series_id"),
    },
    "episodes": {
        "series": _one(Episode, "series", Series, "series_id"),
        "watchHistory": _many(Episode, "watchHistory", WatchHistory, "episode_id"),
    },
    "users": {
        "watchHistory": _many(User, "watchHistory", WatchHistory, "user_id"),
        "favorites": _many(User, "favorites", Favorite, "user_id"),
    },
    "watch_history": {
        "user": _one(WatchHistory, "user", User, "user_id"),
        "episode": _one(WatchHistory, "episode", Episode, "episode_id"),
        "series": _one(WatchHistory, "series", Series, "series_id"),
    },
    "favorites": {
        "user": _one(Favorite, "user", User, "user_id"),
        "series": _one(Favorite, "series", Series, "series_id"),
    },
}


def _table_name(entity: Union[str, Type[Base]]) -> str:
    return entity if isinstance(entity, str) else entity.__tablename__


def relations_for(entity: Union[str, Type[Base]]) -> Dict[str, Relation]:
    """All relations declared for a table; empty for tables without any (sessions)."""
    return dict(RELATIONS.get(_table_name(entity), {}))


def get_relation(entity: Union[str, Type[Base]], name: str) -> Relation:
    table = _table_name(entity)
    try:
        return RELATIONS[table][name]
    except KeyError:
        raise KeyError(f"No relation '{name}' declared for '{table}'") from None


def join_condition(entity: Union[str, Type[Base]], name: str) -> ColumnElement:
    """
    Equality expression joining a table to one of its relations, e.g.
    ``join_condition(Episode, "series")`` -> ``episodes.series_id = series.id``.
    """
    relation = get_relation(entity, name)
    source_column = getattr(relation.source, relation.source_field)
    target_column = getattr(relation.target, relation.target_field)
    if relation.cardinality == ONE:
        return source_column == target_column
    return target_column == source_column
