"""
Insert payload validation keyed by table name.
"""
import logging
from typing import Any, Dict, Mapping, Type

import pydantic

from streamcatalog.exceptions import ValidationError
from streamcatalog.schemas import (
    UpsertUser, InsertSession, InsertSeries, InsertEpisode, InsertWatchHistory, InsertFavorite
)
from streamcatalog.schemas.factory import InsertSchema, insert_values

logger = logging.getLogger(__name__)

INSERT_SCHEMAS: Dict[str, Type[InsertSchema]] = {
    "sessions": InsertSession,
    "users": UpsertUser,
    "series": InsertSeries,
    "episodes": InsertEpisode,
    "watch_history": InsertWatchHistory,
    "favorites": InsertFavorite,
}


def get_insert_schema(entity: str) -> Type[InsertSchema]:
    try:
        return INSERT_SCHEMAS[entity]
    except KeyError:
        raise KeyError(f"No insert schema for '{entity}'") from None


def validate_insert(entity: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate an insert payload for ``entity`` (a table name).

    Returns:
        Column name -> value mapping with scalar defaults applied

    Raises:
        ValidationError: listing every offending field
    """
    schema = get_insert_schema(entity)
    try:
        instance = schema.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        error = ValidationError.from_pydantic(entity, exc)
        logger.warning(error.message)
        raise error from exc
    return insert_values(instance)
