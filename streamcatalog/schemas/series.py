"""
Pydantic schemas for Series and Episode
"""
from streamcatalog.models import Series, Episode
from streamcatalog.schemas.factory import create_insert_schema, create_select_schema

InsertSeries = create_insert_schema(Series, omit={"id", "created_at"}, name="InsertSeries")
SeriesRecord = create_select_schema(Series, name="SeriesRecord")

InsertEpisode = create_insert_schema(Episode, omit={"id", "created_at"}, name="InsertEpisode")
EpisodeRecord = create_select_schema(Episode, name="EpisodeRecord")
