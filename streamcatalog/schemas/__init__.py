from streamcatalog.schemas.user import UpsertUser, UserRecord, InsertSession, SessionRecord
from streamcatalog.schemas.series import InsertSeries, SeriesRecord, InsertEpisode, EpisodeRecord
from streamcatalog.schemas.watch_history import (
    InsertWatchHistory, WatchHistoryRecord, InsertFavorite, FavoriteRecord
)

__all__ = [
    "UpsertUser",
    "UserRecord",
    "InsertSession",
    "SessionRecord",
    "InsertSeries",
    "SeriesRecord",
    "InsertEpisode",
    "EpisodeRecord",
    "InsertWatchHistory",
    "WatchHistoryRecord",
    "InsertFavorite",
    "FavoriteRecord"
]
