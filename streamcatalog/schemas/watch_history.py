from streamcatalog.models import WatchHistory, Favorite
from streamcatalog.schemas.factory import create_insert_schema, create_select_schema

# watched_at is stamped on insert; there is no created_at on this table
InsertWatchHistory = create_insert_schema(
    WatchHistory, omit={"id", "watched_at"}, name="InsertWatchHistory"
)
WatchHistoryRecord = create_select_schema(WatchHistory, name="WatchHistoryRecord")

InsertFavorite = create_insert_schema(Favorite, omit={"id", "created_at"}, name="InsertFavorite")
FavoriteRecord = create_select_schema(Favorite, name="FavoriteRecord")
