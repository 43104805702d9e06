from streamcatalog.models.enums import SubscriptionTier, SeriesStatus, ContentAccess
from streamcatalog.models.session import Session
from streamcatalog.models.user import User
from streamcatalog.models.series import Series, Episode
from streamcatalog.models.watch_history import WatchHistory, Favorite

__all__ = [
    "SubscriptionTier",
    "SeriesStatus",
    "ContentAccess",
    "Session",
    "User",
    "Series",
    "Episode",
    "WatchHistory",
    "Favorite"
]
