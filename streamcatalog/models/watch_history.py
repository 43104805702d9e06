from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from streamcatalog.database import Base


class WatchHistory(Base):
    __tablename__ = "watch_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"))
    episode_id = Column(Integer, ForeignKey("episodes.id"))
    series_id = Column(Integer, ForeignKey("series.id"))
    watched_at = Column(DateTime, default=datetime.utcnow)
    progress_percentage = Column(Integer, default=0)  # 0 to 100, not clamped
    completed = Column(Boolean, default=False)        # set independently of progress

    # Relationships
    user = relationship("User", back_populates="watch_history")
    episode = relationship("Episode", back_populates="watch_history")
    series = relationship("Series", back_populates="watch_history")

    def __repr__(self):
        return f"<WatchHistory user_id={self.user_id} episode_id={self.episode_id}>"


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"))
    series_id = Column(Integer, ForeignKey("series.id"))
    created_at = Column(DateTime, default=datetime.utcnow)

    # No unique (user_id, series_id) constraint: repeated favorites are stored as-is

    # Relationships
    user = relationship("User", back_populates="favorites")
    series = relationship("Series", back_populates="favorites")

    def __repr__(self):
        return f"<Favorite user_id={self.user_id} series_id={self.series_id}>"
