"""
Series and Episode models for the drama catalog
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from datetime import datetime
from streamcatalog.database import Base
from streamcatalog.models.enums import SeriesStatus, ContentAccess


class Series(Base):
    __tablename__ = "series"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)

    # Media
    poster_url = Column(String(500))
    cover_url = Column(String(500))

    genre = Column(String(100))
    country = Column(String(100))
    language = Column(String(50))
    year = Column(Integer)
    rating = Column(Numeric(3, 1))      # 0.0 - 99.9
    total_episodes = Column(Integer)

    # Flags
    status = Column(String(50), default=SeriesStatus.ONGOING.value)            # ongoing, completed
    subscription_required = Column(String, default=ContentAccess.FREE.value)   # free, vip
    is_featured = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    # passive_deletes="all": deleting a parent never rewrites child foreign keys
    episodes = relationship("Episode", back_populates="series", order_by="Episode.episode_number",
                            passive_deletes="all")
    watch_history = relationship("WatchHistory", back_populates="series", passive_deletes="all")
    favorites = relationship("Favorite", back_populates="series", passive_deletes="all")

    def __repr__(self):
        return f"<Series {self.title}>"


class Episode(Base):
    __tablename__ = "episodes"

    id = Column(Integer, primary_key=True, index=True)
    # Nullable: an episode may exist without a series
    series_id = Column(Integer, ForeignKey("series.id"))
    episode_number = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    thumbnail_url = Column(String(500))
    video_url = Column(String(500))
    duration = Column(Integer)          # minutes
    subscription_required = Column(String, default=ContentAccess.FREE.value)

    released_at = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    series = relationship("Series", back_populates="episodes")
    watch_history = relationship("WatchHistory", back_populates="episode", passive_deletes="all")

    def __repr__(self):
        return f"<Episode series_id={self.series_id} ep={self.episode_number}>"
