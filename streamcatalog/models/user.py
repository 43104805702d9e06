from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from streamcatalog.database import Base
from streamcatalog.models.enums import SubscriptionTier


class User(Base):
    __tablename__ = "users"

    # Issued by the external identity provider, never generated here
    id = Column(String, primary_key=True, nullable=False)
    email = Column(String, unique=True)
    first_name = Column(String)
    last_name = Column(String)
    profile_image_url = Column(String)
    subscription_tier = Column(String, default=SubscriptionTier.FREE.value)  # free, monthly, annual

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    watch_history = relationship("WatchHistory", back_populates="user", passive_deletes="all")
    favorites = relationship("Favorite", back_populates="user", passive_deletes="all")

    def __repr__(self):
        return f"<User {self.id} email={self.email}>"
