"""
Server-side login session storage.
"""
from sqlalchemy import Column, String, DateTime, Index, JSON
from sqlalchemy.dialects.postgresql import JSONB
from streamcatalog.database import Base


class Session(Base):
    __tablename__ = "sessions"

    sid = Column(String, primary_key=True)
    sess = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    expire = Column(DateTime, nullable=False)

    # Expired-session sweeps filter on expire
    __table_args__ = (
        Index("IDX_session_expire", "expire"),
    )

    def __repr__(self):
        return f"<Session sid={self.sid} expire={self.expire}>"
