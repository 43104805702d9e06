"""
Suggested value sets for free-form string columns.
Stored as plain strings; nothing at this layer rejects other values.
"""
import enum


class SubscriptionTier(str, enum.Enum):
    FREE = "free"
    MONTHLY = "monthly"
    ANNUAL = "annual"


class SeriesStatus(str, enum.Enum):
    ONGOING = "ongoing"
    COMPLETED = "completed"


class ContentAccess(str, enum.Enum):
    FREE = "free"
    VIP = "vip"
