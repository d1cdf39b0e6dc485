"""SQLAlchemy models."""
from models.base import Base, ChildOwnedMixin, CreatedAtMixin, TimestampMixin
from models.child_profile import ChildProfile
from models.growth_measurement import GrowthMeasurement
from models.health_note import HealthNote
from models.journal_entry import JournalEntry
from models.milestone import DevelopmentalMilestone
from models.nutrition_log import NutritionLog
from models.sleep_log import SleepLog
from models.subscription import Subscription
from models.user import User
from models.vaccination import Vaccination

__all__ = [
    "Base",
    "ChildOwnedMixin",
    "ChildProfile",
    "CreatedAtMixin",
    "DevelopmentalMilestone",
    "GrowthMeasurement",
    "HealthNote",
    "JournalEntry",
    "NutritionLog",
    "SleepLog",
    "Subscription",
    "TimestampMixin",
    "User",
    "Vaccination",
]
