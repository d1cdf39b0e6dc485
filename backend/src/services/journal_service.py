"""Service layer for memory journal entries."""
from models.journal_entry import JournalEntry
from services.child_record_service import ChildRecordService


class JournalService(ChildRecordService[JournalEntry]):
    """Journal entries, newest first."""

    model = JournalEntry
    entity_name = "Journal entry"
    order_by = (JournalEntry.journal_date.desc(),)


journal_service = JournalService()
