"""Service layer for health notes."""
from models.health_note import HealthNote
from services.child_record_service import ChildRecordService


class HealthNoteService(ChildRecordService[HealthNote]):
    """Health notes, newest first."""

    model = HealthNote
    entity_name = "Health note"
    order_by = (HealthNote.note_date.desc(),)


health_note_service = HealthNoteService()
