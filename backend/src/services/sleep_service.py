"""Service layer for sleep logs."""
from models.sleep_log import SleepLog
from services.child_record_service import ChildRecordService


class SleepService(ChildRecordService[SleepLog]):
    """Sleep logs, newest night first."""

    model = SleepLog
    entity_name = "Sleep log"
    order_by = (SleepLog.sleep_date.desc(),)
    date_column = "sleep_date"


sleep_service = SleepService()
