"""Service layer for nutrition logs."""
from datetime import date
from typing import Any

from models.nutrition_log import NutritionLog
from services.child_record_service import ChildRecordService


class NutritionService(ChildRecordService[NutritionLog]):
    """
    Nutrition logs.

    The full history is newest day first; a single day is listed in clock
    order so the client can render it as a timeline.
    """

    model = NutritionLog
    entity_name = "Nutrition log"
    order_by = (NutritionLog.log_date.desc(),)
    date_column = "log_date"

    def _list_order(self, on_date: date | None) -> tuple[Any, ...]:
        if on_date is not None:
            return (NutritionLog.time,)
        return self.order_by


nutrition_service = NutritionService()
