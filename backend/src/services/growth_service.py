"""Service layer for growth measurements."""
from models.growth_measurement import GrowthMeasurement
from services.child_record_service import ChildRecordService


class GrowthService(ChildRecordService[GrowthMeasurement]):
    """Growth measurements, newest measurement first."""

    model = GrowthMeasurement
    entity_name = "Growth measurement"
    order_by = (GrowthMeasurement.measurement_date.desc(),)


growth_service = GrowthService()
