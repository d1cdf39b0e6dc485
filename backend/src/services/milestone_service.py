"""Service layer for developmental milestones."""
from models.milestone import DevelopmentalMilestone
from services.child_record_service import ChildRecordService


class MilestoneService(ChildRecordService[DevelopmentalMilestone]):
    """Milestones in the order they are expected to happen."""

    model = DevelopmentalMilestone
    entity_name = "Milestone"
    order_by = (DevelopmentalMilestone.expected_age_months,)


milestone_service = MilestoneService()
