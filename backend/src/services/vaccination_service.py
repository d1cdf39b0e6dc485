"""Service layer for the vaccination schedule."""
from models.vaccination import Vaccination
from services.child_record_service import ChildRecordService


class VaccinationService(ChildRecordService[Vaccination]):
    """Vaccinations ordered by recommended age."""

    model = Vaccination
    entity_name = "Vaccination"
    order_by = (Vaccination.recommended_age_months,)


vaccination_service = VaccinationService()
