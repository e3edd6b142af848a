import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from src.domain.exceptions import EntityNotFoundException
from src.domain.models import Patient, Prescription
from src.infrastructure.repository import KeyedRepository

logger = logging.getLogger(__name__)


class HealthSystemService:
    """
    Patient and prescription lookup.

    The prescription index is a derived view: it is rebuilt in full by
    build_prescription_map() and goes stale after any change to the
    prescription repository until it is rebuilt.
    """

    def __init__(
        self,
        patients: Optional[KeyedRepository[Patient]] = None,
        prescriptions: Optional[KeyedRepository[Prescription]] = None,
    ):
        self.patients = patients if patients is not None else KeyedRepository()
        self.prescriptions = prescriptions if prescriptions is not None else KeyedRepository()
        self._prescription_map: Dict[int, List[Prescription]] = {}

    def seed_data(self) -> None:
        self.patients.add(Patient(id=1, name="Ama Mensah", age=34, gender="Female"))
        self.patients.add(Patient(id=2, name="Kwame Boateng", age=51, gender="Male"))
        self.patients.add(Patient(id=3, name="Efua Owusu", age=27, gender="Female"))

        today = datetime.now()
        self.prescriptions.add(Prescription(id=1, patient_id=1, medication_name="Amoxicillin", date_issued=today - timedelta(days=20)))
        self.prescriptions.add(Prescription(id=2, patient_id=2, medication_name="Lisinopril", date_issued=today - timedelta(days=12)))
        self.prescriptions.add(Prescription(id=3, patient_id=1, medication_name="Ibuprofen", date_issued=today - timedelta(days=7)))
        self.prescriptions.add(Prescription(id=4, patient_id=3, medication_name="Metformin", date_issued=today - timedelta(days=3)))
        self.prescriptions.add(Prescription(id=5, patient_id=2, medication_name="Atorvastatin", date_issued=today - timedelta(days=1)))

    def build_prescription_map(self) -> Dict[int, List[Prescription]]:
        """Regroups every stored prescription by patient id, discarding the previous index."""
        prescription_map: Dict[int, List[Prescription]] = {}
        for prescription in self.prescriptions.get_all():
            prescription_map.setdefault(prescription.patient_id, []).append(prescription)
        self._prescription_map = prescription_map
        return {patient_id: list(items) for patient_id, items in prescription_map.items()}

    def get_prescriptions_by_patient_id(self, patient_id: int) -> List[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    def describe_patients(self) -> List[str]:
        return [
            f"ID: {p.id}, Name: {p.name}, Age: {p.age}, Gender: {p.gender}"
            for p in self.patients.get_all()
        ]

    def describe_prescriptions(self, patient_id: int) -> List[str]:
        try:
            patient = self.patients.get_by_id(patient_id)
        except EntityNotFoundException as e:
            logger.warning(f"Not Found: {e}")
            return []

        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if not prescriptions:
            return [f"No prescriptions found for {patient.name}."]
        return [
            f"Prescription ID: {p.id}, Medication: {p.medication_name}, Date Issued: {p.date_issued:%Y-%m-%d}"
            for p in prescriptions
        ]
