import unittest
from datetime import datetime

from src.application.health_service import HealthSystemService
from src.domain.models import Prescription


class TestHealthSystemService(unittest.TestCase):
    def setUp(self) -> None:
        self.service = HealthSystemService()
        self.service.seed_data()

    def test_prescription_map_groups_by_patient(self) -> None:
        prescription_map = self.service.build_prescription_map()

        self.assertEqual(sorted(prescription_map), [1, 2, 3])
        self.assertEqual([p.id for p in prescription_map[1]], [1, 3])
        self.assertEqual([p.id for p in prescription_map[2]], [2, 5])

    def test_index_is_stale_until_rebuilt(self) -> None:
        self.service.build_prescription_map()
        self.service.prescriptions.add(
            Prescription(id=6, patient_id=3, medication_name="Insulin", date_issued=datetime(2024, 1, 1))
        )

        self.assertEqual(len(self.service.get_prescriptions_by_patient_id(3)), 1)

        self.service.build_prescription_map()
        self.assertEqual(len(self.service.get_prescriptions_by_patient_id(3)), 2)

    def test_unknown_patient_has_no_prescriptions(self) -> None:
        self.service.build_prescription_map()

        self.assertEqual(self.service.get_prescriptions_by_patient_id(42), [])

    def test_describe_prescriptions_for_missing_patient_logs(self) -> None:
        with self.assertLogs("src.application.health_service", level="WARNING"):
            lines = self.service.describe_prescriptions(42)

        self.assertEqual(lines, [])

    def test_describe_patients(self) -> None:
        lines = self.service.describe_patients()

        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith("ID: 1, Name: "))
