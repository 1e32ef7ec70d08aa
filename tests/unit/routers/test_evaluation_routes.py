import unittest

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import src.models  # noqa: F401
from src.config.database import Base, build_engine
from src.main import app
from src.models import Driver, EvaluationCriteria, Transport
from src.schemas import TokenInfo
from src.utils.dependencies import get_current_user, get_db


class TestEvaluationRoutes(unittest.TestCase):
    """HTTP-level checks for criteria and evaluation endpoints."""

    def setUp(self):
        self.engine = build_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False)()

        self.criteria = [
            EvaluationCriteria(name="Pontualidade", weight=40, order=0),
            EvaluationCriteria(name="Cuidado com o veículo", weight=35, order=1),
            EvaluationCriteria(name="Comunicação", weight=25, order=2),
        ]
        self.db.add_all(self.criteria)
        driver = Driver(
            name="João Silva",
            cpf="123.456.789-00",
            phone="11987654321",
            modality="clt",
            cnh_type="E",
        )
        self.db.add(driver)
        self.db.commit()
        transport = Transport(
            request_number="OTD00001",
            vehicle_chassi="9BWZZZ377VT004251",
            driver_id=driver.id,
            status="entregue",
        )
        self.db.add(transport)
        self.db.commit()
        self.driver_id = driver.id
        self.transport_id = transport.id

        def _get_db():
            yield self.db

        app.dependency_overrides[get_db] = _get_db
        self.login_as("admin")
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def login_as(self, role):
        app.dependency_overrides[get_current_user] = lambda: TokenInfo(
            email=f"{role}@frotalog.com.br", id=1, role=role
        )

    def _scores(self, *severities):
        return [
            {"criterion_id": c.id, "severity": s}
            for c, s in zip(self.criteria, severities)
        ]

    def test_requires_token(self):
        del app.dependency_overrides[get_current_user]

        response = self.client.get("/api/evaluation-criteria/")
        self.assertEqual(response.status_code, 401)

    def test_list_and_summary(self):
        response = self.client.get("/api/evaluation-criteria/", params={"active_only": True})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([c["name"] for c in response.json()][0], "Pontualidade")

        summary = self.client.get("/api/evaluation-criteria/weight-summary").json()
        self.assertEqual(summary["total"], 100.0)
        self.assertTrue(summary["is_valid"])

    def test_bulk_update_rejects_bad_total(self):
        payload = {"criteria": [
            {"id": self.criteria[0].id, "weight": 40},
            {"id": self.criteria[1].id, "weight": 35},
            {"id": self.criteria[2].id, "weight": 24.99},
        ]}

        response = self.client.put("/api/evaluation-criteria/bulk-update", json=payload)

        self.assertEqual(response.status_code, 422)
        self.assertIn("99.99", response.json()["detail"]["message"])

    def test_bulk_update_is_admin_only(self):
        self.login_as("operador")
        payload = {"criteria": [{"id": self.criteria[0].id, "weight": 40}]}

        response = self.client.put("/api/evaluation-criteria/bulk-update", json=payload)
        self.assertEqual(response.status_code, 403)

    def test_preview(self):
        self.login_as("visualizador")

        response = self.client.post(
            "/api/driver-evaluations/preview",
            json={"scores": self._scores("leve", "sem_ocorrencia", "grave")},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"average": 63.33, "weighted": 71.0})

    def test_submit(self):
        self.login_as("operador")

        response = self.client.post("/api/driver-evaluations/", json={
            "transport_id": self.transport_id,
            "driver_id": self.driver_id,
            "scores": self._scores("leve", "sem_ocorrencia", "grave"),
        })

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["weighted_score"], 71.0)
        self.assertEqual(len(body["scores"]), 3)

        pending = self.client.get("/api/driver-evaluations/pending-transports").json()
        self.assertEqual(pending, [])

    def test_submit_forbidden_for_viewer(self):
        self.login_as("visualizador")

        response = self.client.post("/api/driver-evaluations/", json={
            "transport_id": self.transport_id,
            "driver_id": self.driver_id,
            "scores": self._scores("leve", "leve", "leve"),
        })
        self.assertEqual(response.status_code, 403)

    def test_submit_incident_needs_description(self):
        response = self.client.post("/api/driver-evaluations/", json={
            "transport_id": self.transport_id,
            "driver_id": self.driver_id,
            "had_incident": True,
            "scores": self._scores("leve", "leve", "leve"),
        })

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"]["errors"][0]["field"], "incident_description")


if __name__ == "__main__":
    unittest.main()
