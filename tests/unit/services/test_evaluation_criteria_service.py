import unittest

from fastapi import HTTPException
from sqlalchemy.orm import sessionmaker

import src.models  # noqa: F401 registers every table on Base.metadata
from src.config.database import Base, build_engine
from src.models import DriverEvaluation, DriverEvaluationScore, EvaluationCriteria
from src.schemas import (
    CriteriaBulkUpdate,
    CriteriaWeightItem,
    EvaluationCriteriaCreate,
    EvaluationCriteriaUpdate,
)
from src.services import EvaluationCriteriaService


class TestEvaluationCriteriaService(unittest.TestCase):
    """Unit tests for criteria CRUD and the bulk weight update."""

    def setUp(self):
        self.engine = build_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False)()
        self.service = EvaluationCriteriaService(self.db)

        self.pontualidade = self._add("Pontualidade", 40, 0)
        self.cuidado = self._add("Cuidado com o veículo", 35, 1)
        self.comunicacao = self._add("Comunicação", 25, 2)

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def _add(self, name, weight, order):
        criterion = EvaluationCriteria(
            name=name,
            weight=weight,
            penalty_leve=10,
            penalty_medio=50,
            penalty_grave=100,
            is_active=True,
            order=order,
        )
        self.db.add(criterion)
        self.db.commit()
        return criterion

    def _weights(self):
        return {c.name: float(c.weight) for c in self.service.list_criteria(active_only=True)}

    def test_list_is_ordered(self):
        names = [c.name for c in self.service.list_criteria()]
        self.assertEqual(names, ["Pontualidade", "Cuidado com o veículo", "Comunicação"])

    def test_create_defaults_order_to_end(self):
        created = self.service.create_criteria(
            EvaluationCriteriaCreate(name="  Documentação ", weight=5)
        )

        self.assertEqual(created.name, "Documentação")
        self.assertEqual(created.order, 3)
        self.assertEqual(float(created.penalty_leve), 10.0)
        self.assertTrue(created.is_active)

    def test_create_duplicate_name_conflicts(self):
        with self.assertRaises(HTTPException) as ctx:
            self.service.create_criteria(EvaluationCriteriaCreate(name="Pontualidade", weight=5))
        self.assertEqual(ctx.exception.status_code, 409)

    def test_update_single_criterion(self):
        updated = self.service.update_criteria(
            self.comunicacao.id, EvaluationCriteriaUpdate(penalty_leve=20)
        )

        self.assertEqual(float(updated.penalty_leve), 20.0)
        self.assertEqual(float(updated.weight), 25.0)
        self.assertIsNone(self.service.update_criteria(999, EvaluationCriteriaUpdate(weight=10)))

    def test_bulk_update_accepts_total_of_100(self):
        result = self.service.bulk_update_weights(CriteriaBulkUpdate(criteria=[
            CriteriaWeightItem(id=self.pontualidade.id, weight=50),
            CriteriaWeightItem(id=self.cuidado.id, weight=30),
            CriteriaWeightItem(id=self.comunicacao.id, weight=20, order=0),
        ]))

        self.assertEqual(len(result), 3)
        self.assertEqual(
            self._weights(),
            {"Pontualidade": 50.0, "Cuidado com o veículo": 30.0, "Comunicação": 20.0},
        )

    def test_bulk_update_rejects_short_total_without_writing(self):
        with self.assertRaises(HTTPException) as ctx:
            self.service.bulk_update_weights(CriteriaBulkUpdate(criteria=[
                CriteriaWeightItem(id=self.pontualidade.id, weight=40),
                CriteriaWeightItem(id=self.cuidado.id, weight=35),
                CriteriaWeightItem(id=self.comunicacao.id, weight=24.99),
            ]))

        self.assertEqual(ctx.exception.status_code, 422)
        self.assertIn("99.99", ctx.exception.detail["message"])
        self.assertEqual(ctx.exception.detail["errors"][0]["field"], "weight")
        self.assertEqual(
            self._weights(),
            {"Pontualidade": 40.0, "Cuidado com o veículo": 35.0, "Comunicação": 25.0},
        )

    def test_bulk_update_rejects_excess_total(self):
        with self.assertRaises(HTTPException) as ctx:
            self.service.bulk_update_weights(CriteriaBulkUpdate(criteria=[
                CriteriaWeightItem(id=self.comunicacao.id, weight=25.02),
            ]))

        self.assertEqual(ctx.exception.status_code, 422)
        self.assertIn("exceeds by 0.02", ctx.exception.detail["message"])

    def test_bulk_update_partial_payload_is_checked_against_active_set(self):
        # 45 + 30 + 25 = 100
        self.service.bulk_update_weights(CriteriaBulkUpdate(criteria=[
            CriteriaWeightItem(id=self.pontualidade.id, weight=45),
            CriteriaWeightItem(id=self.cuidado.id, weight=30),
        ]))

        self.assertEqual(self._weights()["Pontualidade"], 45.0)

    def test_bulk_update_checks_weights_at_stored_scale(self):
        # 40.005 is stored as 40.01, which would leave the set at 100.01
        with self.assertRaises(HTTPException) as ctx:
            self.service.bulk_update_weights(CriteriaBulkUpdate(criteria=[
                CriteriaWeightItem(id=self.pontualidade.id, weight=40.005),
            ]))

        self.assertEqual(ctx.exception.status_code, 422)
        self.assertIn("100.01", ctx.exception.detail["message"])
        self.assertEqual(self._weights()["Pontualidade"], 40.0)

    def test_bulk_update_accepted_set_stays_valid(self):
        self.service.bulk_update_weights(CriteriaBulkUpdate(criteria=[
            CriteriaWeightItem(id=self.pontualidade.id, weight=40.004),
        ]))

        self.assertEqual(self._weights()["Pontualidade"], 40.0)
        summary = self.service.weight_summary()
        self.assertEqual(summary.total, 100.0)
        self.assertTrue(summary.is_valid)

    def test_bulk_update_unknown_id(self):
        with self.assertRaises(HTTPException) as ctx:
            self.service.bulk_update_weights(CriteriaBulkUpdate(criteria=[
                CriteriaWeightItem(id=999, weight=40),
            ]))
        self.assertEqual(ctx.exception.status_code, 404)

    def test_bulk_update_duplicate_id(self):
        with self.assertRaises(HTTPException) as ctx:
            self.service.bulk_update_weights(CriteriaBulkUpdate(criteria=[
                CriteriaWeightItem(id=self.pontualidade.id, weight=40),
                CriteriaWeightItem(id=self.pontualidade.id, weight=40),
            ]))
        self.assertEqual(ctx.exception.status_code, 422)

    def test_weight_summary(self):
        summary = self.service.weight_summary()
        self.assertEqual(summary.total, 100.0)
        self.assertEqual(summary.remaining, 0.0)
        self.assertTrue(summary.is_valid)
        self.assertEqual(summary.active_count, 3)

        self.service.update_criteria(self.comunicacao.id, EvaluationCriteriaUpdate(weight=20))
        summary = self.service.weight_summary()
        self.assertEqual(summary.total, 95.0)
        self.assertEqual(summary.remaining, 5.0)
        self.assertFalse(summary.is_valid)

    def test_delete_unreferenced_is_hard(self):
        result = self.service.delete_criteria(self.comunicacao.id)

        self.assertEqual(result.deleted, "hard")
        self.assertIsNone(self.service.get_criteria(self.comunicacao.id))

    def test_delete_referenced_is_soft(self):
        evaluation = DriverEvaluation(
            transport_id=1,
            driver_id=1,
            had_incident=False,
            average_score=100,
            weighted_score=100,
            computed_weighted_score=100,
            is_manual_override=False,
        )
        evaluation.scores = [DriverEvaluationScore(
            criterion_id=self.comunicacao.id,
            criterion_name="Comunicação",
            severity="sem_ocorrencia",
            score=100,
            weight=25,
        )]
        self.db.add(evaluation)
        self.db.commit()

        result = self.service.delete_criteria(self.comunicacao.id)

        self.assertEqual(result.deleted, "soft")
        kept = self.service.get_criteria(self.comunicacao.id)
        self.assertIsNotNone(kept)
        self.assertFalse(kept.is_active)
        self.assertNotIn("Comunicação", self._weights())

    def test_delete_missing(self):
        self.assertIsNone(self.service.delete_criteria(999))


if __name__ == "__main__":
    unittest.main()
