import unittest
from datetime import date, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy.orm import Session

from src.services.driver_ranking import DriverRankingService
from src.utils.utils import utc_now


NOW = datetime(2026, 10, 19, 12, 0, 0)


def _driver(id, name, active=True):
    return SimpleNamespace(
        id=id,
        name=name,
        cpf=f"000.000.000-{id:02d}",
        city="Campinas",
        state="SP",
        birth_date=date(1985, 3, 1),
        modality="clt",
        is_active=active,
    )


def _transport(driver_id, days_ago):
    return SimpleNamespace(driver_id=driver_id, created_at=NOW - timedelta(days=days_ago))


def _evaluation(driver_id, weighted, incident=False):
    return SimpleNamespace(driver_id=driver_id, weighted_score=weighted, had_incident=incident)


class TestDriverRankingService(unittest.TestCase):
    """Unit tests for the per-driver ranking aggregation."""

    def setUp(self):
        """Set up test fixtures with mocked repositories."""
        self.mock_db = MagicMock(spec=Session)
        self.service = DriverRankingService(self.mock_db)
        self.service.driver_repo = MagicMock()
        self.service.transport_repo = MagicMock()
        self.service.evaluation_repo = MagicMock()

        self.service.driver_repo.list.return_value = [
            _driver(1, "Ana Lima"),
            _driver(2, "Bruno Reis"),
            _driver(3, "Carlos Dias", active=False),
        ]
        self.service.transport_repo.list.return_value = [
            _transport(1, 2),
            _transport(1, 60),
            _transport(2, 10),
            _transport(None, 1),
        ]
        self.service.evaluation_repo.list_all.return_value = [
            _evaluation(1, 100),
            # overridden evaluations are stored with the manual value
            _evaluation(1, 80, incident=True),
            _evaluation(2, 60),
        ]

    def test_per_driver_aggregates(self):
        """Trips, recent trips, score average and incidents per driver."""
        ranking = self.service.get_ranking(now=NOW)
        by_id = {d.id: d for d in ranking.drivers}

        self.assertEqual(by_id[1].total_trips, 2)
        self.assertEqual(by_id[1].trips_last_month, 1)
        self.assertEqual(by_id[1].average_score, 90.0)
        self.assertEqual(by_id[1].total_evaluations, 2)
        self.assertEqual(by_id[1].incident_count, 1)

        self.assertEqual(by_id[2].average_score, 60.0)
        self.assertIsNone(by_id[3].average_score)
        self.assertEqual(by_id[3].total_trips, 0)

    def test_stats(self):
        stats = self.service.get_ranking(now=NOW).stats

        self.assertEqual(stats.total_drivers, 3)
        self.assertEqual(stats.active_drivers, 2)
        # unassigned transports are not counted
        self.assertEqual(stats.total_trips, 3)
        self.assertEqual(stats.average_score, 75.0)
        self.assertEqual(stats.drivers_with_evaluations, 2)

    def test_sorted_lists(self):
        """Unevaluated drivers sort last and stay out of the score lists."""
        ranking = self.service.get_ranking(now=NOW)

        self.assertEqual([d.id for d in ranking.drivers], [1, 2, 3])
        self.assertEqual([d.id for d in ranking.top_drivers], [1, 2])
        self.assertEqual([d.id for d in ranking.bottom_drivers], [2, 1])
        self.assertEqual([d.id for d in ranking.most_incidents], [1])
        self.assertEqual([d.id for d in ranking.least_incidents], [2, 1])

    def test_lists_are_capped(self):
        drivers = [_driver(i, f"Motorista {i:02d}") for i in range(1, 9)]
        self.service.driver_repo.list.return_value = drivers
        self.service.transport_repo.list.return_value = []
        self.service.evaluation_repo.list_all.return_value = [
            _evaluation(d.id, 50 + d.id, incident=True) for d in drivers
        ]

        ranking = self.service.get_ranking(now=NOW)

        self.assertEqual(len(ranking.drivers), 8)
        self.assertEqual(len(ranking.top_drivers), 5)
        self.assertEqual(ranking.top_drivers[0].id, 8)
        self.assertEqual(len(ranking.most_incidents), 5)

    def test_defaults_to_current_utc_time(self):
        now = utc_now()
        self.assertIsNone(now.tzinfo)
        self.service.transport_repo.list.return_value = [
            SimpleNamespace(driver_id=1, created_at=now - timedelta(days=1)),
            SimpleNamespace(driver_id=1, created_at=now - timedelta(days=45)),
        ]

        ranking = self.service.get_ranking()
        by_id = {d.id: d for d in ranking.drivers}

        self.assertEqual(by_id[1].total_trips, 2)
        self.assertEqual(by_id[1].trips_last_month, 1)

    def test_no_evaluations(self):
        self.service.evaluation_repo.list_all.return_value = []

        ranking = self.service.get_ranking(now=NOW)

        self.assertEqual(ranking.stats.average_score, 0.0)
        self.assertEqual(ranking.top_drivers, [])
        self.assertEqual(ranking.most_incidents, [])


if __name__ == "__main__":
    unittest.main()
