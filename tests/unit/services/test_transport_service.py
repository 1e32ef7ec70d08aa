import unittest

from fastapi import HTTPException
from sqlalchemy.orm import sessionmaker

import src.models  # noqa: F401
from src.config.database import Base, build_engine
from src.schemas import DriverCreate, TransportCreate, TransportUpdate
from src.services import DriverService, TransportService
from src.utils.constants import TransportStatusConst

CHASSI = "9BWZZZ377VT004251"


class TestTransportAndDriverServices(unittest.TestCase):
    """Unit tests for driver records and transport request numbering."""

    def setUp(self):
        self.engine = build_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False)()
        self.drivers = DriverService(self.db)
        self.transports = TransportService(self.db)

        self.driver = self.drivers.create_driver(DriverCreate(
            name="João Silva",
            cpf="123.456.789-00",
            phone="11987654321",
            state="SP",
            modality="clt",
            cnh_type="E",
        ))

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def test_request_numbers_are_sequential(self):
        first = self.transports.create_transport(TransportCreate(vehicle_chassi=CHASSI))
        second = self.transports.create_transport(
            TransportCreate(vehicle_chassi=CHASSI, driver_id=self.driver.id)
        )

        self.assertEqual(first.request_number, "OTD00001")
        self.assertEqual(second.request_number, "OTD00002")
        self.assertEqual(first.status, TransportStatusConst.PENDENTE.value)

    def test_unknown_driver(self):
        with self.assertRaises(HTTPException) as ctx:
            self.transports.create_transport(TransportCreate(vehicle_chassi=CHASSI, driver_id=999))
        self.assertEqual(ctx.exception.status_code, 404)

    def test_delivery_is_stamped_once(self):
        transport = self.transports.create_transport(
            TransportCreate(vehicle_chassi=CHASSI, driver_id=self.driver.id)
        )
        self.assertIsNone(transport.delivered_at)

        delivered = self.transports.update_transport(
            transport.id, TransportUpdate(status=TransportStatusConst.ENTREGUE)
        )
        stamped = delivered.delivered_at
        self.assertIsNotNone(stamped)

        again = self.transports.update_transport(
            transport.id, TransportUpdate(status=TransportStatusConst.ENTREGUE, notes="ok")
        )
        self.assertEqual(again.delivered_at, stamped)

    def test_list_filters(self):
        self.transports.create_transport(TransportCreate(vehicle_chassi=CHASSI))
        self.transports.create_transport(TransportCreate(
            vehicle_chassi=CHASSI,
            driver_id=self.driver.id,
            status=TransportStatusConst.ENTREGUE,
        ))

        delivered = self.transports.list_transports(status=TransportStatusConst.ENTREGUE)
        self.assertEqual([t.request_number for t in delivered], ["OTD00002"])
        self.assertEqual(len(self.transports.list_transports(driver_id=self.driver.id)), 1)

    def test_duplicate_cpf_conflicts(self):
        with self.assertRaises(HTTPException) as ctx:
            self.drivers.create_driver(DriverCreate(
                name="Outro",
                cpf="123.456.789-00",
                phone="11900000000",
                modality="pj",
                cnh_type="C",
            ))
        self.assertEqual(ctx.exception.status_code, 409)

    def test_driver_delete_is_soft_when_it_has_transports(self):
        self.transports.create_transport(
            TransportCreate(vehicle_chassi=CHASSI, driver_id=self.driver.id)
        )

        result = self.drivers.delete_driver(self.driver.id)

        self.assertEqual(result.deleted, "soft")
        self.assertFalse(self.drivers.get_driver(self.driver.id).is_active)

    def test_driver_delete_is_hard_without_transports(self):
        driver_id = self.driver.id
        result = self.drivers.delete_driver(driver_id)

        self.assertEqual(result.deleted, "hard")
        self.assertIsNone(self.drivers.get_driver(driver_id))
        self.assertIsNone(self.drivers.delete_driver(driver_id))


if __name__ == "__main__":
    unittest.main()
