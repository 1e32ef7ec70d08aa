import unittest
from types import SimpleNamespace

import bcrypt
from fastapi import HTTPException
from sqlalchemy.orm import sessionmaker

import src.models  # noqa: F401
from src.config.database import Base, build_engine
from src.models import User, UserRole
from src.services import AuthService


class TestAuthService(unittest.TestCase):
    """Unit tests for login, token verification and refresh."""

    def setUp(self):
        self.engine = build_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False)()
        self.service = AuthService(self.db)

        role = UserRole(role_name="operador")
        self.db.add(role)
        self.db.commit()

        password_hash = bcrypt.hashpw(b"s3nha-forte", bcrypt.gensalt(rounds=4)).decode("utf-8")
        self.user = User(
            email="operador@frotalog.com.br",
            full_name="Operador",
            password_hash=password_hash,
            role_id=role.id,
        )
        self.db.add(self.user)
        self.db.commit()

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def _form(self, password="s3nha-forte"):
        return SimpleNamespace(username="operador@frotalog.com.br", password=password)

    def test_login_issues_tokens_with_role(self):
        tokens = self.service.login(self._form())

        self.assertEqual(tokens["token_type"], "bearer")
        self.assertEqual(tokens["user"]["role"], "operador")
        self.assertIsNotNone(tokens["user"]["last_login_at"])

        info = self.service.verify_token(tokens["access_token"])
        self.assertEqual(info.email, "operador@frotalog.com.br")
        self.assertEqual(info.id, self.user.id)
        self.assertEqual(info.role, "operador")

    def test_login_rejects_wrong_password(self):
        self.assertIsNone(self.service.login(self._form("errada")))

    def test_login_rejects_inactive_user(self):
        self.user.is_active = False
        self.db.commit()

        self.assertIsNone(self.service.login(self._form()))

    def test_verify_rejects_garbage(self):
        self.assertIsNone(self.service.verify_token("not-a-jwt"))

    def test_refresh(self):
        tokens = self.service.login(self._form())

        refreshed = self.service.refresh_access_token(tokens["refresh_token"])
        self.assertIsNotNone(self.service.verify_token(refreshed["access_token"]))

        with self.assertRaises(HTTPException) as ctx:
            self.service.refresh_access_token("not-a-jwt")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_get_user(self):
        user = self.service.get_user(self.user.id)

        self.assertEqual(user.role.role_name, "operador")
        self.assertIsNone(self.service.get_user(999))


if __name__ == "__main__":
    unittest.main()
