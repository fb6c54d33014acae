import copy
import os
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest

os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-service-role-key")

from scoutquest.data import ACHIEVEMENTS, RANKS, REWARDS  # noqa: E402
from scoutquest.db.repository import achievement_to_row  # noqa: E402
from supabase import AuthError  # noqa: E402

TOKEN_SECRET = "test-secret-that-is-long-enough-for-hs256"


def make_token(user_id: str) -> str:
    return jwt.encode({"sub": user_id, "role": "authenticated"}, TOKEN_SECRET, algorithm="HS256")


def auth_header(user_id: str) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


class FakeAuthError(AuthError):
    def __init__(self, message):
        Exception.__init__(self, message)
        self.message = message


class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    """The subset of the PostgREST query builder the repository uses."""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.action = "select"
        self.payload = None
        self.on_conflict = "id"
        self.filters = []
        self.orders = []
        self.row_limit = None

    def select(self, *columns, count=None):
        return self

    def insert(self, data):
        self.action, self.payload = "insert", data
        return self

    def upsert(self, data, on_conflict="id"):
        self.action, self.payload, self.on_conflict = "upsert", data, on_conflict
        return self

    def update(self, data):
        self.action, self.payload = "update", data
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: _same(row.get(column), value))
        return self

    def in_(self, column, values):
        self.filters.append(lambda row: any(_same(row.get(column), v) for v in values))
        return self

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def _matching(self):
        return [row for row in self.db.tables[self.table] if all(f(row) for f in self.filters)]

    def execute(self):
        self.db.calls.append((self.table, self.action))
        if self.table in self.db.failing:
            raise Exception(f"{self.table} is unavailable")

        rows = self.db.tables.setdefault(self.table, [])

        if self.action == "insert":
            payload = self.payload if isinstance(self.payload, list) else [self.payload]
            inserted = [self.db.new_row(self.table, item) for item in payload]
            return FakeResponse(copy.deepcopy(inserted))

        if self.action == "upsert":
            keys = self.on_conflict.split(",")
            row = dict(self.payload)
            existing = next(
                (r for r in rows if all(_same(r.get(k), row.get(k)) for k in keys)), None
            )
            if existing:
                existing.update(row)
                return FakeResponse([copy.deepcopy(existing)])
            return FakeResponse([copy.deepcopy(self.db.new_row(self.table, row))])

        matched = self._matching()

        if self.action == "update":
            for row in matched:
                row.update(copy.deepcopy(self.payload))
            return FakeResponse(copy.deepcopy(matched))

        if self.action == "delete":
            self.db.tables[self.table] = [r for r in rows if r not in matched]
            return FakeResponse(copy.deepcopy(matched))

        for column, desc in reversed(self.orders):
            matched = sorted(
                matched, key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc
            )
        if self.row_limit is not None:
            matched = matched[: self.row_limit]
        return FakeResponse(copy.deepcopy(matched), count=len(matched))


def _same(left, right):
    return left == right or str(left) == str(right)


class FakeRpc:
    def __init__(self, db, name, params):
        self.db, self.name, self.params = db, name, params

    def execute(self):
        self.db.calls.append(("rpc", self.name))
        if self.db.fail_rpc:
            raise Exception("function increment_points failed")
        assert self.name == "increment_points"
        for row in self.db.tables["scouts"]:
            if _same(row["id"], self.params["row_id"]):
                row["points"] += self.params["points_to_add"]
                return FakeResponse(row["points"])
        return FakeResponse(None)


class FakeAdminAuth:
    def __init__(self, auth):
        self.auth = auth

    def sign_out(self, jwt_token, scope="global"):
        self.auth.signed_out.append(jwt_token)

    def delete_user(self, user_id, should_soft_delete=False):
        self.auth.users = {
            email: user for email, user in self.auth.users.items() if user["id"] != user_id
        }
        self.auth.deleted.append(user_id)


class FakeAuth:
    def __init__(self):
        self.users = {}
        self.signed_out = []
        self.deleted = []
        self.admin = FakeAdminAuth(self)

    def add_user(self, email, password, user_id=None):
        user_id = user_id or str(uuid.uuid4())
        self.users[email] = {"id": user_id, "password": password}
        return user_id

    def _session(self, user_id):
        return SimpleNamespace(access_token=make_token(user_id), refresh_token=f"refresh-{user_id}")

    def sign_in_with_password(self, credentials):
        user = self.users.get(credentials["email"])
        if user is None or user["password"] != credentials["password"]:
            raise FakeAuthError("Invalid login credentials")
        return SimpleNamespace(
            user=SimpleNamespace(id=user["id"]), session=self._session(user["id"])
        )

    def sign_up(self, credentials):
        if credentials["email"] in self.users:
            raise FakeAuthError("User already registered")
        user_id = self.add_user(credentials["email"], credentials["password"])
        return SimpleNamespace(user=SimpleNamespace(id=user_id), session=self._session(user_id))


class FakeSupabase:
    """In-memory stand-in for the Supabase client."""

    def __init__(self):
        self.tables = {
            "scouts": [],
            "achievements": [],
            "scout_achievements": [],
            "ranks": [],
            "rewards": [],
        }
        self.failing = set()
        self.fail_rpc = False
        self.calls = []
        self.auth = FakeAuth()
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params):
        return FakeRpc(self, name, params)

    def new_row(self, table, values):
        row = copy.deepcopy(values)
        row.setdefault("id", str(uuid.uuid4()))
        if table in ("scouts", "scout_achievements"):
            self._clock += timedelta(minutes=1)
            row.setdefault("created_at", self._clock.isoformat())
        if table == "scout_achievements":
            row.setdefault("approved_at", None)
        self.tables[table].append(row)
        return row

    def add_scout(self, scout_id, user_id, name, points=0, is_admin=False):
        return self.new_row(
            "scouts",
            {
                "id": scout_id,
                "user_id": user_id,
                "name": name,
                "rank_id": 1,
                "points": points,
                "is_admin": is_admin,
            },
        )

    def add_application(self, scout_id, achievement_id, status="pending"):
        return self.new_row(
            "scout_achievements",
            {"scout_id": scout_id, "achievement_id": achievement_id, "status": status},
        )

    def row(self, table, row_id):
        return next(r for r in self.tables[table] if _same(r["id"], row_id))


@pytest.fixture
def db():
    fake = FakeSupabase()
    for rank in RANKS:
        fake.new_row("ranks", rank.model_dump())
    for reward in REWARDS:
        fake.new_row("rewards", reward.model_dump())
    for achievement in ACHIEVEMENTS:
        fake.new_row("achievements", achievement_to_row(achievement.model_dump()))

    fake.add_scout("scout-1", "user-1", "Alex Johnson", points=215)
    fake.add_scout("scout-2", "user-2", "Sam Rivera", points=0)
    fake.add_scout("scout-admin", "user-admin", "Scoutmaster Williams", is_admin=True)
    return fake


@pytest.fixture
def client(db):
    from fastapi.testclient import TestClient

    from scoutquest.db.supabase import get_auth_client, get_db
    from scoutquest.main import app

    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_auth_client] = lambda: db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def scout_headers():
    return auth_header("user-1")


@pytest.fixture
def admin_headers():
    return auth_header("user-admin")
