"""
Общие фикстуры: временный SQLite файл на тест, приложение без lifespan
(таблицы создаются фикстурой), httpx.AsyncClient через ASGITransport.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from storefront.config import Settings
from storefront.database import build_engine, build_session_factory, init_db
from storefront.main import create_app
from storefront.services.catalog import Catalog
from storefront.services.checkout_service import CheckoutService
from storefront.services.order_store import OrderStore


class RecordingTelemetry:
    """Telemetry, которая просто запоминает вызовы"""

    def __init__(self):
        self.counters = []
        self.histograms = []
        self.gauges = []
        self.events = []

    def increment_counter(self, name, amount=1, **labels):
        self.counters.append((name, amount, labels))

    def observe_histogram(self, name, value, **labels):
        self.histograms.append((name, value, labels))

    def set_gauge(self, name, value, **labels):
        self.gauges.append((name, value, labels))

    def log_event(self, level, event, **details):
        self.events.append((level, event, details))

    def event_names(self, level=None):
        return [name for lvl, name, _ in self.events if level is None or lvl == level]

    @property
    def touched_metrics(self):
        return bool(self.counters or self.histograms or self.gauges)


@pytest.fixture
def settings(tmp_path):
    return Settings(db_path=tmp_path / "data" / "app.db", app_name="test-shop")


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def telemetry():
    return RecordingTelemetry()


@pytest_asyncio.fixture
async def engine(tmp_path):
    eng = build_engine(tmp_path / "store.db")
    await init_db(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def order_store(engine):
    return OrderStore(build_session_factory(engine))


@pytest_asyncio.fixture
async def checkout_service(catalog, order_store, telemetry):
    return CheckoutService(catalog, order_store, telemetry)


@pytest_asyncio.fixture
async def app(settings):
    _app = create_app(settings)
    await init_db(_app.state.engine)
    yield _app
    await _app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

