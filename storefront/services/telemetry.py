import logging
from typing import Dict, Optional, Protocol

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

logger = logging.getLogger(__name__)

# Имена метрик
HTTP_REQUEST_DURATION = "http_request_duration_seconds"
PAGE_VIEWS = "ecommerce_page_views_total"
PRODUCT_VIEWS = "ecommerce_product_views_total"
ADD_TO_CART = "ecommerce_add_to_cart_total"
CHECKOUTS = "ecommerce_checkout_total"
CHECKOUT_VALUE = "ecommerce_checkout_value"
CHECKOUT_ITEMS_LAST = "ecommerce_checkout_items_last"

CHECKOUT_VALUE_BUCKETS = (0, 10, 20, 50, 100, 200, 500)


class Telemetry(Protocol):
    """Метрики и логирование, которые сервисы получают снаружи"""

    def increment_counter(self, name: str, amount: float = 1, **labels: str) -> None:
        ...

    def observe_histogram(self, name: str, value: float, **labels: str) -> None:
        ...

    def set_gauge(self, name: str, value: float, **labels: str) -> None:
        ...

    def log_event(self, level: int, event: str, **details) -> None:
        ...


def format_event(event: str, details: dict) -> str:
    """checkout_completed order_id=7 total=34.00"""
    parts = [event]
    parts.extend(f"{key}={value}" for key, value in details.items() if value is not None)
    return " ".join(parts)


class PrometheusTelemetry:
    """Telemetry поверх prometheus_client с отдельным реестром на приложение"""

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, app_name: str, registry: Optional[CollectorRegistry] = None):
        self.app_name = app_name
        self.registry = registry or CollectorRegistry()

        # Метрики процесса и интерпретатора
        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        self._counters: Dict[str, Counter] = {
            PAGE_VIEWS: Counter(
                PAGE_VIEWS, "Homepage views", ["app"], registry=self.registry
            ),
            PRODUCT_VIEWS: Counter(
                PRODUCT_VIEWS, "Product detail views", ["app", "product_id"], registry=self.registry
            ),
            ADD_TO_CART: Counter(
                ADD_TO_CART, "Add to cart actions", ["app", "product_id"], registry=self.registry
            ),
            CHECKOUTS: Counter(
                CHECKOUTS, "Checkout actions", ["app"], registry=self.registry
            ),
        }
        self._histograms: Dict[str, Histogram] = {
            HTTP_REQUEST_DURATION: Histogram(
                HTTP_REQUEST_DURATION,
                "Duration of HTTP requests in seconds",
                ["app", "method", "route", "status_code"],
                registry=self.registry,
            ),
            CHECKOUT_VALUE: Histogram(
                CHECKOUT_VALUE,
                "Checkout order value",
                ["app"],
                buckets=CHECKOUT_VALUE_BUCKETS,
                registry=self.registry,
            ),
        }
        self._gauges: Dict[str, Gauge] = {
            CHECKOUT_ITEMS_LAST: Gauge(
                CHECKOUT_ITEMS_LAST,
                "Item count in the most recent checkout",
                ["app"],
                registry=self.registry,
            ),
        }

    def increment_counter(self, name: str, amount: float = 1, **labels: str) -> None:
        self._counters[name].labels(app=self.app_name, **labels).inc(amount)

    def observe_histogram(self, name: str, value: float, **labels: str) -> None:
        self._histograms[name].labels(app=self.app_name, **labels).observe(value)

    def set_gauge(self, name: str, value: float, **labels: str) -> None:
        self._gauges[name].labels(app=self.app_name, **labels).set(value)

    def log_event(self, level: int, event: str, **details) -> None:
        logger.log(level, format_event(event, details))

    def render(self) -> bytes:
        """Метрики в текстовом формате Prometheus"""
        return generate_latest(self.registry)
