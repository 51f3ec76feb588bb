"""Shared test fixtures."""

from collections.abc import Callable
from decimal import Decimal

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.routes import EXCEPTION_HANDLERS, router
from src.calculators.insurance import InsuranceMode
from src.calculators.regime import TaxInput


@pytest.fixture
def make_input() -> Callable[..., TaxInput]:
    """Factory for TaxInput with region 1 / official insurance defaults."""

    def _make(
        gross: int | Decimal,
        dependents: int = 0,
        region: int = 1,
        mode: InsuranceMode | str = InsuranceMode.OFFICIAL,
        custom: int | Decimal | None = None,
    ) -> TaxInput:
        return TaxInput(gross, dependents, region, mode, custom)

    return _make


@pytest.fixture
def app() -> FastAPI:
    """Create a test app with the router and error handlers but no lifespan."""
    test_app = FastAPI(exception_handlers=EXCEPTION_HANDLERS)
    test_app.include_router(router)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
