"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient
from decision_gateway.api.main import create_app
from decision_gateway.domain.engine import DecisionEngine
from decision_gateway.domain.personal_code import calculate_check_digit


def build_personal_code(birth_date: date, serial: int = 500, female: bool = False) -> str:
    """Build a checksum-valid personal code for a birth date"""
    century_digit = {18: 1, 19: 3, 20: 5}[birth_date.year // 100] + int(female)
    first_ten = f"{century_digit}{birth_date:%y%m%d}{serial:03d}"
    return first_ten + str(calculate_check_digit(first_ten))


@pytest.fixture
def engine() -> DecisionEngine:
    return DecisionEngine()


@pytest.fixture
def today() -> date:
    """Fixed reference date for age checks"""
    return date(2026, 10, 18)


@pytest.fixture
def make_personal_code() -> Callable[..., str]:
    return build_personal_code


# Known valid codes; the last four digits pick the credit segment


@pytest.fixture
def debtor_code() -> str:
    return "37605030299"  # born 1976-05-03, segment number 0299


@pytest.fixture
def segment_1_code() -> str:
    return "50307172740"  # born 2003-07-17, segment number 2740


@pytest.fixture
def segment_2_code() -> str:
    return "38411266610"  # born 1984-11-26, segment number 6610


@pytest.fixture
def segment_3_code() -> str:
    return "35006069515"  # born 1950-06-06, segment number 9515


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())
