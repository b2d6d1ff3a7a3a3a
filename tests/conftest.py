import copy
import json
import os

import pytest

from ai_processor import GenerationError
from result_cache import ResultCache
from schema_registry import SchemaRegistry

SCHEMA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "legal_schemas")

VALID_ANALYSIS = {
    "clauses": [
        {
            "title": "Security Deposit",
            "text": "The tenant shall pay a deposit of three months' rent.",
            "riskLevel": "high",
            "suggestions": ["Reduce the deposit to two months' rent"],
            "legalBasis": "Model Tenancy Act, 2021, section 11",
            "draft": "The tenant shall pay a security deposit equal to two months' rent.",
        },
        {
            "title": "Rent and Payment Terms",
            "text": "Rent of Rs. 25,000 is payable by the 5th of each month.",
            "riskLevel": "low",
            "suggestions": [],
            "legalBasis": "Model Tenancy Act, 2021, sections 7 and 8",
        },
    ],
    "missingClauses": [
        {
            "title": "Maintenance and Repairs",
            "draft": "The landlord shall carry out structural repairs.",
            "legalBasis": "Model Tenancy Act, 2021, section 15",
            "reasoning": "The lease does not allocate repair obligations.",
        }
    ],
    "metadata": {
        "partiesInvolved": "Asha Rao (landlord) and Vikram Mehta (tenant)",
        "rentAndPaymentTerms": {
            "monthlyRentAmount": "Rs. 25,000",
            "dueDate": "5th of each month",
            "paymentMethods": "Bank transfer",
        },
        "securityDeposit": {
            "amount": "Rs. 75,000",
            "conditionsForReturn": "Refunded on vacating",
        },
        "leaseDuration": {
            "startDate": "1 April 2024",
            "endDate": "28 February 2025",
            "renewalTerms": "Renewable by mutual agreement",
        },
    },
}


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeInvoker:
    """Records prompts and replies with canned output or an error."""

    def __init__(self, output=None, error=None):
        self.output = output
        self.error = error
        self.calls = []

    def invoke(self, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def valid_analysis():
    return copy.deepcopy(VALID_ANALYSIS)


@pytest.fixture
def valid_output(valid_analysis):
    return json.dumps(valid_analysis)


@pytest.fixture
def registry():
    return SchemaRegistry.from_directory(SCHEMA_DIR)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ResultCache(default_ttl_seconds=60, clock=clock)


@pytest.fixture
def fake_invoker(valid_output):
    return FakeInvoker(output=valid_output)


@pytest.fixture
def failing_invoker():
    return FakeInvoker(error=GenerationError("Failed to analyze lease with AI"))
