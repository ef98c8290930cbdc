"""Shared fixtures: fresh, isolated stores and engines for every test."""

import random

import pytest

from ai_data_suite.audit import AuditLogger
from ai_data_suite.config import SuiteConfig
from ai_data_suite.dispatch import DispatchEngine
from ai_data_suite.stores import EntityStores


@pytest.fixture
def stores():
    return EntityStores.seeded()


@pytest.fixture
def config():
    return SuiteConfig(audit_log_path=None)


@pytest.fixture
def engine(stores, config):
    """Engine with auditing disabled and a seeded metrics RNG."""
    return DispatchEngine(
        stores=stores,
        config=config,
        audit_logger=AuditLogger(None),
        rng=random.Random(42),
    )


@pytest.fixture
def audit_path(tmp_path):
    return tmp_path / "audit.log"


@pytest.fixture
def audited_engine(stores, config, audit_path):
    return DispatchEngine(stores=stores, config=config, audit_logger=AuditLogger(str(audit_path)))


@pytest.fixture
def contact(engine):
    """A contact created through the dispatch engine."""
    result = engine.invoke("create_contact", {
        "name": "Ada Lovelace",
        "email": "ada@analytical.io",
        "phone": "555-0100",
        "company": "Analytical Engines",
        "role": "Engineer",
    })
    assert result["success"] is True
    return result["contact"]
