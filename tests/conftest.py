"""Shared fixtures for the dashboard test suite."""

import pytest

from src.dashboard.aggregator import PerformanceAggregator
from src.dashboard.records import MemberRecord, SquadRecord
from src.dashboard.sample_data import SAMPLE_MEMBERS, SAMPLE_SQUADS


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def aggregator():
    """Aggregator over the built-in sample data, in squad view."""
    return PerformanceAggregator(SAMPLE_SQUADS, SAMPLE_MEMBERS)


@pytest.fixture
def tied_members():
    """Members with a duplicated name and three-way tied performance."""
    return [
        MemberRecord(name="Sam", squad="Alpha", performance=80, efficiency=70, quality=60),
        MemberRecord(name="Sam", squad="Beta", performance=90, efficiency=71, quality=61),
        MemberRecord(name="Kai", squad="Alpha", performance=80, efficiency=72, quality=62),
        MemberRecord(name="Lee", squad="Beta", performance=80, efficiency=73, quality=63),
    ]


@pytest.fixture
def single_squad():
    return [SquadRecord(name="Solo", performance=50, efficiency=60, quality=70)]
