"""Shared fixtures: the default dataset and its cost report."""

import pytest

from fourc.analysis.costs import aggregate_state
from fourc.catalog.entities import default_state


@pytest.fixture
def state():
    return default_state()


@pytest.fixture
def report(state):
    return aggregate_state(state)


@pytest.fixture
def summaries(report):
    return {s.group_name: s for s in report.per_group}
