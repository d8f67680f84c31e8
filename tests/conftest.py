"""
Pytest configuration and fixtures for PtrLens tests.
"""

import pytest

from ptrlens.models import AddressList
from ptrlens.resolver import ResType, res_init


SAMPLE = ["1.1.1.1", "2606:4700:4700::1111", "192.0.2.1"]


@pytest.fixture
def sample_list():
    """The three-address list used throughout the tests."""
    return AddressList.from_strings(SAMPLE)


@pytest.fixture
def big_list():
    """A list larger than any worker count, with a duplicate."""
    addrs = [f"10.0.{i // 256}.{i % 256}" for i in range(200)]
    addrs += [f"2001:db8::{i:x}" for i in range(50)]
    addrs.append("10.0.0.1")
    return AddressList.from_strings(addrs)


@pytest.fixture
def fake_solver():
    return res_init(ResType.FAKE)


@pytest.fixture
def null_solver():
    return res_init(ResType.NULL)


@pytest.fixture
def max_threads():
    """Simulated core count, independent of the test machine."""
    return 8


def pytest_collection_modifyitems(config, items):
    """Mark CLI and pipeline tests as integration, the rest as unit."""
    for item in items:
        name = str(item.fspath)
        if "test_cli" in name or "test_pipeline" in name:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
