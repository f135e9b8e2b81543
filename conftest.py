"""Configures pytest further."""
import pytest

import rsaviz


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture(scope="session")
def textbook() -> rsaviz.KeyDerivation:
    """The classroom example: p = 19, q = 23, e = 17 giving n = 437, phi = 396, d = 233."""
    return rsaviz.derive_key_pair(19, 23, 17)
