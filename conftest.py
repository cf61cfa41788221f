"""Configures pytest further: opt-out of slow tests and opt-in to extreme ones."""
import pytest

_MARKERS = {
    "slow": ("--skip-slow", True, "Slow test: needs no --skip-slow option"),
    "extreme": ("--run-extreme", False, "Extreme test: needs --run-extreme option"),
}


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skips = {
        marker: pytest.mark.skip(reason=reason)
        for marker, (option, skip_when, reason) in _MARKERS.items()
        if config.getoption(option) is skip_when
    }
    for item in items:
        for marker, skip in skips.items():
            if marker in item.keywords:
                item.add_marker(skip)
