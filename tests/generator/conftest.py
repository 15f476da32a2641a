import pytest


def pytest_collection_modifyitems(items):
    for item in items:
        if item.path.parent.name == "generator" and not item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.unit)
