import pytest


def pytest_collection_modifyitems(items):
    for item in items:
        if item.path.parent.name == "scaffold-command":
            item.add_marker(pytest.mark.unit)
