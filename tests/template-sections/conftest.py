import pytest


def pytest_collection_modifyitems(items):
    for item in items:
        if item.path.parent.name == "template-sections":
            item.add_marker(pytest.mark.unit)
