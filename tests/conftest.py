"""Shared test fixtures for gridfield.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
component-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from gridfield.selection import OptionRegistry, SelectOption, SelectOptionColor
from gridfield.type_options import ChecklistTypeOption


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "gridfield"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def option_a() -> SelectOption:
    return SelectOption(id="A", label="Draft", color=SelectOptionColor.PURPLE)


@pytest.fixture()
def option_b() -> SelectOption:
    return SelectOption(id="B", label="Review", color=SelectOptionColor.ORANGE)


@pytest.fixture()
def option_c() -> SelectOption:
    return SelectOption(id="C", label="Ship", color=SelectOptionColor.GREEN)


@pytest.fixture()
def registry(
    option_a: SelectOption, option_b: SelectOption, option_c: SelectOption
) -> OptionRegistry:
    """Registry {A, B, C} in that display order."""
    return OptionRegistry.of([option_a, option_b, option_c])


@pytest.fixture()
def checklist(registry: OptionRegistry) -> ChecklistTypeOption:
    return ChecklistTypeOption(registry)


@pytest.fixture()
def checklist_yaml() -> str:
    return (
        "field_type: checklist\n"
        "disable_color: false\n"
        "options:\n"
        "  - {id: A, label: Draft, color: purple}\n"
        "  - {id: B, label: Review, color: orange}\n"
        "  - {id: C, label: Ship, color: green}\n"
    )
