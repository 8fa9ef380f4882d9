"""Tests for the default-visibility predicate and WHERE condition builder."""

import pytest

from src.db.filters import build_conditions, effective_status
from src.schemas import CauseFilterOptions


def _compiled(options: CauseFilterOptions) -> list[str]:
    return [
        str(condition.compile(compile_kwargs={"literal_binds": True}))
        for condition in build_conditions(options)
    ]


def test_no_filters_means_approved_only():
    assert effective_status(CauseFilterOptions()) == "approved"


def test_owner_without_status_sees_everything():
    assert effective_status(CauseFilterOptions(user_id="u-1")) is None


@pytest.mark.parametrize("user_id", [None, "u-1"])
def test_explicit_status_wins(user_id):
    options = CauseFilterOptions(status="rejected", user_id=user_id)
    assert effective_status(options) == "rejected"


def test_category_all_is_not_a_filter():
    assert _compiled(CauseFilterOptions(category="all")) == _compiled(CauseFilterOptions())


def test_conditions_for_owner_dashboard():
    conditions = _compiled(CauseFilterOptions(category="animals", user_id="u-1"))

    assert conditions == [
        "causes.category = 'animals'",
        "causes.user_id = 'u-1'",
    ]


def test_public_listing_conditions():
    assert _compiled(CauseFilterOptions(category="education")) == [
        "causes.category = 'education'",
        "causes.status = 'approved'",
    ]
