"""Group Titles — locale tables cover every fixed category each variant emits."""

from datetime import date

import pytest

from life_planner.core.build_groups import EVENT_FIXED_ORDER, TASK_FIXED_ORDER
from life_planner.core.domain_types import Category, GroupVariant, Locale
from life_planner.core.group_titles import format_day_title, get_fixed_title


@pytest.mark.parametrize("locale", list(Locale))
def test_every_task_category_has_a_title(locale):
    for category in (*TASK_FIXED_ORDER, Category.COMPLETED):
        assert get_fixed_title(category, GroupVariant.TASKS, locale)


@pytest.mark.parametrize("locale", list(Locale))
def test_every_event_category_has_a_title(locale):
    for category in EVENT_FIXED_ORDER:
        assert get_fixed_title(category, GroupVariant.EVENTS, locale)


def test_event_overdue_differs_from_task_overdue():
    assert get_fixed_title(Category.OVERDUE, GroupVariant.TASKS, Locale.JA) == "期限切れ"
    assert get_fixed_title(Category.OVERDUE, GroupVariant.EVENTS, Locale.JA) == "過去"
    assert get_fixed_title(Category.TODAY, GroupVariant.EVENTS, Locale.JA) == "今日"


def test_day_titles_are_weekday_qualified():
    assert format_day_title(date(2024, 6, 16), Locale.JA) == "2024年6月16日(日)"
    assert format_day_title(date(2024, 6, 16), Locale.EN) == "Sun, Jun 16, 2024"
    assert format_day_title(date(2025, 1, 6), Locale.JA) == "2025年1月6日(月)"
