"""Group Titles — centralized locale-specific labels for task and event groups.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Covers every Locale for every fixed Category a variant can emit
    - Titles only; group keys never depend on locale

Design Decisions:
    - Weekday names as data, not via the process locale: output is identical on every host
    - Event "overdue" reads as "past" — an event cannot be late, only over
"""

from datetime import date

from life_planner.core.domain_types import Category, GroupVariant, Locale

_FIXED_TITLES: dict[Locale, dict[Category, str]] = {
    Locale.JA: {
        Category.TODAY: "今日",
        Category.TOMORROW: "明日",
        Category.NONE: "日付なし",
        Category.OVERDUE: "期限切れ",
        Category.COMPLETED: "完了済み",
    },
    Locale.EN: {
        Category.TODAY: "Today",
        Category.TOMORROW: "Tomorrow",
        Category.NONE: "No date",
        Category.OVERDUE: "Overdue",
        Category.COMPLETED: "Completed",
    },
}

_EVENT_OVERRIDES: dict[Locale, dict[Category, str]] = {
    Locale.JA: {Category.OVERDUE: "過去"},
    Locale.EN: {Category.OVERDUE: "Past"},
}

# Monday-first, matching date.weekday()
_WEEKDAYS: dict[Locale, tuple[str, ...]] = {
    Locale.JA: ("月", "火", "水", "木", "金", "土", "日"),
    Locale.EN: ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
}

_MONTHS_EN = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def get_fixed_title(
    category: Category, variant: GroupVariant, locale: Locale,
) -> str:
    """Label for a fixed bucket. Event overrides win over the shared table."""
    if variant is GroupVariant.EVENTS:
        override = _EVENT_OVERRIDES[locale].get(category)
        if override:
            return override
    return _FIXED_TITLES[locale][category]


def format_day_title(day: date, locale: Locale) -> str:
    """Weekday-qualified full date, e.g. 2024年6月20日(木) / Thu, Jun 20, 2024."""
    weekday = _WEEKDAYS[locale][day.weekday()]
    if locale is Locale.JA:
        return f"{day.year}年{day.month}月{day.day}日({weekday})"
    return f"{weekday}, {_MONTHS_EN[day.month - 1]} {day.day}, {day.year}"


class LocaleTitleFormatter:
    """GroupTitleFormatter backed by the static tables above."""

    def __init__(self, locale: Locale = Locale.JA):
        self.locale = locale

    def fixed_title(self, category: Category, variant: GroupVariant) -> str:
        return get_fixed_title(category, variant, self.locale)

    def date_title(self, day: date) -> str:
        return format_day_title(day, self.locale)
