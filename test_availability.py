# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the availability index and calendar projector.
Pure functions, no HTTP.
"""

from datetime import date, datetime, timedelta

import pytest

from team_roster.services.availability import (
    application_coverage,
    assess_day,
    count_vacation_days,
    day_breakdown,
    has_application_skill,
    is_on_vacation,
    parse_day,
    rating_value,
    team_applications,
    team_developers,
)
from team_roster.services.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    CalendarState,
    calendar_window,
    compute_calendar,
    dispatch,
    shift_month,
)


def dev(dev_id, team_id="T", apps=None, vacations=None, shared=False, assigned=None):
    return {
        "id": dev_id,
        "name": dev_id.upper(),
        "team_id": None if shared else team_id,
        "is_shared_resource": shared,
        "assigned_teams": assigned or [],
        "tech_skills": {},
        "app_skills": apps or {},
        "availability": {"status": "active", "vacation_days": vacations or []},
    }


def single(day):
    return {"type": "single", "date": day, "description": "off"}


def span(start, end):
    return {"type": "range", "start_date": start, "end_date": end, "description": "trip"}


def cell(cells, day):
    return next(c for c in cells if c["date"] == day)


# ============================================
# Vacation checks
# ============================================
class TestIsOnVacation:
    def test_single_day_matches_only_that_day(self):
        d = dev("a", vacations=[single("2024-06-11")])
        assert is_on_vacation(d, date(2024, 6, 11)) is True
        assert is_on_vacation(d, date(2024, 6, 10)) is False
        assert is_on_vacation(d, date(2024, 6, 12)) is False

    def test_range_is_inclusive(self):
        d = dev("a", vacations=[span("2024-06-10", "2024-06-12")])
        for offset in range(3):
            assert is_on_vacation(d, date(2024, 6, 10) + timedelta(days=offset)) is True

    def test_range_excludes_neighbouring_days(self):
        d = dev("a", vacations=[span("2024-06-10", "2024-06-12")])
        assert is_on_vacation(d, date(2024, 6, 9)) is False
        assert is_on_vacation(d, date(2024, 6, 13)) is False

    def test_time_of_day_is_ignored(self):
        d = dev("a", vacations=[single("2024-06-11T15:30:00")])
        assert is_on_vacation(d, datetime(2024, 6, 11, 8, 0)) is True

    def test_overlapping_entries_any_match(self):
        d = dev("a", vacations=[span("2024-06-01", "2024-06-05"), span("2024-06-04", "2024-06-08")])
        assert is_on_vacation(d, date(2024, 6, 7)) is True

    def test_weekends_inside_range_count_as_vacation(self):
        d = dev("a", vacations=[span("2024-06-07", "2024-06-10")])
        assert is_on_vacation(d, date(2024, 6, 8)) is True
        assert is_on_vacation(d, date(2024, 6, 9)) is True

    def test_malformed_entries_are_skipped(self):
        d = dev("a", vacations=[
            {"type": "single", "description": "no date"},
            {"type": "range", "start_date": "2024-06-01", "description": "no end"},
            {"type": "single", "date": "not-a-date", "description": "bad"},
            single("2024-06-03"),
        ])
        assert is_on_vacation(d, date(2024, 6, 1)) is False
        assert is_on_vacation(d, date(2024, 6, 3)) is True

    def test_non_object_entries_are_skipped(self):
        d = dev("a", vacations=["2024-06-10", None, 7, single("2024-06-11")])
        assert is_on_vacation(d, date(2024, 6, 10)) is False
        assert is_on_vacation(d, date(2024, 6, 11)) is True
        assert count_vacation_days(d) == 1

    def test_vacation_days_not_a_list(self):
        d = dev("a")
        d["availability"]["vacation_days"] = "2024-06-10"
        assert is_on_vacation(d, date(2024, 6, 10)) is False
        d["availability"] = "away"
        assert count_vacation_days(d) == 0

    def test_developer_without_availability(self):
        d = {"id": "x", "name": "X"}
        assert is_on_vacation(d, date(2024, 6, 3)) is False

    def test_parse_day_variants(self):
        assert parse_day("2024-06-11") == date(2024, 6, 11)
        assert parse_day(datetime(2024, 6, 11, 23, 59)) == date(2024, 6, 11)
        assert parse_day("") is None
        assert parse_day(None) is None
        assert parse_day(42) is None


class TestCountVacationDays:
    def test_weekends_excluded_from_count(self):
        # Fri 7th .. Mon 10th: two working days.
        d = dev("a", vacations=[span("2024-06-07", "2024-06-10")])
        assert count_vacation_days(d) == 2

    def test_counts_across_entries(self):
        d = dev("a", vacations=[span("2024-06-10", "2024-06-12"), single("2024-06-14")])
        assert count_vacation_days(d) == 4

    def test_single_weekend_day_counts_zero(self):
        d = dev("a", vacations=[single("2024-06-08")])
        assert count_vacation_days(d) == 0


# ============================================
# Team membership and skills
# ============================================
class TestTeamMembership:
    def test_has_application_skill_requires_positive_rating(self):
        d = dev("a", apps={"Ledger": 3, "Billing": 0})
        assert has_application_skill(d, "Ledger") is True
        assert has_application_skill(d, "Billing") is False
        assert has_application_skill(d, "Unknown") is False

    def test_non_numeric_ratings_count_as_no_skill(self):
        d = dev("a", apps={"Ledger": "5", "Billing": None, "Monitor": True, "Audit": 2.5})
        assert has_application_skill(d, "Ledger") is False
        assert has_application_skill(d, "Billing") is False
        assert has_application_skill(d, "Monitor") is False
        assert has_application_skill(d, "Audit") is True
        assert rating_value("7") == 0
        assert rating_value(4) == 4

    def test_app_skills_not_a_mapping(self):
        d = dev("a")
        d["app_skills"] = ["Ledger"]
        assert has_application_skill(d, "Ledger") is False
        assert team_applications([d], "T") == []

    def test_developers_without_string_id_are_skipped(self):
        nameless = dev("x")
        del nameless["id"]
        numbered = dev("y")
        numbered["id"] = 12
        devs = [nameless, numbered, "dev-z", dev("a", apps={"Ledger": 3})]
        assert [d["id"] for d in team_developers(devs, "T")] == ["a"]
        assert team_applications(devs, "T") == ["Ledger"]

    def test_team_developers_includes_shared_resources_once(self):
        devs = [
            dev("a"),
            dev("s", shared=True, assigned=["T", "U"]),
            dev("b", team_id="U"),
        ]
        assert [d["id"] for d in team_developers(devs, "T")] == ["a", "s"]
        assert [d["id"] for d in team_developers(devs, "U")] == ["b", "s"]

    def test_unshared_developer_assigned_teams_ignored(self):
        d = dev("a", team_id="T")
        d["assigned_teams"] = ["U"]
        assert team_developers([d], "U") == []

    def test_team_applications_first_seen_order(self):
        devs = [
            dev("a", apps={"Ledger": 5, "Billing": 0}),
            dev("b", apps={"Billing": 2, "Ledger": 1}),
            dev("c", team_id="U", apps={"Monitor": 9}),
        ]
        assert team_applications(devs, "T") == ["Ledger", "Billing"]


# ============================================
# Risk rules
# ============================================
class TestRisk:
    def test_no_skilled_developer_never_at_risk(self):
        members = [dev("a", apps={"Other": 5}, vacations=[single("2024-06-11")])]
        result = assess_day(members, ["Ledger"], date(2024, 6, 11), aggregate=False)
        assert result["is_at_risk"] is False
        assert result["affected_applications"] == []

    def test_everyone_skilled_away_is_at_risk(self):
        members = [
            dev("a", apps={"Ledger": 5}, vacations=[single("2024-06-11")]),
            dev("b", apps={"Ledger": 5}, vacations=[span("2024-06-10", "2024-06-12")]),
        ]
        result = assess_day(members, ["Ledger"], date(2024, 6, 11), aggregate=False)
        assert result["is_at_risk"] is True
        assert result["affected_applications"] == ["Ledger"]
        assert {d["id"] for d in result["unavailable_developers"]} == {"a", "b"}

    def test_partial_absence_reports_unavailable_without_risk(self):
        members = [
            dev("a", apps={"Ledger": 5}, vacations=[single("2024-06-11")]),
            dev("b", apps={"Ledger": 5}),
        ]
        result = assess_day(members, ["Ledger"], date(2024, 6, 11), aggregate=False)
        assert result["is_at_risk"] is False
        assert result["unavailable_developers"] == [{"id": "a", "name": "A"}]

    def test_aggregate_unions_only_affected_applications(self):
        members = [
            dev("a", apps={"Ledger": 5, "Billing": 5}, vacations=[single("2024-06-11")]),
            dev("b", apps={"Billing": 5}),
            dev("c", apps={"Monitor": 5}, vacations=[single("2024-06-11")]),
        ]
        apps = team_applications(members, "T")
        result = assess_day(members, apps, date(2024, 6, 11), aggregate=True)
        assert result["is_at_risk"] is True
        assert result["affected_applications"] == ["Ledger", "Monitor"]
        assert [d["id"] for d in result["unavailable_developers"]] == ["a", "c"]

    def test_aggregate_deduplicates_developers(self):
        members = [dev("a", apps={"Ledger": 5, "Billing": 5}, vacations=[single("2024-06-11")])]
        result = assess_day(members, ["Ledger", "Billing"], date(2024, 6, 11), aggregate=True)
        assert result["affected_applications"] == ["Ledger", "Billing"]
        assert result["unavailable_developers"] == [{"id": "a", "name": "A"}]

    def test_aggregate_quiet_day(self):
        members = [dev("a", apps={"Ledger": 5})]
        result = assess_day(members, ["Ledger"], date(2024, 6, 11), aggregate=True)
        assert result == {
            "is_at_risk": False,
            "unavailable_developers": [],
            "affected_applications": [],
        }


class TestCoverage:
    def test_sorted_by_count_then_name(self):
        devs = [
            dev("a", apps={"Ledger": 5, "Billing": 3}),
            dev("b", apps={"Billing": 2, "Monitor": 1}),
            dev("c", apps={"Monitor": 4}),
            dev("d", apps={"Audit": 6}),
        ]
        rows = application_coverage(devs, "T")
        assert [(r["application"], r["count"]) for r in rows] == [
            ("Billing", 2), ("Monitor", 2), ("Audit", 1), ("Ledger", 1),
        ]
        assert rows[0]["developers"] == [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}]

    def test_unknown_team_has_no_coverage(self):
        assert application_coverage([dev("a", apps={"Ledger": 5})], "nope") == []

    def test_day_breakdown_splits_available_and_away(self):
        devs = [
            dev("a", apps={"Ledger": 5}, vacations=[single("2024-06-11")]),
            dev("b", apps={"Ledger": 5}),
        ]
        [row] = day_breakdown(devs, "T", date(2024, 6, 11))
        assert row["application"] == "Ledger"
        assert row["is_at_risk"] is False
        assert row["available_developers"] == [{"id": "b", "name": "B"}]
        assert row["unavailable_developers"] == [{"id": "a", "name": "A"}]


# ============================================
# Calendar projector
# ============================================
class TestCalendarWindow:
    @pytest.mark.parametrize("year", [2023, 2024, 2025])
    def test_every_month_is_whole_weeks(self, year):
        for month in range(1, 13):
            start, end = calendar_window(year, month)
            assert start.weekday() == 6  # Sunday
            assert end.weekday() == 5  # Saturday
            assert ((end - start).days + 1) % 7 == 0
            assert start <= date(year, month, 1)

    def test_june_2024_spans_six_weeks(self):
        assert calendar_window(2024, 6) == (date(2024, 5, 26), date(2024, 7, 6))

    def test_month_starting_on_sunday_has_no_leading_spill(self):
        assert calendar_window(2024, 9) == (date(2024, 9, 1), date(2024, 10, 5))

    def test_february_2015_is_exactly_four_weeks(self):
        assert calendar_window(2015, 2) == (date(2015, 2, 1), date(2015, 2, 28))

    @pytest.mark.parametrize("year,month", [(MIN_YEAR, 1), (MAX_YEAR, 12)])
    def test_edge_months_stay_within_date_range(self, year, month):
        start, end = calendar_window(year, month)
        assert start.weekday() == 6
        assert end.weekday() == 5
        assert ((end - start).days + 1) % 7 == 0


class TestComputeCalendar:
    def ledger_team(self, extra_b_vacation=None):
        return [
            dev("a", apps={"Ledger": 8}, vacations=[span("2024-06-10", "2024-06-12")]),
            dev("b", apps={"Ledger": 6}, vacations=[extra_b_vacation] if extra_b_vacation else []),
        ]

    def test_no_selection_is_empty(self):
        devs = self.ledger_team()
        assert compute_calendar(CalendarState(2024, 6), devs) == []
        assert compute_calendar(CalendarState(2024, 6, team_id="T"), devs) == []
        assert compute_calendar(CalendarState(2024, 6, application="Ledger"), devs) == []

    def test_cells_cover_window_in_order(self):
        cells = compute_calendar(CalendarState(2024, 6, "T", "Ledger"), self.ledger_team())
        assert len(cells) == 42
        assert cells[0]["date"] == date(2024, 5, 26)
        assert cells[-1]["date"] == date(2024, 7, 6)
        assert all(b["date"] - a["date"] == timedelta(days=1) for a, b in zip(cells, cells[1:]))

    def test_spill_over_days_flagged(self):
        cells = compute_calendar(CalendarState(2024, 6, "T", "Ledger"), self.ledger_team())
        assert cell(cells, date(2024, 5, 31))["is_current_month"] is False
        assert cell(cells, date(2024, 6, 1))["is_current_month"] is True
        assert cell(cells, date(2024, 7, 1))["is_current_month"] is False

    def test_today_flag(self):
        cells = compute_calendar(
            CalendarState(2024, 6, "T", "Ledger"), self.ledger_team(), today=date(2024, 6, 20)
        )
        assert [c["date"] for c in cells if c["is_today"]] == [date(2024, 6, 20)]

    def test_one_developer_away_is_not_at_risk(self):
        cells = compute_calendar(CalendarState(2024, 6, "T", "Ledger"), self.ledger_team())
        for day in (10, 11, 12):
            c = cell(cells, date(2024, 6, day))
            assert c["is_at_risk"] is False
            assert c["unavailable_developers"] == [{"id": "a", "name": "A"}]
        assert not any(c["is_at_risk"] for c in cells)

    def test_both_developers_away_marks_only_overlap(self):
        devs = self.ledger_team(extra_b_vacation=single("2024-06-11"))
        cells = compute_calendar(CalendarState(2024, 6, "T", "Ledger"), devs)
        assert [c["date"] for c in cells if c["is_at_risk"]] == [date(2024, 6, 11)]
        assert cell(cells, date(2024, 6, 11))["affected_applications"] == ["Ledger"]

    def test_application_nobody_holds_never_at_risk(self):
        cells = compute_calendar(CalendarState(2024, 6, "T", "Payroll"), self.ledger_team())
        assert len(cells) == 42
        assert not any(c["is_at_risk"] for c in cells)

    def test_all_applications_view(self):
        devs = self.ledger_team(extra_b_vacation=single("2024-06-11"))
        devs.append(dev("c", apps={"Billing": 4}))
        cells = compute_calendar(CalendarState(2024, 6, "T", "all"), devs)
        c = cell(cells, date(2024, 6, 11))
        assert c["is_at_risk"] is True
        assert c["affected_applications"] == ["Ledger"]
        assert [d["id"] for d in c["unavailable_developers"]] == ["a", "b"]
        assert cell(cells, date(2024, 6, 10))["unavailable_developers"] == []


class TestDispatch:
    def test_previous_wraps_year(self):
        state = dispatch(CalendarState(2024, 1, "T", "Ledger"), "previous")
        assert (state.year, state.month) == (2023, 12)
        assert (state.team_id, state.application) == ("T", "Ledger")

    def test_next_wraps_year(self):
        state = dispatch(CalendarState(2024, 12), "next")
        assert (state.year, state.month) == (2025, 1)

    def test_today(self):
        state = dispatch(CalendarState(2020, 3), "today", today=date(2024, 6, 15))
        assert (state.year, state.month) == (2024, 6)

    def test_select_team_and_application(self):
        state = dispatch(CalendarState(2024, 6), "select_team", "T")
        state = dispatch(state, "select_application", "all")
        assert state == CalendarState(2024, 6, "T", "all")

    def test_empty_selection_clears(self):
        state = dispatch(CalendarState(2024, 6, "T", "Ledger"), "select_team", "")
        assert state.team_id is None

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            dispatch(CalendarState(2024, 6), "sideways")

    def test_next_past_last_year_rejected(self):
        with pytest.raises(ValueError, match="years"):
            dispatch(CalendarState(MAX_YEAR, 12), "next")

    def test_previous_before_first_year_rejected(self):
        with pytest.raises(ValueError, match="years"):
            dispatch(CalendarState(MIN_YEAR, 1), "previous")

    def test_navigation_inside_edge_years(self):
        assert dispatch(CalendarState(MAX_YEAR, 11), "next") == CalendarState(MAX_YEAR, 12)
        assert dispatch(CalendarState(MIN_YEAR, 2), "previous") == CalendarState(MIN_YEAR, 1)

    def test_state_is_immutable(self):
        state = CalendarState(2024, 6)
        dispatch(state, "next")
        assert state.month == 6

    @pytest.mark.parametrize("year,month,delta,expected", [
        (2024, 6, -6, (2023, 12)),
        (2024, 6, 7, (2025, 1)),
        (2024, 1, -13, (2022, 12)),
    ])
    def test_shift_month(self, year, month, delta, expected):
        assert shift_month(year, month, delta) == expected
