import pytest

from attendance.absentees import NO_REASON, NO_TEAM, absentees, extract_reason, group_by_team
from attendance.categories import Category
from attendance.classify import ClassifierOptions
from attendance.records import normalize


def rec(name, zone, value, role=""):
    return normalize({"이름": name, "구역": zone, "직책": role, "10/6": value})


@pytest.mark.parametrize("value, reason", [
    ("불참(출장)", "출장"),
    ("불참", NO_REASON),
    ("불참( 병원 )", "병원"),
    ("불참()", NO_REASON),
    ("불참(병원(정기))", "병원(정기)"),
    ("불참(출장", "출장"),
])
def test_extract_reason(value, reason):
    assert extract_reason(value) == reason


def test_roll_call_absentees_with_reasons():
    records = [
        rec("김철수", "1-1", "불참(출장)", role="구역장"),
        rec("이영희", "2-1", "불참"),
        rec("박민수", "2-2", "참석"),
        rec("최지은", "3-1", ""),
    ]
    result = absentees(records, Category.귀소, "10/6")
    assert [(a.person, a.zone_code, a.role, a.reason) for a in result] == [
        ("김철수", "1-1", "구역장", "출장"),
        ("이영희", "2-1", "", NO_REASON),
    ]


def test_score_zero_counts_unless_prefix_only():
    records = [rec("a", "1-1", "대체예배"), rec("b", "1-1", "불참(감기)")]

    result = absentees(records, Category.구역예배, "10/6")
    assert [a.person for a in result] == ["a", "b"]
    assert result[0].reason == NO_REASON

    legacy = absentees(records, Category.구역예배, "10/6", prefix_only=True)
    assert [(a.person, a.reason) for a in legacy] == [("b", "감기")]


def test_date_without_values_has_no_absentees():
    records = [rec("a", "1-1", "불참")]
    assert absentees(records, Category.귀소, "10/13") == []


def test_group_by_team_orders_by_size_then_label():
    records = [
        rec("a", "2-1", "불참"),
        rec("b", "2-2", "불참"),
        rec("c", "3-1", "불참"),
        rec("d", "1-1", "불참"),
        rec("e", "", "불참"),
    ]
    groups = group_by_team(absentees(records, Category.대회의, "10/6"))
    assert [team for team, _ in groups] == ["2", "1", "3", NO_TEAM]
    assert [m.person for m in groups[0][1]] == ["a", "b"]


def test_visit_display_flags_do_not_change_absentees():
    records = [rec("a", "1-1", "대체(비대면)"), rec("b", "1-1", "8시"), rec("c", "1-1", "문자및전화")]
    for options in (
        ClassifierOptions(show_alternate=True),
        ClassifierOptions(show_text=True),
        ClassifierOptions(show_alternate=True, show_text=True),
    ):
        result = absentees(records, Category.주일예배, "10/6", options=options)
        assert [(m.person, m.reason) for m in result] == [("a", "비대면"), ("c", NO_REASON)]
