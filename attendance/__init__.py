"""노원 출석 분석: 시트 값 채점, 팀/구역별 참석률 집계, 불참자 명단."""

from attendance.absentees import Absentee, absentees, extract_reason, group_by_team
from attendance.aggregate import Denominator, Order, aggregate, aggregate_overall, member_counts, to_frame
from attendance.categories import DEPARTMENTS, Category, Rule
from attendance.classify import ClassifierOptions, classify, max_score
from attendance.records import NormalizedRecord, collect_dates, normalize, normalize_all, team_of

__all__ = [
    "Absentee",
    "Category",
    "ClassifierOptions",
    "DEPARTMENTS",
    "Denominator",
    "NormalizedRecord",
    "Order",
    "Rule",
    "absentees",
    "aggregate",
    "aggregate_overall",
    "classify",
    "collect_dates",
    "extract_reason",
    "group_by_team",
    "max_score",
    "member_counts",
    "normalize",
    "normalize_all",
    "team_of",
    "to_frame",
]
