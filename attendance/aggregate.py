from collections import defaultdict
from enum import Enum

import pandas as pd

from attendance.classify import classify, max_score
from attendance.records import collect_dates

ALL_GROUP = "ALL"


class Denominator(Enum):
    RESPONDENTS = "respondents"  # 값이 있는 사람 수로 나눔
    MEMBERS = "members"  # 그룹 전체 인원으로 나눔


class Order(Enum):
    LEXICAL = "lexical"
    ABSENTEES = "absentees"  # 불참이 많은 그룹부터


GROUP_KEYS = {
    "team": lambda record: record.team,
    "zone": lambda record: record.zone_code if record.team else None,
    "person": lambda record: record.person,
    "all": lambda record: ALL_GROUP,
}


def _key_func(group_by):
    if callable(group_by):
        return group_by
    try:
        return GROUP_KEYS[group_by]
    except KeyError:
        raise ValueError(f"알 수 없는 그룹 기준: {group_by!r}") from None


def _rate(total, count, denominator, scale):
    if count == 0 or denominator <= 0:
        return 0.0
    return total / (denominator * scale)


def aggregate(
    records,
    category,
    group_by="team",
    options=None,
    denominator=Denominator.RESPONDENTS,
    population=None,
    order=Order.LEXICAL,
):
    """그룹 -> 날짜 -> 참석률.

    ``denominator=Denominator.MEMBERS``이면 응답자 수 대신 그룹 인원
    (``population``이 있으면 그 값)으로 나눈다. 관측값이 없는 칸은 0.0.
    """
    key_func = _key_func(group_by)
    dates = collect_dates(records)
    scale = max_score(category, options)

    scores = defaultdict(lambda: defaultdict(list))
    group_sizes = defaultdict(int)
    for record in records:
        key = key_func(record)
        if not key:
            continue
        group_sizes[key] += 1
        for date in dates:
            value = record.date_values.get(date)
            if not value:
                continue
            scores[key][date].append(classify(category, value, options))

    result = {}
    absent_counts = {}
    for key in sorted(group_sizes):
        by_date = scores.get(key, {})
        size = (population or {}).get(key, group_sizes[key])
        rates = {}
        for date in dates:
            values = by_date.get(date, [])
            base = size if denominator is Denominator.MEMBERS else len(values)
            rates[date] = _rate(sum(values), len(values), base, scale)
        result[key] = rates
        absent_counts[key] = sum(1 for values in by_date.values() for score in values if score == 0)

    if order is Order.ABSENTEES:
        # sorted는 안정 정렬이라 동률이면 이름 순서가 유지된다
        ranked = sorted(result, key=lambda key: -absent_counts[key])
        result = {key: result[key] for key in ranked}
    return result


def aggregate_overall(sheets, options=None):
    """여러 구분을 한꺼번에 날짜별 전체 참석률로 집계.

    ``sheets``는 구분 이름 -> 레코드 목록. 각 레코드는 자기 구분 규칙으로 채점하고,
    구역이 없는 사람도 포함한다.
    """
    totals = defaultdict(float)
    counts = defaultdict(int)
    every_record = []
    for category, records in sheets.items():
        scale = max_score(category, options)
        every_record.extend(records)
        for record in records:
            for date, value in record.date_values.items():
                if not value:
                    continue
                totals[date] += classify(category, value, options) / scale
                counts[date] += 1

    dates = collect_dates(every_record)
    return {ALL_GROUP: {date: (totals[date] / counts[date]) if counts[date] else 0.0 for date in dates}}


def member_counts(records, category, zone, options=None):
    """한 구역 안에서 사람별 날짜별 출석 점수 합계."""
    members = [record for record in records if record.zone_code == zone]
    dates = collect_dates(records)
    result = {}
    for record in members:
        counts = result.setdefault(record.person, {date: 0 for date in dates})
        for date in dates:
            value = record.date_values.get(date)
            if value:
                counts[date] += classify(category, value, options)
    return result


def to_frame(rates, group_label="그룹"):
    """차트/표용 long 형식 DataFrame (그룹, 날짜, 참석률)."""
    rows = [
        {group_label: group, "날짜": date, "참석률": rate}
        for group, by_date in rates.items()
        for date, rate in by_date.items()
    ]
    return pd.DataFrame(rows, columns=[group_label, "날짜", "참석률"])
