import re
from dataclasses import dataclass, field
from typing import Dict, Optional

NAME_COLUMN = "이름"
ZONE_COLUMN = "구역"
ROLE_COLUMN = "직책"
SHEET_COLUMN = "시트이름"

IDENTITY_COLUMNS = (NAME_COLUMN, ZONE_COLUMN, ROLE_COLUMN, "구분", "ID", SHEET_COLUMN, "검색용")

_DAY_PATTERN = re.compile(r"(\d{1,2})/(\d{1,2})")
_MONTH_PATTERN = re.compile(r"([1-9]|1[0-2])월")


@dataclass(frozen=True)
class NormalizedRecord:
    person: str
    zone_code: str
    team: Optional[str]
    role: str = ""
    category: str = ""
    date_values: Dict[str, str] = field(default_factory=dict)
    extra: Dict[str, str] = field(default_factory=dict)


def team_of(zone_code):
    """'2-3' -> '2', '5' -> '5', 빈 값이나 '-3' 같은 값은 None."""
    if not zone_code:
        return None
    team = str(zone_code).strip().split("-")[0].strip()
    return team or None


def is_date_column(key):
    key = str(key).strip()
    return bool(_DAY_PATTERN.fullmatch(key) or _MONTH_PATTERN.fullmatch(key))


def date_sort_key(label):
    """'10/6' -> (10, 6), '3월' -> (3, 0). 날짜가 아니면 맨 뒤로."""
    label = str(label).strip()
    m = _DAY_PATTERN.fullmatch(label)
    if m:
        return (int(m.group(1)), int(m.group(2)))
    m = _MONTH_PATTERN.fullmatch(label)
    if m:
        return (int(m.group(1)), 0)
    return (99, 99)


def normalize(raw, identity_columns=IDENTITY_COLUMNS):
    date_values = {}
    extra = {}
    for key, value in raw.items():
        key = str(key).strip()
        if key in identity_columns:
            continue
        value = "" if value is None else str(value).strip()
        if is_date_column(key):
            # 빈 칸은 기록 없음으로 본다
            if value:
                date_values[key] = value
        else:
            extra[key] = value

    zone_code = str(raw.get(ZONE_COLUMN) or "").strip()
    return NormalizedRecord(
        person=str(raw.get(NAME_COLUMN) or "").strip(),
        zone_code=zone_code,
        team=team_of(zone_code),
        role=str(raw.get(ROLE_COLUMN) or "").strip(),
        category=str(raw.get(SHEET_COLUMN) or "").strip(),
        date_values=date_values,
        extra=extra,
    )


def normalize_all(rows, identity_columns=IDENTITY_COLUMNS):
    return [normalize(row, identity_columns) for row in rows]


def collect_dates(records):
    """모든 레코드의 날짜 컬럼을 모아 날짜 순으로 정렬."""
    dates = set()
    for record in records:
        dates.update(record.date_values)
    return sorted(dates, key=lambda label: (date_sort_key(label), label))
