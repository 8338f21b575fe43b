from collections import defaultdict
from dataclasses import dataclass, replace

from attendance.classify import ABSENT_PREFIX, DEFAULT_OPTIONS, classify
from attendance.records import team_of

NO_REASON = "사유 없음"
NO_TEAM = "미지정"


@dataclass(frozen=True)
class Absentee:
    person: str
    zone_code: str
    role: str
    reason: str


def extract_reason(value):
    """'불참(출장)' -> '출장'. 괄호가 없거나 비어 있으면 '사유 없음'."""
    start = value.find("(")
    if start < 0:
        return NO_REASON
    depth = 0
    for i in range(start, len(value)):
        if value[i] == "(":
            depth += 1
        elif value[i] == ")":
            depth -= 1
            if depth == 0:
                reason = value[start + 1:i].strip()
                return reason or NO_REASON
    # 닫는 괄호가 없으면 끝까지
    return value[start + 1:].strip() or NO_REASON


def is_absent(category, value, options=None, prefix_only=False):
    if not value:
        return False
    if value.startswith(ABSENT_PREFIX):
        return True
    if prefix_only:
        return False
    return classify(category, value, options) == 0


def absentees(records, category, date, options=None, prefix_only=False):
    """``date``에 불참한 사람 목록. 값이 비어 있는 사람은 제외.

    기타예배/문자예배 표시 옵션은 참석률 그래프용이라 여기서는 끈다.
    """
    options = replace(options or DEFAULT_OPTIONS, show_alternate=False, show_text=False)
    result = []
    for record in records:
        value = record.date_values.get(date, "")
        if is_absent(category, value, options, prefix_only):
            result.append(Absentee(
                person=record.person,
                zone_code=record.zone_code,
                role=record.role,
                reason=extract_reason(value),
            ))
    return result


def group_by_team(absent):
    """팀별로 묶고 인원이 많은 팀부터, 같으면 팀 이름 순."""
    groups = defaultdict(list)
    for member in absent:
        groups[team_of(member.zone_code) or NO_TEAM].append(member)
    return sorted(groups.items(), key=lambda item: (-len(item[1]), item[0]))
