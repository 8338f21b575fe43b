from dataclasses import dataclass
from typing import Optional

from attendance.categories import Category, Rule, rule_for

ABSENT_PREFIX = "불참"
HOME_WORSHIP_VALUE = "본구역예배"
NOT_VIEWED = "미시청"
CARD_NEWS = "카드뉴스"
IN_PERSON = "대면"
INSISEN = "인시센"
VERBAL = "구두전달"
PRESENT = "참석"

# 주일/삼일예배에서 출석으로 보는 시간과 장소
ATTENDED_TIMES_AND_PLACES = (
    "8시",
    "정오",
    "오후 3:30:00",
    "19시",
    "20시",
    "21시",
    "선교교회",
    "형제교회",
    "당일 외 대면",
)
ALTERNATE_VISITS = ("대체(대면)", "내부복(그외)", "대체(비대면)", "당일 외 대면")
TEXT_VISITS = ("문자및전화",)

# 주일/삼일예배 단계별 점수표. 프로필 -> 예배 -> 값 -> 점수
# simple: 예전 상세 화면의 4단계, expanded: 선교/형제교회 등이 추가된 최근 표
SERVICE_PROFILES = {
    "simple": {
        Category.주일예배: {
            "8시": 4,
            "정오": 4,
            "오후 3:30:00": 4,
            "19시": 4,
            "대체(대면)": 3,
            "대체(비대면)": 2,
            "문자및전화": 1,
        },
        Category.삼일예배: {
            "19시": 4,
            "20시": 4,
            "21시": 4,
            "대체(대면)": 3,
            "대체(비대면)": 2,
            "문자및전화": 1,
        },
    },
    "expanded": {
        Category.주일예배: {
            "8시": 4,
            "정오": 4,
            "오후 3:30:00": 4,
            "19시": 4,
            "20시": 4,
            "21시": 4,
            "선교교회": 3,
            "형제교회": 3,
            "당일 외 대면": 3,
            "대체(대면)": 2,
            "내부복(그외)": 2,
            "대체(비대면)": 1,
            "문자및전화": 1,
        },
        Category.삼일예배: {
            "19시": 4,
            "20시": 4,
            "21시": 4,
            "선교교회": 3,
            "형제교회": 3,
            "당일 외 대면": 3,
            "대체(대면)": 2,
            "내부복(그외)": 2,
            "대체(비대면)": 1,
            "문자및전화": 1,
        },
    },
}


@dataclass(frozen=True)
class ClassifierOptions:
    include_card_news: bool = False
    include_insisen: bool = False
    include_verbal: bool = False
    # None이면 출석 시간/장소 목록으로 0/1 판정
    service_profile: Optional[str] = None
    show_alternate: bool = False
    show_text: bool = False


DEFAULT_OPTIONS = ClassifierOptions()


def _roll_call(value, options):
    return 0 if value.startswith(ABSENT_PREFIX) else 1


def _home_worship(value, options):
    return 1 if value == HOME_WORSHIP_VALUE else 0


def _flag_one(value, options):
    return 1 if value == "1" else 0


def _viewing(value, options):
    if value == NOT_VIEWED:
        return 0
    if CARD_NEWS in value:
        return 1 if options.include_card_news else 0
    return 1


def _monthly_education(value, options):
    if IN_PERSON in value:
        return 1
    if options.include_card_news and CARD_NEWS in value:
        return 1
    if options.include_insisen and INSISEN in value:
        return 1
    if options.include_verbal and VERBAL in value:
        return 1
    return 0


def _service(value, options, category):
    if options.service_profile is not None:
        table = SERVICE_PROFILES.get(options.service_profile, {}).get(category, {})
        return table.get(value, 0)

    if options.show_alternate and options.show_text:
        allowed = ATTENDED_TIMES_AND_PLACES + ALTERNATE_VISITS + TEXT_VISITS
    elif options.show_alternate:
        allowed = ALTERNATE_VISITS
    elif options.show_text:
        allowed = TEXT_VISITS
    else:
        allowed = ATTENDED_TIMES_AND_PLACES
    return 1 if value in allowed else 0


def _presence(value, options):
    return 1 if value == PRESENT else 0


_RULE_FUNCS = {
    Rule.ROLL_CALL: _roll_call,
    Rule.HOME_WORSHIP: _home_worship,
    Rule.FLAG_ONE: _flag_one,
    Rule.VIEWING: _viewing,
    Rule.MONTHLY_EDUCATION: _monthly_education,
    Rule.PRESENCE: _presence,
}


def classify(category, raw_value, options: Optional[ClassifierOptions] = None) -> int:
    """구분 규칙에 따라 값 하나를 점수로 바꾼다."""
    options = options or DEFAULT_OPTIONS
    category = Category.parse(category)
    rule = rule_for(category)
    if rule is None:
        return 0

    value = "" if raw_value is None else str(raw_value)
    if rule is Rule.SERVICE:
        return _service(value, options, category)
    return _RULE_FUNCS[rule](value, options)


def max_score(category, options: Optional[ClassifierOptions] = None) -> int:
    """점수 척도의 최댓값. 단계별 예배 점수만 4, 나머지는 1."""
    options = options or DEFAULT_OPTIONS
    if rule_for(category) is Rule.SERVICE and options.service_profile is not None:
        table = SERVICE_PROFILES.get(options.service_profile, {}).get(Category.parse(category), {})
        return max(table.values(), default=1)
    return 1
