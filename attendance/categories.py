from enum import Enum


class Category(str, Enum):
    대회의 = "대회의"
    귀소 = "귀소"
    구역예배 = "구역예배"
    구역모임 = "구역모임"
    말노정 = "말노정"
    총특교 = "총특교"
    지정교 = "지정교"
    월정기교육 = "월정기교육"
    주일예배 = "주일예배"
    삼일예배 = "삼일예배"
    십일조 = "십일조"
    회비 = "회비"
    전도활동 = "전도활동"

    @classmethod
    def parse(cls, name):
        """시트 이름을 Category로 변환. 모르는 이름이면 None."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip())
        except ValueError:
            return None


class Rule(Enum):
    ROLL_CALL = "roll_call"  # 불참으로 시작하면 0
    HOME_WORSHIP = "home_worship"  # 본구역예배만 1
    FLAG_ONE = "flag_one"  # "1"만 1
    VIEWING = "viewing"  # 미시청이면 0
    MONTHLY_EDUCATION = "monthly_education"  # 대면 포함 시 1
    SERVICE = "service"  # 주일/삼일예배
    PRESENCE = "presence"  # 참석만 1


CATEGORY_RULES = {
    Category.대회의: Rule.ROLL_CALL,
    Category.귀소: Rule.ROLL_CALL,
    Category.구역예배: Rule.HOME_WORSHIP,
    Category.구역모임: Rule.FLAG_ONE,
    Category.말노정: Rule.FLAG_ONE,
    Category.총특교: Rule.VIEWING,
    Category.지정교: Rule.VIEWING,
    Category.월정기교육: Rule.MONTHLY_EDUCATION,
    Category.주일예배: Rule.SERVICE,
    Category.삼일예배: Rule.SERVICE,
    Category.십일조: Rule.PRESENCE,
    Category.회비: Rule.PRESENCE,
    Category.전도활동: Rule.PRESENCE,
}

ROSTER_SHEET = "노원명단"
ALL_SHEETS = "전체"
TEAMS = ("1", "2", "3", "4")

# 부서(탭) -> 구분. 가장 최근 구성.
DEPARTMENTS = {
    "기획과": [Category.대회의, Category.귀소],
    "교육과": [Category.구역예배, Category.총특교, Category.지정교, Category.말노정, Category.월정기교육],
    "전도과": [Category.전도활동],
    "심방과": [Category.주일예배, Category.삼일예배, Category.구역모임],
    "회계": [Category.십일조, Category.회비],
}

# 구역별 분석 화면의 구분 버튼 순서
ZONE_CATEGORIES = [
    Category.구역예배,
    Category.구역모임,
    Category.총특교,
    Category.지정교,
    Category.말노정,
    Category.귀소,
    Category.주일예배,
    Category.삼일예배,
]

# 예전 화면들에서 쓰던 구성. 참고용으로만 남겨 둔다.
HISTORICAL_DEPARTMENTS = {
    "v1-api": {
        "전체": ["노원명단", "회의참석", "말노정", "주일예배", "삼일예배", "십일조", "회비", "전도활동"],
        "개인": ["회의참석", "말노정", "주일예배", "삼일예배", "십일조", "회비"],
    },
    "v2-functions": {
        "기획과": ["대회의", "귀소"],
        "교육과": ["구역예배", "총특교", "지정교", "말노정"],
        "전도과": ["전도활동"],
        "심방과": ["주일예배", "삼일예배", "구역모임"],
        "회계": ["십일조", "회비"],
    },
    "v3-split-pages": {
        "기획과": ["대회의", "귀소"],
        "교육과": ["구역예배", "총특교", "지정교", "말노정", "월정기교육"],
        "심방과": ["주일예배", "삼일예배"],
    },
}


def rule_for(category):
    category = Category.parse(category)
    if category is None:
        return None
    return CATEGORY_RULES.get(category)


def department_of(category):
    category = Category.parse(category)
    for department, categories in DEPARTMENTS.items():
        if category in categories:
            return department
    return None
