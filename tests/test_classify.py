import pytest

from attendance.categories import Category
from attendance.classify import ClassifierOptions, classify, max_score


@pytest.mark.parametrize("category", ["귀소", "대회의"])
def test_roll_call_absent_prefix(category):
    values = ["불참(사유없음)", "참석", "불참", "출석"]
    assert [classify(category, v) for v in values] == [0, 1, 0, 1]


def test_home_worship_only_exact_value():
    values = ["본구역예배", "대체예배", "본구역예배"]
    assert [classify(Category.구역예배, v) for v in values] == [1, 0, 1]


@pytest.mark.parametrize("category", [Category.말노정, Category.구역모임])
def test_flag_one(category):
    assert classify(category, "1") == 1
    assert classify(category, "0") == 0
    assert classify(category, "참석") == 0


def test_viewing_card_news_flag():
    off = ClassifierOptions()
    on = ClassifierOptions(include_card_news=True)
    assert classify(Category.총특교, "카드뉴스", off) == 0
    assert classify(Category.총특교, "카드뉴스", on) == 1
    assert classify(Category.지정교, "미시청", off) == 0
    assert classify(Category.지정교, "미시청", on) == 0
    assert classify(Category.지정교, "시청", off) == 1
    assert classify(Category.지정교, "재방송", on) == 1


def test_monthly_education_flags():
    assert classify(Category.월정기교육, "대면") == 1
    assert classify(Category.월정기교육, "카드뉴스") == 0
    assert classify(Category.월정기교육, "인시센") == 0
    assert classify(Category.월정기교육, "카드뉴스", ClassifierOptions(include_card_news=True)) == 1
    assert classify(Category.월정기교육, "인시센 시청", ClassifierOptions(include_insisen=True)) == 1
    assert classify(Category.월정기교육, "구두전달", ClassifierOptions(include_verbal=True)) == 1
    assert classify(Category.월정기교육, "불참", ClassifierOptions(True, True, True)) == 0


def test_service_allow_list_and_visit_flags():
    assert classify(Category.주일예배, "8시") == 1
    assert classify(Category.주일예배, "선교교회") == 1
    assert classify(Category.삼일예배, "대체(대면)") == 0

    alternate = ClassifierOptions(show_alternate=True)
    assert classify(Category.주일예배, "대체(대면)", alternate) == 1
    assert classify(Category.주일예배, "8시", alternate) == 0

    text = ClassifierOptions(show_text=True)
    assert classify(Category.주일예배, "문자및전화", text) == 1
    assert classify(Category.주일예배, "8시", text) == 0

    both = ClassifierOptions(show_alternate=True, show_text=True)
    assert classify(Category.삼일예배, "8시", both) == 1
    assert classify(Category.삼일예배, "내부복(그외)", both) == 1
    assert classify(Category.삼일예배, "문자및전화", both) == 1
    assert classify(Category.삼일예배, "불참", both) == 0


def test_service_profiles_are_kept_apart():
    simple = ClassifierOptions(service_profile="simple")
    expanded = ClassifierOptions(service_profile="expanded")

    assert classify(Category.주일예배, "8시", simple) == 4
    assert classify(Category.주일예배, "대체(비대면)", simple) == 2
    assert classify(Category.주일예배, "선교교회", simple) == 0
    assert classify(Category.삼일예배, "8시", simple) == 0

    assert classify(Category.주일예배, "선교교회", expanded) == 3
    assert classify(Category.주일예배, "대체(비대면)", expanded) == 1
    assert classify(Category.삼일예배, "21시", expanded) == 4


def test_presence_fallback():
    for category in (Category.십일조, Category.회비, Category.전도활동):
        assert classify(category, "참석") == 1
        assert classify(category, "불참") == 0


@pytest.mark.parametrize("category", ["없는구분", "", None, "노원명단"])
def test_unknown_category_scores_zero(category):
    assert classify(category, "참석") == 0


def test_unknown_values_never_raise():
    for category in Category:
        assert classify(category, "???") in (0, 1)
        assert classify(category, None) in (0, 1)
    assert classify(Category.주일예배, "8시", ClassifierOptions(service_profile="nope")) == 0


def test_max_score():
    assert max_score(Category.귀소) == 1
    assert max_score(Category.주일예배) == 1
    assert max_score(Category.주일예배, ClassifierOptions(service_profile="simple")) == 4
    assert max_score(Category.삼일예배, ClassifierOptions(service_profile="expanded")) == 4
    assert max_score(Category.주일예배, ClassifierOptions(service_profile="nope")) == 1
