import streamlit as st

from attendance.absentees import absentees, group_by_team
from attendance.aggregate import Order, aggregate, to_frame
from attendance.categories import DEPARTMENTS, Category
from attendance.charts import CHART_CONFIG, rate_line_chart
from attendance.classify import ClassifierOptions
from attendance.matrix import attendance_matrix, search
from attendance.records import collect_dates, normalize_all
from attendance.sheets import SheetFetchError, get_source

st.set_page_config(page_title="팀별 분석 - 노원 출석", layout="wide")

# 1. 구글 시트 연결
source = get_source()

# --- 사이드바 조회 설정 ---
with st.sidebar:
    st.header("🔍 조회 설정")
    department = st.selectbox("🏢 부서 선택", list(DEPARTMENTS.keys()))
    category = st.selectbox("📌 구분 선택", DEPARTMENTS[department], format_func=lambda c: c.value)

    # 구분별 추가 옵션
    include_card_news = include_insisen = include_verbal = False
    service_profile = None
    show_alternate = show_text = False
    if category in (Category.총특교, Category.지정교, Category.월정기교육):
        include_card_news = st.checkbox("카드뉴스 포함")
    if category is Category.월정기교육:
        include_insisen = st.checkbox("인시센 포함")
        include_verbal = st.checkbox("구두전달 포함")
    if category in (Category.주일예배, Category.삼일예배):
        mode = st.radio("채점 방식", ["출석 여부", "단계 점수(4단계)", "단계 점수(확장)"])
        service_profile = {"단계 점수(4단계)": "simple", "단계 점수(확장)": "expanded"}.get(mode)
        if service_profile is None:
            show_alternate = st.checkbox("기타예배")
            show_text = st.checkbox("문자예배")

    sort_by_absent = st.checkbox("불참 많은 팀 먼저")
    view = st.radio("보기", ["그래프 보기", "표로 보기"], horizontal=True)

options = ClassifierOptions(
    include_card_news=include_card_news,
    include_insisen=include_insisen,
    include_verbal=include_verbal,
    service_profile=service_profile,
    show_alternate=show_alternate,
    show_text=show_text,
)

# 2. 데이터 불러오기
try:
    records = normalize_all(source.records(category.value))
except SheetFetchError as e:
    st.error(f"❌ 데이터를 불러오지 못했습니다. 시트 이름을 확인하세요: {e}")
    st.stop()

st.title(f"📊 {department} - {category.value} 팀별 참석률")

if not records:
    st.info("시트에 기록이 없습니다.")
    st.stop()

rates = aggregate(
    records,
    category,
    group_by="team",
    options=options,
    order=Order.ABSENTEES if sort_by_absent else Order.LEXICAL,
)
frame = to_frame(rates, group_label="팀")

if view == "그래프 보기" and frame.empty:
    st.info("구역이 입력된 기록이 없어 팀별 그래프를 그릴 수 없습니다.")
elif view == "그래프 보기":
    st.plotly_chart(
        rate_line_chart(frame, f"{category.value} 팀별 참석률", group_label="팀"),
        use_container_width=True,
        config=CHART_CONFIG,
    )
    table = frame.pivot(index="날짜", columns="팀", values="참석률").reindex(collect_dates(records))
    st.dataframe((table * 100).round(1).astype(str) + "%", use_container_width=True)
else:
    keyword = st.text_input("이름 검색...", key="matrix_search")
    st.dataframe(search(attendance_matrix(records), keyword), use_container_width=True, hide_index=True)

st.divider()

# --- 날짜별 불참자 ---
dates = collect_dates(records)
selected_date = st.selectbox("🗓️ 날짜 선택", ["날짜를 선택하세요"] + dates[::-1])

if selected_date in dates:
    absent = absentees(records, category, selected_date, options=options)
    attended = sum(1 for r in records if r.date_values.get(selected_date)) - len(absent)

    t1, t2, t3 = st.columns(3)
    t1.metric("출석", f"{attended}명")
    t2.metric("불참", f"{len(absent)}명")
    t3.metric("불참 팀 수", f"{len(group_by_team(absent))}")

    st.subheader(f"📍 {selected_date} 불참자 목록")
    if not absent:
        st.info("불참자 없음")

    # 보기 좋게 2열로 배치
    cols = st.columns(2)
    for i, (team, members) in enumerate(group_by_team(absent)):
        with cols[i % 2]:
            with st.expander(f"⚠️ 팀 {team} ({len(members)}명)", expanded=True):
                for member in members:
                    role = f" {member.role}" if member.role else ""
                    st.warning(f"• {member.person}{role} [{member.zone_code or '-'}] ({member.reason})")
