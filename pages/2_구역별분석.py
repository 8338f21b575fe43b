import pandas as pd
import streamlit as st

from attendance.aggregate import Denominator, aggregate, member_counts, to_frame
from attendance.categories import TEAMS, ZONE_CATEGORIES
from attendance.charts import CHART_CONFIG, count_line_chart, rate_line_chart
from attendance.records import collect_dates, normalize_all
from attendance.sheets import SheetFetchError, get_source

st.set_page_config(page_title="구역별 분석 - 노원 출석", layout="wide")

source = get_source()

st.title("📈 구역별 참석률")

# --- 필터 영역 ---
col1, col2, col3 = st.columns(3)

with col1:
    category = st.selectbox("📌 구분 선택", ZONE_CATEGORIES, format_func=lambda c: c.value)

with col2:
    team = st.selectbox("👥 팀 선택", ["--"] + list(TEAMS), format_func=lambda t: t if t == "--" else f"{t}팀")

try:
    records = normalize_all(source.records(category.value))
except SheetFetchError as e:
    st.error(f"❌ 데이터를 불러오지 못했습니다: {e}")
    st.stop()

with col3:
    if team != "--":
        zones = sorted({r.zone_code for r in records if r.team == team})
        zone = st.selectbox("📍 구역 선택", ["전체"] + zones)
    else:
        st.selectbox("📍 구역 선택", ["전체"], disabled=True)
        zone = "전체"

by_members = st.radio(
    "참석률 기준",
    ["구역 전체 인원", "응답자 수"],
    horizontal=True,
    help="구역 전체 인원으로 나눌지, 그 날짜에 값이 있는 사람 수로 나눌지 선택합니다.",
) == "구역 전체 인원"
denominator = Denominator.MEMBERS if by_members else Denominator.RESPONDENTS

st.divider()

if team == "--":
    rates = aggregate(records, category, group_by="team", denominator=denominator)
    title = "전체 참석률"
else:
    rates = aggregate(records, category, group_by="zone", denominator=denominator)
    if zone == "전체":
        rates = {key: value for key, value in rates.items() if key.split("-")[0] == team}
        title = f"{team}팀 전체 참석률"
    else:
        rates = {zone: rates.get(zone, {})}
        title = f"{zone} 참석률"

frame = to_frame(rates, group_label="구역")
if frame.empty:
    st.info("표시할 데이터가 없습니다.")
    st.stop()

st.plotly_chart(rate_line_chart(frame, title, group_label="구역"), use_container_width=True, config=CHART_CONFIG)

# --- 멤버별 출석 ---
if team != "--" and zone != "전체":
    st.subheader(f"👤 {zone} 멤버별 출석")
    counts = member_counts(records, category, zone)
    member_frame = pd.DataFrame(
        [
            {"이름": name, "날짜": date, "출석": value}
            for name, by_date in counts.items()
            for date, value in by_date.items()
        ],
        columns=["이름", "날짜", "출석"],
    )
    if member_frame.empty:
        st.info("구역에 등록된 멤버가 없습니다.")
    else:
        st.plotly_chart(
            count_line_chart(member_frame, f"{zone} 멤버별 출석"),
            use_container_width=True,
            config=CHART_CONFIG,
        )
        st.dataframe(
            member_frame.pivot(index="이름", columns="날짜", values="출석").reindex(columns=collect_dates(records)),
            use_container_width=True,
        )
