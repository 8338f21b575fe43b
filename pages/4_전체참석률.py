import streamlit as st

from attendance.aggregate import aggregate_overall, to_frame
from attendance.charts import CHART_CONFIG, rate_bar_chart
from attendance.records import normalize_all
from attendance.sheets import SheetFetchError, get_source

st.set_page_config(page_title="전체 참석률 - 노원 출석", layout="wide")

source = get_source()

st.title("📊 전체 날짜별 참석률")

# 모든 구분을 한 번에 불러온다. 하나라도 실패하면 집계하지 않는다.
try:
    sheets = {name: normalize_all(rows) for name, rows in source.load_all().items()}
except SheetFetchError as e:
    st.error(f"❌ 데이터를 불러오지 못했습니다: {e}")
    st.stop()

frame = to_frame(aggregate_overall(sheets))

if frame.empty:
    st.info("표시할 데이터가 없습니다.")
    st.stop()

st.plotly_chart(rate_bar_chart(frame, "전체 참석률 (%)"), use_container_width=True, config=CHART_CONFIG)

t1, t2 = st.columns(2)
t1.metric("평균 참석률", f"{frame['참석률'].mean():.1%}")
t2.metric("집계 날짜 수", f"{len(frame)}일")
