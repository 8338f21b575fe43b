import streamlit as st

from attendance.categories import ROSTER_SHEET
from attendance.sheets import SheetFetchError, get_source

st.set_page_config(page_title="노원 출석 분석", layout="wide")

st.title("⛪ 노원 출석 분석")

# 구글 시트 연결
source = get_source()

# 명단 불러오기
try:
    roster = source.roster()
except SheetFetchError as e:
    st.error(f"❌ 명단을 불러오지 못했습니다. 설정(Secrets)을 확인하세요: {e}")
    st.stop()

st.subheader(f"📋 {ROSTER_SHEET}")

keyword = st.text_input("🔍 이름 검색", placeholder="이름 검색...")
if keyword:
    roster = [row for row in roster if keyword.strip().lower() in row.get("이름", "").lower()]

st.dataframe(roster, use_container_width=True, hide_index=True)
st.caption(f"총 {len(roster)}명 · 개별 기록은 왼쪽 메뉴의 '개별분석'에서 확인하세요.")

if st.button("🔄 시트 새로고침"):
    source.refresh()
    st.rerun()
