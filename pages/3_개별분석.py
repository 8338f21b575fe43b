import streamlit as st

from attendance.categories import department_of
from attendance.classify import classify
from attendance.records import collect_dates, normalize
from attendance.sheets import SheetFetchError, get_source

st.set_page_config(page_title="개별 분석 - 노원 출석", layout="centered")

source = get_source()

try:
    roster = source.roster()
except SheetFetchError as e:
    st.error(f"❌ 명단을 불러오지 못했습니다: {e}")
    st.stop()

st.title("👤 개별 분석")

names = sorted({row.get("이름", "") for row in roster if row.get("이름")})
person = st.selectbox("이름 선택", ["--"] + names)

if person == "--":
    st.info("이름을 선택하면 구분별 기록을 보여 줍니다.")
    st.stop()

try:
    rows_by_sheet = source.person_rows(person)
except SheetFetchError as e:
    st.error(f"❌ 기록을 불러오지 못했습니다: {e}")
    st.stop()

st.subheader(f"{person}의 상세 정보")

for sheet, rows in rows_by_sheet.items():
    with st.expander(f"📌 {sheet} · {department_of(sheet) or '기타'}", expanded=bool(rows)):
        if not rows:
            st.caption("기록 없음")
            continue
        records = [normalize(row) for row in rows]
        dates = collect_dates(records)
        attended = sum(
            1 for record in records for date in dates
            if record.date_values.get(date) and classify(sheet, record.date_values[date]) > 0
        )
        total = sum(1 for record in records for date in dates if record.date_values.get(date))
        if total:
            st.write(f"**출석 {attended}/{total}회** ({attended / total:.0%})")
        st.dataframe(rows, use_container_width=True, hide_index=True)
