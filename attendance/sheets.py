import logging

import streamlit as st
from streamlit_gsheets import GSheetsConnection

from attendance.categories import ALL_SHEETS, ROSTER_SHEET, Category
from attendance.config import CACHE_TTL_SECONDS, GSHEETS_CONNECTION, configure_logging
from attendance.records import NAME_COLUMN, SHEET_COLUMN

log = logging.getLogger(__name__)


class SheetFetchError(RuntimeError):
    def __init__(self, sheet, cause=None):
        self.sheet = sheet
        self.cause = cause
        super().__init__(f"시트 '{sheet}'를 불러오지 못했습니다: {cause}")


def clean_frame(df):
    """모든 값을 문자열로 바꾸고 '.0' 꼬리, 공백, nan 을 정리."""
    df = df.copy()
    df.columns = [str(col).strip() for col in df.columns]
    for col in df.columns:
        df[col] = df[col].fillna("").astype(str).str.replace(r"\.0$", "", regex=True).str.strip()
        df[col] = df[col].replace({"nan": "", "None": "", "NaT": ""})
    return df


@st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
def read_sheet(_conn, name):
    """시트 이름별로 캐시. 실패한 읽기는 캐시에 남지 않는다."""
    log.debug("reading worksheet %s", name)
    try:
        df = _conn.read(worksheet=name, ttl=0)
    except Exception as exc:
        log.exception("Failed to read worksheet %s", name)
        raise SheetFetchError(name, exc) from exc
    rows = clean_frame(df).to_dict("records")
    log.info("worksheet %s: %d rows", name, len(rows))
    return rows


class SheetSource:
    def __init__(self, conn):
        self.conn = conn

    def records(self, name):
        """시트 한 장의 행 목록. '전체'면 모든 구분을 합쳐 시트이름을 붙인다."""
        name = str(name)
        if name == ALL_SHEETS:
            return [
                {**row, SHEET_COLUMN: sheet}
                for sheet, rows in self.load_all().items()
                for row in rows
            ]
        return read_sheet(self.conn, name)

    def load_all(self, names=None):
        names = names or [category.value for category in Category]
        return {name: self.records(name) for name in names}

    def roster(self):
        return self.records(ROSTER_SHEET)

    def person_rows(self, person, names=None):
        """각 구분 시트에서 한 사람의 행만 모은다."""
        return {
            sheet: [row for row in rows if row.get(NAME_COLUMN) == person]
            for sheet, rows in self.load_all(names).items()
        }

    def refresh(self):
        read_sheet.clear()


@st.cache_resource
def get_source():
    configure_logging()
    conn = st.connection(GSHEETS_CONNECTION, type=GSheetsConnection)
    return SheetSource(conn)
