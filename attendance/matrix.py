import pandas as pd

from attendance.records import collect_dates

LEADING_COLUMNS = ["구역", "이름"]


def attendance_matrix(records, fill="불참"):
    dates = collect_dates(records)
    rows = []
    for record in records:
        row = {"구역": record.zone_code or "-", "이름": record.person}
        for date in dates:
            row[date] = record.date_values.get(date) or fill
        rows.append(row)
    return pd.DataFrame(rows, columns=LEADING_COLUMNS + dates)


def search(frame, term):
    """이름에 검색어가 들어간 행만 남긴다 (대소문자 무시)."""
    term = (term or "").strip()
    if not term or frame.empty:
        return frame
    mask = frame["이름"].astype(str).str.lower().str.contains(term.lower(), regex=False)
    return frame[mask]
