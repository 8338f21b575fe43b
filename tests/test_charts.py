import pandas as pd

from attendance.aggregate import to_frame
from attendance.charts import TEAM_COLORS, count_line_chart, rate_bar_chart, rate_line_chart


def test_rate_line_chart_one_trace_per_team():
    frame = to_frame({"1": {"10/6": 0.5, "10/13": 1.0}, "2": {"10/6": 0.0, "10/13": 0.25}}, group_label="팀")
    fig = rate_line_chart(frame, "귀소 팀별 참석률", group_label="팀")
    assert [trace.name for trace in fig.data] == ["1", "2"]
    assert fig.data[0].line.color == TEAM_COLORS["1"]
    assert list(fig.layout.yaxis.range) == [0, 1]
    assert list(fig.layout.xaxis.categoryarray) == ["10/6", "10/13"]


def test_bar_and_count_charts():
    bar = rate_bar_chart(to_frame({"ALL": {"10/6": 0.5}}), "전체 참석률 (%)")
    assert list(bar.data[0].y) == [0.5]

    counts = pd.DataFrame({"이름": ["a", "a"], "날짜": ["10/6", "10/13"], "출석": [1, 0]})
    fig = count_line_chart(counts, "1-1 멤버별 출석")
    assert [trace.name for trace in fig.data] == ["a"]
