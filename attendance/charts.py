import plotly.express as px

TEAM_COLORS = {
    "1": "rgb(239, 68, 68)",
    "2": "rgb(59, 130, 246)",
    "3": "rgb(254, 202, 87)",
    "4": "rgb(34, 197, 94)",
}

CHART_CONFIG = {"displayModeBar": False, "scrollZoom": False}


def _x_order(frame):
    return frame["날짜"].drop_duplicates().tolist()


def rate_line_chart(frame, title, group_label="그룹"):
    fig = px.line(
        frame,
        x="날짜",
        y="참석률",
        color=group_label,
        markers=True,
        title=title,
        color_discrete_map=TEAM_COLORS,
    )
    fig.update_traces(hovertemplate="%{x}<br>참석률: %{y:.1%}<extra></extra>")
    fig.update_layout(
        xaxis_title="날짜",
        yaxis_title="참석률",
        yaxis=dict(range=[0, 1], tickformat=".0%"),
        xaxis=dict(categoryorder="array", categoryarray=_x_order(frame)),
        hovermode="x unified",
        dragmode=False,
    )
    return fig


def rate_bar_chart(frame, title):
    fig = px.bar(frame, x="날짜", y="참석률", title=title)
    fig.update_traces(marker_color="rgba(75, 192, 192, 0.6)", hovertemplate="%{x}<br>%{y:.1%}<extra></extra>")
    fig.update_layout(
        yaxis=dict(range=[0, 1], tickformat=".0%"),
        xaxis=dict(categoryorder="array", categoryarray=_x_order(frame)),
        dragmode=False,
    )
    return fig


def count_line_chart(frame, title, group_label="이름"):
    """멤버별 출석 점수 합계. frame 컬럼: 이름, 날짜, 출석."""
    fig = px.line(frame, x="날짜", y="출석", color=group_label, markers=True, title=title)
    fig.update_layout(
        yaxis=dict(dtick=1, rangemode="tozero"),
        xaxis=dict(categoryorder="array", categoryarray=_x_order(frame)),
        dragmode=False,
    )
    return fig
