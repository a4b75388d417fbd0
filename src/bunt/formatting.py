"""Plain-text rendering of reports. Everything here is a pure function of its arguments."""

from bunt.domain.game import HOME_RUN_DISTANCE, BattedBallReport
from bunt.domain.percentile import PercentileProfile
from bunt.domain.standings import StandingsTable

PERCENTILE_WIDTH = 15
BALLPARK_COUNT = 30


def matchup_title(report: BattedBallReport) -> str:
    """Home team first either way.

    ``"Braves vs. Mets"`` when the followed team is home, ``"Mets @ Braves"``
    when it is away.
    """
    if report.is_home:
        return f"{report.home_name} vs. {report.away_name}"
    return f"{report.home_name} @ {report.away_name}"


def first_sentence(text: str) -> str:
    head, separator, _ = text.partition(". ")
    return head if separator else text


def format_wpa(wpa: float) -> str:
    return f"{wpa:+}"


def batted_ball_fields(report: BattedBallReport) -> list[tuple[str, str]]:
    event = report.event
    fields = [
        ("Exit Velocity", f"{event.exit_velocity}mph"),
        ("Launch Angle", f"{event.launch_angle}°"),
        ("Distance", f"{event.hit_distance} ft"),
        ("xBA", event.xba),
        ("WPA", format_wpa(report.win_probability_added)),
    ]
    if event.hit_distance >= HOME_RUN_DISTANCE and event.home_run_ballparks is not None:
        fields.append(("Home Run", f"{event.home_run_ballparks}/{BALLPARK_COUNT}"))
    return fields


def percentile_bar_length(percentile: int) -> int:
    # Integer half-up rounding of percentile * width / 100.
    return (percentile * PERCENTILE_WIDTH + 50) // 100


def percentile_emphasis(percentile: int) -> str:
    if percentile >= 95:
        return "***"
    if percentile >= 90:
        return "**"
    return ""


def format_percentile_line(name: str, percentile: int | None) -> str | None:
    if percentile is None:
        return None
    bar = "-" * percentile_bar_length(percentile)
    emphasis = percentile_emphasis(percentile)
    return f"`{percentile: >3}% / [{bar: <{PERCENTILE_WIDTH}}]` {emphasis}{name}{emphasis}"


def _section(header: str, stats: list[tuple[str, int | None]]) -> list[str]:
    lines = [header]
    for name, percentile in stats:
        line = format_percentile_line(name, percentile)
        if line is not None:
            lines.append(line)
    return lines


def percentile_description(profile: PercentileProfile) -> str:
    """Group the present percentiles under one header per role the player fills.

    Sections come in a fixed order: batting, fielding, baserunning, pitching.
    """
    lines: list[str] = []
    if profile.is_hitter:
        lines += _section(
            ":cricket_game: Batting",
            [
                ("xwOBA", profile.xwoba),
                ("xBA", profile.xba),
                ("xSLG", profile.xslg),
                ("Avg EV", profile.avg_exit_velocity),
                ("Bat Speed", profile.bat_speed),
                ("Barrel %", profile.barrel_pct),
                ("Hard-Hit %", profile.hard_hit_pct),
                ("Chase %", profile.chase_pct),
                ("Whiff %", profile.whiff_pct),
                ("K %", profile.k_pct),
                ("BB %", profile.bb_pct),
            ],
        )
    if profile.is_fielder:
        lines += _section(
            ":gloves: Fielding",
            [("Range (OAA)", profile.oaa), ("Arm Strength", profile.arm_strength)],
        )
    if profile.is_runner:
        lines += _section(":athletic_shoe: Baserunning", [("Sprint Speed", profile.sprint_speed)])
    if profile.is_pitcher:
        lines += _section(
            ":baseball: Pitching",
            [
                ("xERA", profile.xera),
                ("xBA", profile.xba),
                ("Fastball Velo", profile.fb_velocity),
                ("Avg EV", profile.avg_exit_velocity),
                ("Chase %", profile.chase_pct),
                ("Whiff %", profile.whiff_pct),
                ("K %", profile.k_pct),
                ("BB %", profile.bb_pct),
                ("Barrel %", profile.barrel_pct),
                ("Hard-Hit %", profile.hard_hit_pct),
                ("Extension", profile.extension),
            ],
        )
    return "\n".join(lines)


def render_standings(table: StandingsTable) -> str:
    """Monospaced standings block, fenced for Discord.

    In wild-card mode a dashed line follows the third row to mark the
    postseason cut.
    """
    widths = [len(header) for header in table.headers]
    for row in table.rows:
        cells = (row.club_name, row.winning_percentage, row.third, row.fourth)
        widths = [max(width, len(cell)) for width, cell in zip(widths, cells, strict=True)]

    def _columns(cells: tuple[str, str, str, str]) -> str:
        return "  ".join(f"{cell: <{width}}" for cell, width in zip(cells, widths, strict=True))

    lines = ["```", f"  {_columns(table.headers)}"]
    for index, row in enumerate(table.rows):
        lines.append(f"{row.marker} {_columns((row.club_name, row.winning_percentage, row.third, row.fourth))}")
        if table.wild_card and index == 2:
            lines.append("-" * (sum(widths) + 2 * len(widths)))
    lines.append("```")
    return "\n".join(lines)
