import logging
from html.parser import HTMLParser

from bunt.domain.errors import ExtractionError
from bunt.domain.percentile import PercentileProfile
from bunt.ingest.fetcher import ResilientFetcher

logger = logging.getLogger(__name__)

_URL = "https://baseballsavant.mlb.com/savant-player/{player_id}"
_TABLE_ID = "percentileRankings"
_NAME_CLASS = "bio-player-name"

# Header label (whitespace-collapsed, <br> read as a space) -> PercentileProfile field.
# None marks columns that are recognized but not surfaced.
_LABEL_FIELDS: dict[str, str | None] = {
    "Year": None,
    "xwOBA": "xwoba",
    "xBA": "xba",
    "xSLG": "xslg",
    "xISO": None,
    "xOBP": None,
    "Brl": None,
    "Brl%": "barrel_pct",
    "EV": "avg_exit_velocity",
    "Max EV": None,
    "Hard Hit%": "hard_hit_pct",
    "K%": "k_pct",
    "BB%": "bb_pct",
    "Whiff%": "whiff_pct",
    "Chase Rate": "chase_pct",
    "Speed": "sprint_speed",
    "OAA": "oaa",
    "Arm Strength": "arm_strength",
    "Bat Speed": "bat_speed",
    "Swing Length": None,
    "xwOBA / xERA": "xera",
    "FB Velo": "fb_velocity",
    "FB Spin": "fb_spin",
    "CB Spin": "cb_spin",
    "Extension": "extension",
}


def _collapse(text: str) -> str:
    return " ".join(text.split())


class _PercentileTableParser(HTMLParser):
    """Pull the percentile rankings table and the player's display name out of a player page."""

    def __init__(self) -> None:
        super().__init__()
        self.found_table = False
        self.headers: list[str] = []
        self.rows: list[list[str]] = []
        self.name: str | None = None
        self._table_depth = 0
        self._section: str | None = None
        self._row: list[str] | None = None
        self._in_cell = False
        self._cell = ""
        # None -> "await" (inside the name div) -> "capture" (inside its first child) -> "done"
        self._name_state: str | None = None
        self._name_tag = ""
        self._name_depth = 0
        self._name_text = ""

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        attributes = dict(attrs)
        self._track_name_start(tag, attributes)

        if tag == "table":
            if self._table_depth:
                self._table_depth += 1
            elif not self.found_table and attributes.get("id") == _TABLE_ID:
                self.found_table = True
                self._table_depth = 1
            return
        if self._table_depth != 1:
            return

        if tag in ("thead", "tbody"):
            self._section = tag
        elif tag == "tr":
            self._row = []
        elif tag in ("th", "td"):
            self._in_cell = True
            self._cell = ""
        elif tag == "br" and self._in_cell:
            self._cell += " "

    def handle_endtag(self, tag: str) -> None:
        self._track_name_end(tag)

        if tag == "table" and self._table_depth:
            self._table_depth -= 1
            return
        if self._table_depth != 1:
            return

        if tag in ("thead", "tbody"):
            self._section = None
        elif tag in ("th", "td") and self._in_cell:
            self._in_cell = False
            if self._row is not None:
                self._row.append(_collapse(self._cell))
        elif tag == "tr" and self._row is not None:
            self._finish_row(self._row)
            self._row = None

    def handle_data(self, data: str) -> None:
        if self._in_cell and self._table_depth == 1:
            self._cell += data
        if self._name_state == "capture":
            self._name_text += data

    def _finish_row(self, row: list[str]) -> None:
        if self._section == "tbody" or (self._section is None and self.headers):
            self.rows.append(row)
        elif not self.headers:
            self.headers = row

    def _track_name_start(self, tag: str, attributes: dict[str, str | None]) -> None:
        if self._name_state == "await":
            self._name_state = "capture"
            self._name_tag = tag
            self._name_depth = 1
        elif self._name_state == "capture" and tag == self._name_tag:
            self._name_depth += 1
        elif self._name_state is None and tag == "div" and _NAME_CLASS in (attributes.get("class") or "").split():
            self._name_state = "await"

    def _track_name_end(self, tag: str) -> None:
        if self._name_state == "capture" and tag == self._name_tag:
            self._name_depth -= 1
            if self._name_depth == 0:
                self.name = _collapse(self._name_text)
                self._name_state = "done"
        elif self._name_state == "await" and tag == "div":
            self._name_state = None


def parse_percentile(value: str) -> int | None:
    """Parse one table cell as a 0-100 percentile; anything else is treated as missing."""
    try:
        percentile = int(value)
    except ValueError:
        return None
    return percentile if 0 <= percentile <= 100 else None


def parse_percentile_profile(html: str, player_id: int) -> PercentileProfile | None:
    """Build a profile from the most recent season row of a player page.

    Returns None when the page has no percentile table, which is how Savant
    renders players without qualifying Statcast data.
    """
    parser = _PercentileTableParser()
    parser.feed(html)
    parser.close()

    if not parser.found_table:
        return None
    if not parser.rows:
        raise ExtractionError(f"Percentile table for player {player_id} has no season rows")
    if parser.name is None:
        raise ExtractionError(f"Could not find the display name for player {player_id}")

    season = parser.rows[-1]
    try:
        year = int(season[0])
    except (IndexError, ValueError) as e:
        raise ExtractionError(f"Could not parse the season year for player {player_id}") from e

    values: dict[str, int | None] = {}
    for index, label in enumerate(parser.headers):
        if label not in _LABEL_FIELDS:
            logger.warning("Unknown percentile statistic: %s", label)
            continue
        field = _LABEL_FIELDS[label]
        if field is None:
            continue
        values[field] = parse_percentile(season[index]) if index < len(season) else None

    return PercentileProfile(player_id=player_id, year=year, name=parser.name, **values)


class SavantPercentileSource:
    def __init__(self, fetcher: ResilientFetcher) -> None:
        self._fetcher = fetcher

    def fetch(self, player_id: int) -> PercentileProfile | None:
        url = _URL.format(player_id=player_id)
        logger.debug("GET %s", url)
        html = self._fetcher.get_text(url, {"stats": "statcast-r-hitting-mlb"})
        profile = parse_percentile_profile(html, player_id)
        if profile is None:
            logger.info("No percentile rankings for player %d", player_id)
        return profile
