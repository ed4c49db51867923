"""
Game night post generation.
"""

from datetime import tzinfo
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo

from ..core.config import LOCAL_TIMEZONE
from ..simulator.analysis import Analysis, Matchup, PlayoffMatchup, Seed
from ..simulator.models import League, StandingsRecord
from .markdown import Document, BulletList, H1, H2, H3, HR, Paragraph, Table


SUBREDDITS = {
    "ANA": "anaheimducks",
    "BOS": "bostonbruins",
    "BUF": "sabres",
    "CAR": "canes",
    "CBJ": "bluejackets",
    "CGY": "calgaryflames",
    "CHI": "hawks",
    "COL": "coloradoavalanche",
    "DAL": "dallasstars",
    "DET": "detroitredwings",
    "EDM": "edmontonoilers",
    "FLA": "floridapanthers",
    "LAK": "losangeleskings",
    "MIN": "wildhockey",
    "MTL": "habs",
    "NJD": "devils",
    "NSH": "predators",
    "NYI": "newyorkislanders",
    "NYR": "rangers",
    "OTT": "ottawasenators",
    "PHI": "flyers",
    "PIT": "penguins",
    "SEA": "seattlekraken",
    "SJS": "sanjosesharks",
    "STL": "stlouisblues",
    "TBL": "tampabaylightning",
    "TOR": "leafs",
    "UTA": "utahhockey",
    "VAN": "canucks",
    "VGK": "goldenknights",
    "WPG": "winnipegjets",
    "WSH": "caps",
}

SCHEDULE_LENGTH = 10

DISCLAIMER = (
    "This thread is created by a program which simulates the remainder of the "
    "season based on the current record of each team in the league, and counts "
    "how many times the favourite team makes it into the playoffs. The results "
    "may not always be accurate in cases where the outcome of a game does not "
    "significantly affect the playoffs odds of the favourite team."
)


class MarkdownGenerator:
    """Renders an Analysis as a markdown post."""

    def __init__(self, league: League, analysis: Analysis, tz: Optional[tzinfo] = None):
        self.league = league
        self.an = analysis
        self.tz = tz or ZoneInfo(LOCAL_TIMEZONE)

    def fmt_team(self, team_id: str) -> str:
        subreddit = SUBREDDITS.get(team_id)
        if subreddit is None:
            return team_id
        return f"[](/r/{subreddit}){team_id}"

    def fmt_vs(self, home_id: str, away_id: str) -> str:
        return f"{self.fmt_team(away_id)} at {self.fmt_team(home_id)}"

    def fmt_seed(self, record: StandingsRecord) -> str:
        return f"{self.fmt_team(record.team_id)} ({record.conference_rank})"

    def make_result_table(self, matchups: Iterable[Matchup]) -> Table:
        table = Table(["Game", "Score", "Overtime"])
        for m in matchups:
            game = m.game
            table.add([
                self.fmt_vs(game.home_team_id, game.away_team_id),
                f"{game.home_score}-{game.away_score} {self.fmt_team(game.winner_id)}",
                m.mood,
            ])
        return table

    def make_game_table(self, matchups: Iterable[Matchup]) -> Table:
        table = Table(["Game", "Cheer for", "Time"])
        for m in matchups:
            table.add([
                self.fmt_vs(m.game.home_team_id, m.game.away_team_id),
                self.fmt_team(m.cheer_for_id),
                m.game.local_time(self.tz),
            ])
        return table

    def make_standings_table(self, seeds: List[Seed], wildcard: bool = False) -> Table:
        table = Table(["Place", "Team", "GP", "Record", "Points", "ROW", "L10", "P%", "P-82"])
        for index, seed in enumerate(seeds):
            record = seed.record

            # Cut line below the wildcard spots
            if index == 2 and wildcard:
                table.add(["-"] * 9)

            table.add([
                seed.seed,
                self.fmt_team(record.team_id),
                record.games_played,
                record.record_str,
                record.points,
                record.row,
                record.last10_str,
                f"{record.point_pct:.3f}",
                f"{record.points_82:.0f}",
            ])
        return table

    def make_playoffs_table(self, playoffs: List[PlayoffMatchup]) -> Table:
        table = Table(["High seed", "", "Low seed"])
        for pm in playoffs:
            table.add([self.fmt_seed(pm.high_team), "vs", self.fmt_seed(pm.low_team)])
        return table

    def make_schedule_table(self) -> Table:
        table = Table(["Away", "", "Home", "Date", "Time"])
        for game in self.an.schedule[:SCHEDULE_LENGTH]:
            table.add([
                self.fmt_team(game.away_team_id),
                "at",
                self.fmt_team(game.home_team_id),
                game.local_date(self.tz),
                game.local_time(self.tz),
            ])
        return table

    def odds_line(self) -> str:
        line = f"Playoffs odds today: {self.an.odds_today * 100:.1f}%"
        change = self.an.odds_change
        if change is not None:
            line += f" ({change * 100:+.1f}% since yesterday)"
        return line

    def markdown(self) -> Document:
        doc = Document()
        doc.add(H1("Playoffs race!"))
        doc.add(Paragraph(self.odds_line()))

        doc.add(H2("Last night's race"))
        doc.add(BulletList(["Our race:"]))
        if self.an.my_result is not None:
            doc.add(self.make_result_table([self.an.my_result]))
        else:
            doc.add(Paragraph("Nothing"))
        doc.add(BulletList(["Outside of town"]))
        doc.add(self.make_result_table(self.an.results))

        doc.add(H2("Standings"))
        doc.add(self.make_standings_table(self.an.own_division_seed))
        doc.add(self.make_standings_table(self.an.other_division_seed))
        doc.add(self.make_standings_table(self.an.wildcard_seed, wildcard=True))

        doc.add(H2("Playoffs matchups"))
        doc.add(self.make_playoffs_table(self.an.playoffs))

        doc.add(H2("Tonight's race"))
        doc.add(BulletList(["Our race:"]))
        if self.an.my_game is not None:
            doc.add(self.make_game_table([self.an.my_game]))
        else:
            doc.add(Paragraph("Nothing"))
        doc.add(BulletList(["Outside of town"]))
        doc.add(self.make_game_table(self.an.games))

        doc.add(H2("Upcoming schedule"))
        doc.add(self.make_schedule_table())

        doc.add(HR())
        doc.add(H3("Disclaimer"))
        doc.add(Paragraph(DISCLAIMER))

        return doc
