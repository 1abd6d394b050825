from __future__ import annotations

from typing import Dict, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import LegislatureStats, PartySummary, SessionResult, Vote
from .sim.agent import Legislator
from .state import serialize_legislators

VOTE_STYLES: Dict[Vote, str] = {
    "aye": "bold green",
    "nay": "bold red",
    "abstain": "yellow",
}
VOTE_MARK = "█"


def vote_strip(votes: Sequence[Vote]) -> Text:
    text = Text()
    for v in votes:
        text.append(VOTE_MARK, style=VOTE_STYLES[v])
    return text


def stats_line(stats: LegislatureStats) -> str:
    if stats.pass_percentage is None:
        return "No sessions held yet."
    return (f"Pass rate: {stats.pass_percentage:.2f}% | "
            f"Proposed: {stats.proposed} | Failed: {stats.failed}")


def render_roster(console: Console, legislators: Sequence[Legislator], parties: Sequence[PartySummary]) -> None:
    table = Table(title="Parties")
    table.add_column("Party")
    table.add_column("Center")
    table.add_column("Members", justify="right")
    for p in parties:
        center = f"({p.position[0]:.1f}, {p.position[1]:.1f})" if p.position else "-"
        table.add_row(p.name, center, str(p.members))
    console.print(table)

    members = Table(title="Legislators")
    members.add_column("Name")
    members.add_column("Party")
    members.add_column("Position")
    for row in serialize_legislators(legislators):
        x, y = row["position"]
        members.add_row(row["name"], row["party"], f"({x:.1f}, {y:.1f})")
    console.print(members)


def render_session(console: Console, result: SessionResult) -> None:
    x, y = result.bill_position
    console.print(f"{result.advocate} proposes the {result.bill_name} ({x:.1f}, {y:.1f})", highlight=False)
    console.print(vote_strip(result.votes))
    t = result.tally
    console.print(f"Aye: {t.aye}  Nay: {t.nay}  Abstain: {t.abstain}", highlight=False)
    if result.passed:
        console.print("The motion passes.", style="green")
    else:
        console.print("The motion fails.", style="red")
    console.print(stats_line(result.stats), highlight=False)
