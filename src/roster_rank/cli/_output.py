from rich.console import Console
from rich.table import Table

from roster_rank.domain.game import Stat
from roster_rank.domain.transition import TransitionEvent
from roster_rank.rank.benchmarks import BenchmarkTable
from roster_rank.rank.scorer import GameScore
from roster_rank.rank.tier_table import TierTable
from roster_rank.services.game_recorder import GameOutcome
from roster_rank.services.leaderboard import LeaderboardEntry
from roster_rank.services.coaching import SessionSlot, SlotStatus
from roster_rank.services.rank_history import chart_points, rank_label
from roster_rank.services.roster import PlayerOverview

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _signed(value: int) -> str:
    color = "green" if value > 0 else "red" if value < 0 else "dim"
    return f"[{color}]{value:+d}[/{color}]"


def print_tier(points: int, tier: str) -> None:
    console.print(f"{points} RP → [bold]{tier}[/bold]")


def print_tier_table(tier_table: TierTable, benchmarks: BenchmarkTable) -> None:
    table = Table(title=f"Tier table v{tier_table.version}", show_edge=False, pad_edge=False)
    table.add_column("Tier")
    table.add_column("Range", justify="right")
    for stat in Stat:
        table.add_column(stat.value.capitalize(), justify="right")
    for tier in reversed(tier_table.tiers):
        upper = "∞" if tier.upper_bound is None else str(tier.upper_bound)
        averages = benchmarks.benchmarks_for(tier.name)
        table.add_row(tier.name, f"{tier.lower_bound}–{upper}", *(str(averages[stat]) for stat in Stat))
    console.print(table)


def print_game_score(score: GameScore) -> None:
    table = Table(title=f"Scored against {score.tier}", show_edge=False, pad_edge=False)
    table.add_column("Stat")
    table.add_column("RP", justify="right")
    for stat in Stat:
        table.add_row(stat.value, _signed(score.contributions[stat]))
    console.print(table)
    if score.raw_total != score.delta:
        console.print(f"  Raw total {score.raw_total:+d} clamped to {score.delta:+d}")
    console.print(f"  Delta: {_signed(score.delta)} RP")


def print_game_outcome(outcome: GameOutcome) -> None:
    console.print(f"[bold green]{outcome.message}[/bold green]")
    console.print(f"  {outcome.username}: {outcome.old_points} → {outcome.new_points} RP ({outcome.new_tier})")
    if outcome.transition_message:
        console.print(f"  [bold yellow]Rank change![/bold yellow] {outcome.transition_message}")


def print_leaderboard(entries: list[LeaderboardEntry]) -> None:
    if not entries:
        console.print("No players found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Tier")
    table.add_column("RP", justify="right")
    table.add_column("Membership")
    for entry in entries:
        table.add_row(
            str(entry.position), entry.username, entry.tier, str(entry.rank_points), entry.membership or "None"
        )
    console.print(table)


def print_rank_history(username: str, events: list[TransitionEvent], tier_table: TierTable) -> None:
    console.print(f"[bold]{username}'s Rank History[/bold]")
    if not events:
        console.print("No rank changes recorded.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Date")
    table.add_column("Tier")
    table.add_column("Level", justify="right")
    table.add_column("Change")
    levels = [level for _, level in chart_points(events, tier_table)]
    for event, level in zip(events, levels, strict=True):
        table.add_row(event.occurred_at.strftime("%Y-%m-%d"), event.new_tier, str(level), event.direction.value)
    console.print(table)
    peak = max(levels)
    console.print(f"  Peak: {rank_label(peak, tier_table)} (level {peak})")


_STAT_ABBREVIATIONS = {
    Stat.POINTS: "PTS",
    Stat.REBOUNDS: "REB",
    Stat.ASSISTS: "AST",
    Stat.BLOCKS: "BLK",
    Stat.STEALS: "STL",
}


def print_player_overview(overview: PlayerOverview) -> None:
    player = overview.player
    console.print(f"[bold]{player.username}[/bold]")
    console.print(f"  Role: {player.role.value.capitalize()}")
    console.print(f"  Membership: {player.membership or 'None'}")
    console.print(f"  Rank: {overview.tier} ({player.rank_points} RP)")
    if not overview.recent_games:
        console.print("  No games found.")
        return
    table = Table(title=f"Last {len(overview.recent_games)} Games", show_edge=False, pad_edge=False)
    table.add_column("Date")
    for stat in Stat:
        table.add_column(_STAT_ABBREVIATIONS[stat], justify="right")
    for game in overview.recent_games:
        table.add_row(game.played_at.strftime("%Y-%m-%d"), *(str(game.stats.value(stat)) for stat in Stat))
    console.print(table)


_SLOT_STYLES = {
    SlotStatus.OPEN: "green",
    SlotStatus.BOOKED: "red",
    SlotStatus.BOOKED_BY_YOU: "blue",
}


def print_sessions(slots: list[SessionSlot]) -> None:
    if not slots:
        console.print("No coaching sessions scheduled.")
        return
    table = Table(title="Coaching Sessions", show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Coach")
    table.add_column("Date")
    table.add_column("Status")
    for slot in slots:
        session = slot.session
        style = _SLOT_STYLES[slot.status]
        status = f"[{style}]{slot.status.value}[/{style}]"
        if slot.booked_by:
            status += f" ({slot.booked_by})"
        table.add_row(
            str(session.id), session.title, session.coach_name, session.scheduled_at.strftime("%Y-%m-%d %H:%M"), status
        )
    console.print(table)
