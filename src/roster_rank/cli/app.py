from datetime import UTC, datetime
from typing import Annotated

import typer

from roster_rank.cli._logging import configure_logging
from roster_rank.cli._output import (
    console,
    print_error,
    print_game_outcome,
    print_game_score,
    print_leaderboard,
    print_player_overview,
    print_rank_history,
    print_sessions,
    print_tier,
    print_tier_table,
)
from roster_rank.cli.factory import build_roster_context
from roster_rank.config import Settings, create_config, load_settings
from roster_rank.domain.game import GameStats
from roster_rank.domain.player import Membership, Role
from roster_rank.domain.result import Err, Ok
from roster_rank.rank.benchmarks import DEFAULT_BENCHMARKS
from roster_rank.rank.scorer import score_breakdown
from roster_rank.rank.tier_table import DEFAULT_TIER_TABLE
from roster_rank.services.game_recorder import MAX_STAT_VALUE, parse_game_form
from roster_rank.services.rank_history import HistoryFilter

app = typer.Typer(name="roster", help="Roster rank manager: tiers, game scoring, rank history and coaching")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Roster rank manager: tiers, game scoring, rank history and coaching."""
    configure_logging(verbose=verbose, level=_settings(None).log_level)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_DataDirOpt = Annotated[str | None, typer.Option("--data-dir", help="Directory holding roster.db")]
_UsernameArg = Annotated[str, typer.Argument(help="Player username")]
_StatOpt = Annotated[int, typer.Option(min=0, max=MAX_STAT_VALUE)]
_FormStatOpt = Annotated[str | None, typer.Option(help="Stat value (whole number)")]


def _settings(data_dir: str | None) -> Settings:
    return load_settings(create_config(data_dir=data_dir))


@app.command()
def tier(points: Annotated[int, typer.Argument(help="Rank point total")]) -> None:
    """Show the tier for a rank point total."""
    print_tier(points, DEFAULT_TIER_TABLE.tier_for(points))


@app.command()
def tiers() -> None:
    """Print the tier table with each tier's benchmark averages."""
    print_tier_table(DEFAULT_TIER_TABLE, DEFAULT_BENCHMARKS)


@app.command()
def score(
    points: _StatOpt = 0,
    rebounds: _StatOpt = 0,
    assists: _StatOpt = 0,
    blocks: _StatOpt = 0,
    steals: _StatOpt = 0,
    tier_name: Annotated[str | None, typer.Option("--tier", help="Score against this tier's benchmarks")] = None,
    rank_points: Annotated[int, typer.Option("--rank-points", min=0, help="Derive the tier from this total")] = 0,
) -> None:
    """Preview the rank-point delta for a game without recording it."""
    stats = GameStats(points=points, rebounds=rebounds, assists=assists, blocks=blocks, steals=steals)
    target = tier_name if tier_name is not None else DEFAULT_TIER_TABLE.tier_for(rank_points)
    print_game_score(score_breakdown(stats, target, DEFAULT_BENCHMARKS))


@app.command()
def leaderboard(
    top: Annotated[int | None, typer.Option("--top", min=1, help="Show top N players")] = None,
    data_dir: _DataDirOpt = None,
) -> None:
    """Show players ordered by rank points."""
    settings = _settings(data_dir)
    with build_roster_context(settings) as ctx:
        entries = ctx.leaderboard.standings(top=top if top is not None else settings.leaderboard_top)
    print_leaderboard(entries)


@app.command()
def history(
    username: _UsernameArg,
    history_filter: Annotated[HistoryFilter, typer.Option("--filter", help="Which rank changes to show")] = (
        HistoryFilter.ALL
    ),
    data_dir: _DataDirOpt = None,
) -> None:
    """Show a player's tier transitions."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.history.history(username, history_filter, datetime.now(UTC))
    match result:
        case Ok(events):
            print_rank_history(username, events, DEFAULT_TIER_TABLE)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


# --- player subcommand group ---

player_app = typer.Typer(name="player", help="Manage roster accounts")
app.add_typer(player_app, name="player")


@player_app.command("add")
def player_add(
    username: _UsernameArg,
    role: Annotated[Role, typer.Option("--role", help="Account role")] = Role.PLAYER,
    membership: Annotated[str | None, typer.Option("--membership", help="Membership plan")] = None,
    data_dir: _DataDirOpt = None,
) -> None:
    """Add a player or employee account."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.roster.add_player(username, role, membership)
    match result:
        case Ok(player):
            console.print(f"[bold green]Added[/bold green] {player.role.value} [bold]{player.username}[/bold]")
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@player_app.command("status")
def player_status(username: _UsernameArg, data_dir: _DataDirOpt = None) -> None:
    """Show a player's current tier, noting any change since they last checked."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.roster.check_in(username)
    match result:
        case Ok(notice):
            if notice is not None:
                console.print(f"[bold yellow]Rank Update:[/bold yellow] {notice}")
            else:
                console.print("No rank change since last check.")
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@player_app.command("show")
def player_show(username: _UsernameArg, data_dir: _DataDirOpt = None) -> None:
    """Show a player's account, rank and most recent games."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.roster.overview(username)
    match result:
        case Ok(overview):
            print_player_overview(overview)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@player_app.command("edit")
def player_edit(
    username: _UsernameArg,
    membership: Annotated[Membership | None, typer.Option("--membership", help="New membership plan")] = None,
    role: Annotated[Role | None, typer.Option("--role", help="New account role")] = None,
    data_dir: _DataDirOpt = None,
) -> None:
    """Change a player's membership plan or role."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.roster.edit_player(username, membership=membership, role=role)
    match result:
        case Ok(player):
            console.print("[bold green]Changes saved![/bold green]")
            console.print(f"  {player.username}: {player.role.value}, membership {player.membership or 'None'}")
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


# --- game subcommand group ---

game_app = typer.Typer(name="game", help="Record game results")
app.add_typer(game_app, name="game")


@game_app.command("record")
def game_record(
    username: _UsernameArg,
    points: _FormStatOpt = None,
    rebounds: _FormStatOpt = None,
    assists: _FormStatOpt = None,
    blocks: _FormStatOpt = None,
    steals: _FormStatOpt = None,
    data_dir: _DataDirOpt = None,
) -> None:
    """Record a game for a player and update their rank points."""
    form = {"points": points, "rebounds": rebounds, "assists": assists, "blocks": blocks, "steals": steals}
    parsed = parse_game_form(form)
    if isinstance(parsed, Err):
        print_error(parsed.error.message)
        raise typer.Exit(code=1)

    stats = parsed.value
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.recorder.record(username, stats)
    match result:
        case Ok(outcome):
            print_game_outcome(outcome)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


# --- session subcommand group ---

session_app = typer.Typer(name="session", help="Schedule and book coaching sessions")
app.add_typer(session_app, name="session")

_ActorOpt = Annotated[str, typer.Option("--as", help="Employee account making the change")]
_SessionIdArg = Annotated[int, typer.Argument(help="Session number from 'roster session list'")]
_WhenOpt = Annotated[
    datetime,
    typer.Option("--at", formats=["%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M"], help="Date and time, e.g. 2025-08-01 18:30"),
]


@session_app.command("add")
def session_add(
    title: Annotated[str, typer.Argument(help="Session title")],
    coach: Annotated[str, typer.Option("--coach", help="Coach running the session")],
    at: _WhenOpt,
    actor: _ActorOpt,
    data_dir: _DataDirOpt = None,
) -> None:
    """Schedule a new coaching session (employees only)."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.coaching.add_session(actor, title, coach, at)
    match result:
        case Ok(session):
            console.print(f"[bold green]Added[/bold green] session #{session.id}: {session.title}")
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@session_app.command("list")
def session_list(
    viewer: Annotated[str | None, typer.Option("--as", help="Show the schedule as this account sees it")] = None,
    data_dir: _DataDirOpt = None,
) -> None:
    """List coaching sessions in date order."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.coaching.schedule(viewer)
    match result:
        case Ok(slots):
            print_sessions(slots)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@session_app.command("book")
def session_book(username: _UsernameArg, session_id: _SessionIdArg, data_dir: _DataDirOpt = None) -> None:
    """Book an open session for a player."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.coaching.book(username, session_id)
    match result:
        case Ok(session):
            console.print(f"[bold green]Session booked![/bold green] {session.title} with {session.coach_name}")
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@session_app.command("cancel")
def session_cancel(username: _UsernameArg, data_dir: _DataDirOpt = None) -> None:
    """Cancel a player's booked session."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.coaching.cancel(username)
    match result:
        case Ok(session):
            console.print(f"Session canceled: {session.title}")
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@session_app.command("delete")
def session_delete(session_id: _SessionIdArg, actor: _ActorOpt, data_dir: _DataDirOpt = None) -> None:
    """Remove a coaching session (employees only)."""
    with build_roster_context(_settings(data_dir)) as ctx:
        result = ctx.coaching.delete_session(actor, session_id)
    match result:
        case Ok(session):
            console.print(f"Deleted session #{session.id}: {session.title}")
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)
