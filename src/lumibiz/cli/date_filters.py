"""CLI helpers for date range resolution."""

import click

from lumibiz.utils.date_parser import get_date_range, parse_record_date


def date_range_options(command):
    """Attach --start-date, --end-date and the period flags to a command."""
    options = [
        click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')"),
        click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')"),
        click.option("--this-month", is_flag=True, help="Filter to current month"),
        click.option("--this-year", is_flag=True, help="Filter to current year"),
        click.option("--this-week", is_flag=True, help="Filter to current week"),
        click.option("--last-month", is_flag=True, help="Filter to previous month"),
        click.option("--last-year", is_flag=True, help="Filter to previous year"),
        click.option("--last-week", is_flag=True, help="Filter to previous week"),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def period_flags_from(params: dict) -> dict[str, bool]:
    """Collect the period flags of a command's parameters, keyed by period name."""
    names = ("this_month", "this_year", "this_week", "last_month", "last_year", "last_week")
    return {name.replace("_", "-"): bool(params.get(name)) for name in names}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[str | None, str | None]:
    """Resolve CLI date range to canonical YYYY-MM-DD bounds."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --this-year, --this-week, --last-month, --last-year, --last-week) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                return get_date_range(period)

    start = None
    end = None
    if start_date:
        try:
            start = parse_record_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_record_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    return start, end
