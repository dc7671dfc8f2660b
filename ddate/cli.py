"""ddate command-line entry point.

Prints today's Discordian date, or the Discordian date of a date given
as free text:

    $ ddate
    Today is Boomtime, the 73rd day of Bureaucracy in the YOLD 3192
    $ ddate "Nov 4, 2017"
    2017-11-04 is Pungenday, the 16th day of The Aftermath in the YOLD 3183
"""

import logging
from typing import Optional

import typer

from ddate import __version__
from ddate.config import load_config
from ddate.core.fields import CalendarDate
from ddate.errors import ConfigurationError, ParseError, ValidationError
from ddate.infer import DateOrder, InferOptions, parse_date

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ddate",
    help="Print a date in the Discordian calendar",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"ddate version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    date: Optional[str] = typer.Argument(
        None,
        help="Date to convert (e.g. 2017-11-04, 'Nov 4, 2017'). Defaults to today.",
        show_default=False,
    ),
    date_order: Optional[DateOrder] = typer.Option(
        None,
        "--date-order",
        "-o",
        case_sensitive=False,
        help="Order for ambiguous dates like 01/02/2024 [default: $DDATE_DATE_ORDER or MDY]",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Print a date in the Discordian calendar."""
    try:
        config = load_config()
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=2)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if date is None:
        typer.echo(f"Today is {CalendarDate.today().to_poee()}")
        return

    options = config.infer_options
    if date_order is not None:
        options = InferOptions(date_order=date_order)

    try:
        parsed = parse_date(date, options)
    except (ParseError, ValidationError) as e:
        logger.debug("Rejected date argument %r: %s", date, e)
        typer.echo("Could not parse provided date.")
        raise typer.Exit(code=1)

    typer.echo(f"{parsed.to_iso_format()} is {parsed.to_poee()}")


if __name__ == "__main__":
    app()
