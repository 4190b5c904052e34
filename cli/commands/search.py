"""Search miqaats by name, type, month or importance."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import MiqaatRenderer
from cli.utils import handle_errors
from miqaat.miqaat_query import MiqaatQuery

logger = logging.getLogger(__name__)


@handle_errors
def search(
    query: Annotated[
        str | None,
        typer.Argument(help="Text to search for in names and descriptions"),
    ] = None,
    miqaat_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Filter by type (e.g. urs, shahadat)"),
    ] = None,
    month: Annotated[
        int | None,
        typer.Option("--month", "-m", help="Filter by Hijri month 1-12"),
    ] = None,
    day: Annotated[
        int | None,
        typer.Option("--day", "-d", help="Filter by Hijri day of month"),
    ] = None,
    important: Annotated[
        bool,
        typer.Option("--important", "-i", help="Only important miqaats"),
    ] = False,
    page: Annotated[
        int,
        typer.Option("--page", "-p", help="Page number", min=1),
    ] = 1,
) -> None:
    """Search miqaats.

    Criteria combine with AND. Without any criteria every miqaat is listed
    in calendar order.

    Examples:
        miqaat-cal search ashara              # Name or description contains "ashara"
        miqaat-cal search --type urs -m 7     # Urs in Rajab
        miqaat-cal search -i -p 2             # Second page of important miqaats
    """
    ctx = get_context()
    cal_query = MiqaatQuery(ctx.miqaats.list())

    results = cal_query.search(
        name=query,
        miqaat_type=miqaat_type,
        date=day,
        month=month,
        important=True if important else None,
    )
    logger.info(f"Search matched {len(results)} miqaats")

    result_page = cal_query.paginate(
        page=page, page_size=ctx.config.page_size, miqaats=results
    )
    MiqaatRenderer().render_page(result_page)
