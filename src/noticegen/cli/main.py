"""CLI entry point for noticegen."""

from __future__ import annotations

import asyncio
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from noticegen.cli.output import print_update
from noticegen.core.config import resolve_client_config
from noticegen.core.session import TRANSPORT_ERROR_MESSAGE, NoticeSession
from noticegen.errors import TransportError
from noticegen.providers import create_provider
from noticegen.types.request import DEFAULT_REQUEST, FORM_FIELDS, RequestParameters
from noticegen.types.stream import StreamStatus, StreamUpdate
from noticegen.ui.html import write_html

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True),
        ],
        force=True,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def cli(verbose: bool) -> None:
    """noticegen -- railway severe-weather notice generator.

    \b
    Usage:
      noticegen generate --weather 暴雨 --lines 京九线
      noticegen generate -i                 (prompt for each field)
      noticegen generate --html notice.html
      noticegen config list
    """
    _configure_logging(verbose)


@cli.command("generate")
@click.option("--unit", default=DEFAULT_REQUEST.unit, help="发文单位 (issuing unit)")
@click.option("--weather", default=DEFAULT_REQUEST.weather, help="天气类型 (weather type)")
@click.option("--start-date", default=DEFAULT_REQUEST.start_date, help="起始日期")
@click.option("--end-date", default=DEFAULT_REQUEST.end_date, help="结束日期")
@click.option("--lines", default=DEFAULT_REQUEST.lines, help="涉及线路 (affected lines)")
@click.option("--attachment", default=DEFAULT_REQUEST.attachment, help="附件 (optional)")
@click.option("--user", default=DEFAULT_REQUEST.user, help="Requester identifier")
@click.option("--interactive", "-i", is_flag=True, help="Prompt for each form field")
@click.option("--model", "-m", default=None, help="Model ID")
@click.option("--api-key", default=None, help="Endpoint API key")
@click.option("--base-url", default=None, help="Endpoint base URL")
@click.option("--html", "html_path", default=None, type=click.Path(dir_okay=False),
              help="Write the rendered notice to an HTML file")
@click.option("--markup", is_flag=True, help="Print rendered markup instead of text")
@click.option("--rich/--no-rich", default=None, help="Live terminal view (default: auto)")
@click.option("--reasoning/--no-reasoning", default=True, help="Show the reasoning panel")
def generate(
    unit: str,
    weather: str,
    start_date: str,
    end_date: str,
    lines: str,
    attachment: str,
    user: str,
    interactive: bool,
    model: str | None,
    api_key: str | None,
    base_url: str | None,
    html_path: str | None,
    markup: bool,
    rich: bool | None,
    reasoning: bool,
) -> None:
    """Generate a notice and stream it to the terminal."""
    values = {
        "unit": unit, "weather": weather, "start_date": start_date,
        "end_date": end_date, "lines": lines, "attachment": attachment, "user": user,
    }
    if interactive:
        for field, label in FORM_FIELDS:
            values[field] = click.prompt(label, default=values[field], show_default=True)
    params = RequestParameters.from_mapping(values)

    config = resolve_client_config(model=model, api_key=api_key, base_url=base_url)
    try:
        provider = create_provider(config)
    except TransportError as exc:
        logger.debug("Provider setup failed: %s", exc)
        click.echo(TRANSPORT_ERROR_MESSAGE, err=True)
        sys.exit(1)

    use_rich = rich if rich is not None else sys.stderr.isatty()
    last = asyncio.run(_run_submission(
        NoticeSession(provider, user=config.user),
        params,
        use_rich=use_rich,
        show_reasoning=reasoning,
        markup=markup,
    ))

    if last is None:
        sys.exit(1)
    if html_path and last.state.status is StreamStatus.DONE:
        out = write_html(html_path, last.markup, last.state.reasoning if reasoning else "")
        click.echo(f"Wrote {out}", err=True)
    if last.state.status is not StreamStatus.DONE:
        sys.exit(1)


async def _run_submission(
    session: NoticeSession,
    params: RequestParameters,
    *,
    use_rich: bool,
    show_reasoning: bool,
    markup: bool,
) -> StreamUpdate | None:
    """Drive one submission and return its last update."""
    last: StreamUpdate | None = None
    if use_rich:
        from noticegen.ui.terminal import LiveNoticeView

        with LiveNoticeView(show_reasoning=show_reasoning) as view:
            async for update in session.submit(params):
                view.update(update)
                last = update
        if last is not None and markup and last.state.status is StreamStatus.DONE:
            sys.stdout.write(last.markup + "\n")
    else:
        async for update in session.submit(params):
            print_update(update, markup=markup)
            last = update
    return last


def _register_subcommands() -> None:
    """Register CLI subcommands."""
    from noticegen.cli.commands import config_cmd

    cli.add_command(config_cmd, "config")


_register_subcommands()


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
