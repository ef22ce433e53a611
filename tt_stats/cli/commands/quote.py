"""CLI command for printing a typing test quote."""

from tt_stats.cli.commands.common import load_config
from tt_stats.presenters import ConsolePresenter
from tt_stats.services import QuoteService


def quote_command(args) -> int:
    """Execute the quote subcommand.

    Returns:
        Exit code (always 0; offline falls back to a built-in quote)
    """
    presenter = ConsolePresenter()
    config = load_config(args)

    service = QuoteService(
        api_url=config.quote_api_url,
        timeout=config.quote_timeout,
        cache_size=config.quote_cache_size,
    )
    quote = service.get_quote()

    presenter.show_info(quote.text)
    if quote.attribution:
        presenter.show_info(f"  - {quote.attribution}")
    return 0
