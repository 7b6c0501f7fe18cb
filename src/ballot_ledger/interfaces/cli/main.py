"""Entry point for the ``ballot-ledger`` command."""

import click

from ballot_ledger import __version__
from ballot_ledger.common.logging import setup_logging
from ballot_ledger.interfaces.cli.commands.candidates import candidates
from ballot_ledger.interfaces.cli.commands.creators import creators
from ballot_ledger.interfaces.cli.commands.database import init_db
from ballot_ledger.interfaces.cli.commands.elections import elections
from ballot_ledger.interfaces.cli.commands.reserve import reserve
from ballot_ledger.interfaces.cli.commands.vote import vote
from ballot_ledger.interfaces.cli.commands.whitelist import whitelist


@click.group()
@click.version_option(__version__, prog_name="ballot-ledger")
@click.option("--log-level", default=None, help="ログレベル（設定値を上書き）")
def cli(log_level: str | None):
    """Ballot Ledger - 複数選挙の投票台帳."""
    from ballot_ledger.infrastructure.config.settings import get_settings

    settings = get_settings()
    setup_logging(level=log_level or settings.log_level, log_format=settings.log_format)


cli.add_command(init_db)
cli.add_command(creators)
cli.add_command(reserve)
cli.add_command(elections)
cli.add_command(candidates)
cli.add_command(whitelist)
cli.add_command(vote)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
