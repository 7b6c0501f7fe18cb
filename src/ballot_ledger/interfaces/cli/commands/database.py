"""データベース管理コマンド."""

import click

from sqlalchemy.engine import make_url

from ballot_ledger.interfaces.cli.base import (
    BaseCommand,
    get_or_init_container,
    run_async,
    with_error_handling,
)


async def _create_schema() -> str:
    database = get_or_init_container().services.database()
    try:
        await database.create_all()
    finally:
        await database.dispose()
    return make_url(database.url).render_as_string(hide_password=True)


@click.command("init-db")
@with_error_handling
def init_db():
    """台帳のテーブルを作成する（作成済みのテーブルはそのまま）."""
    url = run_async(_create_schema())
    BaseCommand.success(f"Database schema ready ({url})")
