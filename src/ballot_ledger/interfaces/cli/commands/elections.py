"""選挙管理コマンド."""

import click

from ballot_ledger.application.dtos.election_dto import (
    CreateElectionInputDto,
    ElectionOutputItem,
    GetElectionInputDto,
    ListElectionsInputDto,
)
from ballot_ledger.interfaces.cli.base import (
    BaseCommand,
    get_or_init_container,
    run_async,
    with_error_handling,
)


@click.group()
def elections():
    """選挙の作成と参照."""
    pass


@elections.command("create")
@click.argument("name")
@click.option("--whitelist-start", type=int, required=True, help="登録開始（UNIX秒）")
@click.option("--whitelist-end", type=int, required=True, help="登録終了（UNIX秒）")
@click.option("--voting-start", type=int, required=True, help="投票開始（UNIX秒）")
@click.option("--voting-end", type=int, required=True, help="投票終了（UNIX秒）")
@click.option("--caller", required=True, help="選挙作成者のアドレス")
@with_error_handling
def create(
    name: str,
    whitelist_start: int,
    whitelist_end: int,
    voting_start: int,
    voting_end: int,
    caller: str,
):
    """選挙を作成する."""
    usecase = get_or_init_container().use_cases.manage_elections_usecase()
    result = run_async(
        usecase.create_election(
            CreateElectionInputDto(
                caller=caller,
                name=name,
                whitelist_start=whitelist_start,
                whitelist_end=whitelist_end,
                voting_start=voting_start,
                voting_end=voting_end,
            )
        )
    )
    BaseCommand.fail_if_unsuccessful(result)
    BaseCommand.success(f"Created election {result.election_id}: {name}")


def _echo_election(item: ElectionOutputItem) -> None:
    click.echo(f"[{item.id}] {item.name} ({item.phase.value})")
    click.echo(f"  whitelist: {item.whitelist_start} - {item.whitelist_end}")
    click.echo(f"  voting:    {item.voting_start} - {item.voting_end}")
    click.echo(
        f"  candidates: {item.candidate_count}, voters: {item.voter_count}, "
        f"reserve: {item.reserve_balance:,}"
    )


@elections.command("show")
@click.argument("election_id", type=int)
@with_error_handling
def show(election_id: int):
    """選挙の詳細を表示する."""
    usecase = get_or_init_container().use_cases.manage_elections_usecase()
    result = run_async(usecase.get_election(GetElectionInputDto(election_id)))
    BaseCommand.fail_if_unsuccessful(result)
    if result.election is not None:
        _echo_election(result.election)


@elections.command("list")
@click.option("--limit", type=int, default=None, help="表示件数の上限")
@click.option("--offset", type=int, default=None, help="読み飛ばす件数")
@with_error_handling
def list_elections(limit: int | None, offset: int | None):
    """選挙一覧を表示する."""
    usecase = get_or_init_container().use_cases.manage_elections_usecase()
    result = run_async(
        usecase.list_elections(ListElectionsInputDto(limit=limit, offset=offset))
    )
    BaseCommand.fail_if_unsuccessful(result)

    if not result.elections:
        click.echo("No elections.")
        return
    for item in result.elections:
        _echo_election(item)
