"""選挙作成者管理コマンド."""

import click

from ballot_ledger.application.dtos.election_creator_dto import ManageCreatorInputDto
from ballot_ledger.interfaces.cli.base import (
    BaseCommand,
    get_or_init_container,
    run_async,
    with_error_handling,
)


@click.group()
def creators():
    """選挙作成者の管理."""
    pass


@creators.command("add")
@click.argument("address")
@click.option("--caller", required=True, help="操作を行うアドレス")
@with_error_handling
def add_creator(address: str, caller: str):
    """アドレスを選挙作成者として承認する."""
    usecase = get_or_init_container().use_cases.manage_election_creators_usecase()
    result = run_async(
        usecase.add_creator(ManageCreatorInputDto(caller=caller, address=address))
    )
    BaseCommand.fail_if_unsuccessful(result)
    BaseCommand.success(f"Added election creator {address}")


@creators.command("remove")
@click.argument("address")
@click.option("--caller", required=True, help="操作を行うアドレス")
@with_error_handling
def remove_creator(address: str, caller: str):
    """選挙作成者の承認を取り消す."""
    usecase = get_or_init_container().use_cases.manage_election_creators_usecase()
    result = run_async(
        usecase.remove_creator(ManageCreatorInputDto(caller=caller, address=address))
    )
    BaseCommand.fail_if_unsuccessful(result)
    BaseCommand.success(f"Removed election creator {address}")


@creators.command("list")
@with_error_handling
def list_creators():
    """承認済みの選挙作成者を表示する."""
    usecase = get_or_init_container().use_cases.manage_election_creators_usecase()
    result = run_async(usecase.list_creators())
    BaseCommand.fail_if_unsuccessful(result)

    if not result.creators:
        click.echo("No election creators.")
        return
    for address in result.creators:
        click.echo(address)
