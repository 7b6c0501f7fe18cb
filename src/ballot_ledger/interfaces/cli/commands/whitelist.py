"""ホワイトリスト登録コマンド."""

import click

from ballot_ledger.application.dtos.whitelist_dto import WhitelistUserInputDto
from ballot_ledger.interfaces.cli.base import (
    BaseCommand,
    get_or_init_container,
    run_async,
    with_error_handling,
)


@click.group()
def whitelist():
    """有権者のホワイトリスト登録."""
    pass


@whitelist.command("register")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@click.option("--registration-number", type=int, required=True, help="登録番号")
@click.option("--caller", required=True, help="登録するアドレス")
@with_error_handling
def register(election_id: int, registration_number: int, caller: str):
    """呼び出し元アドレスを登録番号で登録する."""
    usecase = get_or_init_container().use_cases.register_voter_usecase()
    result = run_async(
        usecase.whitelist_user(
            WhitelistUserInputDto(
                caller=caller,
                election_id=election_id,
                registration_number=registration_number,
            )
        )
    )
    BaseCommand.fail_if_unsuccessful(result)
    BaseCommand.success(
        f"Whitelisted {caller} for election {election_id} "
        f"({result.voter_count} registered)"
    )


@whitelist.command("wallet")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@click.option("--registration-number", type=int, required=True, help="登録番号")
@with_error_handling
def wallet(election_id: int, registration_number: int):
    """登録番号に紐付いたアドレスを表示する."""
    usecase = get_or_init_container().use_cases.register_voter_usecase()
    result = run_async(
        usecase.get_wallet_for_registration(election_id, registration_number)
    )
    BaseCommand.fail_if_unsuccessful(result)
    click.echo(result.wallet_address or "(unbound)")


@whitelist.command("count")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@with_error_handling
def count(election_id: int):
    """登録済み有権者数を表示する."""
    usecase = get_or_init_container().use_cases.register_voter_usecase()
    result = run_async(usecase.get_total_registered_voters(election_id))
    BaseCommand.fail_if_unsuccessful(result)
    click.echo(str(result.total))


@whitelist.command("status")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@click.option("--address", required=True, help="確認するアドレス")
@with_error_handling
def status(election_id: int, address: str):
    """アドレスが登録済みかを表示する."""
    usecase = get_or_init_container().use_cases.register_voter_usecase()
    result = run_async(usecase.is_whitelisted(election_id, address))
    BaseCommand.fail_if_unsuccessful(result)
    click.echo("whitelisted" if result.is_whitelisted else "not whitelisted")
