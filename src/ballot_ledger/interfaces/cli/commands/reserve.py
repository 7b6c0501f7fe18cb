"""選挙準備金コマンド."""

import click

from ballot_ledger.application.dtos.reserve_dto import DepositInputDto
from ballot_ledger.interfaces.cli.base import (
    BaseCommand,
    get_or_init_container,
    run_async,
    with_error_handling,
)


@click.group()
def reserve():
    """選挙準備金の入金と参照."""
    pass


@reserve.command("deposit")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@click.option("--amount", type=int, required=True, help="入金額")
@click.option("--caller", required=True, help="入金するアドレス")
@with_error_handling
def deposit(election_id: int, amount: int, caller: str):
    """準備金に入金する. 手数料はプラットフォームに送られる."""
    usecase = get_or_init_container().use_cases.manage_election_reserve_usecase()
    result = run_async(
        usecase.deposit(
            DepositInputDto(caller=caller, election_id=election_id, amount=amount)
        )
    )
    BaseCommand.fail_if_unsuccessful(result)
    BaseCommand.success(
        f"Deposited {result.amount:,} (fee {result.fee:,}) "
        f"to election {election_id}, balance {result.balance:,}"
    )


@reserve.command("show")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@click.option("--deposits", "show_deposits", is_flag=True, help="入金履歴も表示する")
@with_error_handling
def show(election_id: int, show_deposits: bool):
    """準備金残高を表示する."""
    usecase = get_or_init_container().use_cases.manage_election_reserve_usecase()
    result = run_async(usecase.get_gas_reserve(election_id))
    BaseCommand.fail_if_unsuccessful(result)
    click.echo(f"Election {election_id} reserve: {result.balance:,}")

    if show_deposits:
        history = run_async(usecase.list_deposits(election_id))
        BaseCommand.fail_if_unsuccessful(history)
        for item in history.deposits:
            click.echo(
                f"  {item.depositor}: {item.amount:,} (fee {item.fee:,}, "
                f"net {item.net_amount:,})"
            )


@reserve.command("fees")
@with_error_handling
def fees():
    """プラットフォーム手数料の合計を表示する."""
    usecase = get_or_init_container().use_cases.manage_election_reserve_usecase()
    result = run_async(usecase.get_platform_fee_total())
    BaseCommand.fail_if_unsuccessful(result)
    click.echo(f"Platform fees collected: {result.total_fees:,}")
