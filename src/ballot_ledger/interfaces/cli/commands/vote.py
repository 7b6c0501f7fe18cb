"""投票コマンド."""

import click

from ballot_ledger.application.dtos.vote_dto import CastVoteInputDto
from ballot_ledger.interfaces.cli.base import (
    BaseCommand,
    get_or_init_container,
    run_async,
    with_error_handling,
)


@click.group(invoke_without_command=True)
@click.option("--election-id", type=int, help="選挙ID")
@click.option("--candidate-id", type=int, help="投票する候補者ID")
@click.option("--caller", help="投票するアドレス")
@click.pass_context
@with_error_handling
def vote(
    ctx: click.Context,
    election_id: int | None,
    candidate_id: int | None,
    caller: str | None,
):
    """候補者に投票する. サブコマンド status で投票状況を確認できる."""
    if ctx.invoked_subcommand is not None:
        return
    if election_id is None or candidate_id is None or caller is None:
        raise click.UsageError(
            "--election-id, --candidate-id and --caller are required to vote"
        )

    usecase = get_or_init_container().use_cases.cast_vote_usecase()
    result = run_async(
        usecase.vote(
            CastVoteInputDto(
                caller=caller, election_id=election_id, candidate_id=candidate_id
            )
        )
    )
    BaseCommand.fail_if_unsuccessful(result)
    BaseCommand.success(
        f"Voted for candidate {candidate_id} in election {election_id} "
        f"(reserve left {result.remaining_reserve:,})"
    )


@vote.command("status")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@click.option("--address", required=True, help="確認するアドレス")
@with_error_handling
def status(election_id: int, address: str):
    """アドレスが投票済みかを表示する."""
    usecase = get_or_init_container().use_cases.cast_vote_usecase()
    result = run_async(usecase.has_voted(election_id, address))
    BaseCommand.fail_if_unsuccessful(result)
    click.echo("voted" if result.has_voted else "not voted")
