"""候補者管理コマンド."""

import click

from ballot_ledger.application.dtos.candidate_dto import AddCandidateInputDto
from ballot_ledger.interfaces.cli.base import (
    BaseCommand,
    get_or_init_container,
    run_async,
    with_error_handling,
)


@click.group()
def candidates():
    """候補者の追加と参照."""
    pass


@candidates.command("add")
@click.argument("name")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@click.option("--image-url", default="", help="候補者画像のURL")
@click.option("--caller", required=True, help="プラットフォームオーナーのアドレス")
@with_error_handling
def add(name: str, election_id: int, image_url: str, caller: str):
    """候補者を追加する."""
    usecase = get_or_init_container().use_cases.manage_candidates_usecase()
    result = run_async(
        usecase.add_candidate(
            AddCandidateInputDto(
                caller=caller, election_id=election_id, name=name, image_url=image_url
            )
        )
    )
    BaseCommand.fail_if_unsuccessful(result)
    BaseCommand.success(f"Added candidate {result.candidate_id}: {name}")


@candidates.command("get")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@click.option("--candidate-id", type=int, required=True, help="候補者ID")
@with_error_handling
def get(election_id: int, candidate_id: int):
    """候補者を表示する. 未登録の場合はゼロ値を表示する."""
    usecase = get_or_init_container().use_cases.manage_candidates_usecase()
    result = run_async(usecase.get_candidate(election_id, candidate_id))
    BaseCommand.fail_if_unsuccessful(result)
    c = result.candidate
    if c is not None:
        click.echo(f"[{c.id}] {c.name} votes={c.vote_count} image={c.image_url}")


@candidates.command("list")
@click.option("--election-id", type=int, required=True, help="選挙ID")
@with_error_handling
def list_candidates(election_id: int):
    """候補者一覧と得票数を表示する."""
    usecase = get_or_init_container().use_cases.manage_candidates_usecase()
    result = run_async(usecase.get_candidates(election_id))
    BaseCommand.fail_if_unsuccessful(result)

    if not result.candidates:
        click.echo("No candidates.")
        return
    for c in result.candidates:
        click.echo(f"[{c.id}] {c.name}: {c.vote_count} votes")
