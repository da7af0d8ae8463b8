"""Changelog command implementation."""

import click

from ..errors import GitError
from ..pipeline import ChangelogPipe, Context, Failed, Skipped


@click.command()
@click.option('--tag', '-t', help='Release tag (defaults to the latest tag reachable from HEAD)')
@click.option('--exclude', '-e', multiple=True, help='Regex; drop commits whose subject matches (repeatable)')
@click.option('--release-notes', 'release_notes_file', type=click.Path(exists=True, dir_okay=False),
              help='Use this file as the release notes instead of generating them')
@click.option('--snapshot', is_flag=True, help='Snapshot build; the changelog is not generated')
@click.option('--repo', help='Path to the git repository (overrides config)')
@click.option('--output', '-o', help='Write the changelog to a file instead of stdout')
@click.pass_context
def changelog(ctx, tag, exclude, release_notes_file, snapshot, repo, output):
    """Generate the changelog since the previous tag."""

    # Import here to avoid circular dependency
    from .main import create_client

    client, config = create_client(ctx, repo)
    logger = ctx.obj['logger']

    if not tag:
        try:
            tag = client.current_tag()
        except GitError as e:
            click.echo(f"Error: could not determine the current tag: {e}", err=True)
            ctx.exit(1)
        logger.info(f"Using current tag: {tag}")

    release_notes = ""
    if release_notes_file:
        with open(release_notes_file, 'r', encoding='utf-8') as f:
            release_notes = f.read()

    pipeline_ctx = Context(
        current_tag=tag,
        release_notes=release_notes,
        snapshot=snapshot,
        exclude=list(config.changelog.filters.exclude) + list(exclude),
    )

    outcome = ChangelogPipe(client, logger).run(pipeline_ctx)

    if isinstance(outcome, Failed):
        click.echo(f"Error generating changelog: {outcome.error}", err=True)
        ctx.exit(1)
    if isinstance(outcome, Skipped):
        click.echo(f"Changelog skipped: {outcome.reason}")
        return

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(pipeline_ctx.release_notes)
        click.echo(f"Changelog saved to: {output}")
    else:
        click.echo(pipeline_ctx.release_notes)
