#!/usr/bin/env python3

import click

from gffonts_index.api import create
from gffonts_index.config import configure_logging, load_config
from gffonts_index.commands.families import check_cmd, exemplar_cmd, families_cmd
from gffonts_index.commands.tags import tag_metadata_cmd, tags_cmd


@click.group()
@click.version_option(package_name='gffonts_index')
@click.option('--repo', type=click.Path(file_okay=False), help='Fonts repository root (default from config)')
@click.option('--filter', 'family_filter', help='Regex applied to METADATA.pb paths')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), help='Config file to use')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, repo, family_filter, config_path, debug):
    """gffonts_index - Read-only access to Google Fonts repository metadata.

    Discovers METADATA.pb files, picks exemplar fonts, guesses primary
    languages and reads quality tags.
    """
    config = load_config(config_path)
    configure_logging(config, debug=debug)
    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['gf'] = create(repo_dir=repo, family_filter=family_filter, config=config)


cli.add_command(check_cmd)
cli.add_command(families_cmd)
cli.add_command(exemplar_cmd)
cli.add_command(tags_cmd)
cli.add_command(tag_metadata_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
