"""
Tag commands for gffonts_index.
"""

import click

from ..cli_utils import get_index, standard_command
from ..output import emit
from ..tags import match_tag


@click.command('tags')
@click.option('--family', 'family_name', help='Only tags for this family')
@click.option('--location', help='Only tags for this location ("" for family-wide)')
@click.option('--tag', 'tag_pattern', help='Tag name pattern (e.g., "/quant/*")')
@click.option('--pretty', is_flag=True, help='Display as formatted table')
@click.pass_context
@standard_command
def tags_cmd(ctx, family_name, location, tag_pattern, pretty):
    """List tag entries from tags/all."""
    gf = get_index(ctx)
    if family_name:
        taggings = gf.family_tags(family_name, location)
    else:
        taggings = [t for t in gf.tags() if location is None or t.location == location]
    if tag_pattern:
        taggings = [t for t in taggings if match_tag(t.tag, tag_pattern)]
    emit(taggings, pretty=pretty)


@click.command('tag-metadata')
@click.option('--pretty', is_flag=True, help='Display as formatted table')
@click.pass_context
@standard_command
def tag_metadata_cmd(ctx, pretty):
    """List tag definitions from tags/tags_metadata.csv."""
    gf = get_index(ctx)
    emit(gf.tag_metadata(), pretty=pretty)
