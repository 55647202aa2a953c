"""
Family commands for gffonts_index.
"""

import click

from ..cli_utils import get_index, standard_command
from ..exit_codes import CommandError, NoFamiliesFoundError, PartialSuccessError, USAGE_ERROR
from ..output import emit, emit_error
from ..selection import FontStyle


@click.command('check')
@click.pass_context
@standard_command
def check_cmd(ctx):
    """Parse every METADATA.pb and report the ones that fail."""
    gf = get_index(ctx)
    entries = gf.families()
    if not entries:
        raise NoFamiliesFoundError(f"No METADATA.pb files found under {gf.repo_dir}")

    failed = [entry for entry in entries if not entry.ok]
    for entry in failed:
        emit_error(str(entry.error), type="parse_error", context={'path': str(entry.path)})

    succeeded = len(entries) - len(failed)
    click.echo(f"Read {succeeded}/{len(entries)} successfully", err=True)
    if failed:
        raise PartialSuccessError(
            f"{len(failed)} families failed to parse",
            succeeded=succeeded,
            failed=len(failed),
        )


def family_summary(gf, entry):
    """Build the output record for one parsed family."""
    font = gf.exemplar(entry.family)
    return {
        'name': entry.family.name,
        'path': str(entry.path),
        'fonts': len(entry.family.fonts),
        'exemplar': font.filename if font is not None else None,
        'language': gf.primary_language(entry.family).id,
    }


@click.command('families')
@click.option('--pretty', is_flag=True, help='Display as formatted table')
@click.pass_context
@standard_command
def families_cmd(ctx, pretty):
    """List parsed families with their exemplar font and primary language."""
    gf = get_index(ctx)
    summaries = [family_summary(gf, entry) for entry in gf.families() if entry.ok]
    if not summaries:
        raise NoFamiliesFoundError()
    emit(summaries, pretty=pretty)


@click.command('exemplar')
@click.argument('name')
@click.option('--style', type=click.Choice([s.value for s in FontStyle]), default='normal',
              help='Preferred style')
@click.option('--weight', type=int, default=400, help='Preferred weight')
@click.pass_context
@standard_command
def exemplar_cmd(ctx, name, style, weight):
    """Pick the best font of family NAME for a style and weight."""
    gf = get_index(ctx)
    family = gf.family_by_name(name)
    if family is None:
        raise NoFamiliesFoundError(f"No family named {name!r}")

    font = gf.select_font(family, FontStyle(style), weight)
    if font is None:
        raise CommandError(f"{name} has no fonts", USAGE_ERROR)

    binary = gf.find_font_binary(font)
    emit([{
        'family': family.name,
        'filename': font.filename,
        'style': font.style,
        'weight': font.weight,
        'path': str(binary) if binary is not None else None,
    }])
