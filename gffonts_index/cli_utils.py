"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
from functools import wraps

import click

from .errors import MetadataError
from .exit_codes import CommandError, get_exit_code_for_exception
from .output import emit_error


def standard_command(func):
    """
    Decorator that provides consistent error handling:
    - CommandError exits with its own exit code
    - MetadataError exits with the mapped exit code
    Errors are reported as JSON on stderr.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except CommandError as e:
            context = None
            if hasattr(e, 'succeeded'):
                context = {'succeeded': e.succeeded, 'failed': e.failed}
            emit_error(str(e), type=type(e).__name__, context=context)
            sys.exit(e.exit_code)
        except MetadataError as e:
            emit_error(str(e), type=type(e).__name__)
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


def get_index(ctx: click.Context):
    """Return the GoogleFonts instance created by the top-level group."""
    return ctx.find_root().obj['gf']
