"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands. Keep this file minimal to avoid circular
imports and duplication.
"""
from lfm.cli.helpers import cli  # root group
from lfm.cli import match_cmds  # noqa: F401
from lfm.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
