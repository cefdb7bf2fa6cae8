"""Show version information."""

import argparse
from importlib import metadata as importlib_metadata

import fast_base

from .command_base import CommandBase


class VersionCommand(CommandBase):
    """Command to show version information."""

    @property
    def name(self) -> str:
        return "version"

    @property
    def help(self) -> str:
        return "Show version information"

    def _get_version(self) -> str:
        """Resolve version from package metadata, fallback to the package attribute."""
        try:
            return importlib_metadata.version("fast-base")
        except importlib_metadata.PackageNotFoundError:
            return fast_base.__version__

    def execute(self, args: argparse.Namespace) -> None:
        version = self._get_version()
        print(f"FastBase v{version}")
