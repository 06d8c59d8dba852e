"""jsonlookup is a tool to look up and modify values in JSON files using simple path expressions.

:license: MIT, see LICENSE.rst for more details.
"""

from __future__ import annotations

from jsonlookup._version import __version__

__all__ = ["__version__"]


def main() -> None:
    from jsonlookup.main import cli

    cli()


if __name__ == "__main__":
    main()
