# topmark:header:start
#
#   project      : SetterScan
#   file         : __main__.py
#   file_relpath : src/setterscan/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SetterScan via ``python -m setterscan``.

Delegates to :func:`setterscan.cli.main.cli`, the same entry point as the
``setterscan`` console script.

Examples:
    List the setters of the package in the current directory::

        python -m setterscan list .
"""

from __future__ import annotations

from setterscan.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
