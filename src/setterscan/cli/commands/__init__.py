# topmark:header:start
#
#   project      : SetterScan
#   file         : __init__.py
#   file_relpath : src/setterscan/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the SetterScan CLI."""
