# topmark:header:start
#
#   project      : SetterScan
#   file         : __init__.py
#   file_relpath : tests/resources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
