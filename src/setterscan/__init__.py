# topmark:header:start
#
#   project      : SetterScan
#   file         : __init__.py
#   file_relpath : src/setterscan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SetterScan package.

SetterScan discovers kpt *setters*: named parameters recorded as
``# kpt-set:`` comment markers on the fields of KRM configuration packages.
It recovers each setter's name, current value and the number of fields it
controls, merging them with setters declared in the package Kptfile. Both a
CLI and a small typed API are provided.
"""

from __future__ import annotations
