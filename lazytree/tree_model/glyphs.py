"""Box-drawing segments used to lay out tree rows.

Every segment occupies four display columns.
"""

from __future__ import annotations

ELBOW = "└── "
TEE = "├── "
BAR = "│   "
BLANK = "    "

__all__ = ["ELBOW", "TEE", "BAR", "BLANK"]
