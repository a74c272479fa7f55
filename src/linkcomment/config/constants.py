"""Configuration constants.

Values that are part of the host contract and must NOT be user-configurable.
For configurable values, see models.py.
"""

# =============================================================================
# Host Commands
# =============================================================================

JUMP_COMMAND_ID = "linkcomment.jump"
"""Command the host runs when a clickable link is activated."""

TOOLTIP_PREFIX = "Click to go to"
"""Leading text of every clickable-link tooltip."""

# =============================================================================
# Decorations
# =============================================================================

DECORATION_HIDE = "hide"
"""Handle that masks raw link markup."""

DECORATION_REPLACE = "replace"
"""Handle that draws the description in place of the markup."""

DEFAULT_LINK_COLOR = "#3794ff"
"""Default color of collapsed description text."""
