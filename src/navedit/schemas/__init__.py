"""Shared schemas for navedit."""

from navedit.schemas.group import TOP_LEVEL, GroupKey
from navedit.schemas.nav import MoveRecord, NavNode, NavTree

__all__ = ["GroupKey", "MoveRecord", "NavNode", "NavTree", "TOP_LEVEL"]
