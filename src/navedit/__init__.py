"""navedit: reorder, rename and hide entries of a two-level navigation menu."""

from navedit.edits import set_title, set_visibility, toggle_visibility
from navedit.exceptions import (
    ContractViolationError,
    CrossGroupMoveError,
    GatewayError,
    InvalidGroupKeyError,
    MoveIndexError,
    NaveditError,
    ServerError,
    TreeShapeError,
    UnavailableError,
)
from navedit.gateway import AnalyticsSink, NavigationApiClient, PersistenceGateway
from navedit.reorder import MoveResult, move
from navedit.reporter import ChangeReporter
from navedit.schemas import TOP_LEVEL, GroupKey, MoveRecord, NavNode, NavTree
from navedit.session import EditMode, NavigationSession
from navedit.tree import (
    dump_tree,
    find_node,
    load_tree,
    replace_sibling_group,
    update_node,
)

__all__ = [
    "AnalyticsSink",
    "ChangeReporter",
    "ContractViolationError",
    "CrossGroupMoveError",
    "EditMode",
    "GatewayError",
    "GroupKey",
    "InvalidGroupKeyError",
    "MoveIndexError",
    "MoveRecord",
    "MoveResult",
    "NavNode",
    "NavTree",
    "NavigationApiClient",
    "NavigationSession",
    "NaveditError",
    "PersistenceGateway",
    "ServerError",
    "TOP_LEVEL",
    "TreeShapeError",
    "UnavailableError",
    "dump_tree",
    "find_node",
    "load_tree",
    "move",
    "replace_sibling_group",
    "set_title",
    "set_visibility",
    "toggle_visibility",
    "update_node",
]
