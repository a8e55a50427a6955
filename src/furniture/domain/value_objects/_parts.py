"""Part classification value objects."""

from __future__ import annotations

from enum import Enum


class PartCategory(str, Enum):
    """Bill-of-parts category shown to users."""

    SURFACE = "surface"
    SUPPORT = "support"
    STORAGE = "storage"


class AnchorPattern(str, Enum):
    """Named layout rule used to explode a part into placed instances.

    - CORNERS: four horizontal corners, inset from the outer faces
    - DISTRIBUTE_X/Y/Z: evenly spaced along one axis, never flush at a bound
    - SIDES: one instance flush against each outer X face
    - MID_SPAN: perimeter legs halfway along the long edges
    - APRON: rails under the top, flush with the inside faces of the legs
    - VERTICAL_PARTITION: dividers resolved from the shelf gaps
    """

    CORNERS = "corners"
    DISTRIBUTE_X = "distribute-x"
    DISTRIBUTE_Y = "distribute-y"
    DISTRIBUTE_Z = "distribute-z"
    SIDES = "sides"
    MID_SPAN = "mid-span"
    APRON = "apron"
    VERTICAL_PARTITION = "vertical-partition"


class PartRole(str, Enum):
    """Physical role of a part within its piece of furniture."""

    # Tables and desks
    TABLE_TOP = "table_top"
    DESK_TOP = "desk_top"
    LEG = "leg"
    SIDE_LEG = "side_leg"
    APRON_LONG = "apron_long"
    APRON_SHORT = "apron_short"
    DRAWER = "drawer"

    # Chairs
    SEAT = "seat"
    BACKREST = "backrest"
    ARMREST_TOP = "armrest_top"
    ARMREST_SUPPORT = "armrest_support"

    # Bookshelves
    SIDE_PANEL = "side_panel"
    SHELF = "shelf"
    BACK_PANEL = "back_panel"
    TOP_PANEL = "top_panel"
    BOTTOM_PANEL = "bottom_panel"
    PARTITION = "partition"

    # Bed frames
    HEADBOARD = "headboard"
    FOOTBOARD = "footboard"
    SIDE_RAIL = "side_rail"
    SLAT = "slat"
    CENTER_BEAM = "center_beam"

    @property
    def is_leg(self) -> bool:
        """True for floor-standing legs of any kind."""
        return self in (PartRole.LEG, PartRole.SIDE_LEG)

    @property
    def is_horizontal_surface(self) -> bool:
        """True for the horizontal boards that bound shelf gaps."""
        return self in (PartRole.SHELF, PartRole.TOP_PANEL, PartRole.BOTTOM_PANEL)

    @property
    def is_work_surface(self) -> bool:
        """True for the load-bearing top of a table or desk."""
        return self in (PartRole.TABLE_TOP, PartRole.DESK_TOP)
