"""
Text map of the room grid.

Rooms sit at their (x, y) coordinates with north at the top. Links
between grid neighbours are drawn as '-' and '|'.
"""

from __future__ import annotations

from uuid import UUID

from roomquest.models import Direction, Room


def render_map(rooms: list[Room], current_room_id: UUID | None = None) -> str:
    """
    Draw the rooms as a grid.

    Args:
        rooms: Every room to draw
        current_room_id: Room marked with '@'

    Returns:
        Multi-line map, or a short notice when there are no rooms
    """
    if not rooms:
        return "(no rooms)"

    by_position: dict[tuple[int, int], Room] = {}
    for room in rooms:
        # First room wins a shared tile
        by_position.setdefault((room.x, room.y), room)

    xs = [x for x, _ in by_position]
    ys = [y for _, y in by_position]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    lines: list[str] = []
    for y in range(max_y, min_y - 1, -1):
        row = []
        below = []
        for x in range(min_x, max_x + 1):
            room = by_position.get((x, y))
            if room is None:
                row.append("   ")
            elif room.id == current_room_id:
                row.append("[@]")
            else:
                row.append("[ ]")

            east = by_position.get((x + 1, y))
            linked_east = (
                room is not None and east is not None and room.neighbor_id(Direction.EAST) == east.id
            )
            if x < max_x:
                row.append("-" if linked_east else " ")

            south = by_position.get((x, y - 1))
            linked_south = (
                room is not None
                and south is not None
                and room.neighbor_id(Direction.SOUTH) == south.id
            )
            below.append(" | " if linked_south else "   ")
            if x < max_x:
                below.append(" ")

        lines.append("".join(row).rstrip())
        if y > min_y:
            lines.append("".join(below).rstrip())

    return "\n".join(lines)
