"""
Shrapnel Module - Projectiles emitted by a blast.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class Direction(Enum):
    """Axis-aligned travel direction as an (dx, dy) step."""
    DOWN = (0, 1)
    RIGHT = (1, 0)
    UP = (0, -1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


# Order in which a blast emits its four projectiles.
# Only affects the order strikes are applied within a tick.
SPAWN_ORDER: Tuple[Direction, ...] = (
    Direction.DOWN,
    Direction.RIGHT,
    Direction.UP,
    Direction.LEFT,
)


@dataclass
class Shrapnel:
    """
    A single projectile travelling through the grid during one blast.

    Attributes:
        x: Current column
        y: Current row
        direction: Direction of travel
        time_step: Simulation tick at which it reached its current cell
    """
    x: int
    y: int
    direction: Direction
    time_step: int = 0

    def advance(self) -> None:
        """Move one cell along the travel direction."""
        self.x += self.direction.dx
        self.y += self.direction.dy
        self.time_step += 1


def spawn(x: int, y: int, time_step: int) -> List[Shrapnel]:
    """Create the four projectiles of a blast at (x, y)."""
    return [Shrapnel(x=x, y=y, direction=d, time_step=time_step) for d in SPAWN_ORDER]
