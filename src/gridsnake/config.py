from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Grid & window -----
GRID_EXTENT = 20
CELL_SIZE = 20
HUD_HEIGHT = 28

# ----- Colors -----
BG     = (26, 26, 26)
GREEN  = (76, 175, 80)
HEAD_COLOR = (129, 230, 132)
ORANGE = (255, 87, 34)
TEXT   = (220, 220, 230)

# ----- Headings (dx, dy), y grows downward -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
NONE = (0, 0)
HEADINGS = (UP, DOWN, LEFT, RIGHT)

# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    grid_extent: int = GRID_EXTENT
    start: Tuple[int, int] = (10, 10)
    tick_ms: int = 150
    food_reward: int = 10
    start_running: bool = False   # reset() straight into RUNNING instead of READY
    seed: Optional[int] = None
    max_food_attempts: int = 1000
    cell_size: int = CELL_SIZE

    def validate(self) -> "Config":
        """Raise ValueError for settings no game can be built from."""
        if self.grid_extent < 1:
            raise ValueError(f"grid_extent must be >= 1, got {self.grid_extent}")
        sx, sy = self.start
        if not (0 <= sx < self.grid_extent and 0 <= sy < self.grid_extent):
            raise ValueError(
                f"start {self.start} lies outside a {self.grid_extent}x{self.grid_extent} grid"
            )
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.food_reward < 0:
            raise ValueError(f"food_reward must be non-negative, got {self.food_reward}")
        if self.max_food_attempts < 1:
            raise ValueError(f"max_food_attempts must be >= 1, got {self.max_food_attempts}")
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be >= 1, got {self.cell_size}")
        return self

CFG = Config()
