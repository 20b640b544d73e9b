"""
Arena geometry.

The playfield has a fixed inner size and is centered in the terminal,
so its screen offsets move whenever the window is resized.
"""

from dataclasses import dataclass

from termpong.errors import MinimumSizeError

# Playfield dimensions in cells
INNER_WIDTH = 110
INNER_HEIGHT = 40

# Smallest terminal the arena is drawn in
MIN_WIDTH = 150
MIN_HEIGHT = 60


@dataclass(frozen=True)
class Arena:
    """
    Border coordinates of the playfield.

    Attributes:
        top: Row of the top border
        bottom: Row of the bottom border
        left: Column of the left border
        right: Column of the right border
        mid_x: Center column (serve point)
        mid_y: Center row (serve point)
    """
    top: int
    bottom: int
    left: int
    right: int
    mid_x: int
    mid_y: int

    @classmethod
    def from_size(cls, width: int, height: int) -> "Arena":
        """Center the playfield in a terminal of the given size."""
        mid_x = width // 2
        mid_y = height // 2
        return cls(
            top=mid_y - INNER_HEIGHT // 2,
            bottom=mid_y + INNER_HEIGHT // 2,
            left=mid_x - INNER_WIDTH // 2,
            right=mid_x + INNER_WIDTH // 2,
            mid_x=mid_x,
            mid_y=mid_y,
        )

    @staticmethod
    def check_size(
        width: int,
        height: int,
        min_width: int = MIN_WIDTH,
        min_height: int = MIN_HEIGHT,
    ) -> None:
        """
        Verify the terminal is large enough to draw the arena.

        Raises:
            MinimumSizeError: if either dimension is below the minimum
        """
        if width < min_width or height < min_height:
            raise MinimumSizeError(width, height, min_width, min_height)

    def contains(self, x: int, y: int) -> bool:
        """Check if a cell lies strictly inside the border."""
        return self.left < x < self.right and self.top < y < self.bottom

    def offset_to(self, other: "Arena") -> tuple[int, int]:
        """Translation that maps positions in this arena onto another."""
        return other.left - self.left, other.top - self.top
