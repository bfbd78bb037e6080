# renderer/settings.py
from dataclasses import dataclass, replace
from typing import Optional

# samples: samples per pixel, bounces: recursion depth, scale: fraction of
# the requested resolution actually traced
QUALITY_LEVELS = {
    "interactive": {"samples": 1, "bounces": 2, "scale": 0.5},
    "balanced": {"samples": 4, "bounces": 4, "scale": 0.67},
    "high_quality": {"samples": 8, "bounces": 6, "scale": 1.0},
}

DEFAULT_QUALITY = "balanced"

# Bounce budgets past this only grow the Python stack.
MAX_BOUNCES = 64

@dataclass(frozen=True)
class RenderSettings:
    width: int = 400
    height: int = 225
    samples: int = 4
    bounces: int = 4
    scale: float = 1.0
    seed: Optional[int] = None

    @classmethod
    def from_quality(cls, quality: str, width: int = 400, height: int = 225,
                     seed: Optional[int] = None) -> "RenderSettings":
        try:
            level = QUALITY_LEVELS[quality]
        except KeyError:
            raise ValueError(
                f"Unknown quality {quality!r}, expected one of {sorted(QUALITY_LEVELS)}"
            ) from None
        return cls(width=width, height=height, seed=seed, **level).validate()

    def with_overrides(self, **overrides) -> "RenderSettings":
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()

    @property
    def render_width(self) -> int:
        return max(1, int(self.width * self.scale))

    @property
    def render_height(self) -> int:
        return max(1, int(self.height * self.scale))

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def validate(self) -> "RenderSettings":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples <= 0:
            raise ValueError(f"samples must be positive, got {self.samples}")
        if not 0 <= self.bounces <= MAX_BOUNCES:
            raise ValueError(f"bounces must be in [0, {MAX_BOUNCES}], got {self.bounces}")
        if not 0 < self.scale <= 1.0:
            raise ValueError(f"scale must be in (0, 1], got {self.scale}")
        return self
