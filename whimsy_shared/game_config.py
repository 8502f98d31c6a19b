# whimsy_shared/game_config.py
from dataclasses import dataclass

@dataclass(frozen=True)
class FieldConfig:
    min_discs: int = 12
    max_discs: int = 24

    min_radius: int = 10
    max_radius: int = 30

    max_speed: int = 150         # px/s, per axis
    zero_speed_default: int = 50  # replaces a drawn 0 component

    fps_window: float = 1.0      # seconds before the overlay shows
    fps_base_font: int = 20
    fps_margin: float = 0.01     # fraction of the surface width
    fps_font_name: str = "Arial"

CFG = FieldConfig()
