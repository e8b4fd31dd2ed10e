"""Default puzzle configuration constants."""

# Bridge
DEFAULT_BRIDGE_CAPACITY = 2  # Actors that may cross together
MIN_BRIDGE_CAPACITY = 2  # Below this, more than one actor can never all cross

# Torch
DEFAULT_TORCH_SIDE = "start"

# Default preset, activated when nothing else is requested
DEFAULT_PRESET_NAME = "Default"
DEFAULT_ACTORS = (
    ("Louise", 1),
    ("Mark", 2),
    ("Anne", 5),
    ("John", 8),
)
