"""Building blocks for a small 2D game engine: hashing, data containers, timing, input binding, sound services, scenes, resources and rendering."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "data",
    "game_time",
    "binding",
    "sound",
    "sound_logger",
    "parallel_sound",
    "services",
    "scene_pool",
    "resource_manager",
    "game_instance",
    "renderer",
]