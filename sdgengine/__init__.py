"""Entity-component core for 2D games: components, transforms, bodies, collisions, events and object pools."""

__version__ = "0.1.0"

__all__ = [
    "body",
    "collision",
    "component",
    "component_list",
    "events",
    "gameinfo",
    "pool",
    "transform",
]