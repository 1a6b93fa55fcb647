from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'rooms_attempted': 0,
        'rooms_accepted': 0,
        'rooms_rejected': 0,
        'monsters_rolled': 0,
        'monsters_placed': 0,
        'items_rolled': 0,
        'items_placed': 0,
        'placement_misses': 0,
        'tiles_empty': 0,
        'runtime_ms': 0.0,
    }
