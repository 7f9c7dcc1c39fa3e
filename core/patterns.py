"""
core/patterns.py

Встроенные формы досок (в порядке меню выбора).
"""

from typing import Dict, List

from .layout import Layout, build_centered_layout, build_rectangular_layout
from utils.error_handling import InvalidLayoutError

PATTERNS: Dict[str, Layout] = {
    "Plus 33": build_centered_layout([3, 3, 7, 7, 7, 3, 3]),
    "Diamond 37": build_centered_layout([3, 5, 7, 7, 7, 5, 3]),
    "Square 49": build_rectangular_layout(7, 7),
    "Square 25": build_rectangular_layout(5, 5),
}

DEFAULT_PATTERN = "Plus 33"


def pattern_names() -> List[str]:
    return list(PATTERNS)


def get_pattern(name: str) -> Layout:
    """Раскладка по имени; имя сравнивается без учёта регистра."""
    if name in PATTERNS:
        return PATTERNS[name]
    for key, layout in PATTERNS.items():
        if key.lower() == name.strip().lower():
            return layout
    raise InvalidLayoutError(f"Неизвестная доска {name!r}. Доступны: {', '.join(PATTERNS)}")
