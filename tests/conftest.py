"""
tests/conftest.py

Общие фикстуры: маленькие доски, на которых ходы легко проверить руками.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.layout import build_centered_layout, build_rectangular_layout
from core.patterns import get_pattern


@pytest.fixture
def row3():
    """Одна строка из трёх лунок: 1 2 3."""
    return build_centered_layout([3])


@pytest.fixture
def square3():
    """
    Квадрат 3×3:

    1 2 3
    4 5 6
    7 8 9
    """
    return build_rectangular_layout(3, 3)


@pytest.fixture
def square5():
    """Квадрат 5×5, номер = r * 5 + c + 1."""
    return build_rectangular_layout(5, 5)


@pytest.fixture
def plus33():
    """Английская доска "Plus 33"; центр — лунка 17."""
    return get_pattern("Plus 33")
