import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from controller import DrawingApp
from model import ShapeStore
from selection import SelectionController
from shapes import Circle, Rectangle
from viewport import ViewportTransform


@pytest.fixture
def store():
    return ShapeStore()


@pytest.fixture
def viewport():
    return ViewportTransform()


@pytest.fixture
def selection(store):
    return SelectionController(store)


@pytest.fixture
def app():
    """A headless DrawingApp with a fresh store and an identity viewport."""
    return DrawingApp()


@pytest.fixture
def circle():
    return Circle(200, 200, 40)


@pytest.fixture
def rect():
    # bbox (200, 250) - (400, 350)
    return Rectangle(300, 300, 200, 100)
