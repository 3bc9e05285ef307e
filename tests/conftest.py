import os
import sys

import pytest

# Add the project root and this directory to sys.path
tests_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(tests_dir)
for path in (project_root, tests_dir):
    if path not in sys.path:
        sys.path.insert(0, path)

from chromatone.colors import Color
from chromatone.gradients import color_scale, color_stop


@pytest.fixture
def red():
    return Color.rgb(255, 0, 0)


@pytest.fixture
def blue():
    return Color.rgb(0, 0, 255)


@pytest.fixture
def yellow():
    return Color.rgb(255, 255, 0)


@pytest.fixture
def hsl_scale(red, blue, yellow):
    """Red to yellow in HSL, passing through blue at 0.3."""
    return color_scale("hsl", red, [color_stop(blue, 0.3)], yellow)
