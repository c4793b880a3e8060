import os

import numpy as np
import pytest

# QImage works without a display, but keep Qt from looking for one
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
