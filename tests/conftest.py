import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kanji_cards import HANJA_CARDS, StudySession


@pytest.fixture
def catalog():
    return HANJA_CARDS


@pytest.fixture
def session(catalog):
    return StudySession(catalog)
