"""Card catalog and study-session state for the kanji flashcard app.

Nothing in here imports kivy, so the session can be driven and tested
without a window.
"""
import math
from collections import namedtuple
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

SWIPE_THRESHOLD = 50
TAP_SLOP = 10


# Data models


class DeckType(Enum):
    KANJI = "ideograph"
    ALPHABET = "alphabet"


class LanguageCode(Enum):
    KR = "KR"
    JP = "JP"

    @property
    def key(self):
        """Lowercase key used in a card's translations mapping."""
        return self.value.lower()

    def other(self):
        return LanguageCode.JP if self is LanguageCode.KR else LanguageCode.KR


DEFAULT_LANGUAGE = LanguageCode.KR


@dataclass(frozen=True)
class Translation:
    meaning: str = ""
    reading: str = ""


Translation.EMPTY = Translation()


@dataclass(frozen=True)
class CardRecord:
    glyph: str
    id: str
    kind: DeckType = DeckType.KANJI
    translations: Mapping = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Read-only copy, so the catalog cannot be edited through a card
        object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))


class EmptyCatalogError(ValueError):
    pass


class Catalog:
    def __init__(self, records):
        self._records = tuple(records)
        if not self._records:
            raise EmptyCatalogError("A catalog needs at least one card")

    def get(self, index):
        if not 0 <= index < len(self._records):
            raise IndexError(f"Card index {index} out of range 0..{len(self._records) - 1}")
        return self._records[index]

    def size(self):
        return len(self._records)

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)


def translation_for(record, language):
    """Return the meaning/reading pair for ``language``, blank if the card has none."""
    if isinstance(language, LanguageCode):
        key = language.key
    else:
        key = str(language).lower()
    return record.translations.get(key, Translation.EMPTY)


HANJA_CARDS = Catalog(
    [
        CardRecord(
            glyph="一",
            id="0001",
            kind=DeckType.KANJI,
            translations={
                "kr": Translation(meaning="하나", reading="일"),
                "jp": Translation(meaning="ひと", reading="いち"),
            },
        ),
        CardRecord(
            glyph="二",
            id="0002",
            kind=DeckType.KANJI,
            translations={
                "kr": Translation(meaning="둘", reading="이"),
                "jp": Translation(meaning="ふた", reading="に"),
            },
        ),
        CardRecord(
            glyph="三",
            id="0003",
            kind=DeckType.KANJI,
            translations={
                "kr": Translation(meaning="셋", reading="삼"),
                "jp": Translation(meaning="み", reading="さん"),
            },
        ),
        CardRecord(
            glyph="四",
            id="0004",
            kind=DeckType.KANJI,
            translations={
                "kr": Translation(meaning="넷", reading="사"),
                "jp": Translation(meaning="よ", reading="し"),
            },
        ),
    ]
)


# Gestures


class Swipe(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    VERTICAL = "vertical"


def is_tap(dx, dy):
    """A completed touch that never left the slop circle counts as a tap."""
    return math.hypot(dx, dy) <= TAP_SLOP


def classify_swipe(dx, dy):
    # Equal magnitudes go to the vertical branch.
    if abs(dx) > abs(dy):
        if dx < -SWIPE_THRESHOLD:
            return Swipe.LEFT
        if dx > SWIPE_THRESHOLD:
            return Swipe.RIGHT
        return Swipe.NONE
    return Swipe.VERTICAL


# Input events

# Kivy key codes
KEY_ACTIONS = {
    32: "tap",  # space
    275: "next_card",  # right arrow, same as swiping left
    276: "previous_card",  # left arrow, same as swiping right
    273: "toggle_language",  # up arrow
    274: "toggle_language",  # down arrow
}


def is_card_touch(touch):
    """Only plain presses drive the card; wheel ticks and right/middle clicks do not."""
    if getattr(touch, "is_mouse_scrolling", False):
        return False
    if "button" in touch.profile and touch.button != "left":
        return False
    return True


def touch_displacement(touch, unit=1.0):
    """Distance a touch travelled from where it went down, in ``unit`` sized steps."""
    return (touch.x - touch.ox) / unit, (touch.y - touch.oy) / unit


# Session state

SessionState = namedtuple("SessionState", ["current_index", "is_flipped", "language"])

CardView = namedtuple("CardView", ["id_label", "language_label", "face", "glyph", "meaning", "reading"])


class StudySession:
    """Index, flip flag and active language for one run of the app.

    Every transition returns True when it changed something and False when
    it was a no-op.
    """

    def __init__(self, catalog, language=DEFAULT_LANGUAGE):
        self.catalog = catalog
        self.current_index = 0
        self.is_flipped = False
        self.language = language

    @property
    def current_card(self):
        return self.catalog.get(self.current_index)

    def state(self):
        return SessionState(self.current_index, self.is_flipped, self.language)

    def tap(self):
        self.is_flipped = not self.is_flipped
        return True

    def next_card(self):
        if self.current_index < self.catalog.size() - 1:
            self.current_index += 1
            self.is_flipped = False
            return True
        return False

    def previous_card(self):
        if self.current_index > 0:
            self.current_index -= 1
            self.is_flipped = False
            return True
        return False

    def toggle_language(self):
        # The front face has no language-dependent text.
        if not self.is_flipped:
            return False
        self.language = self.language.other()
        return True

    def swipe(self, dx, dy):
        direction = classify_swipe(dx, dy)
        if direction is Swipe.LEFT:
            return self.next_card()
        if direction is Swipe.RIGHT:
            return self.previous_card()
        if direction is Swipe.VERTICAL:
            return self.toggle_language()
        return False

    def touch(self, dx, dy):
        if is_tap(dx, dy):
            return self.tap()
        return self.swipe(dx, dy)

    def press(self, key):
        """Apply a keyboard shortcut; None when the key is not bound."""
        action = KEY_ACTIONS.get(key)
        if action is None:
            return None
        return getattr(self, action)()


    def view(self):
        return render(self)


def render(session):
    card = session.current_card
    language_label = session.language.value
    if session.is_flipped:
        translation = translation_for(card, session.language)
        return CardView(card.id, language_label, "back", "", translation.meaning, translation.reading)
    return CardView(card.id, language_label, "front", card.glyph, "", "")
