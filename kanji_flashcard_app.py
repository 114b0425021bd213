from kivy.config import Config

# Right clicks on desktop would otherwise leave multitouch markers on the card
Config.set("input", "mouse", "mouse,multitouch_on_demand")

from kivy.app import App  # noqa: E402
from kivy.uix.screenmanager import ScreenManager, Screen  # noqa: E402
from kivy.core.text import LabelBase  # noqa: E402
from kivy.core.window import Window  # noqa: E402
from kivy.logger import Logger  # noqa: E402
from kivy.metrics import dp  # noqa: E402
from kivy.properties import ObjectProperty, StringProperty  # noqa: E402
from kivy.utils import platform  # noqa: E402
import os  # noqa: E402

from kanji_cards import HANJA_CARDS, StudySession, is_card_touch, touch_displacement  # noqa: E402

# Kanji, hangul and kana all have to come from the same font
CARD_FONT_CANDIDATES = [
    "fonts/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/noto-cjk/NotoSansCJK-Regular.ttc",
    "/System/Library/Fonts/AppleSDGothicNeo.ttc",
    "C:/Windows/Fonts/malgun.ttf",
]


def register_card_font():
    for path in CARD_FONT_CANDIDATES:
        if os.path.exists(path):
            LabelBase.register(name="CardFont", fn_regular=path)
            Logger.info(f"KanjiCards: Using font {path}")
            return "CardFont"
    Logger.warning("KanjiCards: No CJK font found, glyphs may not render")
    return "Roboto"


# UI Screens
class CardScreen(Screen):
    id_label = ObjectProperty(None)
    language_label = ObjectProperty(None)
    glyph_label = ObjectProperty(None)
    meaning_label = ObjectProperty(None)
    reading_label = ObjectProperty(None)
    card_font = StringProperty("Roboto")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        app = App.get_running_app()
        self.session = app.session
        self.card_font = app.card_font
        self.update_display()

    def on_enter(self):
        self.update_display()

    def update_display(self):
        view = self.session.view()
        self.id_label.text = view.id_label
        self.language_label.text = view.language_label
        self.glyph_label.text = view.glyph
        self.meaning_label.text = view.meaning
        self.reading_label.text = view.reading

    def on_touch_down(self, touch):
        if self.collide_point(*touch.pos) and is_card_touch(touch):
            touch.grab(self)
            return True
        return super().on_touch_down(touch)

    def on_touch_up(self, touch):
        if touch.grab_current is self:
            touch.ungrab(self)
            # Swipe thresholds are in density independent units
            dx, dy = touch_displacement(touch, dp(1))
            if self.session.touch(dx, dy):
                self.update_display()
            return True
        return super().on_touch_up(touch)


# App Layout
class KanjiFlashcardApp(App):
    def build(self):
        self.title = "Kanji Flashcards"

        self.session = StudySession(HANJA_CARDS)
        self.card_font = register_card_font()
        Logger.info(f"KanjiCards: Loaded {HANJA_CARDS.size()} cards, language {self.session.language.value}")

        sm = ScreenManager()
        sm.add_widget(CardScreen(name="card"))

        # Only bind keyboard on desktop
        if platform != "android":
            Window.bind(on_key_down=self.on_key_down)

        return sm

    def on_key_down(self, window, key, *args):
        card_screen = self.root.get_screen("card")
        changed = self.session.press(key)
        if changed is None:
            Logger.debug(f"KanjiCards: Ignoring key {key}")
            return False
        if changed:
            card_screen.update_display()
        return True

    def on_pause(self):
        # Keeps Android from killing the app while it is in the background
        return True


kv_content = """
<CardScreen>:
    id_label: id_label
    language_label: language_label
    glyph_label: glyph_label
    meaning_label: meaning_label
    reading_label: reading_label
    FloatLayout:
        Label:
            id: id_label
            text: '0000'
            font_size: '14sp'
            color: 0.5, 0.5, 0.5, 1
            size_hint: None, None
            size: self.texture_size
            pos_hint: {'x': 0.03, 'top': 0.97}

        Label:
            id: language_label
            text: 'KR'
            font_size: '14sp'
            color: 0.5, 0.5, 0.5, 1
            size_hint: None, None
            size: self.texture_size
            pos_hint: {'right': 0.97, 'top': 0.97}

        Label:
            id: glyph_label
            font_name: root.card_font
            font_size: '200sp'
            bold: True
            pos_hint: {'center_x': 0.5, 'center_y': 0.5}

        BoxLayout:
            orientation: 'vertical'
            spacing: '40dp'
            size_hint: 1, None
            height: self.minimum_height
            pos_hint: {'center_x': 0.5, 'center_y': 0.5}

            Label:
                id: meaning_label
                font_name: root.card_font
                font_size: '60sp'
                size_hint_y: None
                height: self.texture_size[1]

            Label:
                id: reading_label
                font_name: root.card_font
                font_size: '40sp'
                color: 0.5, 0.5, 0.5, 1
                size_hint_y: None
                height: self.texture_size[1]
"""


def main():
    from kivy.lang import Builder

    Builder.load_string(kv_content)
    KanjiFlashcardApp().run()


# Run the app
if __name__ == "__main__":
    main()
