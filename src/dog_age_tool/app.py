"""App Kivy: campo de fecha, botón de cálculo y resultado persistido en SQLite."""

from __future__ import annotations

import re

from dog_age_tool.config import AppSettings, load_settings
from dog_age_tool.controller import AgeController
from dog_age_tool.storage import PetAgeStore, SQLiteStore

_STRONG_OPEN_RE = re.compile(r"<strong>", re.IGNORECASE)
_STRONG_CLOSE_RE = re.compile(r"</strong>", re.IGNORECASE)
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)


def html_to_kivy_markup(html: str) -> str:
    """Translate the result message to Kivy label markup."""
    text = html.replace("&", "&amp;").replace("[", "&bl;").replace("]", "&br;")
    text = _STRONG_OPEN_RE.sub("[b]", text)
    text = _STRONG_CLOSE_RE.sub("[/b]", text)
    return _BR_RE.sub("\n", text)


def run_app(settings: AppSettings | None = None) -> int:
    """Lanza la app Kivy."""
    from kivy.app import App
    from kivy.uix.boxlayout import BoxLayout
    from kivy.uix.button import Button
    from kivy.uix.label import Label
    from kivy.uix.textinput import TextInput

    app_settings = settings or load_settings()

    class _TextInputDate:
        """Adapts a TextInput to the controller's date field."""

        def __init__(self, widget: TextInput) -> None:
            self._widget = widget

        def get_value(self) -> str | None:
            return self._widget.text.strip() or None

        def set_value(self, value: str) -> None:
            self._widget.text = value

    class DogAgeApp(App):
        """Main Kivy app."""

        def __init__(self, **kwargs: object) -> None:
            super().__init__(**kwargs)
            self.store = PetAgeStore(SQLiteStore(app_settings.db_path))
            self.result: Label | None = None
            self.controller: AgeController | None = None

        def build(self) -> BoxLayout:
            self.title = "狗狗年齡計算"
            root = BoxLayout(orientation="vertical", spacing=8, padding=10)

            row = BoxLayout(orientation="horizontal", size_hint_y=None, height=40)
            row.add_widget(Label(text="生日 (YYYY-MM-DD)", size_hint_x=0.35))
            birthday = TextInput(multiline=False, hint_text="2020-01-01")
            row.add_widget(birthday)
            calc_btn = Button(text="開始計算", size_hint_x=0.25)
            row.add_widget(calc_btn)
            root.add_widget(row)

            self.result = Label(text="", markup=True, halign="center")
            root.add_widget(self.result)

            controller = AgeController(
                _TextInputDate(birthday),
                self._render,
                self.store,
                subject=app_settings.subject,
                tzinfo=app_settings.timezone,
            )
            calc_btn.bind(on_press=lambda *_args: controller.on_calculate())
            self.controller = controller
            return root

        def on_start(self) -> None:
            if self.controller is not None:
                self.controller.on_ready()

        def _render(self, html: str) -> None:
            if self.result is not None:
                self.result.text = html_to_kivy_markup(html)

    DogAgeApp().run()
    return 0
