"""Main view feature.

Server-rendered form with a language selector, a name field and a greeting
button whose labels follow the active locale.
"""

from modules.main_view.ui import UI, LocaleChangeEvent
from modules.main_view.view import MainView

__all__ = ["UI", "LocaleChangeEvent", "MainView"]
