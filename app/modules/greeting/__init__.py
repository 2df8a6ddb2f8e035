"""Greeting feature.

Builds the localized greeting shown when the user presses the hello button.
"""

from modules.greeting.service import GreetService

__all__ = ["GreetService"]
