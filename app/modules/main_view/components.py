"""Server-side UI components.

Each component owns an element id and renders itself to an HTML fragment.
Texts are escaped on render; labels can be changed after construction and
the new value is picked up on the next render or label export.
"""

from html import escape
from typing import Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


class Component:
    """Base class for renderable components."""

    def __init__(self, element_id: str):
        self.element_id = element_id

    def render(self) -> str:
        raise NotImplementedError


class Span(Component):
    def __init__(self, element_id: str, text: str):
        super().__init__(element_id)
        self.text = text

    def render(self) -> str:
        return f'<span id="{escape(self.element_id)}">{escape(self.text)}</span>'


class Button(Component):
    """Clickable button.

    Attributes:
        text: Button caption.
        action: Name of the client action triggered on click.
        theme_variants: Extra CSS classes (e.g. "primary").
        click_shortcut: Key that triggers the button from anywhere on the page.
    """

    def __init__(
        self,
        element_id: str,
        text: str,
        action: str,
        theme_variants: Optional[Sequence[str]] = None,
        click_shortcut: Optional[str] = None,
    ):
        super().__init__(element_id)
        self.text = text
        self.action = action
        self.theme_variants = list(theme_variants or [])
        self.click_shortcut = click_shortcut

    def render(self) -> str:
        classes = " ".join(["button"] + [f"button-{v}" for v in self.theme_variants])
        shortcut = (
            f' data-shortcut="{escape(self.click_shortcut)}"'
            if self.click_shortcut
            else ""
        )
        return (
            f'<button type="button" id="{escape(self.element_id)}" class="{classes}" '
            f'data-action="{escape(self.action)}"{shortcut}>{escape(self.text)}</button>'
        )


class TextField(Component):
    def __init__(self, element_id: str, label: str, value: str = ""):
        super().__init__(element_id)
        self.label = label
        self.value = value

    def render(self) -> str:
        element_id = escape(self.element_id)
        return (
            f'<div class="field">'
            f'<label id="{element_id}-label" for="{element_id}">{escape(self.label)}</label>'
            f'<input type="text" id="{element_id}" name="{element_id}" '
            f'value="{escape(self.value)}">'
            f"</div>"
        )


class Select(Component, Generic[T]):
    """Single-choice select.

    Attributes:
        label: Caption shown above the select.
        items: Selectable items in display order.
        item_label_generator: Produces the visible text of an item.
        item_value_generator: Produces the submitted value of an item.
        value: Currently selected item.
    """

    def __init__(
        self,
        element_id: str,
        label: str,
        items: Sequence[T],
        item_label_generator: Callable[[T], str] = str,
        item_value_generator: Callable[[T], str] = str,
        value: Optional[T] = None,
    ):
        super().__init__(element_id)
        self.label = label
        self.items = list(items)
        self.item_label_generator = item_label_generator
        self.item_value_generator = item_value_generator
        self.value = value

    def render(self) -> str:
        element_id = escape(self.element_id)
        options = []
        for item in self.items:
            selected = " selected" if item == self.value else ""
            options.append(
                f'<option value="{escape(self.item_value_generator(item))}"{selected}>'
                f"{escape(self.item_label_generator(item))}</option>"
            )
        return (
            f'<div class="field">'
            f'<label id="{element_id}-label" for="{element_id}">{escape(self.label)}</label>'
            f'<select id="{element_id}" name="{element_id}">{"".join(options)}</select>'
            f"</div>"
        )
