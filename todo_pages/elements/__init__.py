"""Element wrappers: the ElementHandle primitive and typed variants."""

from todo_pages.elements.base_element import ElementHandle
from todo_pages.elements.button import Button
from todo_pages.elements.checkbox import Checkbox
from todo_pages.elements.counter import Counter
from todo_pages.elements.element_list import ElementList
from todo_pages.elements.input import Input
from todo_pages.elements.label import Label
from todo_pages.elements.link import Link

__all__ = [
    "Button",
    "Checkbox",
    "Counter",
    "ElementHandle",
    "ElementList",
    "Input",
    "Label",
    "Link",
]
