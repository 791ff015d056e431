"""Leaf widgets of the reference toolkit."""

from typing import Callable, List, Optional

from .base import AbstractComponent


class Button(AbstractComponent):
    """A clickable button. Disabled buttons ignore clicks."""

    def __init__(self, caption: Optional[str] = None,
                 on_click: Optional[Callable[['Button'], None]] = None):
        super().__init__(caption)
        self._click_listeners: List[Callable[['Button'], None]] = []
        if on_click is not None:
            self._click_listeners.append(on_click)

    def add_click_listener(self, listener: Callable[['Button'], None]) -> None:
        self._click_listeners.append(listener)

    def remove_click_listener(self, listener: Callable[['Button'], None]) -> None:
        if listener in self._click_listeners:
            self._click_listeners.remove(listener)

    def click(self) -> None:
        if not self.is_enabled():
            return
        for listener in list(self._click_listeners):
            listener(self)


class Label(AbstractComponent):
    """Static text."""

    def __init__(self, value: str = "", caption: Optional[str] = None):
        super().__init__(caption)
        self._value = value

    def get_value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value


class Image(AbstractComponent):
    """An image referenced by source URL."""

    def __init__(self, source: Optional[str] = None, caption: Optional[str] = None):
        super().__init__(caption)
        self._source = source

    def get_source(self) -> Optional[str]:
        return self._source

    def set_source(self, source: Optional[str]) -> None:
        self._source = source
