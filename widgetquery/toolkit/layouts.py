"""Containers of the reference toolkit.

Ordered layouts hold any number of children and support insertion at an
index. Panels and the UI hold a single content component.
"""

from typing import Iterator, List, Optional

from ..context import get_current_root, set_current_root
from ..core.component import Component, HasComponents
from .base import AbstractComponent


def _detach(component: Component) -> None:
    parent = component.get_parent()
    if parent is not None:
        parent.remove_component(component)


def _check_not_ancestor(container: Component, component: Component) -> None:
    """Refuse to add component into its own subtree.

    Raises:
        ValueError: If component is container or one of its ancestors
    """
    node: Optional[Component] = container
    while node is not None:
        if node is component:
            raise ValueError(f"{component!r} cannot be added inside its own content")
        node = node.get_parent()


class AbstractOrderedLayout(AbstractComponent, HasComponents):
    """A container keeping its children in an ordered list."""

    def __init__(self, *children: Component, caption: Optional[str] = None):
        super().__init__(caption)
        self._children: List[Component] = []
        for child in children:
            self.add_component(child)

    def get_children(self) -> Iterator[Component]:
        # Iterate over a snapshot so callers may modify the layout meanwhile
        return iter(list(self._children))

    def supports_indexed_insertion(self) -> bool:
        return True

    def add_component(self, component: Component, index: Optional[int] = None) -> None:
        """Add component, appending or inserting at index.

        A component that is already a child is moved. When it is moved
        forward, index refers to the position before the move and is
        shifted down by one to account for the removal.

        Raises:
            ValueError: If component is this layout or one of its ancestors
            IndexError: If index is outside [0, component_count()]
        """
        _check_not_ancestor(self, component)
        if component.get_parent() is self:
            if index is not None and index > self.get_component_index(component):
                index -= 1
            self._children.remove(component)
            component.set_parent(None)
        else:
            _detach(component)

        if index is None:
            self._children.append(component)
        else:
            if index < 0 or index > len(self._children):
                raise IndexError(
                    f"Index {index} out of range for {self!r} with {len(self._children)} children"
                )
            self._children.insert(index, component)
        component.set_parent(self)

    def add_components(self, *components: Component) -> None:
        for c in components:
            self.add_component(c)

    def remove_component(self, component: Component) -> None:
        if component.get_parent() is self:
            self._children.remove(component)
            component.set_parent(None)

    def get_component(self, index: int) -> Component:
        return self._children[index]

    def component_count(self) -> int:
        return len(self._children)


class CssLayout(AbstractOrderedLayout):
    pass


class VerticalLayout(AbstractOrderedLayout):
    pass


class HorizontalLayout(AbstractOrderedLayout):
    pass


class AbstractSingleComponentContainer(AbstractComponent, HasComponents):
    """A container holding at most one component, its content.

    add_component() replaces the content; insertion at an index is not
    supported.
    """

    def __init__(self, content: Optional[Component] = None, caption: Optional[str] = None):
        super().__init__(caption)
        self._content: Optional[Component] = None
        if content is not None:
            self.set_content(content)

    def get_content(self) -> Optional[Component]:
        return self._content

    def set_content(self, content: Optional[Component]) -> None:
        if content is self._content:
            return
        if content is not None:
            _check_not_ancestor(self, content)
        if self._content is not None:
            old = self._content
            self._content = None
            old.set_parent(None)
        if content is not None:
            _detach(content)
            self._content = content
            content.set_parent(self)

    def get_children(self) -> Iterator[Component]:
        if self._content is None:
            return iter(())
        return iter((self._content,))

    def add_component(self, component: Component, index: Optional[int] = None) -> None:
        if index is not None:
            raise NotImplementedError(f"{type(self).__name__} does not support indexed insertion")
        self.set_content(component)

    def remove_component(self, component: Component) -> None:
        if component is self._content:
            self.set_content(None)


class Panel(AbstractSingleComponentContainer):
    pass


class UI(AbstractSingleComponentContainer):
    """Root of a component tree.

    Components below a UI are attached. The ambient root used by
    select_all() can be set through UI.set_current().
    """

    def is_attached(self) -> bool:
        return True

    @staticmethod
    def get_current() -> Optional[Component]:
        return get_current_root()

    @staticmethod
    def set_current(ui: Optional['UI']) -> None:
        set_current_root(ui)
