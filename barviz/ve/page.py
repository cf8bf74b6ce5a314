# barviz/ve/page.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Container:
    id: str
    children: List[Any] = field(default_factory=list)

    def replace_children(self, node: Any) -> None:
        # previous surfaces are dropped, the new one takes their place
        self.children = [node]


class Page:
    """Minimal element registry: containers looked up by id."""

    def __init__(self, container_ids=()):
        self._elements: Dict[str, Container] = {}
        for cid in container_ids:
            self.add_container(cid)

    def add_container(self, container_id: str) -> Container:
        c = self._elements.get(container_id)
        if c is None:
            c = self._elements[container_id] = Container(container_id)
        return c

    def get_element_by_id(self, container_id: str) -> Optional[Container]:
        return self._elements.get(container_id)


_default_page: Optional[Page] = None


def default_page() -> Page:
    global _default_page
    if _default_page is None:
        _default_page = Page()
    return _default_page
