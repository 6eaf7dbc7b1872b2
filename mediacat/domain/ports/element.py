from __future__ import annotations
from typing import List, Optional, Protocol

class ElementPort(Protocol):
    """
    A node of an already-parsed metadata document. Media.from_element only
    needs has_child/get_child_text; the rest is used by the parser service.
    """
    def has_child(self, name: str) -> bool: ...

    # Text of the first child called `name` ("" if it has none).
    def get_child_text(self, name: str) -> str: ...

    def get_child(self, name: str) -> Optional["ElementPort"]: ...

    def get_children(self, name: str) -> List["ElementPort"]: ...

    def get_attribute(self, name: str) -> Optional[str]: ...
