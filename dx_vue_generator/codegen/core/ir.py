"""
Intermediate representation handed to the emitters.

All records are immutable; ``expected_children`` is a read-only
mapping view. ``None`` on ``nested_components`` and
``expected_children`` means the concept does not apply, which is
different from an empty collection.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ComponentDescriptor:
    """An importable symbol: exported name plus module path."""

    name: str
    path: str


@dataclass(frozen=True)
class ValueRestriction:
    """Literal values an option accepts, with their lowercase JS type."""

    value_type: str
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class PropIR:
    name: str
    types: Tuple[str, ...]
    is_array: bool = False
    acceptable_values: Optional[Tuple[Any, ...]] = None
    acceptable_value_type: Optional[str] = None


@dataclass(frozen=True)
class ExpectedChild:
    """How a child component is placed: collection item or single option slot."""

    is_collection_item: bool
    option_name: str


@dataclass(frozen=True)
class NestedComponentIR:
    name: str
    option_name: str
    props: Tuple[PropIR, ...]
    is_collection_item: bool
    predefined_props: Any = None
    expected_children: Optional[Mapping[str, ExpectedChild]] = None


@dataclass(frozen=True)
class ComponentIR:
    name: str
    widget_component: ComponentDescriptor
    base_component: ComponentDescriptor
    config_component: ComponentDescriptor
    props: Tuple[PropIR, ...]
    has_model: bool = False
    has_explicit_types: bool = False
    nested_components: Optional[Tuple[NestedComponentIR, ...]] = None
    expected_children: Optional[Mapping[str, ExpectedChild]] = None
    contains_reexports: bool = False


@dataclass(frozen=True)
class WidgetFile:
    """Mapping result for one widget: target file name and its component IR."""

    file_name: str
    component: ComponentIR
