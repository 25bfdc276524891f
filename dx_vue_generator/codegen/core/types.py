"""
Type system for Vue prop generation.

Maps raw metadata type descriptors to the canonical constructor
tokens used in Vue prop declarations (String, Number, ...), with
custom type definitions looked up through a name-keyed registry.
"""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set

from ...logging_config import get_logger
from .model import CustomTypeDefinition, TypeDescriptor

logger = get_logger(__name__)

ARRAY_TYPE = "Array"
OBJECT_TYPE = "Object"


class CustomTypeRegistry(Mapping):
    """
    Read-only lookup of custom type definitions by name.

    Entries are inserted in input order; a later definition with the
    same name replaces the earlier one without any warning.
    """

    def __init__(self, custom_types: Iterable[CustomTypeDefinition] = ()):
        self._types: Dict[str, CustomTypeDefinition] = {}
        for custom_type in custom_types:
            self._types[custom_type.name] = custom_type

    def __getitem__(self, name: str) -> CustomTypeDefinition:
        return self._types[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"CustomTypeRegistry({list(self._types)!r})"


def build_custom_type_registry(
    custom_types: Iterable[CustomTypeDefinition],
) -> CustomTypeRegistry:
    """Build the registry used during type resolution (last definition wins)."""
    return CustomTypeRegistry(custom_types)


class TypeResolver:
    """
    Central engine for mapping raw type descriptors to Vue prop types.

    Resolution never fails: unknown type names resolve to Object.
    An ``any`` descriptor makes the whole option unrestricted, which
    is reported as an empty token list.
    """

    def __init__(self, type_overrides: Optional[Dict[str, List[str]]] = None):
        """
        Initialize the resolver.

        Args:
            type_overrides: Extra lowercase raw type names mapped to token lists.
                These take precedence over the built-in mapping.
        """
        self._primitive_types = self._build_primitive_type_map()
        if type_overrides:
            self._primitive_types.update(
                {key.lower(): list(value) for key, value in type_overrides.items()}
            )

    def _build_primitive_type_map(self) -> Dict[str, List[str]]:
        """Build mapping of lowercase raw type names to constructor tokens."""
        return {
            "string": ["String"],
            "number": ["Number"],
            "boolean": ["Boolean"],
            "object": [OBJECT_TYPE],
            "array": [ARRAY_TYPE],
            "function": ["Function"],
            "event": ["Function"],
            "date": ["Date"],
            "template": ["Function", OBJECT_TYPE, "String"],
        }

    def resolve(
        self,
        types: Sequence[TypeDescriptor],
        custom_types: Optional[Mapping] = None,
    ) -> List[str]:
        """
        Resolve the raw types of one option.

        Args:
            types: Raw type descriptors in declaration order
            custom_types: Registry of custom type definitions

        Returns:
            Ordered, de-duplicated constructor tokens (empty when unrestricted)
        """
        tokens = self._resolve_all(types, custom_types or {}, set())
        return tokens if tokens is not None else []

    def _resolve_all(
        self,
        types: Sequence[TypeDescriptor],
        custom_types: Mapping,
        visiting: Set[str],
    ) -> Optional[List[str]]:
        resolved: List[str] = []
        for type_descr in types:
            tokens = self._resolve_one(type_descr, custom_types, visiting)
            if tokens is None:
                return None
            for token in tokens:
                if token not in resolved:
                    resolved.append(token)
        return resolved

    def _resolve_one(
        self,
        type_descr: TypeDescriptor,
        custom_types: Mapping,
        visiting: Set[str],
    ) -> Optional[List[str]]:
        type_name = type_descr.type
        key = type_name.lower()

        if key == "any":
            return None

        if key in self._primitive_types:
            return self._primitive_types[key]

        custom_type = custom_types.get(type_name)
        if custom_type is None:
            logger.debug("Unknown type '%s' resolved to %s", type_name, OBJECT_TYPE)
            return [OBJECT_TYPE]

        if not custom_type.types or type_name in visiting:
            return [OBJECT_TYPE]

        visiting.add(type_name)
        try:
            tokens = self._resolve_all(custom_type.types, custom_types, visiting)
        finally:
            visiting.discard(type_name)
        return tokens


_default_resolver: Optional[TypeResolver] = None


def get_default_resolver() -> TypeResolver:
    """Get the shared resolver with the built-in type mapping."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = TypeResolver()
    return _default_resolver


def convert_types(
    types: Sequence[TypeDescriptor], custom_types: Optional[Mapping] = None
) -> List[str]:
    """Convenience function resolving types with the default resolver."""
    return get_default_resolver().resolve(types, custom_types)
