"""Enumerations and their values."""

from __future__ import annotations

from typing import Any, Sequence

from google.protobuf.descriptor_pb2 import EnumDescriptorProto, EnumValueDescriptorProto

from .entity import Entity

# Field number of ``value`` within EnumDescriptorProto.
_ENUM_VALUE_PATH = 2


class Enum(Entity):
    """An enumeration type declared in a file or a message."""

    def __init__(
        self,
        descriptor: EnumDescriptorProto | None = None,
        parent: Any = None,
        fqn: str = "",
    ) -> None:
        self.descriptor = descriptor if descriptor is not None else EnumDescriptorProto()
        self.parent = parent
        self.source_code_info = None
        self._fqn = fqn
        self._values: list[EnumValue] = []
        self._dependents: list[Any] = []
        self._dependents_cache: dict[str, Any] | None = None

    def name(self) -> str:
        return self.descriptor.name

    def fully_qualified_name(self) -> str:
        return self._fqn

    def syntax(self) -> str:
        return self.parent.syntax()

    def package(self) -> Any:
        return self.parent.package()

    def file(self) -> Any:
        return self.parent.file()

    def build_target(self) -> bool:
        return self.parent.build_target()

    def imports(self) -> list:
        """Enums never require imports of their own."""
        return []

    def values(self) -> list[EnumValue]:
        """Each defined enumeration value, in declaration order."""
        return list(self._values)

    def dependents(self) -> list:
        """Every message in which this enum is used, directly or transitively."""
        if self._dependents_cache is None:
            cache: dict[str, Any] = {}
            for dependent in self._dependents:
                cache[dependent.fully_qualified_name()] = dependent
                dependent.collect_dependents(cache)
            self._dependents_cache = cache
        return list(self._dependents_cache.values())

    def add_value(self, value: EnumValue) -> None:
        """Append a value, binding it to this enum."""
        value.enum = self
        self._values.append(value)

    def add_dependent(self, message: Any) -> None:
        """Record a message that uses this enum directly."""
        self._dependents.append(message)

    def child_at_path(self, path: Sequence[int]) -> Entity | None:
        if not path:
            return self
        if len(path) % 2:
            return None
        if path[0] == _ENUM_VALUE_PATH:
            return self._values[path[1]].child_at_path(path[2:])
        return None


class EnumValue(Entity):
    """A name-number pair within an enum."""

    def __init__(
        self,
        descriptor: EnumValueDescriptorProto | None = None,
        enum: Enum | None = None,
        fqn: str = "",
    ) -> None:
        self.descriptor = (
            descriptor if descriptor is not None else EnumValueDescriptorProto()
        )
        self.enum = enum
        self.source_code_info = None
        self._fqn = fqn

    def name(self) -> str:
        return self.descriptor.name

    def fully_qualified_name(self) -> str:
        return self._fqn

    def syntax(self) -> str:
        return self.enum.syntax()

    def package(self) -> Any:
        return self.enum.package()

    def file(self) -> Any:
        return self.enum.file()

    def build_target(self) -> bool:
        return self.enum.build_target()

    def imports(self) -> list:
        """Enum values never require imports."""
        return []

    def value(self) -> int:
        """The numeric value of this entry."""
        return self.descriptor.number

    def child_at_path(self, path: Sequence[int]) -> Entity | None:
        return self if not path else None