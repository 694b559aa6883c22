"""Types of fields and of the elements of repeated and map fields."""

from __future__ import annotations

from typing import Any

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from .entity import supports_required_prefix


def _foreign_file(target_file: Any, own_file: Any) -> list:
    """The target file as a one-item import list when it differs from the owning file."""
    if target_file.name() != own_file.name():
        return [target_file]
    return []


class ScalarElem:
    """A scalar component of a repeated or map field type."""

    def __init__(self, parent_type: Any = None, proto_type: int = 0) -> None:
        self.parent_type = parent_type
        self.proto_type = proto_type
        self._enum: Any = None
        self._message: Any = None

    def is_embed(self) -> bool:
        return False

    def is_enum(self) -> bool:
        return False

    def imports(self) -> list:
        return []

    def enum(self) -> Any:
        return self._enum

    def embed(self) -> Any:
        return self._message


class EnumElem(ScalarElem):
    """An enum component of a repeated or map field type."""

    def __init__(self, parent_type: Any = None, proto_type: int = 0, enum: Any = None) -> None:
        super().__init__(parent_type, proto_type)
        self._enum = enum

    def is_enum(self) -> bool:
        return True

    def imports(self) -> list:
        return _foreign_file(self._enum.file(), self.parent_type.field.file())


class EmbedElem(ScalarElem):
    """An embedded-message component of a repeated or map field type."""

    def __init__(self, parent_type: Any = None, proto_type: int = 0, message: Any = None) -> None:
        super().__init__(parent_type, proto_type)
        self._message = message

    def is_embed(self) -> bool:
        return True

    def imports(self) -> list:
        return _foreign_file(self._message.file(), self.parent_type.field.file())


class ScalarType:
    """The type of a singular scalar field."""

    def __init__(self, field: Any = None) -> None:
        self.field = field
        self._enum: Any = None
        self._message: Any = None
        self._element: Any = None
        self._key: Any = None

    def is_repeated(self) -> bool:
        return False

    def is_map(self) -> bool:
        return False

    def is_enum(self) -> bool:
        return False

    def is_embed(self) -> bool:
        return False

    def is_optional(self) -> bool:
        """True unless the syntax is proto2 and the field is not labelled optional."""
        return (
            not supports_required_prefix(self.field.syntax())
            or self.proto_label() == FieldDescriptorProto.LABEL_OPTIONAL
        )

    def is_required(self) -> bool:
        """True only for proto2 fields labelled required."""
        return (
            supports_required_prefix(self.field.syntax())
            and self.proto_label() == FieldDescriptorProto.LABEL_REQUIRED
        )

    def proto_type(self) -> int:
        return self.field.descriptor.type

    def proto_label(self) -> int:
        return self.field.descriptor.label

    def imports(self) -> list:
        return []

    def enum(self) -> Any:
        """The enum of a singular enum field, otherwise None."""
        return self._enum

    def embed(self) -> Any:
        """The message of a singular embedded-message field, otherwise None."""
        return self._message

    def element(self) -> Any:
        """The element type of a repeated or map field, otherwise None."""
        return self._element

    def key(self) -> Any:
        """The key type of a map field, otherwise None."""
        return self._key

    def to_elem(self) -> ScalarElem:
        """The equivalent element type, used as a map key or value."""
        return ScalarElem(self, self.proto_type())


class EnumType(ScalarType):
    """The type of a singular enum field."""

    def __init__(self, field: Any = None, enum: Any = None) -> None:
        super().__init__(field)
        self._enum = enum

    def is_enum(self) -> bool:
        return True

    def imports(self) -> list:
        return _foreign_file(self._enum.file(), self.field.file())

    def to_elem(self) -> EnumElem:
        return EnumElem(self, self.proto_type(), self._enum)


class EmbedType(ScalarType):
    """The type of a singular embedded-message field."""

    def __init__(self, field: Any = None, message: Any = None) -> None:
        super().__init__(field)
        self._message = message

    def is_embed(self) -> bool:
        return True

    def imports(self) -> list:
        return _foreign_file(self._message.file(), self.field.file())

    def to_elem(self) -> EmbedElem:
        return EmbedElem(self, self.proto_type(), self._message)


class RepeatedType(ScalarType):
    """The type of a repeated field."""

    def __init__(self, field: Any = None, element: Any = None) -> None:
        super().__init__(field)
        self._element = element
        if element is not None:
            element.parent_type = self

    def is_repeated(self) -> bool:
        return True

    def imports(self) -> list:
        return self._element.imports()

    def to_elem(self) -> ScalarElem:
        raise TypeError("cannot convert repeated field type to an element type")


class MapType(RepeatedType):
    """The type of a map field."""

    def __init__(self, field: Any = None, key: Any = None, element: Any = None) -> None:
        super().__init__(field, element)
        self._key = key
        if key is not None:
            key.parent_type = self

    def is_repeated(self) -> bool:
        return False

    def is_map(self) -> bool:
        return True