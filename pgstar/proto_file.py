"""Proto files: the roots of the entity graph."""

from __future__ import annotations

from typing import Any, Sequence

from google.protobuf.descriptor_pb2 import FileDescriptorProto

from .entity import Entity, ParentEntity

# Field numbers within FileDescriptorProto used in source-code-info paths.
_MESSAGE_TYPE_PATH = 4
_ENUM_TYPE_PATH = 5
_SERVICE_PATH = 6


class File(ParentEntity):
    """The contents of a single proto file."""

    def __init__(
        self,
        descriptor: FileDescriptorProto | None = None,
        package: Any = None,
        fqn: str = "",
        build_target: bool = False,
    ) -> None:
        self.descriptor = descriptor if descriptor is not None else FileDescriptorProto()
        self.source_code_info = None
        self.package_source_code_info: Any = None
        self._package = package
        self._fqn = fqn
        self._build_target = build_target
        self._enums: list[Any] = []
        self._messages: list[Any] = []
        self._services: list[Any] = []
        self._defined_extensions: list[Any] = []
        self._file_dependencies: list[File] = []
        self._dependents: list[File] = []
        self._dependents_cache: list[File] | None = None

    def name(self) -> str:
        return self.descriptor.name

    def fully_qualified_name(self) -> str:
        return self._fqn

    def syntax(self) -> str:
        return self.descriptor.syntax

    def package(self) -> Any:
        return self._package

    def file(self) -> File:
        return self

    def build_target(self) -> bool:
        """Whether this file was named for generation in the protoc run."""
        return self._build_target

    def input_path(self) -> str:
        """The path of the file as given to protoc; the same as name()."""
        return self.name()

    def syntax_source_code_info(self) -> Any:
        """Comment info attached to the syntax statement."""
        return self.source_code_info

    def add_package_source_code_info(self, info: Any) -> None:
        self.package_source_code_info = info

    def enums(self) -> list:
        """Top-level enums."""
        return list(self._enums)

    def all_enums(self) -> list:
        """Top-level and nested enums."""
        result = self.enums()
        for message in self._messages:
            result.extend(message.all_enums())
        return result

    def messages(self) -> list:
        """Top-level messages."""
        return list(self._messages)

    def all_messages(self) -> list:
        """Top-level and nested messages."""
        result = self.messages()
        for message in self._messages:
            result.extend(message.all_messages())
        return result

    def map_entries(self) -> list:
        """Files hold no map entries directly."""
        return []

    def services(self) -> list:
        return list(self._services)

    def defined_extensions(self) -> list:
        """Extensions declared at the top level of this file."""
        return list(self._defined_extensions)

    def imports(self) -> list[File]:
        """Direct dependencies of this file."""
        return list(self._file_dependencies)

    def transitive_imports(self) -> list[File]:
        """Direct and transitive dependencies of this file."""
        found: dict[str, File] = {}
        for dependency in self._file_dependencies:
            found[dependency.name()] = dependency
            for imported in dependency.transitive_imports():
                found[imported.file().name()] = imported
        return list(found.values())

    def unused_imports(self) -> list[File]:
        """Imported files not used by any message or service; public imports excluded."""
        public = set(self.descriptor.public_dependency)
        candidates = {
            dependency.name(): dependency
            for index, dependency in enumerate(self._file_dependencies)
            if index not in public
        }
        for message in self.all_messages():
            for imported in message.imports():
                candidates.pop(imported.name(), None)
        for service in self._services:
            for imported in service.imports():
                candidates.pop(imported.name(), None)
        return list(candidates.values())

    def dependents(self) -> list[File]:
        """Files that import this one, directly or transitively."""
        if self._dependents_cache is None:
            found: dict[str, File] = {}
            for dependent in self._dependents:
                found[dependent.name()] = dependent
                for further in dependent.dependents():
                    found[further.name()] = further
            self._dependents_cache = list(found.values())
        return list(self._dependents_cache)

    def add_enum(self, enum: Any) -> None:
        enum.parent = self
        self._enums.append(enum)

    def add_message(self, message: Any) -> None:
        message.parent = self
        self._messages.append(message)

    def add_map_entry(self, message: Any) -> None:
        """Map entries belong to messages; adding one to a file is always an error."""
        qualified = getattr(message, "fully_qualified_name", None)
        label = qualified() if callable(qualified) else repr(message)
        target = self.name() or "<unnamed>"
        raise TypeError(f"cannot add map entry directly to file: {label or '<unnamed>'} in {target}")

    def add_service(self, service: Any) -> None:
        service.file = self
        self._services.append(service)

    def add_defined_extension(self, extension: Any) -> None:
        self._defined_extensions.append(extension)

    def add_file_dependency(self, dependency: File) -> None:
        self._file_dependencies.append(dependency)

    def add_dependent(self, dependent: File) -> None:
        self._dependents.append(dependent)

    def child_at_path(self, path: Sequence[int]) -> Entity | None:
        if not path:
            return self
        if len(path) % 2:
            return None
        if path[0] == _MESSAGE_TYPE_PATH:
            child = self._messages[path[1]]
        elif path[0] == _ENUM_TYPE_PATH:
            child = self._enums[path[1]]
        elif path[0] == _SERVICE_PATH:
            child = self._services[path[1]]
        else:
            return None
        return child.child_at_path(path[2:])