"""Artifacts: the outputs produced by modules, written via protoc or directly to disk."""

from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Union, runtime_checkable

from google.protobuf.compiler import plugin_pb2

ResponseFile = plugin_pb2.CodeGeneratorResponse.File


class ArtifactError(ValueError):
    """Raised when an artifact cannot be converted or rendered."""


@runtime_checkable
class _RenderingTemplate(Protocol):
    def render(self, data: Any) -> str: ...


Template = Union[_RenderingTemplate, Callable[[Any], str]]


class Artifact:
    """Base class for every output of a module."""


class GeneratorArtifact(Artifact, ABC):
    """An artifact handed to protoc to be written. Its contents must be text."""

    @abstractmethod
    def proto_file(self) -> ResponseFile:
        """Convert to a CodeGeneratorResponse file entry; raises ArtifactError on failure."""


@dataclass(kw_only=True)
class TemplateArtifact:
    """Shared logic for artifacts whose contents are rendered from a template.

    The template is either an object with a ``render(data)`` method or a
    callable taking the data and returning the rendered text.
    """

    template: Template
    data: Any = None

    def render(self) -> str:
        """Render the template with the data; raises ArtifactError on failure."""
        renderer = self.template
        try:
            if isinstance(renderer, _RenderingTemplate):
                result = renderer.render(self.data)
            else:
                result = renderer(self.data)
        except Exception as exc:
            raise ArtifactError(f"unable to render template: {exc}") from exc
        return str(result)


def clean_generator_file_name(name: str) -> str:
    """Normalise a generator file name, which must be relative and stay inside the output directory."""
    if posixpath.isabs(name):
        raise ArtifactError("generator file names must be relative paths")
    cleaned = posixpath.normpath(name) if name else "."
    if cleaned == "." or cleaned.startswith(".."):
        raise ArtifactError("generator file names must be not contain . or .. within them")
    return cleaned


@dataclass(kw_only=True)
class GeneratorFile(GeneratorArtifact):
    """A file to be generated by protoc."""

    name: str
    contents: str = ""
    overwrite: bool = False

    def proto_file(self) -> ResponseFile:
        name = clean_generator_file_name(self.name)
        return ResponseFile(name=name, content=self.contents)


@dataclass(kw_only=True)
class GeneratorTemplateFile(TemplateArtifact, GeneratorArtifact):
    """A file to be generated by protoc from a template."""

    name: str
    overwrite: bool = False

    def proto_file(self) -> ResponseFile:
        name = clean_generator_file_name(self.name)
        return ResponseFile(name=name, content=self.render())


@dataclass(kw_only=True)
class GeneratorAppend(GeneratorArtifact):
    """Content appended to a file generated earlier in the same run."""

    file_name: str
    contents: str = ""

    def proto_file(self) -> ResponseFile:
        clean_generator_file_name(self.file_name)
        return ResponseFile(content=self.contents)


@dataclass(kw_only=True)
class GeneratorTemplateAppend(TemplateArtifact, GeneratorArtifact):
    """Template-rendered content appended to a file generated earlier in the same run."""

    file_name: str

    def proto_file(self) -> ResponseFile:
        clean_generator_file_name(self.file_name)
        return ResponseFile(content=self.render())


@dataclass(kw_only=True)
class GeneratorInjection(GeneratorArtifact):
    """Content inserted at an insertion point of a file generated by a prior plugin."""

    file_name: str
    insertion_point: str
    contents: str = ""

    def proto_file(self) -> ResponseFile:
        name = clean_generator_file_name(self.file_name)
        return ResponseFile(
            name=name,
            insertion_point=self.insertion_point,
            content=self.contents,
        )


@dataclass(kw_only=True)
class GeneratorTemplateInjection(TemplateArtifact, GeneratorArtifact):
    """Template-rendered content inserted at an insertion point of a generated file."""

    file_name: str
    insertion_point: str

    def proto_file(self) -> ResponseFile:
        name = clean_generator_file_name(self.file_name)
        content = self.render()
        return ResponseFile(
            name=name,
            insertion_point=self.insertion_point,
            content=content,
        )


@dataclass(kw_only=True)
class CustomFile(Artifact):
    """A file written directly to the file system rather than through protoc.

    Relative names are resolved against the directory protoc runs in. The
    process umask applies to perms.
    """

    name: str
    contents: str = ""
    perms: int = 0
    overwrite: bool = False


@dataclass(kw_only=True)
class CustomTemplateFile(TemplateArtifact, Artifact):
    """A template-rendered file written directly to the file system."""

    name: str
    perms: int = 0
    overwrite: bool = False


@dataclass(kw_only=True)
class GeneratorError(Artifact):
    """A non-fatal generation error reported in the response's error field."""

    message: str