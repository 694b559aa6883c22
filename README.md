# pgstar

Building blocks for writing protoc plugins in Python.

## What is in the package

- `pgstar.entity`: the `Entity` and `ParentEntity` base classes. It also has
  `extension_value(options, handle)` and `Entity.extension(handle)`, which read a
  custom option from an entity's options message. They return `None` when the
  option is not set and raise `ExtensionError` when the handle is missing or
  does not fit. It also has `supports_required_prefix(syntax)`, which is true
  only for proto2.
- `pgstar.proto_file`: `File`, built on a `FileDescriptorProto`. It holds
  enums, messages, services and defined extensions. It answers `imports()`,
  `transitive_imports()`, `unused_imports()` (public imports excluded) and
  `dependents()`. It also resolves source-code-info paths with
  `child_at_path()`.
- `pgstar.enums`: `Enum` and `EnumValue`. An enum tracks the messages that use
  it, through `add_dependent()` and `dependents()`.
- `pgstar.field`: `Field` and `Extension`. `Field.required()` is true only for
  proto2 fields labelled required.
- `pgstar.field_type`: the types a field can have. These are `ScalarType`,
  `EnumType`, `EmbedType`, `RepeatedType` and `MapType`, and the element types
  `ScalarElem`, `EnumElem` and `EmbedElem`. An element type describes what a
  repeated field holds, or the key and value of a map. Each type reports the
  files it needs to import.
- `pgstar.artifact`: descriptions of plugin output.
  - `GeneratorFile`, `GeneratorAppend` and `GeneratorInjection`, and their
    template-rendered counterparts. Each one turns into a
    `CodeGeneratorResponse.File` through `proto_file()`.
  - `CustomFile` and `CustomTemplateFile`, for files meant to be written
    outside protoc.
  - `GeneratorError`, for non-fatal errors.

  `proto_file()` raises `ArtifactError` when the target name is absolute or
  leaves the output directory. It also raises `ArtifactError` when rendering
  the template fails. A template is either an object with a `render(data)`
  method or a callable taking the data.
- `pgstar.context`: build contexts that track an output directory and a
  logging prefix. The entry point is `context(debugger, params, output)`, and
  the contexts have `push`, `push_dir`, `pop`, `pop_dir` and `join_path`.
- `pgstar.debug`: `RootDebugger`, `PrefixedDebugger` and `MockDebugger`. They
  log with bracketed prefixes and check errors and assertions. `MockDebugger`
  records failures, errors and exit codes instead of exiting, for use in tests.
- `pgstar.comment`: `c(wrap, *args)` and `c80(*args)`. They render text as a
  block of `//` line comments, wrapped to the given width.

## What it does not do

- The package does not read a `CodeGeneratorRequest` or a `FileDescriptorSet`,
  and it does not build the entity graph from one. You connect entities
  yourself with the `add_*` methods.
- It has no message, service, method, oneof or package entities. `File` and
  `Enum` only hold whatever objects you give them.
- It has no plugin driver. Nothing reads standard input, runs modules, writes a
  `CodeGeneratorResponse`, or writes `CustomFile` artifacts to disk.
- It has no command-line program.

## Installing

```
pip install pgstar
```

## Examples

Wrapping text as a line comment:

```python
from pgstar.comment import c

print(c(20, "the quick brown fox jumps over the lazy dog"), end="")
# // the quick brown
# // fox jumps over
# // the lazy dog
```

Producing output files for protoc:

```python
from pgstar.artifact import GeneratorFile, GeneratorTemplateFile

plain = GeneratorFile(name="foo/bar.txt", contents="hello").proto_file()
print(plain.name, plain.content)  # foo/bar.txt hello

rendered = GeneratorTemplateFile(
    name="greeting.txt", template=lambda data: f"hi {data}", data="there"
).proto_file()
print(rendered.content)  # hi there
```

Connecting entities:

```python
from google.protobuf.descriptor_pb2 import (
    EnumDescriptorProto,
    EnumValueDescriptorProto,
    FileDescriptorProto,
)
from pgstar.enums import Enum, EnumValue
from pgstar.proto_file import File

f = File(FileDescriptorProto(name="a.proto", package="pkg", syntax="proto3"), fqn=".pkg")
color = Enum(EnumDescriptorProto(name="Color"), fqn=".pkg.Color")
f.add_enum(color)
red = EnumValue(EnumValueDescriptorProto(name="RED", number=1), fqn=".pkg.Color.RED")
color.add_value(red)

print(red.file() is f, red.syntax(), red.value())  # True proto3 1
print(f.child_at_path([5, 0, 2, 0]) is red)       # True
```

Tracking output directories:

```python
from pgstar.context import context
from pgstar.debug import MockDebugger

ctx = context(MockDebugger(), {}, "out")
sub = ctx.push_dir("gen")
print(sub.join_path("file.py"))     # out/gen/file.py
print(sub.pop_dir().output_path())  # out
```

## Running the tests

```
pip install -e .[test]
pytest
```