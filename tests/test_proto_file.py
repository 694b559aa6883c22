import pytest
from google.protobuf.descriptor_pb2 import (
    FieldDescriptorProto,
    FileDescriptorProto,
    FileOptions,
)

from pgstar.entity import ExtensionError
from pgstar.enums import Enum
from pgstar.field import Extension
from pgstar.proto_file import File


class _Package:
    pass


class _Message:
    def __init__(self, enums=(), nested=(), imports=()):
        self.parent = None
        self._enums = list(enums)
        self._nested = list(nested)
        self._imports = list(imports)

    def all_enums(self):
        return list(self._enums)

    def all_messages(self):
        return list(self._nested)

    def imports(self):
        return list(self._imports)

    def child_at_path(self, path):
        return self if not path else None


class _Service:
    def __init__(self, imports=()):
        self.file = None
        self._imports = list(imports)

    def imports(self):
        return list(self._imports)

    def child_at_path(self, path):
        return self if not path else None


def _file(name="file.proto", build_target=False):
    desc = FileDescriptorProto(name=name, package="pkg", syntax="proto3")
    return File(desc, _Package(), ".pkg", build_target)


def test_name():
    assert File(FileDescriptorProto(name="foobar")).name() == "foobar"


def test_fully_qualified_name():
    assert File(fqn="foo").fully_qualified_name() == "foo"


def test_syntax_defaults_to_proto2():
    assert File(FileDescriptorProto()).syntax() == ""
    assert _file().syntax() == "proto3"


def test_package():
    pkg = _Package()
    assert File(package=pkg).package() is pkg


def test_file_is_self():
    f = File(build_target=True)
    assert f.file() is f


def test_build_target():
    assert File(build_target=True).build_target() is True
    assert File(build_target=False).build_target() is False


def test_input_path():
    assert File(FileDescriptorProto(name="foo.bar")).input_path() == "foo.bar"


def test_enums():
    f = File()
    assert f.enums() == []
    e = Enum()
    f.add_enum(e)
    assert f.enums() == [e]
    assert e.parent is f


def test_all_enums():
    f = File()
    assert f.all_enums() == []
    f.add_enum(Enum())
    f.add_message(_Message(enums=[Enum()]))
    assert len(f.enums()) == 1
    assert len(f.all_enums()) == 2


def test_messages():
    f = File()
    assert f.messages() == []
    m = _Message()
    f.add_message(m)
    assert f.messages() == [m]
    assert m.parent is f


def test_map_entries():
    f = File()
    with pytest.raises(TypeError):
        f.add_map_entry(_Message())
    assert f.map_entries() == []


def test_all_messages():
    f = File()
    assert f.all_messages() == []
    f.add_message(_Message(nested=[_Message()]))
    assert len(f.messages()) == 1
    assert len(f.all_messages()) == 2


def test_services():
    f = File()
    assert f.services() == []
    s = _Service()
    f.add_service(s)
    assert f.services() == [s]
    assert s.file is f


def test_imports():
    dep = _file()
    dep.add_file_dependency(File(FileDescriptorProto(name="foobar")))
    f = File()
    assert f.imports() == []
    f.add_file_dependency(dep)
    assert f.imports() == [dep]


def test_transitive_imports():
    dep = _file()
    nested = File(FileDescriptorProto(name="foobar"))
    dep.add_file_dependency(nested)
    f = File()
    assert f.transitive_imports() == []
    f.add_file_dependency(dep)
    result = f.transitive_imports()
    assert len(result) == 2
    assert dep in result and nested in result


def test_unused_imports():
    target = File(FileDescriptorProto(name="foobar"))
    unused = File(FileDescriptorProto(name="i/am/unused.proto"))
    public = File(FileDescriptorProto(name="i/am/public.proto"))
    used = _file()
    target.add_file_dependency(unused)
    target.add_file_dependency(public)
    target.descriptor.public_dependency.append(1)
    target.add_message(_Message(imports=[used]))
    target.add_service(_Service(imports=[used]))
    target.add_file_dependency(used)

    assert target.unused_imports() == [unused]


def test_dependents():
    f = File()
    fl = _file()
    f.add_dependent(fl)
    assert f.dependents() == [fl]


def test_dependents_transitive():
    base = _file("base.proto")
    middle = _file("middle.proto")
    top = _file("top.proto")
    base.add_dependent(middle)
    middle.add_dependent(top)
    deps = base.dependents()
    assert len(deps) == 2
    assert middle in deps and top in deps


def test_extension_without_options():
    assert File(FileDescriptorProto()).extension(None) is None


def test_extension_missing_handle():
    f = File(FileDescriptorProto(options=FileOptions(java_package="x")))
    with pytest.raises(ExtensionError):
        f.extension(None)


def test_defined_extensions():
    f = File()
    assert f.defined_extensions() == []
    ext = Extension(FieldDescriptorProto(name="ext"), f)
    f.add_defined_extension(ext)
    assert f.defined_extensions() == [ext]


def test_child_at_path():
    f = File()
    m = _Message()
    e = Enum()
    s = _Service()
    f.add_message(m)
    f.add_enum(e)
    f.add_service(s)
    assert f.child_at_path([]) is f
    assert f.child_at_path([4]) is None
    assert f.child_at_path([4, 0]) is m
    assert f.child_at_path([5, 0]) is e
    assert f.child_at_path([6, 0]) is s
    assert f.child_at_path([7, 0]) is None


def test_source_code_info():
    f = File()
    f.add_source_code_info("syntax info")
    f.add_package_source_code_info("package info")
    assert f.syntax_source_code_info() == "syntax info"
    assert f.source_code_info == "syntax info"
    assert f.package_source_code_info == "package info"