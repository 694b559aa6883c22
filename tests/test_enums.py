import pytest
from google.protobuf.descriptor_pb2 import (
    EnumDescriptorProto,
    EnumOptions,
    EnumValueDescriptorProto,
    FileDescriptorProto,
)

from pgstar.entity import ExtensionError
from pgstar.enums import Enum, EnumValue
from pgstar.proto_file import File


class _Package:
    def __init__(self, name="pkg"):
        self.name = name


class _Message:
    def __init__(self, fqn, file=None, transitive=()):
        self._fqn = fqn
        self._file = file
        self._transitive = list(transitive)

    def fully_qualified_name(self):
        return self._fqn

    def file(self):
        return self._file

    def collect_dependents(self, cache):
        for message in self._transitive:
            cache[message.fully_qualified_name()] = message


def _file(build_target=False):
    desc = FileDescriptorProto(name="file.proto", package="pkg", syntax="proto3")
    return File(desc, _Package(), ".pkg", build_target)


def _enum_in_file(build_target=False):
    f = _file(build_target)
    e = Enum(EnumDescriptorProto(name="enum"))
    f.add_enum(e)
    return e, f


def test_enum_name():
    assert Enum(EnumDescriptorProto(name="foo")).name() == "foo"


def test_enum_fully_qualified_name():
    assert Enum(fqn="enum").fully_qualified_name() == "enum"


def test_enum_syntax():
    e, f = _enum_in_file()
    assert e.syntax() == f.syntax() == "proto3"


def test_enum_package():
    e, f = _enum_in_file()
    assert e.package() is f.package()


def test_enum_file_in_message():
    f = _file()
    m = _Message(".pkg.Msg", file=f)
    e = Enum(parent=m)
    assert e.file() is f


def test_enum_build_target():
    e, _ = _enum_in_file()
    assert e.build_target() is False
    e2, _ = _enum_in_file(build_target=True)
    assert e2.build_target() is True


def test_enum_descriptor_and_parent():
    desc = EnumDescriptorProto(name="x")
    e, f = _enum_in_file()
    assert e.parent is f
    assert Enum(desc).descriptor is desc


def test_enum_imports():
    assert Enum().imports() == []


def test_enum_values():
    e = Enum()
    assert e.values() == []
    v = EnumValue()
    e.add_value(v)
    assert e.values() == [v]
    assert v.enum is e


def test_enum_dependents_empty():
    e, _ = _enum_in_file()
    assert e.dependents() == []


def test_enum_dependents_external():
    e = Enum(fqn=".pkg.enum")
    m = _Message(".pkg.Msg")
    e.add_dependent(m)
    assert e.dependents() == [m]


def test_enum_dependents_transitive_and_cached():
    outer = _Message(".pkg.Outer")
    inner = _Message(".pkg.Inner", transitive=[outer])
    e = Enum(fqn=".pkg.enum")
    e.add_dependent(inner)
    deps = e.dependents()
    assert len(deps) == 2
    assert inner in deps and outer in deps
    e.add_dependent(_Message(".pkg.Late"))
    assert len(e.dependents()) == 2


def test_enum_extension_without_options():
    assert Enum(EnumDescriptorProto()).extension(None) is None


def test_enum_extension_missing_handle():
    e = Enum(EnumDescriptorProto(options=EnumOptions(deprecated=True)))
    with pytest.raises(ExtensionError):
        e.extension(None)


def test_enum_child_at_path():
    e = Enum()
    v = EnumValue()
    e.add_value(v)
    assert e.child_at_path([]) is e
    assert e.child_at_path([1]) is None
    assert e.child_at_path([999, 123]) is None
    assert e.child_at_path([2, 0]) is v


def _value_in_enum(build_target=False):
    e, _ = _enum_in_file(build_target)
    v = EnumValue()
    e.add_value(v)
    return v, e


def test_enum_value_name():
    assert EnumValue(EnumValueDescriptorProto(name="eval")).name() == "eval"


def test_enum_value_fully_qualified_name():
    assert EnumValue(fqn="ev").fully_qualified_name() == "ev"


def test_enum_value_syntax_package_file():
    v, e = _value_in_enum()
    assert v.syntax() == e.syntax()
    assert v.package() is e.package()
    assert v.file() is e.file()


def test_enum_value_build_target():
    v, _ = _value_in_enum()
    assert v.build_target() is False
    v2, _ = _value_in_enum(build_target=True)
    assert v2.build_target() is True


def test_enum_value_enum():
    v, e = _value_in_enum()
    assert v.enum is e


def test_enum_value_value():
    assert EnumValue(EnumValueDescriptorProto(number=123)).value() == 123


def test_enum_value_imports():
    assert EnumValue().imports() == []


def test_enum_value_extension_without_options():
    assert EnumValue(EnumValueDescriptorProto()).extension(None) is None


def test_enum_value_child_at_path():
    v = EnumValue()
    assert v.child_at_path([]) is v
    assert v.child_at_path([1]) is None