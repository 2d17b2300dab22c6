# pylint: disable=missing-docstring,invalid-name,unused-argument,no-self-use,unused-private-member
import pytest

from named_invoker.invocation import ReflectionInspector, Visibility
from named_invoker.invocation.inspection import get_stored_name, get_visibility_level


class Base:
    label = "base"

    def public(self, a, b=2):
        return a + b

    def _protected(self, x):
        return x

    def __private(self, y="why"):
        return y

    @staticmethod
    def static(a, b):
        return a - b

    @classmethod
    def klass(cls, a):
        return cls, a

    @property
    def prop(self):
        return 1

    def variadic(self, a, *args, b=1, **kwargs):
        return a


class Child(Base):
    def __private(self, z):
        return z


@pytest.mark.parametrize(
    "name, expected",
    [
        ["public", Visibility.PUBLIC],
        ["__call__", Visibility.PUBLIC],
        ["_protected", Visibility.PROTECTED],
        ["_trailing__", Visibility.PROTECTED],
        ["__private", Visibility.PRIVATE],
        ["__", Visibility.PUBLIC],
    ],
)
def test_get_visibility_level(name, expected):
    assert get_visibility_level(name) == expected


def test_get_stored_name():
    assert get_stored_name(Base, "__private") == "_Base__private"
    assert get_stored_name(Base, "_protected") == "_protected"


def test_describe_method_public():
    result = ReflectionInspector().describe_method(Base, "public")
    assert result is not None
    assert result.attr_name == "public"
    assert result.visibility.level == Visibility.PUBLIC
    assert result.visibility.declaring_type is Base
    assert [e.name for e in result.signature] == ["a", "b"]
    assert [e.position for e in result.signature] == [0, 1]
    assert not result.signature[0].has_default
    assert result.signature[1].default_value == 2


def test_describe_method_inherited():
    result = ReflectionInspector().describe_method(Child, "_protected")
    assert result is not None
    assert result.visibility.level == Visibility.PROTECTED
    assert result.visibility.declaring_type is Base


def test_describe_method_private_declared_on_subclass():
    result = ReflectionInspector().describe_method(Child, "__private")
    assert result is not None
    assert result.attr_name == "_Child__private"
    assert result.visibility.declaring_type is Child
    assert [e.name for e in result.signature] == ["z"]


@pytest.mark.parametrize(
    "name, expected_params",
    [
        ["static", ["a", "b"]],
        ["klass", ["a"]],
        ["variadic", ["a", "b"]],
    ],
)
def test_describe_method_signature(name, expected_params):
    result = ReflectionInspector().describe_method(Base, name)
    assert result is not None
    assert [e.name for e in result.signature] == expected_params


@pytest.mark.parametrize("name", ["missing", "label", "prop", ""])
def test_describe_method_not_found(name):
    assert ReflectionInspector().describe_method(Base, name) is None


def test_describe_callable():
    result = ReflectionInspector().describe_callable(lambda a, b=3, *args, **kwargs: None)
    assert [e.name for e in result] == ["a", "b"]
    assert result[1].default_value == 3


class Shadowing(Base):
    _Shadowing__private = "not a method"
    public = 1


@pytest.mark.parametrize("name", ["public", "__private"])
def test_describe_method_data_attribute_shadows(name):
    assert ReflectionInspector().describe_method(Shadowing, name) is None


def test_describe_method_mangled_name():
    result = ReflectionInspector().describe_method(Child, "_Base__private")
    assert result is not None
    assert result.attr_name == "_Base__private"
    assert result.visibility.level == Visibility.PRIVATE
    assert result.visibility.declaring_type is Base
    assert [e.name for e in result.signature] == ["y"]


def test_describe_method_builtin_classmethod():
    class Counts(dict):
        pass

    result = ReflectionInspector().describe_method(Counts, "fromkeys")
    assert result is not None
    assert result.visibility.declaring_type is dict
    assert [e.name for e in result.signature] == ["iterable", "value"]


def test_describe_method_builtin_method():
    class Text(str):
        pass

    result = ReflectionInspector().describe_method(Text, "upper")
    assert result is not None
    assert result.signature == ()
