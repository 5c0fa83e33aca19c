"""Tests for infrastructure/reflection.py."""

import pytest

from methodcheck.domain.model.enums import Visibility
from methodcheck.infrastructure.reflection import (
    ReflectionResolver,
    describe_attribute,
    get_visibility,
    import_class,
    mangle,
)
from tests.samples import (
    AbstractService,
    ClassWithMethodFoo,
    ConcreteService,
    FinalAbstractBase,
    InterfaceWithMethodFoo,
    MixinWithMethodFoo,
)


@pytest.fixture
def resolver() -> ReflectionResolver:
    return ReflectionResolver()


class TestGetVisibility:
    """Tests for get_visibility function."""

    def test_public_name(self) -> None:
        assert get_visibility("my_function") == Visibility.PUBLIC
        assert get_visibility("MyClass") == Visibility.PUBLIC

    def test_protected_name(self) -> None:
        assert get_visibility("_helper") == Visibility.PROTECTED

    def test_private_name(self) -> None:
        assert get_visibility("__secret") == Visibility.PRIVATE

    def test_dunder_is_public(self) -> None:
        assert get_visibility("__init__") == Visibility.PUBLIC
        assert get_visibility("__call__") == Visibility.PUBLIC


class TestMangle:
    def test_mangle(self) -> None:
        assert mangle(AbstractService, "__cleanup") == "_AbstractService__cleanup"

    def test_leading_underscores_of_class_stripped(self) -> None:
        class _Hidden:
            pass

        assert mangle(_Hidden, "__x") == "_Hidden__x"


class TestImportClass:
    def test_dotted_path(self) -> None:
        assert import_class("tests.samples.ClassWithMethodFoo") is ClassWithMethodFoo

    def test_colon_path(self) -> None:
        assert import_class("tests.samples:ClassWithMethodFoo") is ClassWithMethodFoo

    def test_nested_class(self) -> None:
        assert import_class("tests.samples.AbstractService.Options") is AbstractService.Options

    def test_builtin_name(self) -> None:
        assert import_class("int") is int

    @pytest.mark.parametrize(
        "path",
        [
            "",
            "no_such_builtin",
            "tests.samples.Missing",
            "no_such_package.module.Class",
            "tests.samples.AbstractService.LIMIT",
            "tests.samples",
            ".samples.ClassWithMethodFoo",
            "tests.samples:",
            "public function foo",
        ],
    )
    def test_unresolvable_returns_none(self, path: str) -> None:
        assert import_class(path) is None


class TestResolve:
    def test_class_resolves_to_itself(self, resolver: ReflectionResolver) -> None:
        assert resolver.resolve(ClassWithMethodFoo) is ClassWithMethodFoo

    def test_protocol_resolves(self, resolver: ReflectionResolver) -> None:
        assert resolver.resolve(InterfaceWithMethodFoo) is InterfaceWithMethodFoo

    def test_instance_resolves_to_type(self, resolver: ReflectionResolver) -> None:
        assert resolver.resolve(ClassWithMethodFoo()) is ClassWithMethodFoo

    def test_string_resolves_by_import(self, resolver: ReflectionResolver) -> None:
        assert resolver.resolve("tests.samples.MixinWithMethodFoo") is MixinWithMethodFoo

    def test_unknown_string_is_not_reflectable(self, resolver: ReflectionResolver) -> None:
        assert resolver.resolve("tests.samples.Missing") is None

    @pytest.mark.parametrize("subject", [None, True, 123, 1.5, 2j, b"foo", bytearray(b"x")])
    def test_scalars_are_not_reflectable(
        self,
        resolver: ReflectionResolver,
        subject: object,
    ) -> None:
        assert resolver.resolve(subject) is None

    def test_containers_resolve_to_type(self, resolver: ReflectionResolver) -> None:
        assert resolver.resolve([1, 2]) is list


class TestFindMethod:
    def test_missing_method(self, resolver: ReflectionResolver) -> None:
        assert resolver.find_method(ClassWithMethodFoo, "bar") is None

    def test_plain_method(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(ClassWithMethodFoo, "foo")
        assert method is not None
        assert method.name == "foo"
        assert method.is_public
        assert not method.is_static
        assert not method.is_abstract
        assert not method.is_final

    def test_protocol_method(self, resolver: ReflectionResolver) -> None:
        assert resolver.find_method(InterfaceWithMethodFoo, "foo") is not None

    def test_abstract_method(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(AbstractService, "handle")
        assert method is not None
        assert method.is_abstract

    def test_override_is_not_abstract(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(ConcreteService, "handle")
        assert method is not None
        assert not method.is_abstract

    def test_abstract_staticmethod(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(AbstractService, "build")
        assert method is not None
        assert method.is_static
        assert method.is_abstract

    def test_classmethod_is_static(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(AbstractService, "create")
        assert method is not None
        assert method.is_static

    def test_final_method(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(AbstractService, "run")
        assert method is not None
        assert method.is_final

    def test_final_staticmethod(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(AbstractService, "version")
        assert method is not None
        assert method.is_final
        assert method.is_static

    def test_final_abstract_method(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(FinalAbstractBase, "foo")
        assert method is not None
        assert method.is_abstract
        assert method.is_final

    def test_inherited_method(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(ConcreteService, "run")
        assert method is not None
        assert method.is_final

    def test_protected_method(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(AbstractService, "_prepare")
        assert method is not None
        assert method.is_protected

    def test_private_method_by_unmangled_name(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(ConcreteService, "__cleanup")
        assert method is not None
        assert method.is_private
        assert method.name == "__cleanup"

    @pytest.mark.parametrize("name", ["name", "LIMIT", "Options"])
    def test_non_methods(self, resolver: ReflectionResolver, name: str) -> None:
        assert resolver.find_method(AbstractService, name) is None

    def test_builtin_method(self, resolver: ReflectionResolver) -> None:
        method = resolver.find_method(str, "upper")
        assert method is not None
        assert method.is_public

    def test_object_methods_are_inherited(self, resolver: ReflectionResolver) -> None:
        assert resolver.find_method(ClassWithMethodFoo, "__init__") is not None


class TestDescribeAttribute:
    def test_non_callable(self) -> None:
        assert describe_attribute("x", 1, Visibility.PUBLIC) is None

    def test_class_is_not_method(self) -> None:
        assert describe_attribute("x", ClassWithMethodFoo, Visibility.PUBLIC) is None

    def test_staticmethod(self) -> None:
        method = describe_attribute("f", staticmethod(len), Visibility.PUBLIC)
        assert method is not None
        assert method.is_static
