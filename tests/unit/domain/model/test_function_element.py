"""Tests for domain/model/function_element.py."""

import pytest

from calltree.domain.model.function_element import (
    ExtendedMethodInfo,
    FunctionElement,
    FunctionElementList,
)
from calltree.domain.model.method import Method


def _method() -> Method:
    return Method(
        name="exec",
        declaring_class="java.lang.Runtime",
        return_type="java.lang.Process",
        parameter_types=("java.lang.String",),
        source_line=42,
        is_static=False,
        exceptions=("java.io.IOException",),
    )


def _plain(name: str) -> Method:
    return Method(name=name, declaring_class="Foo")


class TestFunctionElementFromMethod:
    """Tests for FunctionElement.from_method()."""

    def test_base_information(self) -> None:
        element = FunctionElement.from_method(_method(), extended=False)

        assert element.function_name == "[java.lang.Runtime].exec(java.lang.String)"
        assert element.source_file == "java.lang.Runtime"
        assert element.line_number == 42
        assert element.return_type == "java.lang.Process"
        assert element.arg_types == ("java.lang.String",)
        assert element.arg_count == 1
        assert element.extended is None

    def test_extended_information(self) -> None:
        element = FunctionElement.from_method(_method(), extended=True)

        assert element.extended == ExtendedMethodInfo(
            declaring_class="java.lang.Runtime",
            is_concrete=True,
            is_public=True,
            is_static=False,
            exceptions=("java.io.IOException",),
        )

    def test_unknown_source_line(self) -> None:
        element = FunctionElement.from_method(_plain("m"), extended=False)
        assert element.line_number == -1


class TestFunctionElementFailFirst:
    """Tests for FAIL-FIRST validation in FunctionElement."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="function_name must not be empty"):
            FunctionElement(function_name="", source_file="Foo", line_number=1, return_type="void")

    @pytest.mark.parametrize("line", [0, -2])
    def test_invalid_line_raises(self, line: int) -> None:
        with pytest.raises(ValueError, match="line_number must be >= 1 or -1"):
            FunctionElement(
                function_name="[Foo].m()",
                source_file="Foo",
                line_number=line,
                return_type="void",
            )


class TestFunctionElementList:
    """Tests for FunctionElementList."""

    def test_starts_empty(self) -> None:
        assert len(FunctionElementList()) == 0

    def test_appends_in_order(self) -> None:
        first = FunctionElement.from_method(_plain("a"), extended=False)
        second = FunctionElement.from_method(_plain("b"), extended=False)
        elements = FunctionElementList()

        elements.add_function_elements([first])
        elements.add_function_elements([second, first])

        assert elements.elements == (first, second, first)
        assert elements.function_names == ("[Foo].a()", "[Foo].b()", "[Foo].a()")
        assert list(elements) == [first, second, first]

    def test_elements_is_snapshot(self) -> None:
        elements = FunctionElementList()
        snapshot = elements.elements
        elements.add_function_elements(
            [FunctionElement.from_method(_plain("a"), extended=False)]
        )
        assert snapshot == ()
        assert len(elements) == 1
