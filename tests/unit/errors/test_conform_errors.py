# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
import pytest

from conform.errors import (
    INTERNAL,
    INTERNAL_ERROR,
    ConformError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)
from conform.template.errors import (
    TEMPLATE,
    TEMPLATE_CONFIGURATION_ERROR,
    TEMPLATE_NO_VARIANTS,
    TEMPLATE_UNRESOLVED_PROPERTY_TYPE,
    TemplateConfigurationError,
    TemplateError,
    TemplateInternalError,
)


class Sample:
    pass


def test_conform_error_cannot_be_instantiated_directly() -> None:
    with pytest.raises(TypeError):
        ConformError("boom", code=INTERNAL_ERROR)


def test_code_must_be_error_code() -> None:
    with pytest.raises(TypeError):
        TemplateError("boom", code="TEMPLATE_ERROR")


def test_configuration_error_context() -> None:
    error = TemplateConfigurationError(
        "bad variant",
        type_=Sample,
        variant=int,
        field_name="payment",
        code=TEMPLATE_NO_VARIANTS,
        extra_key="value",
    )

    assert error.context == {
        "type": f"{__name__}.Sample",
        "variant": "builtins.int",
        "field_name": "payment",
        "extra_key": "value",
    }
    assert error.severity is ErrorSeverity.FATAL
    assert error.category == TEMPLATE
    assert str(error) == "TEMPLATE_NO_VARIANTS: bad variant"
    assert isinstance(error, TemplateError)


def test_configuration_error_default_code() -> None:
    assert TemplateConfigurationError("x").code == TEMPLATE_CONFIGURATION_ERROR


def test_internal_error() -> None:
    error = TemplateInternalError("unreachable")
    assert error.code == TEMPLATE_UNRESOLVED_PROPERTY_TYPE
    assert error.category == INTERNAL
    assert error.severity is ErrorSeverity.CRITICAL


def test_to_dict() -> None:
    error = TemplateConfigurationError("bad", field_name="f", hint=1)
    data = error.to_dict()
    assert data["code"] == "TEMPLATE_CONFIGURATION_ERROR"
    assert data["category"] == "TEMPLATE"
    assert data["severity"] == "FATAL"
    assert data["context"] == {"field_name": "f", "hint": 1}
    assert "timestamp" in data


class TestRegisteredCodes:
    def test_codes_are_interned(self) -> None:
        assert ErrorCode.get_or_create("TEMPLATE_NO_VARIANTS", TEMPLATE) is TEMPLATE_NO_VARIANTS

    def test_categories_are_interned(self) -> None:
        assert ErrorCategory.get_or_create("TEMPLATE") is TEMPLATE

    def test_code_cannot_move_to_another_category(self) -> None:
        with pytest.raises(ValueError):
            ErrorCode.get_or_create("TEMPLATE_NO_VARIANTS", INTERNAL)

    def test_default_category_is_internal(self) -> None:
        assert ErrorCode("UNREGISTERED").category == INTERNAL
