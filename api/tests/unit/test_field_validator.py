"""
Tests del FieldValidator: reglas por campo, acumulacion de errores y
validacion parcial en actualizaciones.
"""
from datetime import date

import pytest

from app.application.services.field_validator import EntityKind, FieldValidator
from app.shared.constants.person_constants import PersonType, RecordStatus


@pytest.fixture
def validator() -> FieldValidator:
    return FieldValidator()


def _person(**overrides):
    data = {"firstName": "Juan", "lastName": "Pérez", "personType": "Athlete"}
    data.update(overrides)
    return data


def _fields(result):
    return [error.field for error in result.errors]


def test_valid_person_returns_typed_values(validator, fixed_today):
    result = validator.validate(
        _person(birthDate="2010-03-01", age="16", documentTypeId="2", status="Inactive"),
        EntityKind.TEMPORARY_PERSON,
    )

    assert result.is_valid
    assert result.values["personType"] is PersonType.ATHLETE
    assert result.values["birthDate"] == date(2010, 3, 1)
    assert result.values["age"] == 16
    assert result.values["documentTypeId"] == 2
    assert result.values["status"] is RecordStatus.INACTIVE


def test_missing_required_fields_are_all_reported(validator):
    result = validator.validate({}, EntityKind.TEMPORARY_PERSON)

    assert _fields(result) == ["firstName", "lastName", "personType"]
    assert result.errors[0].message == "El nombre es requerido"


def test_errors_accumulate_across_fields_without_short_circuit(validator, fixed_today):
    result = validator.validate(
        _person(firstName="J", email="no-es-email", phone="abc", age=3, identification="12"),
        EntityKind.TEMPORARY_PERSON,
    )

    assert set(_fields(result)) == {"firstName", "identification", "email", "phone", "age"}


def test_only_first_failing_rule_is_reported_per_field(validator):
    # "1" es corto y ademas contiene un caracter invalido: solo se reporta la longitud
    result = validator.validate(_person(identification="1#"), EntityKind.TEMPORARY_PERSON)

    assert len(result.errors) == 1
    assert result.errors[0].message == "La identificación debe tener entre 6 y 50 caracteres"
    assert result.errors[0].value == "1#"


def test_names_accept_accented_letters_only(validator):
    assert validator.validate(_person(firstName="José Ñúñez"), EntityKind.TEMPORARY_PERSON).is_valid
    result = validator.validate(_person(lastName="P3rez"), EntityKind.TEMPORARY_PERSON)
    assert result.errors[0].message == "El apellido solo puede contener letras y espacios"


@pytest.mark.parametrize("value", ["athlete", "Deportista", 1, "Coach"])
def test_person_type_requires_exact_canonical_value(validator, value):
    result = validator.validate(_person(personType=value), EntityKind.TEMPORARY_PERSON)
    assert _fields(result) == ["personType"]


def test_birth_date_bounds(validator, fixed_today):
    too_old = validator.validate(_person(birthDate="1906-06-14"), EntityKind.TEMPORARY_PERSON)
    oldest = validator.validate(_person(birthDate="1906-06-15"), EntityKind.TEMPORARY_PERSON)
    too_young = validator.validate(_person(birthDate="2021-06-16"), EntityKind.TEMPORARY_PERSON)
    youngest = validator.validate(_person(birthDate="2021-06-15"), EntityKind.TEMPORARY_PERSON)
    malformed = validator.validate(_person(birthDate="15/06/2010"), EntityKind.TEMPORARY_PERSON)

    assert not too_old.is_valid
    assert oldest.is_valid
    assert too_young.errors[0].message == "La persona debe tener al menos 5 años de edad"
    assert youngest.is_valid
    assert malformed.errors[0].message == "La fecha de nacimiento debe tener un formato válido (YYYY-MM-DD)"


def test_optional_empty_values_become_none(validator):
    result = validator.validate(_person(email=None, age=None), EntityKind.TEMPORARY_PERSON)

    assert result.is_valid
    assert result.values["email"] is None
    assert result.values["age"] is None


def test_blank_team_is_kept_for_business_rules(validator):
    result = validator.validate(_person(team=""), EntityKind.TEMPORARY_PERSON)
    assert result.values["team"] == ""


def test_partial_validation_skips_missing_required_fields(validator):
    result = validator.validate({"phone": "300 123 4567"}, EntityKind.TEMPORARY_PERSON, partial=True)

    assert result.is_valid
    assert result.values == {"phone": "300 123 4567"}


def test_partial_validation_rejects_blank_required_field(validator):
    result = validator.validate({"firstName": "  "}, EntityKind.TEMPORARY_PERSON, partial=True)
    assert result.errors[0].message == "El nombre es requerido"


def test_category_rules(validator):
    valid = validator.validate(
        {"name": "Sub-15", "minAge": "13", "maxAge": 15, "publish": "true"},
        EntityKind.SPORTS_CATEGORY,
    )
    invalid = validator.validate(
        {"name": "AB", "description": "corta", "minAge": 4, "maxAge": 81, "publish": "si"},
        EntityKind.SPORTS_CATEGORY,
    )

    assert valid.is_valid
    assert valid.values == {"name": "Sub-15", "minAge": 13, "maxAge": 15, "publish": True}
    assert _fields(invalid) == ["name", "description", "minAge", "maxAge", "publish"]


def test_query_validation(validator):
    valid = validator.validate_query({"page": "2", "limit": "100", "personType": "Trainer"}, EntityKind.TEMPORARY_PERSON)
    invalid = validator.validate_query({"page": "0", "limit": "101", "search": "x" * 101}, EntityKind.TEMPORARY_PERSON)
    category = validator.validate_query({"personType": "Trainer"}, EntityKind.SPORTS_CATEGORY)

    assert valid.values == {"page": 2, "limit": 100, "personType": PersonType.TRAINER}
    assert _fields(invalid) == ["page", "limit", "search"]
    # personType no es un filtro de categorias: se ignora
    assert category.values == {}
