"""
Tests del FieldNormalizer: alias historicos, saneamiento e idempotencia.
"""
import pytest

from app.application.services.field_normalizer import FieldNormalizer


@pytest.fixture
def normalizer() -> FieldNormalizer:
    return FieldNormalizer()


def test_person_spanish_aliases_map_to_canonical_fields(normalizer: FieldNormalizer):
    data = normalizer.normalize_person({
        "nombre": "Ana María Gómez",
        "tipoPersona": "Deportista",
        "identificacion": " 10 29 384 756 ",
        "correo": "  Ana.Gomez@Club.CO ",
        "telefono": " 300 123 4567 ",
        "fechaNacimiento": "2008-05-10",
        "equipo": "  Los   Halcones ",
        "estado": "Activo",
    })

    assert data == {
        "firstName": "Ana",
        "lastName": "María Gómez",
        "personType": "Athlete",
        "identification": "1029384756",
        "email": "ana.gomez@club.co",
        "phone": "300 123 4567",
        "birthDate": "2008-05-10",
        "team": "Los Halcones",
        "status": "Active",
    }


def test_canonical_field_wins_over_alias(normalizer: FieldNormalizer):
    data = normalizer.normalize_person({"firstName": "Luis", "first_name": "Otro", "lastName": "Díaz"})
    assert data["firstName"] == "Luis"


def test_full_name_only_fills_missing_parts(normalizer: FieldNormalizer):
    data = normalizer.normalize_person({"fullName": "Pedro Pablo Ruiz", "lastName": "Ruiz"})
    assert data["firstName"] == "Pedro"
    assert data["lastName"] == "Ruiz"


def test_unknown_and_system_fields_are_dropped(normalizer: FieldNormalizer):
    data = normalizer.normalize_person({
        "id": 99,
        "createdAt": "2020-01-01",
        "updatedAt": "2020-01-01",
        "isAdmin": True,
        "firstName": "Juan",
    })
    assert data == {"firstName": "Juan"}


def test_blank_optional_text_becomes_none_but_team_keeps_blank(normalizer: FieldNormalizer):
    data = normalizer.normalize_person({"email": "   ", "phone": "", "team": "   "})
    assert data["email"] is None
    assert data["phone"] is None
    assert data["team"] == ""


def test_non_mapping_input_returns_empty(normalizer: FieldNormalizer):
    assert normalizer.normalize_person(None) == {}
    assert normalizer.normalize_person(["firstName"]) == {}
    assert normalizer.normalize_category("Sub-15") == {}


def test_non_string_values_pass_through_untouched(normalizer: FieldNormalizer):
    data = normalizer.normalize_person({"firstName": 123, "age": "15", "email": 42})
    assert data == {"firstName": 123, "age": "15", "email": 42}


@pytest.mark.parametrize("raw", [
    {"nombreCompleto": "  Juan   Pérez ", "documento": "AB 12.345", "estado": "Inactivo"},
    {"firstName": " Sofía ", "lastName": "Restrepo", "email": " S@X.CO", "categoria": "Sub 15"},
])
def test_normalize_person_is_idempotent(normalizer: FieldNormalizer, raw):
    once = normalizer.normalize_person(raw)
    assert normalizer.normalize_person(once) == once


def test_category_aliases_and_sanitizing(normalizer: FieldNormalizer):
    data = normalizer.normalize_category({
        "nombre": "  Sub   15 ",
        "descripcion": "  Categoría juvenil  ",
        "edadMinima": "13",
        "max_age": 15,
        "publicar": True,
        "archivo": "",
        "estado": "Inactivo",
    })
    assert data == {
        "name": "Sub 15",
        "description": "Categoría juvenil",
        "minAge": "13",
        "maxAge": 15,
        "publish": True,
        "imageUrl": None,
        "status": "Inactive",
    }
    assert normalizer.normalize_category(data) == data


def test_normalize_query_drops_empty_filters(normalizer: FieldNormalizer):
    query = normalizer.normalize_query(
        {"page": "2", "limit": None, "search": "  ana ", "status": "", "personType": "Entrenador", "x": 1},
        FieldNormalizer.PERSON_QUERY_FIELDS,
    )
    assert query == {"page": "2", "search": "ana", "personType": "Trainer"}
