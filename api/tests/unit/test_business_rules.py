"""
Tests del BusinessRuleValidator.
"""
from datetime import date

import pytest

from app.application.services.business_rules import BusinessRuleValidator
from app.domain.entities.sports_category import SportsCategory
from app.domain.entities.temporary_person import TemporaryPerson
from app.domain.entities.validation import RuleSeverity
from app.shared.constants.person_constants import PersonType, RecordStatus


MINOR_ID_MESSAGE = "Las personas menores de 18 años generalmente tienen tarjeta de identidad, no cédula"


@pytest.fixture
def rules() -> BusinessRuleValidator:
    return BusinessRuleValidator()


def _stored_person(**overrides) -> TemporaryPerson:
    data = dict(
        id=7,
        first_name="Juan",
        last_name="Pérez",
        person_type=PersonType.ATHLETE,
        identification="1029384756",
        birth_date=date(2000, 1, 1),
        age=26,
        status=RecordStatus.ACTIVE,
    )
    data.update(overrides)
    return TemporaryPerson(**data)


def test_age_within_one_year_of_birth_date_is_accepted(rules, fixed_today):
    # Edad calculada: 16
    for age in (15, 16, 17):
        outcome = rules.evaluate_person({"personType": PersonType.ATHLETE, "birthDate": date(2010, 3, 1), "age": age})
        assert not outcome.is_blocking


def test_age_differing_more_than_one_year_is_rejected(rules, fixed_today):
    outcome = rules.evaluate_person({"personType": PersonType.ATHLETE, "birthDate": date(2010, 3, 1), "age": 18})

    assert outcome.is_blocking
    assert outcome.errors[0].field == "age"
    assert outcome.errors[0].message == "La edad proporcionada no coincide con la fecha de nacimiento"


def test_age_alone_on_update_is_checked_against_stored_birth_date(rules, fixed_today):
    stored = _stored_person(birth_date=date(2010, 3, 1), age=16)

    contradicting = rules.evaluate_person({"age": 60}, stored)
    coherent = rules.evaluate_person({"age": 17}, stored)

    assert [error.field for error in contradicting.errors] == ["age"]
    assert not coherent.is_blocking


def test_age_alone_on_update_without_stored_birth_date_is_accepted(rules):
    outcome = rules.evaluate_person({"age": 30}, _stored_person(birth_date=None, age=29))

    assert not outcome.is_blocking


@pytest.mark.parametrize("person_type", [PersonType.ATHLETE, PersonType.TRAINER])
def test_blank_team_or_category_rejected_for_athletes_and_trainers(rules, person_type):
    outcome = rules.evaluate_person({"personType": person_type, "team": "", "category": " "})
    assert [error.field for error in outcome.errors] == ["team", "category"]


def test_blank_team_allowed_for_participants(rules):
    outcome = rules.evaluate_person({"personType": PersonType.PARTICIPANT, "team": ""})
    assert not outcome.is_blocking


def test_minimum_age_applies_to_every_person_type(rules):
    athlete = rules.evaluate_person({"personType": PersonType.ATHLETE, "age": 4})
    participant = rules.evaluate_person({"personType": PersonType.PARTICIPANT, "age": 4})

    assert athlete.errors[0].message == "Los deportistas y entrenadores deben tener al menos 5 años de edad"
    assert participant.errors[0].message == "Los participantes deben tener al menos 5 años de edad"


def test_minimum_age_uses_stored_record_on_update(rules):
    existing = _stored_person(birth_date=None, age=4)
    outcome = rules.evaluate_person({"phone": "3001234567"}, existing)
    assert outcome.errors[0].field == "age"


def test_minor_with_long_identification_is_a_warning_by_default(rules, fixed_today):
    outcome = rules.evaluate_person({
        "personType": PersonType.ATHLETE,
        "birthDate": date(2012, 1, 1),
        "identification": "123456789012",
    })

    assert not outcome.is_blocking
    assert outcome.warnings == [MINOR_ID_MESSAGE]


def test_minor_with_long_identification_is_an_error_in_strict_mode(fixed_today):
    outcome = BusinessRuleValidator.strict().evaluate_person({
        "personType": PersonType.ATHLETE,
        "birthDate": date(2012, 1, 1),
        "identification": "123456789012",
    })

    assert outcome.is_blocking
    assert outcome.errors[0].field == "identification"
    assert outcome.errors[0].message == MINOR_ID_MESSAGE
    assert BusinessRuleValidator.lenient().minor_identification_severity == RuleSeverity.WARNING


def test_minor_identification_rule_boundaries(fixed_today):
    strict = BusinessRuleValidator.strict()
    eleven_chars = strict.evaluate_person({"birthDate": date(2012, 1, 1), "identification": "12345678901"})
    adult = strict.evaluate_person({"birthDate": date(2008, 6, 15), "identification": "123456789012"})

    assert not eleven_chars.is_blocking
    assert not adult.is_blocking


def test_minor_identification_rule_only_runs_when_touched(fixed_today):
    existing = _stored_person(birth_date=date(2012, 1, 1), age=14, identification="123456789012")
    strict = BusinessRuleValidator.strict()

    untouched = strict.evaluate_person({"phone": "3001234567"}, existing)
    touched = strict.evaluate_person({"identification": "123456789013"}, existing)

    assert not untouched.is_blocking
    assert touched.is_blocking


def test_update_warnings_for_critical_changes(rules):
    existing = _stored_person()
    outcome = rules.evaluate_person(
        {"status": RecordStatus.INACTIVE, "personType": PersonType.TRAINER},
        existing,
    )

    assert not outcome.is_blocking
    assert outcome.warnings == [
        "Cambiar el estado a Inactivo puede afectar la participación en eventos",
        "Cambiar el tipo de persona puede requerir actualizar información adicional",
    ]


def test_no_warnings_when_values_do_not_change(rules):
    existing = _stored_person(status=RecordStatus.INACTIVE)
    outcome = rules.evaluate_person(
        {"status": RecordStatus.INACTIVE, "personType": PersonType.ATHLETE},
        existing,
    )
    assert outcome.warnings == []


def test_trainer_with_personal_email_gets_warning(rules):
    outcome = rules.evaluate_person({"personType": PersonType.TRAINER, "email": "profe@gmail.com"})
    institutional = rules.evaluate_person({"personType": PersonType.TRAINER, "email": "profe@club.edu.co"})

    assert len(outcome.warnings) == 1
    assert institutional.warnings == []


def test_category_range_checked_on_create(rules):
    outcome = rules.evaluate_category({"name": "Sub-10", "minAge": 10, "maxAge": 8})
    equal = rules.evaluate_category({"name": "Sub-10", "minAge": 10, "maxAge": 10})

    assert outcome.errors[0].field == "maxAge"
    assert equal.is_blocking


def test_category_range_merges_stored_bounds_on_update(rules):
    existing = SportsCategory(id=1, name="Sub-15", min_age=13, max_age=15)

    assert rules.evaluate_category({"minAge": 15}, existing).is_blocking
    assert not rules.evaluate_category({"minAge": 14}, existing).is_blocking
    assert rules.evaluate_category({"maxAge": 12}, existing).is_blocking


@pytest.mark.parametrize("configured, expected", [("warning", RuleSeverity.WARNING), ("ERROR", RuleSeverity.ERROR)])
def test_configured_severity_selects_rule_profile(monkeypatch, configured, expected):
    from app.api.v1.dependencies.use_case_deps import get_business_rules
    from app.core.config import settings
    monkeypatch.setattr(settings, "MINOR_IDENTIFICATION_SEVERITY", configured)

    assert get_business_rules().minor_identification_severity == expected
