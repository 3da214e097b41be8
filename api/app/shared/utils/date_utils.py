from datetime import date, datetime
from typing import Any, Optional


def today() -> date:
    """Fecha actual; punto unico para poder fijarla en tests."""
    return date.today()


def calculate_age(birth_date: date, reference: Optional[date] = None) -> int:
    """
    Calcula la edad en anos cumplidos.
    Resta un ano si el mes/dia de referencia es anterior al de nacimiento;
    si el cumpleanos es exactamente hoy no se resta.
    """
    reference = reference or today()
    age = reference.year - birth_date.year
    if (reference.month, reference.day) < (birth_date.month, birth_date.day):
        age -= 1
    return max(age, 0)


def years_before(reference: date, years: int) -> date:
    """
    Retorna la fecha `years` anos antes de `reference`.
    Un 29 de febrero cae al 28 si el ano destino no es bisiesto.
    """
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Convierte un valor a date. Acepta date, datetime o texto ISO
    (YYYY-MM-DD, opcionalmente con hora). Retorna None si no es valido.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if len(text) < 10 or (len(text) > 10 and text[10] not in ("T", " ")):
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None
