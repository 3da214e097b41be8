"""
Normalizador de registros de entrada.

Reconcilia las distintas formas historicas de enviar una persona
temporal o una categoria deportiva en una unica forma canonica:
- Formularios antiguos en espanol (nombre, telefono, fechaNacimiento, estado...)
- Nombre completo en un solo campo vs nombre y apellido separados
- Etiquetas localizadas (Activo, Deportista) vs valores canonicos (Active, Athlete)
- Claves snake_case de integraciones internas

El nombre canonico siempre gana; el alias solo se usa si el canonico
no esta presente. Este componente nunca lanza errores: lo que no se
puede mapear se descarta y los valores invalidos se dejan pasar para
que el FieldValidator los reporte. Normalizar un registro ya canonico
lo retorna sin cambios.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Mapping

from app.shared.constants.person_constants import PERSON_TYPE_LABELS, STATUS_LABELS


_WHITESPACE = re.compile(r"\s+")


class FieldNormalizer:
    """
    Normalizador de campos para personas temporales y categorias.

    Uso:
        normalizer = FieldNormalizer()
        canonical = normalizer.normalize_person(raw_body)
    """

    PERSON_FIELDS = (
        "firstName", "lastName", "personType", "identification", "email",
        "phone", "address", "birthDate", "age", "team", "category",
        "status", "documentTypeId",
    )

    PERSON_ALIASES = {
        "first_name": "firstName",
        "last_name": "lastName",
        "apellido": "lastName",
        "apellidos": "lastName",
        "person_type": "personType",
        "tipoPersona": "personType",
        "identificacion": "identification",
        "documento": "identification",
        "correo": "email",
        "telefono": "phone",
        "direccion": "address",
        "birth_date": "birthDate",
        "fechaNacimiento": "birthDate",
        "edad": "age",
        "equipo": "team",
        "categoria": "category",
        "estado": "status",
        "document_type_id": "documentTypeId",
        "tipoDocumentoId": "documentTypeId",
    }

    # Campos con el nombre completo que se divide en nombre + apellido
    FULL_NAME_ALIASES = ("fullName", "full_name", "nombreCompleto", "nombre")

    CATEGORY_FIELDS = (
        "name", "description", "minAge", "maxAge", "status", "publish", "imageUrl",
    )

    CATEGORY_ALIASES = {
        "nombre": "name",
        "descripcion": "description",
        "min_age": "minAge",
        "edadMinima": "minAge",
        "max_age": "maxAge",
        "edadMaxima": "maxAge",
        "estado": "status",
        "publicar": "publish",
        "image_url": "imageUrl",
        "archivo": "imageUrl",
        "imagen": "imageUrl",
    }

    PERSON_QUERY_FIELDS = ("page", "limit", "search", "status", "personType")
    CATEGORY_QUERY_FIELDS = ("page", "limit", "search", "status")

    # Campos opcionales donde un texto vacio significa "sin valor"
    PERSON_NULLABLE_TEXT = ("identification", "email", "phone", "address")
    CATEGORY_NULLABLE_TEXT = ("description", "imageUrl")

    def normalize_person(self, raw: Any) -> Dict[str, Any]:
        """
        Convierte un registro de persona en cualquiera de sus formas
        historicas a la forma canonica, ya saneada.
        """
        if not isinstance(raw, Mapping):
            return {}

        data = self._pick(raw, self.PERSON_FIELDS, self.PERSON_ALIASES)
        self._split_full_name(raw, data)
        self._translate_labels(data)

        for key in ("firstName", "lastName", "address", "team", "category"):
            if key in data:
                data[key] = self._collapse(data[key])

        if isinstance(data.get("email"), str):
            data["email"] = data["email"].strip().lower()
        if isinstance(data.get("identification"), str):
            data["identification"] = _WHITESPACE.sub("", data["identification"])
        if isinstance(data.get("phone"), str):
            data["phone"] = data["phone"].strip()

        return self._blank_to_none(data, self.PERSON_NULLABLE_TEXT)

    def normalize_category(self, raw: Any) -> Dict[str, Any]:
        """Convierte un registro de categoria a la forma canonica, ya saneada."""
        if not isinstance(raw, Mapping):
            return {}

        data = self._pick(raw, self.CATEGORY_FIELDS, self.CATEGORY_ALIASES)
        self._translate_labels(data)

        if "name" in data:
            data["name"] = self._collapse(data["name"])
        for key in ("description", "imageUrl"):
            if isinstance(data.get(key), str):
                data[key] = data[key].strip()

        return self._blank_to_none(data, self.CATEGORY_NULLABLE_TEXT)

    def normalize_query(self, raw: Any, fields: Iterable[str]) -> Dict[str, Any]:
        """
        Normaliza parametros de consulta (paginacion y filtros).
        Los filtros vacios se descartan.
        """
        if not isinstance(raw, Mapping):
            return {}

        data = {key: raw[key] for key in fields if key in raw}
        if isinstance(data.get("search"), str):
            data["search"] = data["search"].strip()
        self._translate_labels(data)
        return {k: v for k, v in data.items() if v is not None and v != ""}

    @staticmethod
    def _pick(raw: Mapping, fields: Iterable[str], aliases: Dict[str, str]) -> Dict[str, Any]:
        data = {key: raw[key] for key in fields if key in raw}
        for alias, target in aliases.items():
            if target not in data and alias in raw:
                data[target] = raw[alias]
        return data

    def _split_full_name(self, raw: Mapping, data: Dict[str, Any]) -> None:
        """Completa nombre/apellido ausentes a partir de un nombre completo."""
        if "firstName" in data and "lastName" in data:
            return

        for alias in self.FULL_NAME_ALIASES:
            value = raw.get(alias)
            if not isinstance(value, str) or not value.strip():
                continue
            parts = value.split()
            if "firstName" not in data:
                data["firstName"] = parts[0]
            if "lastName" not in data and len(parts) > 1:
                data["lastName"] = " ".join(parts[1:])
            return

    @staticmethod
    def _translate_labels(data: Dict[str, Any]) -> None:
        status = data.get("status")
        if isinstance(status, str) and status.strip() in STATUS_LABELS:
            data["status"] = STATUS_LABELS[status.strip()]

        person_type = data.get("personType")
        if isinstance(person_type, str) and person_type.strip() in PERSON_TYPE_LABELS:
            data["personType"] = PERSON_TYPE_LABELS[person_type.strip()]

    @staticmethod
    def _collapse(value: Any) -> Any:
        if isinstance(value, str):
            return _WHITESPACE.sub(" ", value).strip()
        return value

    @staticmethod
    def _blank_to_none(data: Dict[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
        for key in keys:
            if data.get(key) == "":
                data[key] = None
        return data
