"""
Controlador del ciclo de vida de los registros.

No guarda estado propio: evalua las guardas contra el registro leido
inmediatamente antes de la operacion.

    Active <-> Inactive      (libre, via actualizacion)
    Inactive -> [eliminado]  (irreversible)
"""
from typing import Dict, Set

from loguru import logger

from app.domain.entities.sports_category import SportsCategory
from app.domain.entities.temporary_person import TemporaryPerson
from app.shared.constants.person_constants import RecordStatus
from app.shared.exceptions.domain import StateTransitionException


TRANSITIONS: Dict[RecordStatus, Set[RecordStatus]] = {
    RecordStatus.ACTIVE: {RecordStatus.ACTIVE, RecordStatus.INACTIVE},
    RecordStatus.INACTIVE: {RecordStatus.ACTIVE, RecordStatus.INACTIVE},
}

DELETABLE_FROM = RecordStatus.INACTIVE


class LifecycleController:
    """Guardas de transicion de estado y de eliminacion."""

    def ensure_transition(self, entity_name: str, current: RecordStatus, target: RecordStatus) -> None:
        """
        Verifica que el cambio de estado este permitido.

        Raises:
            StateTransitionException: Si la transicion no existe en la tabla
        """
        if target not in TRANSITIONS.get(current, set()):
            raise StateTransitionException(
                message=f"{entity_name}: no se permite pasar de \"{current.value}\" a \"{target.value}\"",
                current_status=current.value,
            )

    def ensure_person_deletable(self, person: TemporaryPerson) -> None:
        """
        Una persona solo se elimina fisicamente desde Inactive.

        Raises:
            StateTransitionException: Si la persona sigue activa
        """
        if person.status != DELETABLE_FROM:
            logger.warning(f"Eliminacion rechazada: persona {person.id} en estado {person.status.value}")
            raise StateTransitionException(
                message=(
                    f"No se puede eliminar una persona temporal con estado \"{person.status.value}\". "
                    f"Primero cambie el estado a \"{DELETABLE_FROM.value}\" y luego inténtelo de nuevo."
                ),
                current_status=person.status.value,
                blockers={"status": person.status.value},
            )

    def ensure_category_deletable(self, category: SportsCategory) -> None:
        """
        Una categoria solo se elimina si esta inactiva y sin inscripciones
        ni participantes vinculados.

        Raises:
            StateTransitionException: Con el estado y/o los conteos que bloquean
        """
        reasons = []
        blockers = {}

        if category.status != DELETABLE_FROM:
            reasons.append(
                f"No se pueden eliminar categorías con estado \"{category.status.value}\". "
                f"Primero cambie el estado a \"{DELETABLE_FROM.value}\"."
            )
            blockers["status"] = category.status.value

        if category.has_usage():
            reasons.append(
                f"No se puede eliminar la categoría \"{category.name}\" porque tiene "
                f"{category.inscriptions_count} inscripción(es) y "
                f"{category.participants_count} participante(s) asociados."
            )
            blockers["inscriptions"] = category.inscriptions_count
            blockers["participants"] = category.participants_count

        if reasons:
            logger.warning(f"Eliminacion rechazada: categoria {category.id} ({blockers})")
            raise StateTransitionException(
                message=" ".join(reasons),
                current_status=category.status.value,
                blockers=blockers,
            )
