from typing import List

from fastapi import APIRouter, Depends

from app.application.dto.common_dto import ApiResponseDTO
from app.application.dto.temporary_person_dto import DocumentTypeDTO
from app.application.use_cases.temporary_person_use_cases import TemporaryPersonUseCases
from app.api.v1.dependencies.use_case_deps import get_temporary_person_use_cases

router = APIRouter(prefix="/document-types", tags=["Document Types"])


@router.get("/", response_model=ApiResponseDTO[List[DocumentTypeDTO]], response_model_exclude_none=True)
async def list_document_types(
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Catalogo de tipos de documento de identidad.
    """
    reference = await use_cases.get_reference_data()
    return ApiResponseDTO(data=reference.data.document_types)
