"""Field metadata routes: classification, dimensions, and cached values."""

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.orm import Session

from fieldmeta.db.dependencies import get_db
from fieldmeta.schemas.common import ApiResponse, FieldErrorsResponse
from fieldmeta.schemas.dimension import DimensionRead, DimensionUpsertRequest
from fieldmeta.schemas.field import FieldRead, FieldUpdateRequest, FieldWithDimensionRead
from fieldmeta.schemas.field_values import FieldValuesRead, FieldValuesUpdateRequest
from fieldmeta.services.dimensions import delete_dimension, upsert_dimension
from fieldmeta.services.errors import (
    FieldMetadataError,
    FieldNotFoundError,
    FieldValidationError,
)
from fieldmeta.services.field_values import (
    field_values_to_pairs,
    get_field_values,
    upsert_field_values,
)
from fieldmeta.services.fields import get_field_detail, update_field

router = APIRouter(prefix="/fields")


def _http_error(exc: FieldMetadataError) -> HTTPException:
    if isinstance(exc, FieldValidationError):
        return HTTPException(
            status_code=400,
            detail=FieldErrorsResponse(errors={exc.field: exc.message}).model_dump(),
        )
    if isinstance(exc, FieldNotFoundError):
        return HTTPException(status_code=404, detail=f"{exc.kind} not found")
    return HTTPException(status_code=500, detail=str(exc))


# Virtual fields of saved questions are addressed as `field-literal,<name>,type/<type>`.
@router.get(
    "/field-literal,{field_name},type/{field_type}/values",
    response_model=ApiResponse[FieldValuesRead],
)
def get_field_literal_values(field_name: str, field_type: str) -> ApiResponse[FieldValuesRead]:
    """Return the empty values payload for a virtual field."""

    return ApiResponse(data=FieldValuesRead(values=[]))


@router.get("/{field_id}", response_model=ApiResponse[FieldWithDimensionRead])
def get_field_view(
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[FieldWithDimensionRead]:
    """Get one field with its dimension."""

    try:
        return ApiResponse(data=get_field_detail(db, field_id))
    except FieldMetadataError as exc:
        raise _http_error(exc) from exc


@router.put("/{field_id}", response_model=ApiResponse[FieldRead])
def put_field(
    payload: FieldUpdateRequest,
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[FieldRead]:
    """Update classification and descriptive attributes of one field."""

    try:
        updated = update_field(db, field_id, payload.to_changes())
    except FieldMetadataError as exc:
        raise _http_error(exc) from exc
    return ApiResponse(data=FieldRead.model_validate(updated))


@router.post("/{field_id}/dimension", response_model=ApiResponse[DimensionRead])
def post_dimension(
    payload: DimensionUpsertRequest,
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[DimensionRead]:
    """Set the dimension for a field."""

    try:
        dimension = upsert_dimension(db, field_id, payload)
    except FieldMetadataError as exc:
        raise _http_error(exc) from exc
    return ApiResponse(data=DimensionRead.model_validate(dimension))


@router.delete("/{field_id}/dimension", status_code=204, response_class=Response)
def remove_dimension(
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Response:
    """Remove the dimension associated with a field."""

    try:
        delete_dimension(db, field_id)
    except FieldMetadataError as exc:
        raise _http_error(exc) from exc
    return Response(status_code=204)


@router.get("/{field_id}/values", response_model=ApiResponse[FieldValuesRead])
def get_values(
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[FieldValuesRead]:
    """Return cached distinct values of a field as `[value]` or `[value, label]` pairs."""

    try:
        return ApiResponse(data=get_field_values(db, field_id))
    except FieldMetadataError as exc:
        raise _http_error(exc) from exc


@router.post("/{field_id}/values", response_model=ApiResponse[FieldValuesRead])
def post_values(
    payload: FieldValuesUpdateRequest,
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[FieldValuesRead]:
    """Replace the cached values and optional human-readable labels of a field."""

    try:
        stored = upsert_field_values(db, field_id, payload.values)
    except FieldMetadataError as exc:
        raise _http_error(exc) from exc
    return ApiResponse(data=FieldValuesRead(field_id=field_id, values=field_values_to_pairs(stored)))
