"""Mutation endpoints. The caller owns the configuration and sends it along."""

from fastapi import APIRouter, HTTPException

from mezzanine.application import (
    MutationResult,
    apply_accessory_add,
    apply_accessory_remove,
    apply_accessory_update,
    apply_dimensions_update,
)
from mezzanine.application.config import config_to_domain, domain_to_config
from mezzanine.web.schemas import (
    AccessoryAddRequest,
    AccessoryUpdateRequest,
    ConfigurationRequest,
    DimensionsUpdateRequest,
    MutationResponseSchema,
)

router = APIRouter(tags=["accessories"])


def _to_response(result: MutationResult) -> MutationResponseSchema:
    return MutationResponseSchema(
        config=domain_to_config(result.configuration),
        note=result.note,
        railing_reduction=result.railing_reduction,
        removed_railings=list(result.removed_railings),
    )


def _invalid(error: ValueError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"error": str(error), "error_type": "invalid_parameters"},
    )


@router.post("/accessories", response_model=MutationResponseSchema)
async def add_accessory(request: AccessoryAddRequest) -> MutationResponseSchema:
    """Add an accessory, trimming railings if needed."""
    try:
        result = apply_accessory_add(
            config_to_domain(request.config), request.kind, request.params
        )
    except ValueError as e:
        raise _invalid(e) from e
    return _to_response(result)


@router.patch("/accessories/{accessory_id}", response_model=MutationResponseSchema)
async def update_accessory(
    accessory_id: str, request: AccessoryUpdateRequest
) -> MutationResponseSchema:
    """Change an accessory."""
    try:
        result = apply_accessory_update(
            config_to_domain(request.config), accessory_id, request.patch
        )
    except ValueError as e:
        raise _invalid(e) from e
    return _to_response(result)


@router.post("/accessories/{accessory_id}/remove", response_model=MutationResponseSchema)
async def remove_accessory(
    accessory_id: str, request: ConfigurationRequest
) -> MutationResponseSchema:
    """Remove an accessory."""
    return _to_response(apply_accessory_remove(config_to_domain(request.config), accessory_id))


@router.post("/dimensions", response_model=MutationResponseSchema)
async def update_dimensions(request: DimensionsUpdateRequest) -> MutationResponseSchema:
    """Resize the platform or change its load class."""
    try:
        result = apply_dimensions_update(
            config_to_domain(request.config),
            length=request.length,
            width=request.width,
            height=request.height,
            load_class=request.load_class,
        )
    except ValueError as e:
        raise _invalid(e) from e
    return _to_response(result)
