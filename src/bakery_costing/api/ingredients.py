"""Ingredient price list endpoints."""

from fastapi import APIRouter, Depends, Request, status

from bakery_costing.api.dependencies import get_container, require_owner
from bakery_costing.api.schemas import IngredientPayload
from bakery_costing.api.serializers import ingredient_to_dict

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.get("")
async def list_ingredients(
    request: Request, owner_id: str = Depends(require_owner)
) -> dict[str, object]:
    """Return the owner's ingredients sorted by name."""
    service = get_container(request).ingredient_service
    return {
        "ingredients": [
            ingredient_to_dict(item) for item in service.list_ingredients(owner_id)
        ]
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_ingredient(
    payload: IngredientPayload,
    request: Request,
    owner_id: str = Depends(require_owner),
) -> dict[str, object]:
    """Create an ingredient."""
    service = get_container(request).ingredient_service
    created = service.add_ingredient(
        owner_id, payload.name, payload.unit, payload.price_per_unit
    )
    return ingredient_to_dict(created)


@router.put("/{ingredient_id}")
async def edit_ingredient(
    ingredient_id: str,
    payload: IngredientPayload,
    request: Request,
    owner_id: str = Depends(require_owner),
) -> dict[str, object]:
    """Update an ingredient in place."""
    service = get_container(request).ingredient_service
    updated = service.edit_ingredient(
        owner_id, ingredient_id, payload.name, payload.unit, payload.price_per_unit
    )
    return ingredient_to_dict(updated)


@router.delete("/{ingredient_id}")
async def delete_ingredient(
    ingredient_id: str, request: Request, owner_id: str = Depends(require_owner)
) -> dict[str, str]:
    """Delete an ingredient; recipes using it keep their rows."""
    get_container(request).ingredient_service.delete_ingredient(owner_id, ingredient_id)
    return {"status": "deleted"}
