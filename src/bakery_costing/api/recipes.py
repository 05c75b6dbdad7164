"""Recipe endpoints."""

from fastapi import APIRouter, Depends, Request, status

from bakery_costing.api.dependencies import get_container, require_owner
from bakery_costing.api.schemas import RecipePayload, RecipePreviewPayload
from bakery_costing.api.serializers import preview_to_dict, recipe_to_dict

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("")
async def list_recipes(
    request: Request, owner_id: str = Depends(require_owner)
) -> dict[str, object]:
    """Return the owner's saved recipes sorted by name."""
    service = get_container(request).recipe_service
    recipes = service.list_recipes(owner_id)
    return {"recipes": [recipe_to_dict(item) for item in recipes]}


@router.post("/preview")
async def preview_recipe(
    payload: RecipePreviewPayload,
    request: Request,
    owner_id: str = Depends(require_owner),
) -> dict[str, object]:
    """Return the running cost of rows being edited."""
    service = get_container(request).recipe_service
    preview = service.preview(
        owner_id,
        [row.to_input() for row in payload.ingredients],
        payload.total_yield_weight,
    )
    return preview_to_dict(preview)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipePayload,
    request: Request,
    owner_id: str = Depends(require_owner),
) -> dict[str, object]:
    """Cost and save a new recipe."""
    service = get_container(request).recipe_service
    saved = service.save_recipe(
        owner_id,
        payload.name,
        [row.to_input() for row in payload.ingredients],
        payload.total_yield_weight,
    )
    return recipe_to_dict(saved)


@router.put("/{recipe_id}")
async def replace_recipe(
    recipe_id: str,
    payload: RecipePayload,
    request: Request,
    owner_id: str = Depends(require_owner),
) -> dict[str, object]:
    """Re-cost and save an existing recipe."""
    service = get_container(request).recipe_service
    saved = service.save_recipe(
        owner_id,
        payload.name,
        [row.to_input() for row in payload.ingredients],
        payload.total_yield_weight,
        recipe_id=recipe_id,
    )
    return recipe_to_dict(saved)


@router.delete("/{recipe_id}")
async def delete_recipe(
    recipe_id: str, request: Request, owner_id: str = Depends(require_owner)
) -> dict[str, str]:
    """Delete a recipe."""
    get_container(request).recipe_service.delete_recipe(owner_id, recipe_id)
    return {"status": "deleted"}
