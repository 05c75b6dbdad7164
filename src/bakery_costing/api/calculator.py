"""Sale calculator endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from bakery_costing.api.dependencies import get_container, require_owner
from bakery_costing.api.serializers import quote_to_dict

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.get("/quote")
async def quote(
    recipe_id: str,
    request: Request,
    quantity: str | None = None,
    owner_id: str = Depends(require_owner),
) -> dict[str, object]:
    """Return the suggested price for a quantity, or a null quote."""
    service = get_container(request).calculator_service
    result = service.quote(owner_id, recipe_id, quantity)
    return {"quote": quote_to_dict(result) if result else None}


@router.get("/ticket", response_class=PlainTextResponse)
async def ticket(
    recipe_id: str,
    request: Request,
    quantity: str | None = None,
    owner_id: str = Depends(require_owner),
) -> PlainTextResponse:
    """Return a printable plain-text ticket."""
    container = get_container(request)
    data = container.calculator_service.ticket(owner_id, recipe_id, quantity)
    if data is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No price to print"
        )
    renderer = container.ticket_renderer
    return PlainTextResponse(
        renderer.render(data),
        headers={
            "Content-Disposition": f'attachment; filename="{renderer.filename(data)}"'
        },
    )
