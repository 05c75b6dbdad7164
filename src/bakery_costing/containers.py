"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from bakery_costing.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from bakery_costing.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from bakery_costing.config import Settings
from bakery_costing.services.cache import InMemoryCache
from bakery_costing.services.calculator import CalculatorService
from bakery_costing.services.catalog import CatalogSource
from bakery_costing.services.ingredients import IngredientService
from bakery_costing.services.recipes import RecipeService
from bakery_costing.services.tickets import PlainTextTicketRenderer, TicketRenderer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: CatalogSource
    ingredient_service: IngredientService
    recipe_service: RecipeService
    calculator_service: CalculatorService
    ticket_renderer: TicketRenderer


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    ingredient_repository = SupabaseIngredientRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    catalog = CatalogSource(
        ingredient_repository=ingredient_repository,
        recipe_repository=recipe_repository,
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.snapshot_ttl_seconds,
    )

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        ingredient_service=IngredientService(ingredient_repository, catalog),
        recipe_service=RecipeService(recipe_repository, catalog),
        calculator_service=CalculatorService(
            catalog=catalog,
            markup=resolved_settings.markup,
            unit_label=resolved_settings.default_unit_label,
        ),
        ticket_renderer=PlainTextTicketRenderer(
            business_name=resolved_settings.business_name,
            footer=resolved_settings.ticket_footer,
            handle=resolved_settings.ticket_handle,
        ),
    )
