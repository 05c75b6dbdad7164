"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from bakery_costing.config import Settings
from bakery_costing.containers import AppContainer
from bakery_costing.domain.ingredients import Ingredient
from bakery_costing.domain.recipes import Recipe, RecipeIngredientUsage
from bakery_costing.domain.units import Unit, parse_unit
from bakery_costing.errors import PersistenceError
from bakery_costing.services.cache import InMemoryCache
from bakery_costing.services.calculator import CalculatorService
from bakery_costing.services.catalog import (
    CatalogSource,
    IngredientRepository,
    RecipeRepository,
)
from bakery_costing.services.ingredients import IngredientService
from bakery_costing.services.recipes import RecipeService
from bakery_costing.services.tickets import PlainTextTicketRenderer

OWNER_ID = "owner-1"
API_HEADERS = {"X-Api-Token": "api-token", "X-Owner-Id": OWNER_ID}


@dataclass
class InMemoryIngredientRepository(IngredientRepository):
    """In-memory ingredient repository for tests."""

    ingredients: dict[str, Ingredient] = field(default_factory=dict)
    fail_with: str | None = None
    list_calls: int = 0
    list_failures: int = 0

    def seed(
        self, owner_id: str, name: str, unit: Unit | str, price_per_unit: float
    ) -> Ingredient:
        ingredient = Ingredient(
            id=str(uuid4()),
            owner_id=owner_id,
            name=name,
            unit=unit,
            price_per_unit=price_per_unit,
        )
        self.ingredients[ingredient.id] = ingredient
        return ingredient

    def list_by_owner(self, owner_id: str) -> list[Ingredient]:
        self._maybe_fail()
        if self.list_failures:
            self.list_failures -= 1
            raise PersistenceError("connection reset")
        self.list_calls += 1
        return [item for item in self.ingredients.values() if item.owner_id == owner_id]

    def create(self, owner_id: str, payload: dict[str, object]) -> Ingredient:
        self._maybe_fail()
        return self.seed(
            owner_id,
            str(payload["name"]),
            parse_unit(payload["unit"]),
            float(payload["price_per_unit"]),
        )

    def update(self, ingredient_id: str, payload: dict[str, object]) -> Ingredient:
        self._maybe_fail()
        current = self.ingredients[ingredient_id]
        updated = Ingredient(
            id=current.id,
            owner_id=current.owner_id,
            name=str(payload.get("name", current.name)),
            unit=parse_unit(payload.get("unit", current.unit)),
            price_per_unit=float(payload.get("price_per_unit", current.price_per_unit)),
        )
        self.ingredients[ingredient_id] = updated
        return updated

    def delete(self, ingredient_id: str) -> None:
        self._maybe_fail()
        self.ingredients.pop(ingredient_id, None)

    def _maybe_fail(self) -> None:
        if self.fail_with:
            raise PersistenceError(self.fail_with)


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository that stores rows like the document store."""

    rows: dict[str, dict[str, object]] = field(default_factory=dict)
    fail_with: str | None = None

    def list_by_owner(self, owner_id: str) -> list[Recipe]:
        self._maybe_fail()
        return [
            _row_to_recipe(row)
            for row in self.rows.values()
            if row["user_id"] == owner_id
        ]

    def create(self, owner_id: str, payload: dict[str, object]) -> Recipe:
        self._maybe_fail()
        recipe_id = str(uuid4())
        self.rows[recipe_id] = {"id": recipe_id, "user_id": owner_id, **payload}
        return _row_to_recipe(self.rows[recipe_id])

    def update(self, recipe_id: str, payload: dict[str, object]) -> Recipe:
        self._maybe_fail()
        self.rows[recipe_id] = {**self.rows[recipe_id], **payload}
        return _row_to_recipe(self.rows[recipe_id])

    def delete(self, recipe_id: str) -> None:
        self._maybe_fail()
        self.rows.pop(recipe_id, None)

    def _maybe_fail(self) -> None:
        if self.fail_with:
            raise PersistenceError(self.fail_with)


def _row_to_recipe(row: dict[str, object]) -> Recipe:
    return Recipe(
        id=str(row["id"]),
        owner_id=str(row["user_id"]),
        name=str(row["name"]),
        ingredients=[
            RecipeIngredientUsage(
                ingredient_id=item["ingredient_id"],
                quantity_used=item["quantity_used"],
                calculated_cost=item["calculated_cost"],
            )
            for item in row["ingredients"]
        ],
        total_yield_weight=float(row["total_yield_weight"]),
        total_cost=float(row["total_cost"]),
        cost_per_gram=float(row["cost_per_gram"]),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def ingredient_repository() -> InMemoryIngredientRepository:
    return InMemoryIngredientRepository()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def catalog(
    ingredient_repository: InMemoryIngredientRepository,
    recipe_repository: InMemoryRecipeRepository,
) -> CatalogSource:
    return CatalogSource(
        ingredient_repository=ingredient_repository,
        recipe_repository=recipe_repository,
        cache=InMemoryCache(),
        ttl_seconds=60,
    )


@pytest.fixture
def ingredient_service(
    ingredient_repository: InMemoryIngredientRepository, catalog: CatalogSource
) -> IngredientService:
    return IngredientService(ingredient_repository, catalog)


@pytest.fixture
def recipe_service(
    recipe_repository: InMemoryRecipeRepository, catalog: CatalogSource
) -> RecipeService:
    return RecipeService(recipe_repository, catalog)


@pytest.fixture
def calculator_service(catalog: CatalogSource) -> CalculatorService:
    return CalculatorService(catalog)


@pytest.fixture
def container(
    settings: Settings,
    catalog: CatalogSource,
    ingredient_service: IngredientService,
    recipe_service: RecipeService,
    calculator_service: CalculatorService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog=catalog,
        ingredient_service=ingredient_service,
        recipe_service=recipe_service,
        calculator_service=calculator_service,
        ticket_renderer=PlainTextTicketRenderer(
            business_name=settings.business_name,
            footer=settings.ticket_footer,
        ),
    )
