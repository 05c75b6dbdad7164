"""Tests for recipe service."""

import pytest

from bakery_costing.domain.recipes import UsageInput
from bakery_costing.domain.units import Unit
from bakery_costing.errors import NotFoundError, PersistenceError, ValidationError
from bakery_costing.services.catalog import CatalogSource
from bakery_costing.services.ingredients import IngredientService
from bakery_costing.services.recipes import RecipeService
from tests.conftest import OWNER_ID, InMemoryIngredientRepository


@pytest.fixture
def pantry(ingredient_repository: InMemoryIngredientRepository) -> dict[str, str]:
    flour = ingredient_repository.seed(OWNER_ID, "Almond flour", Unit.KG, 10000)
    butter = ingredient_repository.seed(OWNER_ID, "Butter", Unit.KG, 10000)
    eggs = ingredient_repository.seed(OWNER_ID, "Eggs", Unit.UN, 5)
    return {"flour": flour.id, "butter": butter.id, "eggs": eggs.id}


def test_save_recipe_computes_and_stores_costs(
    recipe_service: RecipeService, pantry: dict[str, str]
) -> None:
    saved = recipe_service.save_recipe(
        OWNER_ID,
        "Keto brownie",
        [UsageInput(pantry["flour"], "200"), UsageInput(pantry["butter"], 200)],
        "1000",
    )

    assert saved.total_cost == 4000
    assert saved.cost_per_gram == 4
    assert saved.total_yield_weight == 1000
    assert [usage.calculated_cost for usage in saved.ingredients] == [2000, 2000]


def test_saved_recipe_reloads_with_identical_costs(
    recipe_service: RecipeService, catalog: CatalogSource, pantry: dict[str, str]
) -> None:
    saved = recipe_service.save_recipe(
        OWNER_ID,
        "Muffins",
        [UsageInput(pantry["flour"], 137.5), UsageInput(pantry["eggs"], 3)],
        731,
    )

    reloaded = catalog.refresh(OWNER_ID).find_recipe(saved.id)

    assert reloaded is not None
    assert reloaded.total_cost == saved.total_cost
    assert reloaded.cost_per_gram == saved.cost_per_gram

    resaved = recipe_service.save_recipe(
        OWNER_ID,
        reloaded.name,
        [UsageInput(u.ingredient_id, u.quantity_used) for u in reloaded.ingredients],
        reloaded.total_yield_weight,
        recipe_id=reloaded.id,
    )
    assert resaved.total_cost == saved.total_cost
    assert resaved.cost_per_gram == saved.cost_per_gram


def test_saved_costs_stay_frozen_when_prices_change(
    recipe_service: RecipeService,
    ingredient_service: IngredientService,
    pantry: dict[str, str],
) -> None:
    saved = recipe_service.save_recipe(
        OWNER_ID, "Cookies", [UsageInput(pantry["flour"], 100)], 10
    )

    ingredient_service.edit_ingredient(
        OWNER_ID, pantry["flour"], "Almond flour", "Kg", 20000
    )

    recipe = recipe_service.get_recipe(OWNER_ID, saved.id)
    assert recipe is not None
    assert recipe.total_cost == 1000
    assert recipe.ingredients[0].calculated_cost == 1000


def test_deleted_ingredient_still_counted_but_costs_nothing(
    recipe_service: RecipeService,
    ingredient_service: IngredientService,
    pantry: dict[str, str],
) -> None:
    ingredient_service.delete_ingredient(OWNER_ID, pantry["butter"])

    saved = recipe_service.save_recipe(
        OWNER_ID,
        "Shortbread",
        [UsageInput(pantry["flour"], 200), UsageInput(pantry["butter"], 200)],
        1000,
    )

    assert saved.ingredient_count == 2
    assert saved.ingredients[1].calculated_cost == 0
    assert saved.total_cost == 2000


@pytest.mark.parametrize(
    ("name", "rows", "yield_weight", "message"),
    [
        ("", [UsageInput("x", 1)], 100, "name is required"),
        ("Tart", [], 100, "at least one ingredient"),
        ("Tart", [UsageInput("x", 1)], 0, "positive"),
        ("Tart", [UsageInput("x", 1)], -5, "positive"),
        ("Tart", [UsageInput("x", 1)], "heavy", "positive"),
        ("Tart", [UsageInput("x", 1)], None, "positive"),
    ],
)
def test_save_recipe_validation(
    recipe_service: RecipeService,
    name: str,
    rows: list[UsageInput],
    yield_weight: object,
    message: str,
) -> None:
    with pytest.raises(ValidationError, match=message):
        recipe_service.save_recipe(OWNER_ID, name, rows, yield_weight)


def test_update_replaces_all_fields(
    recipe_service: RecipeService, pantry: dict[str, str]
) -> None:
    saved = recipe_service.save_recipe(
        OWNER_ID, "Bread", [UsageInput(pantry["flour"], 500)], 800
    )

    updated = recipe_service.save_recipe(
        OWNER_ID,
        "Seeded bread",
        [UsageInput(pantry["eggs"], 2)],
        400,
        recipe_id=saved.id,
    )

    assert updated.id == saved.id
    assert updated.name == "Seeded bread"
    assert updated.total_cost == 10
    assert updated.cost_per_gram == 10 / 400
    assert len(recipe_service.list_recipes(OWNER_ID)) == 1


def test_update_or_delete_unknown_recipe(
    recipe_service: RecipeService, pantry: dict[str, str]
) -> None:
    with pytest.raises(NotFoundError):
        recipe_service.save_recipe(
            OWNER_ID, "Ghost", [UsageInput(pantry["eggs"], 1)], 1, recipe_id="nope"
        )
    with pytest.raises(NotFoundError):
        recipe_service.delete_recipe(OWNER_ID, "nope")


def test_delete_recipe(recipe_service: RecipeService, pantry: dict[str, str]) -> None:
    saved = recipe_service.save_recipe(
        OWNER_ID, "Scones", [UsageInput(pantry["eggs"], 4)], 8
    )

    recipe_service.delete_recipe(OWNER_ID, saved.id)

    assert recipe_service.list_recipes(OWNER_ID) == []


def test_preview_running_total_and_labels(
    recipe_service: RecipeService, pantry: dict[str, str]
) -> None:
    preview = recipe_service.preview(
        OWNER_ID,
        [
            UsageInput(pantry["flour"], "200"),
            UsageInput(pantry["eggs"], "3"),
            UsageInput("", ""),
        ],
    )

    assert preview.total_cost == 2015
    assert preview.cost_per_unit is None
    assert preview.unit_labels == ["grams", "units", "qty"]
    assert len(preview.rows) == 3


def test_preview_with_yield(
    recipe_service: RecipeService, pantry: dict[str, str]
) -> None:
    preview = recipe_service.preview(OWNER_ID, [UsageInput(pantry["eggs"], 4)], "2")

    assert preview.cost_per_unit == 10


def test_save_recipe_rejects_yield_too_small_to_price(
    recipe_service: RecipeService, pantry: dict[str, str]
) -> None:
    with pytest.raises(ValidationError, match="too small"):
        recipe_service.save_recipe(
            OWNER_ID, "Crumb", [UsageInput(pantry["flour"], 200)], "1e-320"
        )

    assert recipe_service.list_recipes(OWNER_ID) == []


def test_reload_failure_after_save_shows_saved_recipe_next_time(
    recipe_service: RecipeService,
    ingredient_repository: InMemoryIngredientRepository,
    pantry: dict[str, str],
) -> None:
    recipe_service.list_recipes(OWNER_ID)
    ingredient_repository.list_failures = 1

    with pytest.raises(PersistenceError, match="connection reset"):
        recipe_service.save_recipe(
            OWNER_ID, "Scone", [UsageInput(pantry["flour"], 100)], 500
        )

    assert [recipe.name for recipe in recipe_service.list_recipes(OWNER_ID)] == [
        "Scone"
    ]
