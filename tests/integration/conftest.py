"""Fixtures for integration tests: persisted catalogue documents."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from foodstall.modules.categories.models import FoodCategory
from foodstall.modules.foods.models import Food
from tests.factories.catalogue import CategoryCreateFactory, FoodCreateFactory


@pytest.fixture
async def category(db: AsyncSession) -> FoodCategory:
    """A persisted, visible category."""
    category = FoodCategory(**CategoryCreateFactory.build().model_dump())
    db.add(category)
    await db.flush()
    await db.refresh(category)
    return category


@pytest.fixture
async def food(db: AsyncSession, category: FoodCategory) -> Food:
    """A persisted food in ``category``."""
    fields = FoodCreateFactory.build(category=str(category.id)).model_dump()
    fields["category"] = category.id
    food = Food(**fields)
    db.add(food)
    await db.flush()
    await db.refresh(food)
    return food
