from __future__ import annotations

import pytest

from runrecipe.models import RecipeConfig

JUNIT_RECIPE = "org.openrewrite.java.testing.junit5.JUnit4to5Migration"
TESTING_FRAMEWORKS = "org.openrewrite.recipe:rewrite-testing-frameworks"


@pytest.fixture
def junit_config() -> RecipeConfig:
    return RecipeConfig(
        recipe_name=JUNIT_RECIPE,
        recipe_display_name="Migrate to JUnit 5",
        artifact=TESTING_FRAMEWORKS,
    )


@pytest.fixture
def assertj_config() -> RecipeConfig:
    return RecipeConfig(
        recipe_name="org.openrewrite.java.testing.assertj.Assertj",
        recipe_display_name="Adopt AssertJ",
        artifact=TESTING_FRAMEWORKS,
    )
