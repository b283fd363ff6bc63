from __future__ import annotations

import dataclasses

import pytest

from runrecipe.models import RecipeConfig
from runrecipe.snippets import (
    MalformedCoordinateError,
    gradle_init_snippet,
    intellij_yaml_snippet,
    maven_cli_snippet,
    maven_pom_snippet,
    moderne_cli_snippet,
    resolve_recipe,
    split_artifact,
)


def test_split_artifact() -> None:
    assert split_artifact("org.example:my-tool") == ("org.example", "my-tool")


def test_split_artifact_on_first_colon_only() -> None:
    assert split_artifact("org.example:my-tool:1.0") == ("org.example", "my-tool:1.0")


def test_split_artifact_without_colon_raises() -> None:
    with pytest.raises(MalformedCoordinateError):
        split_artifact("no-colon-here")


def test_resolve_applies_defaults(assertj_config: RecipeConfig) -> None:
    recipe = resolve_recipe(assertj_config)
    assert recipe.group_id == "org.openrewrite.recipe"
    assert recipe.artifact_id == "rewrite-testing-frameworks"
    assert recipe.wrapper_name == "com.github.timtebeek.AdoptAssertJ"
    assert recipe.description == "Adopt AssertJ and apply best practices to assertions."


def test_resolve_prefers_overrides(assertj_config: RecipeConfig) -> None:
    config = dataclasses.replace(assertj_config, intellij_wrapper_name="com.acme.Mine", intellij_description="Mine.")
    recipe = resolve_recipe(config)
    assert recipe.wrapper_name == "com.acme.Mine"
    assert recipe.description == "Mine."


def test_resolve_treats_empty_override_as_absent(assertj_config: RecipeConfig) -> None:
    recipe = resolve_recipe(dataclasses.replace(assertj_config, intellij_wrapper_name=""))
    assert recipe.wrapper_name == "com.github.timtebeek.AdoptAssertJ"


def test_moderne_cli_snippet(junit_config: RecipeConfig) -> None:
    assert moderne_cli_snippet(resolve_recipe(junit_config)).splitlines() == [
        "mod build ~/workspace/",
        "mod config recipes jar install org.openrewrite.recipe:rewrite-testing-frameworks:LATEST",
        "mod run ~/workspace/ --recipe org.openrewrite.java.testing.junit5.JUnit4to5Migration",
    ]


def test_moderne_cli_snippet_with_yaml_install(junit_config: RecipeConfig) -> None:
    config = dataclasses.replace(junit_config, requires_yaml_install=True)
    lines = moderne_cli_snippet(resolve_recipe(config)).splitlines()
    assert lines[2] == "mod config recipes yaml install /path/to/your/rewrite.yml"
    assert len(lines) == 4


def test_maven_cli_snippet(junit_config: RecipeConfig) -> None:
    assert maven_cli_snippet(resolve_recipe(junit_config)) == (
        "mvn -U org.openrewrite.maven:rewrite-maven-plugin:run "
        "-Drewrite.recipeArtifactCoordinates=org.openrewrite.recipe:rewrite-testing-frameworks:RELEASE "
        "-Drewrite.activeRecipes=org.openrewrite.java.testing.junit5.JUnit4to5Migration "
        "-Drewrite.exportDatatables=true"
    )


def test_maven_pom_snippet_uses_split_coordinate(junit_config: RecipeConfig) -> None:
    pom = maven_pom_snippet(resolve_recipe(junit_config))
    assert pom.startswith("<project>\n")
    assert pom.endswith("</project>")
    assert "            <groupId>org.openrewrite.recipe</groupId>" in pom
    assert "            <artifactId>rewrite-testing-frameworks</artifactId>" in pom
    assert "            <recipe>org.openrewrite.java.testing.junit5.JUnit4to5Migration</recipe>" in pom
    assert "<exportDatatables>true</exportDatatables>" in pom


def test_gradle_init_snippet(junit_config: RecipeConfig) -> None:
    script = gradle_init_snippet(resolve_recipe(junit_config))
    assert script.startswith("initscript {\n")
    assert 'maven { url "https://plugins.gradle.org/m2" }' in script
    assert 'rewrite("org.openrewrite.recipe:rewrite-testing-frameworks:latest.release")' in script
    assert 'activeRecipe("org.openrewrite.java.testing.junit5.JUnit4to5Migration")' in script
    assert "setExportDatatables(true)" in script
    assert "mavenCentral()" in script


def test_intellij_yaml_snippet(assertj_config: RecipeConfig) -> None:
    assert intellij_yaml_snippet(resolve_recipe(assertj_config)) == (
        "---\n"
        "type: specs.openrewrite.org/v1beta/recipe\n"
        "name: com.github.timtebeek.AdoptAssertJ\n"
        "displayName: Adopt AssertJ\n"
        "description: Adopt AssertJ and apply best practices to assertions.\n"
        "recipeList:\n"
        "  - org.openrewrite.java.testing.assertj.Assertj"
    )
