"""
snippets.py

Responsibility: produce the literal command / manifest text for each front-end.

Every function here is a pure function of a `ResolvedRecipe`; defaults and the
artifact split are applied once, in `resolve_recipe`, before any snippet is built.
"""

from __future__ import annotations

from runrecipe.models import RecipeConfig, ResolvedRecipe
from runrecipe.naming import derive_description, derive_wrapper_name
from runrecipe.templating import render_string


class MalformedCoordinateError(ValueError):
    pass


MODERNE_BUILD = "mod build ~/workspace/"
YAML_INSTALL_PLACEHOLDER = "/path/to/your/rewrite.yml"

_MODERNE_INSTALL = """\
mod config recipes jar install {{ artifact }}:LATEST
{%- if requires_yaml_install %}
mod config recipes yaml install {{ yaml_path }}
{%- endif %}"""

_MODERNE_RUN = "mod run ~/workspace/ --recipe {{ recipe_name }}"

_MAVEN_CLI = (
    "mvn -U org.openrewrite.maven:rewrite-maven-plugin:run"
    " -Drewrite.recipeArtifactCoordinates={{ artifact }}:RELEASE"
    " -Drewrite.activeRecipes={{ recipe_name }}"
    " -Drewrite.exportDatatables=true"
)

_MAVEN_POM = """\
<project>
  <build>
    <plugins>
      <plugin>
        <groupId>org.openrewrite.maven</groupId>
        <artifactId>rewrite-maven-plugin</artifactId>
        <version>LATEST</version>
        <configuration>
          <exportDatatables>true</exportDatatables>
          <activeRecipes>
            <recipe>{{ recipe_name }}</recipe>
          </activeRecipes>
        </configuration>
        <dependencies>
          <dependency>
            <groupId>{{ group_id }}</groupId>
            <artifactId>{{ artifact_id }}</artifactId>
            <version>LATEST</version>
          </dependency>
        </dependencies>
      </plugin>
    </plugins>
  </build>
</project>"""

_GRADLE_INIT = """\
initscript {
    repositories {
        maven { url "https://plugins.gradle.org/m2" }
    }
    dependencies { classpath("org.openrewrite:plugin:latest.release") }
}
rootProject {
    plugins.apply(org.openrewrite.gradle.RewritePlugin)
    dependencies {
        rewrite("{{ artifact }}:latest.release")
    }
    rewrite {
        activeRecipe("{{ recipe_name }}")
        setExportDatatables(true)
    }
    afterEvaluate {
        if (repositories.isEmpty()) {
            repositories {
                mavenCentral()
            }
        }
    }
}"""

_INTELLIJ_YAML = """\
---
type: specs.openrewrite.org/v1beta/recipe
name: {{ wrapper_name }}
displayName: {{ display_name }}
description: {{ description }}
recipeList:
  - {{ recipe_name }}"""


def split_artifact(artifact: str) -> tuple[str, str]:
    """
    Split a `group:artifact` coordinate on its first colon.

    Raises MalformedCoordinateError when there is no colon at all.
    """
    group_id, sep, artifact_id = artifact.partition(":")
    if not sep:
        raise MalformedCoordinateError(f"Artifact coordinate must look like 'group:artifact', got {artifact!r}")
    return group_id, artifact_id


def resolve_recipe(config: RecipeConfig) -> ResolvedRecipe:
    """Apply defaults and split the coordinate; the only place overrides are consulted."""
    group_id, artifact_id = split_artifact(config.artifact)
    return ResolvedRecipe(
        config=config,
        group_id=group_id,
        artifact_id=artifact_id,
        wrapper_name=config.intellij_wrapper_name or derive_wrapper_name(config.recipe_display_name),
        description=config.intellij_description or derive_description(config.recipe_display_name),
    )


def _context(recipe: ResolvedRecipe) -> dict[str, object]:
    cfg = recipe.config
    return {
        "recipe_name": cfg.recipe_name,
        "display_name": cfg.recipe_display_name,
        "artifact": cfg.artifact,
        "requires_yaml_install": cfg.requires_yaml_install,
        "yaml_path": YAML_INSTALL_PLACEHOLDER,
        "group_id": recipe.group_id,
        "artifact_id": recipe.artifact_id,
        "wrapper_name": recipe.wrapper_name,
        "description": recipe.description,
    }


def moderne_cli_commands(recipe: ResolvedRecipe) -> tuple[str, str, str]:
    """(build LST, install recipe, run recipe) for the Moderne CLI."""
    ctx = _context(recipe)
    return (
        MODERNE_BUILD,
        render_string(_MODERNE_INSTALL, ctx),
        render_string(_MODERNE_RUN, ctx),
    )


def moderne_cli_snippet(recipe: ResolvedRecipe) -> str:
    return "\n".join(moderne_cli_commands(recipe))


def maven_cli_snippet(recipe: ResolvedRecipe) -> str:
    return render_string(_MAVEN_CLI, _context(recipe))


def maven_pom_snippet(recipe: ResolvedRecipe) -> str:
    return render_string(_MAVEN_POM, _context(recipe))


def gradle_init_snippet(recipe: ResolvedRecipe) -> str:
    return render_string(_GRADLE_INIT, _context(recipe))


def intellij_yaml_snippet(recipe: ResolvedRecipe) -> str:
    return render_string(_INTELLIJ_YAML, _context(recipe))
