"""
composer.py

Responsibility: assemble the ordered variants (one per front-end) for a recipe.

The order and labels are fixed. Only the content of the IntelliJ variant depends on
`requires_yaml_install`: either the full `rewrite.yml` snippet, or install-first
prose that reuses the file installed through the Moderne CLI.
"""

from __future__ import annotations

import logging

from runrecipe import snippets
from runrecipe.models import RecipeConfig, ResolvedRecipe, Variant
from runrecipe.templating import render_string

logger = logging.getLogger(__name__)

VARIANT_LABELS = (
    "moderne-cli",
    "maven-command-line",
    "maven",
    "gradle-init-script",
    "intelliJ",
)

MODERNE_CLI_DOCS = "https://docs.moderne.io/user-documentation/moderne-cli/getting-started/cli-intro"
MAVEN_DOWNLOAD = "https://maven.apache.org/download.cgi"
INTELLIJ_PLUGIN = "https://plugins.jetbrains.com/plugin/23814-openrewrite"

_MODERNE_BODY = """\
The Moderne CLI allows you to run OpenRewrite recipes on your project without needing to modify your build files, \
against serialized Lossless Semantic Tree (LST) of your project for a considerable performance boost & across projects.

You will need to have configured the [Moderne CLI]({{ docs_url }}) on your machine before you can run the following command.

1. If project serialized Lossless Semantic Tree is not yet available locally, then build the LST.
   This is only needed the first time, or after extensive changes:

   {{ build | indent(3) }}

2. If the recipe is not available locally yet, then you can install it once using:

   {{ install | indent(3) }}

3. Run the recipe.

   {{ run | indent(3) }}"""

_MAVEN_CLI_BODY = """\
You will need to have [Maven]({{ download_url }}) installed on your machine before you can run the following command.

{{ command }}"""

_MAVEN_POM_BODY = """\
You may add the plugin to your `pom.xml` file, so that it is available for all developers and CI/CD pipelines.

1. Add the following to your `pom.xml` file:

   {{ pom | indent(3) }}

2. Run the recipe.

   {{ run | indent(3) }}"""

_GRADLE_INIT_BODY = """\
Gradle init scripts are a good way to try out a recipe without modifying your `build.gradle` file.

1. Create a file named `init.gradle` in the root of your project.

   {{ script | indent(3) }}

2. Run the recipe.

   {{ run | indent(3) }}"""

_INTELLIJ_BODY = """\
You can run OpenRewrite recipes directly from IntelliJ IDEA Ultimate, after [installing the OpenRewrite plugin]({{ plugin_url }}), \
by adding a `rewrite.yml` file to your project.

{{ yaml }}

After adding the file, you should see a run icon in the left margin offering to run the recipe."""

_INTELLIJ_INSTALL_FIRST_BODY = """\
You can run OpenRewrite recipes directly from IntelliJ IDEA, after [installing the OpenRewrite plugin]({{ plugin_url }}).

After adding the `rewrite.yml` file installed with the Moderne CLI above to your project, \
you should see a run icon in the left margin offering to run the recipe."""


def code_block(code: str, *, language: str, title: str) -> str:
    """A fenced, titled code block as understood by Docusaurus."""
    return f'```{language} title="{title}"\n{code}\n```'


def _moderne_variant(recipe: ResolvedRecipe) -> Variant:
    build, install, run = snippets.moderne_cli_commands(recipe)
    markdown = render_string(
        _MODERNE_BODY,
        {
            "docs_url": MODERNE_CLI_DOCS,
            "build": code_block(build, language="bash", title="shell"),
            "install": code_block(install, language="shell", title="shell"),
            "run": code_block(run, language="shell", title="shell"),
        },
    )
    return Variant(label="moderne-cli", title="Moderne CLI", body=snippets.moderne_cli_snippet(recipe), markdown=markdown)


def _maven_cli_variant(recipe: ResolvedRecipe) -> Variant:
    command = snippets.maven_cli_snippet(recipe)
    markdown = render_string(
        _MAVEN_CLI_BODY,
        {"download_url": MAVEN_DOWNLOAD, "command": code_block(command, language="shell", title="shell")},
    )
    return Variant(label="maven-command-line", title="Maven Command Line", body=command, markdown=markdown)


def _maven_pom_variant(recipe: ResolvedRecipe) -> Variant:
    pom = snippets.maven_pom_snippet(recipe)
    markdown = render_string(
        _MAVEN_POM_BODY,
        {
            "pom": code_block(pom, language="xml", title="pom.xml"),
            "run": code_block("mvn rewrite:run", language="shell", title="shell"),
        },
    )
    return Variant(label="maven", title="Maven POM", body=pom, markdown=markdown)


def _gradle_init_variant(recipe: ResolvedRecipe) -> Variant:
    script = snippets.gradle_init_snippet(recipe)
    markdown = render_string(
        _GRADLE_INIT_BODY,
        {
            "script": code_block(script, language="groovy", title="init.gradle"),
            "run": code_block("gradle --init-script init.gradle rewriteRun", language="shell", title="shell"),
        },
    )
    return Variant(label="gradle-init-script", title="Gradle init script", body=script, markdown=markdown)


def _intellij_variant(recipe: ResolvedRecipe) -> Variant:
    if recipe.config.requires_yaml_install:
        markdown = render_string(_INTELLIJ_INSTALL_FIRST_BODY, {"plugin_url": INTELLIJ_PLUGIN})
        return Variant(label="intelliJ", title="IntelliJ IDEA Ultimate", body=markdown, markdown=markdown)

    yaml_text = snippets.intellij_yaml_snippet(recipe)
    markdown = render_string(
        _INTELLIJ_BODY,
        {"plugin_url": INTELLIJ_PLUGIN, "yaml": code_block(yaml_text, language="yaml", title="rewrite.yml")},
    )
    return Variant(label="intelliJ", title="IntelliJ IDEA Ultimate", body=yaml_text, markdown=markdown)


def compose(config: RecipeConfig) -> list[Variant]:
    """
    Build the five variants for `config`, in the order of VARIANT_LABELS.

    Raises MalformedCoordinateError before anything is built when the artifact
    coordinate has no colon.
    """
    recipe = snippets.resolve_recipe(config)
    logger.debug(
        "Composing run instructions for %s (yaml install: %s)",
        config.recipe_name,
        config.requires_yaml_install,
    )
    return [
        _moderne_variant(recipe),
        _maven_cli_variant(recipe),
        _maven_pom_variant(recipe),
        _gradle_init_variant(recipe),
        _intellij_variant(recipe),
    ]
