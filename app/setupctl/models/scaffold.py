"""Scaffolding target models.

Frameworks and JavaScript package managers are closed enums; each
variant builds its own command line instead of looking up a template.
"""

from enum import Enum


class JsPackageManager(str, Enum):
    """JavaScript package managers that can run project generators."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    def create_args(self, generator: str) -> list[str]:
        """Build the prefix that runs a `create-*` generator.

        Args:
            generator: Generator name without the `create-` prefix
                (e.g. "vite@latest", "next-app@latest").

        Returns:
            Command prefix as a list of arguments.
        """
        if self is JsPackageManager.NPM:
            return ["npm", "create", generator]
        if self is JsPackageManager.PNPM:
            return ["pnpm", "create", generator]
        if self is JsPackageManager.YARN:
            # yarn create does not accept version tags
            return ["yarn", "create", generator.split("@", 1)[0]]
        return ["bun", "create", generator]

    @property
    def needs_separator(self) -> bool:
        """Whether generator flags must follow a `--` separator.

        npm create swallows flags meant for the generator unless they come
        after `--`.
        """
        return self is JsPackageManager.NPM


class Framework(str, Enum):
    """Project templates the `new` command can scaffold."""

    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    NEXT = "next"
    ASTRO = "astro"

    def build_args(self, name: str, package_manager: JsPackageManager) -> list[str]:
        """Build the generator command for a new project.

        Args:
            name: Validated project (and directory) name.
            package_manager: Package manager that runs the generator.

        Returns:
            Command line as a list of arguments.
        """
        if self in (Framework.REACT, Framework.VUE, Framework.SVELTE):
            flags = ["--template", f"{self.value}-ts"]
            generator = "vite@latest"
        elif self is Framework.NEXT:
            flags = ["--ts", "--eslint", "--app", "--yes", f"--use-{package_manager.value}"]
            generator = "next-app@latest"
        else:
            flags = ["--template", "minimal", "--yes"]
            generator = "astro@latest"

        args = [*package_manager.create_args(generator), name]
        if package_manager.needs_separator:
            args.append("--")
        return [*args, *flags]
