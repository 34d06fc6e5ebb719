"""Static templates and the example-script builder.

The example script is described as data (browser module, launch
options, target URL, dialect) and rendered line by line, so the
core/bundled and TypeScript/ESM variants differ only in the values
they carry.
"""

from __future__ import annotations

import json

from pydantic import BaseModel

from create_puppeteer_app.models.config import ScaffoldConfig

BUNDLED_PACKAGE = "puppeteer"
CORE_PACKAGE = "puppeteer-core"
EXAMPLE_URL = "https://example.com"
EXECUTABLE_PATH_ENV = "CHROME_PATH"

GITIGNORE = "node_modules\n.DS_Store\ndist\n.env\n"

TSCONFIG = json.dumps(
    {
        "compilerOptions": {
            "target": "ES2022",
            "module": "ES2022",
            "moduleResolution": "Bundler",
            "esModuleInterop": True,
            "resolveJsonModule": True,
            "strict": True,
            "skipLibCheck": True,
            "outDir": "dist",
            "types": ["node"],
        },
        "include": ["src"],
    },
    indent=2,
)


def browser_package(use_core: bool) -> str:
    """Return the npm package providing the browser API."""
    return CORE_PACKAGE if use_core else BUNDLED_PACKAGE


class LaunchOption(BaseModel):
    """One ``puppeteer.launch`` option: a key and a source expression."""

    model_config = {"frozen": True}

    name: str
    expression: str

    def render(self) -> str:
        return f"{self.name}: {self.expression}"


class ExampleScript(BaseModel):
    """Abstract example: import, launch, navigate, log, close, on-error."""

    model_config = {"frozen": True}

    module: str
    launch_options: tuple[LaunchOption, ...]
    url: str = EXAMPLE_URL
    typescript: bool = False

    @classmethod
    def for_config(cls, config: ScaffoldConfig) -> ExampleScript:
        """Describe the example matching the config's variant choices."""
        options = [LaunchOption(name="headless", expression='"new"')]
        if config.use_core:
            # Read when the generated script runs, not at scaffold time.
            executable = f"process.env.{EXECUTABLE_PATH_ENV}"
            if config.use_typescript:
                executable += " as string"
            options.append(LaunchOption(name="executablePath", expression=executable))
        return cls(
            module=browser_package(config.use_core),
            launch_options=tuple(options),
            typescript=config.use_typescript,
        )

    def _launch_expression(self) -> str:
        rendered = ", ".join(option.render() for option in self.launch_options)
        return f"{{ {rendered} }}"

    def _body(self) -> list[str]:
        return [
            f"const browser = await puppeteer.launch({self._launch_expression()});",
            "const page = await browser.newPage();",
            f"await page.goto({json.dumps(self.url)});",
            'console.log("Title:", await page.title());',
            "await browser.close();",
        ]

    def render(self) -> str:
        """Render the script source for the selected dialect."""
        lines = [f"import puppeteer from {json.dumps(self.module)};", ""]
        body = ["  " + line for line in self._body()]
        on_error = [
            "  console.error(err);",
            "  process.exit(1);",
            "});",
        ]

        if self.typescript:
            lines.append("async function main() {")
            lines.extend(body)
            lines.append("}")
            lines.append("")
            lines.append("main().catch(err => {")
        else:
            lines.append("(async () => {")
            lines.extend(body)
            lines.append("})().catch(err => {")
        lines.extend(on_error)
        return "\n".join(lines) + "\n"
