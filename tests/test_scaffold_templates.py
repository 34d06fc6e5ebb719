"""Tests for the example-script builder and static templates."""

from __future__ import annotations

import json

from create_puppeteer_app.models.config import ScaffoldConfig
from create_puppeteer_app.scaffold.templates import (
    GITIGNORE,
    TSCONFIG,
    ExampleScript,
    LaunchOption,
)

ESM_BUNDLED_EXAMPLE = """\
import puppeteer from "puppeteer";

(async () => {
  const browser = await puppeteer.launch({ headless: "new" });
  const page = await browser.newPage();
  await page.goto("https://example.com");
  console.log("Title:", await page.title());
  await browser.close();
})().catch(err => {
  console.error(err);
  process.exit(1);
});
"""

TS_CORE_EXAMPLE = """\
import puppeteer from "puppeteer-core";

async function main() {
  const browser = await puppeteer.launch({ headless: "new", executablePath: process.env.CHROME_PATH as string });
  const page = await browser.newPage();
  await page.goto("https://example.com");
  console.log("Title:", await page.title());
  await browser.close();
}

main().catch(err => {
  console.error(err);
  process.exit(1);
});
"""


def _config(**flags: bool) -> ScaffoldConfig:
    return ScaffoldConfig.from_options("demo", env={}, **flags)


class TestExampleScript:
    """Tests for ExampleScript.for_config() and render()."""

    def test_bundled_esm_render(self) -> None:
        assert ExampleScript.for_config(_config()).render() == ESM_BUNDLED_EXAMPLE

    def test_core_typescript_render(self) -> None:
        script = ExampleScript.for_config(_config(use_typescript=True, use_core=True))
        assert script.render() == TS_CORE_EXAMPLE

    def test_core_esm_reads_chrome_path_without_cast(self) -> None:
        """Plain JavaScript has no type assertion on the executable path."""
        rendered = ExampleScript.for_config(_config(use_core=True)).render()
        assert "executablePath: process.env.CHROME_PATH }" in rendered
        assert " as string" not in rendered
        assert "(async () => {" in rendered

    def test_bundled_typescript_has_no_executable_path(self) -> None:
        rendered = ExampleScript.for_config(_config(use_typescript=True)).render()
        assert 'import puppeteer from "puppeteer";' in rendered
        assert "executablePath" not in rendered
        assert "async function main()" in rendered

    def test_variants_are_data(self) -> None:
        """Core mode adds exactly one launch option."""
        bundled = ExampleScript.for_config(_config())
        core = ExampleScript.for_config(_config(use_core=True))
        assert bundled.module == "puppeteer"
        assert core.module == "puppeteer-core"
        assert [o.name for o in bundled.launch_options] == ["headless"]
        assert [o.name for o in core.launch_options] == ["headless", "executablePath"]

    def test_custom_url_and_options(self) -> None:
        script = ExampleScript(
            module="puppeteer",
            launch_options=(LaunchOption(name="slowMo", expression="50"),),
            url="https://pptr.dev",
        )
        rendered = script.render()
        assert "puppeteer.launch({ slowMo: 50 })" in rendered
        assert 'await page.goto("https://pptr.dev");' in rendered


class TestStaticTemplates:
    """Tests for the gitignore and tsconfig templates."""

    def test_gitignore_entries(self) -> None:
        assert GITIGNORE.splitlines() == ["node_modules", ".DS_Store", "dist", ".env"]

    def test_tsconfig_is_strict_and_separates_output(self) -> None:
        data = json.loads(TSCONFIG)
        options = data["compilerOptions"]
        assert options["strict"] is True
        assert options["moduleResolution"] == "Bundler"
        assert options["outDir"] == "dist"
        assert options["types"] == ["node"]
        assert data["include"] == ["src"]
