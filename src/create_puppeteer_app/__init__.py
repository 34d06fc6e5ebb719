"""create-puppeteer-app: scaffold a new Puppeteer automation project."""

__version__ = "0.1.0"
