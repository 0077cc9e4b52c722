"""
Classic Quotes core package.

Modules
───────
models   — Pydantic data model (Quote)
corpus   — load + validate the bundled quotes.json once at startup
matcher  — topic substring match, random sample, sorted topic index
"""
