"""Template selection and the template environment."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

DEFAULT_TEMPLATE = "alert"


def select_template(
    template_name: Optional[str], hx_boosted: bool, hx_request: bool, language: Any
) -> str:
    """Name the full, boosted (bare) or partial variant of a template for a language."""
    name = template_name or DEFAULT_TEMPLATE
    lang = str(language).lower()
    if hx_boosted:
        return f"{name}.{lang}.bare.html"
    if hx_request:
        return f"{name}.{lang}.partial.html"
    return f"{name}.{lang}.html"


def build_env(http_external: str, version: str, template_path: Union[str, Path]) -> Environment:
    """Create an environment loading templates from ``template_path``."""
    env = Environment(
        loader=FileSystemLoader(str(template_path)),
        autoescape=select_autoescape(enabled_extensions=("html", "htm", "xml")),
        trim_blocks=True,
        lstrip_blocks=True,
        auto_reload=True,
    )
    env.globals["base"] = f"https://{http_external}"
    env.globals["version"] = version
    return env


def render_alert(
    engine: Environment,
    language: str,
    message: Any,
    context: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render the prompt template for ``language`` with ``message``."""
    template = engine.get_template(f"prompt.{language}.html")
    return template.render({**dict(context or {}), "message": str(message)})