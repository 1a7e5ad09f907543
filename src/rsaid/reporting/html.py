from __future__ import annotations

from pathlib import Path
from typing import Optional
from jinja2 import Environment, PackageLoader, select_autoescape
from ..engine.results import ValidationResult

_env = Environment(
    loader=PackageLoader("rsaid.reporting", "templates"),
    autoescape=select_autoescape(default_for_string=True, default=True),
)

def render_result(
    result: Optional[ValidationResult],
    id_value: str = "",
    title: str = "South African ID Validator",
) -> str:
    """Render the form page; `result` is None when nothing was submitted yet."""
    tmpl = _env.get_template("result.html.j2")
    return tmpl.render(
        result=result.to_dict() if result is not None else None,
        id_value=id_value,
        title=title,
    )

def write_report(result: ValidationResult, path: Path, id_value: str = "") -> None:
    html = render_result(result, id_value=id_value)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html)
