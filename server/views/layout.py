# server/views/layout.py
"""Page shell and small HTML helpers shared by all pages"""
from html import escape
from typing import Any, Iterable, List, Optional, Tuple

from core.config import APP_TITLE


def esc(value: Any) -> str:
    """Escape any value for HTML text or attribute context"""
    if value is None:
        return ""
    return escape(str(value), quote=True)


def flash_html(message: Optional[str] = None, error: Optional[str] = None) -> str:
    parts = []
    if message:
        parts.append(f'<div class="flash ok">{esc(message)}</div>')
    if error:
        parts.append(f'<div class="flash err">{esc(error)}</div>')
    return "".join(parts)


def errors_html(errors: Optional[List[str]]) -> str:
    """Validation summary listing every failed rule"""
    if not errors:
        return ""
    items = "".join(f"<li>{esc(e)}</li>" for e in errors)
    return f'<div class="flash err"><ul>{items}</ul></div>'


def options_html(choices: Iterable[Tuple[Any, str]], selected: Any = None) -> str:
    out = []
    for value, label in choices:
        mark = " selected" if selected is not None and str(value) == str(selected) else ""
        out.append(f'<option value="{esc(value)}"{mark}>{esc(label)}</option>')
    return "".join(out)


def render_page(
    title: str,
    body: str,
    message: Optional[str] = None,
    error: Optional[str] = None
) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
  <title>{esc(APP_TITLE)} - {esc(title)}</title>
  <style>
    :root {{ color-scheme: light dark; }}
    * {{ box-sizing: border-box; }}
    body {{ margin: 0; font-family: system-ui, -apple-system, 'Segoe UI', Roboto, Arial, sans-serif; background: #f7fafc; color: #1a202c; }}
    header {{ padding: 14px 24px; background: #2d3748; display: flex; gap: 18px; align-items: center; }}
    header a {{ color: #e2e8f0; text-decoration: none; font-weight: 600; }}
    header .brand {{ color: #fff; font-size: 18px; margin-right: auto; }}
    main {{ padding: 24px; max-width: 1100px; margin: 0 auto; }}
    h1 {{ margin: 0 0 16px; }}
    table {{ width: 100%; border-collapse: collapse; background: #fff; border-radius: 8px; overflow: hidden; box-shadow: 0 2px 8px rgba(0,0,0,0.1); }}
    th, td {{ border-bottom: 1px solid #e2e8f0; padding: 10px 12px; text-align: left; }}
    th {{ background: #edf2f7; }}
    .flash {{ padding: 10px 14px; border-radius: 6px; margin: 0 0 16px; }}
    .flash.ok {{ background: #c6f6d5; color: #22543d; }}
    .flash.err {{ background: #fed7d7; color: #742a2a; }}
    .flash ul {{ margin: 0; padding-left: 18px; }}
    form.card, .card {{ background: #fff; padding: 20px; border-radius: 8px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); max-width: 560px; }}
    label {{ display: block; margin: 12px 0 4px; font-weight: 600; }}
    input, select {{ width: 100%; padding: 8px; border: 1px solid #cbd5e0; border-radius: 6px; }}
    .btn {{ display: inline-block; padding: 8px 14px; border-radius: 6px; background: #667eea; color: #fff; text-decoration: none; border: 0; cursor: pointer; margin-top: 14px; }}
    .btn.danger {{ background: #e53e3e; }}
    .btn.muted {{ background: #a0aec0; }}
    .tiles {{ display: grid; gap: 14px; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); margin-bottom: 24px; }}
    .tile {{ background: #fff; padding: 18px; border-radius: 10px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); }}
    .tile .n {{ font-size: 28px; font-weight: 800; color: #667eea; }}
    dl {{ display: grid; grid-template-columns: 180px 1fr; gap: 8px 12px; }}
    dt {{ color: #718096; }}
  </style>
</head>
<body>
  <header>
    <a class="brand" href="/">{esc(APP_TITLE)}</a>
    <a href="/companies">Companies</a>
    <a href="/employees">Employees</a>
  </header>
  <main>
    {flash_html(message, error)}
    {body}
  </main>
</body>
</html>"""


def not_found_page(what: str) -> str:
    return render_page("Not found", f"<h1>{esc(what)} not found</h1>")
