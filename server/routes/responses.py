# server/routes/responses.py
"""Response helpers for the HTML pages"""
from typing import Optional
from urllib.parse import urlencode

from fastapi.responses import HTMLResponse, RedirectResponse


def redirect_with_flash(
    path: str,
    message: Optional[str] = None,
    error: Optional[str] = None
) -> RedirectResponse:
    """303 redirect carrying a one-shot flash message in the query string"""
    params = {}
    if message:
        params["message"] = message
    if error:
        params["error"] = error
    url = f"{path}?{urlencode(params)}" if params else path
    return RedirectResponse(url, status_code=303)


def page(html: str, status_code: int = 200) -> HTMLResponse:
    return HTMLResponse(html, status_code=status_code)
