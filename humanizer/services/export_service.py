"""Download rendering for rewritten text: plain text, HTML, or Markdown."""

import html

from fastapi import HTTPException

EXPORT_TITLE = "Humanized Text"
EXPORT_BASENAME = "humanized-text"

MEDIA_TYPES = {
    "txt": "text/plain",
    "html": "text/html",
    "md": "text/markdown",
}

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; max-width: 900px; margin: 40px auto; padding: 20px; }}
    h1 {{ color: #333; }}
    p {{ color: #555; white-space: pre-wrap; word-wrap: break-word; }}
  </style>
</head>
<body>
  <h1>{title}</h1>
  <p>{body}</p>
</body>
</html>"""


def render_export(text: str, fmt: str) -> tuple[str, str, str]:
    """Returns (content, media_type, filename)."""
    if not text.strip():
        raise HTTPException(status_code=400, detail="Nothing to export")

    if fmt == "html":
        content = HTML_TEMPLATE.format(title=EXPORT_TITLE, body=html.escape(text, quote=False))
    elif fmt == "md":
        content = f"# {EXPORT_TITLE}\n\n{text}"
    else:
        content = text

    return content, MEDIA_TYPES[fmt], f"{EXPORT_BASENAME}.{fmt}"
