"""
render.py
- Purpose: Build the downloadable accessible document from an HTML fragment.
- Only the "html" format is really rendered; every other format currently gets the
  raw fragment bytes (no PDF/DOCX/TXT conversion exists yet).
"""

import re
from dataclasses import dataclass
from urllib.parse import quote

DOWNLOAD_FORMATS = ("pdf", "html", "docx", "txt")

HTML_SHELL = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Accessible Document</title>
    <style>
        body {
            font-family: Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background-color: #fff;
        }
        h1, h2, h3, h4, h5, h6 {
            color: #2c3e50;
            margin-top: 1.5em;
            margin-bottom: 0.5em;
        }
        h1 {
            border-bottom: 2px solid #3498db;
            padding-bottom: 0.3em;
        }
        table {
            width: 100%;
            border-collapse: collapse;
            margin: 1em 0;
        }
        th, td {
            border: 1px solid #ddd;
            padding: 8px;
            text-align: left;
        }
        th {
            background-color: #f2f2f2;
            font-weight: bold;
        }
        .skip-link {
            position: absolute;
            left: -10000px;
            top: auto;
            width: 1px;
            height: 1px;
            overflow: hidden;
        }
        .skip-link:focus {
            position: static;
            width: auto;
            height: auto;
        }
    </style>
</head>
<body>
    <a href="#main-content" class="skip-link">Skip to main content</a>
    <main id="main-content">
        {{content}}
    </main>
</body>
</html>
"""

_LAST_EXTENSION = re.compile(r"\.[^/.]+$")
_UNSAFE_HEADER_CHARS = re.compile(r'["\\\r\n]')


@dataclass(frozen=True)
class RenderedDocument:
    content: bytes
    media_type: str
    filename: str


def render_accessible_document(accessible_html: str, fmt: str | None) -> bytes:
    if (fmt or "").lower() == "html":
        return HTML_SHELL.replace("{{content}}", accessible_html).encode("utf-8")
    # TODO: real PDF/DOCX/TXT conversion; until then every other format carries the fragment.
    return accessible_html.encode("utf-8")


def download_filename(filename: str | None) -> str:
    base = re.split(r"[/\\]", filename or "")[-1]
    stem = _LAST_EXTENSION.sub("", base) or "document"
    # Every variant currently carries HTML bytes, so the extension is always .html.
    return f"accessible-{stem}.html"


def media_type_for(fmt: str | None) -> str:
    return "text/html" if (fmt or "").lower() == "html" else "application/octet-stream"


def content_disposition(filename: str) -> str:
    safe = _UNSAFE_HEADER_CHARS.sub("_", filename)
    ascii_name = safe.encode("ascii", "replace").decode("ascii").replace("?", "_")
    header = f'attachment; filename="{ascii_name}"'
    if ascii_name != safe:
        header += f"; filename*=UTF-8''{quote(safe)}"
    return header


def build_download(accessible_html: str, fmt: str | None, filename: str | None) -> RenderedDocument:
    return RenderedDocument(
        content=render_accessible_document(accessible_html, fmt),
        media_type=media_type_for(fmt),
        filename=download_filename(filename),
    )
