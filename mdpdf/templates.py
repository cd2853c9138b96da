"""
Built-in stylesheets and page templates.

Templates are Jinja2 sources rendered with autoescaping enabled; values
wrapped in ``TrustedHtml`` are inserted verbatim.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

# Base layout applied to every document unless default styles are disabled
DEFAULT_CSS = """
html {
    -webkit-print-color-adjust: exact;
    print-color-adjust: exact;
}

body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    line-height: 1.4;
    color: #333;
    margin: 0;
    padding: 0;
    font-size: 12px;
}

* {
    box-sizing: border-box;
}

img {
    max-width: 100%;
}

pre, table, blockquote, img {
    page-break-inside: avoid;
    break-inside: avoid;
}

h1, h2, h3, h4 {
    page-break-after: avoid;
    break-after: avoid-page;
}

p, li {
    orphans: 2;
    widows: 2;
}

.task-list-item {
    list-style-type: none;
}

.task-list-item input[type="checkbox"] {
    margin: 0 0.35em 0.25em -1.4em;
    vertical-align: middle;
}
"""

# GitHub look, scoped to the .markdown-body wrapper of the document template
GITHUB_MARKDOWN_CSS = """
.markdown-body {
    -ms-text-size-adjust: 100%;
    -webkit-text-size-adjust: 100%;
    color: #1f2328;
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", "Noto Sans", Helvetica, Arial, sans-serif, "Apple Color Emoji", "Segoe UI Emoji";
    font-size: 16px;
    line-height: 1.5;
    word-wrap: break-word;
}

.markdown-body a {
    color: #0969da;
    text-decoration: none;
}

.markdown-body h1, .markdown-body h2, .markdown-body h3,
.markdown-body h4, .markdown-body h5, .markdown-body h6 {
    margin-top: 24px;
    margin-bottom: 16px;
    font-weight: 600;
    line-height: 1.25;
}

.markdown-body h1 {
    padding-bottom: .3em;
    font-size: 2em;
    border-bottom: 1px solid #d1d9e0;
}

.markdown-body h2 {
    padding-bottom: .3em;
    font-size: 1.5em;
    border-bottom: 1px solid #d1d9e0;
}

.markdown-body h3 { font-size: 1.25em; }
.markdown-body h4 { font-size: 1em; }
.markdown-body h5 { font-size: .875em; }
.markdown-body h6 { font-size: .85em; color: #59636e; }

.markdown-body p, .markdown-body blockquote, .markdown-body ul, .markdown-body ol,
.markdown-body dl, .markdown-body table, .markdown-body pre {
    margin-top: 0;
    margin-bottom: 16px;
}

.markdown-body blockquote {
    margin-left: 0;
    padding: 0 1em;
    color: #59636e;
    border-left: .25em solid #d1d9e0;
}

.markdown-body ul, .markdown-body ol {
    padding-left: 2em;
}

.markdown-body code {
    padding: .2em .4em;
    margin: 0;
    font-size: 85%;
    white-space: break-spaces;
    background-color: rgba(129, 139, 152, 0.12);
    border-radius: 6px;
    font-family: ui-monospace, SFMono-Regular, "SF Mono", Menlo, Consolas, "Liberation Mono", monospace;
}

.markdown-body pre {
    padding: 16px;
    overflow: auto;
    font-size: 85%;
    line-height: 1.45;
    background-color: #f6f8fa;
    border-radius: 6px;
}

.markdown-body pre code {
    padding: 0;
    background-color: transparent;
    white-space: pre-wrap;
}

.markdown-body table {
    border-spacing: 0;
    border-collapse: collapse;
    display: block;
    width: max-content;
    max-width: 100%;
    overflow: auto;
}

.markdown-body table th, .markdown-body table td {
    padding: 6px 13px;
    border: 1px solid #d1d9e0;
}

.markdown-body table th {
    font-weight: 600;
}

.markdown-body table tr:nth-child(2n) {
    background-color: #f6f8fa;
}

.markdown-body hr {
    height: .25em;
    padding: 0;
    margin: 24px 0;
    background-color: #d1d9e0;
    border: 0;
}
"""

DOC_BODY_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
{{ css }}
</head>
<body>
<div class="markdown-body">
{{ body }}
</div>
</body>
</html>
"""

# Chromium renders bands in isolation: document styles do not reach them,
# so the stylesheet travels inside the band markup.
HEADER_TEMPLATE = """<style>{{ css }}</style>
<div class="markdown-body mdpdf-band mdpdf-header" style="width: 100%; font-size: 10px; margin: 0 10mm;{% if height %} height: {{ height }}; overflow: hidden;{% endif %}">
{{ content }}
</div>
"""

FOOTER_TEMPLATE = """<style>{{ css }}</style>
<div class="markdown-body mdpdf-band mdpdf-footer" style="width: 100%; font-size: 10px; margin: 0 10mm;{% if height %} height: {{ height }}; overflow: hidden;{% endif %}">
{{ content }}
</div>
"""
