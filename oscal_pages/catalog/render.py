# CUI // SP-CTI
"""HTML rendering of control documents and the table of contents (Jinja2).

Autoescaping is on. Fields that already went through the inline sanitizer
(statement/description/guidance/extras text) are emitted with ``|safe``;
everything else (headings, header values, labels, titles) is escaped.
"""

from typing import Iterable, List

from jinja2 import Environment

from oscal_pages.catalog.models import ContentBlock, OutputDocument

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

BLOCKS_TEMPLATE = """\
{% macro stmt_list(items) -%}
<ul class="oscal-stmt-list">
{%- for it in items %}<li>
{%- if it.label %}<span class="oscal-stmt-label">{{ it.label }}</span> {% endif %}
{{- it.text | safe }}
{%- if it.children %}{{ stmt_list(it.children) }}{% endif %}</li>
{%- endfor %}</ul>
{%- endmacro %}
{% for block in blocks %}
{% if block.kind == "header" %}
<div class="oscal-card">
{% for line in block.items %}
<p class="oscal-prop-line"><strong>{{ line.label }}:</strong> {{ line.value }}</p>
{% endfor %}
</div>
{% elif block.kind == "statement" %}
<div class="oscal-section">
<h2>{{ block.heading }}</h2>
{% if block.text %}<p>{{ block.text | safe }}</p>
{% endif %}
{% if block.items %}{{ stmt_list(block.items) }}
{% endif %}
</div>
{% elif block.kind == "description" %}
<div class="oscal-section">
<h2>{{ block.heading }}</h2>
<p>{{ block.text | safe }}</p>
</div>
{% elif block.kind == "guidance" %}
<div class="oscal-section oscal-extra">
<details class="oscal-details"><summary>{{ block.heading }}</summary>
<p>{{ block.text | safe }}</p>
</details>
</div>
{% elif block.kind == "extras" %}
<div class="oscal-section oscal-extra">
{% for entry in block.items %}
<details class="oscal-details"><summary>{{ entry.label }}</summary>
<p>{{ entry.text | safe }}</p>
</details>
{% endfor %}
</div>
{% elif block.kind == "enhancements" %}
<div class="oscal-section">
<h2>{{ block.heading }}</h2>
<ul class="oscal-enh-list">
{%- for e in block.items %}<li><a href="{{ e.url }}"><strong>{{ e.label }}</strong>{% if e.title %} — {{ e.title }}{% endif %}</a></li>{% endfor -%}
</ul>
</div>
{% endif %}
{% endfor %}
"""

DOCUMENT_TEMPLATE = """\
<article class="oscal-control" id="{{ doc.slug }}">
<header class="oscal-control-header"><h1>{{ doc.title }}</h1></header>
{{ body | safe }}
</article>
"""

TOC_TEMPLATE = """\
{% macro link(e) %}<a href="{{ e.url }}"><strong>{{ e.label }}</strong>{% if e.title %} — {{ e.title }}{% endif %}</a>{% endmacro %}
{% if empty %}
<div class="oscal-toc oscal-empty">No OSCAL controls found.</div>
{% else %}
<div class="oscal-toc">
{% if title %}<h2>{{ title }}</h2>
{% endif %}
{% for group in groups %}
{% if grouped %}<div class="oscal-toc-group">
<h2>{{ group.name }}</h2>
{% endif %}
<ul class="oscal-toc-list">
{% for e in group.entries %}
<li{% if e.is_enhancement %} class="oscal-toc-flat-enh"{% endif %}>{{ link(e) }}
{%- if e.children %}<ul class="oscal-toc-enh">
{%- for c in e.children %}<li>{{ link(c) }}</li>{% endfor -%}
</ul>{% endif %}</li>
{% endfor %}
</ul>
{% if grouped %}</div>
{% endif %}
{% endfor %}
</div>
{% endif %}
"""


def render_blocks_html(blocks: Iterable[ContentBlock]) -> str:
    """Render ordered content blocks as an HTML fragment."""
    return _env.from_string(BLOCKS_TEMPLATE).render(blocks=[b.to_dict() for b in blocks]).strip()


def render_document_html(doc: OutputDocument) -> str:
    """Render a full control page: title header plus its blocks."""
    body = render_blocks_html(doc.blocks)
    return _env.from_string(DOCUMENT_TEMPLATE).render(doc=doc, body=body).strip()


def render_toc_html(groups: List, title: str = "", grouped: bool = True, empty: bool = False) -> str:
    """Render TOC groups (from ``toc.build_toc``) as HTML."""
    return _env.from_string(TOC_TEMPLATE).render(
        groups=groups, title=title, grouped=grouped, empty=empty or not groups,
    ).strip()
