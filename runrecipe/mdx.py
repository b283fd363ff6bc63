"""
mdx.py

Lay composed variants out for a documentation page.

- `render_tabs`: Docusaurus `<Tabs>` / `<TabItem>` MDX, one tab per variant.
- `render_sections`: plain Markdown, one `###` section per variant.
"""

from __future__ import annotations

from collections.abc import Sequence

from runrecipe.models import Variant
from runrecipe.templating import render_string

TABS_GROUP_ID = "projectType"

_TABS = """\
{%- if with_imports -%}
import Tabs from '@theme/Tabs';
import TabItem from '@theme/TabItem';

{% endif -%}
<Tabs groupId="{{ group_id }}">
{%- for v in variants %}
<TabItem value="{{ v.label }}" label="{{ v.title }}">

{{ v.markdown }}

</TabItem>
{%- endfor %}
</Tabs>"""

_SECTIONS = """\
{%- for v in variants -%}
{% if not loop.first %}

{% endif -%}
### {{ v.title }}

{{ v.markdown }}
{%- endfor %}"""


def render_tabs(variants: Sequence[Variant], *, with_imports: bool = True, group_id: str = TABS_GROUP_ID) -> str:
    return render_string(_TABS, {"variants": list(variants), "with_imports": with_imports, "group_id": group_id})


def render_sections(variants: Sequence[Variant]) -> str:
    return render_string(_SECTIONS, {"variants": list(variants)})
