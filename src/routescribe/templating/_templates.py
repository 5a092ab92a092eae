"""Client templates — kida sources for the generated axios client.

Kept as Python strings and served from a ``DictLoader`` so the package
ships no data files.
"""

CLIENT_TEMPLATE = """\
{% if typed %}
import axios, { AxiosRequestConfig } from "axios";
{% else %}
import axios from "axios";
{% end %}

export const api = {
{% for entity in entities %}
  {{ entity.key }}: {
{% for method in entity.methods %}
    // {{ method.label }} {{ method.path }}
    {{ method.name }}: ({{ method.signature }}) => axios.{{ method.verb }}({{ method.arguments }}),
{% end %}
  },
{% end %}
};
"""

TEMPLATES: dict[str, str] = {
    "client": CLIENT_TEMPLATE,
}
