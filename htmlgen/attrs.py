# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Rendering of attribute maps into HTML attribute text.
'''

import re
from typing import Any, Iterable, Mapping

from .config import default_config, HtmlConfig
from .css import css_style_from_dict
from .escape import attr_str, encode
from .exceptions import InvalidArgument
from .json import render_html_json


Attrs = Mapping[str,Any]


def render_tag_attributes(attributes:Attrs|None, *, config:HtmlConfig=default_config) -> str:
  '''
  Render `attributes` as a string that is either empty or has a leading space,
  suitable for appending directly to a tag name.

  Attributes named in `config.attribute_order` come first, in that order; the rest keep their relative order.
  Values are rendered according to their shape:
  * True renders the bare attribute name and False omits the attribute (boolean attributes);
  * None omits the attribute;
  * a dict or list value for a data attribute (`data`, `data-ng`, `ng` by default) expands into one attribute per key:
    `data={'id': 1, 'name': 'x'}` renders as `data-id="1" data-name="x"`,
    and nested dicts or lists render as single-quoted json: `data-params='{"id":1}'`;
  * a dict or list value for `class` renders the class names joined by spaces, and is omitted if empty;
  * a dict value for `style` renders as a CSS declaration string, and is omitted if empty;
  * any other dict or list value renders as single-quoted json;
  * scalars are coerced to text and rendered double-quoted.
  All double-quoted values are entity encoded. Json values are escaped by `render_html_json` instead.
  '''
  if not attributes: return ''
  if len(attributes) > 1:
    ordered = { name: attributes[name] for name in config.attribute_order if attributes.get(name) is not None }
    attributes = { **ordered, **attributes } # Ordered keys keep their position; the remaining keys follow.
  return ''.join(fmt_attr(name, val, config=config) for name, val in attributes.items())


def fmt_attr(name:str, val:Any, *, config:HtmlConfig=default_config) -> str:
  'Render a single attribute with a leading space, or return the empty string if the attribute is omitted.'
  if val is None or val is False: return ''
  if val is True: return f' {name}'
  if not _is_compound(val): return _fmt_quoted(name, val, config)

  if name in config.data_attributes:
    return ''.join(_fmt_data_attr(f'{name}-{key}', v, config) for key, v in _compound_items(val))
  if name == 'class':
    if not val: return ''
    names:Iterable[Any] = val.values() if isinstance(val, Mapping) else val
    return _fmt_quoted(name, ' '.join(map(attr_str, names)), config)
  if name == 'style' and isinstance(val, Mapping):
    if not val: return ''
    return _fmt_quoted(name, css_style_from_dict(val), config)
  return f" {name}='{render_html_json(val)}'"


def _fmt_data_attr(name:str, val:Any, config:HtmlConfig) -> str:
  if val is None: return ''
  if _is_compound(val): return f" {name}='{render_html_json(val)}'"
  return _fmt_quoted(name, val, config)


def _fmt_quoted(name:str, val:Any, config:HtmlConfig) -> str:
  return f' {name}="{encode(val, charset=config.charset)}"'


def _is_compound(val:Any) -> bool:
  return isinstance(val, (Mapping, list, tuple))


def _compound_items(val:Mapping|list|tuple) -> Iterable[tuple[Any,Any]]:
  return val.items() if isinstance(val, Mapping) else enumerate(val)


def get_attribute_name(expression:str) -> str:
  '''
  Return the attribute name from an attribute expression,
  i.e. a name prefixed and/or suffixed with array indexes, as used by tabular and array-valued form inputs:
  * `[0]content` -> `content` (the "content" attribute of the first model in tabular input);
  * `dates[0]` -> `dates` (the first element of the "dates" attribute);
  * `[0]dates[0]` -> `dates`.
  A plain name is returned unchanged.
  Raises InvalidArgument if the name contains non-word characters.
  '''
  m = _attribute_expression_re.match(expression)
  if m is None: raise InvalidArgument('Attribute name must contain word characters only.')
  return m[2]


_attribute_expression_re = re.compile(r'(^|.*\])([\w.+]+)(\[.*|$)')
