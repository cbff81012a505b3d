# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import json as _json
from typing import Any, Callable, Optional, Tuple


_Seps = Optional[Tuple[str,str]]


def render_json(item:Any, default:Callable[[Any],Any]|None=None, sort=True, indent:int|None=2, separators:_Seps|None=None,
 **kwargs) -> str:
  'Render `item` as a json string.'
  if not separators:
    separators = (',', ': ') if indent else (',', ':')
  return _json.dumps(item, indent=indent, default=default, sort_keys=sort, separators=separators, **kwargs)


def render_html_json(item:Any, default:Callable[[Any],Any]|None=None) -> str:
  '''
  Render `item` as compact json that is safe to embed in a single-quoted HTML attribute or a script element.
  Key order is preserved and non-ASCII text is left unescaped.
  The characters `<`, `>`, `&` and `'` can only occur inside json strings, so they are replaced with unicode escapes.
  '''
  text = render_json(item, default=default, sort=False, indent=None, ensure_ascii=False)
  return text.translate(_html_json_escapes)


_html_json_escapes = str.maketrans({
  '<': '\\u003C',
  '>': '\\u003E',
  '&': '\\u0026',
  "'": '\\u0027',
})
