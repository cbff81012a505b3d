# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Helpers for merging CSS classes and inline styles into attribute maps.

These functions edit the `class` and `style` entries of a caller-owned attribute dict in place,
producing values that `render_tag_attributes` knows how to render:
* `class` may be a string, a list of class names, or a dict of keyed class "slots" (int keys count as unkeyed);
* `style` may be a string or a dict mapping property names to values.
'''

from logging import getLogger
from typing import Any, Iterable, Mapping, MutableMapping, Union

from .escape import attr_str


logger = getLogger(__name__)

ClassValue = Union[str, Iterable[str], Mapping[Any,str]]
StyleValue = Union[str, Mapping[str,Any]]

Attrs = MutableMapping[str,Any]


def add_css_class(options:Attrs, cl:ClassValue) -> None:
  '''
  Add a CSS class (or several classes) to `options`.
  A class that is already present is not added again.
  If the existing value is a dict with a named (string) key, an incoming class with the same key does not replace it:
  `{'class': {'persistent': 'initial'}}` stays unchanged when adding `{'persistent': 'override'}`.
  A string `cl` names a single class; it is not split on whitespace.
  '''
  existing = options.get('class')
  if existing is None:
    options['class'] = cl if isinstance(cl, (str, Mapping)) else list(cl)
  elif isinstance(existing, str):
    merged = merge_css_classes(existing.split(), cl)
    options['class'] = ' '.join(_class_names(merged))
  else:
    options['class'] = merge_css_classes(existing, cl)


def remove_css_class(options:Attrs, cl:ClassValue) -> None:
  '''
  Remove a CSS class (or several classes) from `options`.
  If no classes remain, the `class` key is deleted.
  '''
  existing = options.get('class')
  if existing is None: return
  removed = frozenset(_class_names(cl))
  remaining:list[str]|dict[Any,str]
  if isinstance(existing, str):
    remaining = [c for c in existing.split() if c not in removed]
    if remaining: options['class'] = ' '.join(remaining)
  elif isinstance(existing, Mapping):
    remaining = { k: c for k, c in existing.items() if c not in removed }
    if remaining: options['class'] = remaining
  else:
    remaining = [c for c in existing if c not in removed]
    if remaining: options['class'] = remaining
  if not remaining: del options['class']


def merge_css_classes(existing:ClassValue, additional:ClassValue) -> list[str]|dict[Any,str]:
  '''
  Merge `additional` classes into `existing`, giving priority to keyed existing classes.
  Unkeyed classes are appended unless already present; keyed classes are set only if the key is free.
  The result is de-duplicated, keeping the first occurrence.
  It is a list if all entries are unkeyed, and a dict otherwise.
  '''
  merged = dict(_class_entries(existing))
  next_index = max((k + 1 for k in merged if _is_unkeyed(k)), default=0)
  for key, cl in _class_entries(additional):
    if _is_unkeyed(key):
      if cl not in merged.values():
        merged[next_index] = cl
        next_index += 1
    elif key not in merged:
      merged[key] = cl

  seen:set[str] = set()
  unique:dict[Any,str] = {}
  for key, cl in merged.items():
    if cl in seen: continue
    seen.add(cl)
    unique[key] = cl

  if all(_is_unkeyed(k) for k in unique): return list(unique.values())
  return unique


def _is_unkeyed(key:Any) -> bool:
  return isinstance(key, int) and not isinstance(key, bool)


def _class_entries(classes:ClassValue) -> list[tuple[Any,str]]:
  if isinstance(classes, str): return [(0, classes)]
  if isinstance(classes, Mapping): return list(classes.items())
  return list(enumerate(classes))


def _class_names(classes:ClassValue) -> list[str]:
  return [cl for _, cl in _class_entries(classes)]


def add_css_style(options:Attrs, style:StyleValue, overwrite=True) -> None:
  '''
  Merge `style` into the `style` entry of `options`.
  `style` can be a string (e.g. `'width: 100px; height: 200px'`) or a dict (e.g. `{'width': '100px'}`).
  If a property exists in both, the incoming value wins unless `overwrite` is False.
  Merged and dict styles are stored in string form; an empty result is stored as None so that the attribute is omitted.
  '''
  existing = options.get('style')
  if existing:
    old_style = _style_dict(existing)
    new_style = _style_dict(style)
    if not overwrite:
      new_style = { name: val for name, val in new_style.items() if name not in old_style }
    style = { **old_style, **new_style }
  options['style'] = css_style_from_dict(style) if isinstance(style, Mapping) else style


def remove_css_style(options:Attrs, properties:str|Iterable[str]) -> None:
  'Remove the named CSS properties from the `style` entry of `options`.'
  existing = options.get('style')
  if not existing: return
  style = _style_dict(existing)
  if isinstance(properties, str): properties = (properties,)
  for name in properties:
    style.pop(name, None)
  options['style'] = css_style_from_dict(style)


def css_style_from_dict(style:Mapping[str,Any]) -> str|None:
  '''
  Convert a dict of CSS properties to the string form used by the `style` attribute,
  e.g. `{'width': '100px', 'height': '200px'}` -> `'width: 100px; height: 200px;'`.
  Returns None for an empty dict, so that the attribute is not rendered.
  '''
  if not style: return None
  return ' '.join(f'{name}: {attr_str(val)};' for name, val in style.items())


def css_style_to_dict(style:str) -> dict[str,str]:
  '''
  Parse a `style` attribute string into a dict of CSS properties.
  Each `;`-separated segment is split on its first colon and both sides are stripped.
  Segments without a colon or without a property name are dropped.
  '''
  result:dict[str,str] = {}
  for segment in style.split(';'):
    name, colon, val = segment.partition(':')
    name = name.strip()
    if not colon or not name:
      if segment.strip(): logger.debug('dropping malformed CSS declaration: %r', segment)
      continue
    result[name] = val.strip()
  return result


def _style_dict(style:StyleValue) -> dict[str,Any]:
  if isinstance(style, str): return css_style_to_dict(style)
  return dict(style)
