# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Rendering of `<option>` and `<optgroup>` markup for select elements.
'''

from logging import getLogger
from typing import AbstractSet, Any, Iterable, Iterator, Mapping, MutableMapping, Union

from .attrs import render_tag_attributes
from .config import default_config, HtmlConfig
from .escape import attr_str, encode


logger = getLogger(__name__)

SelectItems = Mapping[Any,Any] # Values are labels, or nested items (a mapping or `OptGroup`) that render as an optgroup.
Selection = Union[None, str, int, float, Iterable[Any]]

# Selection values that are compared as a single value rather than iterated.
scalar_selection_types = (str, bytes, bytearray, int, float, complex)


class OptGroup:
  '''
  Explicit marker for a group of select items.
  Any mapping value is already treated as a group; `OptGroup` also allows a group to carry its own attributes,
  which are overridden by the `groups` option of `render_select_options`.
  '''

  __slots__ = ('items', 'attrs')

  def __init__(self, items:SelectItems, attrs:Mapping[str,Any]|None=None) -> None:
    self.items = items
    self.attrs = attrs or {}

  def __repr__(self) -> str: return f'OptGroup({self.items!r}, attrs={self.attrs!r})'


def render_select_options(selection:Selection, items:SelectItems, tag_options:MutableMapping[str,Any]|None=None, *,
 config:HtmlConfig=default_config) -> str:
  '''
  Render the option tags for a select element, one per line.

  `items` maps option values to labels. A mapping (or `OptGroup`) value renders as an optgroup labeled by its key,
  containing the options for the nested items.

  `selection` is either a single value or a collection of values; options whose value matches (as text) are selected.

  The following directive keys are removed from `tag_options`, so that the remainder can be rendered as the attributes
  of the select tag itself:
  * `prompt`: text for a leading option with an empty value,
    or a mapping `{'text': ..., 'options': {...}}` that also supplies the prompt option's attributes;
  * `options`: per-option attributes, keyed by option value.
    An explicit `selected` entry overrides the computed selection for that option;
  * `groups`: per-optgroup attributes, keyed by group key. The `label` attribute defaults to the group key;
  * `encode`: whether to entity-encode labels (default True);
  * `encode_spaces`: whether to replace spaces in labels with `&nbsp;` (default False).
  '''
  if tag_options is None: tag_options = {}
  selection = normalize_selection(selection)
  encode_spaces = bool(tag_options.pop('encode_spaces', False))
  encode_labels = bool(tag_options.pop('encode', True))
  prompt = tag_options.pop('prompt', None)
  option_attrs = tag_options.pop('options', None) or {}
  group_attrs = tag_options.pop('groups', None) or {}

  lines:list[str] = []
  if prompt is not None:
    prompt_attrs:dict[str,Any] = { 'value': '' }
    if isinstance(prompt, Mapping):
      prompt_text = prompt['text']
      prompt_attrs.update(prompt.get('options') or {})
    else:
      prompt_text = prompt
    lines.append(_fmt_option(prompt_text, prompt_attrs, encode_labels, encode_spaces, config))

  lines.extend(_render_items(selection, items, option_attrs, group_attrs, encode_labels, encode_spaces, config))
  return '\n'.join(lines)


def _render_items(selection:Selection, items:SelectItems, option_attrs:Mapping, group_attrs:Mapping, encode_labels:bool,
 encode_spaces:bool, config:HtmlConfig) -> Iterator[str]:
  'Recursive helper to `render_select_options`.'
  for key, val in items.items():
    if isinstance(val, OptGroup):
      attrs = { **val.attrs, **_lookup(group_attrs, key) }
      nested:SelectItems|None = val.items
    elif isinstance(val, Mapping):
      attrs = dict(_lookup(group_attrs, key))
      nested = val
    else:
      nested = None

    if nested is not None:
      if attrs.get('label') is None: attrs['label'] = str(key)
      content = '\n'.join(_render_items(selection, nested, option_attrs, group_attrs, encode_labels, encode_spaces, config))
      yield f'<optgroup{render_tag_attributes(attrs, config=config)}>\n{content}\n</optgroup>'
      continue

    attrs = dict(_lookup(option_attrs, key))
    attrs['value'] = attr_str(key)
    if 'selected' in attrs:
      logger.debug('option %r: explicit `selected` overrides the selection: %r', key, attrs['selected'])
    else:
      attrs['selected'] = is_selected(key, selection)
    yield _fmt_option(val, attrs, encode_labels, encode_spaces, config)


def _fmt_option(label:Any, attrs:Mapping[str,Any], encode_labels:bool, encode_spaces:bool, config:HtmlConfig) -> str:
  if label is None: text = ''
  else: text = label if isinstance(label, str) else attr_str(label)
  if encode_labels: text = encode(text, charset=config.charset)
  if encode_spaces: text = text.replace(' ', '&nbsp;')
  return f'<option{render_tag_attributes(attrs, config=config)}>{text}</option>'


def _lookup(table:Mapping, key:Any) -> Mapping[str,Any]:
  'Look up per-item attributes by key, falling back to the text form of the key.'
  attrs = table.get(key)
  if attrs is None: attrs = table.get(attr_str(key))
  return attrs or {}


def normalize_selection(selection:Selection) -> Selection:
  '''
  Prepare a selection for `is_selected`.
  Scalars are returned unchanged; any other iterable becomes a frozenset of the text forms of its values
  (the values of a mapping, not its keys).
  '''
  if selection is None or isinstance(selection, scalar_selection_types): return selection
  if isinstance(selection, Mapping): selection = selection.values()
  try: it = iter(selection)
  except TypeError: return selection
  return frozenset(_selection_str(s) for s in it)


def is_selected(key:Any, selection:Selection) -> bool:
  '''
  Test whether the option or choice `key` is selected by a normalized `selection`.
  Comparison uses the text forms of the key and the selection values.
  '''
  if selection is None: return False
  if isinstance(selection, AbstractSet): return attr_str(key) in selection
  return attr_str(key) == _selection_str(selection)


def _selection_str(val:Any) -> str:
  'A boolean selection matches the key `1` (True) or the empty key (False).'
  if isinstance(val, bool): return '1' if val else ''
  return attr_str(val)
