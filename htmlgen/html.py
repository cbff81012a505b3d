# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Html` provides methods for generating commonly used HTML tags as strings.

Nearly all of the methods accept an `options` mapping of HTML attributes for the generated tag,
which is rendered by `render_tag_attributes`. `options` is copied before it is modified,
except by `render_select_options`, which consumes its directive keys from the mapping it is given.
'''

from typing import Any, Callable, Iterable, Mapping, MutableMapping

from .attrs import render_tag_attributes
from .config import default_config, HtmlConfig
from .escape import attr_str, encode
from .select import is_selected, normalize_selection, render_select_options, Selection, SelectItems


Options = Mapping[str,Any]|None

ChoiceFormatter = Callable[[int,Any,str,bool,Any],str] # (index, label, name, checked, value) -> markup.
ListItemFormatter = Callable[[Any,Any],str] # (item, index) -> markup.


class Html:
  '''
  A tag generator bound to a particular `HtmlConfig`.
  The package-level functions are the methods of a default instance.
  '''

  def __init__(self, config:HtmlConfig=default_config) -> None:
    self.config = config


  def __repr__(self) -> str: return f'{type(self).__name__}({self.config!r})'


  # Core.

  def encode(self, content:Any) -> str:
    'Entity-encode `content` using the configured charset.'
    return encode(content, charset=self.config.charset)


  def render_tag_attributes(self, attributes:Options) -> str:
    return render_tag_attributes(attributes, config=self.config)


  def render_select_options(self, selection:Selection, items:SelectItems, tag_options:MutableMapping[str,Any]|None=None) -> str:
    return render_select_options(selection, items, tag_options, config=self.config)


  def tag(self, name:str|None|bool, content:str='', options:Options=None) -> str:
    '''
    Generate a complete tag. `content` is not encoded.
    If `name` is None or False, `content` is returned without a tag.
    Void elements (e.g. `img`, `br`) are rendered without content or a closing tag.
    '''
    if name is None or name is False: return content
    assert isinstance(name, str), name
    start = f'<{name}{self.render_tag_attributes(options)}>'
    if self.config.is_void(name): return start
    return f'{start}{content}</{name}>'


  def begin_tag(self, name:str|None|bool, options:Options=None) -> str:
    'Generate a start tag, or the empty string if `name` is None or False.'
    if name is None or name is False: return ''
    return f'<{name}{self.render_tag_attributes(options)}>'


  def end_tag(self, name:str|None|bool) -> str:
    'Generate an end tag, or the empty string if `name` is None or False.'
    if name is None or name is False: return ''
    return f'</{name}>'


  # Metadata.

  def style(self, content:str, options:Options=None) -> str:
    return self.tag('style', content, options)


  def script(self, content:str, options:Options=None) -> str:
    return self.tag('script', content, options)


  def css_file(self, url:str, options:Options=None) -> str:
    '''
    Generate a link tag that refers to an external CSS file.
    The `condition` option (e.g. `lt IE 9`) wraps the tag in conditional comments;
    `noscript=True` wraps it in a noscript tag.
    '''
    opts = dict(options or {})
    if opts.get('rel') is None: opts['rel'] = 'stylesheet'
    opts['href'] = url
    condition = opts.pop('condition', None)
    if condition is not None:
      return wrap_into_condition(self.tag('link', '', opts), condition)
    if opts.get('noscript') is True:
      del opts['noscript']
      return f'<noscript>{self.tag("link", "", opts)}</noscript>'
    return self.tag('link', '', opts)


  def js_file(self, url:str, options:Options=None) -> str:
    'Generate a script tag that refers to an external JavaScript file. Supports the `condition` option.'
    opts = dict(options or {})
    opts['src'] = url
    condition = opts.pop('condition', None)
    if condition is not None:
      return wrap_into_condition(self.tag('script', '', opts), condition)
    return self.tag('script', '', opts)


  # Links and media.

  def a(self, text:str, url:str|None=None, options:Options=None) -> str:
    'Generate a hyperlink. `text` is not encoded. If `url` is None, no `href` is rendered.'
    opts = dict(options or {})
    if url is not None: opts['href'] = url
    return self.tag('a', text, opts)


  def mailto(self, text:str, email:str|None=None, options:Options=None) -> str:
    'Generate a mailto hyperlink. If `email` is None, `text` is used as the address.'
    opts = dict(options or {})
    opts['href'] = f'mailto:{text if email is None else email}'
    return self.tag('a', text, opts)


  def img(self, src:str, options:Options=None) -> str:
    '''
    Generate an image tag. `alt` defaults to the empty string.
    The `srcset` option may be a mapping of descriptors to URLs, e.g. `{'2x': 'big.png'}`.
    '''
    opts = dict(options or {})
    opts['src'] = src
    srcset = opts.get('srcset')
    if isinstance(srcset, Mapping):
      opts['srcset'] = ','.join(f'{url} {descriptor}' for descriptor, url in srcset.items())
    if opts.get('alt') is None: opts['alt'] = ''
    return self.tag('img', '', opts)


  def label(self, content:str, for_:str|None=None, options:Options=None) -> str:
    'Generate a label tag. `content` is not encoded.'
    opts = dict(options or {})
    opts['for'] = for_
    return self.tag('label', content, opts)


  # Buttons.

  def button(self, content:str='Button', options:Options=None) -> str:
    'Generate a button tag; `type` defaults to `button`. `content` is not encoded.'
    opts = dict(options or {})
    if opts.get('type') is None: opts['type'] = 'button'
    return self.tag('button', content, opts)


  def submit_button(self, content:str='Submit', options:Options=None) -> str:
    return self.button(content, { **(options or {}), 'type': 'submit' })


  def reset_button(self, content:str='Reset', options:Options=None) -> str:
    return self.button(content, { **(options or {}), 'type': 'reset' })


  # Inputs.

  def input(self, type:str, name:str|None=None, value:Any=None, options:Options=None) -> str:
    'Generate an input tag. A `type` in `options` takes precedence over the `type` argument.'
    opts = dict(options or {})
    if opts.get('type') is None: opts['type'] = type
    opts['name'] = name
    opts['value'] = None if value is None else attr_str(value)
    return self.tag('input', '', opts)


  def button_input(self, label:str='Button', options:Options=None) -> str:
    return self.tag('input', '', { **(options or {}), 'type': 'button', 'value': label })


  def submit_input(self, label:str='Submit', options:Options=None) -> str:
    return self.tag('input', '', { **(options or {}), 'type': 'submit', 'value': label })


  def reset_input(self, label:str='Reset', options:Options=None) -> str:
    return self.tag('input', '', { **(options or {}), 'type': 'reset', 'value': label })


  def text_input(self, name:str, value:Any=None, options:Options=None) -> str:
    return self.input('text', name, value, options)


  def hidden_input(self, name:str, value:Any=None, options:Options=None) -> str:
    return self.input('hidden', name, value, options)


  def password_input(self, name:str, value:Any=None, options:Options=None) -> str:
    return self.input('password', name, value, options)


  def file_input(self, name:str, value:Any=None, options:Options=None) -> str:
    return self.input('file', name, value, options)


  def textarea(self, name:str, value:str|None='', options:Options=None) -> str:
    'Generate a textarea tag. `value` is encoded.'
    opts = dict(options or {})
    opts['name'] = name
    return self.tag('textarea', self.encode(value), opts)


  def radio(self, name:str, checked=False, options:Options=None) -> str:
    'Generate a radio button input. See `boolean_input` for the special options.'
    return self.boolean_input('radio', name, checked, options)


  def checkbox(self, name:str, checked=False, options:Options=None) -> str:
    'Generate a checkbox input. See `boolean_input` for the special options.'
    return self.boolean_input('checkbox', name, checked, options)


  def boolean_input(self, type:str, name:str, checked=False, options:Options=None) -> str:
    '''
    Generate a radio button or checkbox input. The following options are handled specially:
    * `value`: the input value; defaults to `'1'`;
    * `uncheck`: the value submitted when the input is not checked. If set, a hidden input precedes the input;
    * `label`: text for a label tag that wraps the input. It is not encoded;
    * `label_options`: the attributes of the label tag.
    '''
    opts = dict(options or {})
    opts['checked'] = bool(checked)
    value = opts['value'] if 'value' in opts else '1'

    hidden = ''
    uncheck = opts.pop('uncheck', None)
    if uncheck is not None: # A hidden input so that a value is submitted even if the input is not checked.
      hidden_opts:dict[str,Any] = {}
      if opts.get('form') is not None: hidden_opts['form'] = opts['form']
      if opts.get('disabled'): hidden_opts['disabled'] = opts['disabled'] # A disabled input must not submit a value.
      hidden = self.hidden_input(name, uncheck, hidden_opts)

    label = opts.pop('label', None)
    label_opts = opts.pop('label_options', None)
    if label is not None:
      return hidden + self.label(f'{self.input(type, name, value, opts)} {label}', None, label_opts)
    return hidden + self.input(type, name, value, opts)


  # Lists of choices.

  def drop_down_list(self, name:str, selection:Selection=None, items:SelectItems|None=None, options:Options=None) -> str:
    '''
    Generate a drop-down list (a select tag). If the `multiple` option is truthy, this generates a list box instead.
    See `render_select_options` for the options that control the option tags.
    '''
    if options and options.get('multiple'):
      return self.list_box(name, selection, items, options)
    opts = dict(options or {})
    opts['name'] = name
    opts.pop('unselect', None)
    select_options = self.render_select_options(selection, items or {}, opts)
    return self.tag('select', f'\n{select_options}\n', opts)


  def list_box(self, name:str, selection:Selection=None, items:SelectItems|None=None, options:Options=None) -> str:
    '''
    Generate a list box (a select tag with a visible size, 4 by default).
    A multiple-selection list box gets a `[]` suffix on its name.
    The `unselect` option adds a hidden input that submits a value when nothing is selected.
    '''
    opts = dict(options or {})
    if 'size' not in opts: opts['size'] = 4
    if opts.get('multiple') and name and not name.endswith('[]'):
      name += '[]'
    opts['name'] = name

    hidden = ''
    unselect = opts.pop('unselect', None)
    if unselect is not None:
      hidden_name = name[:-2] if name.endswith('[]') else name
      hidden = self.hidden_input(hidden_name, unselect, self._hidden_disabled_options(opts))

    select_options = self.render_select_options(selection, items or {}, opts)
    return hidden + self.tag('select', f'\n{select_options}\n', opts)


  def checkbox_list(self, name:str, selection:Selection=None, items:Mapping[Any,Any]|None=None, options:Options=None) -> str:
    '''
    Generate a list of checkboxes; the name gets a `[]` suffix so that multiple values are submitted.
    See `_choice_list` for the options.
    '''
    if not name.endswith('[]'): name += '[]'
    opts = dict(options or {})
    hidden = ''
    unselect = opts.pop('unselect', None)
    if unselect is not None:
      hidden = self.hidden_input(name[:-2], unselect, self._hidden_disabled_options(opts))
      opts.pop('disabled', None)
    return hidden + self._choice_list(self.checkbox, name, selection, items or {}, opts)


  def radio_list(self, name:str, selection:Selection=None, items:Mapping[Any,Any]|None=None, options:Options=None) -> str:
    'Generate a list of radio buttons. See `_choice_list` for the options.'
    opts = dict(options or {})
    hidden = ''
    unselect = opts.pop('unselect', None)
    if unselect is not None:
      hidden = self.hidden_input(name, unselect, self._hidden_disabled_options(opts))
      opts.pop('disabled', None)
    return hidden + self._choice_list(self.radio, name, selection, items or {}, opts)


  def _choice_list(self, render_choice:Callable[[str,bool,Options],str], name:str, selection:Selection,
   items:Mapping[Any,Any], opts:dict[str,Any]) -> str:
    '''
    Render the items of a checkbox or radio list, consuming these keys from `opts`:
    * `item`: a formatter called as `item(index, label, name, checked, value)` that returns the markup for one choice;
    * `item_options`: attributes for each input when no formatter is given;
    * `encode`: whether to encode labels (default True);
    * `separator`: the text between choices (default newline);
    * `tag`: the container tag (default `div`); False renders the choices without a container.
    The remaining options are the attributes of the container.
    '''
    selection = normalize_selection(selection)
    formatter:ChoiceFormatter|None = opts.pop('item', None)
    item_opts = opts.pop('item_options', None) or {}
    encode_labels = opts.pop('encode', True)
    separator = opts.pop('separator', '\n')
    container = opts.pop('tag', 'div')

    lines:list[str] = []
    for index, (value, label) in enumerate(items.items()):
      checked = is_selected(value, selection)
      if formatter is not None:
        lines.append(formatter(index, label, name, checked, value))
      else:
        choice_label = self.encode(label) if encode_labels else label
        lines.append(render_choice(name, checked, { **item_opts, 'value': value, 'label': choice_label }))
    return self.tag(container, separator.join(lines), opts)


  def _hidden_disabled_options(self, opts:Mapping[str,Any]) -> dict[str,Any]:
    'A disabled control must not submit a value, so its hidden counterpart is disabled as well.'
    disabled = opts.get('disabled')
    return { 'disabled': disabled } if disabled else {}


  def ul(self, items:Iterable[Any], options:Options=None) -> str:
    '''
    Generate an unordered list. The following options are handled specially:
    * `tag`: the list tag (default `ul`);
    * `encode`: whether to encode the items (default True);
    * `item`: a formatter called as `item(item, index)` that returns the markup for one list item;
    * `separator`: the text between items (default newline);
    * `item_options`: the attributes of each li tag when no formatter is given.
    '''
    opts = dict(options or {})
    list_tag = opts.pop('tag', 'ul')
    encode_items = opts.pop('encode', True)
    formatter:ListItemFormatter|None = opts.pop('item', None)
    separator = opts.pop('separator', '\n')
    item_opts = opts.pop('item_options', None) or {}

    pairs = items.items() if isinstance(items, Mapping) else enumerate(items)
    results:list[str] = []
    for index, item in pairs:
      if formatter is not None:
        results.append(formatter(item, index))
      else:
        results.append(self.tag('li', self.encode(item) if encode_items else item, item_opts))
    if not results: return self.tag(list_tag, '', opts)
    return self.tag(list_tag, separator + separator.join(results) + separator, opts)


  def ol(self, items:Iterable[Any], options:Options=None) -> str:
    'Generate an ordered list. See `ul` for the options.'
    return self.ul(items, { **(options or {}), 'tag': 'ol' })


def wrap_into_condition(content:str, condition:str) -> str:
  'Wrap `content` in conditional comments for IE, e.g. `lt IE 9`.'
  if '!IE' in condition:
    return f'<!--[if {condition}]><!-->\n{content}\n<!--<![endif]-->'
  return f'<!--[if {condition}]>\n{content}\n<![endif]-->'
