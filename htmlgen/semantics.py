# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML semantics data used by the attribute renderer and the tag constructor.
These tables are the defaults for `HtmlConfig`; they are never mutated at runtime.
'''

# Elements that never receive content or a closing tag.
# `command` and `keygen` are obsolete but still recognized so that legacy markup renders consistently.
void_tags = frozenset({
  'area',
  'base',
  'br',
  'col',
  'command',
  'embed',
  'hr',
  'img',
  'input',
  'keygen',
  'link',
  'meta',
  'param',
  'source',
  'track',
  'wbr',
})


# Preferred order of attributes in a rendered tag.
# Attributes not listed here keep their input order after the listed ones.
attribute_order = (
  'type',
  'id',
  'class',
  'name',
  'value',

  'href',
  'src',
  'srcset',
  'form',
  'action',
  'method',

  'selected',
  'checked',
  'readonly',
  'disabled',
  'multiple',

  'size',
  'maxlength',
  'width',
  'height',
  'rows',
  'cols',

  'alt',
  'title',
  'rel',
  'media',
)


# Attribute names whose mapping values expand into one `name-key="value"` attribute per key.
# For example `data={'id': 1}` renders as `data-id="1"` rather than as a single JSON attribute.
data_attributes = frozenset({
  'data',
  'data-ng',
  'ng',
})
