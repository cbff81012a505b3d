# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Escaping helpers: HTML entity encoding and decoding, attribute value coercion, and JavaScript regex conversion.
'''

import re
from html.entities import html5 as _html5_entities
from typing import Any, Match, overload, Union

from .exceptions import InvalidArgument


def encode(content:Any, charset:str='utf-8') -> str:
  '''
  Encode the characters that are special in HTML text and quoted attribute values:
  `&`, `<`, `>`, `"` and `'` (the latter as the HTML5 `&apos;` entity).
  Existing character references are not encoded a second time, so `encode('&amp;')` returns `&amp;`.
  Invalid input is substituted rather than rejected: undecodable bytes and lone surrogates become U+FFFD.
  '''
  if content is None: return ''
  if isinstance(content, bytes):
    content = content.decode(charset, errors='replace')
  elif not isinstance(content, str):
    content = attr_str(content)
  content = _surrogate_re.sub('\ufffd', content)
  return _encode_re.sub(_encode_match, content)


def decode(content:str) -> str:
  'Decode the entities produced by `encode`. Other character references are left as is.'
  return _decode_re.sub(_decode_match, content)


def _encode_match(match:Match) -> str:
  text = match[0]
  if text[0] != '&': return _encoded_chars[text]
  ref = match[1]
  if ref is None: return '&amp;'
  if ref[0] == '#' or ref in _html5_entities: return text # Already a character reference.
  return '&amp;' + ref


def _decode_match(match:Match) -> str:
  name = match[1].lower()
  try: return _decoded_entities[name]
  except KeyError: pass
  return "'" # Numeric forms of the apostrophe.


_encode_re = re.compile(r'''&(#[0-9]+;|#[xX][0-9a-fA-F]+;|[A-Za-z][A-Za-z0-9]*;)?|[<>"']''')
_surrogate_re = re.compile(r'[\ud800-\udfff]')

_encoded_chars = {
  '<': '&lt;',
  '>': '&gt;',
  '"': '&quot;',
  "'": '&apos;',
}

_decode_re = re.compile(r'&(amp|lt|gt|quot|apos|#0*39|#x0*27);', flags=re.IGNORECASE)

_decoded_entities = {
  'amp': '&',
  'lt': '<',
  'gt': '>',
  'quot': '"',
  'apos': "'",
}


@overload
def prefer_int(v:int) -> int: ...
@overload
def prefer_int(v:float) -> Union[int,float]: ...
@overload
def prefer_int(v:str) -> str: ...

def prefer_int(v:Union[float,int,str]) -> Union[float,int,str]:
  'Convert integral floats to int.'
  if isinstance(v, float) and v.is_integer(): return int(v)
  return v


def attr_str(val:Any) -> str:
  '''
  Coerce a scalar attribute value to text.
  Booleans render as `true`/`false` and integral floats render as integers.
  '''
  if val is True: return 'true'
  if val is False: return 'false'
  if isinstance(val, str): return val
  return str(prefer_int(val))


def escape_js_regular_expression(regexp:str) -> str:
  '''
  Convert a delimited regular expression (e.g. `#^\\d+$#i`) into a JavaScript regex literal.
  Hex escapes `\\xHH` and `\\x{HHHH}` become `\\uHHHH`;
  a delimiter other than `/` is replaced and any inner slashes are escaped;
  flags are filtered to those JavaScript understands (`i`, `g`, `m`).
  '''
  pattern = _js_hex_escape_re.sub(r'\\u\1', regexp)
  if not pattern: raise InvalidArgument('regular expression must not be empty.')
  delimiter = pattern[0]
  pos = pattern.rfind(delimiter, 1)
  if pos < 1: raise InvalidArgument(f'regular expression is missing its closing delimiter: {regexp!r}')
  flags = pattern[pos+1:]
  if delimiter != '/':
    pattern = '/' + pattern[1:pos].replace('/', '\\/') + '/'
  else:
    pattern = pattern[:pos+1]
  return pattern + _js_flags_invalid_re.sub('', flags)


_js_hex_escape_re = re.compile(r'\\x\{?([0-9a-fA-F]+)\}?')
_js_flags_invalid_re = re.compile(r'[^igm]')
