# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`HtmlConfig` holds the tables that control rendering.
A config is immutable; use `derive` to create a variant for a particular `Html` instance or test.
'''

from dataclasses import dataclass, replace
from typing import Any, Iterable

from . import semantics


@dataclass(frozen=True)
class HtmlConfig:
  attribute_order:tuple[str,...] = semantics.attribute_order
  data_attributes:frozenset[str] = semantics.data_attributes
  void_elements:frozenset[str] = semantics.void_tags
  charset:str = 'utf-8' # Used to decode `bytes` content before encoding.


  def __post_init__(self) -> None:
    # Coerce caller-provided iterables so that configs stay hashable and cannot be mutated through an alias.
    if not isinstance(self.attribute_order, tuple):
      object.__setattr__(self, 'attribute_order', tuple(self.attribute_order))
    if not isinstance(self.data_attributes, frozenset):
      object.__setattr__(self, 'data_attributes', _frozen_names(self.data_attributes))
    if not isinstance(self.void_elements, frozenset):
      object.__setattr__(self, 'void_elements', _frozen_names(self.void_elements))


  def derive(self, **changes:Any) -> 'HtmlConfig':
    'Return a copy of the config with the named fields replaced.'
    return replace(self, **changes)


  def is_void(self, tag:str) -> bool:
    'Void elements never receive content or a closing tag. Tag names are matched case-insensitively.'
    return tag.lower() in self.void_elements


def _frozen_names(names:Iterable[str]) -> frozenset[str]:
  if isinstance(names, str): return frozenset((names,)) # A single name, not a set of characters.
  return frozenset(names)


default_config = HtmlConfig()
