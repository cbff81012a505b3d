# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes.
'''


class InvalidArgument(ValueError):
  '''
  Raised when an argument is well typed but its content cannot be interpreted,
  e.g. an attribute expression containing non-word characters.
  '''
