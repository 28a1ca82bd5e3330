import yaml


class SchemaError(Exception):
  pass


class ParseError(Exception):
  def __init__(self, message):
    super().__init__(message)
    self.reason = message
    self.sections = []

  def __str__(self):
    if not self.sections:
      return self.reason
    return 'While validating section "{}": {}'.format(
        ".".join(self.sections), self.reason)


class Type(object):
  @classmethod
  def _validate(cls, structure):
    raise NotImplementedError


class Section(Type):
  @classmethod
  def fields(cls):
    for name, schema in cls.__dict__.items():
      if not name.startswith("_"):
        yield name, schema

  @classmethod
  def _validate(cls, structure):
    if not isinstance(structure, dict):
      raise ParseError("Expected section, but got {}: {}.".format(
          type(structure).__name__, structure))

    for name, schema in cls.fields():
      if name not in structure:
        if not isinstance(schema, optional):
          raise ParseError('Required field "{}" not found.'.format(name))
        structure[name] = schema.default
        continue

      if isinstance(schema, optional):
        schema = schema.type

      try:
        structure[name] = validate(structure[name], schema)
      except ParseError as e:
        e.sections.insert(0, name)
        raise

    return structure


class constrained(Type):
  def __init__(self, type, constraint):
    self.type = type
    self.constraint = constraint

  def _validate(self, structure):
    structure = validate(structure, self.type)
    ok, message = self.constraint(structure)
    if not ok:
      raise ParseError("Constraint failure: {}: {}.".format(message,
                                                            structure))
    return structure


class optional(object):
  def __init__(self, type, default=None):
    self.type = type
    self.default = default


def any(values, type=str):
  def check_any(structure):
    if structure in values:
      return True, None
    return False, "must be any of {}".format(
        ", ".join(repr(value) for value in values))

  return constrained(type, check_any)


def validate(structure, schema):
  if isinstance(schema, Type) or issubclass(schema, Type):
    return schema._validate(structure)

  if issubclass(schema, str):
    if isinstance(structure, bytes):
      return structure.decode("utf-8")
    if not isinstance(structure, str):
      raise ParseError("Expected string, but got {}: {}.".format(
          type(structure).__name__, structure))
    return structure

  raise SchemaError("Unknown validation type in schema: {}".format(schema))


def load(filename):
  with open(filename, "r") as f:
    try:
      structure = yaml.safe_load(f)
    except yaml.YAMLError as e:
      raise ParseError("Malformed YAML in {}: {}".format(filename, e))

  if structure is None:
    return {}
  return structure
