from .exception import ParseError

VALUE_TYPES = ('int', 'float', 'str')

def parse_value(s, value_type='int'):
    """Parses s as a value of value_type ('int', 'float' or 'str')

    Integers may carry a base prefix (0x, 0o, 0b).
    """
    if value_type == 'str':
        return s
    try:
        if value_type == 'int':
            return int(s.strip(), 0)
        elif value_type == 'float':
            return float(s)
    except ValueError:
        raise ParseError("invalid ", value_type, " value `", printsafe(s), "'")
    raise ValueError("unknown value type: " + str(value_type))

def is_sorted(values):
    return all(a <= b for a, b in zip(values, values[1:]))

def printsafe(s):
    return ''.join(map(lambda c: c if c.isprintable() else '\uFFFD', s))
