from config import DEFAULT_SECRET, DEFAULT_TOY_NAMES

KEY_SUFFIX = "123!"


def validate_key_format(value: str, toy_names=DEFAULT_TOY_NAMES) -> bool:
    """Check a toy production key of the form <ToyName>123!.

    The toy name gets its first letter capitalized before it is looked up
    in ``toy_names``, so "plush123!" is as good as "Plush123!".
    """
    if not isinstance(value, str):
        return False
    parts = value.split(KEY_SUFFIX)
    if len(parts) != 2 or parts[1] != "":
        return False

    toy_name = parts[0]
    if not toy_name:
        return False
    toy_name = toy_name[0].upper() + toy_name[1:]
    return toy_name in toy_names


def validate_secret(value: str, secret: str = DEFAULT_SECRET) -> bool:
    """Exact match against the gatekeeper secret."""
    return isinstance(value, str) and value == secret
