"""
Constraint declaration parsing.

A declaration is a comma-separated list of rule tokens, each either a bare
rule name (``required``) or ``name=argument`` (``min=3``). Parsing never
fails: unknown names and malformed arguments are left for the validation
driver to report.
"""

from collections.abc import Iterable
from functools import lru_cache

from fieldcheck.core.models import RuleSpec


@lru_cache(maxsize=1024)
def parse_constraints(declaration: str | None) -> tuple[RuleSpec, ...]:
    """
    Parse a raw constraint declaration into rule specs, in declaration order.

    Args:
        declaration: e.g. "required,min=3,max=20"; None or "" means unconstrained

    Returns:
        Tuple of RuleSpec (empty tokens are skipped)

    Examples:
        >>> [str(s) for s in parse_constraints("required, min=3")]
        ['required', 'min=3']
        >>> parse_constraints("min=")[0].argument
        ''
    """
    if not declaration:
        return ()

    specs = []
    for token in declaration.split(","):
        token = token.strip()
        if not token:
            continue

        if "=" in token:
            name, argument = token.split("=", 1)
            specs.append(RuleSpec(name.strip(), argument.strip()))
        else:
            specs.append(RuleSpec(token))

    return tuple(specs)


def format_constraints(specs: Iterable[RuleSpec]) -> str:
    """
    Serialize rule specs back to a canonical declaration string.

    Examples:
        >>> format_constraints(parse_constraints("required , min=3,max=20"))
        'required,min=3,max=20'
    """
    return ",".join(str(spec) for spec in specs)
