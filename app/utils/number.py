import re
from typing import Optional

# Mesmo critério do parseInt: espaços, sinal opcional e dígitos no início
LEADING_INT_RE = re.compile(r"\s*([-+]?[0-9]+)")


def parse_int(s: Optional[str]) -> Optional[int]:
    """
    Converte o prefixo numérico de `s` em inteiro (base 10).
    "12abc" -> 12, " -7" -> -7, "abc" -> None.
    """
    if s is None:
        return None
    if isinstance(s, bool):
        return None
    if isinstance(s, int):
        return s
    m = LEADING_INT_RE.match(str(s))
    if not m:
        return None
    return int(m.group(1))
