import re
from typing import List, Tuple

from message_wrap.greedy import wrap_line
from message_wrap.width_oracle import WidthOracle

# <left> <center> <right> et la forme échappée \TA[0..2]
ALIGNMENT_CODE_RE = re.compile(r"<(?:left|center|right)>|\\ta\[[0-2]\]", re.IGNORECASE)


def extract_control_code(line: str) -> Tuple[str, str]:
    """Retire le premier code d'alignement trouvé et le renvoie à part."""
    match = ALIGNMENT_CODE_RE.search(line)
    if not match:
        return "", line
    return match.group(0), line[:match.start()] + line[match.end():]


def has_control_code(line: str) -> bool:
    return ALIGNMENT_CODE_RE.search(line) is not None


def wrap_with_alignment(line: str, available_width: float, oracle: WidthOracle) -> List[str]:
    code, remainder = extract_control_code(line)

    # Ligne composée uniquement d'un code : jamais coupée
    if code and not remainder.strip():
        return [line]

    wrapped = wrap_line(remainder, available_width, oracle)
    if code:
        wrapped[0] = code + wrapped[0]
    return wrapped


_ALIGNMENTS = {
    "<left>": "left",
    "<center>": "center",
    "<right>": "right",
    "\\ta[0]": "left",
    "\\ta[1]": "center",
    "\\ta[2]": "right",
}


def alignment_of(code: str) -> str:
    """Nom d'ancrage ("left", "center", "right") d'un code ; "left" par défaut."""
    return _ALIGNMENTS.get(code.lower(), "left")
