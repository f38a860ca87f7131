from typing import List, Tuple

from message_wrap.width_oracle import WidthOracle


def _tokenize(line: str) -> List[str]:
    # Les espaces répétés produisent des tokens vides : on les ignore
    return [word for word in line.split(" ") if word]


def wrap_line(line: str, available_width: float, oracle: WidthOracle) -> List[str]:
    """
    Coupe une ligne logique aux espaces pour que chaque ligne tienne
    dans available_width. Un mot trop large à lui seul sort tel quel.
    Une ligne vide donne [""], jamais une liste vide.
    """
    if not line or not line.strip():
        return [""]

    wrapped = []
    current = ""

    for word in _tokenize(line):
        candidate = f"{current} {word}" if current else word

        if oracle.fits(candidate, available_width):
            current = candidate
        elif current:
            wrapped.append(current)
            current = word
        else:
            wrapped.append(word)
            current = ""

    if current:
        wrapped.append(current)

    return wrapped or [""]


def find_optimal_split(text: str, available_width: float, oracle: WidthOracle) -> Tuple[str, str]:
    """
    Plus long préfixe qui tient, et le reste.
    Le préfixe contient toujours au moins le premier mot, même s'il déborde.
    """
    words = _tokenize(text)
    fitting = ""

    for index, word in enumerate(words):
        candidate = f"{fitting} {word}" if fitting else word

        if oracle.fits(candidate, available_width):
            fitting = candidate
            continue

        if not fitting:
            return word, " ".join(words[index + 1:])
        return fitting, " ".join(words[index:])

    return fitting, ""
