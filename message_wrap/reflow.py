from typing import List, Sequence, Tuple

from message_wrap.control_codes import has_control_code, wrap_with_alignment
from message_wrap.greedy import find_optimal_split, wrap_line
from message_wrap.width_oracle import WidthOracle


def _can_merge_into(line: str) -> bool:
    # Ligne vide ou ligne alignée : barrière de fusion
    return bool(line.strip()) and not has_control_code(line)


def reflow(
    lines: Sequence[str],
    start_index: int,
    available_width: float,
    oracle: WidthOracle,
    chain_wrapping: bool = False,
) -> Tuple[List[str], int]:
    """
    Parcourt les lignes logiques à partir de start_index.

    - la ligne tient : elle sort telle quelle
    - elle déborde sans chaînage : découpage classique
    - elle déborde avec chaînage : la partie qui tient sort, le reste est
      collé devant la ligne suivante puis on recommence sur le résultat

    Renvoie (lignes physiques émises, index de la prochaine ligne à traiter).
    Chaque tour émet une ligne ou avance le curseur, donc la boucle termine.
    """
    emitted: List[str] = []
    cursor = start_index
    if cursor >= len(lines):
        return emitted, cursor

    current = lines[cursor]

    while True:
        if not current.strip():
            emitted.append("")
        elif has_control_code(current):
            emitted.extend(wrap_with_alignment(current, available_width, oracle))
        elif oracle.fits(current, available_width):
            emitted.append(current)
        elif not chain_wrapping:
            emitted.extend(wrap_line(current, available_width, oracle))
        else:
            fitting, overflow = find_optimal_split(current, available_width, oracle)
            if fitting:
                emitted.append(fitting)

            if overflow:
                next_index = cursor + 1
                if next_index < len(lines) and _can_merge_into(lines[next_index]):
                    current = f"{overflow} {lines[next_index]}"
                    cursor = next_index
                    continue

                # Pas de ligne suivante utilisable : le reste est coupé seul
                emitted.extend(wrap_line(overflow, available_width, oracle))
                return emitted, cursor + 1

        cursor += 1
        if cursor >= len(lines):
            return emitted, cursor
        current = lines[cursor]
