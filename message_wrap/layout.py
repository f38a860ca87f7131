import math

from message_wrap.config import (
    DEFAULT_FACE_MARGIN,
    DEFAULT_PADDING,
    MINIMUM_WIDTH,
    SAFETY_MARGIN_RATIO,
)


def _as_number(value, default):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not math.isfinite(value):
        return default
    return value


def compute_available_width(
    container_width,
    *,
    padding=DEFAULT_PADDING,
    face_width=0,
    face_margin=DEFAULT_FACE_MARGIN,
    margin_ratio=SAFETY_MARGIN_RATIO,
    minimum_width=MINIMUM_WIDTH,
    override_width=0,
) -> int:
    """
    Largeur utile pour le texte dans la fenêtre de message.

    override_width > 0 l'emporte. Sinon : largeur du contenu moins le padding
    des deux côtés, moins la place du portrait s'il y en a un, fois la marge
    de sécurité. Le résultat ne descend jamais sous minimum_width.
    """
    minimum_width = _as_number(minimum_width, MINIMUM_WIDTH)

    override_width = _as_number(override_width, 0)
    if override_width > 0:
        return max(int(override_width), int(minimum_width))

    container_width = _as_number(container_width, 0)
    padding = _as_number(padding, DEFAULT_PADDING)
    base_width = container_width - padding * 2

    face_width = _as_number(face_width, 0)
    if face_width > 0:
        base_width -= face_width + _as_number(face_margin, DEFAULT_FACE_MARGIN)

    usable_width = math.floor(base_width * _as_number(margin_ratio, SAFETY_MARGIN_RATIO))
    return max(usable_width, int(minimum_width))
