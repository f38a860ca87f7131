import logging
import math
from typing import Callable, Optional

from message_wrap.config import PER_CHAR_ESTIMATE

logger = logging.getLogger(__name__)

MeasureFn = Callable[[str], float]


class WidthOracle:
    """
    Donne la largeur en pixels d'une chaîne.
    Si la fonction de mesure est absente, plante ou renvoie n'importe quoi,
    on retombe sur len(text) * per_char_estimate (jamais d'exception).
    """

    def __init__(self, measure: Optional[MeasureFn] = None, per_char_estimate: float = PER_CHAR_ESTIMATE):
        self.measure_fn = measure
        self.per_char_estimate = per_char_estimate

    def estimate(self, text: str) -> float:
        return len(text) * self.per_char_estimate

    def measure(self, text: str) -> float:
        if self.measure_fn is None:
            return self.estimate(text)

        try:
            width = self.measure_fn(text)
        except Exception as exc:
            logger.debug("Text measurement failed for %r: %s", text, exc)
            return self.estimate(text)

        if isinstance(width, bool) or not isinstance(width, (int, float)):
            logger.debug("Text measurement returned %r for %r", width, text)
            return self.estimate(text)
        if not math.isfinite(width) or width < 0:
            logger.debug("Text measurement returned %r for %r", width, text)
            return self.estimate(text)

        return width

    def fits(self, text: str, available_width: float) -> bool:
        return self.measure(text) <= available_width
