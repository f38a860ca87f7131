import logging
from typing import Callable, List, Optional

from message_wrap.config import MINIMUM_WIDTH, PER_CHAR_ESTIMATE, WrapPolicy
from message_wrap.control_codes import wrap_with_alignment
from message_wrap.reflow import reflow
from message_wrap.width_oracle import MeasureFn, WidthOracle

logger = logging.getLogger(__name__)

EscapeConverter = Callable[[str], str]


class WordWrapper:
    """
    Point d'entrée du retour à la ligne automatique.
    La politique est fixée à la construction et n'est plus modifiée.
    """

    def __init__(
        self,
        policy: Optional[WrapPolicy] = None,
        measure: Optional[MeasureFn] = None,
        per_char_estimate: float = PER_CHAR_ESTIMATE,
    ):
        self.policy = policy or WrapPolicy()
        self.oracle = WidthOracle(measure, per_char_estimate)

    def resolve_width(self, available_width: float) -> float:
        # Largeur forcée : jamais sous la largeur minimale
        if self.policy.override_width > 0:
            return max(self.policy.override_width, MINIMUM_WIDTH)
        return available_width

    def wrap_lines(self, lines: List[str], available_width: float) -> List[str]:
        width = self.resolve_width(available_width)

        if not self.policy.preserve_empty_lines:
            lines = [line for line in lines if line.strip()]

        if not self.policy.merge_with_next_line:
            wrapped = []
            for line in lines:
                wrapped.extend(wrap_with_alignment(line, width, self.oracle))
            return wrapped

        wrapped = []
        index = 0
        while index < len(lines):
            emitted, index = reflow(
                lines, index, width, self.oracle, self.policy.chain_wrapping
            )
            wrapped.extend(emitted)
        return wrapped

    def apply(self, text, available_width: float, convert_escapes: Optional[EscapeConverter] = None):
        if convert_escapes is not None and text is not None:
            text = convert_escapes(text)
        if text is None:
            return ""
        if not isinstance(text, str):
            logger.debug("Skipping word wrap for non-text value %r", text)
            return text

        # On garde la convention de fin de ligne du texte reçu
        newline = "\r\n" if "\r\n" in text else "\n"
        lines = text.replace("\r\n", "\n").split("\n")

        wrapped = self.wrap_lines(lines, available_width)
        return newline.join(wrapped)


def apply_word_wrap(
    text,
    available_width: float,
    measure: Optional[MeasureFn] = None,
    policy: Optional[WrapPolicy] = None,
    convert_escapes: Optional[EscapeConverter] = None,
):
    return WordWrapper(policy, measure).apply(text, available_width, convert_escapes)


class WrapCache:
    """Garde le dernier découpage d'un texte tant que la clé ne change pas."""

    def __init__(self, text: str):
        self.text = text
        self._key = None
        self._lines: List[str] = []

    def lines(self, wrapper: WordWrapper, available_width: float, key) -> List[str]:
        if key == self._key:
            return self._lines
        self._lines = wrapper.apply(self.text, available_width).splitlines()
        self._key = key
        return self._lines
