import json
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Fenêtre de message (valeurs par défaut du moteur)
DEFAULT_PADDING = 18
DEFAULT_FACE_WIDTH = 144
DEFAULT_FACE_MARGIN = 20
SAFETY_MARGIN_RATIO = 0.95
MINIMUM_WIDTH = 200

# Estimation quand la mesure de texte n'est pas disponible
PER_CHAR_ESTIMATE = 24

DEFAULT_FONT_SIZE = 18

ENV_MAX_WIDTH = "WRAP_MAX_WIDTH"
ENV_MERGE = "WRAP_MERGE_NEXT_LINE"
ENV_CHAIN = "WRAP_CHAIN"
ENV_PRESERVE_EMPTY = "WRAP_PRESERVE_EMPTY_LINES"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class WrapPolicy:
    """
    Réglages du retour à la ligne, construits une seule fois au démarrage.
    override_width = 0 signifie "largeur automatique".
    """
    override_width: int = 0
    merge_with_next_line: bool = False
    chain_wrapping: bool = False
    preserve_empty_lines: bool = True


def _parse_bool(name: str, raw, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return default
    value = str(raw).strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Invalid boolean for %s: %r, using %s", name, raw, default)
    return default


def _parse_width(name: str, raw, default: int = 0) -> int:
    if raw is None or raw == "":
        return default
    try:
        width = int(float(raw))
    except (TypeError, ValueError):
        logger.warning("Invalid width for %s: %r, using %s", name, raw, default)
        return default
    # Une largeur négative n'a pas de sens : on repasse en automatique
    return max(width, 0)


def load_policy(environ=None) -> WrapPolicy:
    """
    Lit la politique depuis l'environnement (fichier .env inclus).
    Les valeurs illisibles retombent sur les valeurs par défaut.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    defaults = WrapPolicy()
    return WrapPolicy(
        override_width=_parse_width(ENV_MAX_WIDTH, environ.get(ENV_MAX_WIDTH)),
        merge_with_next_line=_parse_bool(
            ENV_MERGE, environ.get(ENV_MERGE), defaults.merge_with_next_line
        ),
        chain_wrapping=_parse_bool(
            ENV_CHAIN, environ.get(ENV_CHAIN), defaults.chain_wrapping
        ),
        preserve_empty_lines=_parse_bool(
            ENV_PRESERVE_EMPTY, environ.get(ENV_PRESERVE_EMPTY), defaults.preserve_empty_lines
        ),
    )


def load_policy_file(path: str) -> WrapPolicy:
    """
    Lit un fichier JSON de réglages avec les noms de paramètres du plugin :
    maxWidth, mergeWithNextLine, chainWrapping, preserveEmptyLines.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Wrap settings file missing at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            settings = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid wrap settings in {path}: {exc}") from exc

    if not isinstance(settings, dict):
        raise ValueError(f"Wrap settings in {path} must be a JSON object")

    defaults = WrapPolicy()
    return WrapPolicy(
        override_width=_parse_width("maxWidth", settings.get("maxWidth")),
        merge_with_next_line=_parse_bool(
            "mergeWithNextLine", settings.get("mergeWithNextLine"), defaults.merge_with_next_line
        ),
        chain_wrapping=_parse_bool(
            "chainWrapping", settings.get("chainWrapping"), defaults.chain_wrapping
        ),
        preserve_empty_lines=_parse_bool(
            "preserveEmptyLines", settings.get("preserveEmptyLines"), defaults.preserve_empty_lines
        ),
    )


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure le logger racine d'après LOG_LEVEL."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return logging.getLogger()
