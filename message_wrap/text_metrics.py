import arcade

from message_wrap.config import DEFAULT_FONT_SIZE


def make_arcade_measure(font_size: int = DEFAULT_FONT_SIZE, font_name=("calibri", "arial")):
    """
    Fonction de mesure basée sur les métriques de police d'Arcade.
    Un seul objet Text est réutilisé : on change juste son contenu.
    """
    probe = arcade.Text("", 0, 0, arcade.color.WHITE, font_size, font_name=font_name)

    def measure(text: str) -> float:
        probe.text = text
        return probe.content_width

    return measure
