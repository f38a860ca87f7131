import dataclasses
import logging

import arcade

from message_wrap.config import DEFAULT_FACE_WIDTH, DEFAULT_FONT_SIZE, WrapPolicy
from message_wrap.control_codes import alignment_of, extract_control_code
from message_wrap.layout import compute_available_width
from message_wrap.text_metrics import make_arcade_measure
from message_wrap.word_wrap import WordWrapper, WrapCache

logger = logging.getLogger(__name__)

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
SCREEN_TITLE = "Auto Word Wrap"
LINE_HEIGHT = 24


class MessageWindow(arcade.Window):
    """
    Petite fenêtre hôte : affiche un message dans une boîte de dialogue,
    coupé par WordWrapper avec les vraies métriques de police.
    """

    def __init__(self, text: str, policy: WrapPolicy):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, SCREEN_TITLE, resizable=True)

        arcade.set_background_color(arcade.color.BLACK)

        self.text = text
        self.policy = policy
        self.measure = make_arcade_measure(DEFAULT_FONT_SIZE)
        self.show_face = False
        self.scroll = 0

        # Lignes coupées, recalculées seulement si la clé change
        self.wrap_cache = WrapCache(text)

        self.wrapper = WordWrapper(self.policy, self.measure)

    def toggle(self, field: str):
        # La politique est immuable : on en reconstruit une
        value = not getattr(self.policy, field)
        self.policy = dataclasses.replace(self.policy, **{field: value})
        self.wrapper = WordWrapper(self.policy, self.measure)
        logger.info("%s -> %s", field, value)

    def box_geometry(self):
        win_w, win_h = self.get_size()
        box_margin = 50
        box_width = win_w - box_margin * 2
        box_height = int(win_h * 0.40)
        return box_margin, box_margin, box_width, box_height

    def wrapped_lines(self, box_width):
        available_width = compute_available_width(
            box_width - 40,
            face_width=DEFAULT_FACE_WIDTH if self.show_face else 0,
            override_width=self.policy.override_width,
        )
        key = (self.policy, self.show_face, box_width)
        return self.wrap_cache.lines(self.wrapper, available_width, key)

    # ---------------------------------------------------------
    #                       DIALOG BOX
    # ---------------------------------------------------------
    def on_draw(self):
        self.clear()

        box_x, box_y, box_width, box_height = self.box_geometry()

        arcade.draw_lbwh_rectangle_filled(
            box_x, box_y, box_width, box_height,
            (0, 0, 0, 200)
        )
        arcade.draw_lbwh_rectangle_outline(
            box_x, box_y, box_width, box_height,
            arcade.color.WHITE, 2
        )

        text_x = box_x + 20
        if self.show_face:
            # Emplacement du portrait
            arcade.draw_lbwh_rectangle_outline(
                box_x + 20, box_y + box_height - 20 - DEFAULT_FACE_WIDTH,
                DEFAULT_FACE_WIDTH, DEFAULT_FACE_WIDTH,
                arcade.color.GRAY, 2
            )
            text_x += DEFAULT_FACE_WIDTH + 20

        history_top = box_y + box_height - 20
        max_lines_on_screen = max(1, (box_height - 40) // LINE_HEIGHT)

        lines = self.wrapped_lines(box_width)
        max_scroll = max(0, len(lines) - max_lines_on_screen)
        self.scroll = min(self.scroll, max_scroll)
        display_lines = lines[self.scroll:self.scroll + max_lines_on_screen]

        text_right = box_x + box_width - 20
        anchors = {
            "left": text_x,
            "center": (text_x + text_right) / 2,
            "right": text_right,
        }

        y = history_top - LINE_HEIGHT
        for line in display_lines:
            # Le code d'alignement n'est pas affiché : il place la ligne
            code, line = extract_control_code(line)
            anchor = alignment_of(code)
            arcade.draw_text(
                line, anchors[anchor], y, arcade.color.WHITE, DEFAULT_FONT_SIZE,
                anchor_x=anchor
            )
            y -= LINE_HEIGHT

        status = (
            f"[F] face={self.show_face}  [M] merge={self.policy.merge_with_next_line}  "
            f"[C] chain={self.policy.chain_wrapping}  [B] blank={self.policy.preserve_empty_lines}"
        )
        arcade.draw_text(status, box_x, box_y + box_height + 10, arcade.color.GRAY, 12)

    # -- Inputs --
    def on_key_press(self, key, modifiers):
        if key == arcade.key.ESCAPE:
            arcade.exit()
        elif key == arcade.key.F:
            self.show_face = not self.show_face
        elif key == arcade.key.M:
            self.toggle("merge_with_next_line")
        elif key == arcade.key.C:
            self.toggle("chain_wrapping")
        elif key == arcade.key.B:
            self.toggle("preserve_empty_lines")

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y):
        if scroll_y > 0:
            self.scroll = max(self.scroll - 1, 0)
        else:
            self.scroll += 1
