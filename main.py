# main.py
import os
import sys

import arcade
from dotenv import load_dotenv

load_dotenv()

from message_wrap.config import load_policy, load_policy_file, setup_logging
from message_wrap.message_window import MessageWindow

SAMPLE_TEXT = (
    "<center>Welcome, traveller!\n"
    "The old bridge to the north collapsed during the last storm and nobody in the village "
    "has found a plank long enough to repair it.\n"
    "If you help us, the mayor will reward you.\n"
    "\n"
    "Press F to show a portrait, M to merge lines and C to chain the overflow."
)


def read_message(argv):
    if len(argv) < 2:
        return SAMPLE_TEXT
    with open(argv[1], "r", encoding="utf-8") as f:
        return f.read()


def main():
    setup_logging()

    # WRAP_SETTINGS_FILE=config/wrap_settings.json pour utiliser le fichier JSON
    settings_path = os.environ.get("WRAP_SETTINGS_FILE")
    policy = load_policy_file(settings_path) if settings_path else load_policy()

    window = MessageWindow(read_message(sys.argv), policy)
    arcade.run()


if __name__ == "__main__":
    main()
