"""Static metadata describing Guess the Flag."""

APP_NAME = "Guess the Flag"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Guess the Flag is a small desktop quiz built with Qt. "
    "Each round shows three flags; tap the one that belongs to the named country."
)

HELP_TEXT = (
    "A game lasts 8 rounds. In every round the prompt names a country and three flags are shown.\n\n"
    "Tap the flag you think belongs to that country. A correct guess scores one point.\n"
    "Press Continue to move on to the next round. After the last round your final score "
    "is shown and you can start over with Restart.\n\n"
    "Flag images are looked up by country name, e.g. 'France.png' in the flags folder. "
    "Countries without an image are shown by name."
)
