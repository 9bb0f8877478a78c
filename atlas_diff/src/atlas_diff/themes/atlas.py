from textual.theme import Theme

from atlas_diff.utils.pane_layout import GOLD, GREEN, GREY, RED, SILVER

# Atlas: gold chrome on near-black, matching the diff pane palette
THEMES = [
    Theme(
        name="atlas",
        primary=GOLD,
        secondary=GREY,
        warning=GOLD,
        error=RED,
        success=GREEN,
        accent=GOLD,
        foreground=SILVER,
        background="#101010",
        surface="#1A1A1A",
        panel="#0A0A0A",
        dark=True,
        variables={
            "footer-key-foreground": GOLD,
        },
    )
]
