icons = {}

STYLES = ("compatible", "standard", "nerdfont")


def init(style: str = "compatible"):
    """
    Initializes the glyphs used around the clock.

    :param style: Name of the style set. Options:
                  - 'compatible' (default)
                  - 'standard'
                  - 'nerdfont'
    """
    global icons

    if style == "compatible":
        icons = {
            "clock": "T",
            "stopped": "#",
        }

    elif style == "standard":
        icons = {
            "clock": "🕒",
            "stopped": "■",
        }

    elif style == "nerdfont":
        icons = {
            "clock": "󰥔",
            "stopped": "󰓛",
        }

    else:
        raise ValueError(f"Unknown style: {style}")


init()
