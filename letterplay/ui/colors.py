"""Theme colors for the UI."""


class PlayColors:
    """Light, child friendly palette."""

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#b0bec5"

    CORRECT = "#2e7d32"
    CURRENT = "#00838f"
    CURRENT_BG = "#e0f7fa"
    REMAINING = "#b0bec5"

    BUTTON_BG = "rgba(255, 255, 255, 0.85)"
    BUTTON_BORDER = "#b2ebf2"

    # amber wash laid over whatever background is showing
    PRESSED_OVERLAY = "rgba(255, 213, 79, 0.6)"
