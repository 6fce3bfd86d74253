"""Application entry point and setup for the LetterPlay typing toy."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from letterplay.config import Settings, configure_logging
from letterplay.core.audio import AudioCache
from letterplay.core.drill import DrillMachine
from letterplay.core.words import WordList
from letterplay.ui.main_window import MainWindow
from letterplay.ui.sound import make_sample_loader, play_sound_effect


def run() -> None:
    """Initialize the application, preload letter sounds, and show the main window."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    app.setApplicationName("LetterPlay")
    app.setApplicationDisplayName("LetterPlay")

    words = WordList()
    logging.info(f"Loaded {len(words)} drill words")

    audio = AudioCache(player=play_sound_effect)
    audio.preload(make_sample_loader(settings.audio_dir, app))

    window = MainWindow(machine=DrillMachine(words), audio=audio)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
