"""Development entry point: ``python app.py`` or ``flask --app app run``."""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src" / "time_tracker"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from time_tracker.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
