"""Run the Work Hours Tracker API locally: ``python app.py``.

Works from a checkout or after ``pip install -e .``.
"""

import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent / "src" / "work_hours"
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from work_hours.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
