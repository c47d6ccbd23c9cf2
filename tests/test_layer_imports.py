"""The core package must import without the optional pandas extra."""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_core_import_does_not_need_pandas():
    code = (
        "import sys\n"
        "sys.modules['pandas'] = None\n"
        "import object_schema\n"
        "schema = object_schema.ObjectSchema({'n': {'merge': 'overwrite'}})\n"
        "assert schema.merge({'n': 1}, {'n': 2}) == {'n': 2}\n"
        "assert 'object_schema.frames' not in sys.modules\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=ROOT,
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert result.returncode == 0, result.stdout + result.stderr
