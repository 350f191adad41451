from __future__ import annotations

import importlib
from unittest.mock import patch


def test___main__does_not_invoke_cli_on_import() -> None:
    with patch("netinsight.cli.main") as m:
        import netinsight.__main__ as entry

        importlib.reload(entry)
        m.assert_not_called()
