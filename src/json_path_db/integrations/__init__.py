"""Integrations subpackage for json-path-db.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point)

The plugin module is not imported here, so importing json_path_db never
imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
