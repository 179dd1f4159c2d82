"""Global pytest configuration.

Registers the fixture plugin `tests.sample_graphs` without importing it here,
so pytest imports it with assertion rewriting enabled.
"""

from __future__ import annotations

pytest_plugins: list[str] = ["tests.sample_graphs"]
