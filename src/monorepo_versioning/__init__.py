"""monorepo-versioning: per-component semantic versions for monorepos.

Versions and release notes are derived from conventional commits whose
scope names the component, and published as GitHub releases tagged
``<component>-<version>``.
"""

from __future__ import annotations

__version__ = "0.1.0"
