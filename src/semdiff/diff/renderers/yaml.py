#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/renderers/yaml.py
"""YAML diff renderer.

Produces the same logical shape as the JSON renderer, as a block-style YAML
sequence with keys in entry order:

.. code-block:: yaml

    - type: Modified
      path: b
      oldValue: 2
      newValue: 3

"""

from __future__ import annotations

import logging
from typing import Iterable

from semdiff.constants import DEPS_YAML
from semdiff.diff.renderers.base import BaseDiffRenderer, EntryLike
from semdiff.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class YamlDiffRenderer(BaseDiffRenderer):
    """Render entries as a YAML sequence of mappings.

    Parameters
    ----------
    indent : int, default = 2
        Indentation width for nested mappings

    """

    format_name = "yaml"

    def __init__(self, indent: int = 2):
        """Initialize the YAML diff renderer."""
        self.indent = indent

    @requires_dependencies("yaml", DEPS_YAML)
    def render(self, entries: Iterable[EntryLike]) -> str:
        """Render ``entries``; an empty list renders as ``[]``."""
        import yaml

        data = self._as_dicts(entries)
        logger.debug(f"Rendering {len(data)} entr{'y' if len(data) == 1 else 'ies'} as YAML")
        return yaml.dump(
            data,
            indent=self.indent,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
