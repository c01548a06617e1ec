"""Common literal values used across docsite.

Examples
--------
>>> from docsite import _constants
>>> _constants.DEFAULT_CONFIG.name
'docsite.yaml'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("docsite.yaml")
ENV_PREFIX = "DOCSITE_"
