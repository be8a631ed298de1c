"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`, or the file
       named by ``TEXTNAV_CONFIG`` when no path is given
    3. Environment variable ``TEXTNAV_RATE`` overriding ``reading.rate``
"""

from .schema import ConfigModel, load_config

__all__ = ["ConfigModel", "load_config"]
