"""Render configuration.

Rendering is pure; the only knob is the positional marker emitted for each
placeholder.  ``"?"`` suits qmark drivers (``sqlite3``, ``pyodbc``), ``"%s"``
suits format-style drivers (``PyMySQL``, ``mysqlclient``).  The parameter list is identical either way.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class RenderConfig(BaseModel):
    """Options applied when a fragment or statement is rendered.

    Attributes:
        placeholder: Marker written for every bound parameter.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    placeholder: Literal["?", "%s"] = "?"


#: Config used when ``render()`` is called without one.
DEFAULT_CONFIG = RenderConfig()
