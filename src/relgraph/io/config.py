"""
Configuration for the relgraph load path.

Defines GraphSettings, a frozen dataclass carrying the header names, CSV delimiter, source URL
suffix, HTTP timeout and palette. Defaults are sourced from relgraph.core.constants (the single
source of truth).

Precedence
- env (RELGRAPH_*) > TOML (relgraph.toml or [tool.relgraph] in pyproject.toml) > defaults.
- Invalid values are ignored and the previous value is kept.

Import DAG discipline
- Depends only on stdlib and relgraph.core.
- Does not import higher layers (viz, app).
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from relgraph.core.constants import DEFAULT_DELIMITER, DEFAULT_URL_SUFFIX, PALETTE
from relgraph.core.schema import HeaderConfig

from .errors import IoConfigError

__all__ = ["GraphSettings"]

_HEADER_FIELDS = ("model", "from_node", "relationship", "to_node", "experiment")


@dataclass(frozen=True)
class GraphSettings:
    """
    Runtime settings for loading a CSV dataset into a graph.

    Attributes:
        headers (HeaderConfig): Column names for model/from_node/relationship/to_node/experiment.
        delimiter (str): CSV field separator (default ";").
        url_suffix (str): Required suffix of the source URL (default ".csv").
        request_timeout (float): HTTP timeout in seconds for the fetch.
        palette (tuple[str, ...]): Experiment colors, reused round-robin.

    Examples:
        >>> GraphSettings().headers.to_node
        'to_node'
        >>> GraphSettings(delimiter=",").delimiter
        ','
    """

    headers: HeaderConfig = field(default_factory=HeaderConfig)
    delimiter: str = DEFAULT_DELIMITER
    url_suffix: str = DEFAULT_URL_SUFFIX
    request_timeout: float = 30.0
    palette: tuple[str, ...] = PALETTE

    @classmethod
    def _apply_mapping(cls, base: GraphSettings, cfg: dict[str, Any] | None) -> GraphSettings:
        """Apply a loose config mapping onto GraphSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        # headers (nested mapping); blank names are ignored
        hdrs = cfg.get("headers")
        if isinstance(hdrs, dict):
            updates = {
                k: v.strip()
                for k, v in hdrs.items()
                if k in _HEADER_FIELDS and isinstance(v, str) and v.strip()
            }
            if updates:
                s = replace(s, headers=s.headers.model_copy(update=updates))

        # delimiter: exactly one character
        if isinstance(cfg.get("delimiter"), str) and len(cfg["delimiter"]) == 1:
            s = replace(s, delimiter=cfg["delimiter"])

        if isinstance(cfg.get("url_suffix"), str):
            s = replace(s, url_suffix=cfg["url_suffix"].strip())

        if "request_timeout" in cfg:
            try:
                timeout = float(cfg["request_timeout"])
            except (TypeError, ValueError):
                timeout = -1.0
            if timeout > 0:
                s = replace(s, request_timeout=timeout)

        # palette: list of colors or a comma-separated string; empty palettes are ignored
        pal = cfg.get("palette")
        if isinstance(pal, str):
            pal = pal.split(",")
        if isinstance(pal, (list, tuple)):
            colors = tuple(str(c).strip() for c in pal if str(c).strip())
            if colors:
                s = replace(s, palette=colors)

        return s

    @classmethod
    def from_env(
        cls, base: GraphSettings | None = None, prefix: str = "RELGRAPH_"
    ) -> GraphSettings:
        """
        Build GraphSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - RELGRAPH_HEADER_MODEL, RELGRAPH_HEADER_FROM_NODE, RELGRAPH_HEADER_RELATIONSHIP,
              RELGRAPH_HEADER_TO_NODE, RELGRAPH_HEADER_EXPERIMENT
            - RELGRAPH_DELIMITER
            - RELGRAPH_URL_SUFFIX
            - RELGRAPH_REQUEST_TIMEOUT
            - RELGRAPH_PALETTE (comma-separated colors)
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        for hf in _HEADER_FIELDS:
            v = get("HEADER_" + hf.upper())
            if v:
                mapping.setdefault("headers", {})[hf] = v
        v = get("DELIMITER")
        if v:
            mapping["delimiter"] = v
        v = get("URL_SUFFIX")
        if v is not None:
            mapping["url_suffix"] = v
        v = get("REQUEST_TIMEOUT")
        if v:
            mapping["request_timeout"] = v
        v = get("PALETTE")
        if v:
            mapping["palette"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> GraphSettings:
        """
        Build GraphSettings from a TOML file.

        Search order when `path` is None:
            1) ./relgraph.toml (with either a top-level [graph] table or direct keys)
            2) ./pyproject.toml under [tool.relgraph]

        Returns defaults if no file is present.

        Raises:
            IoConfigError: If an explicit `path` is missing or is not valid TOML.
        """
        s = cls()

        if path is not None:
            p = Path(path)
            if not p.exists():
                raise IoConfigError(f"Config file not found: {p}")
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as e:
                raise IoConfigError(f"Invalid TOML in {p}: {e}") from e
            return cls._apply_mapping(s, _section(p, data))

        for p in (Path.cwd() / "relgraph.toml", Path.cwd() / "pyproject.toml"):
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                continue
            cfg = _section(p, data)
            if cfg:
                return cls._apply_mapping(s, cfg)

        return s

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> GraphSettings:
        """
        Load GraphSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (relgraph.toml,
                pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s


def _section(p: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    if p.name == "pyproject.toml":
        tool = data.get("tool", {})
        cfg = tool.get("relgraph") if isinstance(tool, dict) else None
        return cfg if isinstance(cfg, dict) else None
    # relgraph.toml - accept either [graph] table or top-level keys
    if isinstance(data.get("graph"), dict):
        cfg = dict(data["graph"])
        # [headers] at top level still applies when keys live under [graph]
        if "headers" not in cfg and isinstance(data.get("headers"), dict):
            cfg["headers"] = data["headers"]
        return cfg
    return data
