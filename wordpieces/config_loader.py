from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from rich.console import Console
from rich.table import Table

from .errors import UnreadableSource

c = Console(stderr=True)

DEFAULT_CONFIG = Path(__file__).parent / "config" / "wordpieces.yaml"

REQUIRED_KEYS = {
	"vocab": ("encoding",),
	"corpus": ("encoding",),
	"render": ("continuation_marker", "unknown_token"),
}


def _read_yaml(p: Path) -> dict:
	if not p.exists():
		raise UnreadableSource(p, "config file not found")
	try:
		with p.open("r", encoding="utf-8") as f:
			cfg = yaml.safe_load(f) or {}
	except yaml.YAMLError as e:
		raise UnreadableSource(p, f"invalid YAML: {e}") from e
	except (OSError, UnicodeDecodeError) as e:
		raise UnreadableSource(p, str(e)) from e
	if not isinstance(cfg, dict):
		raise UnreadableSource(p, "config file must contain a YAML mapping")
	return cfg


def merge_config(base: dict, override: dict) -> dict:
	"""Recursively merge ``override`` into a copy of ``base``."""
	merged = dict(base)
	for key, value in override.items():
		if isinstance(value, dict) and isinstance(merged.get(key), dict):
			merged[key] = merge_config(merged[key], value)
		else:
			merged[key] = value
	return merged


def check_config(cfg: dict, source: Path) -> None:
	"""Raise ``UnreadableSource`` naming ``source`` if a required setting is missing or not a string."""
	for section, keys in REQUIRED_KEYS.items():
		values = cfg.get(section)
		if not isinstance(values, dict):
			raise UnreadableSource(source, f"'{section}' must be a mapping")
		for key in keys:
			if not isinstance(values.get(key), str):
				raise UnreadableSource(source, f"'{section}.{key}' must be a string")


@lru_cache(maxsize=4)
def load_wordpieces_config(path: Optional[Path] = None, quiet: bool = True) -> dict:
	"""
	Load the pipeline configuration, optionally rendering a summary table.

	The packaged defaults are always loaded; a user file given by ``path`` is
	merged over them. Results are cached per (path, quiet).

	Args:
		path: Optional user configuration file.
		quiet: If False, prints the effective configuration as a table.

	Raises:
		UnreadableSource: If a file is missing, is not valid YAML, or leaves a
			required setting unset.
	"""
	cfg = _read_yaml(DEFAULT_CONFIG)
	if path is not None:
		cfg = merge_config(cfg, _read_yaml(Path(path)))
	check_config(cfg, DEFAULT_CONFIG if path is None else Path(path))

	if not quiet:
		c.rule("[bold cyan]Word Pieces Config")
		if path is not None:
			c.print(f"[green]✔ Loaded:[/] [cyan]{path}[/cyan]")

		tbl = Table(show_header=True, header_style="bold magenta")
		tbl.add_column("Field", style="dim")
		tbl.add_column("Value")

		tbl.add_row("Vocabulary Encoding", str(cfg["vocab"]["encoding"]))
		tbl.add_row("Corpus Encoding", str(cfg["corpus"]["encoding"]))
		tbl.add_row("Continuation Marker", repr(cfg["render"]["continuation_marker"]))
		tbl.add_row("Unknown Token", repr(cfg["render"]["unknown_token"]))

		c.print(tbl)

	return cfg
