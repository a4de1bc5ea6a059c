from .core import run_case, run_batch
from .io import write_csv, write_manifest
from .render import render_pattern, render_summary

__all__ = ["run_case", "run_batch", "write_csv", "write_manifest", "render_pattern", "render_summary"]
