"""Ways to hand an assembled document to the outside world."""

from __future__ import annotations

from paf_builder.output.adapters import default_filename, open_for_print, save_to_file, to_blob

__all__ = ["default_filename", "open_for_print", "save_to_file", "to_blob"]
