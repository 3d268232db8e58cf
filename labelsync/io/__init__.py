"""I/O utilities for LabelSync.

Provides logging helpers and entity (AnnData / CSV matrix) reading and
writing.
"""

from .logging import attach_file_handler, get_timestamped_log_path, write_record
from .entities import read_entity, write_dataframe, write_entity

__all__ = [
    # Logging
    "attach_file_handler",
    "get_timestamped_log_path",
    "write_record",
    # Entities
    "read_entity",
    "write_entity",
    "write_dataframe",
]
