"""
dataclasses package
-------------------
Dataclass definitions for imported blog content.

- MtEntry: One post parsed from a Movable Type export, renders to HTML
- MtComment: One reader comment attached to an MtEntry
"""
from mtimport.dataclasses.mt_comment import MtComment
from mtimport.dataclasses.mt_entry import MtEntry

__all__ = ["MtComment", "MtEntry"]
