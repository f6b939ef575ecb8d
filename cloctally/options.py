"""Options that control how files are selected and analysed."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Optional

LineCallback = Callable[[str], None]


@dataclass
class ClocOptions:
    """Settings for a counting run.

    ``exclude_exts`` and ``include_langs`` hold language names. The four
    pattern fields hold compiled regular expressions or ``None``. The
    ``on_*`` callbacks, when set, receive every stripped line of the
    matching kind.
    """

    debug: bool = False
    skip_duplicated: bool = False
    exclude_exts: set[str] = field(default_factory=set)
    include_langs: set[str] = field(default_factory=set)
    re_not_match: Optional[re.Pattern[str]] = None
    re_match: Optional[re.Pattern[str]] = None
    re_not_match_dir: Optional[re.Pattern[str]] = None
    re_match_dir: Optional[re.Pattern[str]] = None
    fullpath: bool = False
    on_code: Optional[LineCallback] = None
    on_blank: Optional[LineCallback] = None
    on_comment: Optional[LineCallback] = None