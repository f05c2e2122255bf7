from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_NOT_FOUND = 3
ERR_PARSE = 4
ERR_VALIDATION = 5
ERR_INTERNAL = 99
