from enum import Enum


class SplitKind(str, Enum):
    EQUAL = "equal"
    EXACT = "exact"
    PERCENT = "percent"

    @classmethod
    def parse(cls, value):
        """Accept a SplitKind, its value ("equal") or its name ("EQUAL")."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for kind in cls:
            if text.lower() == kind.value or text.upper() == kind.name:
                return kind
        raise ValueError(f"Unknown split type: {value}")
