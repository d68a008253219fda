"""Password strength estimation.

Scoring is delegated entirely to zxcvbn; this module only reshapes its
result into the score, label and feedback shown to the user.
"""

from dataclasses import dataclass, field

from zxcvbn import zxcvbn


# zxcvbn refuses to score inputs longer than this
STRENGTH_MAX_INPUT_LENGTH = 72
STRENGTH_LABELS = ("Weak", "Fair", "Good", "Strong", "Very Strong")


@dataclass
class StrengthReport:
    """Strength estimate for one password."""
    score: int
    warning: str = ""
    suggestions: list[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        return STRENGTH_LABELS[self.score]

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "label": self.label,
            "warning": self.warning,
            "suggestions": list(self.suggestions),
        }


def check_password_strength(password: str) -> StrengthReport:
    """Score a password with zxcvbn.

    Args:
        password: Password or passphrase to score

    Returns:
        StrengthReport with score 0-4, warning and suggestions
    """
    if not password:
        return StrengthReport(score=0)

    result = zxcvbn(password[:STRENGTH_MAX_INPUT_LENGTH])
    feedback = result.get("feedback") or {}

    return StrengthReport(
        score=int(result["score"]),
        warning=feedback.get("warning") or "",
        suggestions=list(feedback.get("suggestions") or []),
    )
