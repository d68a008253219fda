"""Word sources for passphrase generation.

The default source is the EFF long diceware list (7776 words) shipped with
the xkcdpass distribution. Each word is addressed by five rolls of a
six-sided die, ``11111`` being the first word and ``66666`` the last.
"""

from typing import Optional, Protocol, Sequence

from xkcdpass import xkcd_password as xp

from core.config import WORDLIST_NAME, DICEWARE_DICE_PER_WORD, DICE_SIDES


class WordSource(Protocol):
    """Anything that can hand out words chosen uniformly at random."""

    def choose(self, rng) -> str:
        ...

    def __len__(self) -> int:
        ...


class StaticWordSource:
    """Word source backed by an in-memory sequence."""

    def __init__(self, words: Sequence[str]):
        if not words:
            raise ValueError("Word list cannot be empty.")
        self.words = list(words)

    def choose(self, rng) -> str:
        return rng.choice(self.words)

    def __len__(self) -> int:
        return len(self.words)


class DicewareWordSource:
    """Diceware word list indexed by rolls of five six-sided dice."""

    def __init__(self, wordfile: str = WORDLIST_NAME):
        # Any word length is valid; only the file's own order matters.
        words = xp.generate_wordlist(wordfile=wordfile, min_length=1, max_length=64)
        self.words = sorted(words)

        expected = DICE_SIDES ** DICEWARE_DICE_PER_WORD
        if len(self.words) != expected:
            raise ValueError(
                f"Diceware list '{wordfile}' has {len(self.words)} words, expected {expected}."
            )

    def word_for_roll(self, roll: str) -> str:
        """Look up the word for a roll such as ``"35421"``.

        Args:
            roll: One digit 1-6 per die

        Returns:
            The word at that position in the list

        Raises:
            ValueError: If the roll has the wrong length or an invalid face
        """
        if len(roll) != DICEWARE_DICE_PER_WORD:
            raise ValueError(f"Roll must have exactly {DICEWARE_DICE_PER_WORD} dice.")

        index = 0
        for face in roll:
            if face not in "123456":
                raise ValueError(f"Invalid die face: {face!r}")
            index = index * DICE_SIDES + (int(face) - 1)

        return self.words[index]

    def roll(self, rng) -> str:
        """Roll the dice for one word."""
        return "".join(str(rng.randint(1, DICE_SIDES)) for _ in range(DICEWARE_DICE_PER_WORD))

    def choose(self, rng) -> str:
        return self.word_for_roll(self.roll(rng))

    def __len__(self) -> int:
        return len(self.words)


_default_word_source: Optional[DicewareWordSource] = None


def get_default_word_source() -> DicewareWordSource:
    """Get the shared diceware word source, loading it on first use."""
    global _default_word_source
    if _default_word_source is None:
        _default_word_source = DicewareWordSource()
    return _default_word_source
