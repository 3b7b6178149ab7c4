"""Hint alphabets and hint generation."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import UnknownAlphabet

# Letters 'n' and 'y' are removed at parse time: they are navigation and
# yank keys.
ALPHABETS: dict[str, str] = {
    "qwerty": "asdfqwerzxcvjklmiuopghtybn",
    "qwerty-homerow": "asdfjklgh",
    "qwerty-left-hand": "asdfqwerzcxv",
    "qwerty-right-hand": "jkluiopmyhn",
    "azerty": "qsdfazerwxcvjklmuiopghtybn",
    "azerty-homerow": "qsdfjkmgh",
    "azerty-left-hand": "qsdfazerwxcv",
    "azerty-right-hand": "jklmuiophyn",
    "qwertz": "asdfqweryxcvjkluiopmghtzbn",
    "qwertz-homerow": "asdfghjkl",
    "qwertz-left-hand": "asdfqweryxcv",
    "qwertz-right-hand": "jkluiopmhzn",
    "dvorak": "aoeuqjkxpyhtnsgcrlmwvzfidb",
    "dvorak-homerow": "aoeuhtnsid",
    "dvorak-left-hand": "aoeupqjkyix",
    "dvorak-right-hand": "htnsgcrlmwvz",
    "colemak": "arstqwfpzxcvneioluymdhgjbk",
    "colemak-homerow": "arstneiodh",
    "colemak-left-hand": "arstqwfpzxcv",
    "colemak-right-hand": "neioluymjhk",
    "longest": "aoeuqjkxpyhtnsgcrlmwvzfidb-;,~<>'@!#$%^&*~1234567890",
}

_RESERVED_KEYS = str.maketrans("", "", "nNyY")


def parse_alphabet(src: str) -> Alphabet:
    """Return the named alphabet, without the reserved keys n, N, y and Y."""
    try:
        letters = ALPHABETS[src]
    except KeyError:
        raise UnknownAlphabet() from None
    return Alphabet(letters.translate(_RESERVED_KEYS))


@dataclass(frozen=True)
class Alphabet:
    """A string of letters that hints are drawn from."""

    letters: str

    def make_hints(self, n: int) -> list[str]:
        """Create `n` hints of one or two letters.

        An alphabet of `m` letters yields at most `m**2` hints; beyond that the
        "longest" alphabet is used, and past its capacity empty hints fill up
        the remainder.
        """
        if len(self.letters) >= n:
            return list(self.letters[:n])

        if len(self.letters) ** 2 >= n:
            letters = self.letters
        else:
            letters = parse_alphabet("longest").letters

        lead = list(letters)
        prev: list[str] = []

        while lead and len(lead) + len(prev) < n:
            prefix = lead.pop()
            needed = n - len(lead) - len(prev)
            prev = [prefix + c for c in letters[:needed]] + prev

        filler = [""] * max(0, n - len(lead) - len(prev))
        return lead + prev + filler