"""Canonical ASCII code to Unicode symbol table.

Entries are ``(code, symbol)`` pairs grouped by category. The list must be a
bijection: :meth:`Table.load` refuses duplicated codes and duplicated symbols.
"""
from __future__ import annotations

from typing import List, Tuple

TABLE: List[Tuple[str, str]] = [
    # Signs and punctuation
    ("<", "⟨"),
    (">", "⟩"),
    ("//", "⫽"),
    # Generic notational
    ("_ 0", "₀"),
    ("_ 1", "₁"),
    ("_ 2", "₂"),
    ("_ 3", "₃"),
    ("_ 4", "₄"),
    ("_ 5", "₅"),
    ("_ 6", "₆"),
    ("_ 7", "₇"),
    ("_ 8", "₈"),
    ("_ 9", "₉"),
    ("^0", "⁰"),
    ("^1", "¹"),
    ("^2", "²"),
    ("^3", "³"),
    ("^4", "⁴"),
    ("^5", "⁵"),
    ("^6", "⁶"),
    ("^7", "⁷"),
    ("^8", "⁸"),
    ("^9", "⁹"),
    ("_ a", "ₐ"),
    ("_ e", "ₑ"),
    ("_ o", "ₒ"),
    ("_ h", "ₕ"),
    # Miscellaneous
    ("0", "∅"),
    ("t", "þ"),
    # IPA tone
    ("1", "˩"),
    ("2", "˨"),
    ("3", "˧"),
    ("4", "˦"),
    ("5", "˥"),
    # IPA vowel letters
    ("a", "ɐ"),
    ("ae", "æ"),
    ("OE", "ɶ"),
    ("aa", "ɑ"),
    ("ao", "ɒ"),
    ("e", "ɛ"),
    ("oe", "œ"),
    ("eA", "ɜ"),
    ("oA", "ɞ"),
    ("A", "ʌ"),
    ("o", "ɔ"),
    ("ea", "ə"),
    ("oi", "ø"),
    ("ia", "ɘ"),
    ("io", "ɵ"),
    ("oa", "ɤ"),
    ("I", "ɪ"),
    ("Y", "ʏ"),
    ("U", "ʊ"),
    ("i", "ɨ"),
    ("u", "ʉ"),
    ("ua", "ɯ"),
    # IPA consonant letters
    ("ph", "ɸ"),
    ("b", "β"),
    ("g", "ɣ"),
    ("d", "ð"),
    ("th", "θ"),
    ("lo", "ɫ"),
    ("r", "ɹ"),
    ("rd", "ɾ"),
    ("sr", "ʂ"),
    ("sc", "ʃ"),
    ("sj", "ɕ"),
    ("c", "ç"),
    ("j", "ʝ"),
    ("J", "ɟ"),
    ("x", "χ"),
    ("R", "ʀ"),
    ("Rh", "ʁ"),
    ("y", "ɥ"),
    # IPA length
    (":", "ː"),
    (".", "ˑ"),
    ("#.", "\u032f"),
    ("#^.", "\u0311"),
    # IPA prosody
    ("'", "ˈ"),
    (",", "ˌ"),
    # IPA phonation
    ("^h", "ʰ"),
    ("^hv", "ʱ"),
    ("^=", "˭"),
    # IPA articulation
    ("#:", "\u0308"),
    # IPA coarticulation
    ("#^", "\u0361"),
    ("#_ ", "\u035c"),
    ("^w", "ʷ"),
    ("^j", "ʲ"),
    ("^-g", "ˠ"),
    ("^-y", "ᶣ"),
]

__all__ = ["TABLE"]
