"""
Well-known numeronyms.

Prints the numeronym of a few familiar words and phrases next to the
cluster counts they were built from.
"""

from numeronym import abbreviate

WORDS = [
    "internationalization",
    "localization",
    "accessibility",
    "observability",
    "Kubernetes",
    "Andreessen Horowitz",
    "   shorten ",
    "Győző",
    "🐝👩🏻‍🔬👌🏾",
    "ab",
]

if __name__ == "__main__":
    print("=" * 60)
    print("NUMERONYMS")
    print("=" * 60)

    for word in WORDS:
        result = abbreviate(word)
        print(f"  {word!r:<26} -> {result.text:<10} ({result.length} clusters, {result.elided} elided)")
