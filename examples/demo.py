"""FuzzBridge -- Quick demo.

Run: python examples/demo.py
"""


def main():
    from fuzzbridge import (
        apply_opcodes,
        distance,
        extract_best_match,
        extract_matches,
        get_editops,
        get_opcodes,
        process_string,
    )

    # 1. Normalize
    print("=" * 60)
    print("1. NORMALIZE")
    print("=" * 60)
    raw = "  Éxâmple!  "
    print(f"  {raw!r} -> {process_string(raw)!r}")
    print(f"  {raw!r} -> {process_string(raw, asciify=True)!r} (asciify)")
    print()

    # 2. Rank candidates
    print("=" * 60)
    print("2. RANK CANDIDATES")
    print("=" * 60)
    choices = ["wuzzy fuzzy", "fuzzy wuzzy was a bear", "yellow submarine"]
    for match in extract_matches("fuzzy wuzzy", choices, limit=2):
        print(f"  {match.score:6.2f}  {match.text}")
    best = extract_best_match("zurich", ["Zürich", "Zug", "Bern"], asciify=True)
    print(f"  Best for 'zurich': {best.text} ({best.score:.1f})")
    print()

    # 3. Edit scripts
    print("=" * 60)
    print("3. EDIT SCRIPTS")
    print("=" * 60)
    s1, s2 = "kitten", "sitting"
    print(f"  Levenshtein distance: {distance(s1, s2)}")
    for op in get_editops(s1, s2):
        print(f"    {op.kind.value:8s} src={op.source_position} dest={op.dest_position}")
    ops = get_opcodes(s1, s2)
    print(f"  Rebuilt from {len(ops)} opcodes: {apply_opcodes(ops, s1, s2)}")
    print()

    print("Done! Try the CLI: fuzzbridge extract 'new york' 'New York' Newark York")


if __name__ == "__main__":
    main()
