import cbremap.mutate as mutate

barcode = "ACGTACGTACGT"


def test_substitutions():
    subs = list(mutate.substitutions(barcode))
    assert len(subs) == 12 * 3
    assert len(subs) == mutate.n_substitutions(12)
    assert len(set([seq for seq, pos in subs])) == len(subs)

    for seq, pos in subs:
        assert len(seq) == len(barcode)
        diff = [i for i in range(len(barcode)) if seq[i] != barcode[i]]
        assert diff == [pos]


def test_substitution_order():
    subs = list(mutate.substitutions("AAAA"))
    assert subs[:3] == [("CAAA", 0), ("GAAA", 0), ("TAAA", 0)]
    assert subs[-1] == ("AAAT", 3)


def test_deletions():
    dels = list(mutate.deletions(barcode))
    assert len(dels) == 11 * 4
    assert len(dels) == mutate.n_deletions(12)

    # first base lost, first base after the barcode shifted in
    assert dels[:4] == [
        ("CGTACGTACGTA", 0),
        ("CGTACGTACGTC", 0),
        ("CGTACGTACGTG", 0),
        ("CGTACGTACGTT", 0),
    ]
    # the last position is never deleted
    assert set([pos for seq, pos in dels]) == set(range(11))

    for seq, pos in dels:
        assert len(seq) == len(barcode)
        assert seq[:-1] == barcode[:pos] + barcode[pos + 1:]


def test_homopolymer_deletions():
    # deleting any base of a homopolymer yields the same candidates
    dels = list(mutate.deletions("AAAAAA"))
    assert len(dels) == 5 * 4
    assert set([seq for seq, pos in dels]) == set(["AAAAAA", "AAAAAC", "AAAAAG", "AAAAAT"])


def test_restartable():
    assert list(mutate.hull(barcode)) == list(mutate.hull(barcode))
    assert len(list(mutate.hull(barcode))) == 36 + 44


def test_custom_nucleotides():
    subs = list(mutate.substitutions("AB", nts="AB"))
    assert subs == [("BB", 0), ("AA", 1)]

    dels = list(mutate.deletions("AB", nts="AB"))
    assert dels == [("BA", 0), ("BB", 0)]
